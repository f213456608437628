"""
# Macro-Markdown: test_renderers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `renderers.py`.
"""

import unittest

from macromd.renderers import add_heading_ids, highlight_code, render_markdown


class TestRenderers(unittest.TestCase):
    def test_render_markdown_marker_conventions(self):
        self.assertEqual(render_markdown('start end'), '<p>start end</p>\n')
        self.assertEqual(
            render_markdown('start GUID_0 _content_ GUID_0 end'),
            '<p>start GUID_0 <em>content</em> GUID_0 end</p>\n',
        )
        self.assertEqual(
            render_markdown('GUID_0\n\ncontent\n\nGUID_0\n'),
            '<p>GUID_0</p>\n<p>content</p>\n<p>GUID_0</p>\n',
        )
        self.assertEqual(
            render_markdown('GUID_0\n\nGUID_1\n\ncontent\n\nGUID_1\n\nGUID_0\n'),
            '<p>GUID_0</p>\n<p>GUID_1</p>\n<p>content</p>\n<p>GUID_1</p>\n<p>GUID_0</p>\n',
        )

    def test_render_markdown_github_style_ids(self):
        self.assertEqual(render_markdown('# Test'), '<h1>Test</h1>\n')
        self.assertEqual(render_markdown('# Test', use_github_style_ids=True), '<h1 id="test">Test</h1>\n')
        self.assertIn(
            '<h1 id="conjunction-and">Conjunction (AND)</h1>',
            render_markdown('# Conjunction (AND)', use_github_style_ids=True),
        )
        self.assertEqual(
            render_markdown('## Second level', use_github_style_ids=True),
            '<h2 id="second-level">Second level</h2>\n',
        )

    def test_add_heading_ids(self):
        self.assertEqual(add_heading_ids('<p>Test</p>\n'), '<p>Test</p>\n')
        self.assertEqual(
            add_heading_ids('<h3><em>Emphatic</em> &amp; bold</h3>\n'),
            '<h3 id="emphatic-bold"><em>Emphatic</em> &amp; bold</h3>\n',
        )
        self.assertEqual(
            add_heading_ids('<h1>One</h1>\n<h2>Two</h2>\n'),
            '<h1 id="one">One</h1>\n<h2 id="two">Two</h2>\n',
        )
        self.assertEqual(
            add_heading_ids('<h1>A</h1>\n<h2>A</h2>\n<h3>A</h3>\n'),
            '<h1 id="a">A</h1>\n<h2 id="a-1">A</h2>\n<h3 id="a-2">A</h3>\n',
        )

    def test_render_markdown_syntax_highlighting(self):
        markdown = '```python\nx = 1\n```\n'

        self.assertEqual(render_markdown(markdown), '<pre><code class="language-python">x = 1\n</code></pre>\n')

        html = render_markdown(markdown, use_syntax_highlighting=True)
        self.assertTrue(html.startswith('<pre><code class="language-python">'))
        self.assertIn('<span', html)

    def test_highlight_code(self):
        self.assertIn('<span', highlight_code('x = 1\n', 'python', ''))
        self.assertIn('x &lt; 1', highlight_code('x < 1\n', 'nosuchlanguage', ''))
        self.assertIn('x &lt; 1', highlight_code('x < 1\n', '', ''))


if __name__ == '__main__':
    unittest.main()
