"""
# Macro-Markdown: test_idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `idioms.py`.
"""

import re
import unittest

from macromd.idioms import (
    build_argument_list_regex,
    build_identifier_regex,
    build_macro_header_regex,
    build_marker_regex,
    build_wrapped_marker_regex,
)


class TestIdioms(unittest.TestCase):
    def test_build_identifier_regex(self):
        self.assertEqual(build_identifier_regex(), r'[^\s(){},]+')
        self.assertEqual(build_identifier_regex(capture_group_name='identifier'), r'(?P<identifier> [^\s(){},]+ )')

    def test_build_argument_list_regex(self):
        self.assertEqual(build_argument_list_regex(), r'(?: [^\S\n]* \( [^()\n]* \) )?')
        self.assertEqual(
            build_argument_list_regex(capture_group_name='argument_list'),
            r'(?: [^\S\n]* \( (?P<argument_list> [^()\n]* ) \) )?',
        )

    def test_build_macro_header_regex(self):
        header_pattern = re.compile(build_macro_header_regex('^'), flags=re.VERBOSE)

        self.assertEqual(header_pattern.search('start ^f{content}').group(), '^f{')
        self.assertEqual(header_pattern.search('^ f g(x) {c}').group('macro_chain'), 'f g(x)')
        self.assertEqual(header_pattern.search('^f ( a1 , a2 ) {c}').group('macro_chain'), 'f ( a1 , a2 )')
        self.assertIsNone(header_pattern.search('x^2 is not a macro'))
        self.assertIsNone(header_pattern.search('^f\n{c}'))

    def test_build_macro_header_regex_escapes_delimiter(self):
        header_pattern = re.compile(build_macro_header_regex('.+'), flags=re.VERBOSE)
        self.assertIsNone(header_pattern.search('aaf{c}'))
        self.assertEqual(header_pattern.search('a .+f{c}').group(), '.+f{')

        header_pattern = re.compile(build_macro_header_regex('# '), flags=re.VERBOSE)
        self.assertEqual(header_pattern.search('# f{c}').group('macro_chain'), 'f')

    def test_build_marker_regex(self):
        marker_pattern = re.compile(build_marker_regex('GUID', capture_index=True), flags=re.VERBOSE)

        self.assertEqual(marker_pattern.search('x GUID_12 y').group('index'), '12')
        self.assertEqual([match.group() for match in marker_pattern.finditer('GUID_1 GUID_10')], ['GUID_1', 'GUID_10'])
        self.assertIsNone(marker_pattern.search('GUID_ x'))

    def test_build_wrapped_marker_regex(self):
        wrapped_marker_pattern = re.compile(build_wrapped_marker_regex('GUID'), flags=re.VERBOSE)

        self.assertEqual(wrapped_marker_pattern.search('<p>GUID_0</p>').group('marker'), 'GUID_0')
        self.assertEqual(wrapped_marker_pattern.search('<p> GUID_3\n</p>').group('marker'), 'GUID_3')
        self.assertIsNone(wrapped_marker_pattern.search('<p>GUID_0 text</p>'))


if __name__ == '__main__':
    unittest.main()
