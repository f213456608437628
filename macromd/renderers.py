"""
# Macro-Markdown: renderers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Markdown rendering.

Rendering is CommonMark by markdown-it-py.
The macro machinery relies on one convention of the renderer:
a lone marker on its own line (between blank lines) is rendered as `<p>«marker»</p>`.
"""

import html
import re

from markdown_it import MarkdownIt
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from macromd.utilities import compute_github_style_id


def highlight_code(code: str, language_name: str, language_attributes: str) -> str:
    """
    Highlight the code of a fenced code block.

    Unknown (or unspecified) languages are treated as plain text.
    The result is bare HTML spans; markdown-it-py supplies the `<pre><code>` around it.
    """
    try:
        lexer = get_lexer_by_name(language_name)
    except ClassNotFound:
        lexer = TextLexer()

    return highlight(code, lexer, HtmlFormatter(nowrap=True))


def build_markdown_renderer(use_syntax_highlighting: bool = False) -> MarkdownIt:
    if use_syntax_highlighting:
        return MarkdownIt('commonmark', {'highlight': highlight_code})

    return MarkdownIt('commonmark')


def add_heading_ids(html_string: str) -> str:
    """
    Give GitHub-style ids to headings which have no attributes.

    The id is computed from the text of the heading with tags removed,
    so this is to be done once macros have been resolved.
    Repeated ids get a suffix `-1`, `-2`, etc.
    """
    used_heading_ids = set()

    def heading_substitute_function(heading_match: re.Match) -> str:
        level = heading_match.group('level')
        content = heading_match.group('content')
        heading_text = html.unescape(re.sub(pattern=r'<[^>]*>', repl='', string=content))
        base_heading_id = compute_github_style_id(heading_text)

        heading_id = base_heading_id
        suffix = 0
        while heading_id in used_heading_ids:
            suffix += 1
            heading_id = f'{base_heading_id}-{suffix}'
        used_heading_ids.add(heading_id)

        return f'<h{level} id="{heading_id}">{content}</h{level}>'

    return re.sub(
        pattern=r'<h (?P<level> [1-6] ) > (?P<content> [\s\S]*? ) </h (?P=level) >',
        repl=heading_substitute_function,
        string=html_string,
        flags=re.VERBOSE,
    )


def render_markdown(markdown: str, use_github_style_ids: bool = False, use_syntax_highlighting: bool = False) -> str:
    """
    Render Markdown to HTML.
    """
    html_string = build_markdown_renderer(use_syntax_highlighting).render(markdown)

    if use_github_style_ids:
        html_string = add_heading_ids(html_string)

    return html_string
