"""
# Macro-Markdown: boundaries.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Whitespace normalisation around invocation boundaries,
and clean-up of what the Markdown renderer wraps around markers.
"""

import re

from macromd.idioms import build_trailing_whitespace_regex, build_wrapped_marker_regex
from macromd.scanners import MacroScanner
from macromd.utilities import compute_line_start_index, is_whitespace_only


def normalise_boundaries(markdown: str, macro_scanner: 'MacroScanner') -> str:
    """
    Normalise whitespace around invocation boundaries.

    - Whitespace before an invocation header which begins its line is removed.
    - Whitespace between the closing curly bracket of an invocation and the end of its line is removed.

    Block and inline invocations are told apart by whether they begin and end their lines,
    so incidental indentation must not get in the way.
    Whitespace anywhere else (e.g. indented code, or a hard line break after a plain `}`) is kept.
    """
    trailing_whitespace_pattern_compiled = re.compile(pattern=build_trailing_whitespace_regex(), flags=re.VERBOSE)
    removal_spans = set()
    cursor = 0

    while True:
        header_match = macro_scanner.find_header(markdown, cursor)
        if header_match is None:
            break

        line_start_index = compute_line_start_index(markdown, header_match.start())
        if is_whitespace_only(markdown[line_start_index:header_match.start()]):
            removal_spans.add((line_start_index, header_match.start()))

        closing_index = macro_scanner.find_closing_index(markdown, header_match)
        if closing_index is not None:
            trailing_whitespace_match = trailing_whitespace_pattern_compiled.match(markdown, closing_index + 1)
            if trailing_whitespace_match is not None:
                removal_spans.add(trailing_whitespace_match.span())

        cursor = header_match.end()

    pieces = []
    cursor = 0
    for removal_start, removal_end in sorted(removal_spans):
        pieces.append(markdown[cursor:removal_start])
        cursor = removal_end
    pieces.append(markdown[cursor:])

    return ''.join(pieces)


def remove_marker_wrappers(html: str, guid: str) -> str:
    """
    Remove paragraph tags wrapped around a lone marker.

    A marker on a line of its own is rendered as `<p>«marker»</p>`;
    this restores the bare «marker».
    """
    return re.sub(
        pattern=build_wrapped_marker_regex(guid),
        repl=r'\g<marker>',
        string=html,
        flags=re.VERBOSE,
    )


def remove_empty_paragraphs(html: str) -> str:
    return re.sub(pattern=r'<p> [\s]* </p>', repl='', string=html, flags=re.IGNORECASE | re.VERBOSE)
