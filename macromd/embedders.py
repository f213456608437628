"""
# Macro-Markdown: embedders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Embedding of placeholder markers in place of macro invocations.
"""

import re

from macromd.placeholders import PlaceholderMaster
from macromd.registry import MacroRegistry
from macromd.scanners import MacroScanner
from macromd.utilities import compute_line_start_index, is_whitespace_only


class TokenEmbedder:
    """
    Object replacing macro invocations with placeholder markers.

    Every invocation `«header»«content»}` is replaced by its marker(s) around
    the (recursively embedded) content, the macro call having been stored against the marker.
    Invocations are either block or inline:

    - An invocation is block if its header begins its line
      and its closing curly bracket ends its line (or the enclosing span).
      The markers and content are then separated by blank lines,
      so that the Markdown renderer treats each as a block of its own:
      ````
      «marker»

      «content»

      «marker»
      ````
    - Otherwise the invocation is inline, and the markers and content are separated by a space,
      so that the renderer keeps them in the same run of text: `«marker» «content» «marker»`.
      The space lets Markdown syntax touching the curly brackets (e.g. `{_content_}`) be recognised;
      it is removed again when the markers are resolved.
      Everything nested inside an inline invocation is inline too.

    For a macro chain `«delimiter» f g(x) {«content»}`, a marker is issued per macro,
    in declaration order on the opening side and in reverse order on the closing side.
    """
    _macro_scanner: 'MacroScanner'
    _macro_registry: 'MacroRegistry'
    _placeholder_master: 'PlaceholderMaster'

    def __init__(self, macro_scanner: 'MacroScanner', macro_registry: 'MacroRegistry',
                 placeholder_master: 'PlaceholderMaster'):
        self._macro_scanner = macro_scanner
        self._macro_registry = macro_registry
        self._placeholder_master = placeholder_master

    def embed(self, string: str) -> str:
        return self._embed_span(string, start=0, end=len(string), is_inline=False)

    def _embed_span(self, string: str, start: int, end: int, is_inline: bool) -> str:
        pieces = []
        cursor = start

        while True:
            header_match = self._macro_scanner.find_header(string, cursor, end)
            if header_match is None:
                break

            content_start, content_end = self._macro_scanner.compute_content_span(string, header_match, end)
            markers = self._issue_markers(header_match)

            is_block = (
                not is_inline
                and TokenEmbedder.begins_line(string, header_match, start)
                and TokenEmbedder.ends_line(string, content_end, end)
            )
            content = self._embed_span(string, content_start, content_end, is_inline=not is_block)

            pieces.append(string[cursor:header_match.start()])
            pieces.append(TokenEmbedder.wrap_content(content, markers, is_block))
            cursor = min(content_end + 1, end)

        pieces.append(string[cursor:end])

        return ''.join(pieces)

    def _issue_markers(self, header_match: re.Match) -> list[str]:
        markers = []
        for invocation in self._macro_scanner.extract_invocations(header_match):
            macro = self._macro_registry.load_macro(invocation.identifier)
            markers.append(self._placeholder_master.issue_marker(macro, invocation.arguments))

        return markers

    @staticmethod
    def begins_line(string: str, header_match: re.Match, start: int) -> bool:
        line_start_index = compute_line_start_index(string, header_match.start(), start)
        return is_whitespace_only(string[line_start_index:header_match.start()])

    @staticmethod
    def ends_line(string: str, content_end: int, end: int) -> bool:
        after_closing_index = content_end + 1
        return after_closing_index >= end or string[after_closing_index] == '\n'

    @staticmethod
    def wrap_content(content: str, markers: list[str], is_block: bool) -> str:
        separator = '\n\n' if is_block else ' '

        opening = ''.join(f'{marker}{separator}' for marker in markers)
        closing = ''.join(f'{separator}{marker}' for marker in reversed(markers))

        if is_block:
            return f'{opening}{content}{closing}\n'

        return f'{opening}{content}{closing}'
