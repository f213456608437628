"""
# Macro-Markdown: scanners.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Location of macro invocation headers and of the content they apply to.
"""

import re
import warnings
from typing import NamedTuple, Optional

from macromd.constants import DEFAULT_MACRO_DELIMITER, MAX_NESTED_MACRO_DEPTH
from macromd.exceptions import TooManyNestedMacrosException
from macromd.idioms import build_macro_call_regex, build_macro_header_regex
from macromd.utilities import split_arguments


class MacroInvocation(NamedTuple):
    """
    A single macro call parsed from an invocation header.

    `start` and `end` are the offsets of the whole header match,
    which is shared by every invocation in a macro chain.
    """
    identifier: str
    argument_list: Optional[str]
    start: int
    end: int

    @property
    def arguments(self) -> list[str]:
        return split_arguments(self.argument_list)


class MacroScanner:
    """
    Object locating macro invocations for a given delimiter.

    ## `find_header`

    Finds the next invocation header,
    `«delimiter» «identifier»(«arguments») [...] {`, within a span.

    ## `find_closing_index` and `compute_content_span`

    Find the content of an invocation, i.e. everything between the opening curly bracket
    of its header and the matching closing curly bracket.
    Nested invocations are skipped over by counting how many are open,
    so that the closing bracket of a nested invocation is not mistaken for that of the outer one.
    Curly brackets which do not belong to an invocation header are not counted.
    """
    _nesting_limit: int
    _header_pattern_compiled: re.Pattern
    _call_pattern_compiled: re.Pattern

    def __init__(self, macro_delimiter: str = DEFAULT_MACRO_DELIMITER, nesting_limit: int = MAX_NESTED_MACRO_DEPTH):
        self._nesting_limit = nesting_limit
        self._header_pattern_compiled = re.compile(
            pattern=build_macro_header_regex(macro_delimiter),
            flags=re.VERBOSE,
        )
        self._call_pattern_compiled = re.compile(
            pattern=build_macro_call_regex(),
            flags=re.VERBOSE,
        )

    def find_header(self, string: str, start: int = 0, end: Optional[int] = None) -> Optional[re.Match]:
        if end is None:
            end = len(string)

        return self._header_pattern_compiled.search(string, start, end)

    def extract_invocations(self, header_match: re.Match) -> list['MacroInvocation']:
        """
        Extract the invocations of a header, in declaration order.
        """
        return [
            MacroInvocation(
                identifier=call_match.group('identifier'),
                argument_list=call_match.group('argument_list'),
                start=header_match.start(),
                end=header_match.end(),
            )
            for call_match in self._call_pattern_compiled.finditer(header_match.group('macro_chain'))
        ]

    def find_closing_index(self, string: str, header_match: re.Match, end: Optional[int] = None) -> Optional[int]:
        """
        Find the index of the closing curly bracket matching an invocation header,
        or None if the span runs out first.
        """
        if end is None:
            end = len(string)

        cursor = header_match.end()
        open_count = 1

        while True:
            closing_index = string.find('}', cursor, end)
            if closing_index < 0:
                return None

            nested_header_match = self.find_header(string, cursor, closing_index)
            if nested_header_match is not None:
                open_count += 1
                if open_count > self._nesting_limit:
                    raise TooManyNestedMacrosException(self._nesting_limit)

                cursor = nested_header_match.end()
                continue

            open_count -= 1
            if open_count == 0:
                return closing_index

            cursor = closing_index + 1

    def compute_content_span(self, string: str, header_match: re.Match, end: Optional[int] = None) -> tuple[int, int]:
        """
        Compute the (start, end) offsets of the content of an invocation.

        The content ends at the index of the matching closing curly bracket.
        If the closing bracket is missing, the content runs to the end of the span.
        """
        if end is None:
            end = len(string)

        closing_index = self.find_closing_index(string, header_match, end)
        if closing_index is None:
            warnings.warn(
                f'warning: no closing bracket for macro header `{header_match.group()}`; '
                f'content taken to run to the end of the enclosing span'
            )
            return header_match.end(), end

        return header_match.end(), closing_index
