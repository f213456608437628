"""
# Macro-Markdown: placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Placeholder markers for macro invocations.
"""

import re
import uuid
from typing import NamedTuple, Optional

from macromd.constants import PLACEHOLDER_GUID_PREFIX
from macromd.idioms import build_marker_regex
from macromd.registry import Macro


class MacroCall(NamedTuple):
    macro: 'Macro'
    arguments: list[str]


class PlaceholderMaster:
    """
    Object issuing placeholder markers for a single parse.

    While macro invocations are being embedded, each invocation is issued a marker
    of the form `«guid»_«index»`, where «guid» is unique to the parse
    and «index» counts up from 0.
    The marker is written twice into the working text, on either side of the invocation's content,
    so that the invocation survives the Markdown renderer as plain text.
    The macro function and arguments of the invocation are stored against the marker,
    to be loaded again when the markers are resolved.

    A new PlaceholderMaster shall be used for every parse.
    """
    _guid: str
    _next_index: int
    _macro_call_from_marker: dict[str, 'MacroCall']
    _marker_pattern_compiled: re.Pattern

    def __init__(self, guid: Optional[str] = None):
        if guid is None:
            guid = PlaceholderMaster.generate_guid()

        self._guid = guid
        self._next_index = 0
        self._macro_call_from_marker = {}
        self._marker_pattern_compiled = re.compile(
            pattern=build_marker_regex(guid, capture_index=True),
            flags=re.VERBOSE,
        )

    @staticmethod
    def generate_guid() -> str:
        return f'{PLACEHOLDER_GUID_PREFIX}_{uuid.uuid4().hex}'

    @property
    def guid(self) -> str:
        return self._guid

    @property
    def macro_call_from_marker(self) -> dict[str, 'MacroCall']:
        return dict(self._macro_call_from_marker)

    def issue_marker(self, macro: 'Macro', arguments: list[str]) -> str:
        """
        Issue a fresh marker for a macro invocation.
        """
        marker = f'{self._guid}_{self._next_index}'
        self._next_index += 1
        self._macro_call_from_marker[marker] = MacroCall(macro, arguments)

        return marker

    def load_macro_call(self, marker: str) -> Optional['MacroCall']:
        return self._macro_call_from_marker.get(marker)

    def find_marker(self, string: str, start: int = 0) -> Optional[re.Match]:
        """
        Find the first marker of this parse in a string, at or after `start`.
        """
        return self._marker_pattern_compiled.search(string, start)

    def find_partner_marker(self, string: str, marker_match: re.Match) -> Optional[re.Match]:
        """
        Find the second occurrence of the marker matched by `marker_match`.

        Markers are unique per invocation and never cross,
        so the next occurrence of the same marker is its partner.
        """
        index = marker_match.group('index')
        start = marker_match.end()

        while True:
            partner_match = self.find_marker(string, start)
            if partner_match is None:
                return None

            if partner_match.group('index') == index:
                return partner_match

            start = partner_match.end()
