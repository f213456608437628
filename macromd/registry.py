"""
# Macro-Markdown: registry.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Registry of macro functions.
"""

from typing import Callable, Iterator, Mapping, Optional

from macromd.exceptions import DuplicateMacroException, UnrecognisedMacroException

Macro = Callable[..., str]


class MacroRegistry:
    """
    Object storing macro functions by identifier.

    A macro function is called as `macro(content, *arguments)`,
    where «content» is the (resolved) content of the invocation
    and «arguments» are the strings of its argument list,
    and shall return a string.
    Identifiers are unique within a registry.
    """
    _macro_from_identifier: dict[str, 'Macro']

    def __init__(self, macro_from_identifier: Optional[Mapping[str, 'Macro']] = None):
        self._macro_from_identifier = {}

        if macro_from_identifier is not None:
            for identifier, macro in macro_from_identifier.items():
                self.store_macro(identifier, macro)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._macro_from_identifier

    def __iter__(self) -> Iterator[str]:
        return iter(self._macro_from_identifier)

    def __len__(self) -> int:
        return len(self._macro_from_identifier)

    def store_macro(self, identifier: str, macro: 'Macro'):
        if identifier in self._macro_from_identifier:
            raise DuplicateMacroException(identifier)

        self._macro_from_identifier[identifier] = macro

    def load_macro(self, identifier: str) -> 'Macro':
        try:
            return self._macro_from_identifier[identifier]
        except KeyError:
            raise UnrecognisedMacroException(identifier) from None
