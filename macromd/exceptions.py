"""
# Macro-Markdown: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class DuplicateMacroException(Exception):
    _identifier: str

    def __init__(self, identifier: str):
        super().__init__(f'error: macro identifier `{identifier}` already registered')
        self._identifier = identifier

    @property
    def identifier(self) -> str:
        return self._identifier


class TooManyNestedMacrosException(Exception):
    _nesting_limit: int

    def __init__(self, nesting_limit: int):
        super().__init__(f'error: more than {nesting_limit} nested macros')
        self._nesting_limit = nesting_limit

    @property
    def nesting_limit(self) -> int:
        return self._nesting_limit


class UnmatchedPlaceholderException(Exception):
    pass


class UnrecognisedMacroException(Exception):
    _identifier: str

    def __init__(self, identifier: str):
        super().__init__(f'error: unrecognised macro `{identifier}`')
        self._identifier = identifier

    @property
    def identifier(self) -> str:
        return self._identifier
