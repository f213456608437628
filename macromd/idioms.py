"""
# Macro-Markdown: idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common idioms.

A macro invocation is of the form
````
«delimiter» «identifier» «identifier»(«arguments») [...] {«content»}
````
where the header (everything up to and including the opening curly bracket)
lies on a single line.
"""

import re
from typing import Optional


def build_identifier_regex(capture_group_name: Optional[str] = None) -> str:
    identifier_regex = r'[^\s(){},]+'

    if capture_group_name is None:
        return identifier_regex

    return f'(?P<{capture_group_name}> {identifier_regex} )'


def build_argument_list_regex(capture_group_name: Optional[str] = None) -> str:
    if capture_group_name is None:
        argument_list_regex = r'[^()\n]*'
    else:
        argument_list_regex = fr'(?P<{capture_group_name}> [^()\n]* )'

    return fr'(?: [^\S\n]* \( {argument_list_regex} \) )?'


def build_macro_header_regex(macro_delimiter: str) -> str:
    """
    Build the regex for a macro invocation header.

    Identifiers in a chain are separated by (non-newline) whitespace,
    and each may be followed by a parenthesised argument list.
    The delimiter is taken literally.
    """
    delimiter_regex = re.escape(macro_delimiter)
    call_regex = build_identifier_regex() + build_argument_list_regex()

    return (
        f'{delimiter_regex} [^\\S\\n]*'
        f'(?P<macro_chain> {call_regex} (?: [^\\S\\n]+ {call_regex} )* )'
        r'[^\S\n]* \{'
    )


def build_macro_call_regex() -> str:
    return (
        build_identifier_regex(capture_group_name='identifier')
        + build_argument_list_regex(capture_group_name='argument_list')
    )


def build_marker_regex(guid: str, capture_index: bool = False) -> str:
    if capture_index:
        index_regex = '(?P<index> [0-9]+ )'
    else:
        index_regex = '[0-9]+'

    return f'{re.escape(guid)}_{index_regex} (?! [0-9] )'


def build_wrapped_marker_regex(guid: str) -> str:
    marker_regex = build_marker_regex(guid)

    return fr'<p> [\s]* (?P<marker> {marker_regex} ) [\s]* </p>'


def build_trailing_whitespace_regex() -> str:
    return r'[^\S\n]+ (?= \n | \Z )'
