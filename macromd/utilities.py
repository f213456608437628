"""
# Macro-Markdown: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import Optional


def compute_github_style_id(heading_text: str) -> str:
    """
    Compute a GitHub-style `id` for a heading.

    Runs of non-word characters become a single hyphen,
    and hyphens at either end are removed.
    For example, `Conjunction (AND)` becomes `conjunction-and`.
    """
    heading_id = re.sub(pattern=r'[\W]+', repl='-', string=heading_text.lower())

    return heading_id.strip('-')


def compute_line_start_index(string: str, index: int, start: int = 0) -> int:
    """
    Compute the index at which the line containing `string[index]` begins,
    not looking back further than `start`.
    """
    newline_index = string.rfind('\n', start, index)
    if newline_index < 0:
        return start

    return newline_index + 1


def is_whitespace_only(string: str) -> bool:
    return bool(re.fullmatch(pattern=r'[\s]*', string=string))


def none_to_empty_string(string: Optional[str]) -> str:
    if string is None:
        return ''

    return string


def split_arguments(argument_list: Optional[str]) -> list[str]:
    """
    Split a raw argument list into arguments.

    Arguments are separated by commas (there is no escaping)
    and have surrounding whitespace removed.
    An absent or whitespace-only argument list has no arguments.
    """
    argument_list = none_to_empty_string(argument_list)
    if is_whitespace_only(argument_list):
        return []

    return [argument.strip() for argument in argument_list.split(',')]
