"""
# Macro-Markdown: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

DEFAULT_MACRO_DELIMITER = '^'
MACRO_IDENTIFIER_ATTRIBUTE = 'macro_identifier'
MAX_NESTED_MACRO_DEPTH = 10
PLACEHOLDER_GUID_PREFIX = 'macro_md'
