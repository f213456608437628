"""
# Macro-Markdown: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys
from typing import Optional

from macromd._version import __version__
from macromd.constants import COMMAND_LINE_ERROR_EXIT_CODE, DEFAULT_MACRO_DELIMITER, GENERIC_ERROR_EXIT_CODE
from macromd.core import MacroMdOptions, parse_string
from macromd.exceptions import (
    DuplicateMacroException,
    TooManyNestedMacrosException,
    UnmatchedPlaceholderException,
    UnrecognisedMacroException,
)
from macromd.loaders import load_macros
from macromd.registry import MacroRegistry

DESCRIPTION = '''
    Convert Markdown with macros to HTML.
'''
MARKDOWN_FILE_NAME_HELP = '''
    name of Markdown file to be converted
'''
MACROS_FILE_NAME_HELP = '''
    name of Python file defining the macros
    (callables with a `macro_identifier` attribute)
'''
MACRO_DELIMITER_HELP = f'''
    string introducing a macro invocation (default `{DEFAULT_MACRO_DELIMITER}`)
'''
GITHUB_STYLE_IDS_HELP = '''
    give headings GitHub-style ids
'''
SYNTAX_HIGHLIGHTING_HELP = '''
    highlight fenced code blocks
'''
OUTPUT_FILE_NAME_HELP = '''
    name of HTML file to write to
    (only for a single Markdown file; defaults to the Markdown file name with extension `.html`)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every conversion stage)
'''

MACRO_MD_EXCEPTIONS = (
    DuplicateMacroException,
    TooManyNestedMacrosException,
    UnmatchedPlaceholderException,
    UnrecognisedMacroException,
)


def extract_html_file_name(markdown_file_name: str) -> str:
    """
    Extract the HTML file name for a Markdown file name.

    An extension `.md` or `.markdown` is replaced by `.html`; any other name gets `.html` appended.
    """
    markdown_file_name = os.path.normpath(markdown_file_name)
    markdown_name = re.sub(pattern=r'[.](md|markdown) \Z', repl='', string=markdown_file_name, flags=re.VERBOSE)

    return f'{markdown_name}.html'


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-m', '--macros',
        dest='macros_file_name',
        required=True,
        help=MACROS_FILE_NAME_HELP,
        metavar='macros.py',
    )
    argument_parser.add_argument(
        '-d', '--delimiter',
        dest='macro_delimiter',
        default=DEFAULT_MACRO_DELIMITER,
        help=MACRO_DELIMITER_HELP,
    )
    argument_parser.add_argument(
        '-g', '--github-ids',
        dest='use_github_style_ids',
        action='store_true',
        help=GITHUB_STYLE_IDS_HELP,
    )
    argument_parser.add_argument(
        '-s', '--highlight',
        dest='use_syntax_highlighting',
        action='store_true',
        help=SYNTAX_HIGHLIGHTING_HELP,
    )
    argument_parser.add_argument(
        '-o', '--output',
        dest='output_file_name',
        default=None,
        help=OUTPUT_FILE_NAME_HELP,
        metavar='file.html',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'markdown_file_names',
        help=MARKDOWN_FILE_NAME_HELP,
        metavar='file.md',
        nargs='+',
    )

    return argument_parser.parse_args(arguments)


def generate_html_file(markdown_file_name: str, html_file_name: str, macro_registry: 'MacroRegistry',
                       options: 'MacroMdOptions', verbose_mode_enabled: bool):
    try:
        with open(markdown_file_name, 'r', encoding='utf-8') as markdown_file:
            markdown = markdown_file.read()
    except FileNotFoundError:
        print(f'error: argument `{markdown_file_name}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    try:
        html = parse_string(markdown, macro_registry, options, verbose_mode_enabled)
    except MACRO_MD_EXCEPTIONS as macro_md_exception:
        print(f'{macro_md_exception} (in `{markdown_file_name}`)', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    try:
        with open(html_file_name, 'w', encoding='utf-8') as html_file:
            html_file.write(html)
        print(f'success: wrote to `{html_file_name}`')
    except IOError:
        print(f'error: cannot write to `{html_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    markdown_file_names = parsed_arguments.markdown_file_names
    macros_file_name = parsed_arguments.macros_file_name
    output_file_name = parsed_arguments.output_file_name
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    if output_file_name is not None and len(markdown_file_names) > 1:
        print('error: option -o (or --output) cannot be used with more than one Markdown file', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    try:
        macro_registry = load_macros(macros_file_name)
    except FileNotFoundError:
        print(f'error: argument -m (or --macros): file `{macros_file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except DuplicateMacroException as duplicate_macro_exception:
        print(f'{duplicate_macro_exception} (in `{macros_file_name}`)', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    options = MacroMdOptions(
        macro_delimiter=parsed_arguments.macro_delimiter,
        use_github_style_ids=parsed_arguments.use_github_style_ids,
        use_syntax_highlighting=parsed_arguments.use_syntax_highlighting,
    )

    for markdown_file_name in markdown_file_names:
        if output_file_name is None:
            html_file_name = extract_html_file_name(markdown_file_name)
        else:
            html_file_name = output_file_name

        generate_html_file(markdown_file_name, html_file_name, macro_registry, options, verbose_mode_enabled)


if __name__ == '__main__':
    main()
