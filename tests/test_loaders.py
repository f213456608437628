"""
# Macro-Markdown: test_loaders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `loaders.py`.
"""

import os
import tempfile
import unittest

from macromd.constants import MACRO_IDENTIFIER_ATTRIBUTE
from macromd.exceptions import DuplicateMacroException
from macromd.loaders import load_macros, macro

MACROS_SOURCE = '''\
from macromd import macro


@macro('upper')
def upper(content):
    return content.upper()


def link(content, href):
    return f'<a href="{href}">{content}</a>'


link.macro_identifier = 'link'


def helper(content):
    return content


shout = upper
NOT_CALLABLE = 'upper'
'''

DUPLICATE_MACROS_SOURCE = '''\
from macromd import macro


@macro('upper')
def upper(content):
    return content.upper()


@macro('upper')
def also_upper(content):
    return content.upper()
'''


class TestLoaders(unittest.TestCase):
    def test_macro(self):
        @macro('test')
        def test_macro(content):
            return content

        self.assertEqual(getattr(test_macro, MACRO_IDENTIFIER_ATTRIBUTE), 'test')
        self.assertEqual(test_macro('content'), 'content')

    def test_load_macros(self):
        with tempfile.TemporaryDirectory() as directory_name:
            macros_file_name = os.path.join(directory_name, 'macros.py')
            with open(macros_file_name, 'w', encoding='utf-8') as macros_file:
                macros_file.write(MACROS_SOURCE)

            macro_registry = load_macros(macros_file_name)

        self.assertEqual(sorted(macro_registry), ['link', 'upper'])
        self.assertEqual(macro_registry.load_macro('upper')('content'), 'CONTENT')
        self.assertEqual(
            macro_registry.load_macro('link')('content', 'https://example.com'),
            '<a href="https://example.com">content</a>',
        )

    def test_load_macros_duplicate(self):
        with tempfile.TemporaryDirectory() as directory_name:
            macros_file_name = os.path.join(directory_name, 'macros.py')
            with open(macros_file_name, 'w', encoding='utf-8') as macros_file:
                macros_file.write(DUPLICATE_MACROS_SOURCE)

            self.assertRaises(DuplicateMacroException, load_macros, macros_file_name)

    def test_load_macros_missing_file(self):
        with tempfile.TemporaryDirectory() as directory_name:
            macros_file_name = os.path.join(directory_name, 'nonexistent.py')
            self.assertRaises(FileNotFoundError, load_macros, macros_file_name)


if __name__ == '__main__':
    unittest.main()
