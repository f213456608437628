"""
# Macro-Markdown: test_registry.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `registry.py`.
"""

import unittest

from macromd.exceptions import DuplicateMacroException, UnrecognisedMacroException
from macromd.registry import MacroRegistry


def upper(content):
    return content.upper()


def lower(content):
    return content.lower()


class TestRegistry(unittest.TestCase):
    def test_macro_registry_load_macro(self):
        macro_registry = MacroRegistry({'upper': upper, 'lower': lower})

        self.assertIs(macro_registry.load_macro('upper'), upper)
        self.assertIs(macro_registry.load_macro('lower'), lower)
        self.assertIn('upper', macro_registry)
        self.assertEqual(len(macro_registry), 2)
        self.assertEqual(list(macro_registry), ['upper', 'lower'])

    def test_macro_registry_unrecognised_macro(self):
        macro_registry = MacroRegistry({'upper': upper})

        with self.assertRaises(UnrecognisedMacroException) as context:
            macro_registry.load_macro('notregistered')
        self.assertEqual(context.exception.identifier, 'notregistered')
        self.assertIsNone(context.exception.__cause__)
        self.assertTrue(context.exception.__suppress_context__)

    def test_macro_registry_duplicate_macro(self):
        macro_registry = MacroRegistry()
        macro_registry.store_macro('case', upper)

        with self.assertRaises(DuplicateMacroException) as context:
            macro_registry.store_macro('case', lower)
        self.assertEqual(context.exception.identifier, 'case')


if __name__ == '__main__':
    unittest.main()
