"""
# Macro-Markdown: loaders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Loading of macro functions from a Python file.

A macro is any callable defined in the file with a `macro_identifier` attribute,
which is most easily set with the `macro` decorator:
````
from macromd import macro

@macro('upper')
def upper(content):
    return content.upper()
````
"""

import importlib.util
import os
from types import ModuleType
from typing import Callable

from macromd.constants import MACRO_IDENTIFIER_ATTRIBUTE
from macromd.registry import Macro, MacroRegistry


def macro(identifier: str) -> Callable[['Macro'], 'Macro']:
    """
    Decorator tagging a function as the macro for `identifier`.
    """
    def decorator(function: 'Macro') -> 'Macro':
        setattr(function, MACRO_IDENTIFIER_ATTRIBUTE, identifier)
        return function

    return decorator


def import_module_from_file(module_file_name: str) -> ModuleType:
    if not os.path.isfile(module_file_name):
        raise FileNotFoundError(f'error: macros file `{module_file_name}` not found')

    module_name = os.path.splitext(os.path.basename(module_file_name))[0]
    module_spec = importlib.util.spec_from_file_location(module_name, module_file_name)
    if module_spec is None or module_spec.loader is None:
        raise ImportError(f'error: cannot import macros file `{module_file_name}`')

    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)

    return module


def collect_macros(module: ModuleType) -> 'MacroRegistry':
    """
    Collect the tagged callables of a module into a registry.

    Callables without a `macro_identifier` attribute are ignored.
    """
    macro_registry = MacroRegistry()

    for value in vars(module).values():
        if not callable(value):
            continue

        identifier = getattr(value, MACRO_IDENTIFIER_ATTRIBUTE, None)
        if identifier is None:
            continue

        if identifier in macro_registry and macro_registry.load_macro(identifier) is value:  # aliased
            continue

        macro_registry.store_macro(identifier, value)

    return macro_registry


def load_macros(macros_file_name: str) -> 'MacroRegistry':
    return collect_macros(import_module_from_file(macros_file_name))
