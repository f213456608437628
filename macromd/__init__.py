"""
# Macro-Markdown: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.
"""

from macromd._version import __version__
from macromd.core import MacroMdOptions, parse_file, parse_string
from macromd.loaders import load_macros, macro
from macromd.registry import MacroRegistry

__all__ = [
    '__version__',
    'MacroMdOptions',
    'MacroRegistry',
    'load_macros',
    'macro',
    'parse_file',
    'parse_string',
]
