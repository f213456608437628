"""
# Macro-Markdown: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

Markdown with macros is converted to HTML in the following stages:
1. normalise: whitespace around invocation boundaries is normalised;
2. embed: macro invocations are replaced by placeholder markers around their content;
3. render: the Markdown (markers and all) is rendered to HTML;
4. unwrap: paragraph tags around lone markers are removed;
5. resolve: marker pairs are replaced by macro results, innermost first;
6. clean: paragraphs left empty are removed;
7. identify: headings are given GitHub-style ids (if enabled).
"""

from typing import Callable, NamedTuple, Optional

from macromd.boundaries import normalise_boundaries, remove_empty_paragraphs, remove_marker_wrappers
from macromd.constants import DEFAULT_MACRO_DELIMITER, VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from macromd.embedders import TokenEmbedder
from macromd.loaders import load_macros
from macromd.placeholders import PlaceholderMaster
from macromd.registry import MacroRegistry
from macromd.renderers import add_heading_ids, render_markdown
from macromd.resolvers import PlaceholderResolver
from macromd.scanners import MacroScanner


class MacroMdOptions(NamedTuple):
    macro_delimiter: str = DEFAULT_MACRO_DELIMITER
    use_github_style_ids: bool = False
    use_syntax_highlighting: bool = False


class ParseContext:
    """
    Object holding the state of a single parse.

    Each parse has its own placeholder GUID and its own store of macro calls,
    so that parses never share mutable state.
    The macro registry is only ever read.
    """
    _options: 'MacroMdOptions'
    _macro_registry: 'MacroRegistry'
    _placeholder_master: 'PlaceholderMaster'
    _macro_scanner: 'MacroScanner'
    _verbose_mode_enabled: bool

    def __init__(self, macro_registry: 'MacroRegistry', options: Optional['MacroMdOptions'] = None,
                 verbose_mode_enabled: bool = False, guid: Optional[str] = None):
        if options is None:
            options = MacroMdOptions()

        self._options = options
        self._macro_registry = macro_registry
        self._placeholder_master = PlaceholderMaster(guid)
        self._macro_scanner = MacroScanner(options.macro_delimiter)
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def options(self) -> 'MacroMdOptions':
        return self._options

    @property
    def placeholder_master(self) -> 'PlaceholderMaster':
        return self._placeholder_master

    def normalise(self, markdown: str) -> str:
        return normalise_boundaries(markdown, self._macro_scanner)

    def embed(self, markdown: str) -> str:
        token_embedder = TokenEmbedder(self._macro_scanner, self._macro_registry, self._placeholder_master)
        return token_embedder.embed(markdown)

    def render(self, markdown: str) -> str:
        return render_markdown(markdown, use_syntax_highlighting=self._options.use_syntax_highlighting)

    def unwrap(self, html: str) -> str:
        return remove_marker_wrappers(html, self._placeholder_master.guid)

    def resolve(self, html: str) -> str:
        return PlaceholderResolver(self._placeholder_master).resolve(html)

    def execute(self, markdown: str) -> str:
        string = markdown
        string = self.apply_stage('normalise', self.normalise, string)
        string = self.apply_stage('embed', self.embed, string)
        string = self.apply_stage('render', self.render, string)
        string = self.apply_stage('unwrap', self.unwrap, string)
        string = self.apply_stage('resolve', self.resolve, string)
        string = self.apply_stage('clean', remove_empty_paragraphs, string)

        if self._options.use_github_style_ids:
            string = self.apply_stage('identify', add_heading_ids, string)

        return string

    def apply_stage(self, stage_name: str, stage_function: Callable[[str], str], string: str) -> str:
        string_before = string
        string_after = stage_function(string)

        if self._verbose_mode_enabled:
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE {stage_name}')
            print(string_before)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
            print(string_after)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER {stage_name}')
            print('\n\n\n\n')

        return string_after


def parse_string(markdown: str, macro_registry: 'MacroRegistry', options: Optional['MacroMdOptions'] = None,
                 verbose_mode_enabled: bool = False) -> str:
    """
    Convert Markdown with macros to HTML.
    """
    parse_context = ParseContext(macro_registry, options, verbose_mode_enabled)
    return parse_context.execute(markdown)


def parse_file(markdown_file_name: str, macros_file_name: str, options: Optional['MacroMdOptions'] = None,
               verbose_mode_enabled: bool = False) -> str:
    """
    Convert a Markdown file with macros to HTML, using the macros defined in a Python file.
    """
    macro_registry = load_macros(macros_file_name)

    try:
        with open(markdown_file_name, 'r', encoding='utf-8') as markdown_file:
            markdown = markdown_file.read()
    except FileNotFoundError as file_not_found_error:
        error_message = f'error: markdown file `{markdown_file_name}` not found'
        raise FileNotFoundError(error_message) from file_not_found_error

    return parse_string(markdown, macro_registry, options, verbose_mode_enabled)
