"""
# Macro-Markdown: resolvers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Resolution of placeholder markers into macro results.
"""

from macromd.exceptions import UnmatchedPlaceholderException
from macromd.placeholders import PlaceholderMaster


class PlaceholderResolver:
    """
    Object resolving placeholder markers, innermost first.

    For each marker pair `«marker»«content»«marker»`,
    «content» is resolved first (it may contain further marker pairs),
    stripped of the whitespace padding introduced when it was embedded,
    and passed as the first argument of the macro stored against «marker».
    The whole pair is then replaced by the return value of the macro.
    A macro therefore never sees markers in its content.
    """
    _placeholder_master: 'PlaceholderMaster'

    def __init__(self, placeholder_master: 'PlaceholderMaster'):
        self._placeholder_master = placeholder_master

    def resolve(self, string: str) -> str:
        while True:
            marker_match = self._placeholder_master.find_marker(string)
            if marker_match is None:
                return string

            partner_match = self._placeholder_master.find_partner_marker(string, marker_match)
            if partner_match is None:
                raise UnmatchedPlaceholderException(
                    f'error: no closing marker for placeholder `{marker_match.group()}`'
                )

            content = self.resolve(string[marker_match.end():partner_match.start()])
            content = content.strip()

            macro_call = self._placeholder_master.load_macro_call(marker_match.group())
            if macro_call is None:
                result = content
            else:
                result = macro_call.macro(content, *macro_call.arguments)

            string = string[:marker_match.start()] + result + string[partner_match.end():]
