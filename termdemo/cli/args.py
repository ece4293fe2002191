"""
Help formatting for command parsers.
"""

import argparse


class DefaultsHelpFormatter(argparse.HelpFormatter):
    """
    Help formatter that appends each flag's default value to its help text.

    Switch-style flags and flags without a meaningful default (None, empty
    collections, suppressed) are left as they are.
    """

    def _get_help_string(self, action: argparse.Action) -> str:
        help_text = action.help or ""
        default = action.default
        if default is argparse.SUPPRESS or default is None:
            return help_text
        if isinstance(default, bool) or action.nargs == 0:
            return help_text
        if isinstance(default, (list, tuple)):
            if not default:
                return help_text
            default = ",".join(str(v) for v in default)
        return help_text + f" (default: {default})"
