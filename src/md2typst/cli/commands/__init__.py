#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2typst/cli/commands/__init__.py
"""Subcommand dispatch for the md2typst CLI.

Anything that is not a recognised subcommand falls through to the
convert command.
"""

import logging
import sys

logger = logging.getLogger(__name__)

CONVERT_COMMAND = "convert"


def dispatch_command(args: list[str] | None = None) -> int | None:
    """Handle subcommands other than convert.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments

    Returns
    -------
    int or None
        Exit code if a subcommand was handled, None otherwise

    """
    if args is None:
        args = sys.argv[1:]

    if not args:
        return None

    if args[0] == "fonts":
        from md2typst.cli.commands.fonts import handle_fonts_command

        return handle_fonts_command(args[1:])

    return None


def strip_convert_command(args: list[str]) -> list[str]:
    """Drop an explicit leading ``convert`` so it parses like the bare form."""
    if args and args[0] == CONVERT_COMMAND:
        return args[1:]
    return args
