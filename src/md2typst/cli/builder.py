#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2typst/cli/builder.py
"""Argument parser and exit codes for the md2typst CLI."""

from __future__ import annotations

import argparse

from md2typst import __version__
from md2typst.constants import DEFAULT_STYLE
from md2typst.exceptions import (
    DependencyError,
    FileError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2typst.template import Style

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the convert command.

    Returns
    -------
    argparse.ArgumentParser
        Parser accepting input files plus template and metadata options

    """
    parser = argparse.ArgumentParser(
        prog="md2typst",
        description="Convert Markdown to PDF through Typst.",
        epilog="Other commands: 'md2typst fonts list' shows installed user fonts.",
    )

    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="Input Markdown files. If omitted, read from stdin.",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output path. Defaults to <input>.pdf for file input; must be a directory for several inputs.",
    )

    # Template options
    template_group = parser.add_argument_group("Template options")
    template_group.add_argument(
        "--style",
        "-s",
        default=DEFAULT_STYLE,
        choices=[style.value for style in Style],
        help="Built-in template style (default: %(default)s)",
    )
    template_group.add_argument(
        "--template",
        dest="custom_template",
        type=str,
        metavar="PATH",
        help="Path to a custom Typst template file (.typ); overrides --style",
    )

    # Metadata overrides
    meta_group = parser.add_argument_group("Metadata options")
    meta_group.add_argument("--title", "-t", type=str, help="Override document title (frontmatter fallback)")
    meta_group.add_argument("--author", "-a", type=str, help="Override document author (frontmatter fallback)")
    meta_group.add_argument("--lang", type=str, help="Document language, e.g. zh or en")
    meta_group.add_argument("--toc", action="store_true", help="Force a table of contents")
    meta_group.add_argument("--no-toc", action="store_true", help="Disable the table of contents (wins over --toc)")

    # Run mode
    parser.add_argument("--watch", "-w", action="store_true", help="Watch input files and recompile on change")
    parser.add_argument(
        "--watch-debounce",
        type=float,
        default=0.5,
        metavar="SECONDS",
        help="Ignore repeated change events for the same file within this window (default: %(default)s)",
    )
    parser.add_argument(
        "--typst-only",
        action="store_true",
        help="Write the composed Typst source (.typ) instead of compiling a PDF",
    )

    # Logging
    log_group = parser.add_argument_group("Logging options")
    log_group.add_argument("--verbose", "-v", action="store_true", help="Verbose diagnostics")
    log_group.add_argument("--quiet", "-q", action="store_true", help="Suppress non-essential output")
    log_group.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Set logging level (default: %(default)s)",
    )
    log_group.add_argument("--log-file", type=str, metavar="PATH", help="Also write log messages to this file")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
