#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2typst/cli/commands/fonts.py
"""Font management command for the md2typst CLI.

Typst only embeds fonts it can find, so the user font directory
(``~/.md2typst/fonts``) is where CJK and other extra fonts go. This command
shows what is installed there, either as plain paths or as a rich table.
"""

import argparse
import sys
from pathlib import Path

from md2typst.cli.builder import EXIT_DEPENDENCY_ERROR, EXIT_VALIDATION_ERROR
from md2typst.constants import DEPS_RICH
from md2typst.exceptions import DependencyError
from md2typst.fonts import list_user_font_files, user_font_dir
from md2typst.utils.decorators import requires_dependencies


def _create_fonts_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="md2typst fonts", description="Manage fonts used for PDF output.")
    subparsers = parser.add_subparsers(dest="fonts_command")
    list_parser = subparsers.add_parser("list", help=f"List font files in {user_font_dir()}")
    list_parser.add_argument("--rich", action="store_true", help="Use rich terminal output with formatting")
    return parser


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


@requires_dependencies("fonts list --rich", DEPS_RICH)
def _render_rich_fonts(font_dir: Path, fonts: list[Path]) -> None:
    """Render the font files as a table using Rich.

    Parameters
    ----------
    font_dir : Path
        Directory the fonts were found in; paths are shown relative to it
    fonts : list[Path]
        Font files to list

    """
    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"User fonts in {font_dir} ({len(fonts)} files)")
    table.add_column("Font", style="cyan", no_wrap=True)
    table.add_column("Type", style="yellow")
    table.add_column("Size", style="green", justify="right")

    for font in fonts:
        table.add_row(
            str(font.relative_to(font_dir)),
            font.suffix.lstrip(".").upper(),
            _format_size(font.stat().st_size),
        )

    Console().print(table)


def list_fonts(use_rich: bool = False) -> int:
    """Print the user font files, one per line or as a table."""
    font_dir = user_font_dir()
    fonts = list_user_font_files(font_dir)

    if not fonts:
        print(f"No fonts found in {font_dir}")
        return 0

    if use_rich:
        _render_rich_fonts(font_dir, fonts)
        return 0

    for font in fonts:
        print(font)
    return 0


def handle_fonts_command(args: list[str] | None = None) -> int:
    """Handle the ``fonts`` command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (beyond 'fonts')

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = _create_fonts_parser()
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        # argparse exits on --help or error
        return e.code if isinstance(e.code, int) else 0

    if parsed.fonts_command == "list":
        try:
            return list_fonts(use_rich=parsed.rich)
        except DependencyError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_DEPENDENCY_ERROR

    parser.print_usage(sys.stderr)
    print("Error: a fonts subcommand is required (list)", file=sys.stderr)
    return EXIT_VALIDATION_ERROR
