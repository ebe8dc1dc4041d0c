"""Command-line interface for md2typst.

Examples
--------
Convert a file (writes ``report.pdf``)::

    $ md2typst report.md

Pick a style and override metadata::

    $ md2typst report.md -s classic-editorial -t "Quarterly Report" -a "Finance Team"

Convert several files into a directory::

    $ md2typst a.md b.md -o build/

Read from stdin (writes ``output.pdf``)::

    $ cat notes.md | md2typst

Keep the Typst source instead of compiling::

    $ md2typst report.md --typst-only

Rebuild on every save::

    $ md2typst report.md --watch

List installed user fonts::

    $ md2typst fonts list

"""

import argparse
import logging
import sys
from pathlib import Path

from md2typst.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from md2typst.cli.commands import dispatch_command, strip_convert_command
from md2typst.exceptions import Md2TypstError
from md2typst.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --quiet, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.INFO
    else:
        log_level = getattr(logging, parsed_args.log_level)

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _handle_watch_mode(parsed_args: argparse.Namespace, options) -> int:
    """Handle watch mode execution.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    options : PdfOptions
        Conversion options

    Returns
    -------
    int
        Exit code from watch mode

    """
    from md2typst.cli.watch import run_watch_mode

    return run_watch_mode(
        paths=[Path(path) for path in parsed_args.inputs],
        options=options,
        output=Path(parsed_args.output) if parsed_args.output else None,
        typst_only=parsed_args.typst_only,
        debounce=parsed_args.watch_debounce,
        verbose=parsed_args.verbose,
    )


def main(args: list[str] | None = None) -> int:
    """Execute the md2typst command line."""
    if args is None:
        args = sys.argv[1:]

    command_result = dispatch_command(args)
    if command_result is not None:
        return command_result

    parser = create_parser()
    parsed_args = parser.parse_args(strip_convert_command(args))

    # No input files and an interactive terminal: nothing to read
    if not parsed_args.inputs and not parsed_args.watch and sys.stdin.isatty():
        parser.print_help()
        return EXIT_SUCCESS

    _setup_logging_level(parsed_args)

    # Lazy import so that --help stays fast
    from md2typst.cli.processors import (
        InputSource,
        build_pdf_options,
        process_inputs,
        validate_output_for_inputs,
    )

    if parsed_args.watch and not parsed_args.inputs:
        print("Error: watch mode requires at least one input file", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        validate_output_for_inputs(parsed_args.output, len(parsed_args.inputs))
        options = build_pdf_options(parsed_args)
    except (Md2TypstError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        if parsed_args.watch:
            return _handle_watch_mode(parsed_args, options)

        if parsed_args.inputs:
            sources = [InputSource(path=Path(path)) for path in parsed_args.inputs]
        else:
            sources = [InputSource(text=sys.stdin.read())]

        process_inputs(sources, parsed_args, options)
    except Md2TypstError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
