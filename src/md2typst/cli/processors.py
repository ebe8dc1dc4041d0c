#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2typst/cli/processors.py
"""Input processing for the md2typst CLI.

Each input (a file or the text read from stdin) is converted to Typst
source, then either compiled to PDF or written out as ``.typ`` when
``--typst-only`` is set.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from md2typst.api import markdown_to_typst_source
from md2typst.compile import compile_typst_to_pdf
from md2typst.exceptions import FileError, OutputWriteError, ValidationError
from md2typst.fonts import contains_cjk_char, user_font_dir_has_font_files
from md2typst.options.pdf import PdfOptions

logger = logging.getLogger(__name__)

STDIN_OUTPUT_NAME = "output"
PDF_SUFFIX = ".pdf"
TYPST_SUFFIX = ".typ"

CJK_FONT_WARNING = (
    "Warning: CJK characters detected but no fonts found in ~/.md2typst/fonts. "
    "Install a CJK font such as Noto Sans CJK there, or the output may show missing glyphs."
)


@dataclass
class InputSource:
    """A Markdown document to convert.

    ``path`` is None for text read from stdin, in which case ``text`` holds
    the document. File inputs are read lazily.
    """

    path: Optional[Path] = None
    text: Optional[str] = None

    @property
    def label(self) -> str:
        return str(self.path) if self.path is not None else "<stdin>"

    def read(self) -> str:
        """Return the Markdown text.

        Raises
        ------
        FileError
            If the file cannot be read or is not valid UTF-8

        """
        if self.path is None:
            return self.text or ""
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileError(f"read markdown failed: {e}", file_path=str(self.path), original_error=e) from e


class CjkFontWarner:
    """Print the missing CJK font warning at most once per run."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.warned = False
        self._has_user_fonts: Optional[bool] = None

    def check(self, markdown: str) -> None:
        if not self.enabled or self.warned:
            return
        if not contains_cjk_char(markdown):
            return
        if self._has_user_fonts is None:
            self._has_user_fonts = user_font_dir_has_font_files()
        if not self._has_user_fonts:
            print(CJK_FONT_WARNING, file=sys.stderr)
            self.warned = True


def resolve_force_toc(toc: bool, no_toc: bool) -> Optional[bool]:
    """Map the ``--toc``/``--no-toc`` flags to a TOC override; ``--no-toc`` wins."""
    if no_toc:
        return False
    if toc:
        return True
    return None


def build_pdf_options(parsed_args: argparse.Namespace) -> PdfOptions:
    """Build conversion options from parsed CLI arguments."""
    return PdfOptions(
        title_override=parsed_args.title,
        author_override=parsed_args.author,
        lang_override=parsed_args.lang,
        force_toc=resolve_force_toc(parsed_args.toc, parsed_args.no_toc),
        style=parsed_args.style,
        custom_template=parsed_args.custom_template,
    )


def validate_output_for_inputs(output: Optional[str], input_count: int) -> None:
    """Reject a file-like ``--output`` when converting several inputs.

    Raises
    ------
    ValidationError
        If several inputs are given and ``output`` has a file suffix

    """
    if input_count > 1 and output and Path(output).suffix:
        raise ValidationError(
            "multiple input files require output directory path", parameter_name="output", parameter_value=output
        )


def resolve_output_path(
    input_path: Optional[Path],
    output: Optional[Path],
    multiple_inputs: bool,
    suffix: str = PDF_SUFFIX,
) -> Path:
    """Work out where a converted input is written.

    Parameters
    ----------
    input_path : Path or None
        Source file, or None for stdin
    output : Path or None
        The ``--output`` argument
    multiple_inputs : bool
        Whether several inputs are being converted; ``output`` is then a
        directory
    suffix : str, default ".pdf"
        Extension of the produced file

    Returns
    -------
    Path
        Output file path

    Examples
    --------
        >>> resolve_output_path(Path("notes.md"), None, False)
        PosixPath('notes.pdf')
        >>> resolve_output_path(Path("a/notes.md"), Path("out"), True)
        PosixPath('out/notes.pdf')

    """
    if output is not None:
        if multiple_inputs and input_path is not None:
            return (output / input_path.name).with_suffix(suffix)
        return output
    if input_path is not None:
        return input_path.with_suffix(suffix)
    return Path(STDIN_OUTPUT_NAME + suffix)


def write_typst_source(source: str, output_path: Path) -> None:
    """Write composed Typst source to disk, creating parent directories.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(source, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(output_path), message=f"I/O error: {e}", original_error=e) from e


def convert_input(
    source: InputSource,
    options: PdfOptions,
    output: Optional[Path] = None,
    multiple_inputs: bool = False,
    typst_only: bool = False,
    warner: Optional[CjkFontWarner] = None,
) -> Path:
    """Convert one input and write the result.

    Parameters
    ----------
    source : InputSource
        Document to convert
    options : PdfOptions
        Template selection and metadata overrides
    output : Path or None, default None
        The ``--output`` argument
    multiple_inputs : bool, default False
        Whether ``output`` names a directory
    typst_only : bool, default False
        Write ``.typ`` source instead of compiling a PDF
    warner : CjkFontWarner or None, default None
        Missing-font warning state shared across inputs

    Returns
    -------
    Path
        The written file

    """
    markdown = source.read()
    if warner is not None:
        warner.check(markdown)

    typst_source = markdown_to_typst_source(markdown, options)

    suffix = TYPST_SUFFIX if typst_only else PDF_SUFFIX
    output_path = resolve_output_path(source.path, output, multiple_inputs, suffix)

    if typst_only:
        write_typst_source(typst_source, output_path)
        size = len(typst_source.encode("utf-8"))
    else:
        size = len(compile_typst_to_pdf(typst_source, output_path))

    logger.info(f"Converted {source.label} -> {output_path} ({size} bytes)")
    return output_path


def process_inputs(
    sources: List[InputSource],
    parsed_args: argparse.Namespace,
    options: PdfOptions,
) -> None:
    """Convert every input in order, stopping at the first failure.

    Raises
    ------
    Md2TypstError
        Whatever the failing conversion raised

    """
    output = Path(parsed_args.output) if parsed_args.output else None
    multiple_inputs = len(sources) > 1
    warner = CjkFontWarner(enabled=not parsed_args.quiet)

    for source in sources:
        output_path = convert_input(
            source,
            options,
            output=output,
            multiple_inputs=multiple_inputs,
            typst_only=parsed_args.typst_only,
            warner=warner,
        )
        if parsed_args.verbose and not parsed_args.quiet:
            print(f"written {output_path} ({output_path.stat().st_size} bytes)")
