#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/compile.py
"""Typst to PDF compilation.

Compilation goes through the ``typst`` Python bindings, which embed the
Typst compiler. The source is written to a scratch directory so that the
compiler has a real root to resolve relative paths against.

"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Optional, Union

from md2typst.constants import DEPS_COMPILE
from md2typst.exceptions import CompileError, OutputWriteError
from md2typst.fonts import discover_font_paths
from md2typst.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

MAIN_SOURCE_NAME = "main.typ"


@requires_dependencies("compile", DEPS_COMPILE)
def compile_typst_to_pdf(source: str, output_path: Optional[Union[str, Path]] = None) -> bytes:
    """Compile Typst source to PDF bytes.

    Parameters
    ----------
    source : str
        Complete Typst document (template plus ``#article`` call)
    output_path : str, Path or None, default None
        When given, the PDF is also written here; missing parent
        directories are created

    Returns
    -------
    bytes
        The PDF document

    Raises
    ------
    CompileError
        If the Typst compiler reports errors
    OutputWriteError
        If the PDF cannot be written to ``output_path``
    DependencyError
        If the ``typst`` package is not installed

    """
    import typst

    with tempfile.TemporaryDirectory(prefix="md2typst_") as tmp:
        main_path = Path(tmp) / MAIN_SOURCE_NAME
        main_path.write_text(source, encoding="utf-8")

        try:
            with debug_timer(logger, "Compiling PDF"):
                pdf_bytes = typst.compile(str(main_path), font_paths=list(discover_font_paths()))
        except Exception as e:
            raise CompileError(str(e).strip(), original_error=e) from e

    if not isinstance(pdf_bytes, bytes):
        raise CompileError(f"compiler returned {type(pdf_bytes).__name__} instead of PDF bytes")

    if output_path is not None:
        write_pdf(pdf_bytes, output_path)

    return pdf_bytes


def write_pdf(pdf_bytes: bytes, output_path: Union[str, Path]) -> None:
    """Write PDF bytes to disk, creating parent directories.

    Raises
    ------
    OutputWriteError
        If the directory or file cannot be written

    """
    path = Path(output_path)
    try:
        if path.parent != Path(""):
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pdf_bytes)
    except OSError as e:
        raise OutputWriteError(str(path), message=f"I/O error: {e}", original_error=e) from e

    logger.debug(f"Wrote {len(pdf_bytes)} bytes to {path}")
