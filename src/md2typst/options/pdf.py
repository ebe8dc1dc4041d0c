#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options for the one-shot Markdown to PDF pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from md2typst.constants import DEFAULT_STYLE
from md2typst.options.convert import ConvertOptions


@dataclass(frozen=True)
class PdfOptions(ConvertOptions):
    """Template selection plus metadata overrides for PDF output.

    Parameters
    ----------
    style : str, default "modern-tech"
        Built-in template style ("modern-tech" or "classic-editorial").
    custom_template : str or Path or None, default None
        Path to a Typst template file defining ``article``; takes precedence
        over ``style``.

    """

    style: str = field(
        default=DEFAULT_STYLE,
        metadata={
            "help": "Built-in template style",
            "choices": ["modern-tech", "classic-editorial"],
            "importance": "core",
        },
    )
    custom_template: Optional[Union[str, Path]] = field(
        default=None,
        metadata={"help": "Path to a custom Typst template (overrides style)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate template selection.

        Raises
        ------
        ValueError
            If ``style`` is empty.

        """
        super().__post_init__()
        if not self.style or not self.style.strip():
            raise ValueError("style must be a non-empty string")

    def convert_options(self) -> ConvertOptions:
        """Return just the metadata overrides."""
        return ConvertOptions(
            title_override=self.title_override,
            author_override=self.author_override,
            lang_override=self.lang_override,
            force_toc=self.force_toc,
        )
