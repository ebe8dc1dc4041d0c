#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Typst rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2typst.options.base import BaseRendererOptions


@dataclass(frozen=True)
class TypstRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Typst rendering.

    Parameters
    ----------
    toc_enabled : bool, default False
        Whether an inline ``[toc]`` marker renders as ``#outline()``. When
        False the marker is dropped from the output.

    """

    toc_enabled: bool = field(
        default=False,
        metadata={"help": "Render inline [toc] markers as an outline", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate Typst renderer options.

        Raises
        ------
        ValueError
            If ``toc_enabled`` is not a boolean.

        """
        super().__post_init__()
        if not isinstance(self.toc_enabled, bool):
            raise ValueError(f"toc_enabled must be a bool, got {type(self.toc_enabled).__name__}")
