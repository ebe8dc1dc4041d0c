#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document-level conversion options.

These options override metadata that would otherwise come from the
document's frontmatter or be inferred from its content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from md2typst.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class ConvertOptions(CloneFrozenMixin):
    """Metadata overrides applied when converting Markdown to Typst.

    Blank override strings count as absent.

    Parameters
    ----------
    title_override : str or None, default None
        Document title, taking precedence over frontmatter ``title``.
    author_override : str or None, default None
        Single author, replacing frontmatter ``authors`` and ``author``.
    lang_override : str or None, default None
        Document language, taking precedence over frontmatter ``lang``
        and language detection.
    force_toc : bool or None, default None
        Force the table of contents on or off regardless of frontmatter
        ``toc`` and inline ``[toc]`` markers.

    """

    title_override: Optional[str] = field(
        default=None,
        metadata={"help": "Document title (overrides frontmatter)", "importance": "core"},
    )
    author_override: Optional[str] = field(
        default=None,
        metadata={"help": "Document author (overrides frontmatter)", "importance": "core"},
    )
    lang_override: Optional[str] = field(
        default=None,
        metadata={"help": "Document language, e.g. 'en' or 'zh' (overrides frontmatter)", "importance": "core"},
    )
    force_toc: Optional[bool] = field(
        default=None,
        metadata={"help": "Force the table of contents on or off", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate override types.

        Raises
        ------
        ValueError
            If an override has the wrong type.

        """
        for name in ("title_override", "author_override", "lang_override"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a string or None, got {type(value).__name__}")
        if self.force_toc is not None and not isinstance(self.force_toc, bool):
            raise ValueError(f"force_toc must be a bool or None, got {type(self.force_toc).__name__}")
