#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/template/__init__.py
"""Typst document templates and composition.

Each built-in style is a ``.typ`` file next to this module that defines::

    #let article(title: none, authors: (), lang: "en", toc: false, body)

Composition appends a single ``#article(...)[...]`` call carrying the
document metadata and the rendered body after the template source.

"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from md2typst.exceptions import StyleError
from md2typst.utils.escape import escape_template_string

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent


class Style(str, Enum):
    """Built-in template styles."""

    MODERN_TECH = "modern-tech"
    CLASSIC_EDITORIAL = "classic-editorial"

    @classmethod
    def from_name(cls, name: str) -> Style:
        """Look up a style by its CLI name.

        Raises
        ------
        StyleError
            If ``name`` is not a built-in style

        Examples
        --------
            >>> Style.from_name("classic-editorial")
            <Style.CLASSIC_EDITORIAL: 'classic-editorial'>

        """
        for style in cls:
            if style.value == name:
                return style
        raise StyleError(name)

    @property
    def template_path(self) -> Path:
        return TEMPLATE_DIR / f"{self.value.replace('-', '_')}.typ"

    def source(self) -> str:
        """Return the Typst source of this style's template."""
        return self.template_path.read_text(encoding="utf-8")


def format_title(title: Optional[str]) -> str:
    """Format the ``title`` argument; blank titles become ``none``."""
    if title is None or not title.strip():
        return "none"
    return f'"{escape_template_string(title)}"'


def format_authors(authors: Sequence[str]) -> str:
    """Format the ``authors`` argument as a Typst array.

    Examples
    --------
        >>> format_authors([])
        '()'
        >>> format_authors(["Ada"])
        '("Ada",)'
        >>> format_authors(["Ada", "Grace"])
        '("Ada", "Grace")'

    """
    if not authors:
        return "()"
    formatted = ", ".join(f'"{escape_template_string(author)}"' for author in authors)
    # a one-element array needs the trailing comma
    if len(authors) == 1:
        return f"({formatted},)"
    return f"({formatted})"


def compose_document_with_custom(
    template: str,
    title: Optional[str],
    authors: Sequence[str],
    lang: str,
    toc: bool,
    body: str,
) -> str:
    """Compose a full Typst document from template source and a body.

    Parameters
    ----------
    template : str
        Typst source defining ``article``
    title : str or None
        Document title; blank or None renders as ``none``
    authors : sequence of str
        Author names
    lang : str
        Language code passed to the template
    toc : bool
        Whether the template should render a table of contents
    body : str
        Rendered Typst body

    Returns
    -------
    str
        Template source, a blank line, then the ``#article`` call wrapping
        the body

    """
    call = (
        f"#article(title: {format_title(title)}, authors: {format_authors(authors)}, "
        f'lang: "{escape_template_string(lang)}", toc: {"true" if toc else "false"})['
    )
    return f"{template}\n\n{call}\n{body}\n]\n"


def compose_document(
    style: Style,
    title: Optional[str],
    authors: Sequence[str],
    lang: str,
    toc: bool,
    body: str,
) -> str:
    """Compose a full Typst document using a built-in style.

    Examples
    --------
        >>> source = compose_document(Style.MODERN_TECH, "Title", ["Author"], "en", False, "body")
        >>> '#article(title: "Title", authors: ("Author",), lang: "en", toc: false)[' in source
        True

    """
    logger.debug(f"Composing document with style {style.value}")
    return compose_document_with_custom(style.source(), title, authors, lang, toc, body)


__all__ = [
    "Style",
    "compose_document",
    "compose_document_with_custom",
    "format_authors",
    "format_title",
]
