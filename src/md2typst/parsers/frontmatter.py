#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/parsers/frontmatter.py
"""YAML frontmatter extraction.

A Markdown document may open with a ``---`` line, a YAML block and a
closing ``---`` line. The recognized keys are ``title``, ``author``,
``authors``, ``lang`` and ``toc``; anything else is kept in ``extra``.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from md2typst.constants import DEPS_FRONTMATTER
from md2typst.exceptions import FrontmatterError
from md2typst.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"
BOM = "\ufeff"


@dataclass
class FrontMatter:
    """Document metadata read from the frontmatter block.

    Parameters
    ----------
    title : str or None
        Document title
    author : str or None
        Single author
    authors : list of str
        Author list; a scalar value in the YAML is read as a one-element list
    lang : str or None
        Document language code
    toc : bool or None
        Whether the template should render a table of contents
    extra : dict
        Unrecognized keys, preserved as parsed

    """

    title: Optional[str] = None
    author: Optional[str] = None
    authors: list[str] = field(default_factory=list)
    lang: Optional[str] = None
    toc: Optional[bool] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FrontMatter:
        """Build frontmatter from a parsed YAML mapping.

        Raises
        ------
        FrontmatterError
            If ``toc`` is present but not a boolean

        """
        authors = data.get("authors")
        if authors is None:
            author_list: list[str] = []
        elif isinstance(authors, (list, tuple)):
            author_list = [str(a) for a in authors if a is not None]
        else:
            author_list = [str(authors)]

        toc = data.get("toc")
        if toc is not None and not isinstance(toc, bool):
            raise FrontmatterError(f"yaml parse error: toc must be a boolean, got {toc!r}")

        known = {"title", "author", "authors", "lang", "toc"}
        return cls(
            title=_optional_str(data.get("title")),
            author=_optional_str(data.get("author")),
            authors=author_list,
            lang=_optional_str(data.get("lang")),
            toc=toc,
            extra={k: v for k, v in data.items() if k not in known},
        )


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass
class ParsedMarkdown:
    """Markdown split into frontmatter and body."""

    frontmatter: FrontMatter
    body: str


@requires_dependencies("frontmatter", DEPS_FRONTMATTER)
def _load_yaml(block: str) -> Any:
    import yaml

    try:
        return yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"yaml parse error: {e}", original_error=e) from e


def split_frontmatter(text: str) -> ParsedMarkdown:
    """Split a Markdown document into frontmatter and body.

    Parameters
    ----------
    text : str
        Full Markdown document, optionally starting with a byte order mark

    Returns
    -------
    ParsedMarkdown
        Parsed frontmatter (defaults when absent) and the remaining body.
        When a frontmatter block is present the body is the lines after the
        closing delimiter joined by ``\\n``.

    Raises
    ------
    FrontmatterError
        If the opening ``---`` has no closing line, the YAML is invalid, or
        the YAML is not a mapping

    Examples
    --------
        >>> parsed = split_frontmatter("---\\ntitle: Demo\\n---\\n# Hello")
        >>> parsed.frontmatter.title
        'Demo'
        >>> parsed.body
        '# Hello'

    """
    normalized = text.lstrip(BOM)
    lines = normalized.splitlines()

    if not lines or lines[0].rstrip("\r") != FRONTMATTER_DELIMITER:
        return ParsedMarkdown(frontmatter=FrontMatter(), body=normalized)

    end_index = -1
    for i in range(1, len(lines)):
        if lines[i].rstrip("\r") == FRONTMATTER_DELIMITER:
            end_index = i
            break

    if end_index < 0:
        raise FrontmatterError("frontmatter must have opening and closing ---")

    block = "\n".join(lines[1:end_index])
    body = "\n".join(lines[end_index + 1 :])

    frontmatter = FrontMatter()
    if block.strip():
        data = _load_yaml(block)
        if data is not None:
            if not isinstance(data, dict):
                raise FrontmatterError(f"yaml parse error: expected a mapping, got {type(data).__name__}")
            frontmatter = FrontMatter.from_dict(data)

    logger.debug(f"Parsed frontmatter with keys: {sorted(k for k, v in vars(frontmatter).items() if v)}")
    return ParsedMarkdown(frontmatter=frontmatter, body=body)
