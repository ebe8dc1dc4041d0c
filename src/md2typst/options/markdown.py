#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

Every extension the parser understands can be switched off individually;
all of them are enabled by default.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2typst.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_superscript : bool, default True
        Whether to parse superscript syntax (^text^).
    parse_subscript : bool, default True
        Whether to parse subscript syntax (~text~).
    parse_underline : bool, default True
        Whether to read ``__text__`` as underline rather than strong.
    parse_autolinks : bool, default True
        Whether to turn bare URLs into links.
    parse_math : bool, default True
        Whether to parse inline ($...$) and block ($$...$$) math.
    parse_math_code_blocks : bool, default True
        Whether fenced code blocks tagged ``math`` become display math.
    parse_spoilers : bool, default True
        Whether to parse spoiler syntax (>!text!<).
    parse_definition_lists : bool, default True
        Whether to parse definition lists (term followed by ``: details``).
    parse_alerts : bool, default True
        Whether block quotes opening with ``[!NOTE]`` and friends become alerts.
    parse_multiline_quotes : bool, default True
        Whether ``>>>`` fenced blocks become block quotes.
    parse_wikilinks : bool, default True
        Whether to parse ``[[Page]]`` and ``[[Page|label]]`` links.

    """

    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=True,
        metadata={"help": "Parse footnote references and definitions", "importance": "core"},
    )
    parse_superscript: bool = field(
        default=True,
        metadata={"help": "Parse superscript syntax (^text^)", "importance": "advanced"},
    )
    parse_subscript: bool = field(
        default=True,
        metadata={"help": "Parse subscript syntax (~text~)", "importance": "advanced"},
    )
    parse_underline: bool = field(
        default=True,
        metadata={"help": "Read __text__ as underline rather than strong", "importance": "advanced"},
    )
    parse_autolinks: bool = field(
        default=True,
        metadata={"help": "Turn bare URLs into links", "importance": "advanced"},
    )
    parse_math: bool = field(
        default=True,
        metadata={"help": "Parse inline and block math ($...$ and $$...$$)", "importance": "core"},
    )
    parse_math_code_blocks: bool = field(
        default=True,
        metadata={"help": "Treat ```math fenced blocks as display math", "importance": "advanced"},
    )
    parse_spoilers: bool = field(
        default=True,
        metadata={"help": "Parse spoiler syntax (>!text!<)", "importance": "advanced"},
    )
    parse_definition_lists: bool = field(
        default=True,
        metadata={"help": "Parse definition lists (term : definition)", "importance": "advanced"},
    )
    parse_alerts: bool = field(
        default=True,
        metadata={"help": "Parse GitHub-style alerts (> [!NOTE])", "importance": "advanced"},
    )
    parse_multiline_quotes: bool = field(
        default=True,
        metadata={"help": "Parse >>> fenced multi-line block quotes", "importance": "advanced"},
    )
    parse_wikilinks: bool = field(
        default=True,
        metadata={"help": "Parse [[wiki links]]", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
