#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/parsers/markdown.py
"""Markdown to AST converter.

This module turns Markdown text into the md2typst AST using mistune. The
parser runs without a renderer so that mistune hands back its token stream,
which is then mapped node by node onto :mod:`md2typst.ast.nodes`.

Besides the stock mistune plugins, a few small plugins are defined here:
GitHub-style alerts (``> [!NOTE]``), ``>>>`` fenced multi-line quotes,
``[[wiki links]]``, ``__underline__`` and pipe tables whose body rows may
be shorter or longer than the header.

"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Match, Optional

from md2typst.ast import (
    Alert,
    BlockQuote,
    Code,
    CodeBlock,
    DescriptionDetails,
    DescriptionItem,
    DescriptionList,
    DescriptionTerm,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    GenericBlock,
    GenericInline,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Math,
    Node,
    Paragraph,
    SoftBreak,
    Spoiler,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    Underline,
    WikiLink,
)
from md2typst.constants import DEPS_MARKDOWN
from md2typst.exceptions import ConversionError, InvalidOptionsError
from md2typst.options.markdown import MarkdownParserOptions
from md2typst.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from mistune import Markdown
    from mistune.block_parser import BlockParser
    from mistune.core import BlockState, InlineState
    from mistune.inline_parser import InlineParser

logger = logging.getLogger(__name__)

ALERT_MARKER = re.compile(r"^\[!(NOTE|TIP|IMPORTANT|WARNING|CAUTION)\][ \t]*([^\n]*)(?:\n|$)", re.IGNORECASE)

MULTILINE_QUOTE_PATTERN = r"^ {0,3}>>>[ \t]*\n(?P<multiline_quote_text>[\s\S]*?)\n {0,3}>>>[ \t]*(?:\n|$)"

WIKILINK_PATTERN = r"\[\[(?P<wiki_target>[^\]|\n]+)(?:\|(?P<wiki_label>[^\]\n]+))?\]\]"

TABLE_PATTERN = r"^ {0,3}\|[^\n]*\|[ \t]*(?:\n|$)"
NP_TABLE_PATTERN = r"^ {0,3}\S[^\n]*\|[^\n]*(?:\n|$)"

ALIGN_CENTER = re.compile(r"^ *:-+: *$")
ALIGN_LEFT = re.compile(r"^ *:-+ *$")
ALIGN_RIGHT = re.compile(r"^ *-+: *$")
ALIGN_NONE = re.compile(r"^ *-+ *$")

UNDERLINE_PATTERN = r"__(?=[^\s_])"
UNDERLINE_END = re.compile(r"(?:(?<!\\)(?:\\\\)*\\_|[^\s_])__(?!_)")

MATH_CODE_INFO = "math"

INLINE_TOKEN_TYPES = frozenset(
    {
        "text",
        "codespan",
        "softbreak",
        "linebreak",
        "emphasis",
        "strong",
        "strikethrough",
        "superscript",
        "subscript",
        "underline",
        "inline_spoiler",
        "link",
        "image",
        "wiki_link",
        "footnote_ref",
        "inline_math",
        "inline_html",
    }
)


# -----------------------------------------------------------------------------
# mistune plugins
# -----------------------------------------------------------------------------


def _rewrite_alert_quote(token: dict[str, Any]) -> None:
    children = token.get("children") or []
    if not children or children[0].get("type") != "paragraph":
        return

    first = children[0]
    text = first.get("text", "")
    m = ALERT_MARKER.match(text)
    if not m:
        return

    title = m.group(2).strip()
    token["type"] = "alert"
    token["attrs"] = {"kind": m.group(1).lower(), "title": title or None}

    remaining = text[m.end() :]
    if remaining.strip():
        first["text"] = remaining
    else:
        children.pop(0)


def _rewrite_alerts(tokens: list[dict[str, Any]]) -> None:
    for tok in tokens:
        if tok["type"] == "block_quote":
            _rewrite_alert_quote(tok)
        if "children" in tok:
            _rewrite_alerts(tok["children"])


def alerts_hook(md: "Markdown", state: "BlockState") -> None:
    _rewrite_alerts(state.tokens)


def alerts(md: "Markdown") -> None:
    """Mistune plugin turning ``> [!NOTE]`` style block quotes into alerts.

    The marker must open the first paragraph of the quote. Any text after
    the marker on the same line becomes a custom title.

    .. code-block:: text

        > [!WARNING] Read this first
        > The configuration format changed.

    """
    md.before_render_hooks.append(alerts_hook)


def parse_multiline_quote(block: "BlockParser", m: Match[str], state: "BlockState") -> int:
    text = m.group("multiline_quote_text")
    child = state.child_state(text + "\n")
    rules = [rule for rule in block.rules if rule != "multiline_quote"]
    block.parse(child, rules)
    state.append_token({"type": "block_quote", "children": child.tokens, "attrs": {"multiline": True}})
    return m.end()


def multiline_quotes(md: "Markdown") -> None:
    """Mistune plugin for block quotes fenced by ``>>>`` lines.

    .. code-block:: text

        >>>
        Quoted paragraph.

        - quoted list
        >>>

    """
    md.block.register("multiline_quote", MULTILINE_QUOTE_PATTERN, parse_multiline_quote, before="block_quote")


def parse_wikilink(inline: "InlineParser", m: Match[str], state: "InlineState") -> int:
    target = m.group("wiki_target").strip()
    label = m.group("wiki_label")
    children = [{"type": "text", "raw": label.strip()}] if label and label.strip() else []
    state.append_token({"type": "wiki_link", "children": children, "attrs": {"url": target}})
    return m.end()


def wikilinks(md: "Markdown") -> None:
    """Mistune plugin for ``[[Page]]`` and ``[[Page|label]]`` links."""
    md.inline.register("wiki_link", WIKILINK_PATTERN, parse_wikilink, before="link")


def parse_underline(inline: "InlineParser", m: Match[str], state: "InlineState") -> Optional[int]:
    start = m.start()
    # intraword ``__`` stays literal
    if start > 0 and state.src[start - 1].isalnum():
        return None

    pos = m.end()
    end = UNDERLINE_END.search(state.src, pos)
    if not end:
        return None

    end_pos = end.end()
    new_state = state.copy()
    new_state.src = state.src[pos : end_pos - 2]
    children = inline.render(new_state)
    state.append_token({"type": "underline", "children": children})
    return end_pos


def underline(md: "Markdown") -> None:
    """Mistune plugin reading ``__text__`` as underline instead of strong.

    Strong emphasis is still available through ``**text**``.

    """
    md.inline.register("underline", UNDERLINE_PATTERN, parse_underline, before="emphasis")


def _split_table_cells(text: str) -> list[str]:
    """Split a table row on unescaped pipes."""
    cells: list[str] = []
    start = 0
    for pos, char in enumerate(text):
        if char != "|":
            continue
        backslashes = len(text[:pos]) - len(text[:pos].rstrip("\\"))
        if backslashes % 2:
            continue
        cells.append(text[start:pos].strip())
        start = pos + 1
    cells.append(text[start:].strip())
    return cells


def _strip_pipe_row(line: str) -> Optional[str]:
    text = line.rstrip("\n").strip(" \t")
    if not text.startswith("|") or not text.endswith("|") or len(text) < 2:
        return None
    return text[1:-1]


def _strip_plain_row(line: str) -> Optional[str]:
    text = line.rstrip("\n").rstrip(" \t")
    if not text or "|" not in text:
        return None
    return text


def _line_at(src: str, pos: int) -> str:
    end = src.find("\n", pos)
    return src[pos:] if end == -1 else src[pos : end + 1]


def _table_alignments(header: str, delimiter: str) -> Optional[list[Optional[str]]]:
    """Read column alignments from the delimiter row.

    Returns None unless the delimiter row is well formed and has exactly as
    many cells as the header row.

    """
    raw = _split_table_cells(delimiter)
    if len(raw) != len(_split_table_cells(header)):
        return None

    aligns: list[Optional[str]] = []
    for cell in raw:
        if ALIGN_CENTER.match(cell):
            aligns.append("center")
        elif ALIGN_LEFT.match(cell):
            aligns.append("left")
        elif ALIGN_RIGHT.match(cell):
            aligns.append("right")
        elif ALIGN_NONE.match(cell):
            aligns.append(None)
        else:
            return None
    return aligns


def _table_row(text: str, aligns: list[Optional[str]], head: bool = False) -> dict[str, Any]:
    cells = [
        {
            "type": "table_cell",
            "text": cell,
            "attrs": {"align": aligns[i] if i < len(aligns) else None, "head": head},
        }
        for i, cell in enumerate(_split_table_cells(text))
    ]
    return {"type": "table_row", "children": cells}


def _parse_table_rows(m: Match[str], state: "BlockState", strip_row: Any) -> Optional[int]:
    header = strip_row(m.group(0))
    if header is None:
        return None

    pos = m.end()
    delimiter_line = _line_at(state.src, pos)
    delimiter = strip_row(delimiter_line)
    if delimiter is None:
        return None

    aligns = _table_alignments(header, delimiter)
    if aligns is None:
        return None
    pos += len(delimiter_line)

    head = _table_row(header, aligns, head=True)
    rows: list[dict[str, Any]] = []
    while pos < state.cursor_max:
        line = _line_at(state.src, pos)
        text = strip_row(line)
        if text is None:
            break
        # body rows keep their own width; the renderer pads short ones
        rows.append(_table_row(text, aligns))
        pos += len(line)

    children = [{"type": "table_head", "children": head["children"]}, {"type": "table_body", "children": rows}]
    state.append_token({"type": "table", "children": children})
    return pos


def parse_table(block: "BlockParser", m: Match[str], state: "BlockState") -> Optional[int]:
    return _parse_table_rows(m, state, _strip_pipe_row)


def parse_nptable(block: "BlockParser", m: Match[str], state: "BlockState") -> Optional[int]:
    return _parse_table_rows(m, state, _strip_plain_row)


def tables(md: "Markdown") -> None:
    """Mistune plugin for GFM pipe tables that tolerates ragged rows.

    Only the header and delimiter rows must agree on the column count. Body
    rows with fewer or more cells are kept as written.

    .. code-block:: text

        | Name | Role |
        |:-----|-----:|
        | Ada  |
        | Grace | Admiral | Navy |

    """
    md.block.register("table", TABLE_PATTERN, parse_table, before="paragraph")
    md.block.register("nptable", NP_TABLE_PATTERN, parse_nptable, before="paragraph")


# -----------------------------------------------------------------------------
# Token to AST conversion
# -----------------------------------------------------------------------------


class MarkdownToAstConverter:
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    Without footnotes:

        >>> options = MarkdownParserOptions(parse_footnotes=False)
        >>> doc = MarkdownToAstConverter(options).parse(markdown_text)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                component_name="markdown",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    def _plugins(self) -> list[Any]:
        opts = self.options
        plugins: list[Any] = []
        if opts.parse_strikethrough:
            plugins.append("strikethrough")
        if opts.parse_tables:
            plugins.append(tables)
        if opts.parse_footnotes:
            plugins.append("footnotes")
        if opts.parse_task_lists:
            plugins.append("task_lists")
        if opts.parse_math:
            plugins.append("math")
        if opts.parse_underline:
            plugins.append(underline)
        if opts.parse_superscript:
            plugins.append("superscript")
        if opts.parse_subscript:
            plugins.append("subscript")
        if opts.parse_autolinks:
            plugins.append("url")
        if opts.parse_spoilers:
            plugins.append("spoiler")
        if opts.parse_definition_lists:
            plugins.append("def_list")
        if opts.parse_multiline_quotes:
            plugins.append(multiline_quotes)
        if opts.parse_alerts:
            plugins.append(alerts)
        if opts.parse_wikilinks:
            plugins.append(wikilinks)
        return plugins

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, markdown_content: str) -> Document:
        """Parse Markdown text into an AST Document.

        Parameters
        ----------
        markdown_content : str
            Markdown text (without frontmatter)

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ConversionError
            If the input is not text or mistune fails on it

        """
        if not isinstance(markdown_content, str):
            raise ConversionError(f"markdown input must be str, got {type(markdown_content).__name__}")

        import mistune

        markdown = mistune.create_markdown(plugins=self._plugins(), renderer=None)

        try:
            tokens, _state = markdown.parse(markdown_content)
        except Exception as e:
            raise ConversionError(f"failed to parse markdown: {e}", original_error=e) from e

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is None:
                continue
            if isinstance(node, list):
                nodes.extend(node)
            else:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune block token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node, list of Node, or None
            Resulting AST node(s); None for tokens that carry no content

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            return self._process_paragraph(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return self._process_block_quote(token)
        elif token_type == "alert":
            return self._process_alert(token)
        elif token_type == "block_spoiler":
            return GenericBlock(children=self._process_tokens(token.get("children", [])), metadata={"spoiler": True})
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))
        elif token_type == "block_math":
            return Paragraph(content=[Math(content=token.get("raw", ""), display=True)])
        elif token_type == "footnotes":
            return [self._process_footnote_item(child) for child in token.get("children", [])]
        elif token_type == "def_list":
            return self._process_definition_list(token)
        elif token_type == "blank_line":
            return None

        children = token.get("children")
        if isinstance(children, list) and children:
            logger.debug(f"Keeping children of unsupported markdown token: {token_type}")
            if children[0].get("type") in INLINE_TOKEN_TYPES:
                content: list[Node] = [Paragraph(content=self._process_inline_tokens(children))]
            else:
                content = self._process_tokens(children)
            return GenericBlock(children=content, metadata={"type": token_type})

        raw = token.get("raw")
        if isinstance(raw, str) and raw.strip():
            return GenericBlock(children=[Paragraph(content=[Text(content=raw)])], metadata={"type": token_type})

        logger.debug(f"Skipping empty unsupported markdown token: {token_type}")
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        return Paragraph(content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> Node:
        """Process code block token.

        Fenced blocks tagged ``math`` become a paragraph holding display
        math when ``parse_math_code_blocks`` is on.

        """
        code_content = token.get("raw", "")
        attrs = token.get("attrs", {})
        info = (attrs.get("info") or "").strip() if isinstance(attrs, dict) else ""

        if self.options.parse_math_code_blocks and info.split(maxsplit=1)[:1] == [MATH_CODE_INFO]:
            return Paragraph(content=[Math(content=code_content, display=True)])

        return CodeBlock(content=code_content, info=info)

    def _process_block_quote(self, token: dict[str, Any]) -> BlockQuote:
        attrs = token.get("attrs", {})
        multiline = bool(attrs.get("multiline", False)) if isinstance(attrs, dict) else False
        return BlockQuote(children=self._process_tokens(token.get("children", [])), multiline=multiline)

    def _process_alert(self, token: dict[str, Any]) -> Alert:
        attrs = token.get("attrs", {})
        return Alert(
            kind=attrs.get("kind", "note"),
            title=attrs.get("title"),
            children=self._process_tokens(token.get("children", [])),
        )

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'tight' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        tight = bool(token.get("tight", True))

        children = token.get("children", [])
        items = [self._process_list_item(child) for child in children if isinstance(child, dict)]

        return List(ordered=ordered, items=items, start=start, tight=tight)

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        content = self._process_tokens(token.get("children", []))

        task_status = None
        if token.get("type") == "task_list_item":
            checked = token.get("attrs", {}).get("checked", False)
            task_status = "checked" if checked else "unchecked"

        return ListItem(children=content, task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        The header row comes first with ``is_header`` set; column count and
        alignments are taken from the header cells.

        """
        rows: list[TableRow] = []
        alignments: list[Any] = []
        num_columns = 0

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                cells = [self._process_table_cell(cell) for cell in section.get("children", [])]
                alignments = [cell.alignment for cell in cells]
                num_columns = len(cells)
                rows.append(TableRow(cells=cells, is_header=True))
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    cells = [self._process_table_cell(cell) for cell in row_token.get("children", [])]
                    rows.append(TableRow(cells=cells))

        return Table(rows=rows, num_columns=num_columns, alignments=alignments)

    def _process_table_cell(self, token: dict[str, Any]) -> TableCell:
        attrs = token.get("attrs", {})
        alignment = attrs.get("align") if isinstance(attrs, dict) else None
        return TableCell(children=self._process_inline_tokens(token.get("children", [])), alignment=alignment)

    def _process_footnote_item(self, token: dict[str, Any]) -> FootnoteDefinition:
        """Process a collected footnote into a definition node.

        mistune gathers referenced footnotes into a trailing ``footnotes``
        token; each item is keyed by the normalized label that references
        carry as well.

        """
        attrs = token.get("attrs", {})
        identifier = attrs.get("key", "")
        return FootnoteDefinition(identifier=identifier, children=self._process_tokens(token.get("children", [])))

    def _process_definition_list(self, token: dict[str, Any]) -> DescriptionList:
        """Process definition list token.

        Each ``def_list_head`` opens a new item and the first
        ``def_list_item`` after it becomes that item's details. Further
        definitions of the same term become details-only items.

        """
        items: list[Node] = []
        current: DescriptionItem | None = None

        for child in token.get("children", []):
            child_type = child.get("type", "")
            if child_type == "def_list_head":
                current = DescriptionItem(
                    children=[DescriptionTerm(content=self._process_inline_tokens(child.get("children", [])))]
                )
                items.append(current)
            elif child_type == "def_list_item":
                details = DescriptionDetails(children=self._process_tokens(child.get("children", [])))
                if current is None or any(isinstance(c, DescriptionDetails) for c in current.children):
                    current = DescriptionItem()
                    items.append(current)
                current.children.append(details)

        return DescriptionList(items=items)

    # -------------------------------------------------------------------------
    # Inline tokens
    # -------------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _children(self, token: dict[str, Any]) -> list[Node]:
        children = token.get("children", [])
        if not isinstance(children, list):
            return []
        return self._process_inline_tokens(children)

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        return Link(url=attrs.get("url", ""), content=self._children(token), title=attrs.get("title"))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        return Image(url=attrs.get("url", ""), content=self._children(token), title=attrs.get("title"))

    def _handle_wiki_link_token(self, token: dict[str, Any]) -> WikiLink:
        return WikiLink(url=token.get("attrs", {}).get("url", ""), content=self._children(token))

    def _process_inline_token(self, token: dict[str, Any]) -> Optional[Node]:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node. Unknown tokens with children become a
            GenericInline and bare ones their raw text; None when neither exists

        """
        token_type = token.get("type", "")

        if token_type == "text":
            return Text(content=token.get("raw", ""))
        elif token_type == "codespan":
            return Code(content=token.get("raw", ""))
        elif token_type == "softbreak":
            return SoftBreak()
        elif token_type == "linebreak":
            return LineBreak()
        elif token_type == "emphasis":
            return Emphasis(content=self._children(token))
        elif token_type == "strong":
            return Strong(content=self._children(token))
        elif token_type == "strikethrough":
            return Strikethrough(content=self._children(token))
        elif token_type == "superscript":
            return Superscript(content=self._children(token))
        elif token_type == "subscript":
            return Subscript(content=self._children(token))
        elif token_type == "underline":
            return Underline(content=self._children(token))
        elif token_type == "inline_spoiler":
            return Spoiler(content=self._children(token))
        elif token_type == "link":
            return self._handle_link_token(token)
        elif token_type == "image":
            return self._handle_image_token(token)
        elif token_type == "wiki_link":
            return self._handle_wiki_link_token(token)
        elif token_type == "footnote_ref":
            return FootnoteReference(identifier=token.get("raw", ""))
        elif token_type == "inline_math":
            return Math(content=token.get("raw", ""))
        elif token_type == "block_math":
            # $$...$$ inside a paragraph
            return Math(content=token.get("raw", ""), display=True)
        elif token_type == "inline_html":
            return HTMLInline(content=token.get("raw", ""))

        children = token.get("children")
        if isinstance(children, list) and children:
            return GenericInline(content=self._process_inline_tokens(children), metadata={"type": token_type})

        raw = token.get("raw")
        if isinstance(raw, str) and raw:
            return Text(content=raw)

        logger.debug(f"Skipping empty unsupported inline token: {token_type}")
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown string to AST.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from md2typst.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
