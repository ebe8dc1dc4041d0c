#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/renderers/typst.py
"""Typst rendering from AST.

This module provides the TypstRenderer class which converts AST nodes to
Typst markup. Footnote definitions are rendered up front so that references
can inline their bodies as ``#footnote[...]`` wherever they appear, even
before the definition in document order.

Every block visitor emits either nothing or text ending in one blank line,
so block output can be concatenated directly.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

from md2typst.ast.nodes import (
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
    EscapedChar,
    EscapedTag,
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
    RawInline,
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
from md2typst.ast.visitors import NodeVisitor
from md2typst.constants import (
    BLOCK_FENCE_MIN,
    DEFAULT_ALERT_TITLES,
    DEFAULT_IMAGE_LABEL,
    DEFAULT_WIKILINK_LABEL,
    INLINE_FENCE_MIN,
    TASK_CHECKED,
    TASK_UNCHECKED,
    TOC_TOKEN,
    TYPST_BULLET,
    TYPST_HEADING_MARKER,
    TYPST_HORIZONTAL_RULE,
    TYPST_INDENT,
    TYPST_LINE_BREAK,
    TYPST_OUTLINE,
)
from md2typst.options.typst import TypstRendererOptions
from md2typst.renderers.base import BaseRenderer, InlineContentMixin
from md2typst.utils.escape import backtick_fence, escape_inline_code, escape_string, escape_text
from md2typst.utils.math import latex_to_typst

logger = logging.getLogger(__name__)

# Nodes that live inside paragraphs; everything else is a block
INLINE_NODE_TYPES = (
    Text,
    Code,
    SoftBreak,
    LineBreak,
    Emphasis,
    Strong,
    Strikethrough,
    Superscript,
    Subscript,
    Underline,
    Spoiler,
    Link,
    Image,
    WikiLink,
    FootnoteReference,
    Math,
    RawInline,
    EscapedTag,
    EscapedChar,
    HTMLInline,
    GenericInline,
)

TABLE_ALIGNMENTS = {"left": "left", "center": "center", "right": "right"}


def wrap_markup(marker: str, body: str) -> str:
    """Wrap trimmed ``body`` in a markup delimiter; empty bodies vanish."""
    body = body.strip()
    if not body:
        return ""
    return f"{marker}{body}{marker}"


def wrap_function(name: str, body: str) -> str:
    """Wrap trimmed ``body`` in a ``#name[...]`` call; empty bodies vanish."""
    body = body.strip()
    if not body:
        return ""
    return f"#{name}[{body}]"


def indent_block(block: str, indent: int) -> str:
    """Prefix every non-empty line of ``block`` with ``indent`` levels.

    Empty lines stay empty; trailing whitespace of the result is removed.

    """
    prefix = TYPST_INDENT * indent
    lines = [f"{prefix}{line}" if line else "" for line in block.split("\n")]
    return "\n".join(lines).rstrip()


class TypstRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to Typst markup.

    Parameters
    ----------
    options : TypstRendererOptions or None, default = None
        Typst rendering options

    Examples
    --------
        >>> from md2typst.ast import Document, Heading, Text
        >>> from md2typst.renderers.typst import TypstRenderer
        >>> doc = Document(children=[Heading(level=2, content=[Text(content="Intro")])])
        >>> TypstRenderer().render_to_string(doc)
        '== Intro\\n'

    """

    def __init__(self, options: TypstRendererOptions | None = None):
        """Initialize the Typst renderer with options."""
        BaseRenderer._validate_options_type(options, TypstRendererOptions, "typst")
        options = options or TypstRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TypstRendererOptions = options
        self._output: list[str] = []
        self._indent: int = 0
        self._footnotes: dict[str, str] = {}

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to a Typst body.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            ``""`` for an empty document, otherwise the trimmed body
            followed by a single newline

        """
        self._output = []
        self._indent = 0
        self._footnotes = self.collect_footnotes(document)

        body = self.render_block(document).strip()
        return f"{body}\n" if body else ""

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render AST to Typst and write to output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        self.write_text_output(self.render_to_string(doc), output)

    def collect_footnotes(self, document: Document) -> dict[str, str]:
        """Render every top-level footnote definition.

        Parameters
        ----------
        document : Document
            Document whose direct children are scanned

        Returns
        -------
        dict
            Footnote identifier to rendered body; definitions that render
            empty are left out

        """
        self._footnotes = {}
        for child in document.children:
            if not isinstance(child, FootnoteDefinition):
                continue
            body = self._render_blocks(child.children, 0).strip()
            if body:
                self._footnotes[child.identifier] = body

        logger.debug(f"Collected {len(self._footnotes)} footnote definition(s)")
        return self._footnotes

    # -------------------------------------------------------------------------
    # Capture helpers
    # -------------------------------------------------------------------------

    def render_block(self, node: Node, indent: int = 0) -> str:
        """Render a single node at the given list/quote depth.

        The node's output is captured and returned; the surrounding output
        buffer and depth are restored afterwards.

        """
        saved_output = self._output
        saved_indent = self._indent
        self._output = []
        self._indent = indent
        try:
            node.accept(self)
            return "".join(self._output)
        finally:
            self._output = saved_output
            self._indent = saved_indent

    def _render_blocks(self, nodes: list[Node], indent: int) -> str:
        return "".join(self.render_block(node, indent) for node in nodes)

    def render_inline(self, content: list[Node]) -> str:
        """Render inline nodes to Typst markup without trimming."""
        return self._render_inline_content(content)

    def _render_math(self, node: Math) -> str:
        body = latex_to_typst(node.content.strip())
        if node.display:
            return f"$\n{body}\n$"
        return f"${body}$"

    def _render_text(self, text: str) -> str:
        if TOC_TOKEN not in text:
            return escape_text(text)

        pieces = [escape_text(piece) for piece in text.split(TOC_TOKEN)]
        separator = TYPST_OUTLINE if self.options.toc_enabled else ""
        return separator.join(pieces)

    # -------------------------------------------------------------------------
    # Block nodes
    # -------------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        self._output.append(self._render_blocks(node.children, self._indent))

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node as ``=`` markers followed by the title.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        title = self.render_inline(node.content).strip()
        if title:
            self._output.append(f"{TYPST_HEADING_MARKER * max(node.level, 1)} {title}\n\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        A paragraph holding nothing but display math becomes a math block.

        Parameters
        ----------
        node : Paragraph
            Paragraph to render

        """
        if len(node.content) == 1 and isinstance(node.content[0], Math) and node.content[0].display:
            self._output.append(f"{self._render_math(node.content[0])}\n\n")
            return

        text = self.render_inline(node.content).strip()
        if text:
            self._output.append(f"{text}\n\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a raw block.

        The fence is one backtick longer than the longest backtick run in
        the code, and at least three.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        fence = backtick_fence(node.content, BLOCK_FENCE_MIN)
        language = node.language or ""
        literal = node.content.rstrip("\n")
        self._output.append(f"{fence}{language}\n{literal}\n{fence}\n\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node as ``#quote[...]``."""
        inner = self._render_blocks(node.children, self._indent + 1).strip()
        if inner:
            self._output.append(f"#quote[\n{inner}\n]\n\n")

    def visit_alert(self, node: Alert) -> None:
        """Render an Alert node as a quote headed by its bold title.

        Parameters
        ----------
        node : Alert
            Alert to render; without a title the kind's default title is used

        """
        inner = self._render_blocks(node.children, self._indent + 1).strip()
        if not inner:
            return

        title = node.title if node.title is not None else DEFAULT_ALERT_TITLES.get(node.kind, node.kind.title())
        self._output.append(f"#quote[\n*{escape_text(title)}*\n\n{inner}\n]\n\n")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Numbering starts at ``max(start, 1)`` and only advances for ordered
        lists. Children that are not list items are skipped.

        Parameters
        ----------
        node : List
            List to render

        """
        index = max(node.start, 1)
        parts: list[str] = []

        for item in node.items:
            if not isinstance(item, ListItem):
                continue
            parts.append(self._render_list_item(item, node.ordered, index, self._indent))
            if node.ordered:
                index += 1

        if parts:
            self._output.append("".join(parts) + "\n")

    def _render_list_item(self, item: ListItem, ordered: bool, index: int, indent: int) -> str:
        """Render one list item line plus its indented continuation.

        The first paragraph is the item's own line; every other child is
        rendered one level deeper and indented under it.

        """
        marker = f"{index}. " if ordered else TYPST_BULLET
        if item.task_status == "checked":
            task_prefix = TASK_CHECKED
        elif item.task_status == "unchecked":
            task_prefix = TASK_UNCHECKED
        else:
            task_prefix = ""

        head = ""
        tail_parts: list[str] = []
        for child in item.children:
            if isinstance(child, Paragraph) and not head:
                head = self.render_inline(child.content).strip()
            else:
                tail_parts.append(self.render_block(child, indent + 1))

        out = f"{TYPST_INDENT * indent}{marker}{task_prefix}{head}\n"

        tail = "".join(tail_parts).rstrip()
        if tail:
            out += indent_block(tail, indent + 1) + "\n"

        return out

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem found outside a list as plain blocks."""
        self._output.append(self._render_blocks(node.children, self._indent))

    def visit_table(self, node: Table) -> None:
        """Render a Table node as ``#table(...)``.

        Short rows are padded with empty cells up to the widest of the
        declared column count and the longest row. A table without rows or
        columns renders nothing.

        Parameters
        ----------
        node : Table
            Table to render

        """
        rows = [[self._render_table_cell(cell) for cell in row.cells] for row in node.rows]
        columns = max([node.num_columns] + [len(row) for row in rows])

        if columns == 0 or not rows:
            return

        lines = ["#table(\n", f"  columns: {columns},\n"]

        alignments = [TABLE_ALIGNMENTS.get(a or "left", "left") for a in node.alignments[:columns]]
        if alignments:
            lines.append(f"  align: ({', '.join(alignments)}),\n")

        for row in rows:
            for col in range(columns):
                cell = row[col] if col < len(row) else ""
                lines.append(f"  [{cell}],\n")

        lines.append(")\n\n")
        self._output.append("".join(lines))

    def _render_table_cell(self, cell: TableCell) -> str:
        """Flatten a cell's mixed inline and block children onto one line."""
        parts: list[str] = []
        pending: list[Node] = []

        def flush() -> None:
            text = self.render_inline(pending).strip()
            if text:
                parts.append(text)
            pending.clear()

        for child in cell.children:
            if isinstance(child, Paragraph):
                flush()
                text = self.render_inline(child.content).strip()
                if text:
                    parts.append(text)
            elif isinstance(child, INLINE_NODE_TYPES):
                pending.append(child)
            else:
                flush()
                text = self.render_block(child, 0).strip()
                if text:
                    parts.append(text.replace("\n", " "))

        flush()
        return " ".join(parts)

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow found outside a table as plain blocks."""
        self._output.append(self._render_blocks(list(node.cells), self._indent))

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell found outside a table as plain blocks."""
        self._output.append(self._render_blocks(node.children, self._indent))

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node as a full-width line."""
        self._output.append(f"{TYPST_HORIZONTAL_RULE}\n\n")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """HTML blocks are dropped."""
        logger.debug("Dropping HTML block")

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Footnote definitions are inlined at their references."""
        pass

    def visit_description_list(self, node: DescriptionList) -> None:
        """Render a DescriptionList node as a bullet list of terms."""
        parts = [self.render_block(item, self._indent) for item in node.items]
        body = "".join(parts)
        if body:
            self._output.append(body + "\n")

    def visit_description_item(self, node: DescriptionItem) -> None:
        """Render a DescriptionItem node.

        Produces ``- *term*: details`` with the details collapsed onto one
        line, ``- *term*`` without details, ``- details`` without a term,
        and nothing when both are empty.

        Parameters
        ----------
        node : DescriptionItem
            Description item to render

        """
        term = ""
        details = ""

        for child in node.children:
            if isinstance(child, DescriptionTerm):
                rendered = self.render_block(child, self._indent).strip()
                if rendered:
                    term = rendered
            elif isinstance(child, DescriptionDetails):
                rendered = self.render_block(child, self._indent + 1).strip()
                if rendered:
                    details = rendered

        if not term and not details:
            return

        out = f"{TYPST_INDENT * self._indent}{TYPST_BULLET}"
        if not term:
            self._output.append(f"{out}{details}\n")
            return

        out += f"*{term}*"
        if details:
            out += ": " + details.replace("\n", " ")
        self._output.append(out + "\n")

    def visit_description_term(self, node: DescriptionTerm) -> None:
        """Render a DescriptionTerm node's inline content."""
        self._output.append(self.render_inline(node.content))

    def visit_description_details(self, node: DescriptionDetails) -> None:
        """Render a DescriptionDetails node's blocks."""
        self._output.append(self._render_blocks(node.children, self._indent))

    def visit_generic_block(self, node: GenericBlock) -> None:
        """Render a GenericBlock node by rendering its children."""
        self._output.append(self._render_blocks(node.children, self._indent))

    # -------------------------------------------------------------------------
    # Inline nodes
    # -------------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node, expanding table-of-contents markers.

        Parameters
        ----------
        node : Text
            Text to render

        """
        self._output.append(self._render_text(node.content))

    def visit_code(self, node: Code) -> None:
        """Render a Code node as a raw span."""
        fence = backtick_fence(node.content, INLINE_FENCE_MIN)
        self._output.append(f"{fence}{escape_inline_code(node.content)}{fence}")

    def visit_soft_break(self, node: SoftBreak) -> None:
        """Render a SoftBreak node as a space."""
        self._output.append(" ")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node as a forced line break."""
        self._output.append(TYPST_LINE_BREAK)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(wrap_markup("_", self.render_inline(node.content)))

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(wrap_markup("*", self.render_inline(node.content)))

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self._output.append(wrap_function("strike", self.render_inline(node.content)))

    def visit_superscript(self, node: Superscript) -> None:
        self._output.append(wrap_function("super", self.render_inline(node.content)))

    def visit_subscript(self, node: Subscript) -> None:
        self._output.append(wrap_function("sub", self.render_inline(node.content)))

    def visit_underline(self, node: Underline) -> None:
        self._output.append(wrap_function("underline", self.render_inline(node.content)))

    def visit_spoiler(self, node: Spoiler) -> None:
        self._output.append(wrap_function("hide", self.render_inline(node.content)))

    def _render_link(self, url: str, label: str) -> str:
        return f'#link("{escape_string(url)}")[{label}]'

    def visit_link(self, node: Link) -> None:
        """Render a Link node; an empty label falls back to the URL."""
        label = self.render_inline(node.content).strip() or escape_text(node.url)
        self._output.append(self._render_link(node.url, label))

    def visit_image(self, node: Image) -> None:
        """Render an Image node as a textual link labelled with its alt text."""
        label = self.render_inline(node.content).strip() or DEFAULT_IMAGE_LABEL
        self._output.append(self._render_link(node.url, label))

    def visit_wiki_link(self, node: WikiLink) -> None:
        """Render a WikiLink node.

        The label is the link's own text when given, otherwise the escaped
        target, or ``wiki`` for a blank target.

        """
        label = self.render_inline(node.content).strip()
        if not label:
            label = escape_text(node.url) if node.url.strip() else DEFAULT_WIKILINK_LABEL
        self._output.append(self._render_link(node.url, label))

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Render a FootnoteReference node with its definition inlined.

        A reference without a (non-empty) definition shows its own name.

        Parameters
        ----------
        node : FootnoteReference
            Footnote reference to render

        """
        body: Optional[str] = self._footnotes.get(node.identifier)
        if body is None:
            logger.debug(f"Footnote reference '{node.identifier}' has no definition")
            body = escape_text(node.identifier)
        self._output.append(f"#footnote[{body}]")

    def visit_math(self, node: Math) -> None:
        """Render a Math node with the LaTeX translated to Typst math."""
        self._output.append(self._render_math(node))

    def visit_raw_inline(self, node: RawInline) -> None:
        self._output.append(node.content)

    def visit_escaped_tag(self, node: EscapedTag) -> None:
        self._output.append(escape_text(node.content))

    def visit_escaped_char(self, node: EscapedChar) -> None:
        self._output.append("\\")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Inline HTML is dropped."""
        pass

    def visit_generic_inline(self, node: GenericInline) -> None:
        self._output.append(self.render_inline(node.content))
