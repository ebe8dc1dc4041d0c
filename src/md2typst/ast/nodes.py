#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy the Markdown parser produces and the
Typst renderer consumes. Each node represents a structural or inline element
of the document.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, HTMLBlock, FootnoteDefinition, Alert
    - DescriptionList, DescriptionItem, DescriptionTerm, DescriptionDetails
    - GenericBlock (fallback for unrecognized containers)

Inline nodes represent text formatting:
    - Text, Code, SoftBreak, LineBreak
    - Emphasis, Strong, Strikethrough, Superscript, Subscript, Underline, Spoiler
    - Link, Image, WikiLink, FootnoteReference, Math
    - RawInline, EscapedTag, EscapedChar, HTMLInline
    - GenericInline (fallback for unrecognized inline containers)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from md2typst.constants import AlertKind, Alignment, TaskStatus


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_heading method

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_paragraph method

        Returns
        -------
        Any
            Result from visitor.visit_paragraph(self)

        """
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Code block node with an optional info string.

    Represents a fenced or indented code block.

    Parameters
    ----------
    content : str
        Code content (not parsed as markdown)
    info : str, default = ""
        Info string following the opening fence; its first word is the
        language used for highlighting
    metadata : dict, default = empty dict
        Code block metadata

    """

    content: str
    info: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def language(self) -> Optional[str]:
        """Return the first whitespace-separated word of the info string."""
        words = self.info.split()
        return words[0] if words else None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_code_block method

        Returns
        -------
        Any
            Result from visitor.visit_code_block(self)

        """
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote
    multiline : bool, default = False
        True for ``>>>`` multiline quotes; rendered the same way
    metadata : dict, default = empty dict
        Block quote metadata

    """

    children: list[Node] = field(default_factory=list)
    multiline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_block_quote method

        Returns
        -------
        Any
            Result from visitor.visit_block_quote(self)

        """
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)
    metadata : dict, default = empty dict
        List metadata

    """

    ordered: bool
    items: list[Node] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_list method

        Returns
        -------
        Any
            Result from visitor.visit_list(self)

        """
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    task_status : {'checked', 'unchecked'} or None, default = None
        Set for task list items
    metadata : dict, default = empty dict
        List item metadata

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[TaskStatus] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_list_item method

        Returns
        -------
        Any
            Result from visitor.visit_list_item(self)

        """
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """Table node with column alignments.

    The header row, when present, is the first entry of ``rows`` with
    ``is_header`` set. Rows may have differing widths.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        All table rows, header first
    num_columns : int, default = 0
        Column count declared by the source table
    alignments : list of {'left', 'center', 'right', None}, default = empty list
        Per-column alignment (None when the source did not specify one)
    metadata : dict, default = empty dict
        Table metadata

    """

    rows: list[TableRow] = field(default_factory=list)
    num_columns: int = 0
    alignments: list[Optional[Alignment]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_table method

        Returns
        -------
        Any
            Result from visitor.visit_table(self)

        """
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row node containing cells."""

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node.

    Cells hold a mix of inline nodes and block nodes (for example a
    paragraph, or a list produced by an HTML-ish source).

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline or block nodes in the cell
    alignment : {'left', 'center', 'right'} or None, default = None
        Cell alignment as reported by the parser
    metadata : dict, default = empty dict
        Cell metadata

    """

    children: list[Node] = field(default_factory=list)
    alignment: Optional[Alignment] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break (horizontal rule) node."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_thematic_break method

        Returns
        -------
        Any
            Result from visitor.visit_thematic_break(self)

        """
        return visitor.visit_thematic_break(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node.

    Parameters
    ----------
    content : str
        Raw HTML content
    metadata : dict, default = empty dict
        HTML block metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this HTML block."""
        return visitor.visit_html_block(self)


@dataclass
class FootnoteDefinition(Node):
    """Footnote definition node.

    Parameters
    ----------
    identifier : str
        Footnote label, matched against FootnoteReference.identifier
    children : list of Node, default = empty list
        Block-level content of the footnote
    metadata : dict, default = empty dict
        Footnote metadata

    """

    identifier: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote definition."""
        return visitor.visit_footnote_definition(self)


@dataclass
class Alert(Node):
    """GitHub-style alert block (``> [!NOTE]``).

    Parameters
    ----------
    kind : {'note', 'tip', 'important', 'warning', 'caution'}
        Alert type
    children : list of Node, default = empty list
        Block-level content of the alert
    title : str or None, default = None
        Custom title; None selects the default title for ``kind``
    metadata : dict, default = empty dict
        Alert metadata

    """

    kind: AlertKind
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this alert."""
        return visitor.visit_alert(self)


@dataclass
class DescriptionList(Node):
    """Description (definition) list node.

    Parameters
    ----------
    items : list of DescriptionItem, default = empty list
        Term/details groups in source order
    metadata : dict, default = empty dict
        Description list metadata

    """

    items: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this description list."""
        return visitor.visit_description_list(self)


@dataclass
class DescriptionItem(Node):
    """One term with its details inside a description list.

    ``children`` holds DescriptionTerm and DescriptionDetails nodes; an item
    may lack a term or details.

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this description item."""
        return visitor.visit_description_item(self)


@dataclass
class DescriptionTerm(Node):
    """Term of a description list item."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this description term."""
        return visitor.visit_description_term(self)


@dataclass
class DescriptionDetails(Node):
    """Details (definition body) of a description list item."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing these description details."""
        return visitor.visit_description_details(self)


@dataclass
class GenericBlock(Node):
    """Fallback container for block content with no dedicated node.

    Renderers process the children and ignore the container itself.

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this generic block."""
        return visitor.visit_generic_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content
    metadata : dict, default = empty dict
        Text metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_text method

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)


@dataclass
class Code(Node):
    """Inline code span node.

    Parameters
    ----------
    content : str
        Literal code content
    metadata : dict, default = empty dict
        Code metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_code(self)


@dataclass
class SoftBreak(Node):
    """Soft line break (a newline inside a paragraph)."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this soft break."""
        return visitor.visit_soft_break(self)


@dataclass
class LineBreak(Node):
    """Hard line break node."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_line_break method

        Returns
        -------
        Any
            Result from visitor.visit_line_break(self)

        """
        return visitor.visit_line_break(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong text."""
        return visitor.visit_strong(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough node (GFM extension)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class Superscript(Node):
    """Superscript node (``^x^``)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this superscript."""
        return visitor.visit_superscript(self)


@dataclass
class Subscript(Node):
    """Subscript node (``~x~``)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this subscript."""
        return visitor.visit_subscript(self)


@dataclass
class Underline(Node):
    """Underline node (``__x__``)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this underline."""
        return visitor.visit_underline(self)


@dataclass
class Spoiler(Node):
    """Spoiler node (``>!x!<``), rendered hidden."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this spoiler."""
        return visitor.visit_spoiler(self)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str
        Link destination
    content : list of Node, default = empty list
        Inline nodes forming the link label
    title : str or None, default = None
        Optional link title
    metadata : dict, default = empty dict
        Link metadata

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_link method

        Returns
        -------
        Any
            Result from visitor.visit_link(self)

        """
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Images are never embedded; the Typst renderer turns them into links
    labelled with the alt text.

    Parameters
    ----------
    url : str
        Image source
    content : list of Node, default = empty list
        Inline nodes forming the alt text
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class WikiLink(Node):
    """Wiki-style link node (``[[Page]]`` or ``[[Page|label]]``)."""

    url: str
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this wiki link."""
        return visitor.visit_wiki_link(self)


@dataclass
class FootnoteReference(Node):
    """Footnote reference node.

    Parameters
    ----------
    identifier : str
        Footnote label, matched against FootnoteDefinition.identifier
    metadata : dict, default = empty dict
        Footnote reference metadata

    """

    identifier: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote reference."""
        return visitor.visit_footnote_reference(self)


@dataclass
class Math(Node):
    """Math node, inline or display.

    Parameters
    ----------
    content : str
        LaTeX source of the formula, without delimiters
    display : bool, default = False
        True for display (block) math
    metadata : dict, default = empty dict
        Math metadata

    """

    content: str
    display: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math node."""
        return visitor.visit_math(self)


@dataclass
class RawInline(Node):
    """Inline content passed to the output verbatim."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw inline."""
        return visitor.visit_raw_inline(self)


@dataclass
class EscapedTag(Node):
    """Tag-like text the source escaped; rendered as plain text."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this escaped tag."""
        return visitor.visit_escaped_tag(self)


@dataclass
class EscapedChar(Node):
    """A backslash escape whose character carries no meaning of its own."""

    content: str = "\\"
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this escaped character."""
        return visitor.visit_escaped_char(self)


@dataclass
class HTMLInline(Node):
    """Inline HTML node."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline HTML."""
        return visitor.visit_html_inline(self)


@dataclass
class GenericInline(Node):
    """Fallback container for inline content with no dedicated node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this generic inline."""
        return visitor.visit_generic_inline(self)

