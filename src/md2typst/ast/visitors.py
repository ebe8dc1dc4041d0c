#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for processing AST nodes.
Visitors keep algorithms such as rendering separate from the node
structure itself: every node's ``accept`` method calls the matching
``visit_*`` method.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node type. All visit
    methods accept a node and return Any (typically a rendered string for
    renderers).

    Examples
    --------
    Simple visitor that collects plain text:

        >>> class TextCollector(NodeVisitor):
        ...     def visit_text(self, node):
        ...         return node.content
        ...     # ... remaining visit_* methods
        >>> Text("hi").accept(TextCollector())
        'hi'

    """

    # Block-level nodes

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The heading node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any:
        """Visit an HTMLBlock node."""
        pass

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any:
        """Visit a FootnoteDefinition node.

        Parameters
        ----------
        node : FootnoteDefinition
            The footnote definition node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_alert(self, node: Alert) -> Any:
        """Visit an Alert node."""
        pass

    @abstractmethod
    def visit_description_list(self, node: DescriptionList) -> Any:
        """Visit a DescriptionList node."""
        pass

    @abstractmethod
    def visit_description_item(self, node: DescriptionItem) -> Any:
        """Visit a DescriptionItem node."""
        pass

    @abstractmethod
    def visit_description_term(self, node: DescriptionTerm) -> Any:
        """Visit a DescriptionTerm node."""
        pass

    @abstractmethod
    def visit_description_details(self, node: DescriptionDetails) -> Any:
        """Visit a DescriptionDetails node."""
        pass

    @abstractmethod
    def visit_generic_block(self, node: GenericBlock) -> Any:
        """Visit a GenericBlock node."""
        pass

    # Inline nodes

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""
        pass

    @abstractmethod
    def visit_underline(self, node: Underline) -> Any:
        """Visit an Underline node."""
        pass

    @abstractmethod
    def visit_spoiler(self, node: Spoiler) -> Any:
        """Visit a Spoiler node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node.

        Parameters
        ----------
        node : Link
            The link node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_wiki_link(self, node: WikiLink) -> Any:
        """Visit a WikiLink node."""
        pass

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference) -> Any:
        """Visit a FootnoteReference node."""
        pass

    @abstractmethod
    def visit_math(self, node: Math) -> Any:
        """Visit a Math node."""
        pass

    @abstractmethod
    def visit_raw_inline(self, node: RawInline) -> Any:
        """Visit a RawInline node."""
        pass

    @abstractmethod
    def visit_escaped_tag(self, node: EscapedTag) -> Any:
        """Visit an EscapedTag node."""
        pass

    @abstractmethod
    def visit_escaped_char(self, node: EscapedChar) -> Any:
        """Visit an EscapedChar node."""
        pass

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any:
        """Visit an HTMLInline node."""
        pass

    @abstractmethod
    def visit_generic_inline(self, node: GenericInline) -> Any:
        """Visit a GenericInline node."""
        pass
