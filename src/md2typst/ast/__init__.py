#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/ast/__init__.py
"""Abstract syntax tree for Markdown documents.

The parser in :mod:`md2typst.parsers.markdown` builds these nodes and the
renderer in :mod:`md2typst.renderers.typst` walks them through the
:class:`NodeVisitor` interface.

"""

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

__all__ = [
    "Alert",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "DescriptionDetails",
    "DescriptionItem",
    "DescriptionList",
    "DescriptionTerm",
    "Document",
    "Emphasis",
    "EscapedChar",
    "EscapedTag",
    "FootnoteDefinition",
    "FootnoteReference",
    "GenericBlock",
    "GenericInline",
    "HTMLBlock",
    "HTMLInline",
    "Heading",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Math",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "RawInline",
    "SoftBreak",
    "Spoiler",
    "Strikethrough",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "Underline",
    "WikiLink",
]
