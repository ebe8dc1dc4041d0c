"""Parsers turning Markdown text and frontmatter into md2typst structures."""

from md2typst.parsers.frontmatter import FrontMatter, ParsedMarkdown, split_frontmatter
from md2typst.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = [
    "FrontMatter",
    "MarkdownToAstConverter",
    "ParsedMarkdown",
    "markdown_to_ast",
    "split_frontmatter",
]
