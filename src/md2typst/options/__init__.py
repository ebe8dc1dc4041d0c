"""Option dataclasses for parsing, rendering and conversion."""

from md2typst.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2typst.options.convert import ConvertOptions
from md2typst.options.markdown import MarkdownParserOptions
from md2typst.options.pdf import PdfOptions
from md2typst.options.typst import TypstRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ConvertOptions",
    "MarkdownParserOptions",
    "PdfOptions",
    "TypstRendererOptions",
]
