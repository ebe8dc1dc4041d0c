"""md2typst - Markdown to Typst transpiler and PDF pipeline.

md2typst turns CommonMark/GFM Markdown, with its common extensions, into
Typst markup, wraps the result in a document template and optionally
compiles it to PDF through the Typst compiler bindings.

Features
--------
- Headings, emphasis, lists, task lists, tables, block quotes and code
- Footnotes resolved into inline ``#footnote[...]`` calls
- LaTeX math translated to Typst math
- GitHub-style alerts, definition lists, spoilers and wiki links
- YAML frontmatter for title, authors, language and table of contents
- Two built-in templates plus custom ``.typ`` templates
- Watch mode recompiling files as they change

Examples
--------
Convert Markdown to a Typst body:

    >>> from md2typst import convert_markdown_to_typst
    >>> doc = convert_markdown_to_typst("# Hello\\n\\n**World**")
    >>> doc.body
    '= Hello\\n\\n#strong[World]\\n'

Produce a complete Typst document:

    >>> from md2typst import markdown_to_typst_source, PdfOptions
    >>> source = markdown_to_typst_source("# Hello", PdfOptions(style="classic-editorial"))

Compile to PDF (requires the ``typst`` package):

    >>> from md2typst import markdown_to_pdf
    >>> pdf_bytes = markdown_to_pdf("# Hello", output_path="hello.pdf")

See Also
--------
md2typst.ast : AST node definitions and visitor
md2typst.renderers.typst : AST to Typst renderer

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2typst requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2typst.api import (
    ConvertedDocument,
    convert_markdown_to_typst,
    markdown_to_pdf,
    markdown_to_typst_source,
)
from md2typst.exceptions import (
    CompileError,
    ConversionError,
    DependencyError,
    FrontmatterError,
    Md2TypstError,
    StyleError,
)
from md2typst.options import (
    ConvertOptions,
    MarkdownParserOptions,
    PdfOptions,
    TypstRendererOptions,
)
from md2typst.parsers.frontmatter import FrontMatter, split_frontmatter
from md2typst.template import Style, compose_document, compose_document_with_custom

__all__ = [
    "__version__",
    # API
    "ConvertedDocument",
    "convert_markdown_to_typst",
    "markdown_to_pdf",
    "markdown_to_typst_source",
    "split_frontmatter",
    "FrontMatter",
    # Templates
    "Style",
    "compose_document",
    "compose_document_with_custom",
    # Options
    "ConvertOptions",
    "MarkdownParserOptions",
    "PdfOptions",
    "TypstRendererOptions",
    # Exceptions
    "Md2TypstError",
    "CompileError",
    "ConversionError",
    "DependencyError",
    "FrontmatterError",
    "StyleError",
]
