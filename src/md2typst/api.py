#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/api.py
"""High-level conversion API.

The pipeline is: split frontmatter, parse the Markdown body with mistune,
render the AST to a Typst body, wrap it in a template, and optionally
compile the result to PDF.

Examples
--------
Convert a document to Typst source:

    >>> from md2typst import markdown_to_typst_source
    >>> source = markdown_to_typst_source("---\\ntitle: Demo\\n---\\n# Hello")

Go straight to PDF (requires the ``typst`` package):

    >>> from md2typst import markdown_to_pdf, PdfOptions
    >>> pdf = markdown_to_pdf("# Hello", PdfOptions(style="classic-editorial"))

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from md2typst.compile import compile_typst_to_pdf
from md2typst.constants import CJK_IDEOGRAPH_RANGE, CJK_LANG, DEFAULT_LANG, TOC_MARKER, TOC_TOKEN
from md2typst.exceptions import FileError
from md2typst.options.convert import ConvertOptions
from md2typst.options.markdown import MarkdownParserOptions
from md2typst.options.pdf import PdfOptions
from md2typst.options.typst import TypstRendererOptions
from md2typst.parsers.frontmatter import FrontMatter, split_frontmatter
from md2typst.parsers.markdown import MarkdownToAstConverter
from md2typst.renderers.typst import TypstRenderer
from md2typst.template import Style, compose_document, compose_document_with_custom

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvertedDocument:
    """Result of converting Markdown to a Typst body.

    Parameters
    ----------
    title : str or None
        Resolved document title
    authors : list of str
        Resolved authors, de-duplicated in first-seen order
    lang : str
        Resolved language code
    body : str
        Typst body; empty, or trimmed text followed by one newline
    toc : bool
        Whether the template should render a table of contents. False
        whenever an inline ``[toc]`` marker already placed one in the body.

    """

    title: Optional[str]
    authors: list[str] = field(default_factory=list)
    lang: str = DEFAULT_LANG
    body: str = ""
    toc: bool = False


def normalize_toc_tokens(text: str) -> tuple[str, bool]:
    """Replace ``[toc]`` marker lines with the placeholder token.

    Parameters
    ----------
    text : str
        Markdown body

    Returns
    -------
    tuple of (str, bool)
        The normalized text, in which every line ends with ``\\n``, and
        whether any marker was found

    Examples
    --------
        >>> normalize_toc_tokens("[toc]\\n# Title")
        ('MD2TYPSTTOCPLACEHOLDER7f3a\\n# Title\\n', True)

    """
    lines: list[str] = []
    has_inline_toc = False

    raw_lines = text.split("\n")
    if raw_lines[-1] == "":
        raw_lines.pop()

    for line in raw_lines:
        line = line.removesuffix("\r")
        if line.strip() == TOC_MARKER:
            has_inline_toc = True
            lines.append(TOC_TOKEN)
        else:
            lines.append(line)

    return "".join(f"{line}\n" for line in lines), has_inline_toc


def _non_empty(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def detect_lang(text: str) -> str:
    """Guess the document language: ``zh`` if any CJK ideograph occurs, else ``en``."""
    low, high = CJK_IDEOGRAPH_RANGE
    if any(low <= ord(char) <= high for char in text):
        return CJK_LANG
    return DEFAULT_LANG


def resolve_authors(frontmatter: FrontMatter, options: ConvertOptions) -> list[str]:
    """Resolve the author list.

    An author override wins outright. Otherwise frontmatter ``authors`` are
    trimmed, blanks dropped and duplicates removed; ``author`` is used only
    when that leaves nothing.

    """
    override = _non_empty(options.author_override)
    if override:
        return [override]

    authors: list[str] = []
    for author in frontmatter.authors:
        trimmed = _non_empty(author)
        if trimmed and trimmed not in authors:
            authors.append(trimmed)

    if not authors:
        single = _non_empty(frontmatter.author)
        if single:
            authors.append(single)

    return authors


def convert_markdown_to_typst(
    markdown: str,
    frontmatter: Optional[FrontMatter] = None,
    options: Optional[ConvertOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> ConvertedDocument:
    """Convert a Markdown body to a Typst body plus resolved metadata.

    Parameters
    ----------
    markdown : str
        Markdown text without frontmatter
    frontmatter : FrontMatter or None, default None
        Metadata from :func:`~md2typst.parsers.frontmatter.split_frontmatter`
    options : ConvertOptions or None, default None
        Metadata overrides
    parser_options : MarkdownParserOptions or None, default None
        Markdown extensions to enable; all are on by default

    Returns
    -------
    ConvertedDocument
        Rendered body and metadata

    Raises
    ------
    ConversionError
        If the input is not text or the Markdown parser fails

    Examples
    --------
        >>> doc = convert_markdown_to_typst("# Hello\\n\\nWorld")
        >>> doc.body
        '= Hello\\n\\nWorld\\n'
        >>> doc.lang
        'en'

    """
    frontmatter = frontmatter or FrontMatter()
    options = options or ConvertOptions()

    normalized, has_inline_toc = normalize_toc_tokens(markdown)

    if options.force_toc is not None:
        toc_enabled = options.force_toc
    elif frontmatter.toc is not None:
        toc_enabled = frontmatter.toc
    else:
        toc_enabled = has_inline_toc

    document = MarkdownToAstConverter(parser_options).parse(normalized)
    renderer = TypstRenderer(TypstRendererOptions(toc_enabled=toc_enabled))
    body = renderer.render_to_string(document)

    lang = _non_empty(options.lang_override) or _non_empty(frontmatter.lang) or detect_lang(markdown)
    title = _non_empty(options.title_override) or _non_empty(frontmatter.title)

    return ConvertedDocument(
        title=title,
        authors=resolve_authors(frontmatter, options),
        lang=lang,
        body=body,
        toc=toc_enabled and not has_inline_toc,
    )


def _read_template(path: Union[str, Path]) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FileError(f"failed to read template {path}: {e}", file_path=str(path), original_error=e) from e


def markdown_to_typst_source(markdown: str, options: Optional[PdfOptions] = None) -> str:
    """Convert a complete Markdown document (with frontmatter) to Typst source.

    Parameters
    ----------
    markdown : str
        Markdown document, optionally starting with YAML frontmatter
    options : PdfOptions or None, default None
        Template selection and metadata overrides

    Returns
    -------
    str
        Typst source ready for compilation

    Raises
    ------
    FrontmatterError
        If the frontmatter block is malformed
    StyleError
        If ``options.style`` is not a built-in style
    FileError
        If a custom template cannot be read

    """
    options = options or PdfOptions()
    parsed = split_frontmatter(markdown)
    converted = convert_markdown_to_typst(parsed.body, parsed.frontmatter, options.convert_options())

    if options.custom_template is not None:
        template = _read_template(options.custom_template)
        return compose_document_with_custom(
            template, converted.title, converted.authors, converted.lang, converted.toc, converted.body
        )

    return compose_document(
        Style.from_name(options.style),
        converted.title,
        converted.authors,
        converted.lang,
        converted.toc,
        converted.body,
    )


def markdown_to_pdf(
    markdown: str,
    options: Optional[PdfOptions] = None,
    output_path: Optional[Union[str, Path]] = None,
) -> bytes:
    """Convert a Markdown document to PDF in one call.

    Parameters
    ----------
    markdown : str
        Markdown document, optionally starting with YAML frontmatter
    options : PdfOptions or None, default None
        Template selection and metadata overrides
    output_path : str, Path or None, default None
        Where to also write the PDF

    Returns
    -------
    bytes
        The PDF document

    Raises
    ------
    CompileError
        If Typst rejects the generated source
    DependencyError
        If the ``typst`` package is not installed

    """
    source = markdown_to_typst_source(markdown, options)
    return compile_typst_to_pdf(source, output_path)
