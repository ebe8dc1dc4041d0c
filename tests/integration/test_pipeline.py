"""Integration tests for the Markdown to Typst pipeline."""

import pytest
from utils import assert_balanced_markup

from md2typst import PdfOptions, convert_markdown_to_typst, markdown_to_typst_source, split_frontmatter
from md2typst.template import Style


@pytest.mark.integration
class TestPipeline:
    """Run whole documents through frontmatter, parser, renderer and template."""

    def test_sample_body_is_well_formed(self, basic_markdown) -> None:
        parsed = split_frontmatter(basic_markdown)
        doc = convert_markdown_to_typst(parsed.body, parsed.frontmatter)

        assert doc.title == "Comprehensive Markdown Demo"
        assert doc.authors == ["Ada Lovelace", "Grace Hopper"]
        assert doc.toc is False
        assert_balanced_markup(doc.body)

    def test_headings_appear_in_order(self, basic_markdown) -> None:
        body = markdown_to_typst_source(basic_markdown)

        positions = [body.index(heading) for heading in ("= Top Title", "== Tasks", "== Data", "== Code")]
        assert positions == sorted(positions)

    @pytest.mark.parametrize("style", [style.value for style in Style])
    def test_every_style_wraps_the_same_body(self, simple_markdown, style) -> None:
        source = markdown_to_typst_source(simple_markdown, PdfOptions(style=style))

        assert source.startswith(Style(style).source())
        assert source.rstrip().endswith("]")
        assert '#link("https://typst.app")[Typst]' in source

    def test_special_characters_do_not_leak_markup(self) -> None:
        markdown = "# Costs $5 #1\n\nUse [brackets] and {braces} with *stars* and back\\\\slash."
        doc = convert_markdown_to_typst(markdown)

        assert_balanced_markup(doc.body)
        assert "\\$5 \\#1" in doc.body
        assert "\\[brackets\\]" in doc.body
        assert "\\{braces\\}" in doc.body

    def test_cjk_document_detects_language(self) -> None:
        source = markdown_to_typst_source("# 标题\n\n中文段落。")
        assert 'lang: "zh"' in source

    def test_nested_structures(self) -> None:
        markdown = (
            "- outer\n"
            "  > quoted in a list\n"
            "  - inner with `code`\n"
            "\n"
            "> [!WARNING] Heads up\n"
            "> - item one\n"
            "> - item two\n"
        )
        body = convert_markdown_to_typst(markdown).body

        assert body.startswith("- outer\n")
        assert "  #quote[" in body
        assert "  - inner with `code`" in body
        assert "#quote[\n*Heads up*\n\n- item one\n" in body
        assert "- item two" in body
        assert_balanced_markup(body)
