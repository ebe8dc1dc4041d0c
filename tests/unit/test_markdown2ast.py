#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for Markdown to AST converter."""

import pytest

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
    Image,
    Link,
    List,
    ListItem,
    Math,
    Paragraph,
    Spoiler,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    Text,
    ThematicBreak,
    Underline,
    WikiLink,
)
from md2typst.exceptions import ConversionError, InvalidOptionsError
from md2typst.options import MarkdownParserOptions, TypstRendererOptions
from md2typst.parsers.markdown import MarkdownToAstConverter, markdown_to_ast


def inline_types(node) -> list:
    return [type(child) for child in node.content]


@pytest.mark.unit
class TestMarkdownBasics:
    """Test basic markdown parsing."""

    def test_simple_paragraph(self) -> None:
        doc = markdown_to_ast("This is a paragraph.")

        assert isinstance(doc, Document)
        assert len(doc.children) == 1
        para = doc.children[0]
        assert isinstance(para, Paragraph)
        assert para.content[0].content == "This is a paragraph."

    def test_heading_levels(self) -> None:
        doc = markdown_to_ast("# H1\n## H2\n### H3\n#### H4\n##### H5\n###### H6")

        assert len(doc.children) == 6
        for i, child in enumerate(doc.children):
            assert isinstance(child, Heading)
            assert child.level == i + 1

    def test_empty_input(self) -> None:
        assert markdown_to_ast("").children == []

    def test_non_string_input(self) -> None:
        with pytest.raises(ConversionError):
            markdown_to_ast(b"# bytes")  # type: ignore[arg-type]

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            MarkdownToAstConverter(TypstRendererOptions())  # type: ignore[arg-type]

    def test_thematic_break(self) -> None:
        doc = markdown_to_ast("a\n\n---\n\nb")
        assert isinstance(doc.children[1], ThematicBreak)

    def test_html_block(self) -> None:
        doc = markdown_to_ast("<div>\nraw\n</div>\n")
        assert isinstance(doc.children[0], HTMLBlock)


@pytest.mark.unit
class TestInlineFormatting:
    """Test inline formatting elements."""

    def test_strong_and_emphasis(self) -> None:
        para = markdown_to_ast("**bold** and *italic*").children[0]
        assert inline_types(para) == [Strong, Text, Emphasis]

    def test_strikethrough(self) -> None:
        para = markdown_to_ast("~~deleted~~").children[0]
        assert isinstance(para.content[0], Strikethrough)

    def test_superscript_subscript_underline(self) -> None:
        para = markdown_to_ast("x^2^ H~2~O __under__").children[0]
        types = inline_types(para)

        assert Superscript in types
        assert Subscript in types
        assert Underline in types

    def test_double_underscore_is_underline(self) -> None:
        para = markdown_to_ast("__under__ and **strong**").children[0]

        assert isinstance(para.content[0], Underline)
        assert para.content[0].content[0].content == "under"
        assert Strong in inline_types(para)

    def test_underline_wraps_nested_emphasis(self) -> None:
        underline = markdown_to_ast("__a *b*__").children[0].content[0]

        assert isinstance(underline, Underline)
        assert Emphasis in inline_types(underline)

    def test_intraword_double_underscore_stays_text(self) -> None:
        para = markdown_to_ast("snake__case__name").children[0]

        assert Underline not in inline_types(para)
        assert "".join(n.content for n in para.content if isinstance(n, Text)) == "snake__case__name"

    def test_underline_disabled_falls_back_to_strong(self) -> None:
        options = MarkdownParserOptions(parse_underline=False)
        para = markdown_to_ast("__bold__", options).children[0]
        assert isinstance(para.content[0], Strong)

    def test_inline_code(self) -> None:
        para = markdown_to_ast("Use `print()` here").children[0]
        code = [n for n in para.content if isinstance(n, Code)]
        assert code[0].content == "print()"

    def test_spoiler(self) -> None:
        para = markdown_to_ast("A >!secret!< here").children[0]
        assert Spoiler in inline_types(para)

    def test_extensions_can_be_disabled(self) -> None:
        options = MarkdownParserOptions(parse_strikethrough=False, parse_subscript=False)
        para = markdown_to_ast("~~deleted~~", options).children[0]
        assert Strikethrough not in inline_types(para)


@pytest.mark.unit
class TestLinks:
    def test_link(self) -> None:
        link = markdown_to_ast("[Typst](https://typst.app)").children[0].content[0]

        assert isinstance(link, Link)
        assert link.url == "https://typst.app"
        assert link.content[0].content == "Typst"

    def test_image_alt_in_content(self) -> None:
        image = markdown_to_ast("![diagram](img.png)").children[0].content[0]

        assert isinstance(image, Image)
        assert image.url == "img.png"
        assert image.content[0].content == "diagram"

    def test_bare_url_autolinked(self) -> None:
        para = markdown_to_ast("Visit https://example.com now").children[0]
        links = [n for n in para.content if isinstance(n, Link)]
        assert links[0].url == "https://example.com"

    def test_wiki_link(self) -> None:
        para = markdown_to_ast("See [[Home Page]].").children[0]
        wiki = [n for n in para.content if isinstance(n, WikiLink)][0]

        assert wiki.url == "Home Page"
        assert wiki.content == []

    def test_wiki_link_with_label(self) -> None:
        wiki = markdown_to_ast("[[Home|start here]]").children[0].content[0]

        assert isinstance(wiki, WikiLink)
        assert wiki.url == "Home"
        assert wiki.content[0].content == "start here"


@pytest.mark.unit
class TestBlocks:
    """Test block structures."""

    def test_fenced_code(self) -> None:
        block = markdown_to_ast("```rust\nfn main() {}\n```").children[0]

        assert isinstance(block, CodeBlock)
        assert block.language == "rust"
        assert block.content == "fn main() {}\n"

    def test_math_fenced_code_becomes_display_math(self) -> None:
        para = markdown_to_ast("```math\nx^2\n```").children[0]

        assert isinstance(para, Paragraph)
        assert isinstance(para.content[0], Math)
        assert para.content[0].display is True

    def test_math_fence_kept_as_code_when_disabled(self) -> None:
        options = MarkdownParserOptions(parse_math_code_blocks=False)
        assert isinstance(markdown_to_ast("```math\nx\n```", options).children[0], CodeBlock)

    def test_block_math(self) -> None:
        para = markdown_to_ast("$$\nE = mc^2\n$$").children[0]
        math = para.content[0]

        assert isinstance(math, Math)
        assert math.display is True
        assert math.content.strip() == "E = mc^2"

    def test_inline_math(self) -> None:
        para = markdown_to_ast("Inline $a+b$ math").children[0]
        math = [n for n in para.content if isinstance(n, Math)][0]

        assert math.display is False
        assert math.content == "a+b"

    def test_block_quote(self) -> None:
        quote = markdown_to_ast("> quoted").children[0]

        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)

    def test_multiline_quote(self) -> None:
        quote = markdown_to_ast(">>>\nFirst.\n\nSecond.\n>>>\n").children[0]

        assert isinstance(quote, BlockQuote)
        assert quote.multiline is True
        assert len(quote.children) == 2


@pytest.mark.unit
class TestAlerts:
    """Test GitHub-style alert quotes."""

    def test_alert_kind(self) -> None:
        alert = markdown_to_ast("> [!WARNING]\n> Be careful.").children[0]

        assert isinstance(alert, Alert)
        assert alert.kind == "warning"
        assert alert.title is None
        assert alert.children[0].content[0].content == "Be careful."

    def test_alert_custom_title(self) -> None:
        alert = markdown_to_ast("> [!note] Read me\n> Body.").children[0]

        assert isinstance(alert, Alert)
        assert alert.kind == "note"
        assert alert.title == "Read me"

    def test_unknown_marker_is_plain_quote(self) -> None:
        assert isinstance(markdown_to_ast("> [!DANGER]\n> x").children[0], BlockQuote)

    def test_alerts_disabled(self) -> None:
        options = MarkdownParserOptions(parse_alerts=False)
        assert isinstance(markdown_to_ast("> [!TIP]\n> x", options).children[0], BlockQuote)


@pytest.mark.unit
class TestLists:
    def test_bullet_list(self) -> None:
        lst = markdown_to_ast("- a\n- b").children[0]

        assert isinstance(lst, List)
        assert lst.ordered is False
        assert len(lst.items) == 2

    def test_ordered_start(self) -> None:
        lst = markdown_to_ast("3. x\n4. y").children[0]

        assert lst.ordered is True
        assert lst.start == 3

    def test_task_items(self) -> None:
        lst = markdown_to_ast("- [ ] todo\n- [x] done").children[0]
        statuses = [item.task_status for item in lst.items]

        assert statuses == ["unchecked", "checked"]
        assert lst.items[0].children[0].content[0].content == "todo"

    def test_nested_list(self) -> None:
        lst = markdown_to_ast("- a\n  - b").children[0]
        item = lst.items[0]

        assert isinstance(item, ListItem)
        assert isinstance(item.children[1], List)


@pytest.mark.unit
class TestTables:
    def test_table_structure(self) -> None:
        table = markdown_to_ast("| A | B |\n|:-:|--:|\n| 1 | 2 |\n| 3 | 4 |").children[0]

        assert isinstance(table, Table)
        assert table.num_columns == 2
        assert table.alignments == ["center", "right"]
        assert len(table.rows) == 3
        assert table.rows[0].is_header is True
        assert table.rows[1].is_header is False

    def test_short_row_kept(self) -> None:
        table = markdown_to_ast("| a | b |\n|---|---|\n| 1 |\n").children[0]

        assert isinstance(table, Table)
        assert table.num_columns == 2
        assert [len(row.cells) for row in table.rows] == [2, 1]

    def test_long_row_kept(self) -> None:
        table = markdown_to_ast("| a | b |\n|---|---|\n| 1 | 2 | 3 |\n").children[0]

        assert isinstance(table, Table)
        assert [len(row.cells) for row in table.rows] == [2, 3]
        assert table.rows[1].cells[2].children[0].content == "3"

    def test_rows_without_outer_pipes(self) -> None:
        table = markdown_to_ast("a | b\n--- | :---\n1 | 2\n").children[0]

        assert isinstance(table, Table)
        assert table.alignments == [None, "left"]
        assert len(table.rows) == 2

    def test_escaped_pipe_stays_in_cell(self) -> None:
        table = markdown_to_ast("| a | b |\n|---|---|\n| x \\| y | z |\n").children[0]
        assert len(table.rows[1].cells) == 2

    def test_delimiter_mismatch_is_not_a_table(self) -> None:
        doc = markdown_to_ast("| a | b |\n|---|\n| 1 | 2 |\n")
        assert not any(isinstance(n, Table) for n in doc.children)

    def test_tables_disabled(self) -> None:
        options = MarkdownParserOptions(parse_tables=False)
        doc = markdown_to_ast("| a | b |\n|---|---|\n| 1 | 2 |\n", options)
        assert isinstance(doc.children[0], Paragraph)


@pytest.mark.unit
class TestUnknownTokens:
    """Test the fallback for token types without a dedicated node."""

    def test_unknown_block_keeps_block_children(self) -> None:
        converter = MarkdownToAstConverter()
        node = converter._process_token(
            {
                "type": "custom_container",
                "children": [{"type": "paragraph", "children": [{"type": "text", "raw": "inside"}]}],
            }
        )

        assert isinstance(node, GenericBlock)
        assert node.metadata["type"] == "custom_container"
        assert isinstance(node.children[0], Paragraph)
        assert node.children[0].content[0].content == "inside"

    def test_unknown_block_with_inline_children_wraps_paragraph(self) -> None:
        node = MarkdownToAstConverter()._process_token(
            {"type": "custom_line", "children": [{"type": "strong", "children": [{"type": "text", "raw": "x"}]}]}
        )

        assert isinstance(node, GenericBlock)
        assert isinstance(node.children[0], Paragraph)
        assert isinstance(node.children[0].content[0], Strong)

    def test_unknown_block_raw_text(self) -> None:
        node = MarkdownToAstConverter()._process_token({"type": "custom_raw", "raw": "literal"})

        assert isinstance(node, GenericBlock)
        assert node.children[0].content[0].content == "literal"

    def test_empty_unknown_block_dropped(self) -> None:
        assert MarkdownToAstConverter()._process_token({"type": "custom_marker"}) is None

    def test_unknown_inline_keeps_children(self) -> None:
        node = MarkdownToAstConverter()._process_inline_token(
            {"type": "mark", "children": [{"type": "text", "raw": "hi"}, {"type": "codespan", "raw": "c"}]}
        )

        assert isinstance(node, GenericInline)
        assert node.metadata["type"] == "mark"
        assert [type(child) for child in node.content] == [Text, Code]

    def test_unknown_inline_raw_becomes_text(self) -> None:
        node = MarkdownToAstConverter()._process_inline_token({"type": "ruby", "raw": "漢字"})

        assert isinstance(node, Text)
        assert node.content == "漢字"

    def test_unknown_inline_without_content_dropped(self) -> None:
        assert MarkdownToAstConverter()._process_inline_token({"type": "marker"}) is None


@pytest.mark.unit
class TestFootnotes:
    def test_reference_and_definition_keys_match(self) -> None:
        doc = markdown_to_ast("Text[^note].\n\n[^note]: Content.")
        ref = [n for n in doc.children[0].content if isinstance(n, FootnoteReference)][0]
        definitions = [n for n in doc.children if isinstance(n, FootnoteDefinition)]

        assert len(definitions) == 1
        assert ref.identifier == definitions[0].identifier

    def test_footnotes_disabled(self) -> None:
        options = MarkdownParserOptions(parse_footnotes=False)
        doc = markdown_to_ast("Text[^1].\n\n[^1]: Content.", options)
        assert not any(isinstance(n, FootnoteDefinition) for n in doc.children)


@pytest.mark.unit
class TestDefinitionLists:
    def test_term_and_details(self) -> None:
        dl = markdown_to_ast("Term\n: Meaning\n").children[0]

        assert isinstance(dl, DescriptionList)
        item = dl.items[0]
        assert isinstance(item, DescriptionItem)
        assert isinstance(item.children[0], DescriptionTerm)
        assert isinstance(item.children[1], DescriptionDetails)

    def test_extra_definitions_become_details_only_items(self) -> None:
        dl = markdown_to_ast("Term\n: One\n: Two\n").children[0]

        assert len(dl.items) == 2
        assert all(isinstance(c, DescriptionDetails) for c in dl.items[1].children)
