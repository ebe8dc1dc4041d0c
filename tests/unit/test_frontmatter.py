"""Unit tests for YAML frontmatter splitting."""

import pytest

from md2typst.exceptions import FrontmatterError, ParsingError
from md2typst.parsers.frontmatter import FrontMatter, split_frontmatter


@pytest.mark.unit
class TestSplitFrontmatter:
    """Test splitting the frontmatter block from the body."""

    def test_no_frontmatter(self) -> None:
        parsed = split_frontmatter("# Title\n\nBody")

        assert parsed.frontmatter == FrontMatter()
        assert parsed.body == "# Title\n\nBody"

    def test_basic_fields(self) -> None:
        text = "---\ntitle: Demo\nauthor: Ada\nlang: en\ntoc: true\n---\n# Hello\n"
        parsed = split_frontmatter(text)

        assert parsed.frontmatter.title == "Demo"
        assert parsed.frontmatter.author == "Ada"
        assert parsed.frontmatter.lang == "en"
        assert parsed.frontmatter.toc is True
        assert parsed.body.startswith("# Hello")

    def test_authors_list(self) -> None:
        parsed = split_frontmatter("---\nauthors:\n  - Ada\n  - Grace\n---\nbody")
        assert parsed.frontmatter.authors == ["Ada", "Grace"]

    def test_scalar_authors_coerced_to_list(self) -> None:
        parsed = split_frontmatter("---\nauthors: Ada\n---\nbody")
        assert parsed.frontmatter.authors == ["Ada"]

    def test_bom_is_stripped(self) -> None:
        parsed = split_frontmatter("\ufeff---\ntitle: BOM\n---\nbody")

        assert parsed.frontmatter.title == "BOM"
        assert parsed.body.strip() == "body"

    def test_empty_block(self) -> None:
        parsed = split_frontmatter("---\n---\nbody")

        assert parsed.frontmatter == FrontMatter()
        assert parsed.body.strip() == "body"

    def test_opening_line_must_be_exact(self) -> None:
        parsed = split_frontmatter("--- \ntitle: x\n---\nbody")
        assert parsed.frontmatter.title is None

    def test_unknown_keys_kept_as_extra(self) -> None:
        parsed = split_frontmatter("---\ntitle: T\ndate: 2025-01-01\n---\n")
        assert "date" in parsed.frontmatter.extra


@pytest.mark.unit
class TestFrontmatterErrors:
    """Test malformed frontmatter."""

    def test_missing_closing_line(self) -> None:
        with pytest.raises(FrontmatterError, match="frontmatter must have opening and closing ---"):
            split_frontmatter("---\ntitle: Demo\n# Hello")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(FrontmatterError, match="yaml parse error"):
            split_frontmatter("---\ntitle: [unclosed\n---\nbody")

    def test_non_mapping_yaml(self) -> None:
        with pytest.raises(FrontmatterError):
            split_frontmatter("---\n- a\n- b\n---\nbody")

    def test_is_parsing_error(self) -> None:
        with pytest.raises(ParsingError):
            split_frontmatter("---\nunterminated")


@pytest.mark.unit
class TestFrontMatterFromDict:
    def test_non_bool_toc_rejected(self) -> None:
        with pytest.raises(FrontmatterError):
            FrontMatter.from_dict({"toc": "yes please"})

    def test_defaults(self) -> None:
        fm = FrontMatter.from_dict({})
        assert fm.title is None
        assert fm.authors == []
        assert fm.toc is None
