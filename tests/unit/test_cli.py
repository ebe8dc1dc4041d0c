"""Unit tests for the md2typst command line."""

import io
from pathlib import Path

import pytest

from md2typst.cli import create_parser, main
from md2typst.cli import processors
from md2typst.cli.builder import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
    get_exit_code_for_exception,
)
from md2typst.cli.commands import dispatch_command, strip_convert_command
from md2typst.cli.commands.fonts import _format_size
from md2typst.cli.processors import (
    CJK_FONT_WARNING,
    CjkFontWarner,
    InputSource,
    build_pdf_options,
    resolve_force_toc,
    resolve_output_path,
    validate_output_for_inputs,
)
from md2typst.exceptions import (
    CompileError,
    DependencyError,
    FileError,
    FrontmatterError,
    Md2TypstError,
    OutputWriteError,
    StyleError,
    ValidationError,
)


@pytest.fixture
def fake_compile(monkeypatch):
    """Replace the Typst compiler with a stub that records its input."""
    calls = []

    def compile_stub(source, output_path=None):
        calls.append((source, output_path))
        pdf = b"%PDF-1.7 stub"
        if output_path is not None:
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            Path(output_path).write_bytes(pdf)
        return pdf

    monkeypatch.setattr(processors, "compile_typst_to_pdf", compile_stub)
    return calls


@pytest.mark.unit
@pytest.mark.cli
class TestArgumentParsing:
    """Test the argument parser."""

    def test_defaults(self) -> None:
        args = create_parser().parse_args([])

        assert args.inputs == []
        assert args.style == "modern-tech"
        assert args.custom_template is None
        assert args.toc is False
        assert args.no_toc is False
        assert args.watch is False
        assert args.watch_debounce == 0.5
        assert args.typst_only is False
        assert args.log_level == "WARNING"

    def test_short_flags(self) -> None:
        args = create_parser().parse_args(
            ["a.md", "-o", "out", "-s", "classic-editorial", "-t", "T", "-a", "A", "-w", "-v", "-q"]
        )

        assert args.inputs == ["a.md"]
        assert args.output == "out"
        assert args.style == "classic-editorial"
        assert args.title == "T"
        assert args.author == "A"
        assert args.watch is True
        assert args.verbose is True
        assert args.quiet is True

    def test_log_level_case_insensitive(self) -> None:
        assert create_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_unknown_style_rejected(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--style", "fancy"])

    def test_strip_convert_command(self) -> None:
        assert strip_convert_command(["convert", "a.md"]) == ["a.md"]
        assert strip_convert_command(["a.md"]) == ["a.md"]
        assert strip_convert_command([]) == []

    def test_dispatch_ignores_convert_arguments(self) -> None:
        assert dispatch_command(["a.md"]) is None
        assert dispatch_command([]) is None


@pytest.mark.unit
@pytest.mark.cli
class TestOptionBuilding:
    """Test translation of arguments into conversion options."""

    @pytest.mark.parametrize(
        "toc,no_toc,expected",
        [(False, False, None), (True, False, True), (False, True, False), (True, True, False)],
    )
    def test_resolve_force_toc(self, toc, no_toc, expected) -> None:
        assert resolve_force_toc(toc, no_toc) is expected

    def test_toc_and_no_toc_together_disable_toc(self) -> None:
        args = create_parser().parse_args(["--toc", "--no-toc", "doc.md"])

        assert args.toc is True
        assert args.no_toc is True
        assert build_pdf_options(args).force_toc is False

    def test_build_pdf_options(self) -> None:
        args = create_parser().parse_args(["--title", "T", "--lang", "zh", "--toc", "--template", "t.typ"])

        options = build_pdf_options(args)

        assert options.title_override == "T"
        assert options.lang_override == "zh"
        assert options.force_toc is True
        assert options.custom_template == "t.typ"
        assert options.style == "modern-tech"


@pytest.mark.unit
@pytest.mark.cli
class TestOutputPaths:
    """Test output path resolution."""

    def test_default_next_to_input(self) -> None:
        assert resolve_output_path(Path("docs/notes.md"), None, False) == Path("docs/notes.pdf")

    def test_explicit_output_file(self) -> None:
        assert resolve_output_path(Path("notes.md"), Path("out/x.pdf"), False) == Path("out/x.pdf")

    def test_output_directory_for_several_inputs(self) -> None:
        assert resolve_output_path(Path("a/notes.md"), Path("build"), True) == Path("build/notes.pdf")

    def test_stdin_default(self) -> None:
        assert resolve_output_path(None, None, False) == Path("output.pdf")

    def test_typst_suffix(self) -> None:
        assert resolve_output_path(Path("notes.md"), None, False, suffix=".typ") == Path("notes.typ")

    def test_several_inputs_reject_file_output(self) -> None:
        with pytest.raises(ValidationError, match="output directory"):
            validate_output_for_inputs("out.pdf", 2)

    def test_single_input_accepts_file_output(self) -> None:
        validate_output_for_inputs("out.pdf", 1)
        validate_output_for_inputs("build", 3)
        validate_output_for_inputs(None, 3)


@pytest.mark.unit
@pytest.mark.cli
class TestInputSource:
    """Test reading inputs."""

    def test_stdin_text(self) -> None:
        source = InputSource(text="# Hi")

        assert source.read() == "# Hi"
        assert source.label == "<stdin>"

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileError, match="read markdown failed"):
            InputSource(path=tmp_path / "missing.md").read()

    def test_invalid_utf8(self, tmp_path) -> None:
        path = tmp_path / "latin1.md"
        path.write_bytes(b"caf\xe9")
        with pytest.raises(FileError):
            InputSource(path=path).read()


@pytest.mark.unit
@pytest.mark.cli
class TestCjkFontWarner:
    """Test the missing CJK font warning."""

    def test_warns_once(self, isolated_home, capsys) -> None:
        warner = CjkFontWarner()

        warner.check("你好")
        warner.check("世界")

        assert capsys.readouterr().err.count(CJK_FONT_WARNING) == 1
        assert warner.warned is True

    def test_no_warning_for_latin(self, isolated_home, capsys) -> None:
        CjkFontWarner().check("hello")
        assert capsys.readouterr().err == ""

    def test_no_warning_with_user_fonts(self, isolated_home, capsys) -> None:
        font_dir = isolated_home / ".md2typst" / "fonts"
        font_dir.mkdir(parents=True)
        (font_dir / "NotoSansCJK.otf").write_bytes(b"")

        CjkFontWarner().check("你好")

        assert capsys.readouterr().err == ""

    def test_disabled(self, isolated_home, capsys) -> None:
        CjkFontWarner(enabled=False).check("你好")
        assert capsys.readouterr().err == ""


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test mapping of exceptions to exit codes."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (DependencyError("pdf", [("typst", ">=0.11.0")]), EXIT_DEPENDENCY_ERROR),
            (ImportError("x"), EXIT_DEPENDENCY_ERROR),
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (StyleError("fancy"), EXIT_VALIDATION_ERROR),
            (FileError("missing"), EXIT_FILE_ERROR),
            (FrontmatterError("bad yaml"), EXIT_PARSING_ERROR),
            (CompileError("boom"), EXIT_RENDERING_ERROR),
            (OutputWriteError("out.pdf"), EXIT_RENDERING_ERROR),
            (Md2TypstError("other"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, error, code) -> None:
        assert get_exit_code_for_exception(error) == code


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Test the main entry point end to end with the compiler stubbed out."""

    def test_typst_only(self, tmp_path, simple_markdown) -> None:
        source = tmp_path / "doc.md"
        source.write_text(simple_markdown, encoding="utf-8")

        assert main([str(source), "--typst-only"]) == 0

        typ = (tmp_path / "doc.typ").read_text(encoding="utf-8")
        assert '#article(title: "Simple", authors: ("Tester",)' in typ
        assert "= Hello" in typ

    def test_convert_prefix(self, tmp_path) -> None:
        source = tmp_path / "doc.md"
        source.write_text("# Hi", encoding="utf-8")

        assert main(["convert", str(source), "--typst-only"]) == 0
        assert (tmp_path / "doc.typ").exists()

    def test_pdf_written_next_to_input(self, tmp_path, fake_compile) -> None:
        source = tmp_path / "doc.md"
        source.write_text("# Hi", encoding="utf-8")

        assert main([str(source), "--title", "Override"]) == 0

        assert (tmp_path / "doc.pdf").read_bytes().startswith(b"%PDF-")
        compiled_source, output_path = fake_compile[0]
        assert '#article(title: "Override"' in compiled_source
        assert Path(output_path) == tmp_path / "doc.pdf"

    def test_several_inputs_into_directory(self, tmp_path, fake_compile) -> None:
        for name in ("a.md", "b.md"):
            (tmp_path / name).write_text(f"# {name}", encoding="utf-8")
        out_dir = tmp_path / "build"

        code = main([str(tmp_path / "a.md"), str(tmp_path / "b.md"), "-o", str(out_dir)])

        assert code == 0
        assert (out_dir / "a.pdf").exists()
        assert (out_dir / "b.pdf").exists()

    def test_several_inputs_with_file_output(self, tmp_path, capsys) -> None:
        code = main([str(tmp_path / "a.md"), str(tmp_path / "b.md"), "-o", str(tmp_path / "x.pdf")])

        assert code == EXIT_VALIDATION_ERROR
        assert "multiple input files require output directory path" in capsys.readouterr().err

    def test_stops_at_first_failure(self, tmp_path, fake_compile, capsys) -> None:
        (tmp_path / "b.md").write_text("# B", encoding="utf-8")
        out_dir = tmp_path / "build"

        code = main([str(tmp_path / "missing.md"), str(tmp_path / "b.md"), "-o", str(out_dir)])

        assert code == EXIT_FILE_ERROR
        assert "read markdown failed" in capsys.readouterr().err
        assert not (out_dir / "b.pdf").exists()

    def test_stdin(self, tmp_path, monkeypatch, fake_compile) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("# From stdin"))
        monkeypatch.chdir(tmp_path)

        assert main([]) == 0
        assert (tmp_path / "output.pdf").exists()

    def test_verbose_reports_written_file(self, tmp_path, capsys) -> None:
        source = tmp_path / "doc.md"
        source.write_text("# Hi", encoding="utf-8")

        assert main([str(source), "--typst-only", "-v"]) == 0
        assert "written" in capsys.readouterr().out

    def test_bad_frontmatter_exit_code(self, tmp_path) -> None:
        source = tmp_path / "doc.md"
        source.write_text("---\ntitle: [unclosed\n---\nbody", encoding="utf-8")

        assert main([str(source), "--typst-only"]) == EXIT_PARSING_ERROR

    def test_missing_template_exit_code(self, tmp_path) -> None:
        source = tmp_path / "doc.md"
        source.write_text("# Hi", encoding="utf-8")

        code = main([str(source), "--typst-only", "--template", str(tmp_path / "nope.typ")])

        assert code == EXIT_FILE_ERROR

    def test_watch_requires_inputs(self, capsys) -> None:
        assert main(["--watch"]) == EXIT_VALIDATION_ERROR
        assert "watch mode requires" in capsys.readouterr().err

    def test_compile_failure_exit_code(self, tmp_path, monkeypatch) -> None:
        def failing_compile(source, output_path=None):
            raise CompileError("unknown variable: foo")

        monkeypatch.setattr(processors, "compile_typst_to_pdf", failing_compile)
        source = tmp_path / "doc.md"
        source.write_text("# Hi", encoding="utf-8")

        assert main([str(source)]) == EXIT_RENDERING_ERROR


@pytest.mark.unit
@pytest.mark.cli
class TestFontsCommand:
    """Test the fonts subcommand."""

    def test_list_empty(self, isolated_home, capsys) -> None:
        assert main(["fonts", "list"]) == 0
        assert "No fonts found in" in capsys.readouterr().out

    def test_list_fonts(self, isolated_home, capsys) -> None:
        font_dir = isolated_home / ".md2typst" / "fonts"
        font_dir.mkdir(parents=True)
        (font_dir / "Inter.ttf").write_bytes(b"")

        assert main(["fonts", "list"]) == 0
        assert "Inter.ttf" in capsys.readouterr().out

    def test_missing_subcommand(self, isolated_home, capsys) -> None:
        assert main(["fonts"]) == EXIT_VALIDATION_ERROR
        assert "subcommand is required" in capsys.readouterr().err

    def test_unknown_subcommand(self, isolated_home) -> None:
        assert main(["fonts", "install"]) == 2

    def test_list_rich_table(self, isolated_home, capsys) -> None:
        pytest.importorskip("rich")
        font_dir = isolated_home / ".md2typst" / "fonts"
        font_dir.mkdir(parents=True)
        (font_dir / "Inter.ttf").write_bytes(b"x" * 2048)

        assert main(["fonts", "list", "--rich"]) == 0

        out = capsys.readouterr().out
        assert "Inter.ttf" in out
        assert "2.0 KB" in out

    def test_format_size(self) -> None:
        assert _format_size(512) == "512 B"
        assert _format_size(1536) == "1.5 KB"
        assert _format_size(3 * 1024 * 1024) == "3.0 MB"

