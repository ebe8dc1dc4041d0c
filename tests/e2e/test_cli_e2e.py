"""End-to-end tests for the md2typst command line.

The CLI is run as a subprocess exactly as a user would run it.
"""

import pytest
from utils import cleanup_test_dir, create_test_temp_dir, run_cli


@pytest.mark.e2e
@pytest.mark.cli
class TestCLIEndToEnd:
    """End-to-end tests that do not need the Typst compiler."""

    def setup_method(self):
        """Create a scratch directory."""
        self.temp_dir = create_test_temp_dir()

    def teardown_method(self):
        """Remove the scratch directory."""
        cleanup_test_dir(self.temp_dir)

    def test_help(self):
        result = run_cli(["--help"])

        assert result.returncode == 0
        assert "--typst-only" in result.stdout
        assert "modern-tech" in result.stdout

    def test_version(self):
        result = run_cli(["--version"])

        assert result.returncode == 0
        assert result.stdout.startswith("md2typst ")

    def test_typst_only_file(self):
        source = self.temp_dir / "report.md"
        source.write_text("---\ntitle: Report\n---\n# Findings\n\nAll good.\n", encoding="utf-8")

        result = run_cli([str(source), "--typst-only", "--style", "classic-editorial"])

        assert result.returncode == 0, result.stderr
        output = (self.temp_dir / "report.typ").read_text(encoding="utf-8")
        assert '#article(title: "Report"' in output
        assert "= Findings" in output

    def test_stdin_to_typst(self):
        result = run_cli(["--typst-only"], cwd=self.temp_dir, stdin="# From stdin\n")

        assert result.returncode == 0, result.stderr
        assert "= From stdin" in (self.temp_dir / "output.typ").read_text(encoding="utf-8")

    def test_several_inputs_into_directory(self):
        inputs = []
        for name in ("one", "two"):
            path = self.temp_dir / f"{name}.md"
            path.write_text(f"# {name}\n", encoding="utf-8")
            inputs.append(str(path))
        out_dir = self.temp_dir / "build"

        result = run_cli(["convert", *inputs, "-o", str(out_dir), "--typst-only"])

        assert result.returncode == 0, result.stderr
        assert (out_dir / "one.typ").exists()
        assert (out_dir / "two.typ").exists()

    def test_missing_input(self):
        result = run_cli([str(self.temp_dir / "missing.md"), "--typst-only"])

        assert result.returncode == 4
        assert "Error:" in result.stderr

    def test_unknown_style(self):
        result = run_cli([str(self.temp_dir / "x.md"), "--style", "fancy"])
        assert result.returncode == 2

    def test_cjk_warning(self):
        source = self.temp_dir / "zh.md"
        source.write_text("# 你好\n", encoding="utf-8")
        home = self.temp_dir / "home"
        home.mkdir()

        result = run_cli([str(source), "--typst-only"], env_home=home)

        assert result.returncode == 0, result.stderr
        assert "CJK characters detected" in result.stderr
        assert 'lang: "zh"' in (self.temp_dir / "zh.typ").read_text(encoding="utf-8")
