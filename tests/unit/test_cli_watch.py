"""Unit tests for watch mode event handling."""

from types import SimpleNamespace

import pytest

from md2typst.cli.watch import MarkdownChangeHandler
from md2typst.options import PdfOptions


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_event(event_type, src_path, dest_path=None, is_directory=False):
    return SimpleNamespace(
        event_type=event_type,
        src_path=str(src_path),
        dest_path=str(dest_path) if dest_path is not None else "",
        is_directory=is_directory,
    )


@pytest.fixture
def markdown_file(tmp_path):
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n\nFirst draft.", encoding="utf-8")
    return path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def handler(markdown_file, clock):
    return MarkdownChangeHandler([markdown_file], PdfOptions(), typst_only=True, debounce_seconds=0.5, clock=clock)


@pytest.mark.unit
@pytest.mark.cli
class TestMarkdownChangeHandler:
    """Test rebuild decisions for filesystem events."""

    def test_modified_event_rebuilds(self, handler, markdown_file) -> None:
        handler.dispatch(make_event("modified", markdown_file))

        output = markdown_file.with_suffix(".typ")
        assert output.exists()
        assert "= Notes" in output.read_text(encoding="utf-8")

    def test_moved_event_uses_destination(self, handler, markdown_file, tmp_path) -> None:
        handler.dispatch(make_event("moved", tmp_path / "notes.md.tmp", markdown_file))
        assert markdown_file.with_suffix(".typ").exists()

    def test_untracked_file_ignored(self, handler, markdown_file, tmp_path) -> None:
        other = tmp_path / "other.md"
        other.write_text("# Other", encoding="utf-8")

        handler.dispatch(make_event("modified", other))

        assert not other.with_suffix(".typ").exists()
        assert not markdown_file.with_suffix(".typ").exists()

    def test_directory_and_deleted_events_ignored(self, handler, markdown_file) -> None:
        handler.dispatch(make_event("modified", markdown_file, is_directory=True))
        handler.dispatch(make_event("deleted", markdown_file))

        assert not markdown_file.with_suffix(".typ").exists()

    def test_debounce(self, handler, markdown_file, clock) -> None:
        assert handler.rebuild(markdown_file) is True
        output = markdown_file.with_suffix(".typ")
        output.unlink()

        clock.now += 0.2
        handler.dispatch(make_event("modified", markdown_file))
        assert not output.exists()

        clock.now += 0.5
        handler.dispatch(make_event("modified", markdown_file))
        assert output.exists()

    def test_should_rebuild_skips_during_build(self, handler, markdown_file) -> None:
        handler._building.add(markdown_file.resolve())
        assert handler.should_rebuild(markdown_file) is False

    def test_failure_is_logged_not_raised(self, handler, markdown_file, caplog) -> None:
        markdown_file.write_text("---\ntitle: [broken\n---\n", encoding="utf-8")

        assert handler.rebuild(markdown_file) is False
        assert "[watch] failed" in caplog.text

    def test_failure_still_starts_debounce(self, handler, markdown_file) -> None:
        markdown_file.unlink()

        assert handler.rebuild(markdown_file) is False
        assert handler.should_rebuild(markdown_file) is False

    def test_several_files_use_output_directory(self, tmp_path, clock) -> None:
        first = tmp_path / "a.md"
        second = tmp_path / "b.md"
        first.write_text("# A", encoding="utf-8")
        second.write_text("# B", encoding="utf-8")
        out_dir = tmp_path / "build"
        handler = MarkdownChangeHandler(
            [first, second], PdfOptions(), output=out_dir, typst_only=True, clock=clock
        )

        handler.dispatch(make_event("created", second))

        assert (out_dir / "b.typ").exists()
        assert not (out_dir / "a.typ").exists()

    def test_verbose_prints_update(self, markdown_file, clock, capsys) -> None:
        handler = MarkdownChangeHandler([markdown_file], PdfOptions(), typst_only=True, verbose=True, clock=clock)

        handler.rebuild(markdown_file)

        assert "[watch] updated" in capsys.readouterr().out
