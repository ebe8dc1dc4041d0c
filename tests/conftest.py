"""Pytest configuration and shared fixtures for the md2typst test suite."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample Markdown documents."""
    return FIXTURES_DIR


@pytest.fixture
def basic_markdown() -> str:
    """Sample document exercising frontmatter, TOC, tasks, tables and code."""
    return (FIXTURES_DIR / "basic.md").read_text(encoding="utf-8")


@pytest.fixture
def simple_markdown() -> str:
    """Short document without math or CJK text."""
    return (FIXTURES_DIR / "simple.md").read_text(encoding="utf-8")


@pytest.fixture
def isolated_home(tmp_path, monkeypatch) -> Path:
    """Point the home directory at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home
