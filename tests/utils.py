"""Test utilities for the md2typst test suite.

Helpers for temporary directories, running the CLI as a subprocess and
sanity-checking generated Typst markup.
"""

import os
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

PDF_MAGIC = b"%PDF-"


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp(prefix="md2typst_test_"))


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def run_cli(
    args: list[str],
    cwd: Path | None = None,
    stdin: str | None = None,
    env_home: Path | None = None,
) -> subprocess.CompletedProcess:
    """Run ``python -m md2typst`` with the source tree importable.

    ``env_home`` replaces the home directory so the user font directory is
    isolated from the machine running the tests.
    """
    env = dict(os.environ)
    if env_home is not None:
        env["HOME"] = str(env_home)
        env["USERPROFILE"] = str(env_home)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT / "src"), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "md2typst", *args],
        cwd=cwd or PROJECT_ROOT,
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
    )


def assert_balanced_markup(typst: str) -> None:
    """Assert that content brackets and parentheses pair up.

    Escaped characters, raw spans and fenced raw blocks are skipped, as are
    string literals.
    """
    stack: list[str] = []
    pairs = {"]": "[", ")": "("}
    in_fence = False

    for line_no, line in enumerate(typst.split("\n"), start=1):
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        i = 0
        in_raw = False
        in_string = False
        while i < len(line):
            char = line[i]
            if char == "\\":
                i += 2
                continue
            if char == "`" and not in_string:
                in_raw = not in_raw
            elif char == '"' and not in_raw:
                in_string = not in_string
            elif not in_raw and not in_string:
                if char in "[(":
                    stack.append(char)
                elif char in pairs:
                    assert stack and stack[-1] == pairs[char], f"unbalanced {char!r} on line {line_no}: {line}"
                    stack.pop()
            i += 1

    assert not stack, f"unclosed {''.join(stack)!r}"
