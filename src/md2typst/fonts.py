#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/fonts.py
"""Font directory discovery.

Typst only sees the fonts it is pointed at. md2typst passes it the user font
directory (``~/.md2typst/fonts``) together with the platform's system font
directories. The list is computed once per process.

"""

from __future__ import annotations

import logging
import os
import sys
from functools import lru_cache
from pathlib import Path

from md2typst.constants import CJK_FONT_RANGES, FONT_FILE_EXTENSIONS

logger = logging.getLogger(__name__)

USER_FONT_SUBDIR = Path(".md2typst") / "fonts"


def user_font_dir() -> Path:
    """Return the per-user font directory (which may not exist yet)."""
    return Path.home() / USER_FONT_SUBDIR


def system_font_dirs() -> list[Path]:
    """Return the conventional system font directories for this platform.

    Directories are returned whether or not they exist.

    """
    dirs: list[Path] = []
    home = Path.home()

    if sys.platform == "darwin":
        dirs.extend([Path("/System/Library/Fonts"), Path("/Library/Fonts"), home / "Library" / "Fonts"])
    elif sys.platform.startswith("win"):
        windir = os.environ.get("WINDIR")
        if windir:
            dirs.append(Path(windir) / "Fonts")
        local = os.environ.get("LOCALAPPDATA")
        if local:
            dirs.append(Path(local) / "Microsoft" / "Windows" / "Fonts")
    else:
        dirs.extend(
            [
                Path("/usr/share/fonts"),
                Path("/usr/local/share/fonts"),
                home / ".local" / "share" / "fonts",
                home / ".fonts",
            ]
        )

    return dirs


def list_user_font_files(directory: Path | None = None) -> list[Path]:
    """List ``.otf`` and ``.ttf`` files under a font directory.

    Parameters
    ----------
    directory : Path or None, default None
        Directory to scan recursively; defaults to :func:`user_font_dir`

    Returns
    -------
    list of Path
        Sorted font file paths; empty when the directory does not exist

    """
    directory = directory or user_font_dir()
    if not directory.is_dir():
        return []

    return sorted(
        path for path in directory.rglob("*") if path.is_file() and path.suffix.lower() in FONT_FILE_EXTENSIONS
    )


def user_font_dir_has_font_files() -> bool:
    return bool(list_user_font_files())


def contains_cjk_char(text: str) -> bool:
    """Check whether text contains CJK ideographs, kana, hangul or CJK punctuation.

    Examples
    --------
        >>> contains_cjk_char("hello")
        False
        >>> contains_cjk_char("你好")
        True

    """
    for char in text:
        code = ord(char)
        for low, high in CJK_FONT_RANGES:
            if low <= code <= high:
                return True
    return False


@lru_cache(maxsize=1)
def discover_font_paths() -> tuple[str, ...]:
    """Return the existing font directories handed to the Typst compiler.

    The user font directory comes first. The result is cached for the
    lifetime of the process.

    """
    candidates = [user_font_dir(), *system_font_dirs()]
    paths = tuple(str(path) for path in candidates if path.is_dir())
    logger.debug(f"Font directories: {list(paths)}")
    return paths
