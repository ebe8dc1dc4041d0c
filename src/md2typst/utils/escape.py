#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/utils/escape.py
"""Typst-specific text escaping utilities.

This module provides the escape functions used by the Typst renderer and
the template composer so that user text never turns into Typst markup,
function calls or math by accident.

"""

from __future__ import annotations

from md2typst.constants import BLOCK_FENCE_MIN

# Characters that start markup, code, math or raw spans in Typst content
_TYPST_SPECIAL_CHARS = {
    "\\": "\\\\",
    "#": "\\#",
    "[": "\\[",
    "]": "\\]",
    "{": "\\{",
    "}": "\\}",
    "*": "\\*",
    "_": "\\_",
    "$": "\\$",
    "`": "\\`",
}

_TEXT_TRANSLATION = str.maketrans(_TYPST_SPECIAL_CHARS)


def escape_text(text: str) -> str:
    r"""Escape special Typst characters in text content.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for Typst markup mode

    Examples
    --------
        >>> escape_text("Price: $5 #1")
        'Price: \\$5 \\#1'
        >>> escape_text("a_b*c")
        'a\\_b\\*c'

    """
    if not text:
        return text
    return text.translate(_TEXT_TRANSLATION)


def escape_string(text: str) -> str:
    r"""Escape text for use inside a Typst string literal.

    Parameters
    ----------
    text : str
        Text to place between double quotes

    Returns
    -------
    str
        Text with backslashes and double quotes escaped

    Examples
    --------
        >>> escape_string('say "hi"')
        'say \\"hi\\"'

    """
    return text.replace("\\", "\\\\").replace('"', '\\"')


def escape_template_string(text: str) -> str:
    """Escape text for a Typst string literal in template arguments.

    Same as :func:`escape_string` but newlines become spaces, since
    metadata values are always single-line.

    """
    return escape_string(text).replace("\n", " ")


def escape_inline_code(code: str) -> str:
    r"""Escape backslashes and backticks inside an inline raw span.

    Examples
    --------
        >>> escape_inline_code("a`b")
        'a\\`b'

    """
    return code.replace("\\", "\\\\").replace("`", "\\`")


def backtick_fence(text: str, minimum: int = BLOCK_FENCE_MIN) -> str:
    """Compute a backtick fence that cannot collide with the enclosed text.

    Parameters
    ----------
    text : str
        Text that will be wrapped by the fence
    minimum : int, default 3
        Minimum fence length

    Returns
    -------
    str
        A run of backticks one longer than the longest run in ``text``,
        and never shorter than ``minimum``

    Examples
    --------
        >>> backtick_fence("no ticks", 3)
        '```'
        >>> backtick_fence("has ```` four", 3)
        '`````'
        >>> backtick_fence("x", 1)
        '`'

    """
    longest = 0
    current = 0

    for char in text:
        if char == "`":
            current += 1
            longest = max(longest, current)
        else:
            current = 0

    return "`" * max(longest + 1, minimum)
