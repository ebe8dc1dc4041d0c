#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2typst.

This module centralizes hardcoded values used across the conversion
pipeline so that the parser, renderer, template and CLI layers agree on
them.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Table of Contents - Inline marker and sentinel token
3. Typst Markup - Fixed directives emitted by the renderer
4. Metadata Defaults - Language detection and alert titles
5. Dependencies - Optional package requirements
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Alignment = Literal["left", "center", "right"]
AlertKind = Literal["note", "tip", "important", "warning", "caution"]
TaskStatus = Literal["checked", "unchecked"]
StyleName = Literal["modern-tech", "classic-editorial"]

# =============================================================================
# Table of Contents
# =============================================================================

# Literal marker a user writes on its own line to request an inline outline
TOC_MARKER = "[toc]"

# Replaces TOC_MARKER before parsing; must survive the parser as plain text
TOC_TOKEN = "MD2TYPSTTOCPLACEHOLDER7f3a"

# =============================================================================
# Typst Markup
# =============================================================================

TYPST_OUTLINE = "\n#outline()\n"
TYPST_HORIZONTAL_RULE = "#line(length: 100%, stroke: 0.5pt)"
TYPST_LINE_BREAK = "\\\n"
TYPST_HEADING_MARKER = "="
TYPST_BULLET = "- "
TYPST_INDENT = "  "
TASK_CHECKED = "[x] "
TASK_UNCHECKED = "[ ] "

BLOCK_FENCE_MIN = 3
INLINE_FENCE_MIN = 1

DEFAULT_IMAGE_LABEL = "image"
DEFAULT_WIKILINK_LABEL = "wiki"

# =============================================================================
# Metadata Defaults
# =============================================================================

DEFAULT_LANG = "en"
CJK_LANG = "zh"

# CJK Unified Ideographs block used for language detection
CJK_IDEOGRAPH_RANGE = (0x4E00, 0x9FFF)

# Ranges used for the missing-font warning (ideographs, kana, hangul, punctuation)
CJK_FONT_RANGES = (
    (0x4E00, 0x9FFF),
    (0x3040, 0x309F),
    (0x30A0, 0x30FF),
    (0xAC00, 0xD7AF),
    (0x3000, 0x303F),
)

DEFAULT_ALERT_TITLES: dict[str, str] = {
    "note": "Note",
    "tip": "Tip",
    "important": "Important",
    "warning": "Warning",
    "caution": "Caution",
}

DEFAULT_STYLE: StyleName = "modern-tech"

FONT_FILE_EXTENSIONS = (".otf", ".ttf")
SYSTEM_FONT_FILE_EXTENSIONS = (".otf", ".ttf", ".otc", ".ttc")

MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd", ".mkdn")

# =============================================================================
# Dependencies
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_FRONTMATTER = [("PyYAML", "yaml", ">=5.1")]
DEPS_COMPILE = [("typst", "typst", ">=0.11.0")]
DEPS_WATCH = [("watchdog", "watchdog", ">=3.0.0")]
DEPS_RICH = [("rich", "rich", ">=13.0.0")]
