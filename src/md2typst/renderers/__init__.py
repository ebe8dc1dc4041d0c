#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2typst/renderers/__init__.py
"""AST renderers.

- TypstRenderer: Render the AST to Typst markup

Examples
--------
    >>> from md2typst.ast import Document, Heading, Text
    >>> from md2typst.renderers import TypstRenderer
    >>> doc = Document(children=[Heading(level=2, content=[Text(content="Title")])])
    >>> TypstRenderer().render_to_string(doc)
    '== Title\\n'

"""

from md2typst.renderers.base import BaseRenderer
from md2typst.renderers.typst import TypstRenderer

__all__ = ["BaseRenderer", "TypstRenderer"]
