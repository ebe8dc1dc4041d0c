#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typst/utils/math.py
"""LaTeX math to Typst math translation.

Markdown documents write formulas in LaTeX (``$E = mc^2$``); Typst has its
own math syntax (``$E = m c^2$``). This module parses the LaTeX source with
pylatexenc and rewrites the node tree into Typst math markup.

The translation is best-effort: :func:`latex_to_typst` never raises. When
the LaTeX cannot be interpreted, the trimmed input is returned unchanged and
a DEBUG message is logged, so a document with one exotic formula still
compiles everything else.

Examples
--------
    >>> latex_to_typst(r"\\frac{1}{\\sqrt{n+1}}")
    'frac(1, sqrt(n + 1))'
    >>> latex_to_typst(r"\\alpha + \\beta")
    'alpha + beta'

"""

from __future__ import annotations

import logging
import re
from typing import Any, Sequence

logger = logging.getLogger(__name__)

# Macros that translate to a fixed Typst symbol or operator name
SYMBOL_MACROS: dict[str, str] = {
    # Greek, lowercase
    "alpha": "alpha",
    "beta": "beta",
    "gamma": "gamma",
    "delta": "delta",
    "epsilon": "epsilon.alt",
    "varepsilon": "epsilon",
    "zeta": "zeta",
    "eta": "eta",
    "theta": "theta",
    "vartheta": "theta.alt",
    "iota": "iota",
    "kappa": "kappa",
    "lambda": "lambda",
    "mu": "mu",
    "nu": "nu",
    "xi": "xi",
    "pi": "pi",
    "varpi": "pi.alt",
    "rho": "rho",
    "varrho": "rho.alt",
    "sigma": "sigma",
    "varsigma": "sigma.alt",
    "tau": "tau",
    "upsilon": "upsilon",
    "phi": "phi.alt",
    "varphi": "phi",
    "chi": "chi",
    "psi": "psi",
    "omega": "omega",
    # Greek, uppercase
    "Gamma": "Gamma",
    "Delta": "Delta",
    "Theta": "Theta",
    "Lambda": "Lambda",
    "Xi": "Xi",
    "Pi": "Pi",
    "Sigma": "Sigma",
    "Upsilon": "Upsilon",
    "Phi": "Phi",
    "Psi": "Psi",
    "Omega": "Omega",
    # Big operators
    "sum": "sum",
    "prod": "product",
    "coprod": "product.co",
    "int": "integral",
    "iint": "integral.double",
    "iiint": "integral.triple",
    "oint": "integral.cont",
    "bigcup": "union.big",
    "bigcap": "sect.big",
    # Binary operators
    "pm": "plus.minus",
    "mp": "minus.plus",
    "times": "times",
    "div": "div",
    "cdot": "dot.op",
    "ast": "ast",
    "star": "star",
    "circ": "∘",
    "bullet": "bullet",
    "oplus": "plus.circle",
    "otimes": "times.circle",
    "cup": "union",
    "cap": "sect",
    "setminus": "without",
    "wedge": "and",
    "land": "and",
    "vee": "or",
    "lor": "or",
    # Relations
    "leq": "lt.eq",
    "le": "lt.eq",
    "geq": "gt.eq",
    "ge": "gt.eq",
    "neq": "eq.not",
    "ne": "eq.not",
    "ll": "lt.double",
    "gg": "gt.double",
    "approx": "approx",
    "equiv": "equiv",
    "sim": "tilde.op",
    "simeq": "tilde.eq",
    "cong": "tilde.equiv",
    "propto": "prop",
    "in": "in",
    "notin": "in.not",
    "ni": "in.rev",
    "subset": "subset",
    "subseteq": "subset.eq",
    "supset": "supset",
    "supseteq": "supset.eq",
    "mid": "∣",
    "parallel": "parallel",
    "perp": "perp",
    # Arrows
    "to": "arrow.r",
    "rightarrow": "arrow.r",
    "leftarrow": "arrow.l",
    "gets": "arrow.l",
    "leftrightarrow": "arrow.l.r",
    "Rightarrow": "arrow.r.double",
    "Leftarrow": "arrow.l.double",
    "Leftrightarrow": "arrow.l.r.double",
    "iff": "arrow.l.r.double.long",
    "implies": "arrow.r.double.long",
    "longrightarrow": "arrow.r.long",
    "longleftarrow": "arrow.l.long",
    "mapsto": "arrow.r.bar",
    "uparrow": "arrow.t",
    "downarrow": "arrow.b",
    "hookrightarrow": "arrow.r.hook",
    # Miscellaneous symbols
    "infty": "infinity",
    "partial": "diff",
    "nabla": "nabla",
    "forall": "forall",
    "exists": "exists",
    "nexists": "exists.not",
    "emptyset": "∅",
    "varnothing": "∅",
    "neg": "not",
    "lnot": "not",
    "ell": "ell",
    "hbar": "ħ",
    "aleph": "aleph",
    "Re": "Re",
    "Im": "Im",
    "prime": "prime",
    "angle": "angle",
    "therefore": "therefore",
    "because": "because",
    "ldots": "dots.h",
    "dots": "dots.h",
    "cdots": "dots.h.c",
    "vdots": "dots.v",
    "ddots": "dots.down",
    "langle": "angle.l",
    "rangle": "angle.r",
    "lceil": "ceil.l",
    "rceil": "ceil.r",
    "lfloor": "floor.l",
    "rfloor": "floor.r",
    "vert": "|",
    "lvert": "|",
    "rvert": "|",
    "Vert": "‖",
    "lVert": "‖",
    "rVert": "‖",
    "|": "‖",
    # Spacing
    "quad": "quad",
    "qquad": "wide",
    ",": "thin",
    ":": "med",
    ";": "med",
    " ": "space",
    # Escaped characters
    "{": "\\{",
    "}": "\\}",
    "%": "%",
    "$": "\\$",
    "#": "\\#",
    "&": "\\&",
    "_": "\\_",
}

# Upright operator names that Typst knows by the same name
OPERATOR_NAMES = frozenset(
    {
        "sin", "cos", "tan", "cot", "sec", "csc", "arcsin", "arccos", "arctan",
        "sinh", "cosh", "tanh", "coth", "log", "ln", "lg", "exp", "lim", "limsup",
        "liminf", "max", "min", "sup", "inf", "det", "deg", "dim", "gcd", "ker",
        "arg", "hom", "mod", "Pr",
    }
)  # fmt: skip

# One-argument macros that become a Typst function call
UNARY_FUNCTIONS: dict[str, str] = {
    "hat": "hat",
    "widehat": "hat",
    "tilde": "tilde",
    "widetilde": "tilde",
    "bar": "macron",
    "overline": "overline",
    "underline": "underline",
    "vec": "arrow",
    "dot": "dot",
    "ddot": "dot.double",
    "check": "caron",
    "breve": "breve",
    "acute": "acute",
    "grave": "grave",
    "overbrace": "overbrace",
    "underbrace": "underbrace",
    "mathbf": "bold",
    "boldsymbol": "bold",
    "bm": "bold",
    "mathit": "italic",
    "mathrm": "upright",
    "mathcal": "cal",
    "mathscr": "scr",
    "mathfrak": "frak",
    "mathsf": "sans",
    "mathtt": "mono",
    "abs": "abs",
    "norm": "norm",
}

# Two-argument macros that become a Typst function call
BINARY_FUNCTIONS: dict[str, str] = {
    "frac": "frac",
    "dfrac": "frac",
    "tfrac": "frac",
    "cfrac": "frac",
    "binom": "binom",
    "dbinom": "binom",
    "tbinom": "binom",
}

# Macros whose argument is literal text
TEXT_MACROS = frozenset({"text", "textrm", "textit", "textbf", "textsf", "texttt", "mbox", "mathop"})

# Size and style hints with no Typst counterpart
IGNORED_MACROS = frozenset(
    {
        "displaystyle", "textstyle", "scriptstyle", "limits", "nolimits", "big", "Big",
        "bigg", "Bigg", "bigl", "bigr", "Bigl", "Bigr", "biggl", "biggr", "!", "nonumber",
        "notag",
    }
)  # fmt: skip

# Double-struck letters Typst exposes as doubled-letter symbols
DOUBLE_STRUCK_SYMBOLS = frozenset("NZQRC")

MATRIX_DELIMITERS: dict[str, str | None] = {
    "matrix": "#none",
    "smallmatrix": "#none",
    "pmatrix": None,
    "bmatrix": '"["',
    "Bmatrix": '"{"',
    "vmatrix": '"|"',
    "Vmatrix": '"||"',
}

# Environments whose first group is a column specification
COLUMN_SPEC_ENVIRONMENTS = frozenset({"array", "alignat", "alignat*", "tabular"})

# Characters that change meaning between LaTeX and Typst math
_CHAR_MAP = {
    "/": "\\/",
    '"': '\\"',
    "#": "\\#",
    "$": "\\$",
    "@": "\\@",
}

_SIMPLE_SCRIPT = re.compile(r"^[A-Za-z0-9.]+$|^\S$")

# Closing tokens that attach to the preceding atom without a space
_GLUE_BEFORE = (")", "]", "\\}", ",", ";", "!", "'")
_GLUE_AFTER = ("(", "[", "\\{")


def latex_to_typst(literal: str) -> str:
    r"""Translate a LaTeX math literal into Typst math syntax.

    Parameters
    ----------
    literal : str
        LaTeX math source without the surrounding ``$`` delimiters

    Returns
    -------
    str
        Typst math source. Empty input yields ``""``. If the input cannot be
        translated, or pylatexenc is not installed, the trimmed literal is
        returned unchanged.

    Examples
    --------
        >>> latex_to_typst("E = mc^2")
        'E = m c^2'
        >>> latex_to_typst(r"\mathbb{R}")
        'RR'

    """
    trimmed = literal.strip()
    if not trimmed:
        return ""

    try:
        from pylatexenc import latexwalker
    except ImportError:
        logger.debug("pylatexenc is not installed; math is passed through as LaTeX")
        return trimmed

    try:
        # unbalanced groups and missing arguments raise here
        nodes, _, _ = latexwalker.LatexWalker(trimmed, tolerant_parsing=False).get_latex_nodes(pos=0)
        result = LatexToTypstTranslator(latexwalker).translate(nodes)
    except Exception as e:
        logger.debug(f"Math translation failed, keeping LaTeX source: {e}")
        return trimmed

    if not result:
        logger.debug(f"Math translation produced no output, keeping LaTeX source: {trimmed!r}")
        return trimmed
    return result


class LatexToTypstTranslator:
    """Rewrite a pylatexenc node list into Typst math markup.

    The node list is first flattened into a stream of items where character
    nodes are split into single characters, since LaTeX arguments and
    scripts bind to single tokens (``x^23`` is ``x^2`` followed by ``3``).
    The stream is then walked left to right producing atoms, which are
    joined with spaces so that adjacent letters never fuse into a
    multi-letter Typst identifier.

    Parameters
    ----------
    walker_module : module
        The ``pylatexenc.latexwalker`` module providing the node classes

    """

    def __init__(self, walker_module: Any):
        """Bind the pylatexenc node classes used for dispatch."""
        self._nodes = walker_module

    def translate(self, nodes: Sequence[Any] | None) -> str:
        """Translate a list of pylatexenc nodes."""
        return self._translate_items(self._expand(nodes))

    def _expand(self, nodes: Sequence[Any] | None) -> list[Any]:
        items: list[Any] = []
        for node in nodes or []:
            if node is None or isinstance(node, self._nodes.LatexCommentNode):
                continue
            if isinstance(node, self._nodes.LatexCharsNode):
                items.extend(node.chars)
            else:
                items.append(node)
        return items

    def _translate_items(self, items: list[Any]) -> str:
        # Each atom is (text, needs_parens_when_scripted)
        atoms: list[tuple[str, bool]] = []
        pos = 0

        while pos < len(items):
            item = items[pos]
            pos += 1

            if isinstance(item, str):
                if item.isspace() or item == "~":
                    continue
                if item in "^_":
                    argument, pos = self._next_argument(items, pos)
                    script = self._script(argument)
                    if atoms:
                        base, needs_parens = atoms[-1]
                        if needs_parens:
                            base = f"({base})"
                        atoms[-1] = (f"{base}{item}{script}", False)
                    else:
                        atoms.append((f'""{item}{script}', False))
                    continue
                if item.isdigit():
                    number, pos = self._read_number(item, items, pos)
                    atoms.append((number, False))
                    continue
                atoms.append((_CHAR_MAP.get(item, item), False))

            elif isinstance(item, self._nodes.LatexMacroNode):
                text, pos = self._translate_macro(item, items, pos)
                if text:
                    atoms.append((text, False))

            elif isinstance(item, (self._nodes.LatexGroupNode, self._nodes.LatexMathNode)):
                inner = self.translate(item.nodelist)
                if inner:
                    atoms.append((inner, " " in inner))

            elif isinstance(item, self._nodes.LatexEnvironmentNode):
                text = self._translate_environment(item)
                if text:
                    atoms.append((text, False))

            elif isinstance(item, self._nodes.LatexSpecialsNode):
                if item.specials_chars != "~":
                    atoms.append((item.specials_chars, False))

        return self._join([text for text, _ in atoms])

    @staticmethod
    def _join(atoms: list[str]) -> str:
        result = ""
        for atom in atoms:
            if not result:
                result = atom
            elif atom.startswith(_GLUE_BEFORE) or result.endswith(_GLUE_AFTER):
                result += atom
            elif atom == "(" and (len(result) == 1 or result[-1].isdigit()):
                result += atom
            else:
                result += " " + atom
        return result

    @staticmethod
    def _read_number(first: str, items: list[Any], pos: int) -> tuple[str, int]:
        number = first
        while pos < len(items):
            item = items[pos]
            if isinstance(item, str) and item.isdigit():
                number += item
                pos += 1
            elif (
                item == "."
                and pos + 1 < len(items)
                and isinstance(items[pos + 1], str)
                and items[pos + 1].isdigit()
            ):
                number += item
                pos += 1
            else:
                break
        return number, pos

    @staticmethod
    def _next_argument(items: list[Any], pos: int) -> tuple[Any, int]:
        while pos < len(items) and isinstance(items[pos], str) and items[pos].isspace():
            pos += 1
        if pos >= len(items):
            return None, pos
        return items[pos], pos + 1

    def _translate_argument(self, argument: Any) -> str:
        if argument is None:
            return ""
        if isinstance(argument, self._nodes.LatexGroupNode):
            return self.translate(argument.nodelist)
        return self._translate_items([argument])

    def _script(self, argument: Any) -> str:
        text = self._translate_argument(argument)
        if not text:
            return '""'
        if _SIMPLE_SCRIPT.match(text):
            return text
        return f"({text})"

    def _is_optional_group(self, node: Any) -> bool:
        delimiters = getattr(node, "delimiters", None)
        return isinstance(node, self._nodes.LatexGroupNode) and bool(delimiters) and delimiters[0] == "["

    def _is_alignment(self, item: Any) -> bool:
        if isinstance(item, self._nodes.LatexSpecialsNode):
            return item.specials_chars == "&"
        return item == "&"

    def _verbatim(self, argument: Any) -> str:
        if isinstance(argument, str):
            return argument
        if isinstance(argument, self._nodes.LatexGroupNode):
            return "".join(self._verbatim(child) for child in argument.nodelist or [])
        if isinstance(argument, self._nodes.LatexCharsNode):
            return argument.chars
        return argument.latex_verbatim()

    def _macro_arguments(self, node: Any, items: list[Any], pos: int, count: int) -> tuple[list[Any], int]:
        """Collect ``count`` mandatory arguments, parsed or following the macro."""
        arguments: list[Any] = []
        if node.nodeargd is not None and node.nodeargd.argnlist:
            arguments = [
                arg for arg in node.nodeargd.argnlist if arg is not None and not self._is_optional_group(arg)
            ]
        while len(arguments) < count:
            argument, pos = self._next_argument(items, pos)
            if argument is None:
                break
            arguments.append(argument)
        return arguments[:count], pos

    def _translate_macro(self, node: Any, items: list[Any], pos: int) -> tuple[str, int]:
        name = node.macroname

        if name in IGNORED_MACROS:
            return "", pos

        if name == "\\":
            return "\\", pos

        if name in SYMBOL_MACROS:
            return SYMBOL_MACROS[name], pos

        if name in OPERATOR_NAMES:
            return name, pos

        if name in ("left", "right"):
            delimiter, pos = self._next_argument(items, pos)
            if delimiter is None or delimiter == ".":
                return "", pos
            return self._translate_argument(delimiter), pos

        if name == "not":
            following, after = self._next_argument(items, pos)
            if following == "=":
                return "eq.not", after
            return "", pos

        if name == "sqrt":
            return self._translate_sqrt(node, items, pos)

        if name in BINARY_FUNCTIONS:
            arguments, pos = self._macro_arguments(node, items, pos, 2)
            rendered = [_protect_argument(self._translate_argument(arg)) for arg in arguments]
            while len(rendered) < 2:
                rendered.append('""')
            return f"{BINARY_FUNCTIONS[name]}({rendered[0]}, {rendered[1]})", pos

        if name == "mathbb":
            arguments, pos = self._macro_arguments(node, items, pos, 1)
            inner = self._translate_argument(arguments[0]) if arguments else ""
            if inner in DOUBLE_STRUCK_SYMBOLS:
                return inner * 2, pos
            return f"bb({_protect_argument(inner)})", pos

        if name in UNARY_FUNCTIONS:
            arguments, pos = self._macro_arguments(node, items, pos, 1)
            inner = self._translate_argument(arguments[0]) if arguments else ""
            return f"{UNARY_FUNCTIONS[name]}({_protect_argument(inner)})", pos

        if name in TEXT_MACROS or name == "operatorname":
            arguments, pos = self._macro_arguments(node, items, pos, 1)
            text = self._verbatim(arguments[0]) if arguments else ""
            quoted = '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'
            if name == "operatorname":
                return f"op({quoted})", pos
            return quoted, pos

        logger.debug(f"Unknown LaTeX macro passed through by name: \\{name}")
        if len(name) == 1 and not name.isalpha():
            return _CHAR_MAP.get(name, name), pos
        return name, pos

    def _translate_sqrt(self, node: Any, items: list[Any], pos: int) -> tuple[str, int]:
        index = None
        radicand = None

        argnlist = node.nodeargd.argnlist if node.nodeargd is not None else None
        for arg in argnlist or []:
            if arg is None:
                continue
            if self._is_optional_group(arg):
                index = self.translate(arg.nodelist)
            else:
                radicand = arg

        if radicand is None:
            following, after = self._next_argument(items, pos)
            if following == "[":
                closing = after
                while closing < len(items) and items[closing] != "]":
                    closing += 1
                index = self._translate_items(items[after:closing])
                pos = closing + 1
            radicand, pos = self._next_argument(items, pos)

        inner = _protect_argument(self._translate_argument(radicand))
        if index:
            return f"root({_protect_argument(index)}, {inner})", pos
        return f"sqrt({inner})", pos

    def _translate_environment(self, node: Any) -> str:
        name = node.environmentname
        items = self._expand(node.nodelist)

        spec_parsed = node.nodeargd is not None and any(arg is not None for arg in node.nodeargd.argnlist or [])
        if name in COLUMN_SPEC_ENVIRONMENTS and not spec_parsed:
            while items and isinstance(items[0], str) and items[0].isspace():
                items.pop(0)
            if items and isinstance(items[0], self._nodes.LatexGroupNode):
                items.pop(0)

        rows = self._split_rows(items)
        base = name.rstrip("*")

        if base in MATRIX_DELIMITERS:
            delimiter = MATRIX_DELIMITERS[base]
            body = "; ".join(", ".join(_protect_argument(cell) for cell in row) for row in rows)
            if delimiter is None:
                return f"mat({body})"
            return f"mat(delim: {delimiter}, {body})"

        if base == "cases":
            body = ", ".join(_protect_argument(" & ".join(row)) for row in rows)
            return f"cases({body})"

        return " \\ ".join(" & ".join(row) for row in rows)

    def _split_rows(self, items: list[Any]) -> list[list[str]]:
        rows: list[list[str]] = []
        cells: list[str] = []
        current: list[Any] = []

        for item in items:
            if isinstance(item, self._nodes.LatexMacroNode) and item.macroname == "\\":
                cells.append(self._translate_items(current))
                rows.append(cells)
                cells, current = [], []
            elif self._is_alignment(item):
                cells.append(self._translate_items(current))
                current = []
            else:
                current.append(item)

        cells.append(self._translate_items(current))
        if any(cells):
            rows.append(cells)
        return rows


def _protect_argument(text: str) -> str:
    """Escape top-level commas and semicolons so they stay inside one argument."""
    depth = 0
    in_string = False
    escaped = False
    result = []
    for char in text:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            in_string = not in_string
        elif in_string:
            pass
        elif char in "([":
            depth += 1
        elif char in ")]":
            depth = max(depth - 1, 0)
        elif char in ",;" and depth == 0:
            result.append("\\")
        result.append(char)
    return "".join(result)
