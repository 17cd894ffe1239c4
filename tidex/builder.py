"""
Expression builder and deparser for TIDEX.

TIDEX - Tidy Expression Introspection

Trees normally arrive already built by whatever parsed the source text.
E is for everything else: tests, examples, and code that assembles
expressions by hand.

    from tidex import E

    x = E.sym("x")
    E.call("f", x, n=1)                  # f(x, n = 1L)
    E.qualified("::", "pkg", "f", x)     # pkg::f(x)
    E.formula(E.call("g", x), scope)     # ~g(x)

format_expr() turns any node back into a one-line string.
"""

import json
import re
from typing import Any, List, Optional, Tuple

from .nodes import (
    NA, Atomic, Call, Expression, Formula, Kind, ListNode, Null, Symbol,
    ScopeType,
)


# ============================================================
# Expression Builder
# ============================================================

def as_expr(value: Any) -> Expression:
    """
    Convert a plain Python value to a node.

    Conversions:
        Expression      - unchanged
        None            - Null
        str             - Symbol
        bool            - logical scalar
        int             - integer scalar
        float           - real scalar
        complex         - complex scalar
        bytes           - raw vector

    Raises:
        TypeError: For any other value
    """
    if isinstance(value, Expression):
        return value
    if value is None:
        return Null
    if isinstance(value, str):
        return Symbol(value)
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return Atomic(Kind.LOGICAL, [value])
    if isinstance(value, int):
        return Atomic(Kind.INTEGER, [value])
    if isinstance(value, float):
        return Atomic(Kind.REAL, [value])
    if isinstance(value, complex):
        return Atomic(Kind.COMPLEX, [value])
    if isinstance(value, bytes):
        return Atomic(Kind.RAW, list(value))
    raise TypeError(f"Cannot convert {type(value).__name__} to an expression")


def _split_named(args: Tuple[Any, ...], named: dict) -> Tuple[List[Expression], Optional[List[str]]]:
    """Positional arguments first, then keyword ones; names only if any."""
    values = [as_expr(a) for a in args] + [as_expr(v) for v in named.values()]
    if not named:
        return values, None
    names = [""] * len(args) + list(named.keys())
    return values, names


class _ExprBuilder:
    """
    Expression builder for TIDEX.

    Plain Python values are converted with as_expr(): strings become
    symbols, numbers and bools become scalar vectors.

    Examples:
        from tidex import E

        E.sym("x")                           # x
        E.call("f", "x", 1)                  # f(x, 1L)
        E.call("f", "x", na_rm=True)         # f(x, na_rm = TRUE)
        E.qualified("$", "obj", "method")    # obj$method()
        E.lgl(True, NA)                      # c(TRUE, NA)
        E.chr("a", "b")                      # c("a", "b")
    """

    def __call__(self, value: Any) -> Expression:
        """Convert a Python value with as_expr()."""
        return as_expr(value)

    def sym(self, name: str) -> Symbol:
        """Create a symbol."""
        return Symbol(name)

    def syms(self, *names: str) -> Tuple[Symbol, ...]:
        """
        Create several symbols for unpacking.

        Example:
            x, y = E.syms("x", "y")
        """
        return tuple(Symbol(name) for name in names)

    def call(self, head: Any, *args: Any, **named: Any) -> Call:
        """
        Build a call. Keyword arguments become named arguments.

        The head may be a string (made a symbol) or any node, e.g. another
        call for qualified access.
        """
        values, names = _split_named(args, named)
        return Call(as_expr(head), values, names)

    def qualified(self, qualifier: str, left: Any, right: Any,
                  *args: Any, **named: Any) -> Call:
        """
        Build a call through a qualifier: left$right(...), left::right(...).

        Examples:
            E.qualified("::", "pkg", "fn", "x")    # pkg::fn(x)
            E.qualified("@", "obj", "slot")        # obj@slot()
        """
        accessor = Call(Symbol(qualifier), [as_expr(left), as_expr(right)])
        return self.call(accessor, *args, **named)

    def formula(self, rhs: Any, scope: ScopeType = None, lhs: Any = None) -> Formula:
        """
        Build a formula bound to scope, two-sided when lhs is given.

        Unlike make_one_sided(), plain values are converted first.
        """
        if lhs is None:
            return Formula(Symbol("~"), [as_expr(rhs)], env=scope)
        return Formula(Symbol("~"), [as_expr(lhs), as_expr(rhs)], env=scope)

    def lgl(self, *values: Any) -> Atomic:
        """Logical vector. Use NA for missing values."""
        return Atomic(Kind.LOGICAL, values)

    def int(self, *values: Any) -> Atomic:
        """Integer vector."""
        return Atomic(Kind.INTEGER, values)

    def dbl(self, *values: Any) -> Atomic:
        """Real (double) vector."""
        return Atomic(Kind.REAL, values)

    def cpl(self, *values: Any) -> Atomic:
        """Complex vector."""
        return Atomic(Kind.COMPLEX, values)

    def chr(self, *values: Any) -> Atomic:
        """String vector."""
        return Atomic(Kind.STRING, values)

    def raw(self, *values: Any) -> Atomic:
        """Raw (byte) vector."""
        return Atomic(Kind.RAW, values)

    def list(self, *elements: Any, **named: Any) -> ListNode:
        """List node. Keyword arguments become named elements."""
        values, names = _split_named(elements, named)
        return ListNode(values, names)

    def __repr__(self) -> str:
        return "E (expression builder)"


# Singleton instance
E = _ExprBuilder()


# ============================================================
# Deparsing
# ============================================================

_SYNTACTIC_NAME = re.compile(r'^[A-Za-z.][A-Za-z0-9._]*$')

_INFIX_ACCESS = ("$", "@", "::", ":::")

_EMPTY_VECTOR = {
    Kind.LOGICAL: "logical(0)",
    Kind.INTEGER: "integer(0)",
    Kind.REAL: "numeric(0)",
    Kind.COMPLEX: "complex(0)",
    Kind.STRING: "character(0)",
    Kind.RAW: "raw(0)",
}


def _format_symbol(sym: Symbol) -> str:
    if _SYNTACTIC_NAME.match(sym.name):
        return sym.name
    return f"`{sym.name}`"


def _format_number(v: float) -> str:
    return "%.15g" % v


def _format_scalar(kind: Kind, v: Any) -> str:
    if v is NA:
        return "NA"
    if kind is Kind.LOGICAL:
        return "TRUE" if v else "FALSE"
    if kind is Kind.INTEGER:
        return f"{v}L"
    if kind is Kind.REAL:
        return _format_number(v)
    if kind is Kind.COMPLEX:
        v = complex(v)
        sign = "-" if v.imag < 0 else "+"
        return f"{_format_number(v.real)}{sign}{_format_number(abs(v.imag))}i"
    if kind is Kind.STRING:
        return json.dumps(v, ensure_ascii=False)
    return f"as.raw(0x{v:02x})"


def _format_args(values, names) -> str:
    parts = []
    for i, value in enumerate(values):
        text = format_expr(value)
        if names is not None and i < len(names) and names[i]:
            text = f"{names[i]} = {text}"
        parts.append(text)
    return ", ".join(parts)


def _format_call(x: Call) -> str:
    head = x.head
    args = x.args

    if isinstance(head, Symbol):
        op = head.name
        if op in _INFIX_ACCESS and len(args) == 2:
            return f"{format_expr(args[0])}{op}{format_expr(args[1])}"
        if op in ("~", ":="):
            if len(args) == 1:
                return f"{op}{format_expr(args[0])}"
            if len(args) == 2:
                return f"{format_expr(args[0])} {op} {format_expr(args[1])}"
        if op == "!" and len(args) == 1:
            return f"!{format_expr(args[0])}"

    return f"{format_expr(head)}({_format_args(args, x.names)})"


def format_expr(x: Any) -> str:
    """
    Format a node as a one-line string.

    Examples:
        E.call("f", "x", n=1)              -> "f(x, n = 1L)"
        E.qualified("::", "pkg", "f")      -> "pkg::f()"
        make_one_sided(E.sym("x"), env)    -> "~x"
        E.chr("a", "b")                    -> 'c("a", "b")'
        E.lgl()                            -> "logical(0)"
    """
    if x is Null:
        return "NULL"
    if isinstance(x, Symbol):
        return _format_symbol(x)
    if isinstance(x, Call):
        return _format_call(x)
    if isinstance(x, Atomic):
        if not x.values:
            return _EMPTY_VECTOR[x.kind]
        if len(x.values) == 1 and not x.names:
            return _format_scalar(x.kind, x.values[0])
        items = [_format_scalar(x.kind, v) for v in x.values]
        parts = []
        for i, item in enumerate(items):
            if x.names is not None and i < len(x.names) and x.names[i]:
                item = f"{x.names[i]} = {item}"
            parts.append(item)
        return "c(" + ", ".join(parts) + ")"
    if isinstance(x, ListNode):
        return f"list({_format_args(x.elements, x.names)})"
    return str(x)
