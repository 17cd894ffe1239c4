"""
Quasiquotation helpers built on the matcher and the formula engine.

TIDEX - Tidy Expression Introspection

Recognizes the unquoting operators in a captured expression:

    UQ(x)   tidex::UQ(x)   !!x     - unquote
    UQS(x)  tidex::UQS(x)  !!!x    - unquote and splice

and handles `name := expr` definitions captured inside formulas.
"""

import logging
from typing import Any, List, NamedTuple, Sequence, Tuple

from .builder import format_expr
from .calls import is_call_to, matches_namespaced_call, symbol_recognizer
from .formula import is_formula, lhs, make_one_sided, rhs, scope_of
from .nodes import Expression, Formula, ListNode
from .predicates import set_names

logger = logging.getLogger(__name__)


# Namespace under which the unquote operators may be explicitly qualified
QUOTATION_NAMESPACE = "tidex"

_is_uq = symbol_recognizer("UQ")
_is_uqs = symbol_recognizer("UQS")


class Definition(NamedTuple):
    """Both sides of a `:=` definition, each bound to the defining scope."""

    lhs: Formula
    rhs: Formula


def is_bang(x: Any) -> bool:
    """Check if x is a call to `!`."""
    return is_call_to(x, "!")


def _bang_depth(x: Any) -> int:
    """Count the directly nested single-operand `!` calls at the top of x."""
    depth = 0
    while is_bang(x) and len(x.args) == 1:
        x = x.args[0]
        depth += 1
    return depth


def is_unquote(x: Any) -> bool:
    """Check if x is UQ(...), tidex::UQ(...) or !!x (but not !!!x)."""
    if matches_namespaced_call(x, _is_uq, QUOTATION_NAMESPACE):
        return True
    return _bang_depth(x) == 2


def is_splice(x: Any) -> bool:
    """Check if x is UQS(...), tidex::UQS(...) or !!!x."""
    if matches_namespaced_call(x, _is_uqs, QUOTATION_NAMESPACE):
        return True
    return _bang_depth(x) >= 3


def is_definition(x: Any) -> bool:
    """Check if x is a `:=` definition."""
    return is_call_to(x, ":=")


def as_definition(quo: Any) -> Definition:
    """
    Split a formula wrapping a definition into its two bound sides.

    Given ~(name := value) bound to scope, returns
    Definition(lhs=~name, rhs=~value), both bound to that same scope.

    Raises:
        NotAFormulaError: If quo is not a formula
        ValueError: If the right-hand side of quo is not a definition
    """
    pattern = rhs(quo)
    if not is_definition(pattern) or len(pattern.args) != 2:
        raise ValueError(f"as_definition: expected a `:=` definition, got {format_expr(pattern)}")

    env = scope_of(quo)
    return Definition(
        lhs=make_one_sided(lhs(pattern), env),
        rhs=make_one_sided(rhs(pattern), env),
    )


def split_definitions(quos: Sequence[Any]) -> Tuple[List[Any], List[Definition]]:
    """
    Separate definitions from the other captured formulas.

    Returns:
        (plain, definitions): formulas whose right-hand side is not a
        definition, in order, and the converted definitions, in order
    """
    plain = []
    definitions = []
    for quo in quos:
        if is_formula(quo) and is_definition(rhs(quo)):
            definitions.append(as_definition(quo))
        else:
            plain.append(quo)
    return plain, definitions


def exprs_auto_name(exprs: ListNode, width: int = 60) -> ListNode:
    """
    Give every unnamed element of a list a name from its own text.

    Formulas are named after their right-hand side. Names are cut to
    `width` characters. Elements that already have a name keep it.

    Args:
        exprs: List of expressions or formulas
        width: Maximum name length

    Returns:
        exprs, with a complete names mapping
    """
    if not isinstance(exprs, ListNode):
        raise TypeError("exprs_auto_name: `exprs` must be a list")
    if width < 1:
        raise ValueError("exprs_auto_name: `width` must be positive")

    n = len(exprs)
    current = exprs.names
    names = list(current) if current is not None else [""] * n

    unnamed = 0
    for i, element in enumerate(exprs.elements):
        if isinstance(names[i], str) and names[i]:
            continue
        names[i] = _auto_name(element, width)
        unnamed += 1

    if unnamed:
        logger.debug("auto-named %d of %d element(s)", unnamed, n)
        set_names(exprs, names)
    return exprs


def _auto_name(element: Expression, width: int) -> str:
    if is_formula(element) and len(element.args) in (1, 2):
        element = rhs(element)
    return format_expr(element)[:width]
