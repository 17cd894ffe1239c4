"""
Formula recognition, deconstruction and construction.

TIDEX - Tidy Expression Introspection

A formula is a call to `~` (or `:=`, a definition) with one or two
operands, bound to the scope it was created in:

    ~expr          one-sided:  lhs = None, rhs = expr
    lhs ~ rhs      two-sided
    name := expr   two-sided definition

The scope reference is opaque. This module attaches it and hands it back;
it never creates, inspects or changes a scope.
"""

import logging
from typing import Any, Optional

from .nodes import Call, Expression, Formula, ScopeType, Symbol
from .predicates import symbol_equals

logger = logging.getLogger(__name__)


# Heads that make a call a formula
FORMULA_HEADS = ("~", ":=")

# Class tag carried by constructed formulas
FORMULA_CLASS = "formula"


class FormulaError(ValueError):
    """Base class for formula accessor errors."""


class NotAFormulaError(FormulaError):
    """Raised when a formula accessor is given something else."""


class MalformedFormulaError(FormulaError):
    """Raised when a formula has neither one nor two operands."""


# ============================================================
# Recognition
# ============================================================

def is_formula(x: Any) -> bool:
    """
    Check if x is a call to `~` or `:=`.

    This is a shape check only; the number of operands is not verified.
    """
    if not isinstance(x, Call) or not isinstance(x.head, Symbol):
        return False
    return any(symbol_equals(x.head, head) for head in FORMULA_HEADS)


def is_one_sided(x: Any) -> bool:
    """Check if x is a formula with a right-hand side only."""
    return is_formula(x) and len(x.args) == 1


def is_two_sided(x: Any) -> bool:
    """Check if x is a formula with both sides."""
    return is_formula(x) and len(x.args) == 2


def _check_formula(f: Any) -> None:
    if not is_formula(f):
        raise NotAFormulaError("`x` is not a formula")


# ============================================================
# Accessors
# ============================================================

def rhs(f: Any) -> Expression:
    """
    Return the right-hand side of a formula.

    Raises:
        NotAFormulaError: If f is not a formula
        MalformedFormulaError: If f has neither one nor two operands
    """
    _check_formula(f)

    n = len(f.args)
    if n == 1:
        return f.args[0]
    if n == 2:
        return f.args[1]
    raise MalformedFormulaError(f"Invalid formula: expected 1 or 2 operands, got {n}")


def lhs(f: Any) -> Optional[Expression]:
    """
    Return the left-hand side of a formula, or None if it is one-sided.

    Raises:
        NotAFormulaError: If f is not a formula
        MalformedFormulaError: If f has neither one nor two operands
    """
    _check_formula(f)

    n = len(f.args)
    if n == 1:
        return None
    if n == 2:
        return f.args[0]
    raise MalformedFormulaError(f"Invalid formula: expected 1 or 2 operands, got {n}")


def scope_of(f: Any) -> ScopeType:
    """
    Return the scope a formula is bound to.

    Formula-shaped calls that were never bound (a bare Call with a `~`
    head) have no scope and give None.

    Raises:
        NotAFormulaError: If f is not a formula
    """
    _check_formula(f)
    return getattr(f, "env", None)


# ============================================================
# Construction
# ============================================================

def make_one_sided(rhs_expr: Expression, scope: ScopeType) -> Formula:
    """
    Build the one-sided formula ~rhs_expr bound to scope.

    Examples:
        f = make_one_sided(Symbol("x"), scope)
        rhs(f)       # => Symbol("x")
        lhs(f)       # => None
        scope_of(f)  # => scope
    """
    logger.debug("binding one-sided formula to scope %r", scope)
    return Formula(Symbol("~"), [rhs_expr], env=scope, classes=(FORMULA_CLASS,))


def make_two_sided(lhs_expr: Expression, rhs_expr: Expression,
                   scope: ScopeType, head: str = "~") -> Formula:
    """
    Build the two-sided formula `lhs_expr head rhs_expr` bound to scope.

    Raises:
        ValueError: If head is not one of FORMULA_HEADS
    """
    if head not in FORMULA_HEADS:
        raise ValueError(f"make_two_sided: `head` must be one of {FORMULA_HEADS}, got {head!r}")
    logger.debug("binding two-sided %s formula to scope %r", head, scope)
    return Formula(Symbol(head), [lhs_expr, rhs_expr], env=scope, classes=(FORMULA_CLASS,))


def set_scope(f: Any, scope: ScopeType) -> Formula:
    """
    Return a copy of formula f bound to a different scope.

    f itself is left untouched.

    Raises:
        NotAFormulaError: If f is not a formula
    """
    _check_formula(f)
    classes = f.classes or (FORMULA_CLASS,)
    return Formula(f.head, f.args, env=scope, names=f.names, classes=classes)
