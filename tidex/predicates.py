"""
Node classification and names-attribute helpers.

TIDEX - Tidy Expression Introspection

Every classifier here is total: anything that is not the node shape being
asked about (including non-node Python values) answers False. Only
coerce_to_bool() and as_symbol() raise, because they promise a value.
"""

from typing import Any, List, Optional, Sequence

from .nodes import (
    NA, Atomic, Call, Expression, Kind, ListNode, Null, Symbol, NamesType,
    length,
)


# ============================================================
# Node Classifier
# ============================================================

def is_null(x: Any) -> bool:
    """Check if x is the Null marker."""
    return x is Null


def is_symbol(x: Any) -> bool:
    """Check if x is a symbol."""
    return isinstance(x, Symbol)


def is_call(x: Any) -> bool:
    """Check if x is a call (formulas included)."""
    return isinstance(x, Call)


def is_symbol_like(x: Any) -> bool:
    """
    Check if x can appear as code rather than just data.

    Args:
        x: The node to check

    Returns:
        True if x is a symbol or a call, False otherwise
    """
    return isinstance(x, (Symbol, Call))


def is_atomic(x: Any) -> bool:
    """Check if x is an atomic vector of any kind."""
    return isinstance(x, Atomic)


def is_scalar_atomic(x: Any) -> bool:
    """Check if x is an atomic vector of length 1."""
    return isinstance(x, Atomic) and len(x) == 1


def is_character(x: Any) -> bool:
    """Check if x is a string vector."""
    return isinstance(x, Atomic) and x.kind is Kind.STRING


def is_list(x: Any) -> bool:
    """Check if x is a list node."""
    return isinstance(x, ListNode)


def is_vector(x: Any) -> bool:
    """Check if x is an atomic vector or a list."""
    return isinstance(x, (Atomic, ListNode))


def is_object(x: Any) -> bool:
    """
    Check if x carries a class tag.

    Formulas built by make_one_sided() are objects; bare calls, symbols
    and Null never are.
    """
    return isinstance(x, (Call, Atomic, ListNode)) and len(x.classes) > 0


def is_empty(x: Any) -> bool:
    """
    Check if x has length 0.

    Non-node values are not empty (they have no length to speak of).
    """
    if not isinstance(x, Expression):
        return False
    return length(x) == 0


def is_string_empty(s: Any) -> bool:
    """Check if s is the empty string."""
    return isinstance(s, str) and s == ""


def symbol_equals(x: Any, name: str) -> bool:
    """
    Check if x is the symbol called `name`.

    Comparison is exact: no case folding or normalization.

    Examples:
        symbol_equals(Symbol("f"), "f")   # => True
        symbol_equals(Symbol("F"), "f")   # => False
        symbol_equals("f", "f")           # => False (not a node)
    """
    return isinstance(x, Symbol) and x.name == name


def coerce_to_bool(x: Any) -> bool:
    """
    Convert a length-1 logical vector to a Python bool.

    A missing value (NA) counts as False.

    Raises:
        TypeError: If x is not a logical vector of length 1
    """
    if not isinstance(x, Atomic) or x.kind is not Kind.LOGICAL or len(x) != 1:
        raise TypeError("`x` must be a boolean")

    value = x.values[0]
    if value is NA:
        return False
    return bool(value)


def as_symbol(x: Any) -> Symbol:
    """
    Turn a string, or the first element of a string vector, into a symbol.

    Raises:
        TypeError: If x is neither a str nor a non-empty string vector
        ValueError: If the string is empty or missing
    """
    if isinstance(x, str):
        return Symbol(x)
    if not is_character(x) or is_empty(x):
        raise TypeError("as_symbol: `x` must be a string")

    value = x.values[0]
    if value is NA:
        raise ValueError("as_symbol: cannot make a symbol from a missing string")
    return Symbol(value)


# ============================================================
# Attribute Helper (names mapping)
# ============================================================

def get_names(x: Any) -> NamesType:
    """
    Return the names mapping of a container, or None when it has none.

    Symbols, Null and non-node values never carry names.
    """
    if isinstance(x, (Call, Atomic, ListNode)):
        return x.names
    return None


def set_names(x: Expression, names: NamesType) -> Expression:
    """
    Attach (or with None, remove) the names mapping of a container.

    The caller must supply one name per element; this is not checked here
    because only the caller knows how the container is meant to be shaped.

    Args:
        x: A call, atomic vector or list
        names: Sequence of strings, "" for unnamed positions, or None

    Returns:
        x itself, with the new mapping

    Raises:
        TypeError: If x cannot carry names
    """
    if not isinstance(x, (Call, Atomic, ListNode)):
        raise TypeError(f"set_names: cannot set names on {type(x).__name__}")
    x.names = names
    return x


def has_name_at(x: Any, i: int) -> bool:
    """
    Check if position i of x has a non-empty name.

    False when there is no names mapping, when the mapping is not a
    sequence of strings, or when the name at i is "". Indexing past the
    end of the mapping raises IndexError; callers bound-check.
    """
    names = get_names(x)
    if not _is_string_sequence(names):
        return False
    return not is_string_empty(names[i])


def have_names(x: Any) -> List[bool]:
    """Return has_name_at() for every position of a container."""
    if not isinstance(x, (Call, Atomic, ListNode)):
        return []
    n = len(x.args) if isinstance(x, Call) else len(x)
    return [has_name_at(x, i) for i in range(n)]


def _is_string_sequence(names: Optional[Sequence[Any]]) -> bool:
    if names is None or isinstance(names, str):
        return False
    return all(isinstance(name, str) for name in names)
