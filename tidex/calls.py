"""
Call pattern matching.

TIDEX - Tidy Expression Introspection

Qualified calls are nested calls, not flat (namespace, name) pairs:

    pkg::fn(x)   is   Call(Call(Symbol("::"), [Symbol("pkg"), Symbol("fn")]), [x])
    obj$fn(x)    is   Call(Call(Symbol("$"),  [Symbol("obj"), Symbol("fn")]), [x])

Every matcher checks that the inner layer is a call to a qualifier. When a
name must be inspected, qualifier_parts() peels it to reach the name on the
right. A recognizer is any callable taking a node and returning a bool;
symbol_recognizer() builds the common one.

Matchers are queries, never validations: ill-shaped input answers False.
"""

from typing import Any, Optional, Tuple

from .nodes import Call, Expression, Recognizer, Symbol
from .predicates import symbol_equals


# Heads of the member and namespace access operators
QUALIFIERS = ("$", "@", "::", ":::")

# The qualifier meaning "exported from this namespace"
NAMESPACE_QUALIFIER = "::"


def is_call_to(x: Any, name: str) -> bool:
    """
    Check if x is a call whose head is the symbol `name`.

    Examples:
        is_call_to(E.call("f", "x"), "f")                 # => True
        is_call_to(E.call("f", "x"), "g")                 # => False
        is_call_to(E.qualified("::", "pkg", "f"), "f")    # => False (head is a call)
    """
    return isinstance(x, Call) and symbol_equals(x.head, name)


def symbol_recognizer(*names: str) -> Recognizer:
    """
    Build a recognizer accepting symbols with any of the given names.

    Example:
        is_quote = symbol_recognizer("quote", "bquote")
        matches_call(E.call("quote", "x"), is_quote)   # => True
    """
    accepted = frozenset(names)

    def recognizer(node: Any) -> bool:
        return isinstance(node, Symbol) and node.name in accepted

    return recognizer


def _qualifier_of(x: Any) -> Optional[str]:
    """Return the qualifier heading x's head call, or None."""
    if not isinstance(x, Call):
        return None

    head = x.head
    for qualifier in QUALIFIERS:
        if is_call_to(head, qualifier):
            return qualifier
    return None


def qualifier_parts(x: Any) -> Optional[Tuple[str, Expression, Expression]]:
    """
    Peel the qualifying head of a call into its two sides.

    Args:
        x: Any value

    Returns:
        (qualifier, left, right) when x is a call whose head is a call to
        one of QUALIFIERS with exactly two sub-arguments, otherwise None.

    Examples:
        qualifier_parts(<pkg::fn(x)>)   # => ("::", Symbol("pkg"), Symbol("fn"))
        qualifier_parts(<`::`(pkg)(x)>) # => None (no right-hand side)
        qualifier_parts(<fn(x)>)        # => None
    """
    qualifier = _qualifier_of(x)
    if qualifier is None:
        return None

    # Both sides are needed to name what is accessed
    if len(x.head.args) != 2:
        return None

    left, right = x.head.args
    return qualifier, left, right


def is_qualified_call(x: Any) -> bool:
    """
    Check if x is a call through `$`, `@`, `::` or `:::`.

    Only the head's shape counts, not how many sides the qualifier has.
    """
    return _qualifier_of(x) is not None


def is_qualified_call_matching(x: Any, recognizer: Optional[Recognizer]) -> bool:
    """
    Check if x is a qualified call whose accessed name satisfies recognizer.

    Only the right-hand side of the qualifier is tested: for pkg::fn(...)
    the recognizer sees `fn`, never `pkg`. A None recognizer accepts any
    name, which makes this the same as is_qualified_call(). A qualifier
    without exactly two sides has no accessed name, so no recognizer
    accepts it.
    """
    if recognizer is None:
        return is_qualified_call(x)

    parts = qualifier_parts(x)
    if parts is None:
        return False

    _, _, name = parts
    return bool(recognizer(name))


def matches_call(x: Any, recognizer: Recognizer) -> bool:
    """
    Check if x is a call to something the recognizer accepts.

    Matches both plain calls, fn(...), and qualified ones, pkg::fn(...),
    obj$fn(...), obj@fn(...), pkg:::fn(...).
    """
    if not isinstance(x, Call):
        return False
    return bool(recognizer(x.head)) or is_qualified_call_matching(x, recognizer)


def is_namespaced_call(x: Any, namespace_name: str,
                       recognizer: Optional[Recognizer] = None) -> bool:
    """
    Check if x is a call qualified as namespace_name::name.

    Other qualifiers ($, @, :::) and other namespaces never match. With a
    recognizer, the accessed name must also satisfy it.
    """
    parts = qualifier_parts(x)
    if parts is None:
        return False

    qualifier, namespace, name = parts
    if qualifier != NAMESPACE_QUALIFIER or not symbol_equals(namespace, namespace_name):
        return False
    if recognizer is None:
        return True
    return bool(recognizer(name))


def matches_namespaced_call(x: Any, recognizer: Recognizer, namespace_name: str) -> bool:
    """
    Check if x is a call to a recognized name, plain or from one namespace.

    Like matches_call(), but the only qualification accepted is
    namespace_name::name. An unqualified call still matches when its bare
    head satisfies the recognizer.

    Examples:
        uq = symbol_recognizer("UQ")
        matches_namespaced_call(<UQ(x)>, uq, "tidex")          # => True
        matches_namespaced_call(<tidex::UQ(x)>, uq, "tidex")   # => True
        matches_namespaced_call(<other::UQ(x)>, uq, "tidex")   # => False
        matches_namespaced_call(<obj$UQ(x)>, uq, "tidex")      # => False
    """
    if not isinstance(x, Call):
        return False
    return bool(recognizer(x.head)) or is_namespaced_call(x, namespace_name, recognizer)
