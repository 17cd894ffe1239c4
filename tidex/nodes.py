"""
Expression node model for TIDEX.

TIDEX - Tidy Expression Introspection

Code is data: every piece of a quoted expression is one of a small, closed
set of node classes. Calls and formulas share a shape (a head plus ordered
arguments); atomic vectors and lists are the data leaves.

    Null                      - the empty marker
    Symbol("x")               - a name
    Call(head, args)          - function application, e.g. f(x, y)
    Atomic(kind, values)      - logical/integer/real/complex/string/raw vector
    ListNode(elements)        - heterogeneous list
    Formula(head, args, env)  - a `~` or `:=` call bound to a scope
"""

from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union


class Kind(str, Enum):
    """The six kinds of atomic vector."""

    LOGICAL = "logical"
    INTEGER = "integer"
    REAL = "real"
    COMPLEX = "complex"
    STRING = "string"
    RAW = "raw"


# Type names reported by type_of(), keyed by atomic kind
_KIND_TYPE_NAMES = {
    Kind.LOGICAL: "logical",
    Kind.INTEGER: "integer",
    Kind.REAL: "double",
    Kind.COMPLEX: "complex",
    Kind.STRING: "character",
    Kind.RAW: "raw",
}


# ============================================================
# Missing value marker
# ============================================================

class _NA:
    """
    Singleton marking a missing scalar inside an atomic vector.

    NA is falsy, but callers should test identity (`value is NA`):
    a missing logical is neither True nor False.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NA"


NA = _NA()


# ============================================================
# Node classes
# ============================================================

class Expression:
    """Base class of every expression node."""

    __slots__ = ()

    def __repr__(self) -> str:
        from .builder import format_expr
        return f"<{type(self).__name__} {format_expr(self)}>"


class _Null(Expression):
    """
    Singleton representing the empty expression.

    Null is falsy and has length 0:

        if not node:
            # Null
    """

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __len__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "Null"


Null = _Null()


class Symbol(Expression):
    """
    A name. Symbols compare and hash by name.

    Examples:
        Symbol("x") == Symbol("x")   # => True
        Symbol("::").name            # => "::"
    """

    __slots__ = ('name',)

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise TypeError(f"Symbol name must be a string, not {type(name).__name__}")
        if not name:
            raise ValueError("Symbol name must not be empty")
        self.name = name

    def __eq__(self, other):
        if isinstance(other, Symbol):
            return self.name == other.name
        return False

    def __hash__(self) -> int:
        return hash(("Symbol", self.name))


class Call(Expression):
    """
    Function application: a head followed by ordered arguments.

    `names`, when set, holds one string per argument; an empty string
    marks an unnamed argument. `classes` holds class tags (see is_object).

    Examples:
        Call(Symbol("f"), [Symbol("x")])              # f(x)
        Call(Symbol("f"), [Symbol("x")], ["n"])       # f(n = x)
    """

    __slots__ = ('head', 'args', 'names', 'classes')

    def __init__(self, head: Expression, args: Sequence[Expression] = (),
                 names: Optional[Sequence[str]] = None,
                 classes: Sequence[str] = ()):
        self.head = head
        self.args = tuple(args)
        self.names = names
        self.classes = tuple(classes)

    def __eq__(self, other):
        if isinstance(other, Call):
            return (self.head == other.head
                    and self.args == other.args
                    and _same_names(self.names, other.names, len(self.args)))
        return False

    def __hash__(self) -> int:
        return hash(("Call", self.head, self.args))

    def __len__(self) -> int:
        return 1 + len(self.args)


class Formula(Call):
    """
    A `~` or `:=` call bound to the scope it was created in.

    `env` is a non-owning reference to that scope; it is never inspected,
    only carried along. Two formulas are equal when their shapes are equal
    and they refer to the very same scope.
    """

    __slots__ = ('env',)

    def __init__(self, head: Expression, args: Sequence[Expression] = (),
                 env: Any = None, names: Optional[Sequence[str]] = None,
                 classes: Sequence[str] = ("formula",)):
        super().__init__(head, args, names, classes)
        self.env = env

    def __eq__(self, other):
        if isinstance(other, Formula):
            return (super().__eq__(other)
                    and self.classes == other.classes
                    and self.env is other.env)
        return False

    __hash__ = Call.__hash__


class Atomic(Expression):
    """
    An atomic vector: zero or more scalars of a single kind.

    Missing values are represented by NA.

    Examples:
        Atomic(Kind.LOGICAL, [True, NA])
        Atomic(Kind.STRING, ["a", "b"], names=["x", ""])
    """

    __slots__ = ('kind', 'values', 'names', 'classes')

    def __init__(self, kind: Union[Kind, str], values: Sequence[Any] = (),
                 names: Optional[Sequence[str]] = None,
                 classes: Sequence[str] = ()):
        self.kind = Kind(kind)
        self.values = tuple(values)
        self.names = names
        self.classes = tuple(classes)

    def __eq__(self, other):
        if isinstance(other, Atomic):
            return (self.kind == other.kind
                    and self.values == other.values
                    and _same_names(self.names, other.names, len(self)))
        return False

    def __hash__(self) -> int:
        return hash(("Atomic", self.kind, self.values))

    def __len__(self) -> int:
        return len(self.values)


class ListNode(Expression):
    """A heterogeneous list of expressions."""

    __slots__ = ('elements', 'names', 'classes')

    def __init__(self, elements: Sequence[Any] = (),
                 names: Optional[Sequence[str]] = None,
                 classes: Sequence[str] = ()):
        self.elements = tuple(elements)
        self.names = names
        self.classes = tuple(classes)

    def __eq__(self, other):
        if isinstance(other, ListNode):
            return (self.elements == other.elements
                    and _same_names(self.names, other.names, len(self)))
        return False

    def __hash__(self) -> int:
        return hash(("ListNode", self.elements))

    def __len__(self) -> int:
        return len(self.elements)


def _same_names(a: Optional[Sequence[str]], b: Optional[Sequence[str]],
                n: int) -> bool:
    # No mapping means every position is unnamed
    a = [""] * n if a is None else list(a)
    b = [""] * n if b is None else list(b)
    return a == b


# Type aliases
ExprType = Expression
NamesType = Optional[Sequence[str]]
Recognizer = Callable[[Any], bool]  # Called with a node, returns a bool
ScopeType = Any  # Opaque scope reference, never inspected


# ============================================================
# Shape queries shared by every module
# ============================================================

def length(x: Any) -> int:
    """
    Return the length of a node.

    Null has length 0, a symbol 1, a call one more than its argument
    count (the head counts), atomics and lists their element count.

    Raises:
        TypeError: If x is not an expression node
    """
    if x is Null:
        return 0
    if isinstance(x, Symbol):
        return 1
    if isinstance(x, (Call, Atomic, ListNode)):
        return len(x)
    raise TypeError(f"length: not an expression node: {type(x).__name__}")


def type_of(x: Any) -> str:
    """
    Return the short type name of a node.

    Examples:
        type_of(Null)                        # => "NULL"
        type_of(Symbol("x"))                 # => "symbol"
        type_of(Call(Symbol("f")))           # => "language"
        type_of(Atomic(Kind.REAL, [1.0]))    # => "double"
    """
    if x is Null:
        return "NULL"
    if isinstance(x, Symbol):
        return "symbol"
    if isinstance(x, Call):
        return "language"
    if isinstance(x, Atomic):
        return _KIND_TYPE_NAMES[x.kind]
    if isinstance(x, ListNode):
        return "list"
    raise TypeError(f"type_of: not an expression node: {type(x).__name__}")
