"""Tests for the node model: Null, NA, Symbol, Call, Atomic, ListNode, Formula."""

import pytest
from tidex import (
    Null, NA, Symbol, Call, Formula, Atomic, ListNode, Kind,
    length, type_of, E,
)


class TestSingletons:
    """Tests for the Null and NA markers."""

    def test_null_is_singleton(self):
        """Null is a singleton."""
        assert type(Null)() is Null

    def test_null_is_falsy(self):
        """Null is falsy with length 0."""
        assert not Null
        assert len(Null) == 0

    def test_na_is_singleton_and_falsy(self):
        """NA is a falsy singleton."""
        assert type(NA)() is NA
        assert not NA
        assert repr(NA) == "NA"


class TestSymbol:
    """Tests for Symbol."""

    def test_equality_by_name(self):
        """Symbols with the same name are equal and hash alike."""
        assert Symbol("x") == Symbol("x")
        assert Symbol("x") != Symbol("y")
        assert hash(Symbol("x")) == hash(Symbol("x"))

    def test_not_equal_to_string(self):
        """A symbol is not equal to its name as a string."""
        assert Symbol("x") != "x"

    def test_empty_name_rejected(self):
        """Empty symbol names are rejected."""
        with pytest.raises(ValueError):
            Symbol("")

    def test_non_string_name_rejected(self):
        """Symbol names must be strings."""
        with pytest.raises(TypeError):
            Symbol(42)

    def test_operator_names_allowed(self):
        """Operator names like :: are fine."""
        assert Symbol("::").name == "::"


class TestCall:
    """Tests for Call."""

    def test_args_stored_as_tuple(self):
        """Arguments are stored as a tuple."""
        call = Call(Symbol("f"), [Symbol("x")])
        assert call.args == (Symbol("x"),)

    def test_structural_equality(self):
        """Calls compare by head, args and names."""
        assert E.call("f", "x") == E.call("f", "x")
        assert E.call("f", "x") != E.call("g", "x")
        assert E.call("f", "x") != E.call("f", x=1)

    def test_names_participate_in_equality(self):
        """Calls differing only in names are not equal."""
        a = Call(Symbol("f"), [Symbol("x")], ["n"])
        b = Call(Symbol("f"), [Symbol("x")])
        assert a != b

    def test_absent_names_equal_empty_names(self):
        """No names mapping equals a mapping of empty strings."""
        assert E.call("f", "x") == Call(Symbol("f"), [Symbol("x")], names=[""])
        assert E.int(1, 2) == Atomic(Kind.INTEGER, [1, 2], names=["", ""])
        assert E.list(1) == ListNode([E.int(1)], names=[""])

    def test_no_classes_by_default(self):
        """Bare calls carry no class tags."""
        assert E.call("f").classes == ()


class TestFormulaNode:
    """Tests for the Formula node."""

    def test_formula_is_a_call(self):
        """A formula is a call."""
        f = Formula(Symbol("~"), [Symbol("x")], env="scope")
        assert isinstance(f, Call)

    def test_default_class_tag(self):
        """Formulas are tagged with the formula class."""
        f = Formula(Symbol("~"), [Symbol("x")])
        assert f.classes == ("formula",)

    def test_equality_requires_same_scope(self):
        """Formulas are equal only when bound to the very same scope."""
        scope = object()
        a = Formula(Symbol("~"), [Symbol("x")], env=scope)
        b = Formula(Symbol("~"), [Symbol("x")], env=scope)
        c = Formula(Symbol("~"), [Symbol("x")], env=object())
        assert a == b
        assert a != c

    def test_equality_compares_classes(self):
        """Formulas with different class tags are not equal."""
        scope = object()
        a = Formula(Symbol("~"), [Symbol("x")], env=scope)
        b = Formula(Symbol("~"), [Symbol("x")], env=scope, classes=("formula", "quosure"))
        assert a != b


class TestAtomic:
    """Tests for Atomic vectors."""

    def test_kind_from_string(self):
        """Kinds may be given by value."""
        assert Atomic("logical", [True]).kind is Kind.LOGICAL

    def test_unknown_kind_rejected(self):
        """Unknown kinds are rejected."""
        with pytest.raises(ValueError):
            Atomic("decimal", [1])

    def test_values_with_na(self):
        """NA can appear among values."""
        x = Atomic(Kind.LOGICAL, [True, NA])
        assert x.values == (True, NA)

    def test_equality(self):
        """Atomics compare by kind, values and names."""
        assert E.int(1, 2) == E.int(1, 2)
        assert E.int(1, 2) != E.dbl(1, 2)
        assert E.int(1) != Atomic(Kind.INTEGER, [1], names=["a"])


class TestLength:
    """Tests for length()."""

    def test_null(self):
        """Null has length 0."""
        assert length(Null) == 0

    def test_symbol(self):
        """A symbol has length 1."""
        assert length(Symbol("x")) == 1

    def test_call_counts_head(self):
        """A call's length counts its head."""
        assert length(E.call("f")) == 1
        assert length(E.call("f", "x", "y")) == 3

    def test_vectors(self):
        """Atomics and lists have their element count."""
        assert length(E.int()) == 0
        assert length(E.chr("a", "b")) == 2
        assert length(E.list(1, 2, 3)) == 3

    def test_non_node_raises(self):
        """length() of a non-node raises TypeError."""
        with pytest.raises(TypeError):
            length([1, 2])


class TestTypeOf:
    """Tests for type_of()."""

    def test_all_node_types(self):
        """Every node has a type name."""
        assert type_of(Null) == "NULL"
        assert type_of(Symbol("x")) == "symbol"
        assert type_of(E.call("f")) == "language"
        assert type_of(E.formula("x")) == "language"
        assert type_of(E.lgl(True)) == "logical"
        assert type_of(E.int(1)) == "integer"
        assert type_of(E.dbl(1.0)) == "double"
        assert type_of(E.cpl(1j)) == "complex"
        assert type_of(E.chr("a")) == "character"
        assert type_of(E.raw(1)) == "raw"
        assert type_of(E.list()) == "list"

    def test_non_node_raises(self):
        """type_of() of a non-node raises TypeError."""
        with pytest.raises(TypeError):
            type_of("x")
