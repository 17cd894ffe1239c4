"""Tests for quasiquotation helpers."""

import pytest
from tidex import (
    Symbol, E, NA,
    NotAFormulaError,
    is_bang, is_unquote, is_splice, is_definition,
    as_definition, split_definitions, exprs_auto_name,
    make_one_sided, rhs, lhs, scope_of, get_names, set_names,
)


def bangs(n, expr):
    """Wrap expr in n calls to !."""
    for _ in range(n):
        expr = E.call("!", expr)
    return expr


class TestBangs:
    """Tests for is_bang(), is_unquote() and is_splice()."""

    def test_is_bang(self):
        """A call to ! is a bang."""
        assert is_bang(bangs(1, Symbol("x")))
        assert not is_bang(Symbol("!"))
        assert not is_bang(E.call("not", "x"))

    def test_double_bang_unquotes(self):
        """!!x unquotes, !x and !!!x do not."""
        assert is_unquote(bangs(2, Symbol("x")))
        assert not is_unquote(bangs(1, Symbol("x")))
        assert not is_unquote(bangs(3, Symbol("x")))

    def test_triple_bang_splices(self):
        """!!!x splices, !!x does not."""
        assert is_splice(bangs(3, Symbol("x")))
        assert not is_splice(bangs(2, Symbol("x")))

    def test_named_operators(self):
        """UQ and UQS, plain or from the tidex namespace."""
        assert is_unquote(E.call("UQ", "x"))
        assert is_unquote(E.qualified("::", "tidex", "UQ", "x"))
        assert is_splice(E.call("UQS", "args"))
        assert is_splice(E.qualified("::", "tidex", "UQS", "args"))

    def test_other_namespace_not_operator(self):
        """other::UQS(x) and obj$UQS(x) are ordinary calls."""
        assert not is_splice(E.qualified("::", "other", "UQS", "x"))
        assert not is_splice(E.qualified("$", "obj", "UQS", "x"))
        assert not is_unquote(E.qualified("::", "other", "UQ", "x"))

    def test_bang_without_operand(self):
        """A bare !() call is neither unquote nor splice."""
        assert not is_unquote(E.call("!"))
        assert not is_splice(E.call("!"))


class TestDefinitions:
    """Tests for := definitions."""

    def test_is_definition(self):
        """Calls to := are definitions."""
        assert is_definition(E.call(":=", "a", "b"))
        assert not is_definition(E.call("=", "a", "b"))

    def test_as_definition(self):
        """Both sides come back bound to the capturing scope."""
        scope = object()
        quo = make_one_sided(E.call(":=", "var", E.call("f", "x")), scope)
        d = as_definition(quo)
        assert rhs(d.lhs) == Symbol("var")
        assert rhs(d.rhs) == E.call("f", "x")
        assert lhs(d.rhs) is None
        assert scope_of(d.lhs) is scope
        assert scope_of(d.rhs) is scope

    def test_as_definition_rejects_non_definition(self):
        """The captured expression must be a definition."""
        with pytest.raises(ValueError):
            as_definition(make_one_sided(E.call("f", "x"), None))
        with pytest.raises(ValueError):
            as_definition(make_one_sided(E.call(":=", "x"), None))

    def test_as_definition_requires_formula(self):
        """Non-formulas are not captured definitions."""
        with pytest.raises(NotAFormulaError):
            as_definition(E.call("f", "a", "b"))
        with pytest.raises(NotAFormulaError):
            as_definition(Symbol("x"))

    def test_as_definition_raw_definition(self):
        """A bare a := b is a formula whose rhs is not a definition."""
        with pytest.raises(ValueError):
            as_definition(E.call(":=", "a", "b"))

    def test_split_definitions(self):
        """Definitions are separated from plain captures, order kept."""
        scope = object()
        a = make_one_sided(Symbol("a"), scope)
        b = make_one_sided(E.call(":=", "b", 1), scope)
        c = make_one_sided(E.call("c"), scope)
        plain, defs = split_definitions([a, b, c])
        assert plain == [a, c]
        assert len(defs) == 1
        assert rhs(defs[0].lhs) == Symbol("b")


class TestAutoName:
    """Tests for exprs_auto_name()."""

    def test_names_unnamed(self):
        """Unnamed elements are named after their text."""
        exprs = E.list(E.call("f", "x"), Symbol("y"))
        exprs_auto_name(exprs)
        assert get_names(exprs) == ["f(x)", "y"]

    def test_keeps_existing_names(self):
        """Named elements keep their names."""
        exprs = E.list(Symbol("y"), keep=E.call("g"))
        exprs_auto_name(exprs)
        assert get_names(exprs) == ["y", "keep"]

    def test_empty_name_replaced(self):
        """An empty-string name counts as unnamed."""
        exprs = set_names(E.list(Symbol("a"), Symbol("b")), ["", "b2"])
        exprs_auto_name(exprs)
        assert get_names(exprs) == ["a", "b2"]

    def test_keeps_names_beside_non_string_entry(self):
        """A stray non-string entry does not cost the others their names."""
        exprs = set_names(E.list(Symbol("a"), Symbol("b")), ["keep", 1])
        exprs_auto_name(exprs)
        assert get_names(exprs) == ["keep", "b"]

    def test_formula_uses_rhs(self):
        """Formulas are named after their right-hand side."""
        exprs = E.list(make_one_sided(E.call("toupper", "letters"), None))
        exprs_auto_name(exprs)
        assert get_names(exprs) == ["toupper(letters)"]

    def test_width(self):
        """Names are cut to the requested width."""
        exprs = E.list(E.call("function_with_a_long_name", "argument"))
        exprs_auto_name(exprs, width=8)
        assert get_names(exprs) == ["function"]

    def test_already_named_untouched(self):
        """A fully named list keeps its mapping object."""
        names = ["a"]
        exprs = set_names(E.list(E.chr(NA)), names)
        exprs_auto_name(exprs)
        assert get_names(exprs) is names

    def test_bad_input(self):
        """Only lists with a positive width are accepted."""
        with pytest.raises(TypeError):
            exprs_auto_name(E.call("f"))
        with pytest.raises(ValueError):
            exprs_auto_name(E.list(), width=0)
