#!/usr/bin/env python3
"""
TIDEX Feature Demonstration

This script walks through classification, call matching and formulas.
"""

import logging

from tidex import (
    E, NA, Symbol,
    is_symbol_like, is_scalar_atomic, coerce_to_bool,
    matches_call, matches_namespaced_call, is_qualified_call, symbol_recognizer,
    make_one_sided, rhs, lhs, scope_of, is_one_sided,
    split_definitions, exprs_auto_name, is_splice,
    get_names, format_expr,
)


class Scope:
    """A toy scope: the host would supply its own."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"<scope {self.name}>"


def section(title: str):
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f" {title}")
    print('='*60)


def demo_classification():
    """Demonstrate node classification."""
    section("Classification")

    for node in [Symbol("x"), E.call("f", "x"), E.int(1), E.chr("a", "b"), E.list()]:
        print(f"  {format_expr(node):<12} code={is_symbol_like(node)!s:<5} "
              f"scalar={is_scalar_atomic(node)}")

    print(f"  coerce_to_bool(NA) => {coerce_to_bool(E.lgl(NA))}")


def demo_call_matching():
    """Demonstrate plain and qualified call matching."""
    section("Call Matching")

    is_filter = symbol_recognizer("filter")
    calls = [
        E.call("filter", "df", E.call(">", "x", 1)),
        E.qualified("::", "dplyr", "filter", "df"),
        E.qualified("::", "stats", "filter", "x"),
        E.qualified("$", "obj", "filter"),
        E.call("select", "df"),
    ]

    for call in calls:
        print(f"  {format_expr(call):<28} any={matches_call(call, is_filter)!s:<5} "
              f"dplyr={matches_namespaced_call(call, is_filter, 'dplyr')!s:<5} "
              f"qualified={is_qualified_call(call)}")


def demo_formulas():
    """Demonstrate formula construction and access."""
    section("Formulas")

    scope = Scope("caller")
    f = make_one_sided(E.call("toupper", "letters"), scope)
    print(f"  {format_expr(f)}")
    print(f"  rhs   => {format_expr(rhs(f))}")
    print(f"  lhs   => {lhs(f)}")
    print(f"  scope => {scope_of(f)}")
    print(f"  one-sided => {is_one_sided(f)}")


def demo_quotation():
    """Demonstrate definitions, splicing and auto-naming."""
    section("Quasiquotation")

    scope = Scope("dots")
    captured = [
        make_one_sided(E.call("mean", "x"), scope),
        make_one_sided(E.call(":=", "total", E.call("sum", "x")), scope),
    ]
    plain, defs = split_definitions(captured)
    print(f"  plain: {[format_expr(q) for q in plain]}")
    for d in defs:
        print(f"  def:   {format_expr(d.lhs)} := {format_expr(d.rhs)}")

    spliced = E.call("!", E.call("!", E.call("!", "args")))
    print(f"  {format_expr(spliced)} splices: {is_splice(spliced)}")

    exprs = exprs_auto_name(E.list(E.call("f", "x"), Symbol("y"), z=1))
    print(f"  auto names: {get_names(exprs)}")


def main():
    logging.basicConfig(level=logging.INFO)
    demo_classification()
    demo_call_matching()
    demo_formulas()
    demo_quotation()


if __name__ == "__main__":
    main()
