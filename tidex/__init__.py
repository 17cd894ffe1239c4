"""
TIDEX - Tidy Expression Introspection

Classification and pattern matching over "code as data" expression trees.

Quick Start:
    from tidex import E, matches_call, symbol_recognizer, make_one_sided, rhs

    call = E.qualified("::", "pkg", "mutate", "df", n=1)   # pkg::mutate(df, n = 1L)
    matches_call(call, symbol_recognizer("mutate"))        # => True

    f = make_one_sided(E.call("toupper", "x"), scope)
    rhs(f)                                                 # => toupper(x)

Node Model:
    Null, Symbol, Call, Atomic, ListNode   - expression nodes
    Formula                                - `~`/`:=` call bound to a scope
    NA                                     - missing scalar value

Call Shapes:
    f(x)          plain call
    pkg::f(x)     namespace-qualified (also pkg:::f)
    obj$f(x)      accessor-qualified (also obj@f)

Formulas:
    ~rhs          one-sided
    lhs ~ rhs     two-sided
    lhs := rhs    definition
"""

import logging

__version__ = "0.1.0"

# Silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Node model
from .nodes import (
    Expression,
    Null,
    Symbol,
    Call,
    Formula,
    Atomic,
    ListNode,
    Kind,
    NA,
    ExprType,
    NamesType,
    Recognizer,
    ScopeType,
    length,
    type_of,
)

# Node classifier and names helpers
from .predicates import (
    is_null,
    is_symbol,
    is_call,
    is_symbol_like,
    is_atomic,
    is_scalar_atomic,
    is_character,
    is_list,
    is_vector,
    is_object,
    is_empty,
    is_string_empty,
    symbol_equals,
    coerce_to_bool,
    as_symbol,
    get_names,
    set_names,
    has_name_at,
    have_names,
)

# Call pattern matching
from .calls import (
    QUALIFIERS,
    NAMESPACE_QUALIFIER,
    is_call_to,
    symbol_recognizer,
    qualifier_parts,
    is_qualified_call,
    is_qualified_call_matching,
    matches_call,
    is_namespaced_call,
    matches_namespaced_call,
)

# Formulas
from .formula import (
    FORMULA_HEADS,
    FORMULA_CLASS,
    FormulaError,
    NotAFormulaError,
    MalformedFormulaError,
    is_formula,
    is_one_sided,
    is_two_sided,
    rhs,
    lhs,
    scope_of,
    make_one_sided,
    make_two_sided,
    set_scope,
)

# Quasiquotation
from .quotation import (
    QUOTATION_NAMESPACE,
    Definition,
    is_bang,
    is_unquote,
    is_splice,
    is_definition,
    as_definition,
    split_definitions,
    exprs_auto_name,
)

# Builder and deparser
from .builder import E, as_expr, format_expr

# Public API
__all__ = [
    # Version
    "__version__",
    # Nodes
    "Expression",
    "Null",
    "Symbol",
    "Call",
    "Formula",
    "Atomic",
    "ListNode",
    "Kind",
    "NA",
    # Types
    "ExprType",
    "NamesType",
    "Recognizer",
    "ScopeType",
    "length",
    "type_of",
    # Classifier
    "is_null",
    "is_symbol",
    "is_call",
    "is_symbol_like",
    "is_atomic",
    "is_scalar_atomic",
    "is_character",
    "is_list",
    "is_vector",
    "is_object",
    "is_empty",
    "is_string_empty",
    "symbol_equals",
    "coerce_to_bool",
    "as_symbol",
    # Names
    "get_names",
    "set_names",
    "has_name_at",
    "have_names",
    # Calls
    "QUALIFIERS",
    "NAMESPACE_QUALIFIER",
    "is_call_to",
    "symbol_recognizer",
    "qualifier_parts",
    "is_qualified_call",
    "is_qualified_call_matching",
    "matches_call",
    "is_namespaced_call",
    "matches_namespaced_call",
    # Formulas
    "FORMULA_HEADS",
    "FORMULA_CLASS",
    "FormulaError",
    "NotAFormulaError",
    "MalformedFormulaError",
    "is_formula",
    "is_one_sided",
    "is_two_sided",
    "rhs",
    "lhs",
    "scope_of",
    "make_one_sided",
    "make_two_sided",
    "set_scope",
    # Quasiquotation
    "QUOTATION_NAMESPACE",
    "Definition",
    "is_bang",
    "is_unquote",
    "is_splice",
    "is_definition",
    "as_definition",
    "split_definitions",
    "exprs_auto_name",
    # Builder
    "E",
    "as_expr",
    "format_expr",
]
