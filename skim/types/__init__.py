"""Runtime value model for skim.

Re-exports the closed set of atom variants, the absent value and the
list/traversal helpers so callers can write ``from skim.types import Cons``.
"""

from skim.types.nil import Nil, NilType
from skim.types.symbol import Symbol, NO_QUOTE, QUOTE, QUASIQUOTE, UNQUOTE
from skim.types.atom import (
    Atom,
    Int,
    Float,
    String,
    Bool,
    Procedure,
    TRUE,
    FALSE,
    display_form,
    literal_form,
    kind_of,
)
from skim.types.cons import Cons, is_empty, make_list
from skim.types.traversal import walk, traverse, pair, to_list

__all__ = [
    "Nil", "NilType",
    "Symbol", "NO_QUOTE", "QUOTE", "QUASIQUOTE", "UNQUOTE",
    "Atom", "Int", "Float", "String", "Bool", "Procedure", "TRUE", "FALSE",
    "display_form", "literal_form", "kind_of",
    "Cons", "is_empty", "make_list",
    "walk", "traverse", "pair", "to_list",
]
