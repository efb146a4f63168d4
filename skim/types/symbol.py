from __future__ import annotations
import sys

from skim.types.atom import Atom


class Symbol(Atom, str):
    """An identifier, interned by value. Equal only to other symbols."""

    __slots__ = ()

    def __new__(cls, name: str) -> Symbol:
        # Intern to ensure fast equality/hash and reduce memory
        return str.__new__(cls, sys.intern(str(name)))

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and str.__eq__(self, other)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    __hash__ = str.__hash__

    def display(self) -> str:
        return str.__str__(self)

    @property
    def id(self) -> str:
        return str.__str__(self)


# Syntax markers recognised by the printer. NO_QUOTE marks "no shorthand".
NO_QUOTE = Symbol("")
QUOTE = Symbol("quote")
QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
