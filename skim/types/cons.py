"""Pairs, lists and the dual-mode printer.

A list is a right-nested chain of ``Cons`` cells ending in ``Nil`` (proper)
or in any other non-pair value (improper/dotted). ``Cons()`` with both slots
``Nil`` is the empty-list sentinel. Cells may be shared between lists, and
their slots may be rebound after construction.
"""

from __future__ import annotations

from io import StringIO
from typing import Callable, Iterable

from skim import Value
from skim.types.atom import Atom, display_form, literal_form
from skim.types.nil import Nil
from skim.types.symbol import Symbol, QUOTE, QUASIQUOTE, UNQUOTE

_SHORTHAND = {
    QUOTE: "'",
    QUASIQUOTE: "`",
    UNQUOTE: ",",
}


def is_empty(value: Value) -> bool:
    """True for Nil and for the sentinel pair whose head and tail are both Nil."""
    if value is Nil:
        return True
    return isinstance(value, Cons) and value.head is Nil and value.tail is Nil


class Cons(Atom):
    __slots__ = ("head", "tail")

    def __init__(self, head: Value = Nil, tail: Value = Nil):
        self.head = head
        self.tail = tail

    # --- Display form ---
    def display(self) -> str:
        if is_empty(self):
            return "'()"
        if isinstance(self.head, Symbol):
            prefix = _SHORTHAND.get(self.head)
            if prefix is not None:
                short = self._shorthand(prefix)
                if short is not None:
                    return short
        return self._write_list(display_form)

    def _shorthand(self, prefix: str) -> str | None:
        """Render ``(marker arg ...)`` as ``<prefix>arg``, or None if not quote-shaped."""
        args = self.tail
        if not isinstance(args, Cons):
            return None
        if is_empty(args):
            return prefix + "()"
        rest = args.tail
        if is_empty(rest):
            if is_empty(args.head):
                return prefix + "()"
            return prefix + display_form(args.head)
        if isinstance(rest, Cons):
            # (marker a b ...) prefixes the rendered remainder list
            return prefix + args.display()
        return None

    def _write_list(self, fmt: Callable[[Value], str]) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            node = self
            while True:
                buffer.write(fmt(node.head))
                tail = node.tail
                # a sentinel tail ends the list here rather than printing as a trailing ()
                if is_empty(tail):
                    break
                if not isinstance(tail, Cons):
                    buffer.write(" . ")
                    buffer.write(fmt(tail))
                    break
                buffer.write(" ")
                node = tail
            buffer.write(")")
            return buffer.getvalue()

    # --- Literal / debug forms ---
    def literal(self) -> str:
        if is_empty(self):
            return "'()"
        return self._dotted()

    def _dotted(self) -> str:
        head = self.head._dotted() if isinstance(self.head, Cons) else literal_form(self.head)
        tail = self.tail._dotted() if isinstance(self.tail, Cons) else literal_form(self.tail)
        return "(" + head + " . " + tail + ")"

    def debug(self) -> str:
        """List-shaped rendering using each element's literal form, no shorthand."""
        if is_empty(self):
            return "'()"
        return self._write_list(literal_form)


def make_list(items: Iterable[Value], tail: Value = Nil) -> Value:
    """Link ``items`` into a chain of pairs ending in ``tail``."""
    result = tail
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result
