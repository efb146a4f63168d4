"""The closed set of skim runtime values.

Every variant renders two ways: ``display()`` is the human-facing form and
``literal()`` is the form used by debug printing. Only pairs render the two
differently; for every other variant ``literal()`` falls back to ``display()``.
``str()`` gives the display form and ``repr()`` the literal form.

Symbols live in :mod:`skim.types.symbol` and pairs in :mod:`skim.types.cons`.
"""

from __future__ import annotations

import math

import numpy as np

from skim import ProcFn
from skim.errors import SkimRangeError
from skim.types.nil import Nil

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class Atom:
    """Base class of every runtime value variant."""

    __slots__ = ()

    def display(self) -> str:
        raise NotImplementedError

    def literal(self) -> str:
        return self.display()

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return self.literal()


class Int(Atom, int):
    __slots__ = ()

    def __new__(cls, value=0) -> Int:
        v = int.__new__(cls, value)
        if not INT64_MIN <= v <= INT64_MAX:
            raise SkimRangeError(f"integer {int(v)} does not fit in 64 bits")
        return v

    def display(self) -> str:
        return int.__repr__(self)


class Float(Atom, float):
    __slots__ = ()

    def display(self) -> str:
        if math.isnan(self):
            return "NaN"
        if math.isinf(self):
            return "+Inf" if self > 0 else "-Inf"
        # shortest repr that round-trips, never in exponent form, no forced ".0"
        return np.format_float_positional(float(self), unique=True, trim="-")


_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def quote_ascii(s: str) -> str:
    """Double-quote ``s``, escaping everything outside printable ASCII."""
    out = ['"']
    for ch in s:
        esc = _ESCAPES.get(ch)
        if esc is not None:
            out.append(esc)
            continue
        code = ord(ch)
        if 0x20 <= code < 0x7F:
            out.append(ch)
        elif code < 0x80:
            out.append(f"\\x{code:02x}")
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


class String(Atom, str):
    """A character string. Renders as its quoted literal in both modes."""

    __slots__ = ()

    def __eq__(self, other) -> bool:
        return isinstance(other, String) and str.__eq__(self, other)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    __hash__ = str.__hash__

    def display(self) -> str:
        return quote_ascii(self)

    @property
    def text(self) -> str:
        return str.__str__(self)


class Bool(Atom):
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = bool(value)

    def __bool__(self) -> bool:
        return self.value

    def __eq__(self, other) -> bool:
        return isinstance(other, Bool) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Bool, self.value))

    def display(self) -> str:
        return "#t" if self.value else "#f"


TRUE = Bool(True)
FALSE = Bool(False)


class Procedure(Atom):
    """A callable ``fn(ctx, args)`` with a name used only for display.

    ``args`` is the unevaluated argument list (a Cons, or Nil when empty).
    Two procedures are equal when they wrap the same callable.
    """

    __slots__ = ("fn", "name")

    def __init__(self, fn: ProcFn | None, name: str | None = None):
        self.fn = fn
        self.name = name

    def __call__(self, ctx, args):
        return self.fn(ctx, args)

    def __eq__(self, other) -> bool:
        return isinstance(other, Procedure) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(id(self.fn))

    def display(self) -> str:
        if self.name:
            return str(self.name)
        if self.fn is None:
            return "proc#nil"
        return f"proc#{id(self.fn):#x}"


def kind_of(value) -> str:
    """Runtime kind of a value, as used in error messages."""
    if value is Nil:
        return "nil"
    return type(value).__name__


def display_form(value) -> str:
    if value is Nil:
        return "()"
    if isinstance(value, Atom):
        return value.display()
    return str(value)


def literal_form(value) -> str:
    if value is Nil:
        return "()"
    if isinstance(value, Atom):
        return value.literal()
    return repr(value)
