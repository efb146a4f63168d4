"""Output primitives writing to a text sink (sys.stdout unless one is given)."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from skim import Value
from skim.errors import SkimArityError
from skim.types.atom import String, display_form
from skim.types.context import Context
from skim.types.cons import is_empty
from skim.types.nil import Nil
from skim.types.traversal import walk


def _sink(out: Optional[TextIO]) -> TextIO:
    # Resolved per call so that a replaced sys.stdout is honoured.
    return out if out is not None else sys.stdout


def display_fn(ctx: Context, args: Value, out: Optional[TextIO] = None) -> Value:
    """(display expr ...) writes each value with no separator; strings are written raw."""
    parts: list[str] = []

    def _collect(expr: Value) -> None:
        value = ctx.eval(expr)
        parts.append(value.text if isinstance(value, String) else display_form(value))

    walk(args, _collect)
    if parts:
        _sink(out).write("".join(parts))
    return Nil


def newline_fn(ctx: Context, args: Value, out: Optional[TextIO] = None) -> Value:
    if not is_empty(args):
        raise SkimArityError(f"expected no arguments; got {display_form(args)}")
    _sink(out).write("\n")
    return Nil
