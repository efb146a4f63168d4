from __future__ import annotations

from typing import Optional, TextIO

from skim import Value
from skim.builtins import bind_core, bind_display, bind_quasiquote
from skim.config import display_enabled
from skim.types.context import Context
from skim.types.nil import Nil


class Interpreter:
    """
    Holds a root context populated with the builtin bundles.
    Forms come from an external reader as already-built atoms.
    """
    def __init__(
        self,
        out: Optional[TextIO] = None,
        display: Optional[bool] = None,
        letrec: Optional[bool] = None,
        quasiquote: bool = True,
    ):
        self.ctx = Context()
        bind_core(self.ctx, letrec=letrec)
        if quasiquote:
            bind_quasiquote(self.ctx)
        if display is None:
            display = display_enabled()
        if display:
            bind_display(self.ctx, out)

    def eval(self, *forms: Value) -> Value:
        """Evaluate each top-level form in the root context; return the last value."""
        result: Value = Nil
        for form in forms:
            result = self.ctx.eval(form)
        return result
