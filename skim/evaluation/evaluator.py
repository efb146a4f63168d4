"""Core evaluator for skim.

Symbols resolve through the context's scope chain. A non-empty list whose
head evaluates to a Procedure is applied to the context and its *unevaluated*
argument list; every procedure is responsible for evaluating whichever
arguments its semantics require. All other values evaluate to themselves.
"""

from __future__ import annotations

from skim import Value
from skim.errors import SkimTypeError
from skim.types.atom import Procedure, display_form, kind_of
from skim.types.cons import Cons, is_empty
from skim.types.symbol import Symbol


def evaluate(expr: Value, ctx) -> Value:
    match expr:
        case Symbol():
            return ctx.lookup(expr)
        case Cons() if not is_empty(expr):
            head = evaluate(expr.head, ctx)
            if not isinstance(head, Procedure):
                raise SkimTypeError(
                    f"cannot apply {kind_of(head)} {display_form(head)} in {display_form(expr)}"
                )
            return head(ctx, expr.tail)

    # --- Atoms, Nil and the empty list return as-is ---
    return expr
