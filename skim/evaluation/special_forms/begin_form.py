from skim import Value
from skim.types.context import Context
from skim.types.nil import Nil
from skim.types.traversal import walk


def begin_form(ctx: Context, args: Value) -> Value:
    """(begin form ...) evaluates each form in `ctx`, returning the last value (Nil if none)."""
    result: Value = Nil

    def _eval(expr: Value) -> None:
        nonlocal result
        result = ctx.eval(expr)

    walk(args, _eval)
    return result
