from skim import Value
from skim.errors import SkimArityError
from skim.types.cons import Cons, is_empty
from skim.types.context import Context
from skim.types.nil import Nil
from skim.types.symbol import UNQUOTE


def _single_arg(name: str, args: Value) -> Value:
    if not isinstance(args, Cons) or not is_empty(args.tail):
        raise SkimArityError(f"{name} expects exactly 1 argument")
    return args.head


def quote_form(ctx: Context, args: Value) -> Value:
    return _single_arg("quote", args)


def quasiquote_form(ctx: Context, args: Value) -> Value:
    # Only unquote-marked sub-expressions force evaluation; unquote is bound
    # just for the extent of this quasiquote.
    arg = _single_arg("quasiquote", args)
    return ctx.fork().bind_proc(UNQUOTE, unquote_form).eval(arg)


def unquote_form(ctx: Context, args: Value) -> Value:
    # Unbind unquote so an unmarked nested unquote does not recurse.
    arg = _single_arg("unquote", args)
    return ctx.fork().bind(UNQUOTE, Nil).eval(arg)
