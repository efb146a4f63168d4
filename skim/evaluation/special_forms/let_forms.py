"""Lexical binding forms: let, let* and letrec.

All three take a binding list of ``(name expr)`` pairs followed by body
forms. They differ only in which scope each ``expr`` is evaluated in and
which scope receives the bindings:

- let:    evaluate in the calling scope, bind into a fork of it.
- let*:   evaluate and bind in the same fork, so later bindings see earlier ones.
- letrec: evaluate in the calling scope, bind into a fork of its parent.

The body runs in the binding scope and its last value is the result.
"""

from __future__ import annotations

import logging

from skim import Value
from skim.errors import SkimArityError, SkimTypeError
from skim.types.atom import kind_of
from skim.types.cons import Cons
from skim.types.context import Context
from skim.types.nil import Nil
from skim.types.symbol import Symbol
from skim.types.traversal import pair, walk

logger = logging.getLogger(__name__)


def _let_form(name: str, eval_ctx: Context, bind_ctx: Context, args: Value) -> Value:
    if not isinstance(args, Cons):
        raise SkimArityError(f"{name} requires a binding list")

    def _bind(binding: Value) -> None:
        sym, expr = pair(binding)
        if not isinstance(sym, Symbol):
            raise SkimTypeError(f"expected symbol, got {kind_of(sym)}")
        bind_ctx.bind(sym, eval_ctx.eval(expr))

    walk(args.head, _bind)
    logger.debug("%s bound %d name(s)", name, len(bind_ctx.vars))

    result: Value = Nil

    def _eval(expr: Value) -> None:
        nonlocal result
        result = bind_ctx.eval(expr)

    walk(args.tail, _eval)
    return result


def let_form(ctx: Context, args: Value) -> Value:
    return _let_form("let", ctx, ctx.fork(), args)


def let_star_form(ctx: Context, args: Value) -> Value:
    scope = ctx.fork()
    return _let_form("let*", scope, scope, args)


def letrec_form(ctx: Context, args: Value) -> Value:
    # At the root there is no enclosing scope to fork a sibling from.
    outer = ctx.parent()
    if outer is None:
        outer = ctx
    return _let_form("letrec", ctx, outer.fork(), args)
