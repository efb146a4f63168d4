"""Registration bundles for skim contexts.

Each ``bind_*`` function binds one composable group of special forms into a
context and returns that context, so a host can build its root scope at
startup with e.g. ``bind_display(bind_core(Context()))``.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, Optional, TextIO

from skim import Value
from skim.config import letrec_enabled
from skim.evaluation.special_forms import (
    CORE_FORMS,
    DISPLAY_FORMS,
    LETREC_FORMS,
    QUASIQUOTE_FORMS,
)
from skim.types.atom import Procedure
from skim.types.context import Context
from skim.types.traversal import walk

logger = logging.getLogger(__name__)


def _bind_forms(ctx: Context, forms: dict, bundle: str) -> Context:
    for name, fn in forms.items():
        ctx.bind_proc(name, fn)
    logger.debug("bound %s bundle: %s", bundle, ", ".join(str(n) for n in forms))
    return ctx


def bind_core(ctx: Context, letrec: Optional[bool] = None) -> Context:
    """Bind begin, let, let* and quote. letrec only if asked (or SKIM_ENABLE_LETREC is set)."""
    _bind_forms(ctx, CORE_FORMS, "core")
    if letrec is None:
        letrec = letrec_enabled()
    if letrec:
        _bind_forms(ctx, LETREC_FORMS, "letrec")
    return ctx


def bind_quasiquote(ctx: Context) -> Context:
    return _bind_forms(ctx, QUASIQUOTE_FORMS, "quasiquote")


def bind_display(ctx: Context, out: Optional[TextIO] = None) -> Context:
    """Bind display and newline, writing to `out` (sys.stdout at call time if None)."""
    for name, fn in DISPLAY_FORMS.items():
        ctx.bind_proc(name, Procedure(functools.partial(fn, out=out), name.id))
    logger.debug("bound display bundle")
    return ctx


def builtin(fn: Callable[..., Value], name: Optional[str] = None) -> Procedure:
    """Wrap a plain function of evaluated arguments as a procedure.

    The wrapper evaluates each argument in the calling context, left to
    right, then calls ``fn(*values)``.
    """

    def apply_evaluated(ctx: Context, args: Value) -> Value:
        values: list[Value] = []
        walk(args, lambda expr: values.append(ctx.eval(expr)))
        return fn(*values)

    return Procedure(apply_evaluated, name or fn.__name__)
