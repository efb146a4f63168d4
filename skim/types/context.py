"""Evaluation context for skim.

A Context stores bindings of Symbols to runtime values and supports nested
scopes via a parent link. Forking creates a child scope that falls back to
its parent on lookup; bindings made in the child are invisible to the parent.
"""

from __future__ import annotations

import logging
from typing import Optional

from skim import Value, ProcFn
from skim.errors import SkimInvalidSymbol, SkimUnboundSymbol
from skim.evaluation.evaluator import evaluate
from skim.types.atom import Procedure, literal_form
from skim.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _as_symbol(name) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if type(name) is str:
        return Symbol(name)
    raise SkimInvalidSymbol(f"Cannot bind {literal_form(name)} as a symbol")


class Context:
    """Hierarchical mapping from Symbols to values, with scoped evaluation."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Context] = None):
        self.vars: dict[Symbol, Value] = {}
        self.outer: Context | None = outer

    def bind(self, name: Symbol | str, value: Value) -> Context:
        """Define or overwrite `name` in this scope only. Returns self for chaining.

        Binding to Nil is a real binding: it shadows outer bindings of `name`.
        """
        self.vars[_as_symbol(name)] = value
        return self

    def bind_proc(self, name: Symbol | str, proc: Procedure | ProcFn) -> Context:
        """Bind a procedure (or a plain ``fn(ctx, args)`` callable) under `name`."""
        sym = _as_symbol(name)
        if not isinstance(proc, Procedure):
            proc = Procedure(proc, sym.id)
        return self.bind(sym, proc)

    def fork(self) -> Context:
        child = Context(self)
        logger.debug("forked scope %#x from %#x", id(child), id(self))
        return child

    def parent(self) -> Optional[Context]:
        return self.outer

    def find(self, name: Symbol) -> Optional[Context]:
        """Find the nearest scope in the chain that binds `name`."""
        ctx: Optional[Context] = self
        while ctx is not None:
            if name in ctx.vars:
                return ctx
            ctx = ctx.outer
        return None

    def lookup(self, name: Symbol | str) -> Value:
        sym = _as_symbol(name)
        ctx = self.find(sym)
        if ctx is None:
            raise SkimUnboundSymbol(f"Cannot lookup unbound symbol {sym}")
        return ctx.vars[sym]

    def eval(self, value: Value) -> Value:
        return evaluate(value, self)

    def _scope_form(self) -> str:
        return "{" + ", ".join(f"{k}: {literal_form(v)}" for k, v in self.vars.items()) + "}"

    def __str__(self) -> str:
        if self.outer is None:
            return self._scope_form()
        return self._scope_form() + " -> ..."

    def __repr__(self) -> str:
        scopes = []
        ctx = self
        while ctx is not None:
            scopes.append(ctx._scope_form())
            ctx = ctx.outer
        return f"<Context depth={len(scopes) - 1}: {' -> '.join(scopes)}>"
