import pytest

from skim.builtins import bind_core, bind_quasiquote, builtin
from skim.errors import (
    SkimArityError, SkimTypeError, SkimUnboundSymbol, SkimWalkError,
)
from skim.types import Cons, Int, Nil, QUASIQUOTE, QUOTE, UNQUOTE, make_list
from skim.types.context import Context
from conftest import L, S

BEGIN, LET, LET_STAR, LETREC = S("begin"), S("let"), S("let*"), S("letrec")


# -----------------------------------------------------
# begin
# -----------------------------------------------------

def test_begin_returns_last_value(ctx):
    assert ctx.eval(L(BEGIN, Int(1), Int(2), Int(3))) == 3


def test_begin_empty_is_nil(ctx):
    assert ctx.eval(L(BEGIN)) is Nil


def test_begin_evaluates_in_same_context(ctx):
    ctx.bind_proc(S("define-y"), lambda c, args: c.bind(S("y"), Int(9)) and Nil)
    assert ctx.eval(L(BEGIN, L(S("define-y")), S("y"))) == 9
    assert ctx.lookup(S("y")) == 9


def test_begin_aborts_on_first_failure(ctx):
    calls = []
    ctx.bind(S("tick"), builtin(lambda: calls.append(1) or Int(len(calls)), "tick"))
    with pytest.raises(SkimUnboundSymbol):
        ctx.eval(L(BEGIN, L(S("tick")), S("undefined"), L(S("tick"))))
    assert calls == [1]


# -----------------------------------------------------
# let / let* / letrec
# -----------------------------------------------------

def test_let_bindings_evaluate_in_outer_scope(ctx):
    ctx.bind(S("x"), Int(10))
    form = L(LET, L(L(S("x"), Int(2)), L(S("y"), L(S("+"), S("x"), Int(1)))), S("y"))
    assert ctx.eval(form) == 11


def test_let_body_sees_new_bindings_and_returns_last(ctx):
    form = L(LET, L(L(S("x"), Int(2)), L(S("y"), Int(3))), S("y"), L(S("+"), S("x"), S("y")))
    assert ctx.eval(form) == 5


def test_let_does_not_leak_bindings(ctx):
    ctx.bind(S("x"), Int(10))
    ctx.eval(L(LET, L(L(S("x"), Int(2)), L(S("z"), Int(3))), S("z")))
    assert ctx.lookup(S("x")) == 10
    with pytest.raises(SkimUnboundSymbol):
        ctx.lookup(S("z"))


def test_let_with_no_bindings(ctx):
    assert ctx.eval(L(LET, Nil, Int(5))) == 5
    assert ctx.eval(L(LET, Nil)) is Nil


def test_let_body_failure_propagates(ctx):
    with pytest.raises(SkimUnboundSymbol):
        ctx.eval(L(LET, L(L(S("x"), Int(1))), S("nope")))


@pytest.mark.parametrize(
    "bindings,error",
    [
        (L(L(Int(1), Int(2))), SkimTypeError),
        (L(L(S("x"))), SkimTypeError),
        (L(L(S("x"), Int(1), Int(2))), SkimTypeError),
        (L(S("x")), SkimTypeError),
        (Cons(L(S("x"), Int(1)), Int(2)), SkimWalkError),
    ],
)
def test_let_rejects_malformed_bindings(ctx, bindings, error):
    with pytest.raises(error):
        ctx.eval(L(LET, bindings, Int(0)))


def test_let_requires_binding_list(ctx):
    with pytest.raises(SkimArityError):
        ctx.eval(L(LET))


def test_let_star_sees_earlier_bindings(ctx):
    form = L(LET_STAR, L(L(S("x"), Int(1)), L(S("y"), L(S("successor"), S("x")))), S("y"))
    assert ctx.eval(form) == 2


def test_let_star_shadows_outer(ctx):
    ctx.bind(S("x"), Int(10))
    form = L(LET_STAR, L(L(S("x"), Int(1)), L(S("y"), L(S("+"), S("x"), Int(1)))), S("y"))
    assert ctx.eval(form) == 2
    assert ctx.lookup(S("x")) == 10


def test_letrec_is_not_registered_by_default(ctx):
    with pytest.raises(SkimUnboundSymbol):
        ctx.lookup(LETREC)


def test_letrec_enabled_by_environment(monkeypatch):
    monkeypatch.setenv("SKIM_ENABLE_LETREC", "1")
    assert str(bind_core(Context()).lookup(LETREC)) == "letrec"


def test_letrec_binds_into_sibling_scope():
    root = bind_core(Context(), letrec=True)
    caller = root.fork().bind(S("x"), Int(1))
    assert caller.eval(L(LETREC, L(L(S("y"), S("x"))), S("y"))) == 1
    # the body runs beside the caller, not inside it
    with pytest.raises(SkimUnboundSymbol):
        caller.eval(L(LETREC, L(L(S("y"), Int(5))), S("x")))


def test_letrec_at_root_forks_the_root():
    root = bind_core(Context(), letrec=True)
    assert root.eval(L(LETREC, L(L(S("y"), Int(5))), S("y"))) == 5
    with pytest.raises(SkimUnboundSymbol):
        root.lookup(S("y"))


# -----------------------------------------------------
# quote / quasiquote / unquote
# -----------------------------------------------------

def test_quote_returns_argument_unevaluated(ctx):
    data = L(S("a"), S("b"), S("c"))
    assert ctx.eval(L(QUOTE, data)) is data
    assert ctx.eval(L(QUOTE, S("undefined"))) == S("undefined")


def test_quote_empty_list(ctx):
    assert ctx.eval(L(QUOTE, Nil)) is Nil
    empty = Cons()
    assert ctx.eval(L(QUOTE, empty)) is empty


def test_quote_argument_list_ending_in_sentinel(ctx):
    form = Cons(QUOTE, Cons(S("x"), Cons()))
    assert str(form) == "'x"
    assert ctx.eval(form) == S("x")


def test_let_binding_ending_in_sentinel(ctx):
    binding = Cons(S("x"), Cons(Int(4), Cons()))
    assert ctx.eval(L(LET, L(binding), S("x"))) == 4


@pytest.mark.parametrize("form", [L(QUOTE),L(QUOTE, S("a"), S("b")), Cons(QUOTE, S("a"))])
def test_quote_arity(ctx, form):
    with pytest.raises(SkimArityError):
        ctx.eval(form)


def test_quasiquote_self_evaluating(ctx):
    assert ctx.eval(L(QUASIQUOTE, Int(7))) == 7


def test_quasiquote_with_unquote(ctx):
    ctx.bind(S("x"), Int(41))
    assert ctx.eval(L(QUASIQUOTE, L(UNQUOTE, L(S("+"), S("x"), Int(1))))) == 42


def test_quasiquote_does_not_leak_unquote(ctx):
    ctx.eval(L(QUASIQUOTE, L(UNQUOTE, Int(1))))
    with pytest.raises(SkimUnboundSymbol):
        ctx.lookup(UNQUOTE)


def test_unquote_outside_quasiquote_is_unbound(ctx):
    with pytest.raises(SkimUnboundSymbol):
        ctx.eval(L(UNQUOTE, Int(1)))


def test_nested_unquote_does_not_recurse(ctx):
    with pytest.raises(SkimTypeError, match="cannot apply nil"):
        ctx.eval(L(QUASIQUOTE, L(UNQUOTE, L(UNQUOTE, Int(1)))))


def test_quasiquote_arity(ctx):
    with pytest.raises(SkimArityError):
        ctx.eval(L(QUASIQUOTE))


def test_quasiquote_is_a_separate_bundle():
    ctx = bind_core(Context())
    with pytest.raises(SkimUnboundSymbol):
        ctx.lookup(QUASIQUOTE)
    assert str(bind_quasiquote(ctx).lookup(QUASIQUOTE)) == "quasiquote"


def test_core_bundle_names(ctx):
    for name in ("begin", "let", "let*", "quote"):
        assert str(ctx.lookup(S(name))) == name
    assert make_list([]) is Nil
