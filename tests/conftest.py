import pytest

from skim.builtins import bind_core, bind_quasiquote, builtin
from skim.types import Int, Symbol, make_list
from skim.types.context import Context


def L(*items):
    """Build a proper list from positional items."""
    return make_list(items)


S = Symbol


@pytest.fixture
def ctx():
    """Return a fresh root context with the core forms and a little arithmetic."""
    c = Context()
    bind_core(c)
    bind_quasiquote(c)
    c.bind(S("+"), builtin(lambda *xs: Int(sum(xs)), "+"))
    c.bind(S("successor"), builtin(lambda x: Int(x + 1), "successor"))
    return c
