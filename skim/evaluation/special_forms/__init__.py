"""Registry of skim special forms.

Maps Symbols to handler functions ``fn(ctx, args)`` that receive their
argument list unevaluated. The tables are grouped into the bundles that
skim.builtins registers into a context.
"""

from skim.types.symbol import Symbol, QUOTE, QUASIQUOTE
from skim.evaluation.special_forms.begin_form import begin_form
from skim.evaluation.special_forms.let_forms import let_form, let_star_form, letrec_form
from skim.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, unquote_form
from skim.evaluation.special_forms.display_forms import display_fn, newline_fn

CORE_FORMS = {
    Symbol("begin"): begin_form,
    Symbol("let"): let_form,
    Symbol("let*"): let_star_form,
    QUOTE: quote_form,
}

# Defined but not part of CORE_FORMS; see skim.builtins.bind_core.
LETREC_FORMS = {
    Symbol("letrec"): letrec_form,
}

# Usable by hosts that want quasiquote; unquote is bound by quasiquote itself.
QUASIQUOTE_FORMS = {
    QUASIQUOTE: quasiquote_form,
}

DISPLAY_FORMS = {
    Symbol("display"): display_fn,
    Symbol("newline"): newline_fn,
}

__all__ = [
    "CORE_FORMS", "LETREC_FORMS", "QUASIQUOTE_FORMS", "DISPLAY_FORMS",
    "begin_form", "let_form", "let_star_form", "letrec_form",
    "quote_form", "quasiquote_form", "unquote_form",
    "display_fn", "newline_fn",
]
