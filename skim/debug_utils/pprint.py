from __future__ import annotations

from io import StringIO

from skim import Value
from skim.types.atom import Procedure, String, display_form
from skim.types.cons import Cons
from skim.types.symbol import Symbol, QUOTE, QUASIQUOTE, UNQUOTE

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_QUOTE = "\033[96m"
COLOR_STRING = "\033[93m"
COLOR_PROCEDURE = "\033[95m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "indent": "\t",
    "color_symbols": False,
    "color_quotes": False,
    "color_strings": False,
    "color_procedures": False,
}

_MARKERS = {QUOTE, QUASIQUOTE, UNQUOTE}


def colorize(obj: Value, options: dict = DEFAULT_OPTIONS) -> str:
    text = display_form(obj)
    if isinstance(obj, Symbol):
        if obj in _MARKERS and options.get("color_quotes", False):
            return f"{COLOR_QUOTE}{text}{RESET}"
        if options.get("color_symbols", False):
            return f"{COLOR_SYMBOL}{text}{RESET}"
    elif isinstance(obj, String) and options.get("color_strings", False):
        return f"{COLOR_STRING}{text}{RESET}"
    elif isinstance(obj, Procedure) and options.get("color_procedures", False):
        return f"{COLOR_PROCEDURE}{text}{RESET}"
    return text


def pprint_atom(atom: Value, options: dict = DEFAULT_OPTIONS) -> str:
    """
    Render the raw pair structure of `atom` as an indented tree, one node per
    line: each pair opens with "(", its head and tail follow one level deeper
    (the tail prefixed with ". "), and a ")" closes it.
    """
    with StringIO() as buffer:
        _write_tree(atom, buffer, "", "", options)
        return buffer.getvalue()


def _write_tree(atom: Value, buffer: StringIO, lead: str, prefix: str, options: dict) -> None:
    indent = options.get("indent", "\t")
    if isinstance(atom, Cons):
        buffer.write(f"{prefix}{lead}(\n")
        _write_tree(atom.head, buffer, "", prefix + indent, options)
        _write_tree(atom.tail, buffer, ". ", prefix + indent, options)
        buffer.write(f"{prefix})\n")
    else:
        buffer.write(f"{prefix}{lead}{colorize(atom, options)}\n")
