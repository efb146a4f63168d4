"""Generic list traversal helpers over Cons chains.

``walk`` is a flat, single-level pass over a proper list. ``traverse`` is a
recursive, visitor-chained descent into heads and tails. ``pair`` and
``to_list`` destructure and materialise lists. All failures are raised as
exceptions; the first one aborts the operation.
"""

from __future__ import annotations

from typing import Callable

from skim import Value, VisitorFn
from skim.errors import SkimTypeError, SkimWalkError
from skim.types.atom import display_form, kind_of
from skim.types.cons import Cons, is_empty
from skim.types.nil import Nil


def walk(lst: Value, fn: Callable[[Value], None]) -> None:
    """Call ``fn`` on the head of every node of a proper list, left to right.

    Stops at the first empty node. Raises SkimWalkError, without calling
    ``fn`` for it, when a tail is neither a pair nor Nil. Anything ``fn``
    raises propagates unchanged.
    """
    node = lst
    while True:
        if node is Nil:
            return
        if not isinstance(node, Cons):
            raise SkimWalkError(f"cannot walk {kind_of(node)}")
        if is_empty(node):
            return
        fn(node.head)
        node = node.tail


def traverse(root: Value, visitor: VisitorFn) -> None:
    """Visit every non-empty node depth first, chaining visitors.

    The visitor is called on each node (pairs included) and returns the
    visitor to use for that node's head and tail, or None to stop descending
    from it. Sibling branches higher up are still visited. Exceptions raised
    anywhere, including while traversing a head, propagate to the caller.
    """
    node = root
    while not is_empty(node):
        visitor = visitor(node)
        if visitor is None or not isinstance(node, Cons):
            return
        if not is_empty(node.head):
            traverse(node.head, visitor)
        node = node.tail


def pair(value: Value) -> tuple[Value, Value]:
    """Destructure the exact two-element list ``(a b)`` into ``(a, b)``."""
    if not isinstance(value, Cons):
        raise SkimTypeError(f"atom {display_form(value)} is not a cons")
    rest = value.tail
    if not isinstance(rest, Cons):
        raise SkimTypeError(f"atom {display_form(rest)} is not a cons")
    if not is_empty(rest.tail):
        raise SkimTypeError(f"atom {display_form(value)} is not a pair")
    return value.head, rest.head


def to_list(value: Value) -> list[Value]:
    """Materialise a proper list into a Python list ([] for the empty list)."""
    items: list[Value] = []
    walk(value, items.append)
    return items
