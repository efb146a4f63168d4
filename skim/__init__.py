# Core type aliases for skim's data model.
# Runtime values are instances of the closed Atom variant set defined under
# skim.types, plus the absent value Nil. The aliases below are deliberately
# loose so that they can be imported anywhere without import cycles.
#
# Naming guidance:
# - Value:     any runtime value (including Nil) in annotations.
# - ProcFn:    the Python callable wrapped by a Procedure, fn(ctx, args).
# - VisitorFn: a traversal visitor, returning the next visitor or None.

from typing import Any, Callable, Optional

Value = Any

ProcFn = Callable[..., Value]

VisitorFn = Callable[[Value], Optional[Callable]]
