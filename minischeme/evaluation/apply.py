"""Application engine for minischeme.

Every procedure is handed the unevaluated argument chain of its call.
`apply` turns that chain into what the procedure expects:

- special forms get the unevaluated elements (`collect_arguments`);
- ordinary procedures get the elements evaluated left to right
  (`evaluate_arguments`).
"""

from __future__ import annotations

from minischeme import Expression
from minischeme.errors import SchemeRuntimeError
from minischeme.evaluation.evaluator import evaluate
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair
from minischeme.types.procedure import Procedure
from minischeme.types.scope import Scope


def collect_arguments(tail: Expression) -> list[Expression]:
    """Return the elements of an argument chain, unevaluated.

    Raises SchemeRuntimeError if the chain ends in anything but Nil.
    """
    args: list[Expression] = []
    while isinstance(tail, Pair):
        args.append(tail.first)
        tail = tail.second
    if tail is not Nil:
        raise SchemeRuntimeError("Malformed argument list")
    return args


def evaluate_arguments(scope: Scope, tail: Expression) -> list[Expression]:
    """Evaluate each element of an argument chain, left to right."""
    values: list[Expression] = []
    for arg in collect_arguments(tail):
        if arg is Nil:
            raise SchemeRuntimeError("Empty list cannot be an argument")
        values.append(evaluate(arg, scope))
    return values


def apply(head: Expression, scope: Scope, tail: Expression) -> Expression:
    if not isinstance(head, Procedure):
        raise SchemeRuntimeError(f"Cannot apply non-procedure {head!r}")
    if head.special:
        return head.fn(scope, collect_arguments(tail))
    return head.fn(scope, evaluate_arguments(scope, tail))
