"""Core evaluator for minischeme.

Atoms evaluate to themselves. A Pair is a call: its head must be a Symbol
naming a procedure in scope, and the procedure receives the unevaluated
rest of the chain.
"""

from __future__ import annotations

from minischeme import Expression
from minischeme.errors import SchemeInternalError, SchemeRuntimeError
from minischeme.types.nil import NilType
from minischeme.types.pair import Pair
from minischeme.types.procedure import Procedure
from minischeme.types.scope import Scope
from minischeme.types.symbol import Symbol


def evaluate(expr: Expression, scope: Scope) -> Expression:
    match expr:
        case bool() | int() | Symbol():
            return expr
        case Pair(first=NilType()):
            raise SchemeRuntimeError("Cannot call the empty list")
        case Pair(first=Symbol() as head):
            # apply imports this module, so bind it at call time
            from minischeme.evaluation.apply import apply
            return apply(scope.lookup(head), scope, expr.second)
        case Pair():
            raise SchemeRuntimeError(f"Head of call is not callable: {expr.first!r}")
        case NilType():
            raise SchemeRuntimeError("Cannot evaluate the empty list")
        case Procedure():
            raise SchemeInternalError(f"Cannot evaluate {expr!r} directly")
    raise SchemeInternalError(f"Not an expression: {expr!r}")
