"""Integer arithmetic and comparison.

All values are signed 64-bit integers. A result outside that range, or a
division by zero, raises SchemeRuntimeError.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

from minischeme import Expression
from minischeme.errors import SchemeRuntimeError
from minischeme.types.integer import fits_int64
from minischeme.types.scope import Scope


def _integers(name: str, args: list[Expression]) -> list[int]:
    for arg in args:
        if type(arg) is not int:
            raise SchemeRuntimeError(f"All arguments to {name} must be integers, got {arg!r}")
    return args


def _checked(name: str, op: Callable[[int, int], int]) -> Callable[[int, int], int]:
    def step(a: int, b: int) -> int:
        result = op(a, b)
        if not fits_int64(result):
            raise SchemeRuntimeError(f"Integer overflow in {name}")
        return result
    return step


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise SchemeRuntimeError("Division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# -------------------------------
# Folds
# -------------------------------
def _fold(name: str, op: Callable[[int, int], int], seed: int):
    """(op) over any number of integers, starting from `seed`."""
    step = _checked(name, op)

    def fold(scope: Scope, args: list[Expression]) -> int:
        return reduce(step, _integers(name, args), seed)
    return fold


def _non_empty_fold(name: str, op: Callable[[int, int], int]):
    """(op) over one or more integers, starting from the first."""
    step = _checked(name, op)

    def fold(scope: Scope, args: list[Expression]) -> int:
        values = _integers(name, args)
        if not values:
            raise SchemeRuntimeError(f"{name} requires at least 1 argument")
        return reduce(step, values[1:], values[0])
    return fold


add = _fold("+", operator.add, 0)
mul = _fold("*", operator.mul, 1)
sub = _non_empty_fold("-", operator.sub)
div = _non_empty_fold("/", _truncating_div)
minimum = _non_empty_fold("min", min)
maximum = _non_empty_fold("max", max)


def absolute(scope: Scope, args: list[Expression]) -> int:
    if len(args) != 1:
        raise SchemeRuntimeError("abs requires exactly 1 argument")
    value = abs(_integers("abs", args)[0])
    if not fits_int64(value):
        raise SchemeRuntimeError("Integer overflow in abs")
    return value


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, relation: Callable[[int, int], bool]):
    """#t when every adjacent pair satisfies `relation`; vacuously #t below 2 args."""
    def compare(scope: Scope, args: list[Expression]) -> bool:
        values = _integers(name, args)
        return all(relation(a, b) for a, b in zip(values, values[1:]))
    return compare


eq = _chain("=", operator.eq)
lt = _chain("<", operator.lt)
gt = _chain(">", operator.gt)
lte = _chain("<=", operator.le)
gte = _chain(">=", operator.ge)
