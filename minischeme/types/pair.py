"""Pairs and the list helpers built on them.

A proper list is a chain of Pairs whose last `second` is Nil. Any other
terminal value makes the chain improper (dotted). Whether a Pair opens a
parenthesis when printed is decided by the printer from its position, so
the node itself carries only its two slots.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from minischeme import Expression
from minischeme.types.nil import Nil


class Pair:
    __slots__ = ("first", "second")

    def __init__(self, first: Expression, second: Expression = Nil):
        self.first: Expression = first
        self.second: Expression = second

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return False
        return (type(self.first) is type(other.first) and self.first == other.first
                and type(self.second) is type(other.second) and self.second == other.second)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Pair({self.first!r}, {self.second!r})"


def make_list(values: Iterable[Expression]) -> Expression:
    """Build a fresh proper list from `values`; Nil when there are none."""
    head: Expression = Nil
    tail: Pair | None = None
    for value in values:
        cell = Pair(value)
        if tail is None:
            head = cell
        else:
            tail.second = cell
        tail = cell
    return head


def is_proper_list(expr: Expression) -> bool:
    while isinstance(expr, Pair):
        expr = expr.second
    return expr is Nil


def iter_pairs(expr: Expression) -> Iterator[Pair]:
    """Yield each Pair of a chain in order, stopping at the first non-Pair."""
    while isinstance(expr, Pair):
        yield expr
        expr = expr.second
