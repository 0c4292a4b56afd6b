"""Render values as minischeme source text.

A Pair always opens a parenthesis where it is rendered as a value; the
Pairs that continue its chain through `second` are rendered inline, so
`(1 . (2 3))` prints as `(1 2 3)`.
"""

from __future__ import annotations

from io import StringIO

from minischeme import Expression
from minischeme.errors import SchemeInternalError
from minischeme.types.nil import NilType
from minischeme.types.pair import Pair
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Symbol


def _write(expr: Expression, buffer: StringIO) -> None:
    match expr:
        case bool():
            buffer.write("#t" if expr else "#f")
        case int():
            buffer.write(str(expr))
        case Symbol():
            buffer.write(expr.name)
        case NilType():
            buffer.write("()")
        case Pair():
            buffer.write("(")
            _write(expr.first, buffer)
            tail = expr.second
            while isinstance(tail, Pair):
                buffer.write(" ")
                _write(tail.first, buffer)
                tail = tail.second
            if not isinstance(tail, NilType):
                buffer.write(" . ")
                _write(tail, buffer)
            buffer.write(")")
        case Procedure():
            raise SchemeInternalError(f"Cannot print {expr!r}")
        case _:
            raise SchemeInternalError(f"Not an expression: {expr!r}")


def render(expr: Expression) -> str:
    with StringIO() as buffer:
        _write(expr, buffer)
        return buffer.getvalue()
