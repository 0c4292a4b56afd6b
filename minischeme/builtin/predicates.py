"""Type and list-shape predicates."""
from __future__ import annotations

from minischeme import Expression
from minischeme.errors import SchemeRuntimeError
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair, is_proper_list
from minischeme.types.scope import Scope
from minischeme.types.symbol import Symbol


def _single(name: str, args: list[Expression]) -> Expression:
    if len(args) != 1:
        raise SchemeRuntimeError(f"{name} requires exactly 1 argument")
    return args[0]


def is_number(scope: Scope, args: list[Expression]) -> bool:
    # bool is a subclass of int, so compare exact types
    return type(_single("number?", args)) is int


def is_boolean(scope: Scope, args: list[Expression]) -> bool:
    return type(_single("boolean?", args)) is bool


def is_pair(scope: Scope, args: list[Expression]) -> bool:
    return isinstance(_single("pair?", args), Pair)


def is_symbol(scope: Scope, args: list[Expression]) -> bool:
    return isinstance(_single("symbol?", args), Symbol)


def is_null(scope: Scope, args: list[Expression]) -> bool:
    return _single("null?", args) is Nil


def is_list(scope: Scope, args: list[Expression]) -> bool:
    """Predicate: #t if the argument is Nil or a Nil-terminated Pair chain."""
    return is_proper_list(_single("list?", args))


def logical_not(scope: Scope, args: list[Expression]) -> bool:
    """Only #f is false; 0 and () are not."""
    return _single("not", args) is False
