"""Pair and list construction and access."""
from __future__ import annotations

from minischeme import Expression
from minischeme.errors import SchemeRuntimeError
from minischeme.types.pair import Pair, is_proper_list, iter_pairs, make_list
from minischeme.types.scope import Scope


def cons(scope: Scope, args: list[Expression]) -> Pair:
    if len(args) != 2:
        raise SchemeRuntimeError("cons requires exactly 2 arguments")
    return Pair(args[0], args[1])


def _pair_argument(name: str, args: list[Expression]) -> Pair:
    if len(args) != 1:
        raise SchemeRuntimeError(f"{name} requires exactly 1 argument")
    if not isinstance(args[0], Pair):
        raise SchemeRuntimeError(f"{name} requires a pair, got {args[0]!r}")
    return args[0]


def car(scope: Scope, args: list[Expression]) -> Expression:
    return _pair_argument("car", args).first


def cdr(scope: Scope, args: list[Expression]) -> Expression:
    return _pair_argument("cdr", args).second


def list_builtin(scope: Scope, args: list[Expression]) -> Expression:
    return make_list(args)


def _list_and_index(name: str, args: list[Expression]) -> tuple[list[Expression], int]:
    """Validate (name lst k) and return the elements of lst with k."""
    if len(args) != 2:
        raise SchemeRuntimeError(f"{name} requires exactly 2 arguments")
    lst, index = args
    if not is_proper_list(lst):
        raise SchemeRuntimeError(f"{name} requires a proper list, got {lst!r}")
    if type(index) is not int:
        raise SchemeRuntimeError(f"{name} requires an integer index, got {index!r}")
    return [cell.first for cell in iter_pairs(lst)], index


def list_ref(scope: Scope, args: list[Expression]) -> Expression:
    values, index = _list_and_index("list-ref", args)
    if not 0 <= index < len(values):
        raise SchemeRuntimeError(f"list-ref index {index} out of range")
    return values[index]


def list_tail(scope: Scope, args: list[Expression]) -> Expression:
    values, index = _list_and_index("list-tail", args)
    if not 0 <= index <= len(values):
        raise SchemeRuntimeError(f"list-tail index {index} out of range")
    return make_list(values[index:])
