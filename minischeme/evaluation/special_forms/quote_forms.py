from minischeme import Expression
from minischeme.errors import SchemeRuntimeError
from minischeme.types.scope import Scope


def quote_form(scope: Scope, tail: list[Expression]) -> Expression:
    if len(tail) != 1:
        raise SchemeRuntimeError("quote expects exactly 1 argument")
    return tail[0]
