"""The built-in procedure table.

`BUILTINS` is a read-only mapping from Symbol to Procedure. Each Interpreter
copies it into its own global scope, so instances never share bindings.
"""

from types import MappingProxyType

from minischeme.builtin import arithmetic, list_builtin, predicates
from minischeme.evaluation.special_forms import SPECIAL_FORMS
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Symbol

_PROCEDURES = {
    "number?": predicates.is_number,
    "boolean?": predicates.is_boolean,
    "pair?": predicates.is_pair,
    "symbol?": predicates.is_symbol,
    "null?": predicates.is_null,
    "list?": predicates.is_list,
    "not": predicates.logical_not,
    "+": arithmetic.add,
    "*": arithmetic.mul,
    "-": arithmetic.sub,
    "/": arithmetic.div,
    "min": arithmetic.minimum,
    "max": arithmetic.maximum,
    "abs": arithmetic.absolute,
    "=": arithmetic.eq,
    "<": arithmetic.lt,
    ">": arithmetic.gt,
    "<=": arithmetic.lte,
    ">=": arithmetic.gte,
    "cons": list_builtin.cons,
    "car": list_builtin.car,
    "cdr": list_builtin.cdr,
    "list": list_builtin.list_builtin,
    "list-ref": list_builtin.list_ref,
    "list-tail": list_builtin.list_tail,
}

BUILTINS = MappingProxyType({
    **{Symbol(name): Procedure(name, fn) for name, fn in _PROCEDURES.items()},
    **{Symbol(name): proc for name, proc in SPECIAL_FORMS.items()},
})
