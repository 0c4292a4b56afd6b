from minischeme import Expression
from minischeme.evaluation.evaluator import evaluate
from minischeme.types.nil import Nil
from minischeme.types.scope import Scope


def _is_false(val: Expression) -> bool:
    return val is False


def _evaluate_operand(expr: Expression, scope: Scope) -> Expression:
    # A literal () operand yields the empty list instead of failing
    return Nil if expr is Nil else evaluate(expr, scope)


def and_form(scope: Scope, tail: list[Expression]) -> Expression:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until one yields #f,
    which is returned immediately. Otherwise returns the value of the last
    operand. With zero operands, returns #t.
    """
    result: Expression = True
    for expr in tail:
        result = _evaluate_operand(expr, scope)
        if _is_false(result):
            return False
    return result


def or_form(scope: Scope, tail: list[Expression]) -> Expression:
    """Short-circuiting logical OR special form.

    (or a b c ...) returns the first operand value that is not #f. If every
    operand yields #f, or there are none, returns #f.
    """
    for expr in tail:
        val = _evaluate_operand(expr, scope)
        if not _is_false(val):
            return val
    return False
