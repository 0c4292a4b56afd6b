import logging
from typing import Mapping

from minischeme import Expression
from minischeme.builtin import BUILTINS
from minischeme.evaluation.evaluator import evaluate
from minischeme.printer import render
from minischeme.reader.parser import parse
from minischeme.types.scope import Scope
from minischeme.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates one top-level minischeme expression at a time.

    The global scope is built from `builtins` and persists across calls;
    each evaluation runs in a fresh child scope of it.
    """
    def __init__(self, builtins: Mapping[Symbol, Expression] = BUILTINS):
        self.global_scope = Scope(builtins)

    def parse(self, code: str) -> Expression:
        """Parse exactly one expression from `code`."""
        return parse(code)

    def evaluate(self, expr: Expression) -> Expression:
        return evaluate(expr, Scope(outer=self.global_scope))

    def render(self, value: Expression) -> str:
        return render(value)

    def run(self, code: str) -> str:
        """Parse, evaluate and render one expression."""
        expr = self.parse(code)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("parsed: %s", render(expr))
        result = self.render(self.evaluate(expr))
        logger.debug("evaluated: %s", result)
        return result
