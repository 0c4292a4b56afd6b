"""Built-in procedure values.

A Procedure wraps a Python function called as fn(scope, args). Ordinary
procedures receive their arguments already evaluated. Special forms receive
the unevaluated argument expressions and decide what to evaluate.
"""

from __future__ import annotations

from typing import Callable

from minischeme import Expression


class Procedure:
    __slots__ = ("name", "fn", "special")

    def __init__(self, name: str, fn: Callable[..., Expression], special: bool = False):
        self.name = name
        self.fn = fn
        self.special = special

    def __repr__(self) -> str:
        kind = "special-form" if self.special else "procedure"
        return f"<{kind} {self.name}>"
