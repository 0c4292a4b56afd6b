"""Lexical scopes for minischeme.

A Scope maps Symbols to values and may link to an `outer` scope. Lookup
walks the chain outwards, so the nearest binding always wins. The global
scope is the one with no outer link.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from minischeme import Expression
from minischeme.errors import SchemeNameError
from minischeme.types.symbol import Symbol


class Scope:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, bindings: Mapping[Symbol, Expression] | None = None,
                 outer: Optional[Scope] = None):
        self.vars: dict[Symbol, Expression] = dict(bindings) if bindings else {}
        self.outer: Scope | None = outer

    def define(self, name: Symbol, value: Expression) -> None:
        """Bind `name` to `value` in this scope's own frame."""
        self.vars[name] = value

    def reset(self, name: Symbol, value: Expression) -> None:
        """Rebind `name` in this scope's own frame.

        Same effect as `define`: the binding is created if it is missing.
        """
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Scope]:
        """Find the nearest scope in the chain that binds `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.outer
        return None

    def lookup(self, name: Symbol) -> Expression:
        scope = self.find(name)
        if scope is None:
            raise SchemeNameError(f"Unbound symbol {name}")
        return scope.vars[name]

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        chain = []
        scope: Optional[Scope] = self
        while scope is not None:
            with StringIO() as buffer:
                scope._write_vars(buffer)
                chain.append(buffer.getvalue())
            scope = scope.outer
        return "<Scope chain: " + " -> ".join(chain) + ">"
