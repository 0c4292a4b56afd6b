"""
  Recursive-descent parser producing Pair trees.

    - integers -> int
    - booleans -> bool
    - symbols -> Symbol
    - (a b c) -> Pair(a, Pair(b, Pair(c, Nil)))
    - (a . b) -> Pair(a, b)
    - () -> Nil
    - 'x -> (quote x)
"""

from __future__ import annotations

from minischeme import Expression
from minischeme.errors import SchemeSyntaxError
from minischeme.reader.tokenizer import Tokenizer
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair
from minischeme.types.symbol import Symbol


QUOTE = Symbol("quote")


def read_expression(tokenizer: Tokenizer) -> Expression:
    if tokenizer.is_end():
        raise SchemeSyntaxError("Unexpected end of input")

    kind, value = tokenizer.token
    tokenizer.advance()

    if kind == "lparen":
        return read_list(tokenizer)
    if kind == "rparen":
        raise SchemeSyntaxError("Unexpected ')'")
    if kind == "symbol":
        return Symbol(value)
    if kind in ("constant", "boolean"):
        return value
    if kind == "quote":
        return Pair(QUOTE, Pair(read_expression(tokenizer)))
    raise SchemeSyntaxError(f"Unexpected token: {kind} {value}")


def read_list(tokenizer: Tokenizer) -> Expression:
    """Read list elements up to and including the closing ')'.

    The opening '(' has already been consumed.
    """
    head: Expression = Nil
    tail: Pair | None = None
    dotted = False
    closed_tail = False

    while not tokenizer.is_end():
        kind, _ = tokenizer.token

        if kind == "rparen":
            if dotted:
                raise SchemeSyntaxError("Expected an element after '.'")
            tokenizer.advance()
            return head

        if kind == "dot":
            if closed_tail or dotted:
                raise SchemeSyntaxError("Expected ')' after dotted tail")
            if tail is None:
                raise SchemeSyntaxError("'.' cannot start a list")
            tokenizer.advance()
            dotted = True
            continue

        if closed_tail:
            raise SchemeSyntaxError("Expected ')' after dotted tail")

        element = read_expression(tokenizer)
        if tail is None:
            head = tail = Pair(element)
        elif dotted:
            tail.second = element
            dotted, closed_tail = False, True
        else:
            tail.second = Pair(element)
            tail = tail.second

    raise SchemeSyntaxError("Unmatched '('")


def parse(source: str) -> Expression:
    """Parse exactly one expression from `source`."""
    tokenizer = Tokenizer(source)
    expr = read_expression(tokenizer)
    if not tokenizer.is_end():
        raise SchemeSyntaxError(f"Unexpected trailing input: {tokenizer.token.value!r}")
    return expr
