"""
  Lexer for minischeme source text.

- Lazy: `lex` is a generator, tokens are produced on demand
- Tokens are (kind, value) tuples:

    - constant -> int
    - lparen / rparen -> "(" / ")"
    - symbol -> str
    - quote -> "'"
    - dot -> "."
    - boolean -> True / False
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from minischeme.errors import SchemeSyntaxError
from minischeme.types.integer import fits_int64


TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r"|(?P<dot>\.)"
    r"|(?P<boolean>#[tf])"  # checked before symbols, which may also start with '#'
    r"|(?P<constant>[+-]?[0-9]+)"
    r"|(?P<sign>[+-])"  # a lone sign is a symbol
    r"|(?P<symbol>[A-Za-z<=>*/#][A-Za-z0-9<=>*/#?!-]*)"
)

# ASCII whitespace only; other Unicode spaces are rejected as unknown characters
WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]*")


class Token(NamedTuple):
    kind: str
    value: object


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, value) tuples."""
    pos = WHITESPACE_RE.match(source).end()
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise SchemeSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        kind, text = m.lastgroup, m.group()

        if kind == "constant":
            value = int(text)
            if not fits_int64(value):
                raise SchemeSyntaxError(f"Integer literal out of range: {text}")
            yield Token("constant", value)
        elif kind == "boolean":
            yield Token("boolean", text == "#t")
        elif kind in ("sign", "symbol"):
            yield Token("symbol", text)
        else:
            yield Token(kind, text)

        pos = WHITESPACE_RE.match(source, m.end()).end()


class Tokenizer:
    """One-token lookahead over `lex`.

    `token` is the current token; `advance` moves to the next one and
    `is_end` reports whether the input is exhausted.
    """

    def __init__(self, source: str):
        self._tokens = lex(source)
        self._current: Optional[Token] = None
        self.advance()

    def is_end(self) -> bool:
        return self._current is None

    @property
    def token(self) -> Token:
        if self._current is None:
            raise SchemeSyntaxError("Unexpected end of input")
        return self._current

    def advance(self) -> None:
        self._current = next(self._tokens, None)
