"""
  Shallot Reader: Lexer and Parser

- Streaming, lazy parsing
- Emits the evaluator's own representation, no Cons cells:

    - lists -> Python list
    - numbers -> float
    - symbols -> Symbol (unicode names such as λ, μ, ε and ∂ included)
    - "double quoted strings" -> Symbol keeping its quotes; strings evaluate to themselves
    - 'x -> [Symbol("quote"), x]
    - ; comments run to end of line and are dropped
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from shallot import SExpression
from shallot.types.errors import ShallotSyntaxError
from shallot.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote marker
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\[\s\S]|[^"\\])*")'  # "text", backslash escapes
    r"|(?P<symbol>[^\s()';\"][^\s()';]*)"  # everything else up to a delimiter
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

ESCAPE_RE = re.compile(r'\\(["\\])')

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m and source[pos] == '"':
            raise ShallotSyntaxError(f"Unterminated string starting at {pos}")
        if not m:
            raise ShallotSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def atom(token: str) -> SExpression:
    """Numbers become floats, anything else a Symbol."""
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


def string_literal(token: str) -> Symbol:
    """A quoted token becomes a Symbol that keeps its quotes.

    Only \\" and \\\\ are unescaped; any other backslash is kept as written.
    """
    return Symbol('"' + ESCAPE_RE.sub(r"\1", token[1:-1]) + '"')


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Return the next expression, or None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return atom(tok_val)

        if tok_type == "string":
            return string_literal(tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise ShallotSyntaxError("Trailing quote in input")
            if self.peek()[0] == "rparen":
                raise ShallotSyntaxError("Quote must be followed by an expression")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                nxt = self.peek()[0]
                if nxt is None:
                    raise ShallotSyntaxError("Unmatched '('")
                if nxt == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        raise ShallotSyntaxError("Unexpected close bracket")

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek()[0] is not None:
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
