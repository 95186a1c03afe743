"""
  Linsl Reader: lexer and parser

- Streaming, lazy parsing
- Emits plain Python values:

    - #t / #f -> True / False
    - numbers -> float
    - symbols -> Symbol
    - lists   -> Python list ("()" is the empty-list sentinel)

  ';' starts a comment that runs to the end of the line.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from linsl import Expression
from linsl.errors import LinslSyntaxError, LinslUnbalancedParens
from linsl.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<atom>[^\s();]+)"
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?\d+(\.\d+)?")

Token = tuple[str, str, int]


def check_parens(source: str) -> None:
    """Raise LinslUnbalancedParens if '(' and ')' counts differ (comments ignored)."""
    code = "".join(t[1] for t in lex(source) if t[0] in ("lparen", "rparen"))
    opening = code.count("(")
    closing = code.count(")")
    if opening != closing:
        raise LinslUnbalancedParens(opening, closing)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            break
        pos = m.end()
        for nm in ("lparen", "rparen", "atom"):
            if m.group(nm):
                yield nm, m.group(nm), m.start(nm)
                break


def parse_atom(token: str) -> Expression:
    if token == "#t":
        return True
    if token == "#f":
        return False
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, -1
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, -1))

    def parse_expr(self) -> Expression:
        """Parse one expression. Returns None at end of input."""
        tok_type, tok_val, offset = self.peek()
        if tok_type is None:
            return None

        if tok_type == "atom":
            self.advance()
            return parse_atom(tok_val)

        if tok_type == "rparen":
            raise LinslSyntaxError("Unexpected closing parenthesis", offset)

        # lparen
        self.advance()
        items = []
        while True:
            next_type, _, _ = self.peek()
            if next_type == "rparen":
                self.advance()
                return items
            if next_type is None:
                raise LinslSyntaxError("Unmatched '('", offset)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Expression]:
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[Expression]:
    """Read every top-level expression in `source`."""
    check_parens(source)
    return list(TokenStream(lex(source)).parse_all())
