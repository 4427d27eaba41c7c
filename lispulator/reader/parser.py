"""
  LISPulator recursive-descent parser

Consumes a token sequence produced by the tokenizer and builds one
expression tree:

    - "(" ... ")"      -> List
    - decimal literals -> Number
    - anything else    -> Symbol

Tokens after the first complete expression are handed back to the caller
untouched.
"""

from __future__ import annotations

from typing import Optional, Sequence

from lispulator.config import get_max_depth
from lispulator.errors import LispulatorDepthError, LispulatorSyntaxError
from lispulator.types.expression import Expression, List, Number
from lispulator.types.symbol import Symbol

LPAREN = "("
RPAREN = ")"


def parse_atomic(token: str) -> Expression:
    # float() also takes digit-group underscores and non-ASCII digits;
    # neither is a decimal literal here.
    if token.isascii() and "_" not in token:
        try:
            return Number(float(token))
        except ValueError:
            pass
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: Sequence[str], max_depth: Optional[int] = None):
        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth if max_depth is not None else get_max_depth()

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def remaining(self) -> list[str]:
        return list(self.tokens[self.pos:])

    def parse_expr(self) -> Expression:
        tok = self.advance()
        if tok is None:
            raise LispulatorSyntaxError("unable to get token")
        if tok == LPAREN:
            return self.read_sequentially()
        if tok == RPAREN:
            raise LispulatorSyntaxError("unexpected `)`")
        return parse_atomic(tok)

    def read_sequentially(self) -> List:
        """Read list elements up to and including the closing ')'."""
        self.depth += 1
        if self.depth > self.max_depth:
            raise LispulatorDepthError(
                f"maximum nesting depth of {self.max_depth} exceeded"
            )
        items: list[Expression] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise LispulatorSyntaxError("no closing `)`")
            if tok == RPAREN:
                self.advance()
                break
            items.append(self.parse_expr())
        self.depth -= 1
        return List(tuple(items))


def _too_deep() -> LispulatorDepthError:
    # The host stack ran out before the configured limit was reached
    return LispulatorDepthError("maximum nesting depth exceeded for this interpreter")


def parse(
    tokens: Sequence[str], max_depth: Optional[int] = None
) -> tuple[Expression, list[str]]:
    """Parse one expression; return it together with the unconsumed tokens."""
    stream = TokenStream(tokens, max_depth)
    try:
        expr = stream.parse_expr()
    except RecursionError as ex:
        raise _too_deep() from ex
    return expr, stream.remaining()


def read_sequentially(
    tokens: Sequence[str], max_depth: Optional[int] = None
) -> tuple[List, list[str]]:
    """Parse list elements from just after an opening '('."""
    stream = TokenStream(tokens, max_depth)
    try:
        result = stream.read_sequentially()
    except RecursionError as ex:
        raise _too_deep() from ex
    return result, stream.remaining()
