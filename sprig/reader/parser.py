"""
  Sprig Parser

Bracket-matching over a token list, producing a forest of S-expressions:

    - integers, doubles, strings, booleans -> int, float, str, bool
    - symbols -> Symbol
    - lists   -> right-nested Pair cells ending in Nil
    - ()      -> Nil

`}` closes every level that is still open, so `(define (f x) (g (h x}`
reads the same as the fully parenthesised form. It may only be followed by
end of input or a new `(`.
"""

from __future__ import annotations

from typing import Iterable

from sprig import SExpression
from sprig.arena import Arena
from sprig.errors import SprigSyntaxError
from sprig.types.nil import Nil
from sprig.types.token import Token, TokenKind


def _close_level(stack: list, arena: Arena) -> None:
    """Pop back to the nearest OPEN marker and push the collected list."""
    lst: SExpression = Nil
    while True:
        item = stack.pop()
        # OPEN markers are the only Tokens left on the stack
        if isinstance(item, Token):
            break
        lst = arena.cons(item, lst)
    stack.append(lst)


def parse(tokens: Iterable[Token], arena: Arena) -> list[SExpression]:
    """Build the forest of top-level expressions, in source order."""
    tokens = list(tokens)
    stack: list = []
    num_open = 0
    num_close = 0

    for i, token in enumerate(tokens):
        kind = token.kind

        if kind is TokenKind.OPEN:
            num_open += 1
            stack.append(token)

        elif kind is TokenKind.CLOSE:
            num_close += 1
            if num_close > num_open:
                raise SprigSyntaxError("too many close parentheses")
            _close_level(stack, arena)

        elif kind is TokenKind.CLOSE_BRACE:
            if num_close >= num_open:
                raise SprigSyntaxError("too many close parentheses")
            if i + 1 < len(tokens) and tokens[i + 1].kind is not TokenKind.OPEN:
                raise SprigSyntaxError("wrong close brace usage")
            while num_close < num_open:
                num_close += 1
                _close_level(stack, arena)

        else:
            stack.append(token.value)

    if num_close < num_open:
        raise SprigSyntaxError("not enough close parentheses")

    return stack
