"""Printed forms of values, tokens and parse trees.

`to_lisp_string` is the rendering used for evaluation results. The token and
tree displays show the output of the first two pipeline stages.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, TextIO

from sprig import LispValue, SExpression
from sprig.types.lambda_fn import Closure
from sprig.types.nil import Nil
from sprig.types.pair import Pair
from sprig.types.symbol import Symbol
from sprig.types.token import Token, TokenKind
from sprig.types.values import Primitive, Unspecified, Void

UNSPECIFIED_MARKER = "#<unspecified>"
PROCEDURE_MARKER = "#<procedure>"
UNKNOWN_MARKER = "#<unknown>"

TOKEN_TEXT = {
    TokenKind.OPEN: "(",
    TokenKind.CLOSE: ")",
    TokenKind.CLOSE_BRACE: "}",
}


def _write_value(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, bool):
        buffer.write("#t" if value else "#f")
    elif isinstance(value, int):
        buffer.write(str(value))
    elif isinstance(value, float):
        buffer.write(f"{value:.6f}")
    elif isinstance(value, str):
        buffer.write(f'"{value}"')
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif value is Nil:
        buffer.write("()")
    elif isinstance(value, Pair):
        buffer.write("(")
        cell: LispValue = value
        while True:
            _write_value(cell.car, buffer)
            cell = cell.cdr
            if isinstance(cell, Pair):
                buffer.write(" ")
                continue
            if cell is not Nil:
                buffer.write(" . ")
                _write_value(cell, buffer)
            break
        buffer.write(")")
    elif value is Unspecified:
        buffer.write(UNSPECIFIED_MARKER)
    elif value is Void:
        pass
    elif isinstance(value, (Closure, Primitive)):
        buffer.write(PROCEDURE_MARKER)
    else:
        buffer.write(UNKNOWN_MARKER)


def to_lisp_string(value: LispValue) -> str:
    """Render an evaluated value; Void renders as the empty string."""
    with StringIO() as buffer:
        _write_value(value, buffer)
        return buffer.getvalue()


def token_line(token: Token) -> str:
    """One `text:kind` line, e.g. `42:integer` or `(:open`."""
    if token.kind in TOKEN_TEXT:
        text = TOKEN_TEXT[token.kind]
    else:
        text = to_lisp_string(token.value)
    return f"{text}:{token.kind.value}"


def display_tokens(tokens: Iterable[Token], out: TextIO | None = None) -> None:
    """Print each token on its own line, then a blank line."""
    for token in tokens:
        print(token_line(token), file=out)
    print(file=out)


def format_tree(forest: Iterable[SExpression]) -> str:
    """The parsed forest back as source-like text, top-level forms space-separated."""
    return " ".join(to_lisp_string(tree) for tree in forest)


def print_tree(forest: Iterable[SExpression], out: TextIO | None = None) -> None:
    print(format_tree(forest), file=out)
