from __future__ import annotations

from enum import Enum

from sprig import LispValue


class TokenKind(Enum):
    OPEN = "open"
    CLOSE = "close"
    CLOSE_BRACE = "closebrace"
    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"


STRUCTURAL = (TokenKind.OPEN, TokenKind.CLOSE, TokenKind.CLOSE_BRACE)


class Token:
    __slots__ = ("kind", "value")

    def __init__(self, kind: TokenKind, value: LispValue = None):
        self.kind = kind
        # Literal payload: int, float, str, bool or Symbol; None for brackets
        self.value = value

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Token)
            and self.kind is other.kind
            and type(self.value) is type(other.value)
            and self.value == other.value
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.kind in STRUCTURAL:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.value!r})"
