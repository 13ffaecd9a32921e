"""Bulk-allocation registry.

Every token, pair, frame and closure built while tokenizing, parsing or
evaluating is recorded in an Arena. Nothing is released individually: a single
`release()` drops every record at once, and is the only way out. The arena is a
plain object handed to each stage, so independent interpreters each own one.
"""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

from sprig import LispValue, SExpression
from sprig.errors import SprigArenaError
from sprig.types.environment import Frame
from sprig.types.lambda_fn import Closure
from sprig.types.nil import Nil
from sprig.types.pair import Pair
from sprig.types.symbol import Symbol
from sprig.types.token import Token, TokenKind

T = TypeVar("T")


class Arena:
    """Registry of everything allocated during one run."""

    __slots__ = ("_records", "_released")

    def __init__(self):
        self._records: list[object] = []
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def __len__(self) -> int:
        return len(self._records)

    def alloc(self, obj: T) -> T:
        """Record `obj` and hand it back."""
        if self._released:
            raise SprigArenaError("Cannot allocate from a released arena")
        self._records.append(obj)
        return obj

    # --- Constructors used by the reader and evaluator ---
    def cons(self, car: LispValue, cdr: LispValue) -> Pair:
        return self.alloc(Pair(car, cdr))

    def frame(self, outer: Optional[Frame] = None) -> Frame:
        return self.alloc(Frame(outer))

    def closure(self, formals: list[Symbol], body: list[SExpression], frame: Frame) -> Closure:
        return self.alloc(Closure(formals, body, frame))

    def token(self, kind: TokenKind, value: LispValue = None) -> Token:
        return self.alloc(Token(kind, value))

    def list_from(self, items: Iterable[LispValue]) -> LispValue:
        """Build a proper list holding `items` in order."""
        result: LispValue = Nil
        for item in reversed(list(items)):
            result = self.cons(item, result)
        return result

    def release(self) -> None:
        """Drop every record. Valid exactly once."""
        if self._released:
            raise SprigArenaError("Arena already released")
        self._records.clear()
        self._released = True

    def __enter__(self) -> Arena:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._released:
            self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else f"{len(self._records)} records"
        return f"<Arena {state}>"
