"""Closure representation for Sprig."""

from __future__ import annotations

from sprig import SExpression
from sprig.types.environment import Frame
from sprig.types.symbol import Symbol


class Closure:
    """A first-class procedure: formal parameters, body forms and the defining frame.

    The frame is shared, not copied: the closure keeps it reachable for as long
    as the closure itself is reachable.
    """

    __slots__ = ("formals", "body", "frame")

    def __init__(self, formals: list[Symbol], body: list[SExpression], frame: Frame):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        self.frame: Frame = frame

    def __repr__(self) -> str:
        return f"Closure({self.formals!r})"
