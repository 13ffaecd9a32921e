"""Marker values and the built-in procedure wrapper."""

from __future__ import annotations

from typing import Callable

from sprig import LispValue


class UnspecifiedType:
    """Result of a form with no meaningful value, e.g. `(if #f 1)`."""

    _instance: UnspecifiedType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Unspecified"


class VoidType:
    """Result of `define`; renders as nothing."""

    _instance: VoidType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Void"


Unspecified = UnspecifiedType()
Void = VoidType()


class Primitive:
    """A built-in procedure. `fn` receives the arena and the evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, arena, args: list[LispValue]) -> LispValue:
        return self.fn(arena, args)

    def __repr__(self) -> str:
        return f"Primitive({self.name!r})"
