"""Pair cells and list helpers.

Lists are right-nested Pairs terminated by Nil. Cells are never mutated once
built; operations that need a different shape (reversal) build fresh cells.
"""

from __future__ import annotations

from typing import Iterator

from sprig import LispValue
from sprig.errors import SprigEvaluationError
from sprig.types.nil import Nil


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispValue]:
        """Iterate the elements of the list spine; stops at the first non-Pair tail."""
        cell: LispValue = self
        while isinstance(cell, Pair):
            yield cell.car
            cell = cell.cdr

    def __eq__(self, other: object) -> bool:
        # Structural equality, iterative along the spine; 1 and #t differ
        a: LispValue = self
        b: LispValue = other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if type(a.car) is not type(b.car) or a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return type(a) is type(b) and a == b

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"


def is_list(value: LispValue) -> bool:
    """True for Nil and for Pair chains ending in Nil."""
    while isinstance(value, Pair):
        value = value.cdr
    return value is Nil


def to_list(value: LispValue, what: str = "list") -> list[LispValue]:
    """Convert a proper list into a Python list; raise on an improper one."""
    items: list[LispValue] = []
    while isinstance(value, Pair):
        items.append(value.car)
        value = value.cdr
    if value is not Nil:
        from sprig.printer import to_lisp_string  # local import to avoid cycles
        raise SprigEvaluationError(f"Expected a proper {what}, found tail {to_lisp_string(value)}")
    return items


def reverse(lst: LispValue, arena) -> LispValue:
    """Return a freshly allocated reversal of `lst`; its cells are not shared."""
    result: LispValue = Nil
    while isinstance(lst, Pair):
        result = arena.cons(lst.car, result)
        lst = lst.cdr
    return result
