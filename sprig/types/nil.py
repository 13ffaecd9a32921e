from __future__ import annotations


class NilType:
    """The empty list. Truthy in Sprig: only #f is false."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __str__(self): return "()"

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
