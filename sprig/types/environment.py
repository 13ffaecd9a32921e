"""Lexical frames for Sprig.

A Frame stores bindings of Symbols to evaluated values and links to its
`outer` frame. Frames form a tree rooted at the interpreter's global frame.
Names are unique within one frame; shadowing only happens across frames.
"""

from __future__ import annotations

from typing import Optional

from sprig import LispValue
from sprig.errors import SprigInvalidSymbol, SprigUnboundSymbol, SprigDuplicateBinding
from sprig.types.symbol import Symbol


class Frame:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Frame] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Frame | None = outer

    def __contains__(self, name: Symbol) -> bool:
        """True if `name` is bound directly in this frame (ancestors are not consulted)."""
        return name in self.vars

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises SprigInvalidSymbol if `name` is not a Symbol and
        SprigDuplicateBinding if this frame already binds it.
        """
        if not isinstance(name, Symbol):
            from sprig.printer import to_lisp_string  # local import to avoid cycles
            raise SprigInvalidSymbol(f"Cannot bind {to_lisp_string(name)}: not a symbol")
        if name in self.vars:
            raise SprigDuplicateBinding(f"Duplicate binding for {name} in the same frame")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Frame]:
        """Find the nearest frame in the chain that binds `symbol`."""
        frame: Optional[Frame] = self
        while frame is not None:
            if symbol in frame.vars:
                return frame
            frame = frame.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Value bound to `name` in the innermost frame that binds it."""
        frame = self.find(name)
        if frame is None:
            raise SprigUnboundSymbol(f"Unbound symbol {name}")
        return frame.vars[name]
