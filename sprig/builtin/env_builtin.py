"""Built-in procedures for the Sprig runtime.

The fixed primitive set: `null?`, `car`, `cdr`, `cons`, `+` and `map`. Each
checks its own arity and argument types and raises a SprigEvaluationError
subclass on violation.
"""
from __future__ import annotations

from sprig import LispValue
from sprig.arena import Arena
from sprig.errors import SprigTypeError, SprigArityError
from sprig.evaluation.apply import apply as apply_engine, is_procedure
from sprig.evaluation.evaluator import evaluate
from sprig.printer import to_lisp_string
from sprig.types.environment import Frame
from sprig.types.nil import Nil
from sprig.types.pair import Pair, is_list, reverse
from sprig.types.symbol import Symbol
from sprig.types.values import Primitive


def _check_arity(name: str, args: list[LispValue], expected: int) -> None:
    if len(args) != expected:
        raise SprigArityError(
            f"{name} requires exactly {expected} argument(s), got {len(args)}"
        )


def is_null(arena: Arena, args: list[LispValue]) -> bool:
    """Predicate: #t if the single argument is the empty list."""
    _check_arity("null?", args, 1)
    return args[0] is Nil


def car(arena: Arena, args: list[LispValue]) -> LispValue:
    """Return the first slot of a pair."""
    _check_arity("car", args, 1)
    pair = args[0]
    if not isinstance(pair, Pair):
        raise SprigTypeError(f"car expects a pair, got {to_lisp_string(pair)}")
    return pair.car


def cdr(arena: Arena, args: list[LispValue]) -> LispValue:
    """Return the second slot of a pair."""
    _check_arity("cdr", args, 1)
    pair = args[0]
    if not isinstance(pair, Pair):
        raise SprigTypeError(f"cdr expects a pair, got {to_lisp_string(pair)}")
    return pair.cdr


def cons(arena: Arena, args: list[LispValue]) -> Pair:
    _check_arity("cons", args, 2)
    head, tail = args
    return arena.cons(head, tail)


# -------------------------------
# Arithmetic
# -------------------------------
def add(arena: Arena, args: list[LispValue]) -> int | float:
    """Sum of all arguments; an int unless some argument is a double."""
    total: int | float = 0
    is_double = False
    for x in args:
        # bool is an int subclass but not a number here
        if type(x) is float:
            is_double = True
        elif type(x) is not int:
            raise SprigTypeError(f"All arguments to + must be numbers, got {to_lisp_string(x)}")
        total += x
    return float(total) if is_double else total


def map_builtin(arena: Arena, args: list[LispValue]) -> LispValue:
    """(map f xs): apply f to each element of xs, collecting results in order."""
    _check_arity("map", args, 2)
    fn, xs = args
    if not is_procedure(fn):
        raise SprigTypeError(f"First argument to map must be a procedure, got {to_lisp_string(fn)}")
    if not is_list(xs):
        raise SprigTypeError(f"Second argument to map must be a list, got {to_lisp_string(xs)}")

    # Collected back to front, then reversed into fresh cells
    result: LispValue = Nil
    cell = xs
    while isinstance(cell, Pair):
        result = arena.cons(apply_engine(fn, [cell.car], arena, evaluate), result)
        cell = cell.cdr
    return reverse(result, arena)


PRIMITIVES = {
    "null?": is_null,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "+": add,
    "map": map_builtin,
}


def register(frame: Frame, arena: Arena) -> None:
    """Bind every primitive into the given (root) frame."""
    for name, fn in PRIMITIVES.items():
        frame.define(Symbol(name), arena.alloc(Primitive(name, fn)))
