"""Core evaluator for the Sprig interpreter.

A plain recursive tree walk: literals evaluate to themselves, symbols are
looked up along the frame chain, special forms dispatch through SPECIAL_FORMS,
and every other combination is a procedure application. There is no
tail-call elimination, so recursion depth follows the program's nesting.
"""

from __future__ import annotations

from sprig import SExpression, LispValue
from sprig.arena import Arena
from sprig.errors import SprigEvaluationError
from sprig.evaluation.apply import apply
from sprig.evaluation.special_forms import SPECIAL_FORMS
from sprig.types.environment import Frame
from sprig.types.nil import NilType
from sprig.types.pair import Pair, to_list
from sprig.types.symbol import Symbol


def evaluate(expr: SExpression, frame: Frame, arena: Arena) -> LispValue:
    """Evaluate `expr` with respect to `frame`, allocating through `arena`."""
    match expr:
        case bool() | int() | float() | str():
            return expr

        case Symbol():
            return frame.lookup(expr)

        case Pair(car=Symbol() as head) if head in SPECIAL_FORMS:
            tail = to_list(expr.cdr, f"{head} form")
            return SPECIAL_FORMS[head](tail, frame, arena, evaluate)

        case Pair():
            procedure = evaluate(expr.car, frame, arena)
            args = [
                evaluate(arg, frame, arena)
                for arg in to_list(expr.cdr, "argument list")
            ]
            return apply(procedure, args, arena, evaluate)

        case NilType():
            raise SprigEvaluationError("Cannot evaluate an empty combination ()")

    raise SprigEvaluationError(f"Cannot evaluate {expr!r}")
