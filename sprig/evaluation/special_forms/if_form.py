from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.arena import Arena
from sprig.errors import SprigArityError
from sprig.types.environment import Frame
from sprig.types.values import Unspecified


def if_form(
    tail: list[SExpression],
    frame: Frame,
    arena: Arena,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) < 2:
        raise SprigArityError("if requires a condition and a then-expression")
    if len(tail) > 3:
        raise SprigArityError("if accepts at most one else-expression")

    cond = evaluate_fn(tail[0], frame, arena)
    # Only #f is false; (), 0 and "" are all true
    if cond is not False:
        return evaluate_fn(tail[1], frame, arena)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], frame, arena)
    else:
        return Unspecified
