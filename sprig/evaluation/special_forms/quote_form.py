from sprig import SExpression, LispValue, EvaluatorFn
from sprig.errors import SprigArityError


def quote_form(
    tail: list[SExpression], frame, arena, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SprigArityError("quote expects exactly 1 argument")
    return tail[0]
