from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.arena import Arena
from sprig.errors import (
    SprigArityError,
    SprigDuplicateBinding,
    SprigEvaluationError,
    SprigInvalidSymbol,
)
from sprig.printer import to_lisp_string
from sprig.types.environment import Frame
from sprig.types.nil import NilType
from sprig.types.pair import Pair, to_list
from sprig.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    frame: Frame,
    arena: Arena,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) needs one or more body forms, unlike let.
    if not tail:
        raise SprigArityError("lambda requires a parameter list and a body")

    params = tail[0]
    body_forms = tail[1:]

    if not isinstance(params, (Pair, NilType)):
        raise SprigEvaluationError(f"lambda parameters must be a list, got {to_lisp_string(params)}")
    formals = to_list(params, "parameter list")
    seen: set[Symbol] = set()
    for param in formals:
        if not isinstance(param, Symbol):
            raise SprigInvalidSymbol(f"lambda parameter {to_lisp_string(param)} is not a symbol")
        if param in seen:
            raise SprigDuplicateBinding(f"Duplicate lambda parameter {param}")
        seen.add(param)

    if not body_forms:
        raise SprigArityError("lambda requires at least one body expression")

    # The body is not evaluated here; the closure shares the current frame
    return arena.closure(formals, body_forms, frame)
