from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.arena import Arena
from sprig.errors import (
    SprigArityError,
    SprigDuplicateBinding,
    SprigEvaluationError,
    SprigInvalidSymbol,
)
from sprig.evaluation.special_forms.sequence import eval_sequence
from sprig.printer import to_lisp_string
from sprig.types.environment import Frame
from sprig.types.nil import NilType
from sprig.types.pair import Pair, to_list
from sprig.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    frame: Frame,
    arena: Arena,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name expr) ...) body...)

    Every initializer is evaluated in the enclosing frame, so bindings cannot
    see each other. An empty body yields Unspecified.
    """
    if not tail:
        raise SprigArityError("let requires a binding list")

    bindings = tail[0]
    if not isinstance(bindings, (Pair, NilType)):
        raise SprigEvaluationError(f"let bindings must be a list, got {to_lisp_string(bindings)}")

    let_frame = arena.frame(frame)
    for binding in to_list(bindings, "binding list"):
        if not isinstance(binding, Pair):
            raise SprigEvaluationError(f"Malformed let binding {to_lisp_string(binding)}")
        parts = to_list(binding, "let binding")
        if len(parts) != 2:
            raise SprigEvaluationError("let binding must be (name value)")
        name, val_expr = parts
        if not isinstance(name, Symbol):
            raise SprigInvalidSymbol(f"let binding name {to_lisp_string(name)} is not a symbol")
        if name in let_frame:
            raise SprigDuplicateBinding(f"Duplicate let binding {name}")
        let_frame.define(name, evaluate_fn(val_expr, frame, arena))

    return eval_sequence(tail[1:], let_frame, arena, evaluate_fn)
