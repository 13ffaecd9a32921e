"""Application engine for Sprig.

Centralizes procedure application for the evaluator and for primitives that
call back into user code (`map`):
- Closures get a fresh frame chained to their captured frame, with parameters
  bound positionally; the body forms run in order in that frame.
- Primitives are invoked with the arena and the evaluated argument list.
- Anything else is not applicable.
"""

from __future__ import annotations

from sprig import LispValue, EvaluatorFn
from sprig.arena import Arena
from sprig.errors import SprigArityError, SprigTypeError
from sprig.evaluation.special_forms.sequence import eval_sequence
from sprig.printer import to_lisp_string
from sprig.types.lambda_fn import Closure
from sprig.types.values import Primitive


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    arena: Arena,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    Too few or too many arguments raise SprigArityError.
    """
    if len(args) != len(fn.formals):
        raise SprigArityError(
            f"Procedure expects {len(fn.formals)} argument(s), got {len(args)}"
        )
    new_frame = arena.frame(fn.frame)
    for name, value in zip(fn.formals, args):
        new_frame.define(name, value)
    return eval_sequence(fn.body, new_frame, arena, evaluate_fn)


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, (Closure, Primitive))


def apply(
    head: Closure | Primitive | object,
    args: list[LispValue],
    arena: Arena,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Primitive; raise a type error for anything else."""
    if isinstance(head, Closure):
        return apply_closure(head, args, arena, evaluate_fn)
    elif isinstance(head, Primitive):
        return head(arena, args)
    else:
        raise SprigTypeError(f"Cannot apply non-procedure {to_lisp_string(head)}")
