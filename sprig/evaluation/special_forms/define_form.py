from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.arena import Arena
from sprig.errors import SprigArityError, SprigInvalidSymbol, SprigDuplicateBinding
from sprig.printer import to_lisp_string
from sprig.types.environment import Frame
from sprig.types.symbol import Symbol
from sprig.types.values import Void


def define_form(
    tail: list[SExpression],
    frame: Frame,
    arena: Arena,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The value is evaluated in the current frame before `name` is bound, so the
    initializer cannot see the name it defines.
    """
    if len(tail) != 2:
        raise SprigArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SprigInvalidSymbol(f"Cannot define {to_lisp_string(name)}: not a symbol")
    if name in frame:
        raise SprigDuplicateBinding(f"{name} is already defined in this frame")

    value = evaluate_fn(val_expr, frame, arena)
    frame.define(name, value)
    return Void
