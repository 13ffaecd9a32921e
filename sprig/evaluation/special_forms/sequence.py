from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.environment import Frame
from sprig.types.values import Unspecified


def eval_sequence(
    body: list[SExpression],
    frame: Frame,
    arena,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate `body` in order; the last value, or Unspecified when empty."""
    result: LispValue = Unspecified
    for form in body:
        result = evaluate_fn(form, frame, arena)
    return result
