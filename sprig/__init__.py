# Core type aliases for Sprig's data model.
# Atoms are plain Python values (int, float, str, bool); Symbol, Pair, Nil and
# the procedure types live in sprig.types. Code and data share one representation.
#
# Naming guidance:
# - SExpression: Use in reader/parser code and special-form handlers for syntactic forms.
# - LispValue:  Use in evaluator/runtime code for evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, passed to special forms and apply
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.3.0"
