"""Registry of special forms for the Sprig evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application. Each
handler is called as handler(tail, frame, arena, evaluate_fn), where `tail` is
the list of the form's unevaluated operands.
"""

from sprig.types.symbol import Symbol
from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.let_form import let_form
from sprig.evaluation.special_forms.quote_form import quote_form
from sprig.evaluation.special_forms.define_form import define_form
from sprig.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("let"): let_form,
    Symbol("quote"): quote_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
}
