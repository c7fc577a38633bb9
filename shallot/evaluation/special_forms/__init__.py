"""Registry of special forms for the Shallot evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before evaluating the head of a form, so
these keywords are reserved and cannot be shadowed by `define`.
"""

from shallot.types.symbol import Symbol
from shallot.evaluation.special_forms.quote_form import quote_form
from shallot.evaluation.special_forms.define_form import define_form
from shallot.evaluation.special_forms.lambda_form import lambda_form, macro_form
from shallot.evaluation.special_forms.cond_form import cond_form
from shallot.evaluation.special_forms.macroexpand_form import macroexpand1_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("'"): quote_form,
    Symbol("define"): define_form,
    Symbol("λ"): lambda_form,
    Symbol("lambda"): lambda_form,
    Symbol("μ"): macro_form,
    Symbol("macro"): macro_form,
    Symbol("cond"): cond_form,
    Symbol("macroexpand-1"): macroexpand1_form,
}
