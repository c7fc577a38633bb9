"""Special form that exposes the macro expander to Lisp code.

macroexpand-1: expand a single step at the head position if it is a macro,
returning the expansion as an S-expression without evaluating it.
"""

from shallot import SExpression, EvaluatorFn
from shallot.types.environment import Environment
from shallot.types.errors import ShallotMalformedExpression
from shallot.types.symbol import Symbol


def macroexpand1_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn):
    """(macroexpand-1 form): the argument is not evaluated.

    A single leading (quote <form>) is unwrapped so that both
    (macroexpand-1 (defun ...)) and (macroexpand-1 '(defun ...)) work.
    """
    from shallot.evaluation.macro_expander import macroexpand_1

    if len(tail) != 1:
        raise ShallotMalformedExpression("macroexpand-1 expects exactly 1 argument")
    form = tail[0]
    if isinstance(form, list) and len(form) == 2 and form[0] in (Symbol("quote"), Symbol("'")):
        form = form[1]
    return macroexpand_1(form, env, evaluate_fn)
