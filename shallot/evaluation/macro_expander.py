"""Macro expansion for Shallot.

Expansion is a separate evaluation mode from application: operands are passed
as raw, unevaluated expressions, the macro body runs in a fresh frame parented
at the macro's captured environment, and whatever expression it builds is
handed back to the evaluator to be evaluated at the call site.
"""

from __future__ import annotations

import logging

from shallot import SExpression, EvaluatorFn
from shallot.types.environment import Environment
from shallot.types.macro import Macro, BuiltinMacro
from shallot.types.symbol import Symbol

logger = logging.getLogger(__name__)


def is_macro(value) -> bool:
    return isinstance(value, (Macro, BuiltinMacro))


def expand(
    macro: Macro | BuiltinMacro,
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    """Run a macro transformer over unevaluated arguments and return the expansion.

    `env` is the call-site environment; user macros ignore it (their body sees
    only the captured environment), builtin transformers receive it.
    The expansion is NOT evaluated here.
    """
    if isinstance(macro, Macro):
        call_env = macro.extend_env(list(args))
        expansion = evaluate_fn(macro.body, call_env)
    else:
        expansion = macro.transformer(list(args), env)

    if logger.isEnabledFor(logging.DEBUG):
        from shallot.printer import format_value

        logger.debug("expanded %s into %s", format_value(macro), format_value(expansion))
    return expansion


def macroexpand_1(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Expand only the head-position macro if present; otherwise return `form` unchanged.

    Heads are resolved without side effects: a symbol head is looked up, a
    macro object in head position is used as is, anything else is left alone.
    """
    from shallot.evaluation.special_forms import SPECIAL_FORMS

    if not isinstance(form, list) or not form:
        return form
    head = form[0]
    if isinstance(head, Symbol):
        if head in SPECIAL_FORMS or head not in env:
            return form
        head = env.lookup(head)
    if is_macro(head):
        return expand(head, form[1:], env, evaluate_fn)
    return form
