"""Core evaluator for the Shallot interpreter.

Applicative order: the head of an application is evaluated first, then every
operand left to right, then the callee is applied. Special forms are dispatched
by keyword before the head is evaluated, and a head that evaluates to a macro
switches to expansion (raw operands) followed by evaluation of the expansion.

Evaluation recurses on the Python stack; there is no tail-call elimination.
"""

from __future__ import annotations

from shallot import SExpression, LispValue
from shallot.types.environment import Environment
from shallot.types.errors import ShallotMalformedExpression
from shallot.types.symbol import Symbol
from shallot.evaluation.apply import apply
from shallot.evaluation.macro_expander import expand, is_macro
from shallot.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol() if expr.is_string:
            return expr

        case Symbol():
            return env.lookup(expr)

        case []:
            raise ShallotMalformedExpression("Attempt to evaluate empty list")

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [head, *tail]:
            fn = evaluate(head, env)
            if is_macro(fn):
                expansion = expand(fn, tail, env, evaluate)
                return evaluate(expansion, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args, env, evaluate)

    # --- Numbers (and any other atoms) are self-evaluating ---
    return expr
