"""Application engine for Shallot.

Centralizes function application for the interpreter:
- Closures bind their arguments positionally in a fresh frame parented at
  the captured environment, then evaluate the body there.
- Primitives are Python callables invoked as `fn(env, args)`.

Macros never come through here; they are expanded by the macro expander.
"""

from typing import Callable

from shallot import LispValue, EvaluatorFn
from shallot.types.environment import Environment
from shallot.types.lambda_fn import Lambda
from shallot.types.errors import ShallotNotCallable


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a closure to already-evaluated arguments.

    Raises ShallotMalformedExpression (from the binder) on arity mismatch.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable; anything else is not callable."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        from shallot.printer import format_value

        raise ShallotNotCallable(f"Cannot apply non-function {format_value(head)}")
