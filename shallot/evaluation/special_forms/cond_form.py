from shallot import EvaluatorFn
from shallot import SExpression, LispValue
from shallot.types.environment import Environment
from shallot.types.errors import ShallotMalformedExpression
from shallot.printer import format_value


def is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(cond test then else)

    Truthiness is defined over numbers only: zero is false, anything else true.
    Only the selected branch is evaluated.
    """
    if len(tail) != 3:
        raise ShallotMalformedExpression("cond requires exactly 3 arguments: test, then, else")

    test, then_expr, else_expr = tail
    result = evaluate_fn(test, env)
    if not is_number(result):
        raise ShallotMalformedExpression(
            f"cond test must evaluate to a number, got {format_value(result)}"
        )
    if result != 0:
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
