from shallot import SExpression, LispValue, EvaluatorFn
from shallot.types.environment import Environment
from shallot.types.errors import ShallotMalformedExpression


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote e) or (' e): return `e` unevaluated; a quoted form is its own value."""
    if len(tail) != 1:
        raise ShallotMalformedExpression("quote expects exactly 1 argument")
    return tail[0]
