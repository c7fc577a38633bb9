from shallot import EvaluatorFn
from shallot import SExpression, LispValue
from shallot.types.bind import check_formals
from shallot.types.environment import Environment
from shallot.types.errors import ShallotMalformedExpression
from shallot.types.lambda_fn import Lambda
from shallot.types.macro import Macro


def _params_and_body(tail: list[SExpression], kind: str):
    # (λ (params) body): a single body expression, no implicit sequencing.
    if len(tail) != 2:
        raise ShallotMalformedExpression(f"{kind} requires a parameter list and exactly one body")
    params, body = tail
    return check_formals(params, kind), body


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    formals, body = _params_and_body(tail, "λ")
    return Lambda(formals, body, env)


def macro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(μ (params) body): like λ, but the result rewrites call syntax."""
    formals, body = _params_and_body(tail, "μ")
    return Macro(formals, body, env)
