import logging

from shallot import EvaluatorFn
from shallot import SExpression, LispValue
from shallot.types.environment import Environment
from shallot.types.errors import ShallotInvalidSymbol, ShallotMalformedExpression
from shallot.types.symbol import Symbol

logger = logging.getLogger(__name__)

QUOTES = (Symbol("quote"), Symbol("'"))


def definition_name(name_expr: SExpression) -> Symbol:
    """Accept `name`, `'name` or `(quote name)` and return the Symbol."""
    if isinstance(name_expr, Symbol):
        return name_expr
    if (
        isinstance(name_expr, list)
        and len(name_expr) == 2
        and name_expr[0] in QUOTES
        and isinstance(name_expr[1], Symbol)
    ):
        return name_expr[1]
    raise ShallotInvalidSymbol(
        f"define expects a symbol or quoted symbol as its name, got {name_expr}"
    )


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Evaluates `value` in the current environment and binds it in the global frame.
    """
    if len(tail) != 2:
        raise ShallotMalformedExpression("define requires exactly 2 arguments")

    name_expr, val_expr = tail
    name = definition_name(name_expr)
    value = evaluate_fn(val_expr, env)
    env.root().define(name, value)
    logger.debug("defined %s", name)
    return value
