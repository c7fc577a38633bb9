from __future__ import annotations

from typing import List

from shallot import LispValue
from shallot.types.environment import Environment
from shallot.types.errors import ShallotMalformedExpression
from shallot.types.symbol import Symbol


def bind_arguments(
    formals: List[Symbol],
    supplied_args: List[LispValue],
    closure_env: Environment,
    kind: str = "λ",
) -> Environment:
    """
    Single source of truth for parameter binding, shared by closures and macros.

    Parameters are strictly positional: the number of supplied arguments must
    equal the number of formals. Returns a new Environment whose outer is the
    closure_env, populated with one binding per formal.
    """
    if len(formals) != len(supplied_args):
        raise ShallotMalformedExpression(
            f"{kind} expects {len(formals)} argument(s), got {len(supplied_args)}"
        )
    local_env = Environment(outer=closure_env)
    for name, value in zip(formals, supplied_args):
        local_env.define(name, value)
    return local_env


def check_formals(params: LispValue, kind: str) -> list[Symbol]:
    """Validate a parameter list for `λ`/`μ` and return it as a list of Symbols."""
    if not isinstance(params, list):
        raise ShallotMalformedExpression(f"{kind} parameter list must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise ShallotMalformedExpression(f"{kind} parameter must be a symbol, got {p}")
    if len(set(params)) != len(params):
        raise ShallotMalformedExpression(f"{kind} parameter names must be distinct")
    return list(params)
