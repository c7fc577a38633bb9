"""Builtin macro transformers for Shallot (implemented in Python)."""

from typing import Any

from shallot import SExpression
from shallot.types.environment import Environment
from shallot.types.errors import ShallotMalformedExpression
from shallot.types.macro import BuiltinMacro
from shallot.types.symbol import Symbol


def let_macro(args: list[SExpression], env: Any) -> SExpression:
    """
    (let ((var1 val1) (var2 val2) ...) body)
    => ((λ (var1 var2 ...) body) val1 val2 ...)
    """
    if len(args) != 2:
        raise ShallotMalformedExpression("let requires a binding list and exactly one body")

    bindings, body = args

    if not isinstance(bindings, list):
        raise ShallotMalformedExpression("let bindings must be a list")

    vars_ = []
    vals_ = []
    for b in bindings:
        if not isinstance(b, list) or len(b) != 2 or not isinstance(b[0], Symbol):
            raise ShallotMalformedExpression(f"let binding must be (name value), got {b}")
        var, val = b
        vars_.append(var)
        vals_.append(val)

    return [[Symbol("λ"), vars_, body]] + vals_


def register(env: Environment) -> None:
    """Register builtin macros in the provided environment."""
    env.define(Symbol("let"), BuiltinMacro("let", let_macro))
