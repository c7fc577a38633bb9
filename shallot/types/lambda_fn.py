"""Closure representation and argument binding for Shallot."""

from __future__ import annotations

from shallot import SExpression, LispValue
from shallot.types.environment import Environment
from shallot.types.symbol import Symbol
from shallot.types.bind import bind_arguments


class Lambda:
    """A first-class closure: formal parameters, body, and the defining environment."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from shallot.printer import format_value

        return format_value(self)

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment, parented at the captured one, for the body.
        """
        return bind_arguments(self.formals, list(args), self.env, "λ")
