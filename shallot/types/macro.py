"""Macro values: rewrite rules bound in the environment.

A Macro has the same shape as a Lambda but is a distinct type, so the
evaluator can never mistake expansion for ordinary application.
"""

from __future__ import annotations

from typing import Callable

from shallot import SExpression
from shallot.types.environment import Environment
from shallot.types.symbol import Symbol
from shallot.types.bind import bind_arguments


class Macro:
    """A user macro created by `μ`. Its body constructs an expression."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from shallot.printer import format_value

        return format_value(self)

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[SExpression]) -> Environment:
        """Bind raw, unevaluated argument expressions to the formals."""
        return bind_arguments(self.formals, list(args), self.env, "μ")


class BuiltinMacro:
    """A macro whose transformer is a Python callable `(args, env) -> SExpression`."""

    __slots__ = ("name", "transformer")

    def __init__(self, name: str, transformer: Callable[[list[SExpression], Environment], SExpression]):
        self.name = name
        self.transformer = transformer

    def __repr__(self) -> str:
        return f"BuiltinMacro({self.name!r})"
