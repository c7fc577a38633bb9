"""Built-in functions for the Shallot runtime environment.

This module defines arithmetic, comparison, list construction and output
primitives, plus the registration helper that installs them into a frame.
Every primitive has the signature `fn(env, args) -> value` where `args` are
already evaluated. Numeric results are always floats; comparisons return
1.0 for true and 0.0 for false, the only truthiness `cond` understands.
"""
from __future__ import annotations

import sys
from typing import Callable, TextIO

from shallot import LispValue
from shallot.printer import format_value
from shallot.types.environment import Environment
from shallot.types.symbol import Symbol
from shallot.types.errors import (
    ShallotDivisionByZero,
    ShallotMalformedExpression,
    ShallotTypeError,
)

TRUE = 1.0
FALSE = 0.0

Primitive = Callable[[Environment, list[LispValue]], LispValue]


def _numbers(name: str, args: list[LispValue]) -> list[float]:
    """Check that every argument is a number and return them as floats."""
    for n, a in enumerate(args, start=1):
        if isinstance(a, bool) or not isinstance(a, (int, float)):
            raise ShallotTypeError(
                f"Arguments to {name} are not all numbers: argument {n} is {format_value(a)}"
            )
    return [float(a) for a in args]


def _boolean(flag: bool) -> float:
    return TRUE if flag else FALSE


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> float:
    """Return the numeric sum of all arguments; (+) is 0."""
    return float(sum(_numbers("+", expr)))


def sub(env: Environment, expr: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise ShallotMalformedExpression("- requires at least 1 argument")
    nums = _numbers("-", expr)
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


def mul(env: Environment, expr: list[LispValue]) -> float:
    """Return the product of all arguments; (*) is 1."""
    result = 1.0
    for x in _numbers("*", expr):
        result *= x
    return result


def div(env: Environment, expr: list[LispValue]) -> float:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not expr:
        raise ShallotMalformedExpression("/ requires at least 1 argument")
    nums = _numbers("/", expr)
    if len(nums) == 1:
        nums = [1.0] + nums
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise ShallotDivisionByZero("Division by zero")
        result /= x
    return result


def absolute(env: Environment, expr: list[LispValue]) -> float:
    """(abs x) => |x|."""
    if len(expr) != 1:
        raise ShallotMalformedExpression("abs requires exactly 1 argument")
    return abs(_numbers("abs", expr)[0])


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, test: Callable[[float, float], bool]) -> Primitive:
    def compare(env: Environment, expr: list[LispValue]) -> float:
        if not expr:
            raise ShallotMalformedExpression(f"{name} requires at least 1 argument")
        nums = _numbers(name, expr)
        return _boolean(all(test(a, b) for a, b in zip(nums, nums[1:])))

    compare.__name__ = f"compare_{name}"
    compare.__doc__ = f"Chainable {name}: 1 if it holds for every adjacent pair, else 0."
    return compare


eq = _chain("=", lambda a, b: a == b)
lt = _chain("<", lambda a, b: a < b)
gt = _chain(">", lambda a, b: a > b)
lte = _chain("<=", lambda a, b: a <= b)
gte = _chain(">=", lambda a, b: a >= b)


def logical_not(env: Environment, expr: list[LispValue]) -> float:
    """(not x): 1 when x is zero, 0 otherwise."""
    if len(expr) != 1:
        raise ShallotMalformedExpression("not requires exactly 1 argument")
    return _boolean(_numbers("not", expr)[0] == 0)


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(expr)


def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """(cons x xs): a new list with x prepended to the list xs."""
    if len(expr) != 2:
        raise ShallotMalformedExpression("cons requires exactly 2 arguments")
    head, tail = expr
    if not isinstance(tail, list):
        raise ShallotTypeError(f"cons expects a list as its second argument, got {format_value(tail)}")
    return [head] + tail


def _single_list(name: str, expr: list[LispValue]) -> list[LispValue]:
    if len(expr) != 1:
        raise ShallotMalformedExpression(f"{name} requires exactly 1 argument")
    xs = expr[0]
    if not isinstance(xs, list):
        raise ShallotTypeError(f"{name} expects a list, got {format_value(xs)}")
    return xs


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the first element of a non-empty list."""
    xs = _single_list("car", expr)
    if not xs:
        raise ShallotMalformedExpression("car of empty list")
    return xs[0]


def cdr(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Return all but the first element of a non-empty list."""
    xs = _single_list("cdr", expr)
    if not xs:
        raise ShallotMalformedExpression("cdr of empty list")
    return xs[1:]


def null(env: Environment, expr: list[LispValue]) -> float:
    """(null? xs): 1 for the empty list, 0 for anything else."""
    if len(expr) != 1:
        raise ShallotMalformedExpression("null? requires exactly 1 argument")
    return _boolean(expr[0] == [])


# -------------------------------
# Output
# -------------------------------
def make_print(out: TextIO | None = None, color: bool = False) -> Primitive:
    """Build the `print` primitive writing to `out` (sys.stdout when None).

    Each argument is written on its own line; the result is the empty list.
    """

    def print_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
        stream = out if out is not None else sys.stdout
        for a in args:
            stream.write(format_value(a, color) + "\n")
        return []

    return print_builtin


def register(env: Environment, out: TextIO | None = None, color: bool = False) -> None:
    """Register all builtin functions into the given environment."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("abs"): absolute,
            Symbol("="): eq,
            Symbol("<"): lt,
            Symbol(">"): gt,
            Symbol("<="): lte,
            Symbol(">="): gte,
            Symbol("not"): logical_not,
            Symbol("list"): list_builtin,
            Symbol("cons"): cons,
            Symbol("car"): car,
            Symbol("cdr"): cdr,
            Symbol("null?"): null,
            Symbol("print"): make_print(out, color),
        }
    )
