"""Textual representation of Shallot values, as written by `print` and the REPL."""

from __future__ import annotations

from shallot import LispValue
from shallot.types.symbol import Symbol
from shallot.types.lambda_fn import Lambda
from shallot.types.macro import Macro, BuiltinMacro

# ----------------- ANSI colors -----------------
RESET = "\033[0;0m"
COLOR_SYMBOL = "\033[0;32m"


def format_number(x: float) -> str:
    """Integer-valued floats print without a fraction; others use the shortest repr."""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return repr(x)


def format_value(obj: LispValue, color: bool = False) -> str:
    match obj:
        case bool():
            return "1" if obj else "0"
        case int() | float():
            return format_number(obj)
        case Symbol():
            return f"{COLOR_SYMBOL}{obj.id}{RESET}" if color else obj.id
        case list():
            return "(" + " ".join(format_value(x, color) for x in obj) + ")"
        case Lambda():
            return _format_procedure("λ", obj, color)
        case Macro():
            return _format_procedure("μ", obj, color)
        case BuiltinMacro():
            return "«builtin macro»"
        case _ if callable(obj):
            return "«builtin function»"
        case _:
            return str(obj)


def _format_procedure(keyword: str, proc: Lambda | Macro, color: bool) -> str:
    params = " ".join(format_value(f, color) for f in proc.formals)
    return f"({keyword} ({params}) {format_value(proc.body, color)})"
