# Core type aliases for Shallot's data model.
# Code (forms) and runtime values share plain Python types: float for numbers,
# Symbol for names, list for forms and list values. Closures, macros and
# primitives are the only dedicated runtime types.
#
# Naming guidance:
# - SExpression: Use in reader/macro code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any`; a quoted form is its own value.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms and values are interchangeable
SExpression = LispValue

# Evaluator function type passed into special forms and the macro expander
EvaluatorFn = Callable[..., LispValue]
