from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Literal, TextIO

from shallot import SExpression, LispValue
from shallot import config
from shallot.reader.parser import read
from shallot.types.environment import Environment
from shallot.types.errors import ShallotError, ShallotMalformedExpression
from shallot.builtin.env_builtin import register
from shallot.builtin.macro_builtin import register as register_macros
from shallot.evaluation.macro_expander import macroexpand_1

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Drives evaluation of top-level Shallot forms.

    Owns the single global Environment: every top-level form is evaluated
    against it in program order, and `define` is the only thing that writes
    to it. `print` output goes to `out` (sys.stdout by default).

    An error aborts the form that raised it. With `keep_going=False` it then
    propagates to the caller and halts the run; with `keep_going=True` it is
    logged, kept in `self.errors`, and the next form is evaluated.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        out: TextIO | None = None,
        keep_going: bool = False,
        color: bool = False,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
    ):
        if eval_fn is None:
            from shallot.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.keep_going = keep_going
        self.errors: list[ShallotError] = []

        limit = config.get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()
        register(self.env, out, color)
        register_macros(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = config.get_prelude_file()
            if path.is_file():
                logger.debug("loading prelude from %s", path)
                self.eval_prelude(path.read_text(encoding="utf-8"))
            else:
                logger.warning("prelude %s not found, continuing without it", path)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate prelude code; errors here always propagate."""
        for expr in read(code):
            self.eval_fn(expr, self.env)

    def run(self, forms: Iterable[SExpression]) -> list[LispValue]:
        """Evaluate each top-level form in order and return their values.

        Forms that fail under `keep_going` contribute no value.
        """
        results: list[LispValue] = []
        for index, expr in enumerate(forms, start=1):
            try:
                results.append(self.eval_fn(expr, self.env))
            except ShallotError as e:
                if not self.keep_going:
                    raise
                logger.error("form %d failed: %s: %s", index, type(e).__name__, e)
                self.errors.append(e)
        return results

    def eval(self, code: str) -> LispValue:
        results = self.run(read(code))
        if not results:
            return []
        if len(results) == 1:
            return results[0]
        return results

    def run_file(self, path: str | Path) -> list[LispValue]:
        """Read and run a program file, or standard input when `path` is '-'."""
        if str(path) == '-':
            source = sys.stdin.read()
        else:
            source = Path(path).read_text(encoding="utf-8")
        return self.run(read(source))

    def macroexpand_1(self, code: str) -> SExpression:
        """One-step expansion of the single form in `code`; the expansion is not evaluated."""
        forms = read(code)
        if len(forms) != 1:
            raise ShallotMalformedExpression(f"macroexpand_1 expects exactly one form, got {len(forms)}")
        return macroexpand_1(forms[0], self.env, self.eval_fn)
