"""Interactive read-eval-print loop."""

from __future__ import annotations

import sys
from typing import TextIO

from shallot.interpreter import Interpreter
from shallot.printer import format_value
from shallot.reader.parser import read
from shallot.types.errors import ShallotError

PROMPT = "🧅 "
ENV_COMMAND = "#env"


def run_repl(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    color: bool = False,
) -> int:
    """Read lines until EOF, printing each result or error. Returns the number of errors."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    failures = 0
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        if line.isspace():
            continue
        if line.strip() == ENV_COMMAND:
            stdout.write(interp.env.describe() + "\n")
            continue
        # Not Interpreter.run: keep_going must not hide a failing line.
        try:
            for expr in read(line):
                result = interp.eval_fn(expr, interp.env)
                stdout.write(format_value(result, color) + "\n")
        except ShallotError as e:
            failures += 1
            stdout.write(f"{type(e).__name__}: {e}\n")
    return failures
