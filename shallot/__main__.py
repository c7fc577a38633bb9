"""Command-line entry point: run a program file and/or start the REPL."""

from __future__ import annotations

import argparse
import logging
import sys

from shallot import __version__, config
from shallot.interpreter import Interpreter
from shallot.repl import run_repl
from shallot.types.errors import ShallotError


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="shallot",
        description="Evaluate Shallot programs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shallot program.shl          run a program
  shallot - < program.shl      run a program read from stdin
  shallot program.shl -i       run a program, then start the REPL
  shallot                      start the REPL
        """,
    )
    parser.add_argument('path', nargs='?', help="program file to run, or '-' for stdin")
    parser.add_argument(
        '-i', '--interactive',
        action='store_true',
        help="start the REPL (implied when no path is given)",
    )
    parser.add_argument(
        '--no-prelude',
        action='store_true',
        help="do not load the core prelude",
    )
    parser.add_argument(
        '--keep-going',
        action='store_true',
        help="report a failing top-level form and continue with the next one",
    )
    parser.add_argument(
        '--color',
        action='store_true',
        help="color symbols in printed output",
    )
    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help="more log output (-v info, -vv debug)",
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _log_level(verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return config.get_log_level()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    logging.basicConfig(
        level=_log_level(args.verbose),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interp = Interpreter(
        prelude=None if args.no_prelude else 'auto',
        keep_going=args.keep_going,
        color=args.color,
    )

    status = 0
    if args.path is not None:
        try:
            interp.run_file(args.path)
        except ShallotError as e:
            print(f"{type(e).__name__}: {e}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"Could not read from {args.path}: {e}", file=sys.stderr)
            return 1
        if interp.errors:
            status = 1

    if args.interactive or args.path is None:
        run_repl(interp, color=args.color)

    return status


if __name__ == "__main__":
    sys.exit(main())
