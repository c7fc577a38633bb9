"""Runtime environment for Shallot.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. The outermost frame is the global frame:
it is created once by the driver and is the only frame `define` mutates.
"""

from __future__ import annotations

from typing import Optional

from shallot import LispValue
from shallot.types.errors import ShallotInvalidSymbol, ShallotUnboundSymbol
from shallot.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises ShallotInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise ShallotInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, walking outwards through the chain.

        Raises ShallotUnboundSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise ShallotUnboundSymbol(f"Variable `{name}` unbound")
        return env.vars[name]

    def root(self) -> Environment:
        """Return the global (outermost) frame of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def describe(self) -> str:
        """Sorted listing of this frame, one `name -> value` per line, names right-aligned."""
        from shallot.printer import format_value

        names = sorted(self.vars)
        width = max((len(n.id) for n in names), default=0)
        return "\n".join(
            f"{n.id:>{width}} -> {format_value(self.vars[n])}" for n in names
        )

    def __repr__(self) -> str:
        """Chain of frames, innermost first, for debugging."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            chain.append("{" + ", ".join(str(k) for k in env.vars) + "}")
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
