from __future__ import annotations
import sys


class Symbol:
    """An interned name. Two symbols are equal when their names are."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    @property
    def is_string(self) -> bool:
        """True for a double-quoted literal such as `"hello world"`."""
        return len(self.id) >= 2 and self.id[0] == '"' and self.id[-1] == '"'

    def __lt__(self, other: Symbol) -> bool:
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
