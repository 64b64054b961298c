from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


def symbols(seq: str | Iterable[Any]) -> list[Any]:
    # a str splits into its characters, anything else element-wise
    return list(seq)


@dataclass(frozen=True)
class Sequences:
    """
    The two inputs of a diff, normalised so that `a` is never longer than
    `b`. `reverse` is set when the caller's inputs had to be swapped.
    """

    a: list[Any]
    b: list[Any]
    reverse: bool = False

    @classmethod
    def prepare(cls, a: str | Iterable[Any], b: str | Iterable[Any]) -> Sequences:
        a_syms, b_syms = symbols(a), symbols(b)

        if len(a_syms) >= len(b_syms):
            return cls(b_syms, a_syms, reverse=True)

        return cls(a_syms, b_syms, reverse=False)

    @property
    def m(self) -> int:
        return len(self.a)

    @property
    def n(self) -> int:
        return len(self.b)

    @property
    def delta(self) -> int:
        return self.n - self.m

    @property
    def offset(self) -> int:
        return self.m + 1
