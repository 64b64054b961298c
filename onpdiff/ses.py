from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generator, Sequence

from onpdiff.sequence import Sequences


class SesType(enum.Enum):
    DELETE = "-"
    COMMON = " "
    ADD = "+"


@dataclass(frozen=True)
class SesElem:
    symbol: Any
    ty: SesType
    a_index: int | None = None
    b_index: int | None = None

    def __str__(self) -> str:
        return self.ty.value + str(self.symbol)


def walk(
    seqs: Sequences, path: Sequence[tuple[int, int]]
) -> Generator[tuple[SesType, int, int]]:
    """
    Replays the unit moves between consecutive path points. Yields
    (type, x, y) in the orientation of `seqs`, where (x, y) is the cursor
    before the move: ADD consumes seqs.b[y], DELETE consumes seqs.a[x] and
    COMMON consumes both.
    """
    px, py = 0, 0

    for x, y in path:
        while px < x or py < y:
            if y - x > py - px:
                yield SesType.ADD, px, py
                py += 1
            elif y - x < py - px:
                yield SesType.DELETE, px, py
                px += 1
            else:
                yield SesType.COMMON, px, py
                px += 1
                py += 1


def orient(seqs: Sequences, ty: SesType, x: int, y: int) -> SesElem:
    """Maps a move in the shorter/longer orientation back onto the caller's a and b."""
    if ty is SesType.ADD:
        symbol = seqs.b[y]
        if seqs.reverse:
            return SesElem(symbol, SesType.DELETE, a_index=y)
        return SesElem(symbol, SesType.ADD, b_index=y)

    if ty is SesType.DELETE:
        symbol = seqs.a[x]
        if seqs.reverse:
            return SesElem(symbol, SesType.ADD, b_index=x)
        return SesElem(symbol, SesType.DELETE, a_index=x)

    symbol = seqs.a[x]
    if seqs.reverse:
        return SesElem(symbol, SesType.COMMON, a_index=y, b_index=x)
    return SesElem(symbol, SesType.COMMON, a_index=x, b_index=y)


def classify(
    seqs: Sequences, path: Sequence[tuple[int, int]]
) -> tuple[list[SesElem], list[Any]]:
    ses: list[SesElem] = []
    lcs: list[Any] = []

    for ty, x, y in walk(seqs, path):
        elem = orient(seqs, ty, x, y)
        ses.append(elem)
        if elem.ty is SesType.COMMON:
            lcs.append(elem.symbol)

    return ses, lcs
