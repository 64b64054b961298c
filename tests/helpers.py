from __future__ import annotations

from typing import Any, Sequence

from onpdiff.ses import SesElem, SesType


def apply_ses(ses: Sequence[SesElem]) -> list[Any]:
    return [e.symbol for e in ses if e.ty is not SesType.DELETE]


def source_of(ses: Sequence[SesElem]) -> list[Any]:
    return [e.symbol for e in ses if e.ty is not SesType.ADD]


def is_subsequence(sub: Sequence[Any], seq: Sequence[Any]) -> bool:
    it = iter(seq)
    return all(any(s == x for x in it) for s in sub)


def count(ses: Sequence[SesElem], ty: SesType) -> int:
    return sum(1 for e in ses if e.ty is ty)


def render(ses: Sequence[SesElem]) -> list[str]:
    return [str(e) for e in ses]
