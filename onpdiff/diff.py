from __future__ import annotations

import logging
import sys
from typing import Any, Iterable, TextIO

from onpdiff.hunk import HUNK_CONTEXT, Hunk
from onpdiff.onp import ONP
from onpdiff.sequence import Sequences
from onpdiff.ses import SesElem, SesType, classify

log = logging.getLogger(__name__)

SES_PREFIXES: dict[SesType, str] = {
    SesType.DELETE: "- ",
    SesType.ADD: "+ ",
    SesType.COMMON: "  ",
}


class Diff:
    """
    Context for calculating the difference between `a` and `b`.

    Create one per pair of inputs, optionally call `only_ed()`, then
    `compose()` once; the accessors are valid afterwards. A context is not
    meant to be reused or shared between threads.
    """

    def __init__(self, a: str | Iterable[Any], b: str | Iterable[Any]):
        self.textual = isinstance(a, str) and isinstance(b, str)
        self.seqs = Sequences.prepare(a, b)
        self.ed_only = False
        self._ed = 0
        self._lcs: list[Any] = []
        self._ses: list[SesElem] = []

    def only_ed(self) -> None:
        self.ed_only = True

    def compose(self) -> Diff:
        onp = ONP(self.seqs, only_ed=self.ed_only)
        self._ed = onp.search()

        if self.ed_only:
            return self

        self._ses, self._lcs = classify(self.seqs, onp.path())
        log.debug(
            "composed diff: reverse=%s ed=%d lcs=%d ses=%d",
            self.seqs.reverse,
            self._ed,
            len(self._lcs),
            len(self._ses),
        )
        return self

    def edit_distance(self) -> int:
        return self._ed

    def lcs(self) -> str | list[Any]:
        if self.textual:
            return "".join(self._lcs)
        return list(self._lcs)

    def ses(self) -> list[SesElem]:
        return list(self._ses)

    def print_ses(self, stdout: TextIO = sys.stdout) -> None:
        for elem in self._ses:
            stdout.write(f"{SES_PREFIXES[elem.ty]}{elem.symbol}\n")


def diff(a: str | Iterable[Any], b: str | Iterable[Any]) -> Diff:
    return Diff(a, b).compose()


def edit_distance(a: str | Iterable[Any], b: str | Iterable[Any]) -> int:
    d = Diff(a, b)
    d.only_ed()
    return d.compose().edit_distance()


def diff_hunks(
    a: str | Iterable[Any], b: str | Iterable[Any], context: int = HUNK_CONTEXT
) -> list[Hunk]:
    return Hunk.filter(diff(a, b).ses(), context)
