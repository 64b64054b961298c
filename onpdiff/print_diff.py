from __future__ import annotations

from typing import Mapping, Sequence, TextIO

from onpdiff.color import Color
from onpdiff.diff import SES_PREFIXES, Diff
from onpdiff.hunk import Hunk
from onpdiff.ses import SesElem, SesType

DIFF_FORMATS: dict[str, str] = {
    "context": "normal",
    "meta": "bold",
    "frag": "cyan",
    "old": "red",
    "new": "green",
}

SES_SLOTS: dict[SesType, str] = {
    SesType.COMMON: "context",
    SesType.ADD: "new",
    SesType.DELETE: "old",
}


class DiffPrinter:
    def __init__(
        self, stdout: TextIO, env: Mapping[str, str] | None = None, color: bool = False
    ) -> None:
        self.stdout = stdout
        self.env: Mapping[str, str] = env or {}
        self.color = color

    def diff_fmt(self, name: str, text: str) -> str:
        if not self.color:
            return text

        style_str = self.env.get(f"ONPDIFF_COLOR_{name.upper()}")
        style: str | list[str] = Color.parse(style_str) if style_str else DIFF_FORMATS[name]

        return Color.format(style, text)

    def println(self, text: str) -> None:
        self.stdout.write(f"{text}\n")

    def print_summary(self, d: Diff, with_lcs: bool = True) -> None:
        self.println(self.diff_fmt("meta", f"EditDistance: {d.edit_distance()}"))
        if with_lcs:
            self.println(self.diff_fmt("meta", f"LCS: {d.lcs()}"))

    def print_ses(self, ses: Sequence[SesElem]) -> None:
        self.println(self.diff_fmt("meta", "SES:"))
        for elem in ses:
            text = f"{SES_PREFIXES[elem.ty]}{elem.symbol}"
            self.println(self.diff_fmt(SES_SLOTS[elem.ty], text))

    def print_hunks(self, hunks: Sequence[Hunk]) -> None:
        for hunk in hunks:
            self.print_hunk(hunk)

    def print_hunk(self, hunk: Hunk) -> None:
        self.println(self.diff_fmt("frag", hunk.header()))
        for edit in hunk.edits:
            self.println(self.diff_fmt(SES_SLOTS[edit.ty], str(edit)))
