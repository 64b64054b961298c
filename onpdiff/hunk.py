from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from onpdiff.ses import SesElem, SesType

HUNK_CONTEXT = 3


@dataclass
class Hunk:
    a_start: Optional[int]
    b_start: Optional[int]
    edits: List[SesElem] = field(default_factory=list)

    @staticmethod
    def filter(edits: Sequence[SesElem], context: int = HUNK_CONTEXT) -> List[Hunk]:
        hunks: List[Hunk] = []
        offset = 0

        while True:
            while offset < len(edits) and edits[offset].ty is SesType.COMMON:
                offset += 1

            if offset >= len(edits):
                return hunks

            offset -= context + 1

            if offset < 0:
                hunk = Hunk(a_start=None, b_start=None)
            else:
                before = edits[offset]
                hunk = Hunk(a_start=_position(before.a_index), b_start=_position(before.b_index))

            hunks.append(hunk)
            offset = Hunk._build(hunk, edits, offset, context)

    @staticmethod
    def _build(hunk: Hunk, edits: Sequence[SesElem], offset: int, context: int) -> int:
        counter = -1

        while counter != 0:
            if offset >= 0 and counter > 0:
                hunk.edits.append(edits[offset])

            offset += 1
            if offset >= len(edits):
                break

            ahead = offset + context
            if ahead < len(edits) and edits[ahead].ty is not SesType.COMMON:
                counter = 2 * context + 1
            else:
                counter -= 1

        return offset

    def header(self) -> str:
        a_indexes = [e.a_index for e in self.edits if e.a_index is not None]
        b_indexes = [e.b_index for e in self.edits if e.b_index is not None]

        a_offset = self._format("-", a_indexes, self.a_start)
        b_offset = self._format("+", b_indexes, self.b_start)

        return f"@@ {a_offset} {b_offset} @@"

    def _format(self, sign: str, indexes: List[int], start: Optional[int]) -> str:
        start_val = indexes[0] + 1 if indexes else start

        if start_val is None:
            start_val = 0

        return f"{sign}{start_val},{len(indexes)}"


def _position(index: Optional[int]) -> Optional[int]:
    return None if index is None else index + 1
