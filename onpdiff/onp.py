from __future__ import annotations

import logging
from dataclasses import dataclass

from onpdiff.sequence import Sequences

log = logging.getLogger(__name__)

NO_POINT = -1


@dataclass(frozen=True)
class Point:
    x: int
    y: int
    prev: int = NO_POINT


class PointStore:
    """
    Append-only arena of path points. A point refers to its predecessor by
    handle (its index in the store), so the chain from any point back to
    the origin can be walked without linked nodes.
    """

    def __init__(self) -> None:
        self._points: list[Point] = []

    def add(self, x: int, y: int, prev: int) -> int:
        self._points.append(Point(x, y, prev))
        return len(self._points) - 1

    def __getitem__(self, handle: int) -> Point:
        return self._points[handle]

    def __len__(self) -> int:
        return len(self._points)

    def trace(self, handle: int) -> list[tuple[int, int]]:
        coords: list[tuple[int, int]] = []

        while handle != NO_POINT:
            point = self._points[handle]
            coords.append((point.x, point.y))
            handle = point.prev

        coords.reverse()
        return coords


class ONP:
    """
    An implementation of the O(NP) sequence comparison algorithm.

    See "An O(NP) Sequence Comparison Algorithm" by Sun Wu, Udi Manber and
    Gene Myers (1990).

    `seqs.a` must not be longer than `seqs.b`; `Sequences.prepare` takes
    care of that.
    """

    def __init__(self, seqs: Sequences, only_ed: bool = False):
        self.seqs = seqs
        self.only_ed = only_ed
        self.store = PointStore()
        self.fp: list[int] = []
        self.path_heads: list[int] = []

    def search(self) -> int:
        m, n = self.seqs.m, self.seqs.n
        delta, offset = self.seqs.delta, self.seqs.offset
        size = m + n + 3

        self.fp = fp = [-1] * size
        self.path_heads = [NO_POINT] * size

        p = 0
        while True:
            for k in range(-p, delta):
                fp[k + offset] = self.snake(k, fp[k - 1 + offset] + 1, fp[k + 1 + offset])

            for k in range(delta + p, delta, -1):
                fp[k + offset] = self.snake(k, fp[k - 1 + offset] + 1, fp[k + 1 + offset])

            fp[delta + offset] = self.snake(
                delta, fp[delta - 1 + offset] + 1, fp[delta + 1 + offset]
            )

            if fp[delta + offset] >= n:
                break

            p += 1

        ed = delta + 2 * p
        log.debug("onp search: m=%d n=%d p=%d ed=%d points=%d", m, n, p, ed, len(self.store))
        return ed

    def snake(self, k: int, p: int, pp: int) -> int:
        a, b = self.seqs.a, self.seqs.b
        m, n = self.seqs.m, self.seqs.n
        offset = self.seqs.offset

        # p == pp follows diagonal k+1
        if p > pp:
            prev = self.path_heads[k - 1 + offset]
        else:
            prev = self.path_heads[k + 1 + offset]

        y = max(p, pp)
        x = y - k

        while x < m and y < n and a[x] == b[y]:
            x += 1
            y += 1

        if not self.only_ed:
            self.path_heads[k + offset] = self.store.add(x, y, prev)

        return y

    def path(self) -> list[tuple[int, int]]:
        if self.only_ed or not self.path_heads:
            return []

        head = self.path_heads[self.seqs.delta + self.seqs.offset]
        return self.store.trace(head)
