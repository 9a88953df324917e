"""Data models produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .constants import Axis


Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class Match:
    """A dictionary word found in the grid.

    ``start`` and ``end`` are inclusive ``(row, col)`` pairs in reading order:
    the first letter of ``word`` sits at ``start`` and the last at ``end``.
    """

    word: str
    start: Coordinate
    end: Coordinate
    axis: Axis

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Coordinate]:
        rows = self.end[0] - self.start[0]
        cols = self.end[1] - self.start[1]
        span = max(abs(rows), abs(cols))
        if span == 0:
            return [self.start]
        dr, dc = rows // span, cols // span
        return [(self.start[0] + i * dr, self.start[1] + i * dc) for i in range(span + 1)]

    def reversed(self) -> "Match":
        """Return the opposite reading of the same cells."""
        return Match(word=self.word[::-1], start=self.end, end=self.start, axis=self.axis)
