"""Letter grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from ..core.constants import Axis, Bounds
from ..core.exceptions import InvalidGridError
from ..data.normalization import normalize_letter


class LetterGrid:
    """Rectangular, read-only matrix of lower-cased letters.

    The constructor rejects empty, jagged or multi-character input so that
    walks over the grid can rely on ``bounds`` alone.
    """

    def __init__(self, rows: Sequence[Sequence[str]]) -> None:
        if not rows:
            raise InvalidGridError("Grid has no rows")
        width = len(rows[0])
        if width == 0:
            raise InvalidGridError("Grid has no columns")

        cells: List[Tuple[str, ...]] = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGridError(
                    f"Row {r} has {len(row)} cells, expected {width}"
                )
            for c, letter in enumerate(row):
                if not isinstance(letter, str) or len(letter) != 1:
                    raise InvalidGridError(f"Cell ({r},{c}) must be a single character, got {letter!r}")
            cells.append(tuple(normalize_letter(letter) for letter in row))

        self._cells: Tuple[Tuple[str, ...], ...] = tuple(cells)
        self.bounds = Bounds(rows=len(cells), cols=width)

    @classmethod
    def from_strings(cls, lines: Iterable[str]) -> "LetterGrid":
        """Build a grid from one string per row, e.g. ``["cat", "owl"]``."""
        return cls([list(line) for line in lines])

    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    def cell(self, row: int, col: int) -> str:
        return self._cells[row][col]

    def iter_rows(self) -> Iterator[Tuple[str, ...]]:
        return iter(self._cells)

    def has_room(self, row: int, col: int, axis: Axis, length: int) -> bool:
        """Whether a run of ``length`` cells fits from ``(row, col)`` along ``axis``."""
        dr, dc = axis.step
        reach = length - 1
        return self.bounds.contains(row + reach * dr, col + reach * dc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterGrid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"LetterGrid({self.rows}x{self.cols})"
