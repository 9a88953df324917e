"""Shared constants and enumerations for the word search solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


DEFAULT_MIN_LETTERS = 4


class Axis(str, Enum):
    """Straight lines a word may be read along.

    Each axis is walked in a single sense; the opposite reading comes from
    reversing the accumulated letters.
    """

    VERTICAL = "VERTICAL"
    HORIZONTAL = "HORIZONTAL"
    DIAGONAL_DOWN_RIGHT = "DIAGONAL_DOWN_RIGHT"
    DIAGONAL_DOWN_LEFT = "DIAGONAL_DOWN_LEFT"

    @property
    def step(self) -> Tuple[int, int]:
        return AXIS_STEPS[self]


AXIS_STEPS: Dict[Axis, Tuple[int, int]] = {
    Axis.VERTICAL: (1, 0),
    Axis.HORIZONTAL: (0, 1),
    Axis.DIAGONAL_DOWN_RIGHT: (1, 1),
    Axis.DIAGONAL_DOWN_LEFT: (1, -1),
}


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def longest_side(self) -> int:
        return max(self.rows, self.cols)
