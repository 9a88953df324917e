"""Pretty-print helpers for grids and search results."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from ..core.models import Coordinate, Match
    from ..engine.grid import LetterGrid
    from ..engine.search import SearchResult


def column_label(index: int) -> str:
    """Spreadsheet-style column name: 0 -> A, 25 -> Z, 26 -> AA."""
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")
    label = ""
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


def format_coordinate(coordinate: Coordinate) -> str:
    row, col = coordinate
    return f"[{column_label(col)}, {row + 1:<2}]"


def format_match(match: Match) -> str:
    return f"{format_coordinate(match.start)} -> {format_coordinate(match.end)} : {match.word.upper()}"


def format_grid(grid: LetterGrid) -> str:
    labels = [column_label(c) for c in range(grid.cols)]
    width = max(len(label) for label in labels)
    lines = ["     " + " ".join(f"{label:>{width}}" for label in labels)]
    lines.append("   " + "-" * ((width + 1) * grid.cols + 1))
    for r, row in enumerate(grid.iter_rows(), start=1):
        row_render = " ".join(f"{letter.upper():>{width}}" for letter in row)
        lines.append(f"{r:02d} | {row_render}")
    return "\n".join(lines)


def format_results(matches: Iterable[Match], min_length: int) -> str:
    matches = list(matches)
    lines: List[str] = [f"Found {len(matches)} words with {min_length} letters or more"]
    lines.extend(format_match(match) for match in matches)
    return "\n".join(lines)


def print_report(result: SearchResult, *, stream=None) -> None:
    """Print grid, sorted matches, timing and memory for a completed search."""

    stream = stream or sys.stdout
    print(format_grid(result.grid), file=stream)
    print(file=stream)
    print(format_results(result.matches, result.min_length), file=stream)
    print(f"Time taken: {result.elapsed_seconds * 1000:.0f} milliseconds", file=stream)
    if result.peak_memory_kb is not None:
        print(f"Memory used: {result.peak_memory_kb} kB", file=stream)
