"""Directional scan that finds lexicon words in a letter grid."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Tuple

from ..core.constants import Axis
from ..core.models import Match
from ..data.lexicon import Lexicon
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


def find_matches(
    grid: LetterGrid,
    lexicon: Lexicon,
    min_length: int,
    *,
    workers: int = 1,
) -> List[Match]:
    """Return every lexicon word readable along a straight line of ``grid``.

    Each cell is used as the origin of a walk along the four axes. A walk only
    starts when ``min_length`` cells fit before the edge, then runs to the edge.
    Once the accumulated run is at least ``min_length`` long, both the run and
    its reverse are looked up, so each segment is read in both directions
    without scanning it again from the far end.

    Nothing is deduplicated: a palindrome yields two matches with swapped
    coordinates, and overlapping lines yield independent matches.

    With ``workers > 1`` row blocks are scanned on a thread pool; the merged
    output is identical to the sequential one.
    """

    if min_length < 0:
        raise ValueError(f"min_length must be non-negative, got {min_length}")
    min_length = max(min_length, 1)

    if min_length > grid.bounds.longest_side:
        LOGGER.debug("min_length %s exceeds grid %r; nothing to scan", min_length, grid)
        return []

    blocks = _row_blocks(grid.rows, workers)
    if len(blocks) == 1:
        matches = _scan_rows(grid, lexicon, min_length, range(grid.rows))
    else:
        matches = []
        with ThreadPoolExecutor(max_workers=len(blocks)) as executor:
            futures = [
                executor.submit(_scan_rows, grid, lexicon, min_length, range(start, stop))
                for start, stop in blocks
            ]
            for (start, stop), future in zip(blocks, futures):
                block_matches = future.result()
                LOGGER.debug("Rows %s-%s produced %s matches", start, stop - 1, len(block_matches))
                matches.extend(block_matches)

    LOGGER.info("Scan of %r found %s matches (min length %s)", grid, len(matches), min_length)
    return matches


def sort_matches(matches: Iterable[Match]) -> List[Match]:
    """Stable sort by word using the lexicon ordering rule."""
    return sorted(matches, key=lambda match: Lexicon.sort_key(match.word))


def _row_blocks(rows: int, workers: int) -> List[Tuple[int, int]]:
    count = max(1, min(workers, rows))
    size, extra = divmod(rows, count)
    blocks: List[Tuple[int, int]] = []
    start = 0
    for index in range(count):
        stop = start + size + (1 if index < extra else 0)
        blocks.append((start, stop))
        start = stop
    return blocks


def _scan_rows(grid: LetterGrid, lexicon: Lexicon, min_length: int, rows: Iterable[int]) -> List[Match]:
    results: List[Match] = []
    for row in rows:
        for col in range(grid.cols):
            for axis in Axis:
                if grid.has_room(row, col, axis, min_length):
                    results.extend(_walk(grid, lexicon, row, col, axis, min_length))
    return results


def _walk(
    grid: LetterGrid,
    lexicon: Lexicon,
    row: int,
    col: int,
    axis: Axis,
    min_length: int,
) -> List[Match]:
    dr, dc = axis.step
    origin = (row, col)
    results: List[Match] = []
    letters: List[str] = []
    r, c = row, col
    while grid.bounds.contains(r, c):
        letters.append(grid.cell(r, c))
        if len(letters) >= min_length:
            forward = "".join(letters)
            if lexicon.contains(forward):
                results.append(Match(word=forward, start=origin, end=(r, c), axis=axis))
            backward = forward[::-1]
            if lexicon.contains(backward):
                results.append(Match(word=backward, start=(r, c), end=origin, axis=axis))
        r += dr
        c += dc
    return results
