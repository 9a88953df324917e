"""Readers for dictionary word lists and puzzle files."""

from __future__ import annotations

from pathlib import Path
from typing import List

import requests

from ..core.exceptions import LoadError
from ..data.lexicon import Lexicon
from ..engine.grid import LetterGrid
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

URL_SCHEMES = ("http://", "https://")


def is_url(source: Path | str) -> bool:
    return isinstance(source, str) and source.lower().startswith(URL_SCHEMES)


def read_word_lines(source: Path | str, timeout_seconds: float = 30.0) -> List[str]:
    """Return the raw lines of a word list stored on disk or behind a URL."""

    if is_url(source):
        return _fetch_word_lines(str(source), timeout_seconds)

    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Cannot read dictionary {path}: {exc}") from exc
    return text.splitlines()


def _fetch_word_lines(url: str, timeout_seconds: float) -> List[str]:
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise LoadError(f"Dictionary download failed: {exc}") from exc
    LOGGER.info("Downloaded word list from %s (%s bytes)", url, len(response.content))
    return response.text.splitlines()


def load_dictionary(source: Path | str, timeout_seconds: float = 30.0) -> Lexicon:
    """Read a one-word-per-line list and build a :class:`Lexicon` from it."""

    lines = read_word_lines(source, timeout_seconds)
    LOGGER.info("Read %s dictionary lines from %s", len(lines), source)
    return Lexicon.build(lines)


def parse_puzzle(text: str) -> LetterGrid:
    """Parse puzzle text into a grid.

    The first line holds ``"<rows> <cols>"``; each of the following ``rows``
    lines holds ``cols`` space-separated tokens whose first character is the
    cell letter.
    """

    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise LoadError("Puzzle is empty")

    header = lines[0].split()
    if len(header) != 2:
        raise LoadError(f"Puzzle header must be '<rows> <cols>', got {lines[0]!r}")
    try:
        rows, cols = int(header[0]), int(header[1])
    except ValueError as exc:
        raise LoadError(f"Puzzle header is not numeric: {lines[0]!r}") from exc
    if rows <= 0 or cols <= 0:
        raise LoadError(f"Puzzle dimensions must be positive, got {rows}x{cols}")

    body = lines[1:]
    if len(body) != rows:
        raise LoadError(f"Puzzle declares {rows} rows but contains {len(body)}")

    grid_rows: List[List[str]] = []
    for index, line in enumerate(body, start=1):
        tokens = line.split()
        if len(tokens) != cols:
            raise LoadError(f"Puzzle row {index} has {len(tokens)} letters, expected {cols}")
        grid_rows.append([token[0] for token in tokens])
    return LetterGrid(grid_rows)


def load_puzzle(path: Path | str) -> LetterGrid:
    """Read and parse a puzzle file."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Cannot read puzzle {source}: {exc}") from exc
    grid = parse_puzzle(text)
    LOGGER.info("Loaded %sx%s puzzle from %s", grid.rows, grid.cols, source)
    return grid
