"""Search orchestration: load inputs, scan, sort."""

from __future__ import annotations

import time
import tracemalloc
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..core.constants import DEFAULT_MIN_LETTERS
from ..core.models import Match
from ..data.lexicon import Lexicon
from ..io.loaders import load_dictionary, load_puzzle
from ..utils.logger import get_logger
from .grid import LetterGrid
from .scanner import find_matches, sort_matches


LOGGER = get_logger(__name__)


@dataclass
class SearchConfig:
    dictionary_path: Path | str
    puzzle_path: Path | str
    min_length: int = DEFAULT_MIN_LETTERS
    workers: int = 1
    timeout_seconds: float = 30.0
    track_memory: bool = False


@dataclass
class SearchResult:
    grid: LetterGrid
    min_length: int
    matches: List[Match] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    peak_memory_kb: Optional[int] = None


class WordSearch:
    """Runs one search; pre-built inputs may be injected instead of loaded."""

    def __init__(
        self,
        config: SearchConfig,
        lexicon: Optional[Lexicon] = None,
        grid: Optional[LetterGrid] = None,
    ) -> None:
        self.config = config
        self._lexicon = lexicon
        self._grid = grid

    @property
    def lexicon(self) -> Lexicon:
        if self._lexicon is None:
            self._lexicon = load_dictionary(self.config.dictionary_path, self.config.timeout_seconds)
        return self._lexicon

    @property
    def grid(self) -> LetterGrid:
        if self._grid is None:
            self._grid = load_puzzle(self.config.puzzle_path)
        return self._grid

    def run(self) -> SearchResult:
        tracing = self.config.track_memory and not tracemalloc.is_tracing()
        if tracing:
            tracemalloc.start()
        try:
            started = time.perf_counter()
            lexicon = self.lexicon
            grid = self.grid
            matches = find_matches(grid, lexicon, self.config.min_length, workers=self.config.workers)
            elapsed = time.perf_counter() - started
            peak_kb = None
            if self.config.track_memory:
                peak_kb = tracemalloc.get_traced_memory()[1] // 1024
        finally:
            if tracing:
                tracemalloc.stop()
        LOGGER.info("Search completed in %.3fs", elapsed)
        return SearchResult(
            grid=grid,
            min_length=self.config.min_length,
            matches=sort_matches(matches),
            elapsed_seconds=elapsed,
            peak_memory_kb=peak_kb,
        )
