"""Word search solver.

This package exposes the public API surface via:

- ``wordsearch.data.lexicon.Lexicon``: ordered dictionary with logarithmic lookups.
- ``wordsearch.engine.scanner.find_matches``: finds lexicon words along grid lines.
- ``wordsearch.engine.search.WordSearch``: loads inputs and runs a full search.
"""

from .core.constants import Axis, DEFAULT_MIN_LETTERS
from .core.exceptions import InvalidGridError, LoadError, WordSearchError
from .core.models import Match
from .data.lexicon import Lexicon
from .engine.grid import LetterGrid
from .engine.scanner import find_matches, sort_matches
from .engine.search import SearchConfig, SearchResult, WordSearch

__all__ = [
    "Axis",
    "DEFAULT_MIN_LETTERS",
    "InvalidGridError",
    "LetterGrid",
    "Lexicon",
    "LoadError",
    "Match",
    "SearchConfig",
    "SearchResult",
    "WordSearch",
    "WordSearchError",
    "find_matches",
    "sort_matches",
]

__version__ = "0.2.4"
