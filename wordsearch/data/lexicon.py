"""Ordered dictionary used for membership tests during a scan."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator, List

from .normalization import normalize_letter, normalize_word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class Lexicon:
    """Immutable, sorted set of lower-cased words.

    Membership is a binary search over the sorted entries, so lookups stay
    logarithmic in the dictionary size. The scanner performs one lookup per
    extension step per axis per cell, which dominates the cost of a search.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: List[str] = sorted({normalize_word(word) for word in words} - {""})

    @classmethod
    def build(cls, lines: Iterable[str]) -> "Lexicon":
        """Create a lexicon from raw word-list lines."""
        lexicon = cls(lines)
        LOGGER.info("Lexicon built with %s entries", len(lexicon))
        return lexicon

    @staticmethod
    def sort_key(word: str) -> str:
        """Ordering rule shared by the lexicon and result sorting."""
        return normalize_letter(word)

    def contains(self, candidate: str) -> bool:
        word = normalize_letter(candidate)
        if not word:
            return False
        index = bisect_left(self._words, word)
        return index < len(self._words) and self._words[index] == word

    def __contains__(self, candidate: object) -> bool:
        return isinstance(candidate, str) and self.contains(candidate)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Lexicon({len(self._words)} words)"
