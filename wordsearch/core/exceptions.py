"""Custom exception hierarchy for the word search solver."""


class WordSearchError(Exception):
    """Base exception for solver failures."""


class LoadError(WordSearchError):
    """Raised when a dictionary or puzzle source cannot be read or parsed."""


class InvalidGridError(WordSearchError):
    """Raised when a letter grid is empty, jagged or holds multi-character cells."""
