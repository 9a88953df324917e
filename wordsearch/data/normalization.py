"""Shared helpers for word and letter normalization."""

from __future__ import annotations


def normalize_word(text: str) -> str:
    """Return ``text`` stripped of surrounding whitespace and lower-cased."""

    if not text:
        return ""
    return text.strip().lower()


def normalize_letter(text: str) -> str:
    """Lower-case ``text`` without stripping it (grid letters, lookup keys)."""

    return text.lower()


__all__ = ["normalize_word", "normalize_letter"]
