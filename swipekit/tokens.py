"""Splitting text into non-empty tokens."""

from __future__ import annotations


def tokenize(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty tokens.

    Runs of separators, and separators at either end, produce no tokens.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [token for token in text.split(separator) if token]