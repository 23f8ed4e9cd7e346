"""String reversal problems."""

from __future__ import annotations


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def partial_reverse(text: str, n: int) -> str:
    """Return ``text`` with its first ``n`` characters reversed.

    When ``n`` exceeds the length of ``text`` it is returned unchanged.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if n > len(text):
        return text
    return text[:n][::-1] + text[n:]