"""String predicates."""

from __future__ import annotations

from collections import Counter


def is_anagram(first: str, second: str) -> bool:
    """Whether the two strings use exactly the same characters."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def is_palindrome(text: str) -> bool:
    """Whether the ASCII letters and digits of ``text`` read the same both ways, ignoring case."""
    kept = [c.lower() for c in text if c.isascii() and c.isalnum()]
    return kept == kept[::-1]