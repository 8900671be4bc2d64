"""High-entropy passphrases."""

from __future__ import annotations


def is_anagram(first: str, second: str) -> bool:
    """Return whether the two words use exactly the same letters."""
    return len(first) == len(second) and sorted(first) == sorted(second)


def is_valid(passphrase: str, strict: bool = False) -> bool:
    """Return whether no word repeats; when strict, no word may be an anagram of another."""
    seen: set[str] = set()
    for word in passphrase.split():
        if word in seen:
            return False
        if strict and any(is_anagram(word, other) for other in seen):
            return False
        seen.add(word)
    return True


def solve(text: str) -> tuple[int, int]:
    """Count the valid passphrases under the simple and the strict policy."""
    lines = text.splitlines()
    return (
        sum(is_valid(line, False) for line in lines),
        sum(is_valid(line, True) for line in lines),
    )