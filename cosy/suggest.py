"""Typo suggestions based on edit distance."""

from __future__ import annotations

from collections.abc import Iterable


def levenshtein(a: str, b: str) -> int:
    """Return the number of single-character edits turning ``a`` into ``b``."""
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]


def find_best_match(
    target: str, candidates: Iterable[str], max_dist: int = 2
) -> str | None:
    """Return the closest candidate within ``max_dist`` edits, or None.

    On ties the earliest candidate wins.
    """
    best_dist = max_dist + 1
    best_match = None
    for candidate in candidates:
        dist = levenshtein(target, candidate)
        if dist < best_dist:
            best_dist = dist
            best_match = candidate
    return best_match