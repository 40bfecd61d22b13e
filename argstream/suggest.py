# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Spelling suggestions for misspelled subcommands and options.

`closest_match` answers one question: which word in a bank is nearest to the
target, as long as it is no further than `max_cost` edits away. Every insertion,
deletion, and substitution costs one.
"""
from __future__ import annotations

from typing import Iterable


def edit_distance(source: str, target: str) -> int:
    """Return the Levenshtein distance between two strings."""
    if len(source) < len(target):
        source, target = target, source
    previous = list(range(len(target) + 1))
    for i, s_char in enumerate(source, start=1):
        current = [i]
        for j, t_char in enumerate(target, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (s_char != t_char),
                )
            )
        previous = current
    return previous[-1]


def closest_match(target: str, bank: Iterable[str], max_cost: int) -> str | None:
    """
    Return the word from `bank` with the lowest edit distance to `target`.

    Args:
        target (str): The misspelled word.
        bank (Iterable[str]): Candidate words.
        max_cost (int): Largest distance still considered a match. Zero disables
            matching entirely.

    Returns:
        str | None: The best candidate, earliest in `bank` on ties, or None.
    """
    if max_cost <= 0:
        return None
    best: str | None = None
    best_cost = max_cost + 1
    for word in bank:
        cost = edit_distance(target, word)
        if cost < best_cost:
            best, best_cost = word, cost
    return best
