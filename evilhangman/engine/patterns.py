"""
Pattern derivation and partitioning for a single letter guess.

Conventions:
  - '-'    : hidden position (letter not yet revealed)
  - other  : a correctly guessed letter shown in place

A pattern always has the round's word length. A guess can only turn hidden
positions into the guessed letter; it never hides an already revealed one.

Partitioning buckets every candidate by the pattern it WOULD produce if it
were the secret word. The adversary then keeps one bucket and throws the rest
away, so the buckets are the only futures the player can be steered into.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

# Placeholder for a position the player has not uncovered yet.
HIDDEN = "-"


def hidden_pattern(n: int) -> str:
    """Return the all-hidden pattern for an n-letter word."""
    return HIDDEN * n


def derive_pattern(word: str, letter: str, current: str) -> str:
    """
    Pattern `word` would show once `letter` is guessed on top of `current`.

    Examples:
      derive_pattern("cat", "a", "---") -> "-a-"
      derive_pattern("cat", "z", "-a-") -> "-a-"
      derive_pattern("tot", "t", "-o-") -> "tot"
    """
    return "".join(letter if ch == letter else shown for ch, shown in zip(word, current))


def partition(words: Iterable[str], letter: str, current: str) -> Dict[str, List[str]]:
    """
    Group `words` by the pattern each one derives under `letter`.

    Words keep their input order inside a group. Pure; nothing is mutated.
    """
    groups: Dict[str, List[str]] = defaultdict(list)
    for w in words:
        groups[derive_pattern(w, letter, current)].append(w)
    return dict(groups)


def pattern_summary(groups: Dict[str, List[str]]) -> Dict[str, int]:
    """Pattern -> group size, ordered by pattern string."""
    return {patt: len(groups[patt]) for patt in sorted(groups)}


def matches_pattern(word: str, pattern: str, guessed: Iterable[str]) -> bool:
    """
    True if `word` could still be the secret word given the public state.

    Revealed positions must hold exactly the revealed letter, and hidden
    positions must hold a letter that has not been guessed (otherwise the
    guess would have revealed it).
    """
    if len(word) != len(pattern):
        return False
    guessed = set(guessed)
    for ch, shown in zip(word, pattern):
        if shown == HIDDEN:
            if ch in guessed:
                return False
        elif ch != shown:
            return False
    return True
