"""
Min-Max Bucket player.

Idea:
  The adversary keeps (roughly) the largest partition group. So for each
  unguessed letter, partition the consistent words exactly the way the engine
  will, and pick the letter whose LARGEST group is smallest.
  Tie-break: more distinct patterns, then RNG.

Slower than letter_freq (one partition per letter), but it plays against
the adversary's actual rule instead of a proxy.
"""

from __future__ import annotations

from typing import List, Tuple

from evilhangman.engine import partition
from .base import BasePlayer, register


def _bucket_stats(words: List[str], letter: str, pattern: str) -> Tuple[int, int]:
    """
    Return (worst_bucket_size, num_distinct_patterns) for letter.
    """
    groups = partition(words, letter, pattern)
    if not groups:
        return 0, 0
    return max(len(g) for g in groups.values()), len(groups)


@register
class MinMaxBucketPlayer(BasePlayer):
    id = "min_max_bucket"
    name = "Min-Max Bucket"
    version = "1.0.0"

    def next_letter(self, state: dict) -> str | None:
        letters = self.open_letters(state)
        if not letters:
            return None

        words = self.consistent_words(state)
        if not words:
            return letters[self.rng.randrange(len(letters))]

        best_worst = None
        best_m = None
        best: List[str] = []

        for ch in letters:
            worst, m = _bucket_stats(words, ch, state["pattern"])
            if (best_worst is None) or (worst < best_worst) or (worst == best_worst and m > best_m):
                best_worst, best_m, best = worst, m, [ch]
            elif worst == best_worst and m == best_m:
                best.append(ch)

        return best[self.rng.randrange(len(best))]
