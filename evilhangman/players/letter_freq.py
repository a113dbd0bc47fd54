"""
Letter-Frequency player (document frequency).

Idea:
  - Rebuild the words still consistent with the public pattern, count in how
    many of them each unguessed letter appears (once per word), and guess the
    most common one. Ties are broken with the seeded RNG.

Why it works:
  - A letter present in most consistent words is the one the adversary finds
    hardest to dodge: dodging it means discarding most of the family.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .base import BasePlayer, register


@register
class LetterFreqPlayer(BasePlayer):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def _counts(self, words: List[str], letters: List[str]) -> np.ndarray:
        index = {ch: i for i, ch in enumerate(letters)}
        counts = np.zeros(len(letters), dtype=np.int64)
        for w in words:
            hits = [index[ch] for ch in set(w) if ch in index]
            if hits:
                counts[hits] += 1
        return counts

    def next_letter(self, state: dict) -> str | None:
        letters = self.open_letters(state)
        if not letters:
            return None

        words = self.consistent_words(state) or self.words
        counts = self._counts(words, letters)

        best = np.flatnonzero(counts == counts.max())
        return letters[int(best[self.rng.randrange(len(best))])]
