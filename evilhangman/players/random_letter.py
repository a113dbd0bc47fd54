"""
Random Letter player.

Strategy:
  - Guess uniformly at random among letters that appear in the dictionary's
    words of this length and have not been guessed yet.

Notes:
  - Deterministic across runs with the same seed (via BasePlayer.rng).
  - Baseline to verify the pipeline; ignores the pattern entirely.
"""

from __future__ import annotations

from .base import BasePlayer, register


@register
class RandomLetterPlayer(BasePlayer):
    id = "random_letter"
    name = "Random Letter"
    version = "1.0.0"

    def next_letter(self, state: dict) -> str | None:
        pool = self.open_letters(state)
        if not pool:
            return None
        return pool[self.rng.randrange(len(pool))]
