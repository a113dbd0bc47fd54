"""
Difficulty-aware choice of the surviving group.

HARD always keeps the hardest group. EASY and MEDIUM hand the player the
second-hardest group on a fixed cadence, counted over ALL letters guessed
so far in the round (right or wrong), including the current one:
  - EASY   : every 2nd letter
  - MEDIUM : every 4th letter
The easier group is only available when the guess split the candidates
into at least two patterns.
"""

from __future__ import annotations

import enum
from typing import Dict, List

from .ranking import PatternGroup, rank_groups

EASY_EVERY = 2
MEDIUM_EVERY = 4


class Difficulty(enum.Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, text: str) -> "Difficulty":
        """Accept 'easy', 'Medium', 'HARD', ... (CLI friendly)."""
        try:
            return cls(str(text).strip().lower())
        except ValueError as e:
            raise ValueError(
                f"Unknown difficulty: {text!r}. Available: {[d.value for d in cls]}") from e


def _easier_turn(difficulty: Difficulty, guessed_count: int) -> bool:
    if difficulty is Difficulty.EASY:
        return guessed_count % EASY_EVERY == 0
    if difficulty is Difficulty.MEDIUM:
        return guessed_count % MEDIUM_EVERY == 0
    return False


def select_group(
        groups: Dict[str, List[str]],
        letter: str,
        difficulty: Difficulty,
        guessed_count: int,
) -> PatternGroup:
    """
    Pick the group that becomes the new live state.

    Args:
      groups        : partition produced by engine.partition
      letter        : the letter just guessed
      difficulty    : the round's difficulty
      guessed_count : distinct letters guessed so far, including `letter`

    Raises:
      ValueError if `groups` is empty (nothing to choose from).
    """
    if not groups:
        raise ValueError("cannot select from an empty partition")
    ranked = rank_groups(groups, letter)
    if len(ranked) > 1 and _easier_turn(difficulty, guessed_count):
        return ranked[1]
    return ranked[0]
