"""
Per-round state of an adversarial Hangman game.

The round never holds a single secret word. It holds the family of pool
words that still agree with everything the player has been shown, and on
each guess it keeps whichever slice of that family is hardest for the
player (softened on EASY/MEDIUM, see engine.selector).

Lifecycle:
  - RoundState.prepare(...)   : all-hidden pattern, every pool word of the length
  - make_guess(letter)        : the only mutation
  - commit_secret_word()      : pick one concrete word (does not mutate)

Win/loss is NOT enforced here. Callers check guesses_left() <= 0 (loss) or
a pattern with no hidden markers (win) themselves.

A RoundState has no locking; give each round one owner.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Set

from evilhangman.engine import (
    HIDDEN, Difficulty, hidden_pattern, partition, pattern_summary, select_group,
)
from .errors import AlreadyGuessed, InvalidGuess, InvalidRoundParameters, NoCandidatesRemaining
from .pool import WordPool

log = logging.getLogger(__name__)


class RoundState:
    def __init__(
            self,
            *,
            word_length: int,
            max_wrong_guesses: int,
            difficulty: Difficulty,
            candidates: List[str],
            rng: random.Random | None = None,
    ):
        self.word_length = word_length
        self.max_wrong_guesses = max_wrong_guesses
        self.difficulty = difficulty
        self.rng = rng if rng is not None else random.Random()

        self._remaining = max_wrong_guesses
        self._guessed: Set[str] = set()
        self._pattern = hidden_pattern(word_length)
        self._candidates: List[str] = list(candidates)

    @classmethod
    def prepare(
            cls,
            pool: WordPool,
            word_length: int,
            max_wrong_guesses: int,
            difficulty: Difficulty,
            rng: random.Random | None = None,
    ) -> "RoundState":
        """
        Start a fresh round over every pool word of `word_length`.

        Raises:
          InvalidRoundParameters if word_length <= 0, max_wrong_guesses < 1,
          or difficulty is not a Difficulty (or a name Difficulty.parse accepts).
        """
        if word_length <= 0 or max_wrong_guesses < 1:
            raise InvalidRoundParameters(
                "word length must be at least 1 and max wrong guesses must be at least 1; "
                f"got word_length={word_length}, max_wrong_guesses={max_wrong_guesses}")
        if not isinstance(difficulty, Difficulty):
            try:
                difficulty = Difficulty.parse(difficulty)
            except ValueError as e:
                raise InvalidRoundParameters(str(e)) from e
        return cls(
            word_length=word_length,
            max_wrong_guesses=max_wrong_guesses,
            difficulty=difficulty,
            candidates=list(pool.words_of_length(word_length)),
            rng=rng,
        )

    # ---- queries ----

    def pattern(self) -> str:
        return self._pattern

    def guesses_left(self) -> int:
        return self._remaining

    def guessed_letters(self) -> List[str]:
        """Guessed letters in ascending order."""
        return sorted(self._guessed)

    def guesses_made(self) -> str:
        """Guessed letters as '[a, c, e]' (alphabetical; '[]' when none)."""
        return "[" + ", ".join(self.guessed_letters()) + "]"

    def num_guesses_made(self) -> int:
        return len(self._guessed)

    def already_guessed(self, letter: str) -> bool:
        return letter in self._guessed

    def num_words_current(self) -> int:
        return len(self._candidates)

    def candidates(self) -> List[str]:
        return list(self._candidates)

    # ---- commands ----

    def make_guess(self, letter: str) -> Dict[str, int]:
        """
        Apply one guess and return pattern -> word count for every pattern the
        guess could have produced (ordered by pattern string).

        The pattern only changes when the chosen group reveals the letter; a
        chosen group that leaves the pattern unchanged costs one wrong guess.
        The candidate family becomes the chosen group either way.

        Raises (before any mutation):
          InvalidGuess          : not a single character, or the hidden marker
          AlreadyGuessed        : letter was guessed earlier this round
          NoCandidatesRemaining : the round started with no words of this length
        """
        if not isinstance(letter, str) or len(letter) != 1 or letter == HIDDEN:
            raise InvalidGuess(f"guess must be a single character other than {HIDDEN!r}; got {letter!r}")
        if letter in self._guessed:
            raise AlreadyGuessed(f"guess has already been made: {letter!r}")
        if not self._candidates:
            raise NoCandidatesRemaining(
                f"no words of length {self.word_length} left to play")

        self._guessed.add(letter)
        groups = partition(self._candidates, letter, self._pattern)
        chosen = select_group(groups, letter, self.difficulty, len(self._guessed))

        if chosen.pattern == self._pattern:
            self._remaining -= 1
        else:
            self._pattern = chosen.pattern
        self._candidates = list(chosen.words)

        summary = pattern_summary(groups)
        log.debug("guess %r -> %s | kept %r (%d words, %d guesses left)",
                  letter, summary, chosen.pattern, chosen.size, self._remaining)
        return summary

    def commit_secret_word(self) -> str:
        """
        Pick one word uniformly at random from the live family.

        Does not shrink the family, so repeated calls may disagree.

        Raises:
          NoCandidatesRemaining if the family is empty.
        """
        if not self._candidates:
            raise NoCandidatesRemaining("current active words must be at least 1")
        return self._candidates[self.rng.randrange(len(self._candidates))]

    def __repr__(self) -> str:
        return (f"RoundState(pattern={self._pattern!r}, guessed={self.guesses_made()}, "
                f"guesses_left={self._remaining}, candidates={len(self._candidates)}, "
                f"difficulty={self.difficulty.name})")
