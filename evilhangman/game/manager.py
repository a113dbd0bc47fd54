"""
Single-object front door over WordPool + RoundState.

Front ends (the text game, the experiment harness) talk to this class; it
owns one immutable pool and at most one active round, and forwards every
round query to that round.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterable

from evilhangman.engine import Difficulty
from .errors import RoundNotPrepared
from .pool import WordPool
from .round import RoundState

log = logging.getLogger(__name__)


class HangmanManager:
    def __init__(self, words: Iterable[str] | WordPool | None, debug: bool = False,
                 rng: random.Random | None = None):
        """
        Args:
          words : the dictionary (any iterable of words) or an existing WordPool
          debug : log partitions and the kept pattern after every guess
          rng   : randomness for commit_secret_word (shared by every round)
        """
        self.pool = words if isinstance(words, WordPool) else WordPool(words)
        self.debug = debug
        self.rng = rng if rng is not None else random.Random()
        self._round: RoundState | None = None

    @property
    def round(self) -> RoundState:
        if self._round is None:
            raise RoundNotPrepared("call prepare_round before playing")
        return self._round

    def num_words(self, length: int) -> int:
        """Pool words of `length`, independent of any round."""
        return self.pool.count(length)

    def prepare_round(self, word_length: int, max_wrong_guesses: int,
                      difficulty: Difficulty) -> RoundState:
        """Replace the active round with a fresh one and return it."""
        self._round = RoundState.prepare(
            self.pool, word_length, max_wrong_guesses, difficulty, rng=self.rng)
        if self.debug:
            log.debug("new round: length=%d guesses=%d difficulty=%s candidates=%d",
                      word_length, max_wrong_guesses, self._round.difficulty.name,
                      self._round.num_words_current())
        return self._round

    def num_words_current(self) -> int:
        return self.round.num_words_current()

    def guesses_left(self) -> int:
        return self.round.guesses_left()

    def guesses_made(self) -> str:
        return self.round.guesses_made()

    def already_guessed(self, letter: str) -> bool:
        return self.round.already_guessed(letter)

    def pattern(self) -> str:
        return self.round.pattern()

    def make_guess(self, letter: str) -> Dict[str, int]:
        summary = self.round.make_guess(letter)
        if self.debug:
            log.debug("DEBUGGING: patterns for %r: %s", letter, summary)
            log.debug("DEBUGGING: kept %r, %d words remain",
                      self.round.pattern(), self.round.num_words_current())
        return summary

    def commit_secret_word(self) -> str:
        return self.round.commit_secret_word()
