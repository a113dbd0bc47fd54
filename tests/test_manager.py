import logging
import random

import pytest
from evilhangman.engine import Difficulty
from evilhangman.game import (
    AlreadyGuessed, HangmanManager, InvalidConstruction, RoundNotPrepared, WordPool,
)


def test_manager_scenario():
    m = HangmanManager({"dog", "cat", "car"}, rng=random.Random(3))
    assert m.num_words(3) == 3 and m.num_words(4) == 0
    m.prepare_round(3, 5, Difficulty.HARD)

    assert m.make_guess("a") == {"---": 1, "-a-": 2}
    assert m.pattern() == "-a-" and m.guesses_left() == 5

    assert m.make_guess("z") == {"-a-": 2}
    assert m.guesses_left() == 4
    assert m.num_words_current() == 2
    assert m.guesses_made() == "[a, z]"
    assert m.already_guessed("z")

    with pytest.raises(AlreadyGuessed):
        m.make_guess("a")
    assert m.guesses_left() == 4
    assert m.commit_secret_word() in {"cat", "car"}

def test_manager_requires_words():
    with pytest.raises(InvalidConstruction):
        HangmanManager([])
    with pytest.raises(InvalidConstruction):
        HangmanManager(None)

def test_manager_requires_round():
    m = HangmanManager(["dog"])
    with pytest.raises(RoundNotPrepared):
        m.pattern()
    with pytest.raises(RoundNotPrepared):
        m.make_guess("d")

def test_prepare_round_resets_everything():
    m = HangmanManager(["dog", "cat", "car", "bird"])
    m.prepare_round(3, 2, Difficulty.HARD)
    m.make_guess("a")
    m.make_guess("q")
    m.prepare_round(4, 6, Difficulty.EASY)
    assert m.pattern() == "----"
    assert m.guesses_made() == "[]"
    assert m.guesses_left() == 6
    assert m.num_words_current() == 1

def test_rounds_share_one_pool():
    pool = WordPool(["dog", "cat", "car"])
    a, b = HangmanManager(pool), HangmanManager(pool)
    a.prepare_round(3, 5, Difficulty.HARD)
    b.prepare_round(3, 5, Difficulty.HARD)
    a.make_guess("a")
    assert b.num_words_current() == 3
    assert a.pool is b.pool

def test_debug_logs_partitions(caplog):
    m = HangmanManager(["dog", "cat", "car"], debug=True)
    m.prepare_round(3, 5, Difficulty.HARD)
    with caplog.at_level(logging.DEBUG, logger="evilhangman.game.manager"):
        m.make_guess("a")
    assert "-a-" in caplog.text
