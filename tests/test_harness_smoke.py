import pytest
from evilhangman.engine import HIDDEN, Difficulty
from evilhangman.game import WordPool
from evilhangman.harness import run_case, run_batch, round_seed
from evilhangman.players import create_player, get_player_ids

WORDS = ["cat", "car", "cab", "dog", "dig", "fig", "fog", "bog", "hat", "hot",
         "bird", "bard", "card", "cord"]


def test_player_registry():
    assert get_player_ids() == ["letter_freq", "min_max_bucket", "random_letter"]
    with pytest.raises(ValueError):
        create_player("psychic")


@pytest.mark.parametrize("player_id", ["random_letter", "letter_freq", "min_max_bucket"])
@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_run_case_smoke(player_id, difficulty):
    pool = WordPool(WORDS)
    r = run_case(create_player(player_id), pool, N=3, max_wrong=6, difficulty=difficulty, seed=42)
    assert r["answer"] in pool and len(r["answer"]) == 3
    assert r["guesses"] == len(r["history"])
    assert 0 <= r["wrong_guesses"] <= 6
    letters = [letter for letter, _, _ in r["history"]]
    assert len(letters) == len(set(letters))
    if r["success"]:
        assert HIDDEN not in r["history"][-1][1]
        assert r["history"][-1][1] == r["answer"]
    else:
        assert r["wrong_guesses"] == 6


def test_run_case_wins_with_generous_budget():
    pool = WordPool(WORDS)
    r = run_case(create_player("letter_freq"), pool, N=4, max_wrong=26,
                 difficulty=Difficulty.HARD, seed=7)
    assert r["success"] is True


def test_run_case_is_reproducible():
    pool = WordPool(WORDS)
    a = run_case(create_player("random_letter"), pool, N=3, seed=5)
    b = run_case(create_player("random_letter"), pool, N=3, seed=5)
    assert a["history"] == b["history"] and a["answer"] == b["answer"]


def test_run_case_rejects_missing_length():
    with pytest.raises(ValueError):
        run_case(create_player("random_letter"), WordPool(WORDS), N=9)


def test_run_batch_counts():
    out = run_batch(create_player("min_max_bucket"), WordPool(WORDS), N=3, rounds=4, seed=1)
    assert len(out) == 4
    assert all(r["difficulty"] == "hard" for r in out)


def test_run_batch_uses_round_seeds():
    pool = WordPool(WORDS)
    batch = run_batch(create_player("random_letter"), pool, N=3, rounds=3, seed=10)
    single = [run_case(create_player("random_letter"), pool, N=3, seed=round_seed(10, i))
              for i in (1, 2, 3)]
    assert [r["history"] for r in batch] == [r["history"] for r in single]
    assert round_seed(None, 4) is None and round_seed(10, 2) == 12
