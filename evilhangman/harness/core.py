"""
Experiment harness core primitives.

- run_case:  play one round of adversarial Hangman with a simulated player.
- run_batch: play many rounds back-to-back with per-round seeds.

The engine itself never ends a round; the harness does, by checking the
public counters after every guess:
  - win  : the pattern has no hidden markers left
  - loss : no wrong guesses left
  - stop : the player has no unguessed letters left to try

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import random
import time
from typing import Dict, List, Tuple

from evilhangman.engine import HIDDEN, Difficulty
from evilhangman.game import RoundState, WordPool

# Wrong-guess budget when the caller does not pick one.
DEFAULT_MAX_WRONG = 8


def round_seed(seed: int | None, idx: int) -> int | None:
    """Seed for the idx-th round (1-based) of a run started with `seed`."""
    return None if seed is None else seed + idx


def _player_state(rnd: RoundState) -> Dict:
    return {
        "pattern": rnd.pattern(),
        "guessed": rnd.guessed_letters(),
        "guesses_left": rnd.guesses_left(),
        "N": rnd.word_length,
        "candidates_count": rnd.num_words_current(),
    }


def run_case(
        player,
        pool: WordPool,
        *,
        N: int,
        max_wrong: int = DEFAULT_MAX_WRONG,
        difficulty: Difficulty = Difficulty.HARD,
        seed: int | None = None,
) -> Dict:
    """
    Play one round until the player wins, loses, or runs out of letters.

    Args:
        player:     an object implementing BasePlayer with next_letter(state)
        pool:       the shared WordPool
        N:          word length
        max_wrong:  wrong-guess budget
        difficulty: engine difficulty for the round
        seed:       seeds both the player and the engine's final commitment

    Returns:
        dict with keys:
            success (bool), guesses (int), wrong_guesses (int), time_ms (float),
            history (list[(letter, pattern, candidates_left)]), answer (str),
            difficulty (str), N (int)
    """
    if pool.count(N) == 0:
        raise ValueError(f"pool has no words of length {N}; available lengths: {pool.lengths()}")

    player.reset(pool_words=pool.words_of_length(N), N=N, seed=seed)
    rnd = RoundState.prepare(pool, N, max_wrong, difficulty, rng=random.Random(seed))

    history: List[Tuple[str, str, int]] = []
    success = False

    t0 = time.perf_counter_ns()
    while rnd.guesses_left() > 0:
        letter = player.next_letter(_player_state(rnd))
        if letter is None:
            break
        rnd.make_guess(letter)
        history.append((letter, rnd.pattern(), rnd.num_words_current()))

        if HIDDEN not in rnd.pattern():
            success = True
            break
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "success": success,
        "guesses": len(history),
        "wrong_guesses": max_wrong - rnd.guesses_left(),
        "time_ms": dt,
        "history": history,
        "answer": rnd.commit_secret_word(),
        "difficulty": rnd.difficulty.value,
        "N": N,
    }


def run_batch(
        player,
        pool: WordPool,
        *,
        N: int,
        rounds: int,
        max_wrong: int = DEFAULT_MAX_WRONG,
        difficulty: Difficulty = Difficulty.HARD,
        seed: int | None = None,
) -> List[Dict]:
    """
    Play `rounds` rounds in sequence.

    Each round's seed is derived from the base seed to make runs reproducible
    but not identical across rounds (seed + index).
    """
    out: List[Dict] = []
    for idx in range(1, rounds + 1):
        case_seed = round_seed(seed, idx)
        r = run_case(player, pool, N=N, max_wrong=max_wrong,
                     difficulty=difficulty, seed=case_seed)
        out.append(r)
    return out
