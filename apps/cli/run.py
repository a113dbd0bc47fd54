# apps/cli/run.py
"""
CLI entry point for running evilhangman experiments.

This script:
  1) Validates the dictionary (prints counts + SHA + available lengths).
  2) Builds the shared WordPool and instantiates the requested player.
  3) Plays a batch of rounds against the adversarial engine with a live
     progress indicator and writes:
       - CSV:  per-round results
       - JSON: manifest with config, dictionary hash, git commit, win rate
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from importlib.resources import files
from pathlib import Path

from tqdm import tqdm

from evilhangman.datasets import validate_dictionary, pretty_summary, load_words
from evilhangman.engine import Difficulty
from evilhangman.game import WordPool
from evilhangman.harness import run_case, round_seed, DEFAULT_MAX_WRONG
from evilhangman.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from evilhangman.players import create_player, get_player_ids

DEFAULT_DICTIONARY = str(files("evilhangman.datasets") / "data" / "dictionary.txt")


def main(argv=None):
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    player_choices = ", ".join(get_player_ids())

    ap = argparse.ArgumentParser(description="evilhangman: run player experiments")
    ap.add_argument("--player", default="letter_freq",
                    help=f"player id (one of: {player_choices})")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--max-wrong", type=int, default=DEFAULT_MAX_WRONG,
                    help="wrong guesses allowed per round")
    ap.add_argument("--difficulty", type=Difficulty.parse, default=Difficulty.HARD,
                    help="easy, medium or hard")
    ap.add_argument("--rounds", type=int, default=100, help="number of rounds to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--debug", action="store_true", help="log every partition the engine makes")
    args = ap.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # 1) Validate dictionary and print a one-liner summary
    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print("Dictionary not found, nothing to play.", file=sys.stderr)
        return 2

    # 2) Build the pool once; every round shares it
    pool = WordPool(load_words(args.dictionary))
    if pool.count(args.N) == 0:
        print(f"No words of length {args.N}. Available: {pool.lengths()}", file=sys.stderr)
        return 2

    # 3) Instantiate player by id
    player = create_player(args.player)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0
    total = args.rounds

    rounds = range(1, total + 1)
    iterator = tqdm(rounds, ncols=80, desc="Playing", unit="round") if mode == "bar" else rounds

    # 5) Run batch with live progress
    for idx in iterator:
        # Same per-round seeds as harness.run_batch
        per_seed = round_seed(args.seed, idx)
        r = run_case(player, pool, N=args.N, max_wrong=args.max_wrong,
                     difficulty=args.difficulty, seed=per_seed)
        r["player_id"] = player.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    wins = sum(1 for r in results if r["success"])
    win_rate = wins / max(1, len(results))
    print(f"{player.id} vs {args.difficulty.name}: {wins}/{len(results)} won ({win_rate:.1%})")

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    config = dict(vars(args))
    config["difficulty"] = args.difficulty.value
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": config,
        "dictionary": rep,
        "num_rounds": len(results),
        "win_rate": win_rate,
        "player_id": player.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
