"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-round results into a tidy CSV (one row per round).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-a--" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["player", "N", "difficulty", "answer", "success", "guesses", "wrong_guesses",
          "time_ms", "letters", "final_pattern", "candidates_left"]


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-a--" -> "'-a--"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of round results to CSV.

    Schema (columns):
      player, N, difficulty, answer, success, guesses, wrong_guesses, time_ms,
      letters (guess order, concatenated), final_pattern, candidates_left

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in results:
            hist = r.get("history", [])
            last_patt = hist[-1][1] if hist else ""
            w.writerow({
                "player": r.get("player_id", "?"),
                "N": r["N"],
                "difficulty": r["difficulty"],
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "wrong_guesses": r["wrong_guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "letters": "".join(letter for letter, _, _ in hist),
                "final_pattern": _excel_safe_pattern(last_patt),
                "candidates_left": hist[-1][2] if hist else "",
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (player, N, difficulty, rounds, seed, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - num_rounds, win_rate
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
