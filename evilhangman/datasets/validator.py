"""
Dictionary validator for evilhangman.

What this module does:
- Validate a dictionary file (one word per line) before it becomes a WordPool.
- Enforce formatting rules (lowercase, alphabetic only, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Report how many words exist for each word length (what a front end offers
  the player as "choose a length").
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from evilhangman.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("evilhangman/datasets/data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class DictionaryReport:
    """Validation result for one dictionary file."""
    path: str             # file path (as given)
    exists: bool          # did the file exist on disk?
    count: int            # number of VALID words after cleaning
    unique_count: int     # unique valid words (after dedupe)
    invalid_lines: int    # number of invalid lines encountered
    sha256: str           # SHA-256 of raw file bytes (empty string if missing)
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> unique words
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line
      - must be lowercase and alphabetic
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isalpha() and w == w.lower():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_dictionary(path: str) -> Dict:
    """
    Validate a dictionary file.

    Returns
    -------
    Dict
        JSON-serializable DictionaryReport. `passed` is strict: the file must
        exist, hold at least one valid word, and have no invalid lines.
        Duplicates are reported as an issue but do not fail validation
        (the pool dedupes them anyway).
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path, False, 0, 0, 0, "", issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = set(words)
    lengths = Counter(len(w) for w in unique)

    issues: List[str] = []
    if not words:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append(f"dictionary contains {len(words) - len(unique)} duplicate line(s)")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        lengths={n: lengths[n] for n in sorted(lengths)},
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        dictionary=220 (uniq=220, sha=abc123def456) | lengths 3..8 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    lengths = report.get("lengths") or {}
    span = f"{min(lengths)}..{max(lengths)}" if lengths else "none"
    return (
        f"dictionary={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| lengths {span} | {status}"
    )
