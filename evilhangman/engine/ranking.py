"""
"Harder for the player" ordering over partition groups.

For a fixed guessed letter, group A ranks ahead of group B when:
  1) A has more words (more survivors is worse for the player),
  2) A's pattern shows the letter fewer times (less progress on screen),
  3) A's pattern string sorts first (tie-break only, no game meaning).

The three keys make the order total, so the ranking is reproducible no
matter how the partition dict happens to be ordered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class PatternGroup:
    """One partition bucket: the pattern and the words that produce it."""
    pattern: str
    words: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.words)

    def occurrences(self, letter: str) -> int:
        return self.pattern.count(letter)


def rank_groups(groups: Dict[str, List[str]], letter: str) -> List[PatternGroup]:
    """Return every group as a PatternGroup, hardest first."""
    ranked = [PatternGroup(patt, tuple(words)) for patt, words in groups.items()]
    ranked.sort(key=lambda g: (-g.size, g.occurrences(letter), g.pattern))
    return ranked
