"""
Immutable word pool shared by every round.

The pool is built once from the dictionary and only read afterwards, so one
instance can back any number of rounds (including concurrent ones).
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, Iterator, List, Tuple

from .errors import InvalidConstruction


class WordPool:
    """A frozen set of candidate words, indexed by length."""

    __slots__ = ("_words", "_by_length")

    def __init__(self, words: Iterable[str] | None):
        if words is None:
            raise InvalidConstruction("word pool cannot be None")
        unique = frozenset(words)
        if not unique:
            raise InvalidConstruction("word pool must contain at least 1 word")
        for w in unique:
            if not isinstance(w, str) or not w:
                raise InvalidConstruction(f"word pool entries must be non-empty strings; got {w!r}")

        by_length: Dict[int, List[str]] = defaultdict(list)
        for w in unique:
            by_length[len(w)].append(w)

        self._words: FrozenSet[str] = unique
        # Sorted so a round's starting candidates do not depend on set order.
        self._by_length: Dict[int, Tuple[str, ...]] = {
            n: tuple(sorted(ws)) for n, ws in by_length.items()
        }

    def count(self, length: int) -> int:
        """Number of pool words with exactly `length` letters."""
        return len(self._by_length.get(length, ()))

    def words_of_length(self, length: int) -> Tuple[str, ...]:
        return self._by_length.get(length, ())

    def lengths(self) -> List[int]:
        """Word lengths present in the pool, ascending."""
        return sorted(self._by_length)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"WordPool({len(self._words)} words, lengths={self.lengths()})"
