from __future__ import annotations
import random
from typing import Dict, List, Type

from evilhangman.engine import matches_pattern

# ---- Global player registry ----
REGISTRY: Dict[str, Type["BasePlayer"]] = {}


def register(cls: Type["BasePlayer"]) -> Type["BasePlayer"]:
    """
    Decorator: @register on a player class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate player id: {pid}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that players inherit ----
class BasePlayer:
    """
    A simulated Hangman player.

    Players see only what a human would: the public pattern, the letters
    already guessed, and the guess budget. They may know the dictionary, so
    they can rebuild which words are still consistent with the pattern.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 0
        self.words: List[str] = []
        self.alphabet: List[str] = []
        self.rng = random.Random()

    def reset(self, *, pool_words: List[str], N: int, seed: int | None = None) -> None:
        self.N = int(N)
        self.words = [w for w in pool_words if len(w) == self.N]
        self.alphabet = sorted({ch for w in self.words for ch in w})
        if seed is not None:
            self.rng.seed(seed)

    def consistent_words(self, state: dict) -> List[str]:
        """Dictionary words that could still be the answer given `state`."""
        return [w for w in self.words if matches_pattern(w, state["pattern"], state["guessed"])]

    def open_letters(self, state: dict) -> List[str]:
        guessed = set(state["guessed"])
        return [ch for ch in self.alphabet if ch not in guessed]

    def next_letter(self, state: dict) -> str | None:
        raise NotImplementedError("Override in subclass")
