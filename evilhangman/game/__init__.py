from .errors import (
    HangmanError, InvalidConstruction, InvalidRoundParameters, InvalidGuess,
    AlreadyGuessed, NoCandidatesRemaining, RoundNotPrepared,
)
from .pool import WordPool
from .round import RoundState
from .manager import HangmanManager

__all__ = [
    "HangmanError", "InvalidConstruction", "InvalidRoundParameters", "InvalidGuess",
    "AlreadyGuessed", "NoCandidatesRemaining", "RoundNotPrepared",
    "WordPool", "RoundState", "HangmanManager",
]
