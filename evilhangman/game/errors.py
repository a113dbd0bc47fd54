"""
Exceptions raised by the game layer.

Every check runs before any state is touched, so a failed call leaves the
pool and the round exactly as they were.
"""


class HangmanError(Exception):
    """Base class for all game errors."""


class InvalidConstruction(HangmanError, ValueError):
    """Word pool is missing, empty, or holds something that is not a word."""


class InvalidRoundParameters(HangmanError, ValueError):
    """Non-positive word length or a guess budget below one."""


class InvalidGuess(HangmanError, ValueError):
    """Guess is not a single character, or is the hidden marker itself."""


class AlreadyGuessed(HangmanError, ValueError):
    """Letter was already guessed in this round."""


class NoCandidatesRemaining(HangmanError, RuntimeError):
    """The round has no candidate words left to play or commit to."""


class RoundNotPrepared(HangmanError, RuntimeError):
    """A round operation was requested before prepare_round."""
