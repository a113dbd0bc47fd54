"""evilhangman: an adversarial Hangman engine that never commits to a word early."""

__version__ = "0.1.0"
