# apps/cli/play.py
"""
Interactive adversarial Hangman in the terminal.

The computer never picks a word up front; it keeps every dictionary word that
fits what you have seen and dodges your guesses as long as it can. When the
round ends it commits to one of the words still in play and reveals it.

Usage:
    python -m apps.cli.play --dictionary evilhangman/datasets/data/dictionary.txt --debug
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from evilhangman.datasets import load_words
from evilhangman.engine import HIDDEN, Difficulty
from evilhangman.game import HangmanError, HangmanManager

from apps.cli.run import DEFAULT_DICTIONARY


def _ask_int(prompt: str, *, read: Callable[[str], str], write: Callable[[str], None],
             valid: Callable[[int], bool]) -> int:
    while True:
        raw = read(prompt).strip()
        if raw.lstrip("-").isdigit() and valid(int(raw)):
            return int(raw)
        write(f"{raw!r} is not a valid choice.")


def _ask_difficulty(*, read: Callable[[str], str], write: Callable[[str], None]) -> Difficulty:
    while True:
        raw = read("Difficulty (easy, medium, hard): ")
        try:
            return Difficulty.parse(raw)
        except ValueError:
            write(f"{raw!r} is not a difficulty.")


def play_round(manager: HangmanManager, *, read: Callable[[str], str] = input,
               write: Callable[[str], None] = print) -> bool:
    """
    Play one prepared round to the end. Returns True if the player won.

    Repeated or malformed letters are rejected and asked again; they never
    cost a guess.
    """
    while manager.guesses_left() > 0 and HIDDEN in manager.pattern():
        write("")
        write(f"Guesses left: {manager.guesses_left()}")
        write(f"Guessed so far: {manager.guesses_made()}")
        write(f"Current word: {manager.pattern()}")

        letter = read("Your guess? ").strip().lower()
        if len(letter) != 1 or not letter.isalpha():
            write(f"Try again: {letter!r} is not a single letter")
            continue
        try:
            before = manager.pattern()
            manager.make_guess(letter)
        except HangmanError as e:
            write(f"Try again: {e}")
            continue

        if manager.pattern() == before:
            write(f"Sorry, there are no {letter}'s")
        else:
            count = manager.pattern().count(letter)
            write(f"Yes, there {'is one' if count == 1 else f'are {count}'} {letter}")

    answer = manager.commit_secret_word()
    if HIDDEN not in manager.pattern():
        write(f"You win! The word was {answer}.")
        return True
    write(f"Sorry, you lose. The word was {answer}.")
    return False


def main(argv=None):
    ap = argparse.ArgumentParser(description="evilhangman: play against the adversary")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--debug", action="store_true",
                    help="show how each guess splits the remaining words")
    args = ap.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")

    manager = HangmanManager(load_words(args.dictionary), debug=args.debug)
    lengths = manager.pool.lengths()
    print(f"Loaded {len(manager.pool)} words (lengths {lengths[0]}..{lengths[-1]}).")

    again = "y"
    wins = losses = 0
    while again.startswith("y"):
        N = _ask_int("What length word do you want? ", read=input, write=print,
                     valid=lambda n: manager.num_words(n) > 0)
        guesses = _ask_int("How many wrong guesses? ", read=input, write=print,
                           valid=lambda n: n >= 1)
        difficulty = _ask_difficulty(read=input, write=print)
        manager.prepare_round(N, guesses, difficulty)
        if play_round(manager):
            wins += 1
        else:
            losses += 1
        again = input("Play again (y/n)? ").strip().lower() or "n"

    print(f"Wins: {wins}, losses: {losses}. Thanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
