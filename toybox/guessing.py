"""Guess-the-number game."""

from __future__ import annotations

import argparse
import enum
import random
import re
import sys
from typing import Iterable, TextIO

LOWEST = 0
HIGHEST = 100
_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class Verdict(enum.Enum):
    """How a guess compares with the secret number."""

    TOO_SMALL = "Too small!"
    TOO_BIG = "Too big!"
    WIN = "You win!"


def compare_guess(guess: int, secret: int) -> Verdict:
    """Judge ``guess`` against ``secret``."""
    if guess < secret:
        return Verdict.TOO_SMALL
    if guess > secret:
        return Verdict.TOO_BIG
    return Verdict.WIN


def _parse_guess(line: str) -> int | None:
    text = line.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def play(secret: int, lines: Iterable[str], output: TextIO) -> int:
    """Play until ``secret`` is guessed and return the number of valid guesses.

    Lines that are not whole non-negative numbers are skipped. Raises
    EOFError if the input ends before the right guess.
    """
    attempts = 0
    source = iter(lines)
    while True:
        print("Please input your guess.", file=output)
        try:
            line = next(source)
        except StopIteration:
            raise EOFError("input ended before the number was guessed") from None
        guess = _parse_guess(line)
        if guess is None:
            continue
        attempts += 1
        print(f"You guessed: {guess}", file=output)
        verdict = compare_guess(guess, secret)
        print(verdict.value, file=output)
        if verdict is Verdict.WIN:
            return attempts


def main(argv: list[str] | None = None) -> int:
    """Play one game on standard input with a random secret."""
    parser = argparse.ArgumentParser(description="Guess the number.")
    parser.parse_args(argv)
    print(f"Guess the number! between {LOWEST} and {HIGHEST}")
    secret = random.randint(LOWEST, HIGHEST)
    try:
        play(secret, sys.stdin, sys.stdout)
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())