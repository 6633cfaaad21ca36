"""Convert words and sentences to pig latin."""

from __future__ import annotations

import argparse
import sys

VOWELS = frozenset("aeiou")
DEFAULT_MESSAGE = "Hello world into Pig Latin"


def word_to_pig_latin(word: str) -> str:
    """Convert one word.

    A leading vowel is lower-cased and ``-hay`` appended; otherwise the first
    letter moves to the end, lower-cased, followed by ``ay``. A word whose
    first character is not ASCII raises ValueError.
    """
    if not word:
        return ""
    first, rest = word[0], word[1:]
    if not first.isascii():
        raise ValueError(f"word must start with an ASCII character: {word!r}")
    first = first.lower()
    if first in VOWELS:
        return f"{first}{rest}-hay"
    return f"{rest}-{first}ay"


def sentence_to_pig_latin(text: str) -> str:
    """Convert each whitespace-separated word and join them with spaces."""
    return " ".join(word_to_pig_latin(word) for word in text.split())


def main(argv: list[str] | None = None) -> int:
    """Print a message and its pig latin form."""
    parser = argparse.ArgumentParser(description="Convert text to pig latin.")
    parser.add_argument("words", nargs="*", help="text to convert")
    args = parser.parse_args(argv)
    message = " ".join(args.words) if args.words else DEFAULT_MESSAGE
    try:
        converted = sentence_to_pig_latin(message)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(message)
    print(converted)
    return 0


if __name__ == "__main__":
    sys.exit(main())