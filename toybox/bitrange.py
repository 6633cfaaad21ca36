"""Minimum and maximum values of fixed-width integers."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, TextIO

BIT_LENGTHS = (8, 16, 32)

_UNSIGNED = re.compile(r"\+?[0-9]+")


def unsigned_range(bit_length: int) -> tuple[int, int]:
    """Return the (min, max) of an unsigned integer of ``bit_length`` bits."""
    return 0, 2**bit_length - 1


def signed_range(bit_length: int) -> tuple[int, int]:
    """Return the (min, max) of a two's-complement integer of ``bit_length`` bits."""
    exponent = bit_length - 1
    return -(2**exponent), 2**exponent - 1


def read_choice(lines: Iterable[str], output: TextIO, upper: int) -> int:
    """Read lines until one holds a whole number in ``range(upper)``.

    Raises EOFError when the input runs out first.
    """
    for line in lines:
        text = line.strip()
        if _UNSIGNED.fullmatch(text):
            number = int(text)
            if 0 <= number < upper:
                return number
        print(f"Please enter a valid number between 0 and {upper - 1}", file=output)
    raise EOFError("input ended before a valid number was entered")


def main(argv: list[str] | None = None) -> int:
    """Ask for a bit length and signedness, then print the value range."""
    parser = argparse.ArgumentParser(description="Show the range of an integer type.")
    parser.parse_args(argv)

    lines = iter(sys.stdin)
    output = sys.stdout

    print("Choose a bit length by index:", file=output)
    for index, option in enumerate(BIT_LENGTHS):
        print(f"{index}. {option}-bit", file=output)
    try:
        bits = BIT_LENGTHS[read_choice(lines, output, len(BIT_LENGTHS))]
        print("Calculate for:\n0. unsigned\n1. signed", file=output)
        is_signed = read_choice(lines, output, 2) != 0
    except EOFError:
        return 1

    kind = "signed" if is_signed else "unsigned"
    print(f"Calculating range of {kind} {bits}-bit integer...", file=output)
    low, high = signed_range(bits) if is_signed else unsigned_range(bits)
    print(f"It has a minimum value of {low} and a maximum value of {high}", file=output)
    return 0


if __name__ == "__main__":
    sys.exit(main())