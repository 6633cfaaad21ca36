"""Median and mode of a list of integers."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from typing import Iterable

SAMPLE = [3, 7, 2, 9, 5, 3, 8, 1, 6, 4, 7, 2, 5, 9, 3, 4, 6, 8, 2, 7]


def median(values: Iterable[int]) -> float:
    """Return the median of ``values``.

    Even lengths average the two centre items. For odd lengths above one the
    item at index ``len // 2 - 1`` of the sorted values is returned.
    Raises ValueError for an empty input.
    """
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median of an empty sequence")
    if len(ordered) < 2:
        return float(ordered[0])
    index = len(ordered) // 2 - 1
    if len(ordered) % 2 == 1:
        return float(ordered[index])
    return (ordered[index] + ordered[index + 1]) / 2


def mode(values: Iterable[int]) -> list[int]:
    """Return every value that occurs most often, in ascending order."""
    counts = Counter(values)
    if not counts:
        return []
    highest = max(counts.values())
    return sorted(value for value, count in counts.items() if count == highest)


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


def main(argv: list[str] | None = None) -> int:
    """Print the sorted sample with its median and mode."""
    parser = argparse.ArgumentParser(description="Median and mode of integers.")
    parser.add_argument("values", nargs="*", type=int, help="integers (default: sample)")
    args = parser.parse_args(argv)
    values = sorted(args.values or SAMPLE)
    print(f"arr: {values}")
    print(f"median: {_format_number(median(values))}")
    print(f"mode: {mode(values)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())