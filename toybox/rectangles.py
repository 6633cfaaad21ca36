"""Rectangles with area and containment checks."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass


@dataclass
class Rectangle:
    """An axis-aligned rectangle."""

    width: int
    height: int

    def area(self) -> int:
        """Return width times height."""
        return self.width * self.height

    def can_hold(self, other: Rectangle) -> bool:
        """True if ``other`` fits strictly inside this rectangle."""
        return self.height > other.height and self.width > other.width

    @classmethod
    def square(cls, size: int) -> Rectangle:
        """Return a square with sides of ``size``."""
        return cls(width=size, height=size)

    def max(self, other: Rectangle) -> Rectangle:
        """Return the smallest rectangle covering both sizes."""
        return Rectangle(
            width=max(self.width, other.width),
            height=max(self.height, other.height),
        )


def main(argv: list[str] | None = None) -> int:
    """Print a few rectangle computations."""
    parser = argparse.ArgumentParser(description="Rectangle demo.")
    parser.parse_args(argv)

    rect1 = Rectangle(width=30, height=50)
    rect2 = Rectangle(width=10, height=60)

    rect = Rectangle.square(0)
    other_rect = Rectangle.square(1)

    rect.width = 20
    print(f"Square area: {rect.area()}")
    max_rect = rect.max(other_rect)
    print(f"max_rect = {max_rect!r}", file=sys.stderr)

    print(f"The area of the rectangle is {rect1.area()} square pixels.")
    print(f"Can rect1 hold rect2? {str(rect1.can_hold(rect2)).lower()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())