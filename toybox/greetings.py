"""Greeting programs and a self-introducing base class."""

from __future__ import annotations

import argparse
import sys


class HelloMacro:
    """Base class whose subclasses can introduce themselves by name."""

    @classmethod
    def hello_macro(cls) -> None:
        """Print a greeting naming the class."""
        print(f"Hello, Macro! My name is {cls.__name__}!")


class Pancakes(HelloMacro):
    """A type that introduces itself."""


def hello_world() -> str:
    """Return the classic greeting."""
    return "Hello, world!"


def main(argv: list[str] | None = None) -> int:
    """Print the greeting and let Pancakes introduce itself."""
    parser = argparse.ArgumentParser(description="Say hello.")
    parser.parse_args(argv)
    print(hello_world())
    Pancakes.hello_macro()
    return 0


if __name__ == "__main__":
    sys.exit(main())