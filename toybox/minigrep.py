"""Print the lines of a file that contain a query string."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping


@dataclass
class Config:
    """What to search for, where, and whether case matters."""

    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def build(
        cls, args: Iterable[str], environ: Mapping[str, str] | None = None
    ) -> Config:
        """Build from command-line words, the first being the program name.

        Case is ignored when IGNORE_CASE is set in ``environ`` (default
        ``os.environ``). Raises ValueError when an argument is missing.
        """
        words = iter(args)
        next(words, None)
        query = next(words, None)
        if query is None:
            raise ValueError("Didn't get a query string")
        file_path = next(words, None)
        if file_path is None:
            raise ValueError("Didn't get a file path")
        env = os.environ if environ is None else environ
        return cls(query=query, file_path=file_path, ignore_case="IGNORE_CASE" in env)


def _lines(contents: str) -> Iterator[str]:
    parts = contents.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def search(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` that contain ``query``."""
    return [line for line in _lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Return the lines that contain ``query``, ignoring case."""
    query = query.lower()
    return [line for line in _lines(contents) if query in line.lower()]


def run(config: Config) -> None:
    """Search the configured file and print each matching line."""
    with open(config.file_path, encoding="utf-8") as handle:
        contents = handle.read()
    finder = search_case_insensitive if config.ignore_case else search
    for line in finder(config.query, contents):
        print(line)


def main(argv: list[str] | None = None) -> int:
    """Run a search from command-line arguments: QUERY FILE."""
    words = sys.argv if argv is None else ["minigrep", *argv]
    try:
        config = Config.build(words)
    except ValueError as error:
        print(f"Problem parsing arguments: {error}", file=sys.stderr)
        return 1
    try:
        run(config)
    except (OSError, UnicodeDecodeError) as error:
        print(f"Application error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())