"""A text interface for filing employees under departments."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, TextIO

_UNSIGNED = re.compile(r"\+?[0-9]+")
_BREAK_LINE = "+-------------------------+"


class EmployeeDirectory:
    """Departments mapped to alphabetically sorted employee names."""

    def __init__(self) -> None:
        self._departments: dict[str, list[str]] = {}

    def add(self, employee: str, department: str) -> None:
        """File ``employee`` under ``department``, keeping names sorted."""
        names = self._departments.setdefault(department, [])
        names.append(employee)
        names.sort()

    def employees(self, department: str) -> list[str]:
        """Return the sorted names in ``department``; KeyError if unknown."""
        return list(self._departments[department])

    def departments(self) -> list[str]:
        """Return all department names in sorted order."""
        return sorted(self._departments)

    def format_department(self, department: str) -> str:
        """Render a department listing; KeyError if unknown."""
        names = self._departments[department]
        lines = [f'| ------ Department: "{department}" ------ |', "|"]
        lines.extend(f"| {number}. {name}" for number, name in enumerate(names, 1))
        return "\n".join(lines)


class EmployeeInterface:
    """Menu-driven prompt over an EmployeeDirectory."""

    def __init__(
        self,
        directory: EmployeeDirectory | None = None,
        lines: Iterable[str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.directory = directory if directory is not None else EmployeeDirectory()
        self._lines = iter(lines if lines is not None else sys.stdin)
        self._output = output if output is not None else sys.stdout

    def _say(self, text: str = "") -> None:
        print(text, file=self._output)

    def _read_str(self) -> str:
        try:
            return next(self._lines).strip()
        except StopIteration:
            raise EOFError("input ended") from None

    def _read_u8(self) -> int:
        while True:
            text = self._read_str()
            if _UNSIGNED.fullmatch(text) and int(text) <= 255:
                return int(text)
            self._say("Invalid number")

    def run(self) -> None:
        """Serve the menu until the input runs out."""
        self._say("+------------------------------------------+")
        self._say("| Welcome to the Department Employee Names |")
        self._say("+------------------------------------------+")
        self._say()
        try:
            while True:
                self._say(_BREAK_LINE)
                self._say("| Please choose an option |")
                self._say(_BREAK_LINE)
                self._say("| 1. Add                  |")
                self._say("| 2. Retrieve             |")
                self._say(_BREAK_LINE)
                choice = self._read_u8()
                if choice == 1:
                    self._add()
                elif choice == 2:
                    self._retrieve()
                else:
                    self._say("invalid option")
        except EOFError:
            return

    def _add(self) -> None:
        self._say("Please enter the employer name: ")
        employee = self._read_str()
        self._say("Please enter the department name: ")
        department = self._read_str()
        self._say(f"Inserting employer {employee} into department {department}...")
        self.directory.add(employee, department)
        self._say("success!\n")

    def _retrieve(self) -> None:
        self._say("Choose your option:\n1. All\n2. Department")
        choice = self._read_u8()
        if choice == 1:
            for department in self.directory.departments():
                self._show(department)
        elif choice == 2:
            self._say("Please choose a department: ")
            for department in self.directory.departments():
                self._say(department)
            self._show(self._read_str())
        else:
            self._say("Invalid option")

    def _show(self, department: str) -> None:
        try:
            block = self.directory.format_department(department)
        except KeyError:
            self._say("404: Department not found")
            return
        self._say()
        self._say(block)
        self._say()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive employee directory on standard input."""
    parser = argparse.ArgumentParser(description="File employees under departments.")
    parser.parse_args(argv)
    EmployeeInterface().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())