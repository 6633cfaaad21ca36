import io

import pytest

from toybox.employees import EmployeeDirectory, EmployeeInterface


def test_add_keeps_names_sorted():
    directory = EmployeeDirectory()
    for name in ["Sally", "Amir", "Zoe", "Bob"]:
        directory.add(name, "Sales")
    names = directory.employees("Sales")
    assert names == sorted(names)
    assert set(names) == {"Sally", "Amir", "Zoe", "Bob"}


def test_departments_sorted():
    directory = EmployeeDirectory()
    directory.add("Sally", "Engineering")
    directory.add("Amir", "Sales")
    directory.add("Kim", "Accounting")
    assert directory.departments() == ["Accounting", "Engineering", "Sales"]


def test_employees_returns_copy():
    directory = EmployeeDirectory()
    directory.add("Sally", "Engineering")
    directory.employees("Engineering").append("Intruder")
    assert directory.employees("Engineering") == ["Sally"]


def test_unknown_department_raises():
    directory = EmployeeDirectory()
    with pytest.raises(KeyError):
        directory.employees("Nowhere")
    with pytest.raises(KeyError):
        directory.format_department("Nowhere")


def test_format_department():
    directory = EmployeeDirectory()
    directory.add("Sally", "Engineering")
    directory.add("Amir", "Engineering")
    lines = directory.format_department("Engineering").splitlines()
    assert lines[0] == '| ------ Department: "Engineering" ------ |'
    assert lines[1] == "|"
    assert lines[2:] == ["| 1. Amir", "| 2. Sally"]


def _run(script):
    out = io.StringIO()
    interface = EmployeeInterface(lines=script, output=out)
    interface.run()
    return interface, out.getvalue()


def test_interface_add_and_retrieve_department():
    interface, out = _run(["1", "Sally", "Engineering", "2", "2", "Engineering"])
    assert interface.directory.employees("Engineering") == ["Sally"]
    assert "Inserting employer Sally into department Engineering..." in out
    assert "| 1. Sally" in out


def test_interface_retrieve_all():
    interface, out = _run(["1", "Sally", "Eng", "1", "Amir", "Sales", "2", "1"])
    assert out.index('Department: "Eng"') < out.index('Department: "Sales"')
    assert interface.directory.departments() == ["Eng", "Sales"]


def test_interface_invalid_inputs():
    _, out = _run(["abc", "300", "7", "2", "5", "2", "2", "Missing"])
    assert out.count("Invalid number") == 2
    assert "invalid option" in out
    assert "Invalid option" in out
    assert "404: Department not found" in out


def test_interface_stops_at_end_of_input():
    interface, out = _run([])
    assert interface.directory.departments() == []
    assert "| Welcome to the Department Employee Names |" in out