"""Student and employee records and their tabular listings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A student; either total marks or a CGPA may be recorded, or both."""

    name: str
    roll_number: int
    total_marks: int | None = None
    cgpa: float | None = None


@dataclass(frozen=True)
class Employee:
    """An employee record."""

    emp_no: int
    name: str
    salary: int


def format_students(students: Iterable[Student]) -> str:
    """List students in a table.

    When every student has a CGPA the table shows name, roll number and CGPA;
    otherwise it shows roll number, name and total marks, which every student
    must then have.
    """
    rows = list(students)
    if rows and all(s.cgpa is not None for s in rows):
        lines = ["Name\t\tRollNumber\tCGPA"]
        lines.extend(f"{s.name}\t\t{s.roll_number}\t\t{s.cgpa:.2f}" for s in rows)
        return "\n".join(lines) + "\n"
    missing = [s.name for s in rows if s.total_marks is None]
    if missing:
        raise ValueError(f"students without total marks: {', '.join(missing)}")
    lines = ["Sorted Students List:", "Roll No.\tName\t\tTotal Marks"]
    lines.extend(f"{s.roll_number}\t\t{s.name}\t\t{s.total_marks}" for s in rows)
    return "\n".join(lines) + "\n"


def format_employees(employees: Iterable[Employee]) -> str:
    """List employees with number, name and salary."""
    lines = ["Sorted Employees List:", "Emp No.\t\tName\t\tSalary"]
    lines.extend(f"{e.emp_no}\t\t{e.name}\t\t{e.salary}" for e in employees)
    return "\n".join(lines) + "\n"