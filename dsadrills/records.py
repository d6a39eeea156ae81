"""Student records read as whitespace-separated name and roll number pairs."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NAME_LIMIT = 14
DEFAULT_COUNT = 5


@dataclass(frozen=True)
class Student:
    """A student's single-word name and roll number."""

    name: str
    roll_no: int

    def __post_init__(self) -> None:
        if not self.name or any(ch.isspace() for ch in self.name):
            raise ValueError("name must be a single non-empty word")
        if len(self.name) > NAME_LIMIT:
            raise ValueError(f"name longer than {NAME_LIMIT} characters")

    def describe(self) -> str:
        """Return the record as two lines: name, then roll number."""
        return f"name{self.name}\nroll_no{self.roll_no}"


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def read_students(lines: Iterable[str], count: int = DEFAULT_COUNT) -> list[Student]:
    """Read ``count`` students from ``lines`` as alternating name and roll number words."""
    tokens = _tokens(lines)
    students = []
    for index in range(1, count + 1):
        name = next(tokens, None)
        roll = next(tokens, None)
        if name is None or roll is None:
            raise ValueError(f"input ends before record {index}")
        try:
            roll_no = int(roll)
        except ValueError:
            raise ValueError(f"record {index}: roll number {roll!r} is not an integer") from None
        students.append(Student(name, roll_no))
    return students