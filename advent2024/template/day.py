"""Day numbers of the advent calendar and helpers to read puzzle data."""

from __future__ import annotations

import functools
import re
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

_SERVER_TZ = timezone(timedelta(hours=-5))
_FIRST_DAY = 1
_LAST_DAY = 25
_DIGITS = re.compile(r"\+?[0-9]+")


class DayFromStrError(ValueError):
    """Raised when a value is not a day number between 1 and 25."""

    def __init__(self, message: str = "expecting a day number between 1 and 25") -> None:
        super().__init__(message)


@functools.total_ordering
class Day:
    """A valid day of advent, an integer from 1 to 25, shown as two digits."""

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"day must be an int, not {type(value).__name__}")
        if not _FIRST_DAY <= value <= _LAST_DAY:
            raise DayFromStrError()
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    @classmethod
    def from_str(cls, s: str) -> Day:
        """Parse a day number such as ``"8"`` or ``"08"``."""
        if not _DIGITS.fullmatch(s):
            raise DayFromStrError()
        number = int(s)
        if number > 255:
            raise DayFromStrError()
        return cls(number)

    @classmethod
    def today(cls) -> Day | None:
        """Return today's day if it is between December 1st and 25th, else None."""
        now = datetime.now(_SERVER_TZ)
        if now.month == 12 and now.day <= _LAST_DAY:
            return cls(now.day)
        return None

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return f"{self._value:02d}"

    def __repr__(self) -> str:
        return f"Day({self._value})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self._value < other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for number in range(_FIRST_DAY, _LAST_DAY + 1):
        yield Day(number)


def read_file(folder: str, day: Day) -> str:
    """Read ``data/<folder>/<day>.txt`` relative to the working directory."""
    path = Path.cwd() / "data" / folder / f"{day}.txt"
    return path.read_text(encoding="utf-8")


def read_file_part(folder: str, day: Day, part: int) -> str:
    """Read ``data/<folder>/<day>-<part>.txt`` relative to the working directory."""
    path = Path.cwd() / "data" / folder / f"{day}-{part}.txt"
    return path.read_text(encoding="utf-8")