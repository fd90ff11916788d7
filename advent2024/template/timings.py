"""Benchmark timings per day, stored as JSON."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from advent2024.template.day import Day, DayFromStrError

TIMINGS_FILE_PATH = "./data/timings.json"


class TimingsError(ValueError):
    """Raised when stored timings cannot be decoded."""


def _optional_part(json_obj: dict[str, Any], key: str) -> str | None:
    if key not in json_obj:
        raise TimingsError(f"Expected timing.{key} to be null or string.")
    value = json_obj[key]
    return value if isinstance(value, str) else None


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: str | None = None
    part_2: str | None = None
    total_nanos: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return {
            "day": str(self.day),
            "total_nanos": self.total_nanos,
            "part_1": self.part_1,
            "part_2": self.part_2,
        }

    @classmethod
    def from_json(cls, value: Any) -> Timing:
        if not isinstance(value, dict):
            raise TimingsError("Expected timing to be a JSON object.")

        day_text = value.get("day")
        try:
            if not isinstance(day_text, str):
                raise DayFromStrError()
            day = Day.from_str(day_text)
        except DayFromStrError:
            raise TimingsError("Expected timing.day to be a Day struct.") from None

        part_1 = _optional_part(value, "part_1")
        part_2 = _optional_part(value, "part_2")

        total_nanos = value.get("total_nanos")
        if isinstance(total_nanos, bool) or not isinstance(total_nanos, (int, float)):
            raise TimingsError("Expected timing.total_nanos to be a number.")

        return cls(day=day, part_1=part_1, part_2=part_2, total_nanos=float(total_nanos))


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list[Timing] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"data": [timing.to_json() for timing in self.data]}

    @classmethod
    def from_json_string(cls, value: str) -> Timings:
        try:
            document = json.loads(value)
        except json.JSONDecodeError:
            raise TimingsError("not valid JSON file.") from None
        if not isinstance(document, dict):
            raise TimingsError("expected JSON document to be an object.")
        if "data" not in document:
            raise TimingsError("expected JSON document to have key `data`.")
        entries = document["data"]
        if not isinstance(entries, list):
            raise TimingsError("expected `json.data` to be an array.")
        return cls(data=[Timing.from_json(entry) for entry in entries])

    def store_file(self, path: str | Path = TIMINGS_FILE_PATH) -> None:
        """Write the timings as JSON to ``path``."""
        Path(path).write_text(json.dumps(self.to_json()), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: str | Path = TIMINGS_FILE_PATH) -> Timings:
        """Read timings from ``path``; on any failure report it and return none."""
        try:
            text = Path(path).read_text(encoding="utf-8")
            return cls.from_json_string(text)
        except (OSError, TimingsError) as err:
            print(err, file=sys.stderr)
            return cls()

    def merge(self, new: Timings) -> Timings:
        """Combine with ``new``, whose entries win for days present in both."""
        data = list(new.data)
        known_days = {timing.day for timing in data}
        data.extend(timing for timing in self.data if timing.day not in known_days)
        data.sort(key=lambda timing: timing.day)
        return Timings(data=data)

    def total_millis(self) -> float:
        return sum(timing.total_nanos for timing in self.data) / 1_000_000

    def is_day_complete(self, day: Day) -> bool:
        return any(
            timing.day == day and timing.part_1 is not None and timing.part_2 is not None
            for timing in self.data
        )