"""Keep the benchmark table in the README up to date."""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

from advent2024.template.day import Day
from advent2024.template.timings import Timings

MARKER = "<!--- benchmarking table --->"


class ReadmeError(Exception):
    """Raised when the README cannot be read, parsed or written."""


class TablePosition(NamedTuple):
    start: int
    end: int


def get_path_for_bin(day: Day) -> str:
    """Relative path of the solution module for ``day``."""
    return f"./advent2024/days/day{day}.py"


def _marker_positions(text: str) -> list[int]:
    positions = []
    start = text.find(MARKER)
    while start != -1:
        positions.append(start)
        start = text.find(MARKER, start + len(MARKER))
    return positions


def locate_table(readme: str) -> TablePosition:
    """Find the span between the first and last table marker."""
    positions = _marker_positions(readme)
    if len(positions) > 2:
        raise ReadmeError("too many occurrences of marker in README.")
    if not positions:
        raise ReadmeError("Could not find table start position.")
    return TablePosition(positions[0], positions[-1] + len(MARKER))


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    """Render the markdown benchmark table, markers included."""
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    for timing in timings.data:
        path = get_path_for_bin(timing.day)
        part_1 = timing.part_1 if timing.part_1 is not None else "-"
        part_2 = timing.part_2 if timing.part_2 is not None else "-"
        lines.append(f"| [Day {timing.day.value}]({path}) | `{part_1}` | `{part_2}` |")
    lines.append("")
    lines.append(f"**Total: {total_millis:.2f}ms**")
    lines.append(MARKER)
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return ``text`` with the benchmark table replaced."""
    position = locate_table(text)
    table = construct_table("##", timings, total_millis)
    return text[: position.start] + table + text[position.end :]


def update(timings: Timings, path: str | Path = "README.md") -> None:
    """Rewrite the benchmark table of the README at ``path``."""
    readme_path = Path(path)
    try:
        readme = readme_path.read_bytes().decode("utf-8", errors="replace")
    except OSError as err:
        raise ReadmeError(str(err)) from err
    updated = update_content(readme, timings, timings.total_millis())
    try:
        readme_path.write_text(updated, encoding="utf-8")
    except OSError as err:
        raise ReadmeError(str(err)) from err