"""Thin wrapper around the ``aoc`` command-line client."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

from advent2024.template.day import Day

_AOC = "aoc"
_MAX_YEAR = 65535


class AocCommandError(RuntimeError):
    """Raised when the ``aoc`` client is missing, cannot be called or fails."""

    def __init__(self, message: str, process: subprocess.CompletedProcess | None = None) -> None:
        super().__init__(message)
        self.process = process


def _input_path(day: Day) -> str:
    return f"data/inputs/{day}.txt"


def _puzzle_path(day: Day) -> str:
    return f"data/puzzles/{day}.md"


def _year() -> int | None:
    raw = os.environ.get("AOC_YEAR")
    if raw is None or not raw.isdigit():
        return None
    year = int(raw)
    return year if year <= _MAX_YEAR else None


def build_args(command: str, args: Sequence[str], day: Day) -> list[str]:
    """Build the argument list for an ``aoc`` sub-command on ``day``."""
    cmd_args = list(args)
    year = _year()
    if year is not None:
        cmd_args += ["--year", str(year)]
    cmd_args += ["--day", str(day), command]
    return cmd_args


def _call_aoc_cli(args: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        process = subprocess.run([_AOC, *args], check=False)
    except OSError:
        raise AocCommandError("aoc-cli could not be called.") from None
    if process.returncode != 0:
        raise AocCommandError("aoc-cli exited with a non-zero status.", process)
    return process


def check() -> None:
    """Raise AocCommandError if the ``aoc`` client is not available."""
    try:
        subprocess.run([_AOC, "-V"], capture_output=True, check=False)
    except OSError:
        raise AocCommandError("aoc-cli is not present in environment.") from None


def read(day: Day) -> subprocess.CompletedProcess:
    """Show the puzzle description of ``day``."""
    args = build_args(
        "read",
        ["--description-only", "--puzzle-file", _puzzle_path(day)],
        day,
    )
    return _call_aoc_cli(args)


def download(day: Day) -> subprocess.CompletedProcess:
    """Download the input and puzzle description of ``day``."""
    input_path = _input_path(day)
    puzzle_path = _puzzle_path(day)
    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_path, "--puzzle-file", puzzle_path],
        day,
    )
    process = _call_aoc_cli(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return process


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit ``result`` as the answer of ``part`` for ``day``."""
    # The client expects part and answer after the sub-command.
    args = build_args("submit", [], day)
    args += [str(part), str(result)]
    return _call_aoc_cli(args)