"""Handlers behind the command-line sub-commands."""

from __future__ import annotations

import subprocess
import sys

from advent2024.template import aoc_cli, readme_benchmarks
from advent2024.template.day import Day, all_days
from advent2024.template.run_multi import run_multi
from advent2024.template.timings import Timings

_AOC_MISSING = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)


def _require_aoc() -> None:
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        print(_AOC_MISSING, file=sys.stderr)
        sys.exit(1)


def handle_all(is_release: bool) -> None:
    """Run every day's solution."""
    run_multi(set(all_days()), is_release, False)


def handle_download(day: Day) -> None:
    """Download the input and puzzle of ``day``; exit with status 1 on failure."""
    _require_aoc()
    try:
        aoc_cli.download(day)
    except aoc_cli.AocCommandError as err:
        print(f"failed to call aoc-cli: {err}", file=sys.stderr)
        sys.exit(1)


def handle_read(day: Day) -> None:
    """Show the puzzle description of ``day``; exit with status 1 on failure."""
    _require_aoc()
    try:
        aoc_cli.read(day)
    except aoc_cli.AocCommandError as err:
        print(f"failed to call aoc-cli: {err}", file=sys.stderr)
        sys.exit(1)


def handle_solve(day: Day, release: bool, dhat: bool, submit_part: int | None) -> int:
    """Run the solution of ``day`` in a child interpreter and return its exit status."""
    cmd = [sys.executable]
    if dhat:
        # Trace heap allocations in the child.
        cmd += ["-X", "tracemalloc"]
    elif release:
        cmd.append("-O")
    cmd += ["-m", f"advent2024.days.day{day}"]
    if submit_part is not None:
        cmd += ["--submit", str(submit_part)]
    return subprocess.run(cmd, check=False).returncode


def handle_time(day: Day | None, run_all: bool, store: bool) -> None:
    """Benchmark days and optionally store the timings and update the README."""
    stored_timings = Timings.read_from_file()

    if day is not None:
        days_to_run = {day}
    elif run_all:
        days_to_run = set(all_days())
    else:
        # Without --all, skip days that are already fully benched.
        days_to_run = {d for d in all_days() if not stored_timings.is_day_complete(d)}

    timings = run_multi(days_to_run, True, True)

    if store:
        merged = stored_timings.merge(timings)
        merged.store_file()
        print()
        try:
            readme_benchmarks.update(merged)
        except readme_benchmarks.ReadmeError:
            print("Failed to store updated benchmarks.", file=sys.stderr)
        else:
            print("Stored updated benchmarks.")