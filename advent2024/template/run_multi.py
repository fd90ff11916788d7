"""Run several day solutions as child processes and collect their timings."""

from __future__ import annotations

import subprocess
import sys
import threading
from collections.abc import Collection, Sequence
from pathlib import Path

from advent2024.template.day import Day, all_days
from advent2024.template.runner import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET
from advent2024.template.timings import Timing, Timings


def get_path_for_bin(day: Day) -> str:
    """Relative path of the solution module for ``day``."""
    return f"./advent2024/days/day{day}.py"


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run the solution of ``day``, echoing its output; return its stdout lines.

    Days without a solution module yield an empty list.
    """
    if not Path(get_path_for_bin(day)).exists():
        return []

    cmd = [sys.executable]
    if is_release:
        cmd.append("-O")
    cmd += ["-m", f"advent2024.days.day{day}"]
    if is_timed:
        cmd.append("--time")

    with subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
    ) as child:

        def forward_stderr() -> None:
            for line in child.stderr:
                print(line.rstrip("\n"), file=sys.stderr)

        thread = threading.Thread(target=forward_stderr, daemon=True)
        thread.start()

        output = []
        for line in child.stdout:
            line = line.rstrip("\n")
            print(line)
            output.append(line)

        thread.join()
        child.wait()
    return output


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_time(line: str) -> tuple[str, float] | None:
    """Extract the timing text and its value in nanoseconds from a result line."""
    timing = line.split(" samples)")[0].split("(")[-1].split("@")[0].strip()
    if "ns" in timing:
        nanos = _parse_float(timing.split("ns")[0])
    elif "µs" in timing:
        value = _parse_float(timing.split("µs")[0])
        nanos = None if value is None else value * 1_000
    elif "ms" in timing:
        value = _parse_float(timing.split("ms")[0])
        nanos = None if value is None else value * 1_000_000
    else:
        value = _parse_float(timing.split("s")[0])
        nanos = None if value is None else value * 1_000_000_000
    if nanos is None:
        return None
    return timing, nanos


def parse_exec_time(output: Sequence[str], day: Day) -> Timing:
    """Collect per-part timings from a solution's output lines."""
    timing = Timing(day=day)
    for line in output:
        if " samples)" not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        timing_str, nanos = parsed
        part = line.split(":")[0]
        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        timing.total_nanos += nanos
    return timing


def run_multi(days_to_run: Collection[Day], is_release: bool, is_timed: bool) -> Timings | None:
    """Run the given days in order; return their timings when timed."""
    timings: list[Timing] = []
    need_space = False

    for day in all_days():
        if day not in days_to_run:
            continue
        if need_space:
            print()
        need_space = True

        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            timings.append(parse_exec_time(output, day))

    if not is_timed:
        return None
    result = Timings(data=timings)
    total_millis = result.total_millis()
    print(f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} {ANSI_ITALIC}{total_millis:.2f}ms{ANSI_RESET}")
    return result