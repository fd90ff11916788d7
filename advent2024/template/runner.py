"""Run a solution part, time it, print it and optionally submit it."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence
from typing import Any

from advent2024.template import aoc_cli
from advent2024.template.day import Day

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_SUBMIT_USAGE = "Unexpected command-line input. Format: cargo solve 1 --submit 1"
_NANOS_PER_SECOND = 1_000_000_000


def _format_nanos(nanos: int) -> str:
    for divisor, unit in ((1_000_000_000, "s"), (1_000_000, "ms"), (1_000, "µs")):
        if nanos >= divisor:
            break
    else:
        divisor, unit = 1, "ns"
    tenths = (nanos * 10 + divisor // 2) // divisor
    return f"{tenths // 10}.{tenths % 10}{unit}"


def format_duration(duration: int, samples: int) -> str:
    """Format a duration in nanoseconds with the sample count, if above one."""
    text = _format_nanos(duration)
    if samples == 1:
        return f" ({text})"
    return f" ({text} @ {samples} samples)"


def _bench(func: Callable[[Any], Any], input_text: Any, base_time: int) -> tuple[int, int]:
    print(f" > {ANSI_ITALIC}benching{ANSI_RESET}", end="", flush=True)
    iterations = _NANOS_PER_SECOND // max(base_time, 10)
    iterations = min(max(iterations, 10), 10_000)
    timers = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(input_text)
        timers.append(time.perf_counter_ns() - start)
    return sum(timers) // len(timers), iterations


def run_timed(
    func: Callable[[Any], Any],
    input_text: Any,
    hook: Callable[[Any], None],
    argv: Sequence[str] | None = None,
) -> tuple[Any, int, int]:
    """Run ``func`` once; with ``--time`` in ``argv`` also benchmark it.

    Returns the result, the duration in nanoseconds and the sample count.
    """
    args = sys.argv if argv is None else argv
    start = time.perf_counter_ns()
    result = func(input_text)
    base_time = time.perf_counter_ns() - start

    hook(result)

    if "--time" in args:
        duration, samples = _bench(func, input_text, base_time)
    else:
        duration, samples = base_time, 1
    return result, duration, samples


def print_result(result: Any, part: str, duration_str: str) -> None:
    """Print a part's result; an empty ``duration_str`` marks an interim line."""
    intermediate = not duration_str
    if result is None:
        if intermediate:
            print(f"{part}: ✖", end="", flush=True)
        else:
            print("\r", end="")
            print(f"{part}: ✖             ")
        return

    text = str(result)
    if "\n" in text:
        line = f"{part}: ▼ {duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)
            print(text)
    else:
        line = f"{part}: {ANSI_BOLD}{text}{ANSI_RESET}{duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)


def _usage_exit() -> None:
    print(_SUBMIT_USAGE, file=sys.stderr)
    sys.exit(1)


def submit_result(result: Any, day: Day, part: int, argv: Sequence[str] | None = None):
    """Submit ``result`` when ``argv`` asks for ``--submit <part>``.

    Returns the finished ``aoc`` process, or None when nothing was submitted.
    """
    args = list(sys.argv if argv is None else argv)
    if "--submit" not in args:
        return None
    if len(args) < 3:
        _usage_exit()

    part_index = args.index("--submit") + 1
    raw = args[part_index] if part_index < len(args) else ""
    if not raw.isdigit() or int(raw) > 255:
        _usage_exit()
    if int(raw) != part:
        return None

    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        print(
            'command "aoc" not found or not callable. '
            'Try running "cargo install aoc-cli" to install it.',
            file=sys.stderr,
        )
        sys.exit(1)

    print("Submitting result via aoc-cli...")
    return aoc_cli.submit(day, part, str(result))


def run_part(
    func: Callable[[Any], Any],
    input_text: Any,
    day: Day,
    part: int,
    argv: Sequence[str] | None = None,
) -> None:
    """Run, time and print one part of a solution, submitting it if asked."""
    part_str = f"Part {part}"
    result, duration, samples = run_timed(
        func, input_text, lambda value: print_result(value, part_str, ""), argv
    )
    print_result(result, part_str, format_duration(duration, samples))
    if result is not None:
        try:
            submit_result(result, day, part, argv)
        except aoc_cli.AocCommandError as err:
            print(f"failed to submit: {err}", file=sys.stderr)