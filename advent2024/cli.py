"""Command-line entry point: solve, time, download and read puzzles."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from advent2024.template import commands
from advent2024.template.day import Day, DayFromStrError


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot be parsed."""


class CommandError(ArgumentError):
    """Raised when the sub-command is missing or unknown."""


@dataclass(frozen=True)
class AppArguments:
    """The parsed sub-command and its options."""

    command: str
    day: Day | None = None
    release: bool = False
    dhat: bool = False
    submit: int | None = None
    run_all: bool = False
    store: bool = False
    download: bool = False


def _subcommand(args: list[str]) -> str | None:
    if not args or args[0].startswith("-"):
        return None
    return args.pop(0)


def _take_flag(args: list[str], flag: str) -> bool:
    if flag in args:
        args.remove(flag)
        return True
    return False


def _parse_day(value: str) -> Day:
    try:
        return Day.from_str(value)
    except DayFromStrError as err:
        raise ArgumentError(f"failed to parse '{value}': {err}") from None


def _take_day(args: list[str]) -> Day:
    if not args:
        raise ArgumentError("the free-standing argument is missing")
    return _parse_day(args.pop(0))


def _take_optional_day(args: list[str]) -> Day | None:
    return _parse_day(args.pop(0)) if args else None


def _take_u8_option(args: list[str], key: str) -> int | None:
    for index, arg in enumerate(args):
        if arg == key:
            if index + 1 >= len(args):
                raise ArgumentError(f"the '{key}' option doesn't have an associated value")
            value = args[index + 1]
            del args[index : index + 2]
            break
        if arg.startswith(key + "="):
            value = arg[len(key) + 1 :]
            del args[index]
            break
    else:
        return None
    if not value.isdigit() or int(value) > 255:
        raise ArgumentError(f"failed to parse '{value}': invalid digit found in string")
    return int(value)


def parse_args(argv: Sequence[str]) -> AppArguments:
    """Parse the arguments that follow the program name."""
    args = list(argv)
    command = _subcommand(args)
    if command is None:
        raise CommandError("No command specified.")

    if command == "all":
        parsed = AppArguments(command, release=_take_flag(args, "--release"))
    elif command == "time":
        run_all = _take_flag(args, "--all")
        store = _take_flag(args, "--store")
        parsed = AppArguments(
            command, day=_take_optional_day(args), run_all=run_all, store=store
        )
    elif command in ("download", "read"):
        parsed = AppArguments(command, day=_take_day(args))
    elif command == "solve":
        day = _take_day(args)
        release = _take_flag(args, "--release")
        submit = _take_u8_option(args, "--submit")
        dhat = _take_flag(args, "--dhat")
        parsed = AppArguments(command, day=day, release=release, submit=submit, dhat=dhat)
    else:
        raise CommandError(f"Unknown command: {command}")

    if args:
        listed = ", ".join(f'"{arg}"' for arg in args)
        print(f"Warning: unknown argument(s): [{listed}].", file=sys.stderr)

    return parsed


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    raw = sys.argv[1:] if argv is None else list(argv)
    try:
        args = parse_args(raw)
    except CommandError as err:
        print(err, file=sys.stderr)
        return 1
    except ArgumentError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    if args.command == "all":
        commands.handle_all(args.release)
    elif args.command == "time":
        commands.handle_time(args.day, args.run_all, args.store)
    elif args.command == "download":
        commands.handle_download(args.day)
    elif args.command == "read":
        commands.handle_read(args.day)
    elif args.command == "solve":
        return commands.handle_solve(args.day, args.release, args.dhat, args.submit)
    return 0


if __name__ == "__main__":
    sys.exit(main())