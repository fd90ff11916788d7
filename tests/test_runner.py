import pytest

from advent2024.template.day import Day
from advent2024.template.runner import (
    ANSI_BOLD,
    ANSI_RESET,
    format_duration,
    print_result,
    run_part,
    run_timed,
    submit_result,
)


def test_format_duration_single_sample():
    assert format_duration(74, 1) == " (74.0ns)"


def test_format_duration_with_samples():
    assert format_duration(1_500_000, 20) == " (1.5ms @ 20 samples)"


@pytest.mark.parametrize("nanos,unit", [(5, "ns"), (5_000, "µs"), (5_000_000, "ms"), (5_000_000_000, "s")])
def test_format_duration_units(nanos, unit):
    text = format_duration(nanos, 1)
    assert text.endswith(f"{unit})")
    assert text.startswith(" (5.0")


def test_run_timed_once_calls_hook():
    seen = []
    result, duration, samples = run_timed(lambda s: s.upper(), "abc", seen.append, argv=[])
    assert result == "ABC"
    assert seen == ["ABC"]
    assert samples == 1
    assert duration >= 0


def test_run_timed_benches_with_time_flag(capsys):
    result, duration, samples = run_timed(len, "abcd", lambda r: None, argv=["prog", "--time"])
    assert result == 4
    assert 10 <= samples <= 10_000
    assert "benching" in capsys.readouterr().out


def test_print_result_none_final(capsys):
    print_result(None, "Part 1", " (1.0ms)")
    assert "Part 1: ✖" in capsys.readouterr().out


def test_print_result_single_line(capsys):
    print_result(42, "Part 2", " (1.0ms)")
    assert f"Part 2: {ANSI_BOLD}42{ANSI_RESET} (1.0ms)" in capsys.readouterr().out


def test_print_result_multi_line(capsys):
    print_result("a\nb", "Part 1", " (1.0ms)")
    out = capsys.readouterr().out
    assert "Part 1: ▼" in out
    assert out.endswith("a\nb\n")


def test_print_result_intermediate_has_no_newline(capsys):
    print_result(None, "Part 1", "")
    assert capsys.readouterr().out == "Part 1: ✖"


def test_submit_result_without_flag_returns_none():
    assert submit_result(1, Day(1), 1, argv=["prog", "--time"]) is None


def test_submit_result_other_part_returns_none():
    assert submit_result(1, Day(1), 1, argv=["prog", "--submit", "2"]) is None


def test_submit_result_too_few_args_exits():
    with pytest.raises(SystemExit) as info:
        submit_result(1, Day(1), 1, argv=["prog", "--submit"])
    assert info.value.code == 1


def test_submit_result_bad_part_exits():
    with pytest.raises(SystemExit) as info:
        submit_result(1, Day(1), 1, argv=["prog", "--submit", "x"])
    assert info.value.code == 1


def test_run_part_prints_result(capsys):
    run_part(lambda s: len(s), "hello", Day(1), 2, argv=["prog"])
    out = capsys.readouterr().out
    assert f"Part 2: {ANSI_BOLD}5{ANSI_RESET}" in out


def test_run_part_none_result(capsys):
    run_part(lambda s: None, "", Day(1), 1, argv=["prog", "--submit", "1"])
    out = capsys.readouterr().out
    assert "Part 1: ✖" in out
    assert "Submitting" not in out