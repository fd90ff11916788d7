from advent2024.days.day01 import main, parse_file, part_one, part_two

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_part_one():
    assert part_one(EXAMPLE) == 11


def test_part_two():
    assert part_two(EXAMPLE) == 31


def test_parse_stops_at_blank_line():
    assert parse_file("1 2\n\n3 4\n") == ([1], [2])


def test_parse_columns():
    left, right = parse_file(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_main_prints_results(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    inputs = tmp_path / "data" / "inputs"
    inputs.mkdir(parents=True)
    (inputs / "01.txt").write_text(EXAMPLE)
    main(["prog"])
    out = capsys.readouterr().out
    assert "Part 1: \x1b[1m11\x1b[0m" in out
    assert "Part 2: \x1b[1m31\x1b[0m" in out