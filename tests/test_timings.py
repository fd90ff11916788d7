import json

import pytest

from advent2024.template.day import Day
from advent2024.template.timings import Timing, Timings, TimingsError


def mock_timings():
    return Timings(
        data=[
            Timing(day=Day(1), part_1="10ms", part_2="20ms", total_nanos=3e10),
            Timing(day=Day(2), part_1="30ms", part_2="40ms", total_nanos=7e10),
            Timing(day=Day(4), part_1="40ms", part_2=None, total_nanos=4e10),
        ]
    )


def test_handles_json_timings():
    text = '{ "data": [{ "day": "01", "part_1": "1ms", "part_2": null, "total_nanos": 1000000000 }] }'
    timings = Timings.from_json_string(text)
    assert len(timings.data) == 1
    timing = timings.data[0]
    assert timing.day == Day(1)
    assert timing.part_1 == "1ms"
    assert timing.part_2 is None
    assert timing.total_nanos == 1_000_000_000.0


def test_handles_empty_timings():
    assert len(Timings.from_json_string('{ "data": [] }').data) == 0


def test_fails_for_invalid_json():
    with pytest.raises(TimingsError, match="key `data`"):
        Timings.from_json_string("{}")


def test_fails_for_unparseable_text():
    with pytest.raises(TimingsError, match="not valid JSON"):
        Timings.from_json_string("not json")


def test_fails_for_malformed_timings():
    text = '{ "data": [{ "day": "01" }, { "day": "26" }, { "day": "02", "part_2": null, "total_nanos": 0 }] }'
    with pytest.raises(TimingsError):
        Timings.from_json_string(text)


def test_fails_for_invalid_day():
    text = '{ "data": [{ "day": "26", "part_1": null, "part_2": null, "total_nanos": 0 }] }'
    with pytest.raises(TimingsError, match="Day struct"):
        Timings.from_json_string(text)


def test_fails_for_data_not_array():
    with pytest.raises(TimingsError, match="array"):
        Timings.from_json_string('{ "data": 3 }')


def test_serializes_timings():
    value = mock_timings().to_json()
    assert len(value["data"]) == 3
    assert value["data"][0] == {
        "day": "01",
        "total_nanos": 3e10,
        "part_1": "10ms",
        "part_2": "20ms",
    }


def test_json_round_trip():
    original = mock_timings()
    restored = Timings.from_json_string(json.dumps(original.to_json()))
    assert restored == original


def test_handles_completed_days():
    timings = Timings(data=[Timing(Day(1), "1ms", "2ms", 3_000_000_000.0)])
    assert timings.is_day_complete(Day(1)) is True


def test_handles_partial_days():
    timings = Timings(data=[Timing(Day(1), "1ms", None, 1_000_000_000.0)])
    assert timings.is_day_complete(Day(1)) is False


def test_handles_uncompleted_days():
    timings = Timings(data=[Timing(Day(1), None, None, 0.0)])
    assert timings.is_day_complete(Day(1)) is False


def test_merge_disjunct_timings():
    other = Timings(data=[Timing(Day(3), None, None, 0.0)])
    merged = mock_timings().merge(other)
    assert [t.day for t in merged.data] == [Day(1), Day(2), Day(3), Day(4)]


def test_merge_overlapping_timings():
    other = Timings(data=[Timing(Day(2), None, None, 0.0)])
    merged = mock_timings().merge(other)
    assert len(merged.data) == 3
    assert merged.data[0].day == Day(1)
    assert merged.data[1].day == Day(2)
    assert merged.data[1].total_nanos == 0.0
    assert merged.data[2].day == Day(4)


def test_merge_empty_self():
    assert len(Timings().merge(mock_timings()).data) == 3


def test_merge_empty_other():
    assert len(mock_timings().merge(Timings()).data) == 3


def test_total_millis():
    assert mock_timings().total_millis() == pytest.approx(140_000.0)


def test_store_and_read_file(tmp_path):
    path = tmp_path / "timings.json"
    mock_timings().store_file(path)
    assert Timings.read_from_file(path) == mock_timings()


def test_read_missing_file_returns_empty(tmp_path, capsys):
    timings = Timings.read_from_file(tmp_path / "absent.json")
    assert timings.data == []
    assert capsys.readouterr().err != ""


def test_read_malformed_file_returns_empty(tmp_path, capsys):
    path = tmp_path / "timings.json"
    path.write_text("{}", encoding="utf-8")
    assert Timings.read_from_file(path).data == []
    assert "key `data`" in capsys.readouterr().err