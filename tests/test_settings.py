import pytest

from roughcut.paths import Interval
from roughcut.settings import (
    BoundingBox,
    CoreRoughSettings,
    parse_bounding_box,
    read_double,
)


@pytest.mark.parametrize(
    "text, expected",
    [("2.5", 2.5), ("-3", -3.0), ("  7", 7.0), ("1e2", 100.0), ("0", 0.0)],
)
def test_read_double_accepts_numbers(text, expected):
    assert read_double(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "1.5x", "2 ", "1_000"])
def test_read_double_rejects_non_numbers(text):
    with pytest.raises(ValueError):
        read_double(text)


def test_core_rough_defaults_match_dialog_start_values():
    s = CoreRoughSettings()
    assert (s.cornerrad, s.flatrad, s.stepdown) == (3.0, 0.0, 15.0)
    assert s.stepin == s.cornerrad / 2


def test_core_rough_settings_hold_read_values():
    s = CoreRoughSettings(
        cornerrad=read_double("4"),
        flatrad=read_double("1"),
        stepdown=read_double("6"),
        stepin=read_double("2"),
    )
    assert s == CoreRoughSettings(4.0, 1.0, 6.0, 2.0)


def test_parse_bounding_box_round_trip():
    box = parse_bounding_box(["0", "10", "-1", "1", "2", "3"])
    assert box.xrg == Interval(0.0, 10.0)
    assert box.yrg == Interval(-1.0, 1.0)
    assert box.zrg == Interval(2.0, 3.0)


def test_parse_bounding_box_allows_flat_range():
    box = parse_bounding_box(["5", "5", "0", "1", "0", "1"])
    assert box.xrg.leng() == 0.0


@pytest.mark.parametrize(
    "values",
    [
        ["10", "0", "0", "1", "0", "1"],
        ["0", "1", "3", "2", "0", "1"],
        ["0", "1", "0", "1", "9", "8"],
    ],
)
def test_parse_bounding_box_rejects_reversed_range(values):
    with pytest.raises(ValueError):
        parse_bounding_box(values)


def test_parse_bounding_box_rejects_bad_text():
    with pytest.raises(ValueError):
        parse_bounding_box(["0", "1", "x", "1", "0", "1"])


@pytest.mark.parametrize("values", [[], ["0", "1", "0", "1", "0"], ["0"] * 7])
def test_parse_bounding_box_rejects_wrong_count(values):
    with pytest.raises(ValueError):
        parse_bounding_box(values)


def test_bounding_box_direct_reversed_raises():
    with pytest.raises(ValueError):
        BoundingBox(Interval(0, 1), Interval(0, 1), Interval(2, 1))