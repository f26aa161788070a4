import pytest

from src.attendance_deductions.attendance_deductions.common.time_utils import (
    parse_time_minutes,
    time_to_minutes,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("08:30 AM", 510),
        ("8:30", 510),
        ("08:30", 510),
        ("12:00 AM", 0),
        ("12:15 PM", 735),
        ("01:00 pm", 780),
        ("11:59 PM", 1439),
        ("23:59", 1439),
        ("Checked in at 09:05AM (gate 2)", 545),
    ],
)
def test_time_to_minutes_formats(value, expected):
    assert time_to_minutes(value) == expected


def test_time_without_meridiem_is_24_hour():
    assert time_to_minutes("14:10") == 14 * 60 + 10
    assert time_to_minutes("12:30") == 12 * 60 + 30


@pytest.mark.parametrize(
    "value",
    [
        "",
        "garbage",
        "8.30 AM",
        "08-30",
        None,
        830,
        "\uff10\uff19:\uff13\uff10",  # fullwidth digits
        "\u0660\u0669:\u0663\u0660 AM",  # Arabic-Indic digits
    ],
)
def test_unparsable_time_falls_back_to_midnight(value):
    assert time_to_minutes(value) == 0
    assert parse_time_minutes(value) is None


def test_midnight_is_distinguishable_only_with_hardened_parser():
    assert time_to_minutes("00:00") == time_to_minutes("not a time") == 0
    assert parse_time_minutes("00:00") == 0
    assert parse_time_minutes("not a time") is None

