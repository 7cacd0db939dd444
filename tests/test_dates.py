import pytest
from hypothesis import given
from hypothesis import strategies as st

from roadnet.dates import (
    DayOfWeek,
    parse_day_of_week,
    parse_time,
    seconds_since_mon_midnight,
)

hours = st.integers(min_value=0, max_value=23)
minutes = st.integers(min_value=0, max_value=59)


def test_midnight_is_zero():
    assert parse_time("00:00:00") == 0
    assert parse_time("00:00") == 0


@given(hours, minutes, minutes)
def test_seconds_field_adds_seconds(h, m, s):
    with_seconds = parse_time(f"{h:02d}:{m:02d}:{s:02d}")
    without = parse_time(f"{h:02d}:{m:02d}")
    assert with_seconds - without == s
    assert without == parse_time(f"{h:02d}:{m:02d}:00")


@given(hours, minutes)
def test_later_minute_is_later(h, m):
    if m < 59:
        assert parse_time(f"{h:02d}:{m + 1:02d}") - parse_time(f"{h:02d}:{m:02d}") == 60


@pytest.mark.parametrize("text", ["24:00", "10:60", "10:15:60", "1015", "10:15:3", "10:15x30", "-1:00"])
def test_invalid_times(text):
    with pytest.raises(ValueError):
        parse_time(text)


def test_invalid_time_message():
    with pytest.raises(ValueError, match="text string not in format HH:mm:ss -- '25:00'"):
        parse_time("25:00")


@pytest.mark.parametrize(
    "names, day",
    [
        (("Monday", "Mon", "Montag", "Mo"), DayOfWeek.MONDAY),
        (("Tuesday", "Tue", "Dienstag", "Di"), DayOfWeek.TUESDAY),
        (("Sunday", "Sun", "Sonntag", "So"), DayOfWeek.SUNDAY),
    ],
)
def test_day_names(names, day):
    assert {parse_day_of_week(n) for n in names} == {day}


def test_unknown_day():
    with pytest.raises(ValueError, match="invalid day of week -- 'Funday'"):
        parse_day_of_week("Funday")


def test_seconds_since_monday():
    assert seconds_since_mon_midnight("Mon", "00:00") == 0
    assert seconds_since_mon_midnight("Mon", "10:15:30") == parse_time("10:15:30")
    day = seconds_since_mon_midnight("Tue", "08:00") - seconds_since_mon_midnight("Mon", "08:00")
    assert seconds_since_mon_midnight("Wed", "08:00") - seconds_since_mon_midnight("Tue", "08:00") == day
    assert day == 86400