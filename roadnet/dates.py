"""Parsing of times of day and days of the week."""

import enum

from roadnet.strings import lexical_cast


class DayOfWeek(enum.IntEnum):
    """A day of the week, numbered from Monday = 1."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


_DAY_NAMES = {
    name: day
    for day, names in (
        (DayOfWeek.MONDAY, ("Monday", "Mon", "Montag", "Mo")),
        (DayOfWeek.TUESDAY, ("Tuesday", "Tue", "Dienstag", "Di")),
        (DayOfWeek.WEDNESDAY, ("Wednesday", "Wed", "Mittwoch", "Mi")),
        (DayOfWeek.THURSDAY, ("Thursday", "Thu", "Donnerstag", "Do")),
        (DayOfWeek.FRIDAY, ("Friday", "Fri", "Freitag", "Fr")),
        (DayOfWeek.SATURDAY, ("Saturday", "Sat", "Samstag", "Sa")),
        (DayOfWeek.SUNDAY, ("Sunday", "Sun", "Sonntag", "So")),
    )
    for name in names
}

_SECONDS_PER_DAY = 24 * 60 * 60


def parse_time(text):
    """Return the seconds since midnight for a text such as 10:15:30 or 10:15."""
    length = len(text)
    if (length == 5 or (length == 8 and text[5] == ":")) and text[2] == ":":
        hrs = lexical_cast(text[:2], int)
        mins = lexical_cast(text[3:5], int)
        secs = lexical_cast(text[6:], int) if length == 8 else 0
        if 0 <= hrs < 24 and 0 <= mins < 60 and 0 <= secs < 60:
            return hrs * 60 * 60 + mins * 60 + secs
    raise ValueError(f"text string not in format HH:mm:ss -- '{text}'")


def parse_day_of_week(text):
    """Return the DayOfWeek named by an English or German full or short name."""
    try:
        return _DAY_NAMES[text]
    except KeyError:
        raise ValueError(f"invalid day of week -- '{text}'") from None


def seconds_since_mon_midnight(day_of_week, time):
    """Return the seconds since Monday midnight for a day name and a time of day."""
    return (parse_day_of_week(day_of_week) - 1) * _SECONDS_PER_DAY + parse_time(time)