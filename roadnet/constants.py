"""Shared numeric constants and small math helpers."""

import enum
import math

# A special value representing infinity. Two of them can be added without leaving int32 range.
INFTY = (2**31 - 1) // 2

# Special values representing an invalid (vertex/edge) ID.
INVALID_ID = -1
INVALID_INDEX = -1
INVALID_VERTEX = -1
INVALID_EDGE = -1

# The earth's mean radius in meters.
EARTH_RADIUS = 6371000

# The base-2 logarithm of the number of shortest paths computed simultaneously.
TA_LOG_K = 5

# The ratio of the circumference of a circle to its diameter.
PI = math.pi


class RoadDirection(enum.Enum):
    """The direction in which a road segment is open."""

    OPEN_IN_BOTH = 0
    FORWARD = 1
    REVERSE = 2
    CLOSED = 3


def to_radians(angdeg):
    """Convert an angle in degrees to radians."""
    return PI / 180 * angdeg


def to_degrees(angrad):
    """Convert an angle in radians to degrees."""
    return 180 / PI * angrad


def minmax(a, b):
    """Return the pair (smaller, greater) of a and b."""
    if b < a:
        return b, a
    return a, b


def signum(val):
    """Return 0, 1 or -1 as val is equal to, greater than or less than zero."""
    return int(0 < val) - int(val < 0)