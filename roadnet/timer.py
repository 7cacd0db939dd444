"""A timer measuring how long some code takes to run."""

import time

_NANOS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "min": 60_000_000_000,
    "h": 3_600_000_000_000,
}


class Timer:
    """A monotonic timer that starts when it is created."""

    def __init__(self, clock=time.monotonic_ns):
        self._clock = clock
        self._start = clock()

    def elapsed(self, unit="ms"):
        """Return the whole number of units elapsed since the timer was started."""
        try:
            per_unit = _NANOS_PER_UNIT[unit]
        except KeyError:
            raise ValueError(f"unknown time unit -- '{unit}'") from None
        return (self._clock() - self._start) // per_unit

    def restart(self):
        """Restart the timer."""
        self._start = self._clock()