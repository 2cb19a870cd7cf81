"""Wall-clock sampling helpers.

This module has no Qt dependencies so it can be unit-tested easily.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Callable

SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class TimeSample:
    """A single reading of the local wall clock."""
    hours: int
    minutes: int
    seconds: int
    millis: int = 0

    def __post_init__(self):
        for field, upper in (('hours', 23), ('minutes', 59), ('seconds', 59), ('millis', 999)):
            value = getattr(self, field)
            if not 0 <= value <= upper:
                raise ValueError(f"{field} must be in [0, {upper}], got {value!r}")

    @classmethod
    def from_datetime(cls, dt: datetime.datetime) -> 'TimeSample':
        return cls(dt.hour, dt.minute, dt.second, dt.microsecond // 1000)

    @property
    def elapsed_seconds(self) -> float:
        """Seconds since local midnight, in [0, 86400)."""
        return self.hours * 3600 + self.minutes * 60 + self.seconds + self.millis / 1000

    @property
    def normal_time(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


def sample_now(clock: Callable[[], datetime.datetime] = datetime.datetime.now) -> TimeSample:
    """Sample the local wall clock.

    Args:
        clock: Callable returning the current local datetime. Tests inject a
            fixed clock here.

    Returns:
        A fresh TimeSample. Nothing is cached between calls, so a reading taken
        just after midnight wraps back to zero elapsed seconds.
    """
    return TimeSample.from_datetime(clock())
