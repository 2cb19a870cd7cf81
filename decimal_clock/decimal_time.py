"""Decimal time decomposition.

A day is split into 10 Decimal Hours, each Decimal Hour into 10 Deci-Minutes,
each Deci-Minute into 10 Dec Minutes and each Dec Minute into 10 Dec Seconds.

Key features:
- Cascading decomposition: every level is computed from its parent's remainder
- Aggregate readings (day percent, fractional Decimal Hours)
- The static conversion table shown under the clock
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .time_source import SECONDS_PER_DAY

# Largest float strictly below 1.0, used when a level reads as completely full
_ALMOST_ONE = math.nextafter(1.0, 0.0)
_MAX_UNIT = 9


@dataclass(frozen=True)
class DecimalLevel:
    key: str
    name: str
    short_label: str
    duration: float


DEC_HOUR = DecimalLevel('dec_hour', 'Decimal Hour', 'Dec Hour', 8640.0)
DECI_MINUTE = DecimalLevel('deci_minute', 'Deci-Minute', 'Deci-Min', 864.0)
DEC_MINUTE = DecimalLevel('dec_minute', 'Dec Minute', 'Dec Minute', 86.4)
DEC_SECOND = DecimalLevel('dec_second', 'Dec Second', 'Dec Second', 8.64)

# Coarsest to finest; decompose() relies on this order
LEVELS = (DEC_HOUR, DECI_MINUTE, DEC_MINUTE, DEC_SECOND)


@dataclass(frozen=True)
class LevelReading:
    """Progress through one decimal level."""
    level: DecimalLevel
    unit_index: int
    fraction: float

    @property
    def label(self) -> str:
        return f"{self.level.short_label}: {self.unit_index}"


@dataclass(frozen=True)
class Decomposition:
    elapsed: float
    readings: tuple[LevelReading, ...]

    @property
    def dec_hour(self) -> LevelReading:
        return self.readings[0]

    @property
    def deci_minute(self) -> LevelReading:
        return self.readings[1]

    @property
    def dec_minute(self) -> LevelReading:
        return self.readings[2]

    @property
    def dec_second(self) -> LevelReading:
        return self.readings[3]

    @property
    def day_percent(self) -> float:
        return self.elapsed / (SECONDS_PER_DAY / 100)

    @property
    def total_dec_hours(self) -> float:
        return self.elapsed / DEC_HOUR.duration

    @property
    def total_decihours(self) -> float:
        # 100 decihours per day, so this is the day percent under another name
        return self.day_percent

    def to_elapsed_seconds(self) -> float:
        """Rebuild the elapsed seconds from the unit indices and finest fraction."""
        total = sum(r.unit_index * r.level.duration for r in self.readings)
        return total + self.dec_second.fraction * DEC_SECOND.duration


def _clamp_reading(level, unit, fraction):
    if unit < 0:
        return LevelReading(level, 0, 0.0)
    if unit > _MAX_UNIT:
        # Past the last unit: show the level as full instead of reading "10"
        return LevelReading(level, _MAX_UNIT, _ALMOST_ONE)
    fraction = min(max(fraction, 0.0), _ALMOST_ONE)
    return LevelReading(level, unit, fraction)


def decompose(elapsed: float) -> Decomposition:
    """Split seconds since midnight into the four decimal levels.

    Args:
        elapsed: Seconds since local midnight, in [0, 86400).

    Returns:
        Decomposition holding one LevelReading per level, coarsest first.

    Notes:
        - Each level's remainder feeds the next, like hours/minutes/seconds but
          in base 10.
        - Unit indices are clamped to [0, 9] and fractions to [0, 1). A
          floating-point residue at an exact duration boundary therefore reads
          as 9 and almost full, never as 10.
    """
    remainder = float(elapsed)
    readings = []
    for level in LEVELS:
        unit, remainder = divmod(remainder, level.duration)
        readings.append(_clamp_reading(level, int(unit), remainder / level.duration))
    return Decomposition(float(elapsed), tuple(readings))


def describe_duration(seconds: float) -> str:
    """Describe a duration in conventional units, e.g. '864 seconds (14m 24s)'."""
    seconds = round(seconds, 3)
    if seconds < 60:
        return f"{seconds:g} seconds"

    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    secs = round(secs, 3)
    if hours:
        parts = f"{int(hours)}h {int(minutes)}m {secs:g}s"
    else:
        parts = f"{int(minutes)}m {secs:g}s"
    return f"{seconds:g} seconds ({parts})"


def conversion_rows() -> list[tuple[str, str]]:
    """Rows of the decimal-to-normal conversion table, whole day first."""
    rows = [('Full Day', f"10 Decimal Hours = {describe_duration(SECONDS_PER_DAY)}")]
    for level in LEVELS:
        rows.append((f"1 {level.name}", describe_duration(level.duration)))
    return rows
