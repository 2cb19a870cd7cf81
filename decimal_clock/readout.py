"""Text formatting for the digital readout and the ring centre."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .decimal_time import Decomposition, decompose
from .time_source import TimeSample


@dataclass(frozen=True)
class ReadoutState:
    day_percent: str
    total_dec_hours: str
    total_decihours: str
    normal_time: str

    def lines(self) -> list[str]:
        """Centre text of the ring view, top to bottom."""
        return [
            f"{self.total_dec_hours} Dec Hour",
            f"({self.total_decihours} Decihour)",
            f"Day: {self.day_percent}%",
            f"Normal: {self.normal_time}",
        ]


def build_readout(sample: TimeSample, decomposition: Optional[Decomposition] = None) -> ReadoutState:
    """Format a sample for display, decomposing it unless a decomposition is given."""
    if decomposition is None:
        decomposition = decompose(sample.elapsed_seconds)
    return ReadoutState(
        day_percent=f"{decomposition.day_percent:.1f}",
        total_dec_hours=f"{decomposition.total_dec_hours:.3f}",
        total_decihours=f"{decomposition.total_decihours:.2f}",
        normal_time=sample.normal_time,
    )
