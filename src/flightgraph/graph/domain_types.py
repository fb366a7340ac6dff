"""Core types shared by the graph package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

Vertex = str

UNWEIGHTED = -1


def _format_hhmm(value: int) -> str:
    hours, mins = divmod(int(value), 100)
    return f"{hours:02d}:{mins:02d}"


@dataclass(frozen=True)
class FlightDetail:
    """Departure/arrival times of one flight over an edge (24h HHMM integers)."""

    flight: str
    departure_time: int
    arrival_time: int

    def as_pair(self) -> Tuple[int, int]:
        """Return ``(departure_time, arrival_time)``."""
        return self.departure_time, self.arrival_time

    @property
    def departure_str(self) -> str:
        return _format_hhmm(self.departure_time)

    @property
    def arrival_str(self) -> str:
        return _format_hhmm(self.arrival_time)

    def to_record(self) -> Dict[str, object]:
        return {
            "flight": self.flight,
            "departure_time": self.departure_time,
            "arrival_time": self.arrival_time,
        }


__all__ = ["FlightDetail", "UNWEIGHTED", "Vertex"]
