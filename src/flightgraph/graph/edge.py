"""Directed, optionally weighted and labelled edge between two vertices."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import pandas as pd

from .domain_types import FlightDetail, Vertex
from .edge_config import DEFAULT_EDGE_CONFIG, EdgeConfig

logger = logging.getLogger(__name__)

_FRAME_COLUMNS = ["flight", "departure_time", "arrival_time"]


class Edge:
    """
    Connection ``source -> dest`` with an optional label and weight.

    Accepted construction forms::

        Edge()
        Edge(source, dest)
        Edge(source, dest, label)
        Edge(source, dest, weight, label)

    Equality only looks at the endpoints; ``<`` only looks at the weight, so
    a list of edges can be sorted by cost with ``sorted``. Flight timings are
    attached with :meth:`insert_data` and kept in :attr:`flight_details`.
    """

    def __init__(
        self,
        source: Vertex = "",
        dest: Vertex = "",
        *args: object,
        label: Optional[str] = None,
        weight: Optional[int] = None,
        config: Optional[EdgeConfig] = None,
    ) -> None:
        pos_label, pos_weight = self._coerce_positional(args)
        if pos_label is not None and label is not None:
            raise TypeError("Edge label given both positionally and by keyword")
        if pos_weight is not None and weight is not None:
            raise TypeError("Edge weight given both positionally and by keyword")

        label_val = pos_label if pos_label is not None else label
        weight_val = pos_weight if pos_weight is not None else weight
        if label_val is not None and not isinstance(label_val, str):
            raise TypeError("Edge label must be a string")
        if weight_val is not None and (isinstance(weight_val, bool) or not isinstance(weight_val, int)):
            raise TypeError("Edge weight must be an integer")

        self._source: Vertex = source
        self._dest: Vertex = dest
        self._label: str = label_val or ""
        self._weight: Optional[int] = weight_val
        self._config: EdgeConfig = config or DEFAULT_EDGE_CONFIG
        self.flight_details: Dict[str, FlightDetail] = {}

    @staticmethod
    def _coerce_positional(args: Tuple[object, ...]) -> Tuple[object, object]:
        """Split the optional trailing positionals into ``(label, weight)``."""
        if not args:
            return None, None
        if len(args) == 1:
            if not isinstance(args[0], str):
                raise TypeError("Edge(source, dest, label) requires a string label")
            return args[0], None
        if len(args) == 2:
            weight, label = args
            if weight is None:
                raise TypeError("Edge(source, dest, weight, label) requires an integer weight")
            if not isinstance(label, str):
                raise TypeError("Edge(source, dest, weight, label) requires a string label")
            return label, weight
        raise TypeError(f"Edge takes at most 4 positional arguments ({len(args) + 2} given)")

    @classmethod
    def weighted(
        cls,
        source: Vertex,
        dest: Vertex,
        weight: int,
        label: str = "",
        *,
        config: Optional[EdgeConfig] = None,
    ) -> "Edge":
        return cls(source, dest, label=label, weight=weight, config=config)

    # ------------------------------------------------------------------ accessors
    @property
    def source(self) -> Vertex:
        return self._source

    @property
    def dest(self) -> Vertex:
        return self._dest

    @property
    def label(self) -> str:
        return self._label

    @property
    def weight(self) -> Optional[int]:
        """Assigned weight, or ``None`` for an unweighted edge."""
        return self._weight

    @property
    def is_weighted(self) -> bool:
        return self._weight is not None

    @property
    def config(self) -> EdgeConfig:
        return self._config

    def get_label(self) -> str:
        return self._label

    def get_weight(self) -> int:
        """Return the weight, reporting unweighted edges as the configured sentinel (-1)."""
        if self._weight is None:
            return self._config.unweighted_weight
        return self._weight

    # ---------------------------------------------------------------- flight data
    def insert_data(self, flight: str, arrival: int, departure: int) -> bool:
        """
        Record the timings of ``flight`` unless it is already known.

        Args:
            flight: Flight identifier (flight name + tail number).
            arrival: Arrival time, 24h HHMM.
            departure: Departure time, 24h HHMM.
        Returns:
            True when the flight was stored, False when an earlier record was kept.
        """
        existing = self.flight_details.get(flight)
        if existing is not None:
            logger.log(
                self._config.log_level,
                "Ignoring duplicate flight %s on %s->%s (kept %s-%s)",
                flight,
                self._source,
                self._dest,
                existing.departure_time,
                existing.arrival_time,
            )
            return False
        self.flight_details[flight] = FlightDetail(
            flight=flight, departure_time=departure, arrival_time=arrival
        )
        return True

    def has_flight(self, flight: str) -> bool:
        return flight in self.flight_details

    def flight_times(self, flight: str) -> Optional[Tuple[int, int]]:
        """Return the stored ``(departure, arrival)`` pair for ``flight``."""
        detail = self.flight_details.get(flight)
        return detail.as_pair() if detail is not None else None

    def flight_details_frame(self) -> pd.DataFrame:
        """Flight timings as a DataFrame, one row per flight in insertion order."""
        rows = [detail.to_record() for detail in self.flight_details.values()]
        return pd.DataFrame(rows, columns=_FRAME_COLUMNS)

    # ---------------------------------------------------------------- comparison
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._source == other._source and self._dest == other._dest

    def __hash__(self) -> int:
        return hash((self._source, self._dest))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.get_weight() < other.get_weight()

    def __repr__(self) -> str:
        return (
            f"Edge(source={self._source!r}, dest={self._dest!r}, "
            f"label={self._label!r}, weight={self._weight!r}, "
            f"flights={len(self.flight_details)})"
        )

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self._source}->{self._dest}"


__all__ = ["Edge"]
