"""Graph package exports."""

from .domain_types import UNWEIGHTED, FlightDetail, Vertex
from .edge import Edge
from .edge_config import DEFAULT_EDGE_CONFIG, EdgeConfig

__all__ = [
    "DEFAULT_EDGE_CONFIG",
    "Edge",
    "EdgeConfig",
    "FlightDetail",
    "UNWEIGHTED",
    "Vertex",
]
