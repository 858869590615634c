"""Route graph construction and connected-component analysis."""

from .components import Segment, connected_components, find_segments
from .route_graph import RouteGraph, build_route_graph

__all__ = [
    "RouteGraph",
    "build_route_graph",
    "Segment",
    "connected_components",
    "find_segments",
]
