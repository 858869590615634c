"""Connected-component analysis of a route graph.

Used to explain a ticket batch that forms several disjoint chains:
each component (edges treated as undirected) becomes a ``Segment``
with its own start and end place.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from ..domain.models import Place
from .route_graph import RouteGraph


@dataclass(frozen=True, slots=True)
class Segment:
    """A maximal connected part of the route graph.

    Attributes:
        start_place: Place whose out-degree exceeds its in-degree, if any
        end_place: Place whose in-degree exceeds its out-degree, if any
        ticket_count: Number of tickets inside the segment
        place_count: Number of places inside the segment
    """

    start_place: Optional[Place]
    end_place: Optional[Place]
    ticket_count: int
    place_count: int

    @property
    def start_name(self) -> str:
        return self.start_place.name if self.start_place else "unknown"

    @property
    def end_name(self) -> str:
        return self.end_place.name if self.end_place else "unknown"


def _undirected_adjacency(graph: RouteGraph) -> Dict[str, Set[str]]:
    adjacency: Dict[str, Set[str]] = {place_id: set() for place_id in graph.nodes}
    for ticket in graph.iter_tickets():
        from_id, to_id = ticket.from_id, ticket.to_id
        assert from_id and to_id
        adjacency[from_id].add(to_id)
        adjacency[to_id].add(from_id)
    return adjacency


def connected_components(graph: RouteGraph) -> List[List[str]]:
    """Group place ids into undirected connected components.

    Components are ordered by the first place each contains, and the
    ids inside a component keep the graph's node order.
    """
    adjacency = _undirected_adjacency(graph)
    component_of: Dict[str, int] = {}
    count = 0

    for root in graph.nodes:
        if root in component_of:
            continue
        component_of[root] = count
        queue = deque([root])
        while queue:
            current = queue.popleft()
            for neighbour in adjacency[current]:
                if neighbour not in component_of:
                    component_of[neighbour] = count
                    queue.append(neighbour)
        count += 1

    components: List[List[str]] = [[] for _ in range(count)]
    for place_id in graph.nodes:
        components[component_of[place_id]].append(place_id)
    return components


def find_segments(graph: RouteGraph) -> List[Segment]:
    """Resolve the local start, end and size of every component."""
    segments: List[Segment] = []

    for members in connected_components(graph):
        start: Optional[Place] = None
        end: Optional[Place] = None
        ticket_count = 0

        for place_id in members:
            out_deg, in_deg = graph.degrees(place_id)
            ticket_count += out_deg
            if out_deg > in_deg and start is None:
                start = graph.nodes[place_id]
            elif in_deg > out_deg and end is None:
                end = graph.nodes[place_id]

        segments.append(
            Segment(
                start_place=start,
                end_place=end,
                ticket_count=ticket_count,
                place_count=len(members),
            )
        )

    return segments


def describe_disconnected_segments(segments: List[Segment]) -> str:
    """Build the combined diagnosis for a graph split into several segments.

    Example::

        Route has 2 disconnected segments. Segment 1: A → B (1 tickets,
        2 places); Segment 2: C → D (1 tickets, 2 places). Potential
        connections needed: Missing: B → C; Missing: D → A
    """
    parts = [
        f"Segment {index}: {segment.start_name} → {segment.end_name} "
        f"({segment.ticket_count} tickets, {segment.place_count} places)"
        for index, segment in enumerate(segments, start=1)
    ]
    message = f"Route has {len(segments)} disconnected segments. " + "; ".join(parts)

    missing: List[str] = []
    for i, source in enumerate(segments):
        for j, target in enumerate(segments):
            if i == j or source.end_place is None or target.start_place is None:
                continue
            if source.end_place.id != target.start_place.id:
                missing.append(f"Missing: {source.end_name} → {target.start_name}")

    if missing:
        message += ". Potential connections needed: " + "; ".join(missing)
    return message
