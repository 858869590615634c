"""Directed multigraph of places and tickets.

A ``RouteGraph`` is built fresh for every sorting call from the
already-validated ticket list and discarded afterwards. Node and edge
dictionaries keep insertion order, so the outgoing tickets of a place
are listed in input order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence

from ..domain.models import Place, Ticket


@dataclass
class RouteGraph:
    """Places (nodes) and tickets (edges) derived from one ticket batch.

    Attributes:
        nodes: Place id -> Place, one entry per distinct place
        edges: Place id -> outgoing tickets, in input order
        in_degree: Place id -> number of incoming tickets
        out_degree: Place id -> number of outgoing tickets
    """

    nodes: Dict[str, Place] = field(default_factory=dict)
    edges: Dict[str, List[Ticket]] = field(default_factory=dict)
    in_degree: Dict[str, int] = field(default_factory=dict)
    out_degree: Dict[str, int] = field(default_factory=dict)

    @property
    def edge_count(self) -> int:
        return sum(len(tickets) for tickets in self.edges.values())

    def outgoing(self, place_id: str) -> Sequence[Ticket]:
        return self.edges.get(place_id, [])

    def degrees(self, place_id: str) -> tuple[int, int]:
        """Return ``(out_degree, in_degree)`` for a place."""
        return self.out_degree.get(place_id, 0), self.in_degree.get(place_id, 0)

    def iter_tickets(self) -> Iterator[Ticket]:
        for tickets in self.edges.values():
            yield from tickets

    def __len__(self) -> int:
        return len(self.nodes)


def build_route_graph(tickets: Sequence[Ticket]) -> RouteGraph:
    """Build the route graph for a batch of tickets.

    Tickets lacking a resolvable departure or arrival id are skipped.
    The first pass registers every place and zeroes its counters, the
    second adds the edges, so no counter is ever incremented before it
    exists.

    Args:
        tickets: Tickets that passed input validation.

    Returns:
        A new RouteGraph owned by the caller.
    """
    graph = RouteGraph()

    for ticket in tickets:
        if not ticket.has_endpoints:
            continue
        for place in (ticket.from_place, ticket.to_place):
            assert place is not None and place.id
            if place.id not in graph.nodes:
                graph.nodes[place.id] = place
                graph.in_degree[place.id] = 0
                graph.out_degree[place.id] = 0

    for ticket in tickets:
        if not ticket.has_endpoints:
            continue
        from_id = ticket.from_id
        to_id = ticket.to_id
        assert from_id and to_id
        graph.edges.setdefault(from_id, []).append(ticket)
        graph.out_degree[from_id] += 1
        graph.in_degree[to_id] += 1

    return graph
