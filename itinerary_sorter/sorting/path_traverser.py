"""Walk the route graph from its start place to produce the ticket order."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Set

from ..domain.errors import SortingInvariantError
from ..domain.models import Place, Ticket, TraversalOutcome
from ..graph.route_graph import RouteGraph


@dataclass
class PathTraverser:
    """Follow the single outgoing ticket of each place until the route ends.

    The walk stops with an error on a place offering more than one
    ticket or on a place already visited. Whatever the outcome, the
    number of tickets used is compared with the number in the graph.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def traverse(self, graph: RouteGraph, start_place: Place) -> TraversalOutcome:
        if not start_place.id:
            raise SortingInvariantError(
                "Start place has no valid ID", stage="traversal"
            )

        errors: List[str] = []
        ordered: List[Ticket] = []
        current = start_place.id
        visited: Set[str] = {current}

        while True:
            outgoing = graph.outgoing(current)

            if not outgoing:
                break

            if len(outgoing) > 1:
                errors.append(
                    f"Multiple route options from '{graph.nodes[current].name}' "
                    f"- cannot determine single path"
                )
                break

            ticket = outgoing[0]
            ordered.append(ticket)

            next_id = ticket.to_id
            if not next_id:
                raise SortingInvariantError(
                    "Ticket destination has no valid ID", stage="traversal"
                )
            current = next_id

            if current in visited:
                assert ticket.to_place is not None
                errors.append(f"Circular route detected at '{ticket.to_place.name}'")
                break
            visited.add(current)

        total = graph.edge_count
        if len(ordered) != total:
            errors.append(
                f"Could not create complete path - used {len(ordered)} of {total} tickets"
            )

        if errors:
            self._logger.debug(
                "Traversal stopped",
                extra={"used": len(ordered), "total": total},
            )
            return TraversalOutcome(ok=False, errors=tuple(errors))
        return TraversalOutcome(ok=True, sorted_tickets=tuple(ordered))
