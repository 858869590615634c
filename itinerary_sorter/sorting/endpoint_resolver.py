"""Locate the unique start and end place of a validated route graph."""

from __future__ import annotations

from typing import List, Optional

from ..domain.models import EndpointOutcome, Place
from ..graph.route_graph import RouteGraph


class EndpointResolver:
    """Second, independent check of the start and end candidates.

    Runs only after structural validation succeeded, so ambiguity here
    means that validation was bypassed; the resolver then fails closed.
    """

    def resolve(self, graph: RouteGraph) -> EndpointOutcome:
        errors: List[str] = []
        start: Optional[Place] = None
        end: Optional[Place] = None

        for place_id, place in graph.nodes.items():
            out_deg, in_deg = graph.degrees(place_id)

            if out_deg > in_deg:
                if start is None:
                    start = place
                else:
                    errors.append("Multiple starting places detected")

            if in_deg > out_deg:
                if end is None:
                    end = place
                else:
                    errors.append("Multiple ending places detected")

        if start is None:
            errors.append("Could not determine starting place")
        if end is None:
            errors.append("Could not determine ending place")

        if errors:
            return EndpointOutcome(ok=False, errors=tuple(errors))
        return EndpointOutcome(ok=True, start_place=start, end_place=end)
