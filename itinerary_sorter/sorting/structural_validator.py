"""Degree-based validation of the route graph.

A graph describing exactly one journey has one place with more
outgoing than incoming tickets (the start), one with the reverse (the
end), every other place balanced, and no isolated places. When the
imbalance comes from several disjoint chains, a per-segment diagnosis
is added so the caller can see which legs are missing. A graph with
no start and no end at all is walked from its first place to name the
place where the route closes on itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ..domain.models import StageOutcome
from ..graph.components import describe_disconnected_segments, find_segments
from ..graph.route_graph import RouteGraph
from .path_traverser import PathTraverser


@dataclass
class StructuralValidator:
    """Classify every place by degree and report why the graph is not a chain.

    Attributes:
        segment_diagnosis: Whether to add the disconnected-segments report
        traverser: Walks closed loops to name where they close
    """

    segment_diagnosis: bool = True
    traverser: PathTraverser = field(default_factory=PathTraverser, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def validate(self, graph: RouteGraph) -> StageOutcome:
        errors: List[str] = []
        warnings: List[str] = []
        start_candidates = 0
        end_candidates = 0

        for place_id, place in graph.nodes.items():
            out_deg, in_deg = graph.degrees(place_id)

            if out_deg == 0 and in_deg == 0:
                errors.append(f"Place '{place.name}' is isolated (no connections)")
            elif out_deg > in_deg:
                start_candidates += 1
            elif in_deg > out_deg:
                end_candidates += 1

            if out_deg > 1:
                warnings.append(
                    f"Place '{place.name}' has {out_deg} outgoing connections "
                    f"- multiple route options"
                )
            if in_deg > 1:
                warnings.append(
                    f"Place '{place.name}' has {in_deg} incoming connections "
                    f"- potential merge point"
                )

        if start_candidates == 0:
            errors.append(
                "No starting place found (all places have incoming connections)"
            )
        elif start_candidates > 1:
            errors.append(
                f"Multiple possible starting places found ({start_candidates}). "
                f"Route may have branches."
            )

        if end_candidates == 0:
            errors.append("No ending place found (all places have outgoing connections)")
        elif end_candidates > 1:
            errors.append(
                f"Multiple possible ending places found ({end_candidates}). "
                f"Route may have branches."
            )

        if start_candidates == 0 and end_candidates == 0 and graph.nodes:
            first_place = next(iter(graph.nodes.values()))
            errors.extend(self.traverser.traverse(graph, first_place).errors)

        if (
            self.segment_diagnosis
            and start_candidates > 1
            and start_candidates == end_candidates
        ):
            segments = find_segments(graph)
            if len(segments) > 1:
                errors.append(describe_disconnected_segments(segments))

        self._logger.debug(
            "Graph structure checked",
            extra={
                "places": len(graph),
                "start_candidates": start_candidates,
                "end_candidates": end_candidates,
                "errors": len(errors),
            },
        )
        return StageOutcome.from_messages(errors, warnings)
