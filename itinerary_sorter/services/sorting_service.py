"""Itinerary sorting service - Main orchestrator.

Runs the sorting stages strictly in order and stops at the first one
that rejects its input:

1. Input validation
2. Route graph construction
3. Structural validation
4. Endpoint resolution
5. Path traversal
6. Sequence validation

The service never raises: anything unexpected is logged and returned
as a single "Unexpected error" message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..config import SortingConfig, get_config
from ..domain.errors import (
    UNEXPECTED_ERROR_PREFIX,
    ConfigurationError,
    SortingInvariantError,
)
from ..domain.models import SortingResult, Ticket
from ..graph.route_graph import build_route_graph
from ..sorting import (
    EndpointResolver,
    InputValidator,
    PathTraverser,
    SequenceValidator,
    StructuralValidator,
)


@dataclass
class ItinerarySortingService:
    """Turn an unordered batch of tickets into one ordered journey.

    Stateless between calls: every call builds and discards its own
    route graph, so one instance can be shared across threads.

    Attributes:
        input_validator: Per-ticket checks
        structural_validator: Degree and segment analysis, built around
            ``path_traverser`` when omitted
        endpoint_resolver: Start and end place lookup
        path_traverser: Graph walk producing the order
        sequence_validator: Adjacency re-check and warnings
    """

    input_validator: InputValidator = field(default_factory=InputValidator)
    structural_validator: Optional[StructuralValidator] = None
    endpoint_resolver: EndpointResolver = field(default_factory=EndpointResolver)
    path_traverser: PathTraverser = field(default_factory=PathTraverser)
    sequence_validator: SequenceValidator = field(default_factory=SequenceValidator)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.structural_validator is None:
            self.structural_validator = StructuralValidator(
                traverser=self.path_traverser
            )

    @classmethod
    def from_config(
        cls, config: Optional[SortingConfig] = None
    ) -> ItinerarySortingService:
        """Create a service whose stages follow the sorting settings."""
        config = config or get_config().sorting
        traverser = PathTraverser()
        return cls(
            input_validator=InputValidator(max_tickets=config.max_tickets),
            structural_validator=StructuralValidator(
                segment_diagnosis=config.segment_diagnosis,
                traverser=traverser,
            ),
            path_traverser=traverser,
            sequence_validator=SequenceValidator(
                tight_connection_warnings=config.tight_connection_warnings
            ),
        )

    def sort_tickets(self, tickets: Optional[Sequence[Ticket]]) -> SortingResult:
        """Sort tickets into a single continuous itinerary.

        Args:
            tickets: Tickets in any order, with places already resolved.

        Returns:
            SortingResult; ``is_valid`` is False when the tickets do not
            form exactly one journey, with the reasons in ``errors``.
        """
        count = len(tickets) if tickets else 0
        self._logger.debug("Sorting tickets", extra={"tickets": count})

        try:
            return self._run(tickets)
        except Exception as e:
            self._logger.exception(
                "Unexpected error during ticket sorting",
                extra={"tickets": count},
            )
            return SortingResult.failure([f"{UNEXPECTED_ERROR_PREFIX} {_describe(e)}"])

    def _run(self, tickets: Optional[Sequence[Ticket]]) -> SortingResult:
        basic = self.input_validator.validate(tickets)
        if not basic.ok:
            return self._reject("input", basic.errors)
        assert tickets is not None

        graph = build_route_graph(tickets)
        self._logger.debug(
            "Route graph built",
            extra={"places": len(graph), "connections": graph.edge_count},
        )

        assert self.structural_validator is not None
        structure = self.structural_validator.validate(graph)
        if not structure.ok:
            return self._reject("structure", structure.errors, structure.warnings)

        endpoints = self.endpoint_resolver.resolve(graph)
        if not endpoints.ok:
            return self._reject("endpoints", endpoints.errors)
        if endpoints.start_place is None:
            raise SortingInvariantError(
                "Start place is required for sorting", stage="endpoints"
            )

        traversal = self.path_traverser.traverse(graph, endpoints.start_place)
        if not traversal.ok:
            return self._reject("traversal", traversal.errors)

        sequence = self.sequence_validator.validate(traversal.sorted_tickets)
        if not sequence.ok:
            return self._reject("sequence", sequence.errors, sequence.warnings)

        warnings: List[str] = [*structure.warnings, *sequence.warnings]
        result = SortingResult(
            sorted_tickets=traversal.sorted_tickets,
            start_place=endpoints.start_place,
            end_place=endpoints.end_place,
            is_valid=True,
            warnings=tuple(warnings),
        )

        self._logger.info(
            "Tickets sorted",
            extra={
                "tickets": result.ticket_count,
                "start": endpoints.start_place.name,
                "end": endpoints.end_place.name if endpoints.end_place else None,
                "warnings": len(warnings),
            },
        )
        return result

    def _reject(
        self,
        stage: str,
        errors: Sequence[str],
        warnings: Sequence[str] = (),
    ) -> SortingResult:
        self._logger.warning(
            "Ticket sorting rejected",
            extra={"stage": stage, "errors": list(errors)},
        )
        return SortingResult.failure(list(errors), list(warnings))


def _describe(error: Exception) -> str:
    if isinstance(error, SortingInvariantError):
        return error.message
    return str(error) or type(error).__name__


def sort_tickets(tickets: Optional[Sequence[Ticket]]) -> SortingResult:
    """Sort tickets with a service built from the current configuration.

    Invalid settings are reported like any other unexpected fault, as a
    single "Unexpected error" message.
    """
    try:
        service = ItinerarySortingService.from_config()
    except ConfigurationError as e:
        logging.getLogger(__name__).error(
            "Invalid sorting configuration",
            extra={"setting": e.setting_name},
        )
        return SortingResult.failure([f"{UNEXPECTED_ERROR_PREFIX} {e.message}"])
    return service.sort_tickets(tickets)
