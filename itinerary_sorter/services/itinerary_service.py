"""Itinerary service - sorting plus optional narrative rendering.

Wraps the sorting service the way the API layer uses it: sort the
tickets, and when the caller asked for a human-readable itinerary and
sorting succeeded, attach the rendered steps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Union

from ..domain.models import RenderFormat, SortingResult, Ticket
from ..ports.rendering import ItineraryRendererPort
from .sorting_service import ItinerarySortingService


@dataclass(frozen=True, slots=True)
class ItineraryCreationResult:
    """Sorted itinerary with its optional narrative form.

    Attributes:
        sorting: Full result of the sorting engine
        steps: Rendered steps, present only when requested and valid
    """

    sorting: SortingResult
    steps: Optional[tuple[str, ...]] = None

    @property
    def is_valid(self) -> bool:
        return self.sorting.is_valid

    @property
    def errors(self) -> tuple[str, ...]:
        return self.sorting.errors

    @property
    def warnings(self) -> tuple[str, ...]:
        return self.sorting.warnings

    def to_dict(self) -> dict[str, Any]:
        data = self.sorting.to_dict()
        if self.steps is not None:
            data["stepsHuman"] = list(self.steps)
        return data


@dataclass
class ItineraryService:
    """Create itineraries from unordered tickets.

    Attributes:
        sorting_service: Engine ordering the tickets
        renderer: Produces the human-readable steps
    """

    sorting_service: ItinerarySortingService
    renderer: ItineraryRendererPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def create(
        self,
        tickets: Sequence[Ticket],
        render: Union[RenderFormat, str] = RenderFormat.JSON,
    ) -> ItineraryCreationResult:
        """Sort tickets and render them if requested.

        Args:
            tickets: Tickets in any order.
            render: "json", "human" or "both".

        Returns:
            ItineraryCreationResult wrapping the sorting result.

        Raises:
            ValueError: If ``render`` is not a known format.
            RenderingError: If the renderer cannot describe a ticket.
        """
        render = RenderFormat(render)
        sorting = self.sorting_service.sort_tickets(tickets)

        if not sorting.is_valid:
            self._logger.warning(
                "Itinerary not created",
                extra={"errors": list(sorting.errors)},
            )
            return ItineraryCreationResult(sorting=sorting)

        steps = None
        if render.includes_human:
            steps = self.renderer.render(sorting.sorted_tickets)

        self._logger.info(
            "Itinerary created",
            extra={"tickets": sorting.ticket_count, "render": render.value},
        )
        return ItineraryCreationResult(sorting=sorting, steps=steps)
