"""Rendering port - Abstraction for narrative itinerary output.

This protocol defines the contract for turning a sorted ticket list
into human-readable steps, allowing different wordings or languages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Ticket


class ItineraryRendererPort(Protocol):
    """Port for itinerary rendering.

    Implementation: adapters/rendering/text_renderer.py
    """

    def render(self, tickets: Sequence[Ticket]) -> tuple[str, ...]:
        """Render sorted tickets as numbered steps.

        Args:
            tickets: Tickets in travel order.

        Returns:
            One line per step, including opening and closing steps.
        """
        ...
