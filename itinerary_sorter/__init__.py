"""Itinerary sorter.

Orders an unordered batch of travel tickets into the single journey
they describe, or explains why they do not describe exactly one.
"""

from .domain.models import Place, SortingResult, Ticket, TicketType
from .services.sorting_service import ItinerarySortingService, sort_tickets

__version__ = "1.0.0"

__all__ = [
    "Place",
    "Ticket",
    "TicketType",
    "SortingResult",
    "ItinerarySortingService",
    "sort_tickets",
]
