"""Application services - orchestration of the sorting stages."""

from .itinerary_service import ItineraryCreationResult, ItineraryService
from .sorting_service import ItinerarySortingService, sort_tickets

__all__ = [
    "ItinerarySortingService",
    "sort_tickets",
    "ItineraryService",
    "ItineraryCreationResult",
]
