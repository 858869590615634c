"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    ErrorTier,
    ItinerarySorterError,
    RenderingError,
    SortingInvariantError,
    TicketLoadError,
    classify_error,
)
from .models import (
    BaggageType,
    BoatDetails,
    BusDetails,
    FlightDetails,
    Place,
    RenderFormat,
    SortingResult,
    StageOutcome,
    TaxiDetails,
    Ticket,
    TicketType,
    TrainDetails,
    TramDetails,
)

__all__ = [
    # Models
    "Place",
    "Ticket",
    "TicketType",
    "BaggageType",
    "TrainDetails",
    "TramDetails",
    "BusDetails",
    "BoatDetails",
    "FlightDetails",
    "TaxiDetails",
    "RenderFormat",
    "StageOutcome",
    "SortingResult",
    # Errors
    "ItinerarySorterError",
    "SortingInvariantError",
    "TicketLoadError",
    "RenderingError",
    "ConfigurationError",
    "ErrorTier",
    "classify_error",
]
