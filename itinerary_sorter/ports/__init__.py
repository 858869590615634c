"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the sorting core and the adapters
that feed it tickets or present its results.
"""

from .rendering import ItineraryRendererPort
from .tickets import TicketSourcePort

__all__ = [
    "TicketSourcePort",
    "ItineraryRendererPort",
]
