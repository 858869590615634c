"""Ticket adapters - Implementations of TicketSourcePort.

Available implementations:
- JsonTicketSource: itinerary request JSON files and payloads
"""

from .json_source import JsonTicketSource

__all__ = ["JsonTicketSource"]
