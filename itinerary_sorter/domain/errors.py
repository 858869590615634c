"""Typed domain errors for the itinerary sorter.

Expected sorting failures (malformed tickets, broken or branching
routes) are reported as messages inside a ``SortingResult`` and never
raised. The exception types below cover the remaining cases: adapters
that cannot load or render, bad configuration, and invariants the
sorting stages did not anticipate.

All errors inherit from ItinerarySorterError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

UNEXPECTED_ERROR_PREFIX = "Unexpected error:"

_INPUT_KEYWORDS = ("required", "invalid", "empty", "same 'from' and 'to'")
_BUSINESS_KEYWORDS = (
    "route",
    "path",
    "connection",
    "circular",
    "multiple",
    "branch",
    "disconnected",
    "isolated",
)


class ErrorTier(Enum):
    """Category of a sorting error message.

    INPUT: the caller sent malformed tickets.
    BUSINESS_RULE: tickets are well formed but do not form one journey.
    INTERNAL: an unanticipated fault inside the engine.
    """

    INPUT = "input"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"

    @property
    def http_status(self) -> int:
        return {
            ErrorTier.INPUT: 400,
            ErrorTier.BUSINESS_RULE: 422,
            ErrorTier.INTERNAL: 500,
        }[self]


def classify_error(message: str) -> ErrorTier:
    """Map an error message to its tier by keyword content.

    Args:
        message: An error string produced by the sorting pipeline.

    Returns:
        The tier the message belongs to. Messages matching no keyword
        are treated as business-rule errors.
    """
    if message.startswith(UNEXPECTED_ERROR_PREFIX):
        return ErrorTier.INTERNAL

    lowered = message.lower()
    if any(keyword in lowered for keyword in _INPUT_KEYWORDS):
        return ErrorTier.INPUT
    if any(keyword in lowered for keyword in _BUSINESS_KEYWORDS):
        return ErrorTier.BUSINESS_RULE
    # "No tickets provided for sorting" has no input keyword but is input
    if "no tickets provided" in lowered or "too many tickets" in lowered:
        return ErrorTier.INPUT
    return ErrorTier.BUSINESS_RULE


@dataclass
class ItinerarySorterError(Exception):
    """Base error for the itinerary sorter domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class SortingInvariantError(ItinerarySorterError):
    """A sorting stage met a state it should never see.

    Attributes:
        stage: Name of the stage that detected the violation
    """

    stage: str = ""


@dataclass
class TicketLoadError(ItinerarySorterError):
    """Ticket data could not be read or parsed.

    Attributes:
        source: File path or description of the payload
        details: Individual validation problems, if any
    """

    source: Optional[str] = None
    details: tuple[str, ...] = ()


@dataclass
class RenderingError(ItinerarySorterError):
    """Narrative rendering of an itinerary failed.

    Attributes:
        renderer_type: Type of renderer that failed
    """

    renderer_type: str = ""


@dataclass
class ConfigurationError(ItinerarySorterError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
