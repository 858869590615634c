"""Immutable domain models for the itinerary sorter.

All models are frozen dataclasses with slots. They carry no behaviour
beyond convenience properties and have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping, Optional, Union


class TicketType(str, Enum):
    """Travel mode discriminator carried by every ticket."""

    TRAIN = "train"
    TRAM = "tram"
    BUS = "bus"
    BOAT = "boat"
    FLIGHT = "flight"
    TAXI = "taxi"


class BaggageType(str, Enum):
    """Luggage handling for flight tickets."""

    AUTO_TRANSFER = "auto-transfer"
    SELF_CHECK_IN = "self-check-in"
    COUNTER = "counter"


class RenderFormat(str, Enum):
    """Which representation of an itinerary the caller wants back."""

    JSON = "json"
    HUMAN = "human"
    BOTH = "both"

    @property
    def includes_human(self) -> bool:
        return self in (RenderFormat.HUMAN, RenderFormat.BOTH)


@dataclass(frozen=True, slots=True)
class Place:
    """A named location acting as a node of the route graph.

    Attributes:
        id: Identity of the place; two places are the same node iff ids match
        name: Display name (station, airport, stop)
        code: Optional IATA or station code
    """

    id: Optional[str]
    name: str
    code: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TrainDetails:
    number: str
    platform: str
    line: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TramDetails:
    line: str


@dataclass(frozen=True, slots=True)
class BusDetails:
    route: Optional[str] = None
    operator: Optional[str] = None


@dataclass(frozen=True, slots=True)
class BoatDetails:
    vessel: Optional[str] = None
    dock: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FlightDetails:
    flight_number: str
    airline: Optional[str] = None
    gate: Optional[str] = None
    baggage: Optional[BaggageType] = None


@dataclass(frozen=True, slots=True)
class TaxiDetails:
    company: Optional[str] = None
    driver: Optional[str] = None
    vehicle_id: Optional[str] = None


TicketDetails = Union[
    TrainDetails,
    TramDetails,
    BusDetails,
    BoatDetails,
    FlightDetails,
    TaxiDetails,
]


@dataclass(frozen=True, slots=True)
class Ticket:
    """A directed leg between two places.

    The sorting engine only reads ``id``, ``type``, ``from_place`` and
    ``to_place``; ``details`` holds the mode-specific payload used when
    rendering a narrative itinerary.

    Attributes:
        id: Ticket identity
        type: Travel mode
        from_place: Departure place (may be None in malformed input)
        to_place: Arrival place (may be None in malformed input)
        seat: Optional seat assignment
        notes: Optional free-form notes
        details: Mode-specific payload
        meta: Free-form metadata supplied by the caller
    """

    id: Optional[str]
    type: TicketType
    from_place: Optional[Place]
    to_place: Optional[Place]
    seat: Optional[str] = None
    notes: Optional[str] = None
    details: Optional[TicketDetails] = None
    meta: Mapping[str, Any] = field(default_factory=dict)

    @property
    def from_id(self) -> Optional[str]:
        return self.from_place.id if self.from_place is not None else None

    @property
    def to_id(self) -> Optional[str]:
        return self.to_place.id if self.to_place is not None else None

    @property
    def has_endpoints(self) -> bool:
        """Check if both endpoints carry a usable identity."""
        return bool(self.from_id) and bool(self.to_id)


@dataclass(frozen=True, slots=True)
class StageOutcome:
    """Outcome of one stage of the sorting pipeline.

    Attributes:
        ok: Whether the stage accepted its input
        errors: Ordered error messages (empty when ok)
        warnings: Ordered non-fatal messages
    """

    ok: bool
    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_messages(
        cls,
        errors: list[str],
        warnings: Optional[list[str]] = None,
    ) -> StageOutcome:
        return cls(
            ok=not errors,
            errors=tuple(errors),
            warnings=tuple(warnings or ()),
        )


@dataclass(frozen=True, slots=True)
class EndpointOutcome:
    """Start and end place of a structurally valid route graph."""

    ok: bool
    start_place: Optional[Place] = None
    end_place: Optional[Place] = None
    errors: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class TraversalOutcome:
    """Ordered tickets produced by walking the route graph."""

    ok: bool
    sorted_tickets: tuple[Ticket, ...] = field(default_factory=tuple)
    errors: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class SortingResult:
    """Complete output of one sorting call.

    When ``is_valid`` is False, ``sorted_tickets`` is empty and both
    endpoints are None.

    Attributes:
        sorted_tickets: Tickets in travel order
        start_place: First departure place
        end_place: Final arrival place
        is_valid: Whether the tickets form exactly one journey
        errors: Ordered error messages
        warnings: Ordered non-fatal messages
    """

    sorted_tickets: tuple[Ticket, ...] = field(default_factory=tuple)
    start_place: Optional[Place] = None
    end_place: Optional[Place] = None
    is_valid: bool = False
    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def failure(
        cls,
        errors: tuple[str, ...] | list[str],
        warnings: tuple[str, ...] | list[str] = (),
    ) -> SortingResult:
        return cls(errors=tuple(errors), warnings=tuple(warnings))

    @property
    def ticket_count(self) -> int:
        return len(self.sorted_tickets)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable view of the result."""
        return {
            "isValid": self.is_valid,
            "startPlace": _place_to_dict(self.start_place),
            "endPlace": _place_to_dict(self.end_place),
            "sortedTickets": [_ticket_to_dict(t) for t in self.sorted_tickets],
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def _place_to_dict(place: Optional[Place]) -> Optional[dict[str, Any]]:
    if place is None:
        return None
    data: dict[str, Any] = {"id": place.id, "name": place.name}
    if place.code:
        data["code"] = place.code
    return data


def _ticket_to_dict(ticket: Ticket) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": ticket.id,
        "type": ticket.type.value,
        "from": _place_to_dict(ticket.from_place),
        "to": _place_to_dict(ticket.to_place),
    }
    if ticket.seat:
        data["seat"] = ticket.seat
    if ticket.notes:
        data["notes"] = ticket.notes
    if ticket.details is not None:
        for details_field in fields(ticket.details):
            value = getattr(ticket.details, details_field.name)
            if value is not None:
                data[details_field.name] = (
                    value.value if isinstance(value, Enum) else value
                )
    return data
