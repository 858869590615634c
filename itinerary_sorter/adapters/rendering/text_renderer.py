"""Plain-text itinerary renderer.

Produces numbered, human-readable steps from a sorted ticket list,
one template per travel mode.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Sequence

from ...domain.errors import RenderingError
from ...domain.models import (
    BaggageType,
    BoatDetails,
    BusDetails,
    FlightDetails,
    TaxiDetails,
    Ticket,
    TicketType,
    TrainDetails,
    TramDetails,
)

_BAGGAGE_NOTES: Dict[BaggageType, str] = {
    BaggageType.SELF_CHECK_IN: " Self-check-in luggage at counter.",
    BaggageType.AUTO_TRANSFER: (
        " Luggage will transfer automatically from the last flight."
    ),
    BaggageType.COUNTER: " Check in luggage at counter.",
}


def _names(ticket: Ticket) -> tuple[str, str]:
    if ticket.from_place is None or ticket.to_place is None:
        raise RenderingError(
            f"Ticket {ticket.id} has no departure or arrival place",
            renderer_type="text",
        )
    return ticket.from_place.name, ticket.to_place.name


def _seat_suffix(ticket: Ticket) -> str:
    return f" Seat number {ticket.seat}." if ticket.seat else ""


def _train_step(ticket: Ticket) -> str:
    origin, destination = _names(ticket)
    details = ticket.details
    number = details.number if isinstance(details, TrainDetails) else ""
    step = f"Board train {number}".rstrip()
    if isinstance(details, TrainDetails) and details.platform:
        step += f", Platform {details.platform}"
    return f"{step} from {origin} to {destination}.{_seat_suffix(ticket)}"


def _tram_step(ticket: Ticket) -> str:
    origin, destination = _names(ticket)
    details = ticket.details
    line = details.line if isinstance(details, TramDetails) else ""
    tram = f"the Tram {line}".rstrip()
    return f"Board {tram} from {origin} to {destination}."


def _flight_step(ticket: Ticket) -> str:
    origin, destination = _names(ticket)
    details = ticket.details
    if not isinstance(details, FlightDetails):
        details = FlightDetails(flight_number="")

    carrier = f"the {details.airline} flight" if details.airline else "the flight"
    step = f"From {origin}, board {carrier} {details.flight_number}".rstrip()
    step += f" to {destination}"
    if details.gate:
        step += f" from gate {details.gate}"
    if ticket.seat:
        step += f", seat {ticket.seat}"
    step += "."
    if details.baggage is not None:
        step += _BAGGAGE_NOTES[details.baggage]
    return step


def _bus_step(ticket: Ticket) -> str:
    origin, destination = _names(ticket)
    details = ticket.details
    step = "Board the"
    if isinstance(details, BusDetails) and details.operator:
        step += f" {details.operator}"
    step += f" bus from {origin} to {destination}."
    if ticket.seat:
        return step + f" Seat number {ticket.seat}."
    return step + " No seat assignment."


def _boat_step(ticket: Ticket) -> str:
    origin, destination = _names(ticket)
    details = ticket.details if isinstance(ticket.details, BoatDetails) else None
    vessel = details.vessel if details and details.vessel else "boat"
    step = f"Board the {vessel} from {origin} to {destination}"
    if details and details.dock:
        step += f" at dock {details.dock}"
    return step + "." + _seat_suffix(ticket)


def _taxi_step(ticket: Ticket) -> str:
    origin, destination = _names(ticket)
    details = ticket.details if isinstance(ticket.details, TaxiDetails) else None
    step = "Take"
    if details and details.company:
        step += f" a {details.company}"
    step += f" taxi from {origin} to {destination}."
    if details and details.driver:
        step += f" Driver: {details.driver}."
    if details and details.vehicle_id:
        step += f" Vehicle ID: {details.vehicle_id}."
    return step


def _generic_step(ticket: Ticket) -> str:
    origin, destination = _names(ticket)
    return (
        f"Travel by {ticket.type.value} from {origin} to {destination}."
        f"{_seat_suffix(ticket)}"
    )


_TEMPLATES: Dict[TicketType, Callable[[Ticket], str]] = {
    TicketType.TRAIN: _train_step,
    TicketType.TRAM: _tram_step,
    TicketType.FLIGHT: _flight_step,
    TicketType.BUS: _bus_step,
    TicketType.BOAT: _boat_step,
    TicketType.TAXI: _taxi_step,
}


@dataclass
class TextItineraryRenderer:
    """Renderer implementing ItineraryRendererPort with English templates.

    Output starts with ``"0. Start."`` and ends with
    ``"{n + 1}. Last destination reached."``.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, tickets: Sequence[Ticket]) -> tuple[str, ...]:
        steps = ["0. Start."]
        for number, ticket in enumerate(tickets, start=1):
            template = _TEMPLATES.get(ticket.type, _generic_step)
            steps.append(f"{number}. {template(ticket)}")
        steps.append(f"{len(tickets) + 1}. Last destination reached.")

        self._logger.debug("Itinerary rendered", extra={"steps": len(steps)})
        return tuple(steps)
