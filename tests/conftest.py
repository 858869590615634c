"""Shared fixtures for the itinerary sorter tests."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import pytest

from itinerary_sorter.config import reset_config
from itinerary_sorter.container import reset_container
from itinerary_sorter.domain.models import (
    BusDetails,
    FlightDetails,
    Place,
    TaxiDetails,
    Ticket,
    TicketType,
    TrainDetails,
    TramDetails,
)

TicketFactory = Callable[..., Ticket]


def place(place_id: str, name: Optional[str] = None) -> Place:
    return Place(id=place_id, name=name or place_id)


@pytest.fixture(autouse=True)
def _isolate_global_state():
    root = logging.getLogger()
    level = root.level
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()
    root.setLevel(level)
    for handler in list(root.handlers):
        if handler.get_name() == "itinerary_sorter":
            root.removeHandler(handler)


@pytest.fixture
def make_ticket() -> TicketFactory:
    """Build a ticket between two place ids (names default to the ids)."""
    counter = iter(range(1, 1000))

    def _make(
        from_id: Optional[str],
        to_id: Optional[str],
        ticket_type: TicketType = TicketType.TRAIN,
        **kwargs,
    ) -> Ticket:
        return Ticket(
            id=kwargs.pop("id", f"t{next(counter)}"),
            type=ticket_type,
            from_place=place(from_id) if from_id is not None else None,
            to_place=place(to_id) if to_id is not None else None,
            **kwargs,
        )

    return _make


@pytest.fixture
def journey() -> list[Ticket]:
    """Six legs in travel order: train, tram, flight, taxi, train, bus."""
    st_anton = Place(id="place-a", name="St. Anton am Arlberg Bahnhof", code="STANT")
    innsbruck = Place(id="place-b", name="Innsbruck Hbf", code="INN")
    innsbruck_airport = Place(id="place-c", name="Innsbruck Airport", code="INNA")
    venice_airport = Place(id="place-d", name="Venice Airport", code="VCE")
    santa_lucia = Place(id="place-e", name="Gara Venetia Santa Lucia")
    bologna = Place(id="place-f", name="Bologna San Ruffillo", code="BOL")
    marconi = Place(id="place-g", name="Bologna Guglielmo Marconi Airport", code="BLQ")

    return [
        Ticket(
            id="ticket-1",
            type=TicketType.TRAIN,
            from_place=st_anton,
            to_place=innsbruck,
            seat="17C",
            details=TrainDetails(number="RJX 765", platform="3"),
        ),
        Ticket(
            id="ticket-2",
            type=TicketType.TRAM,
            from_place=innsbruck,
            to_place=innsbruck_airport,
            details=TramDetails(line="S5"),
        ),
        Ticket(
            id="ticket-3",
            type=TicketType.FLIGHT,
            from_place=innsbruck_airport,
            to_place=venice_airport,
            seat="18B",
            details=FlightDetails(flight_number="AA904", gate="10"),
        ),
        Ticket(
            id="ticket-4",
            type=TicketType.TAXI,
            from_place=venice_airport,
            to_place=santa_lucia,
            details=TaxiDetails(company="Yellow Cab"),
        ),
        Ticket(
            id="ticket-5",
            type=TicketType.TRAIN,
            from_place=santa_lucia,
            to_place=bologna,
            seat="13F",
            details=TrainDetails(number="ICN 35780", platform="1"),
        ),
        Ticket(
            id="ticket-6",
            type=TicketType.BUS,
            from_place=bologna,
            to_place=marconi,
            details=BusDetails(route="Airport Bus"),
        ),
    ]
