"""JSON ticket source adapter.

Reads ticket payloads shaped like the itinerary API request body and
turns them into domain tickets:
- Pydantic validation discriminated on the ticket ``type``
- In-memory place resolution (same id, or same name, is the same place)
- Every validation problem reported at once
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from ...domain.errors import TicketLoadError
from ...domain.models import (
    BaggageType,
    BoatDetails,
    BusDetails,
    FlightDetails,
    Place,
    TaxiDetails,
    Ticket,
    TicketDetails,
    TicketType,
    TrainDetails,
    TramDetails,
)


class PlaceIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    id: Optional[str] = None
    name: str = Field(min_length=1, max_length=255)
    code: Optional[str] = Field(default=None, min_length=1, max_length=20)

    @field_validator("code")
    @classmethod
    def _upper_code(cls, value: Optional[str]) -> Optional[str]:
        return value.upper() if value is not None else None


class TicketIn(BaseModel):
    model_config = ConfigDict(
        str_strip_whitespace=True, populate_by_name=True, extra="ignore"
    )

    id: Optional[str] = None
    from_place: PlaceIn = Field(alias="from")
    to_place: PlaceIn = Field(alias="to")
    seat: Optional[str] = None
    notes: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)

    def details(self) -> Optional[TicketDetails]:
        return None


class TrainTicketIn(TicketIn):
    type: Literal["train"]
    number: str = Field(min_length=1)
    platform: str = Field(min_length=1)
    line: Optional[str] = None

    def details(self) -> TicketDetails:
        return TrainDetails(number=self.number, platform=self.platform, line=self.line)


class TramTicketIn(TicketIn):
    type: Literal["tram"]
    line: str = Field(min_length=1)

    def details(self) -> TicketDetails:
        return TramDetails(line=self.line)


class BusTicketIn(TicketIn):
    type: Literal["bus"]
    route: Optional[str] = None
    operator: Optional[str] = None

    def details(self) -> TicketDetails:
        return BusDetails(route=self.route, operator=self.operator)


class BoatTicketIn(TicketIn):
    type: Literal["boat"]
    vessel: Optional[str] = None
    dock: Optional[str] = None

    def details(self) -> TicketDetails:
        return BoatDetails(vessel=self.vessel, dock=self.dock)


class FlightTicketIn(TicketIn):
    type: Literal["flight"]
    flight_number: str = Field(alias="flightNumber", min_length=1)
    airline: Optional[str] = None
    gate: Optional[str] = None
    baggage: Optional[BaggageType] = None

    def details(self) -> TicketDetails:
        return FlightDetails(
            flight_number=self.flight_number,
            airline=self.airline,
            gate=self.gate,
            baggage=self.baggage,
        )


class TaxiTicketIn(TicketIn):
    type: Literal["taxi"]
    company: Optional[str] = None
    driver: Optional[str] = None
    vehicle_id: Optional[str] = Field(default=None, alias="vehicleId")

    def details(self) -> TicketDetails:
        return TaxiDetails(
            company=self.company, driver=self.driver, vehicle_id=self.vehicle_id
        )


AnyTicketIn = Annotated[
    Union[
        TrainTicketIn,
        TramTicketIn,
        BusTicketIn,
        BoatTicketIn,
        FlightTicketIn,
        TaxiTicketIn,
    ],
    Field(discriminator="type"),
]


class ItineraryRequestIn(BaseModel):
    tickets: List[AnyTicketIn] = Field(min_length=1)


@dataclass
class JsonTicketSource:
    """Ticket source reading the itinerary request JSON format.

    Accepts ``{"tickets": [...]}`` or a bare list of tickets. Places are
    resolved within one payload: an explicit ``id`` wins, otherwise the
    trimmed name identifies the place.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self, path: Union[str, Path]) -> Sequence[Ticket]:
        """Load tickets from a JSON file.

        Raises:
            TicketLoadError: If the file cannot be read or is invalid.
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as e:
            raise TicketLoadError(
                f"Failed to read tickets: {e}",
                source=str(path),
                cause=e,
            )

        tickets = self._build(payload, source=str(path))
        self._logger.info(
            "Tickets loaded",
            extra={"path": str(path), "tickets": len(tickets)},
        )
        return tickets

    def parse(self, payload: Any) -> Sequence[Ticket]:
        """Build tickets from decoded JSON data.

        Raises:
            TicketLoadError: If the payload does not validate.
        """
        return self._build(payload, source="payload")

    def _build(self, payload: Any, source: str) -> tuple[Ticket, ...]:
        if isinstance(payload, list):
            payload = {"tickets": payload}

        try:
            request = ItineraryRequestIn.model_validate(payload)
        except ValidationError as e:
            details = tuple(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise TicketLoadError(
                f"Invalid ticket data ({len(details)} problems)",
                source=source,
                details=details,
                cause=e,
            )

        places: Dict[str, Place] = {}
        tickets: List[Ticket] = []
        for index, entry in enumerate(request.tickets, start=1):
            tickets.append(
                Ticket(
                    id=entry.id or f"ticket-{index}",
                    type=TicketType(entry.type),
                    from_place=_resolve_place(entry.from_place, places),
                    to_place=_resolve_place(entry.to_place, places),
                    seat=entry.seat,
                    notes=entry.notes,
                    details=entry.details(),
                    meta=dict(entry.meta),
                )
            )
        return tuple(tickets)


def _resolve_place(data: PlaceIn, places: Dict[str, Place]) -> Place:
    place_id = data.id or f"place:{data.name}"
    existing = places.get(place_id)
    if existing is not None:
        return existing

    place = Place(id=place_id, name=data.name, code=data.code)
    places[place_id] = place
    return place
