"""First sorting stage: reject tickets that cannot form graph edges."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..domain.models import StageOutcome, Ticket


@dataclass
class InputValidator:
    """Per-ticket structural checks run before any graph work.

    Every offending ticket is reported, not only the first one.

    Attributes:
        max_tickets: Optional upper bound on the batch size
    """

    max_tickets: Optional[int] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def validate(self, tickets: Optional[Sequence[Ticket]]) -> StageOutcome:
        if not tickets:
            return StageOutcome.from_messages(["No tickets provided for sorting"])

        if self.max_tickets is not None and len(tickets) > self.max_tickets:
            return StageOutcome.from_messages(
                [
                    f"Too many tickets provided for sorting "
                    f"({len(tickets)} > {self.max_tickets})"
                ]
            )

        errors: List[str] = []
        for index, ticket in enumerate(tickets, start=1):
            errors.extend(self._check_ticket(index, ticket))

        if errors:
            self._logger.debug(
                "Input validation failed",
                extra={"tickets": len(tickets), "errors": len(errors)},
            )
        return StageOutcome.from_messages(errors)

    @staticmethod
    def _check_ticket(index: int, ticket: Ticket) -> List[str]:
        errors: List[str] = []
        from_id = ticket.from_id
        to_id = ticket.to_id

        if not from_id:
            errors.append(f"Ticket {index} has invalid 'from' place")
        if not to_id:
            errors.append(f"Ticket {index} has invalid 'to' place")
        if from_id and to_id and from_id == to_id:
            assert ticket.from_place is not None
            errors.append(
                f"Ticket {index} has same 'from' and 'to' place: "
                f"{ticket.from_place.name}"
            )
        return errors
