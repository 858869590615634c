"""Final re-check of the ordered ticket sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..domain.models import StageOutcome, Ticket


@dataclass
class SequenceValidator:
    """Verify that consecutive tickets connect.

    Attributes:
        tight_connection_warnings: Warn when two consecutive tickets share a
            mode and change at the same place name
    """

    tight_connection_warnings: bool = True

    def validate(self, tickets: Sequence[Ticket]) -> StageOutcome:
        if not tickets:
            return StageOutcome.from_messages(["No tickets in sorted sequence"])

        errors: List[str] = []
        warnings: List[str] = []

        for index in range(len(tickets) - 1):
            current, following = tickets[index], tickets[index + 1]
            assert current.to_place is not None and following.from_place is not None

            if current.to_id != following.from_id:
                errors.append(
                    f"Gap in route between ticket {index + 1} and {index + 2}: "
                    f"'{current.to_place.name}' does not connect to "
                    f"'{following.from_place.name}'"
                )

            if (
                self.tight_connection_warnings
                and current.type == following.type
                and current.to_place.name == following.from_place.name
            ):
                warnings.append(
                    f"Potential tight connection at '{current.to_place.name}' "
                    f"between two {current.type.value} tickets"
                )

        return StageOutcome.from_messages(errors, warnings)
