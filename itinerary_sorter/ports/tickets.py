"""Ticket source port - Abstraction for obtaining resolved tickets.

The sorting engine consumes tickets whose places are already resolved.
A ticket source is responsible for reading raw ticket data and
producing those domain objects.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, Sequence, Union

if TYPE_CHECKING:
    from ..domain.models import Ticket


class TicketSourcePort(Protocol):
    """Port for loading tickets.

    Implementation: adapters/tickets/json_source.py
    """

    def load(self, path: Union[str, Path]) -> Sequence[Ticket]:
        """Load tickets from a file.

        Args:
            path: Location of the ticket data.

        Returns:
            Tickets with resolved places, in file order.
        """
        ...

    def parse(self, payload: Any) -> Sequence[Ticket]:
        """Build tickets from already-decoded data.

        Args:
            payload: Decoded request body or file contents.

        Returns:
            Tickets with resolved places, in payload order.
        """
        ...
