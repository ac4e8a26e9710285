"""Collaborator interfaces used by the catalog and booking services.

Implementations must be swappable: the simulated confirmation gateway stands
in for a real transport.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from culinary.domain import EventId
from culinary.domain.booking import BookingConfirmation

CATALOG_PAGE = "cuisines"
EVENT_DETAIL_PAGE = "event-detail"


class Navigator(ABC):
    """Interface for moving the visitor between pages."""

    @abstractmethod
    def navigate(self, page: str, entity_id: str | None = None) -> None:
        """Show ``page``, optionally focused on one entity."""
        ...


class ConfirmationGateway(ABC):
    """Interface for confirming a submitted booking."""

    @abstractmethod
    async def confirm(
        self, event_id: EventId, fields: Mapping[str, str]
    ) -> BookingConfirmation:
        """Confirm a booking.

        Raises:
            SubmissionFailedError: If the booking was not confirmed.
        """
        ...
