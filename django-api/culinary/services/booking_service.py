"""Booking service - opens booking sessions and runs them to completion."""

from collections.abc import Mapping

from asgiref.sync import async_to_sync

from culinary.domain import Event
from culinary.domain.booking import BookingConfirmation, BookingState
from culinary.services.booking_workflow import BookingWorkflow
from culinary.services.event_service import EventService
from culinary.services.interfaces import ConfirmationGateway, Navigator


class BookingService:
    """Service for booking seats in catalog events."""

    def __init__(
        self,
        events: EventService,
        gateway: ConfirmationGateway,
        navigator: Navigator | None = None,
    ) -> None:
        self._events = events
        self._gateway = gateway
        self._navigator = navigator

    def start_session(self, event_id: str) -> BookingWorkflow:
        """Return a closed booking session for an event.

        Raises:
            InvalidEventIdError: If the event_id is blank.
            EventNotFoundError: If the event does not exist.
        """
        event = self._events.get_event(event_id)
        return BookingWorkflow(event, self._gateway, self._navigator)

    def open_form(self, event_id: str) -> BookingWorkflow:
        """Return a session with the booking form open.

        Raises:
            EventNotFoundError: If the event does not exist.
            EventSoldOutError: If the event has no spots left.
        """
        session = self.start_session(event_id)
        session.open_form()
        return session

    def book(self, event_id: str, fields: Mapping[str, str]) -> BookingConfirmation:
        """Book a seat with already validated form fields.

        Raises:
            EventNotFoundError: If the event does not exist.
            EventSoldOutError: If the event was sold out when the form opened.
            CapacityExceededError: If the event sold out before submission.
            SubmissionFailedError: If the confirmation failed.
        """
        session = self.open_form(event_id)
        latest = self._events.refresh_event(event_id)
        return async_to_sync(self._submit)(session, fields, latest)

    @staticmethod
    async def _submit(
        session: BookingWorkflow, fields: Mapping[str, str], latest: Event
    ) -> BookingConfirmation:
        session.submit(fields, latest=latest)
        if await session.wait() is not BookingState.CONFIRMED:
            raise session.last_error
        return session.confirmation
