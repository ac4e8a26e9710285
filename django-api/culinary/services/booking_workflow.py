"""Booking workflow state machine.

One workflow instance is one booking session for one event::

    CLOSED -> FORM_OPEN -> SUBMITTING -> CONFIRMED -> CLOSED
                 ^             |
                 +-- FAILED <--+

Entering SUBMITTING starts exactly one confirmation task; only that task's
outcome moves the session on. Closing the form is refused while a submission
is in flight, so a pending submission is never abandoned. Cancelling the task
or an unexpected gateway error counts as a failed submission.
"""

import asyncio
import logging
from collections.abc import Mapping

from culinary.domain import CapacityStatus, Event, EventId
from culinary.domain.booking import (
    BOOKING_FORM_FIELDS,
    BookingConfirmation,
    BookingState,
    BookingSummary,
    FormField,
)
from culinary.domain.capacity import capacity_status
from culinary.domain.errors import (
    CapacityExceededError,
    EventSoldOutError,
    InvalidTransitionError,
    SubmissionFailedError,
    SubmissionInFlightError,
)
from culinary.services.interfaces import CATALOG_PAGE, ConfirmationGateway, Navigator

logger = logging.getLogger(__name__)

TRANSITIONS: dict[BookingState, frozenset[BookingState]] = {
    BookingState.CLOSED: frozenset({BookingState.FORM_OPEN}),
    BookingState.FORM_OPEN: frozenset({BookingState.SUBMITTING, BookingState.CLOSED}),
    BookingState.SUBMITTING: frozenset({BookingState.CONFIRMED, BookingState.FAILED}),
    BookingState.FAILED: frozenset({BookingState.FORM_OPEN}),
    BookingState.CONFIRMED: frozenset({BookingState.CLOSED}),
}


class BookingWorkflow:
    """Booking session for a single event."""

    def __init__(
        self,
        event: Event,
        gateway: ConfirmationGateway,
        navigator: Navigator | None = None,
    ) -> None:
        self._event = event
        self._gateway = gateway
        self._navigator = navigator
        self._state = BookingState.CLOSED
        self._history = [BookingState.CLOSED]
        self._task: asyncio.Task | None = None
        self._fields: dict[str, str] = {}
        self.last_error: SubmissionFailedError | None = None
        self.confirmation: BookingConfirmation | None = None

    @property
    def event_id(self) -> EventId:
        return self._event.id

    @property
    def state(self) -> BookingState:
        return self._state

    @property
    def history(self) -> tuple[BookingState, ...]:
        return tuple(self._history)

    @property
    def capacity(self) -> CapacityStatus:
        return capacity_status(self._event)

    @property
    def summary(self) -> BookingSummary:
        return BookingSummary.for_event(self._event)

    @property
    def form_fields(self) -> tuple[FormField, ...]:
        return BOOKING_FORM_FIELDS

    @property
    def fields(self) -> dict[str, str]:
        """Fields of the last submission, kept for a retry after failure."""
        return dict(self._fields)

    @property
    def is_book_now_enabled(self) -> bool:
        return self._state is BookingState.CLOSED and not self.capacity.is_sold_out

    @property
    def is_modal_open(self) -> bool:
        return self._state in (BookingState.FORM_OPEN, BookingState.SUBMITTING)

    @property
    def is_submit_enabled(self) -> bool:
        return self._state is BookingState.FORM_OPEN

    @property
    def is_success_visible(self) -> bool:
        return self._state is BookingState.CONFIRMED

    def open_form(self) -> None:
        """Open the booking form.

        Raises:
            EventSoldOutError: If the event has no spots left.
            InvalidTransitionError: If the session is not closed.
        """
        if self._state is not BookingState.CLOSED:
            raise InvalidTransitionError("open the booking form", self._state.value)
        if self.capacity.is_sold_out:
            logger.info("Refused booking form for sold out event %s", self.event_id)
            raise EventSoldOutError(self.event_id.value)
        self._enter(BookingState.FORM_OPEN)

    def close_form(self) -> None:
        """Cancel the booking form without side effects.

        Raises:
            SubmissionInFlightError: If a submission is pending.
            InvalidTransitionError: If the form is not open.
        """
        if self._state is BookingState.SUBMITTING:
            raise SubmissionInFlightError()
        if self._state is not BookingState.FORM_OPEN:
            raise InvalidTransitionError("close the booking form", self._state.value)
        self._enter(BookingState.CLOSED)

    def submit(
        self, fields: Mapping[str, str], latest: Event | None = None
    ) -> asyncio.Task:
        """Submit validated form fields and start the confirmation task.

        Must be called from a running event loop. When ``latest`` is given,
        capacity is checked again against that snapshot of the event.

        Raises:
            SubmissionInFlightError: If a submission is already pending.
            InvalidTransitionError: If the form is not open.
            CapacityExceededError: If ``latest`` shows the event sold out.
        """
        if self._state is BookingState.SUBMITTING:
            raise SubmissionInFlightError()
        if self._state is not BookingState.FORM_OPEN:
            raise InvalidTransitionError("submit a booking", self._state.value)
        if latest is not None:
            if latest.id != self.event_id:
                raise ValueError("Snapshot belongs to a different event")
            self._event = latest
            if self.capacity.is_sold_out:
                logger.warning("Event %s sold out before submission", self.event_id)
                raise CapacityExceededError(self.event_id.value)

        loop = asyncio.get_running_loop()
        self._fields = dict(fields)
        self.last_error = None
        self._enter(BookingState.SUBMITTING)
        self._task = loop.create_task(self._confirm(dict(self._fields)))
        self._task.add_done_callback(self._settle_cancelled)
        return self._task

    async def wait(self) -> BookingState:
        """Wait for the outstanding confirmation, if any, and return the state."""
        if self._task is not None:
            await self._task
        return self._state

    def acknowledge(self) -> None:
        """Dismiss the success message and return to the catalog.

        Raises:
            InvalidTransitionError: If the booking is not confirmed.
        """
        if self._state is not BookingState.CONFIRMED:
            raise InvalidTransitionError("acknowledge the booking", self._state.value)
        self._enter(BookingState.CLOSED)
        if self._navigator is not None:
            self._navigator.navigate(CATALOG_PAGE)

    async def _confirm(self, fields: dict[str, str]) -> None:
        try:
            confirmation = await self._gateway.confirm(self.event_id, fields)
        except SubmissionFailedError as exc:
            logger.warning("Booking for %s failed: %s", self.event_id, exc.message)
            self._fail(exc)
            return
        except Exception:
            logger.exception("Confirmation gateway error for %s", self.event_id)
            self._fail(SubmissionFailedError())
            return
        self.confirmation = confirmation
        self._enter(BookingState.CONFIRMED)
        logger.info("Booking %s confirmed for %s", confirmation.reference, self.event_id)

    def _settle_cancelled(self, task: asyncio.Task) -> None:
        # A task cancelled before its first step never runs _confirm.
        if task.cancelled() and self._state is BookingState.SUBMITTING:
            logger.warning("Booking for %s was cancelled", self.event_id)
            self._fail(SubmissionFailedError("Booking was cancelled"))

    def _fail(self, error: SubmissionFailedError) -> None:
        self.last_error = error
        self._enter(BookingState.FAILED)
        self._enter(BookingState.FORM_OPEN)

    def can_transition_to(self, state: BookingState) -> bool:
        return state in TRANSITIONS[self._state]

    def _enter(self, state: BookingState) -> None:
        if not self.can_transition_to(state):
            raise InvalidTransitionError(f"move to {state.value}", self._state.value)
        logger.debug(
            "Booking session %s: %s -> %s", self.event_id, self._state.value, state.value
        )
        self._state = state
        self._history.append(state)
