"""Simulated booking confirmation."""

import asyncio
from collections.abc import Mapping
from uuid import uuid4

from django.utils import timezone

from culinary.domain import EventId
from culinary.domain.booking import BookingConfirmation
from culinary.domain.errors import SubmissionFailedError
from culinary.services.interfaces import ConfirmationGateway


class SimulatedConfirmationGateway(ConfirmationGateway):
    """Waits for a fixed delay, then confirms or fails every booking."""

    def __init__(self, delay: float = 2.0, fails: bool = False) -> None:
        self._delay = delay
        self._fails = fails

    async def confirm(
        self, event_id: EventId, fields: Mapping[str, str]
    ) -> BookingConfirmation:
        await asyncio.sleep(self._delay)
        if self._fails:
            raise SubmissionFailedError()
        return BookingConfirmation(
            reference=uuid4().hex,
            event_id=event_id,
            confirmed_at=timezone.now(),
            fields=dict(fields),
        )
