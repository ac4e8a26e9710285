"""Booking session primitives: workflow states, form schema and results."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from culinary.domain.models import Event
from culinary.domain.value_objects import EventId, Money


class BookingState(str, Enum):
    """States of a booking session."""

    CLOSED = "closed"
    FORM_OPEN = "form_open"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class FieldKind(str, Enum):
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    TEXTAREA = "textarea"


@dataclass(frozen=True)
class FormField:
    """Field schema handed to the form renderer."""

    name: str
    label: str
    kind: FieldKind
    required: bool = False
    placeholder: str = ""
    rows: int | None = None


BOOKING_FORM_FIELDS: tuple[FormField, ...] = (
    FormField("firstName", "First Name", FieldKind.TEXT, required=True),
    FormField("lastName", "Last Name", FieldKind.TEXT, required=True),
    FormField("email", "Email Address", FieldKind.EMAIL, required=True),
    FormField("phone", "Phone Number", FieldKind.TEL, required=True),
    FormField(
        "dietaryRestrictions",
        "Dietary Restrictions",
        FieldKind.TEXTAREA,
        placeholder="Please list any allergies or dietary restrictions...",
        rows=3,
    ),
    FormField(
        "specialRequests",
        "Special Requests",
        FieldKind.TEXTAREA,
        placeholder="Any special requests or comments...",
        rows=3,
    ),
)


@dataclass(frozen=True)
class BookingSummary:
    """Event details shown at the top of the booking form."""

    event_id: EventId
    title: str
    date: datetime
    location: str
    price: Money

    @classmethod
    def for_event(cls, event: Event) -> "BookingSummary":
        return cls(
            event_id=event.id,
            title=event.title,
            date=event.date,
            location=event.location,
            price=event.price,
        )


@dataclass(frozen=True)
class BookingConfirmation:
    """Outcome of a successful confirmation."""

    reference: str
    event_id: EventId
    confirmed_at: datetime
    fields: dict[str, str] = field(default_factory=dict)
