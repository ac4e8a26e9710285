"""Domain error codes for the culinary module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_QUERY = "INVALID_QUERY"
    EVENT_SOLD_OUT = "EVENT_SOLD_OUT"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    SUBMISSION_IN_FLIGHT = "SUBMISSION_IN_FLIGHT"
    SUBMISSION_FAILED = "SUBMISSION_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        object.__setattr__(self, "event_id", event_id)


class InvalidEventIdError(DomainError):
    """Raised when an event ID is blank or malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidQueryError(DomainError):
    """Raised when a catalog query names an unknown category, country or sort."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_QUERY,
            message=f"Unsupported {field}: {value}",
        )
        object.__setattr__(self, "field", field)


class EventSoldOutError(DomainError):
    """Raised when booking is attempted on an event with no spots left."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_SOLD_OUT,
            message="Event is sold out",
        )
        object.__setattr__(self, "event_id", event_id)


class CapacityExceededError(DomainError):
    """Raised when spots ran out between opening the form and submitting it."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message="No spots left for this event",
        )
        object.__setattr__(self, "event_id", event_id)


class InvalidTransitionError(DomainError):
    """Raised when a booking action is not allowed in the current state."""

    def __init__(self, action: str, state: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TRANSITION,
            message=f"Cannot {action} while booking is {state}",
        )
        object.__setattr__(self, "state", state)


class SubmissionInFlightError(DomainError):
    """Raised when a booking action would interrupt a pending submission."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SUBMISSION_IN_FLIGHT,
            message="A booking submission is already in progress",
        )


class SubmissionFailedError(DomainError):
    """Raised by a confirmation gateway when the booking was not confirmed."""

    def __init__(self, reason: str = "Booking could not be confirmed") -> None:
        super().__init__(
            code=ErrorCode.SUBMISSION_FAILED,
            message=reason,
        )
