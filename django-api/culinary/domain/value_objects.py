"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Unique identifier for a culinary Event."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("EventId cannot be blank")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def of(cls, amount: Decimal | int | str) -> Self:
        return cls(amount=Decimal(str(amount)))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Seat limit of an event and how many of those seats are taken.

    The repository is trusted to keep ``current_participants`` within
    ``max_participants``; only negative values are rejected here.
    """

    max_participants: int
    current_participants: int = 0

    def __post_init__(self) -> None:
        if self.max_participants < 0:
            raise ValueError("Capacity cannot be negative")
        if self.current_participants < 0:
            raise ValueError("Participant count cannot be negative")

    @property
    def available_spots(self) -> int:
        return self.max_participants - self.current_participants
