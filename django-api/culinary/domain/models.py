"""Domain models representing catalog state.

These are pure domain objects with no API input rules.
Django ORM models are in culinary/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from culinary.domain.value_objects import Capacity, EventId, Money


class Category(str, Enum):
    """Kinds of culinary events offered in the catalog."""

    WORKSHOP = "Workshop"
    TASTING = "Tasting"
    FESTIVAL = "Festival"
    MASTERCLASS = "Masterclass"


@dataclass(frozen=True)
class Event:
    """Domain representation of a bookable culinary Event."""

    id: EventId
    title: str
    cuisine: str
    chef: str
    country: str
    category: Category
    location: str
    description: str
    date: datetime
    price: Money
    capacity: Capacity
    long_description: str = ""
    duration: str = ""
    image_url: str | None = None
    highlights: tuple[str, ...] = ()


@dataclass(frozen=True)
class CapacityStatus:
    """Booking availability derived from an event's capacity."""

    available_spots: int
    is_almost_full: bool
    is_sold_out: bool
    fill_ratio: float = 0.0
