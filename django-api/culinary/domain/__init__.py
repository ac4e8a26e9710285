from culinary.domain.models import CapacityStatus, Category, Event
from culinary.domain.value_objects import Capacity, EventId, Money

__all__ = [
    "Event",
    "Category",
    "CapacityStatus",
    "EventId",
    "Money",
    "Capacity",
]
