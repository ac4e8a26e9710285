"""Builders for domain objects and fake collaborators used across tests."""

from datetime import datetime, timezone

from culinary.domain import Capacity, Category, Event, EventId, Money
from culinary.services.interfaces import Navigator


class RecordingNavigator(Navigator):
    def __init__(self) -> None:
        self.visits: list[tuple[str, str | None]] = []

    def navigate(self, page: str, entity_id: str | None = None) -> None:
        self.visits.append((page, entity_id))


def make_event(
    event_id: str = "evt-1",
    *,
    title: str = "Pasta Workshop",
    cuisine: str = "Italian",
    chef: str = "Marco Rossi",
    country: str = "Italy",
    category: Category = Category.WORKSHOP,
    date: str = "2024-06-01",
    price: str = "40",
    max_participants: int = 12,
    current_participants: int = 10,
) -> Event:
    return Event(
        id=EventId(event_id),
        title=title,
        cuisine=cuisine,
        chef=chef,
        country=country,
        category=category,
        location="Bologna",
        description="Fresh pasta by hand",
        date=datetime.fromisoformat(date).replace(tzinfo=timezone.utc),
        price=Money.of(price),
        capacity=Capacity(max_participants, current_participants),
    )
