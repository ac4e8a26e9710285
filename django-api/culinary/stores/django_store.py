"""Django ORM implementation of the EventStore."""

from culinary import models
from culinary.domain import Capacity, Category, Event, EventId, Money
from culinary.stores.interfaces import EventStore


def to_domain(row: models.CulinaryEvent) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        cuisine=row.cuisine,
        chef=row.chef,
        country=row.country,
        category=Category(row.category),
        location=row.location,
        description=row.description,
        date=row.date,
        price=Money(row.price),
        capacity=Capacity(
            max_participants=row.max_participants,
            current_participants=row.current_participants,
        ),
        long_description=row.long_description,
        duration=row.duration,
        image_url=row.image_url or None,
        highlights=tuple(row.highlights or ()),
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [to_domain(row) for row in models.CulinaryEvent.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.CulinaryEvent.objects.filter(pk=event_id.value).first()
        return to_domain(row) if row is not None else None
