"""In-memory EventStore over a fixed sequence of events."""

from collections.abc import Iterable

from culinary.domain import Event, EventId
from culinary.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Immutable store backed by a tuple, preserving the given order."""

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events = tuple(events)
        self._by_id = {event.id: event for event in self._events}
        if len(self._by_id) != len(self._events):
            raise ValueError("Event identifiers must be unique")

    def list_events(self) -> list[Event]:
        return list(self._events)

    def get_event(self, event_id: EventId) -> Event | None:
        return self._by_id.get(event_id)
