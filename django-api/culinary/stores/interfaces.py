"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. The catalog treats the
store as read-only.
"""

from abc import ABC, abstractmethod

from culinary.domain import Event, EventId


class EventStore(ABC):
    """Interface for culinary event lookups."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in catalog order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...
