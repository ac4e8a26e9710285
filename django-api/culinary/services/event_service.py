"""Event service - catalog business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from django.core.cache import cache

from culinary import caching
from culinary.domain import CapacityStatus, Event, EventId
from culinary.domain.capacity import capacity_status
from culinary.domain.catalog import (
    CatalogQuery,
    category_options,
    country_options,
    filter_and_sort,
)
from culinary.domain.errors import EventNotFoundError, InvalidEventIdError
from culinary.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for catalog discovery operations."""

    def __init__(self, store: EventStore, use_cache: bool = True) -> None:
        self._store = store
        self._use_cache = use_cache

    def list_events(self) -> list[Event]:
        """Return all events in repository order."""
        if not self._use_cache:
            return self._store.list_events()
        events = cache.get(caching.EVENT_LIST_KEY)
        if events is None:
            events = self._store.list_events()
            cache.set(caching.EVENT_LIST_KEY, events, caching.timeout())
        return events

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is blank.
            EventNotFoundError: If the event does not exist.
        """
        parsed = self._parse_id(event_id)
        event = cache.get(caching.event_key(parsed.value)) if self._use_cache else None
        if event is None:
            event = self._store.get_event(parsed)
            if event is None:
                raise EventNotFoundError(event_id)
            if self._use_cache:
                cache.set(caching.event_key(parsed.value), event, caching.timeout())
        return event

    def refresh_event(self, event_id: str) -> Event:
        """Return the event straight from the store, bypassing the cache.

        Raises:
            InvalidEventIdError: If the event_id is blank.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(self._parse_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def search(self, query: CatalogQuery) -> list[Event]:
        """Return the filtered and sorted catalog for a query."""
        if not self._use_cache:
            return filter_and_sort(self.list_events(), query)
        key = caching.query_key(query.cache_key())
        results = cache.get(key)
        if results is None:
            results = filter_and_sort(self.list_events(), query)
            cache.set(key, results, caching.timeout())
            logger.debug("Catalog query %r matched %d events", query, len(results))
        return results

    def country_options(self) -> list[str]:
        return country_options(self.list_events())

    def category_options(self) -> list[str]:
        return category_options()

    def capacity_for(self, event_id: str) -> CapacityStatus:
        """Return capacity status for an event.

        Raises:
            InvalidEventIdError: If the event_id is blank.
            EventNotFoundError: If the event does not exist.
        """
        return capacity_status(self.get_event(event_id))

    @staticmethod
    def _parse_id(event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except (AttributeError, ValueError):
            raise InvalidEventIdError() from None
