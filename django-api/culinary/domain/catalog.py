"""Catalog discovery: query model, filtering and sorting.

Everything here is pure. ``filter_and_sort`` never mutates its input and
returns the same sequence for the same (events, query) pair, so callers may
cache results keyed by ``CatalogQuery.cache_key()``.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Self

from culinary.domain.errors import InvalidQueryError
from culinary.domain.models import Category, Event

ALL = "All"


class SortKey(str, Enum):
    """Catalog orderings. Values are the names the catalog UI sends."""

    BY_DATE = "date"
    BY_PRICE_ASC = "price-low"
    BY_PRICE_DESC = "price-high"
    BY_POPULARITY = "popularity"


@dataclass(frozen=True)
class CatalogQuery:
    """Search text, category, country and sort key driving catalog visibility."""

    search_text: str = ""
    category: str = ALL
    country: str = ALL
    sort_key: SortKey = SortKey.BY_DATE

    @classmethod
    def from_params(
        cls,
        search: str | None = None,
        category: str | None = None,
        country: str | None = None,
        sort: str | None = None,
    ) -> Self:
        """Build a query from raw request values, rejecting unknown enums.

        Raises:
            InvalidQueryError: If category or sort is not a known value.
        """
        category = category or ALL
        if category != ALL and category not in {c.value for c in Category}:
            raise InvalidQueryError("category", category)
        try:
            sort_key = SortKey(sort) if sort else SortKey.BY_DATE
        except ValueError:
            raise InvalidQueryError("sort", sort) from None
        return cls(
            search_text=search or "",
            category=category,
            country=country or ALL,
            sort_key=sort_key,
        )

    @property
    def has_active_filters(self) -> bool:
        return self != CatalogQuery()

    def with_changes(self, **changes: Any) -> "CatalogQuery":
        return replace(self, **changes)

    def cache_key(self) -> str:
        return "|".join(
            (self.search_text.lower(), self.category, self.country, self.sort_key.value)
        )


def matches_search(event: Event, search_text: str) -> bool:
    if not search_text:
        return True
    needle = search_text.lower()
    return any(
        needle in field.lower() for field in (event.title, event.cuisine, event.chef)
    )


def matches_category(event: Event, category: str) -> bool:
    return category == ALL or event.category.value == category


def matches_country(event: Event, country: str) -> bool:
    return country == ALL or event.country == country


def filter_events(events: Iterable[Event], query: CatalogQuery) -> list[Event]:
    """Return the events passing all three gates, in repository order."""
    return [
        event
        for event in events
        if matches_search(event, query.search_text)
        and matches_category(event, query.category)
        and matches_country(event, query.country)
    ]


_SORTS: dict[SortKey, tuple[Callable[[Event], Any], bool]] = {
    SortKey.BY_DATE: (lambda e: e.date, False),
    SortKey.BY_PRICE_ASC: (lambda e: e.price.amount, False),
    SortKey.BY_PRICE_DESC: (lambda e: e.price.amount, True),
    SortKey.BY_POPULARITY: (lambda e: e.capacity.current_participants, True),
}


def sort_events(events: Iterable[Event], sort_key: SortKey) -> list[Event]:
    """Sort events by the given key. Equal keys keep their input order."""
    key, reverse = _SORTS[sort_key]
    # sorted() with reverse=True is still stable for equal keys
    return sorted(events, key=key, reverse=reverse)


def filter_and_sort(events: Sequence[Event], query: CatalogQuery) -> list[Event]:
    return sort_events(filter_events(events, query), query.sort_key)


def country_options(events: Iterable[Event]) -> list[str]:
    """Return "All" followed by each distinct country in first-seen order."""
    return [ALL, *dict.fromkeys(event.country for event in events)]


def category_options() -> list[str]:
    return [ALL, *(c.value for c in Category)]
