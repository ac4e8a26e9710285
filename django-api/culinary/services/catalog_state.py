"""Per-view catalog query state.

The visible result set is recomputed from (repository, query) on every
input change; nothing is derived from a previous result.
"""

import asyncio
import logging
from enum import Enum

from culinary.domain import Event
from culinary.domain.catalog import CatalogQuery, SortKey
from culinary.domain.errors import InvalidQueryError
from culinary.services.event_service import EventService
from culinary.services.interfaces import EVENT_DETAIL_PAGE, Navigator

logger = logging.getLogger(__name__)


class ResultStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"


class CatalogQueryState:
    """Search, category, country and sort selection for one catalog view."""

    def __init__(
        self,
        service: EventService,
        navigator: Navigator | None = None,
        select_delay: float = 0.0,
    ) -> None:
        self._service = service
        self._navigator = navigator
        self._select_delay = select_delay
        self._query = CatalogQuery()
        self._is_loading = False
        self._results = self._recompute()

    @property
    def query(self) -> CatalogQuery:
        return self._query

    @property
    def results(self) -> tuple[Event, ...]:
        return self._results

    @property
    def status(self) -> ResultStatus:
        if self._is_loading:
            return ResultStatus.LOADING
        return ResultStatus.READY if self._results else ResultStatus.EMPTY

    @property
    def categories(self) -> list[str]:
        return self._service.category_options()

    @property
    def countries(self) -> list[str]:
        return self._service.country_options()

    def set_search(self, text: str) -> None:
        self._update(search_text=text)

    def set_category(self, category: str) -> None:
        if category not in self.categories:
            raise InvalidQueryError("category", category)
        self._update(category=category)

    def set_country(self, country: str) -> None:
        if country not in self.countries:
            raise InvalidQueryError("country", country)
        self._update(country=country)

    def set_sort(self, sort_key: SortKey | str) -> None:
        try:
            self._update(sort_key=SortKey(sort_key))
        except ValueError:
            raise InvalidQueryError("sort", str(sort_key)) from None

    def clear(self) -> None:
        self._query = CatalogQuery()
        self._results = self._recompute()

    async def select_event(self, event_id: str) -> None:
        """Show the loading state briefly, then open the event's detail page."""
        self._is_loading = True
        try:
            await asyncio.sleep(self._select_delay)
            if self._navigator is not None:
                self._navigator.navigate(EVENT_DETAIL_PAGE, event_id)
        finally:
            self._is_loading = False

    def _update(self, **changes) -> None:
        self._query = self._query.with_changes(**changes)
        self._results = self._recompute()

    def _recompute(self) -> tuple[Event, ...]:
        results = tuple(self._service.search(self._query))
        logger.debug("Catalog recomputed: %d events for %r", len(results), self._query)
        return results
