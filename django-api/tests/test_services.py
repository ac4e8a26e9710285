"""Unit tests for the catalog and booking services.

These test error handling and domain error mapping over an in-memory store.
Run with: pytest tests/test_services.py -v
"""

import pytest

from culinary.domain.booking import BookingState
from culinary.domain.catalog import CatalogQuery, SortKey
from culinary.domain.errors import (
    CapacityExceededError,
    EventNotFoundError,
    EventSoldOutError,
    InvalidEventIdError,
    InvalidQueryError,
    SubmissionFailedError,
)
from culinary.services.booking_service import BookingService
from culinary.services.catalog_state import CatalogQueryState, ResultStatus
from culinary.services.confirmation import SimulatedConfirmationGateway
from culinary.services.event_service import EventService
from culinary.stores.interfaces import EventStore
from culinary.stores.memory_store import InMemoryEventStore
from factories import make_event

FIELDS = {"firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com", "phone": "1"}


class SellingOutStore(EventStore):
    """Reports a sold-out event only on lookups after the first."""

    def __init__(self, event, sold_out) -> None:
        self._event = event
        self._sold_out = sold_out
        self.lookups = 0

    def list_events(self):
        return [self._event]

    def get_event(self, event_id):
        self.lookups += 1
        return self._event if self.lookups == 1 else self._sold_out


@pytest.fixture
def service(scenario_events) -> EventService:
    return EventService(InMemoryEventStore(scenario_events))


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidEventIdError):
            service.get_event("  ")

    def test_get_event_not_found_raises_error(self, service):
        with pytest.raises(EventNotFoundError):
            service.get_event("october")

    def test_get_event_returns_event(self, service):
        assert service.get_event("july").price.amount == 60

    def test_search_sorts_filtered_events(self, service):
        results = service.search(CatalogQuery(sort_key=SortKey.BY_PRICE_DESC))

        assert [e.id.value for e in results] == ["may", "july", "june"]

    def test_search_results_are_identical_when_cached(self, service):
        query = CatalogQuery(search_text="pasta")

        assert service.search(query) == service.search(query)

    def test_search_without_cache(self, scenario_events):
        service = EventService(InMemoryEventStore(scenario_events), use_cache=False)

        assert len(service.search(CatalogQuery())) == 3

    def test_country_options(self, service):
        assert service.country_options() == ["All", "Italy"]

    def test_capacity_for(self, service):
        status = service.capacity_for("june")

        assert status.available_spots == 2
        assert status.is_almost_full

    def test_duplicate_ids_are_rejected_by_memory_store(self):
        with pytest.raises(ValueError):
            InMemoryEventStore([make_event("a"), make_event("a")])


class TestCatalogQueryState:
    @pytest.fixture
    def state(self, service, navigator) -> CatalogQueryState:
        return CatalogQueryState(service, navigator)

    def test_initial_results_are_date_sorted(self, state):
        assert [e.id.value for e in state.results] == ["may", "june", "july"]
        assert state.status is ResultStatus.READY
        assert not state.query.has_active_filters

    def test_changes_recompute_results(self, state):
        state.set_sort("price-low")
        assert [e.id.value for e in state.results] == ["june", "july", "may"]

        state.set_search("no such thing")
        assert state.results == ()
        assert state.status is ResultStatus.EMPTY

    def test_clear_restores_defaults(self, state):
        state.set_search("pasta")
        state.set_category("Workshop")
        state.set_country("Italy")
        state.set_sort(SortKey.BY_POPULARITY)

        state.clear()

        assert state.query == CatalogQuery()
        assert [e.id.value for e in state.results] == ["may", "june", "july"]

    def test_options_reflect_repository(self, state):
        assert state.countries == ["All", "Italy"]
        assert state.categories[0] == "All"

    @pytest.mark.parametrize(
        "setter, value",
        [("set_category", "Brunch"), ("set_country", "Peru"), ("set_sort", "alphabetical")],
    )
    def test_unknown_values_are_rejected(self, state, setter, value):
        with pytest.raises(InvalidQueryError):
            getattr(state, setter)(value)
        assert state.query == CatalogQuery()

    @pytest.mark.asyncio
    async def test_select_event_navigates_to_detail(self, state, navigator):
        await state.select_event("june")

        assert navigator.visits == [("event-detail", "june")]
        assert state.status is ResultStatus.READY

    def test_empty_repository_is_empty_not_loading(self, navigator):
        state = CatalogQueryState(EventService(InMemoryEventStore()), navigator)

        assert state.status is ResultStatus.EMPTY
        assert state.countries == ["All"]


class TestBookingService:
    def make_service(self, store, fails=False):
        gateway = SimulatedConfirmationGateway(delay=0, fails=fails)
        return BookingService(EventService(store, use_cache=False), gateway)

    def test_book_confirms(self, scenario_events):
        service = self.make_service(InMemoryEventStore(scenario_events))

        confirmation = service.book("june", FIELDS)

        assert confirmation.event_id.value == "june"
        assert confirmation.fields == FIELDS

    def test_book_sold_out_event_is_refused(self, scenario_events):
        service = self.make_service(InMemoryEventStore(scenario_events))

        with pytest.raises(EventSoldOutError):
            service.book("may", FIELDS)

    def test_book_unknown_event(self, scenario_events):
        service = self.make_service(InMemoryEventStore(scenario_events))

        with pytest.raises(EventNotFoundError):
            service.book("october", FIELDS)

    def test_book_failure_is_raised(self, scenario_events):
        service = self.make_service(InMemoryEventStore(scenario_events), fails=True)

        with pytest.raises(SubmissionFailedError):
            service.book("june", FIELDS)

    def test_book_rechecks_capacity_before_submitting(self):
        store = SellingOutStore(
            make_event("june", current_participants=10),
            make_event("june", current_participants=12),
        )

        with pytest.raises(CapacityExceededError):
            self.make_service(store).book("june", FIELDS)

    def test_start_session_is_closed(self, scenario_events):
        service = self.make_service(InMemoryEventStore(scenario_events))

        assert service.start_session("june").state is BookingState.CLOSED
        assert service.open_form("june").state is BookingState.FORM_OPEN
