"""Service construction from Django settings."""

from django.conf import settings

from culinary.services.booking_service import BookingService
from culinary.services.catalog_state import CatalogQueryState
from culinary.services.confirmation import SimulatedConfirmationGateway
from culinary.services.event_service import EventService
from culinary.services.interfaces import Navigator
from culinary.stores.django_store import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def get_booking_service(navigator: Navigator | None = None) -> BookingService:
    config = settings.CULINARY
    gateway = SimulatedConfirmationGateway(
        delay=config["CONFIRMATION_DELAY"],
        fails=config["CONFIRMATION_FAILS"],
    )
    return BookingService(get_event_service(), gateway, navigator)


def get_catalog_state(navigator: Navigator | None = None) -> CatalogQueryState:
    return CatalogQueryState(
        get_event_service(),
        navigator,
        select_delay=settings.CULINARY["SELECT_DELAY"],
    )
