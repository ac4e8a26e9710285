from culinary.handlers.views import (
    BookingFormView,
    BookingView,
    EventDetailView,
    EventListView,
    EventOptionsView,
)

__all__ = [
    "EventListView",
    "EventOptionsView",
    "EventDetailView",
    "BookingFormView",
    "BookingView",
]
