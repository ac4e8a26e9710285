from django.urls import path

from culinary.handlers import (
    BookingFormView,
    BookingView,
    EventDetailView,
    EventListView,
    EventOptionsView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/options", EventOptionsView.as_view(), name="event-options"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/booking-form",
        BookingFormView.as_view(),
        name="booking-form",
    ),
    path(
        "events/<str:event_id>/bookings",
        BookingView.as_view(),
        name="booking-create",
    ),
]
