"""Capacity tracking for culinary events."""

from culinary.domain.models import CapacityStatus, Event

ALMOST_FULL_THRESHOLD = 3


def capacity_status(event: Event) -> CapacityStatus:
    """Derive availability from an event's capacity.

    Total over trusted events: an event with no spots left is sold out and
    never reported as almost full.
    """
    capacity = event.capacity
    available = capacity.available_spots
    sold_out = available == 0
    if capacity.max_participants:
        fill_ratio = capacity.current_participants / capacity.max_participants
    else:
        fill_ratio = 0.0
    return CapacityStatus(
        available_spots=available,
        is_almost_full=not sold_out and 0 < available <= ALMOST_FULL_THRESHOLD,
        is_sold_out=sold_out,
        fill_ratio=fill_ratio,
    )
