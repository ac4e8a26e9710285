"""Serializers for transforming domain models to API responses.

``BookingRequestSerializer`` is the form collaborator for HTTP bookings: it
owns required-field validation before the booking workflow sees the data.
"""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    cuisine = serializers.CharField()
    chef = serializers.CharField()
    country = serializers.CharField()
    category = serializers.CharField(source="category.value")
    location = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateTimeField()
    price = serializers.DecimalField(
        source="price.amount", max_digits=10, decimal_places=2
    )
    max_participants = serializers.IntegerField(source="capacity.max_participants")
    current_participants = serializers.IntegerField(
        source="capacity.current_participants"
    )
    image_url = serializers.CharField(allow_null=True)


class EventDetailSerializer(EventSerializer):
    """Event with the fields shown on its detail page."""

    long_description = serializers.CharField()
    duration = serializers.CharField()
    highlights = serializers.ListField(child=serializers.CharField())


class CapacityStatusSerializer(serializers.Serializer):
    available_spots = serializers.IntegerField()
    is_almost_full = serializers.BooleanField()
    is_sold_out = serializers.BooleanField()
    fill_ratio = serializers.FloatField()


class FormFieldSerializer(serializers.Serializer):
    name = serializers.CharField()
    label = serializers.CharField()
    kind = serializers.CharField(source="kind.value")
    required = serializers.BooleanField()
    placeholder = serializers.CharField()
    rows = serializers.IntegerField(allow_null=True)


class BookingSummarySerializer(serializers.Serializer):
    event_id = serializers.CharField(source="event_id.value")
    title = serializers.CharField()
    date = serializers.DateTimeField()
    location = serializers.CharField()
    price = serializers.DecimalField(
        source="price.amount", max_digits=10, decimal_places=2
    )


class BookingRequestSerializer(serializers.Serializer):
    """Validates the booking form submitted by a visitor."""

    firstName = serializers.CharField(max_length=100)
    lastName = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=30)
    dietaryRestrictions = serializers.CharField(required=False, allow_blank=True)
    specialRequests = serializers.CharField(required=False, allow_blank=True)


class BookingConfirmationSerializer(serializers.Serializer):
    reference = serializers.CharField()
    event_id = serializers.CharField(source="event_id.value")
    confirmed_at = serializers.DateTimeField()
    status = serializers.SerializerMethodField()

    def get_status(self, obj) -> str:
        return "confirmed"
