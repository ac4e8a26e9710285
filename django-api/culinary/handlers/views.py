"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from culinary.domain.catalog import CatalogQuery, SortKey
from culinary.domain.errors import DomainError, ErrorCode
from culinary.handlers.serializers import (
    BookingConfirmationSerializer,
    BookingRequestSerializer,
    BookingSummarySerializer,
    CapacityStatusSerializer,
    EventDetailSerializer,
    EventSerializer,
    FormFieldSerializer,
)
from culinary.services.providers import get_booking_service, get_event_service

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_QUERY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_SOLD_OUT: status.HTTP_409_CONFLICT,
    ErrorCode.CAPACITY_EXCEEDED: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.SUBMISSION_IN_FLIGHT: status.HTTP_409_CONFLICT,
    ErrorCode.SUBMISSION_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        try:
            query = CatalogQuery.from_params(
                search=params.get("search"),
                category=params.get("category"),
                country=params.get("country"),
                sort=params.get("sort"),
            )
        except DomainError as error:
            return error_response(error)

        events = get_event_service().search(query)
        return Response(
            {
                "count": len(events),
                "status": "ready" if events else "empty",
                "results": EventSerializer(events, many=True).data,
            }
        )


class EventOptionsView(APIView):
    """Handler for GET /api/events/options"""

    def get(self, request: Request) -> Response:
        service = get_event_service()
        return Response(
            {
                "categories": service.category_options(),
                "countries": service.country_options(),
                "sorts": [key.value for key in SortKey],
            }
        )


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        service = get_event_service()
        try:
            event = service.get_event(event_id)
        except DomainError as error:
            return error_response(error)

        data = dict(EventDetailSerializer(event).data)
        data["capacity"] = CapacityStatusSerializer(service.capacity_for(event_id)).data
        return Response(data)


class BookingFormView(APIView):
    """Handler for GET /api/events/{event_id}/booking-form"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            session = get_booking_service().open_form(event_id)
        except DomainError as error:
            return error_response(error)

        return Response(
            {
                "summary": BookingSummarySerializer(session.summary).data,
                "fields": FormFieldSerializer(session.form_fields, many=True).data,
                "capacity": CapacityStatusSerializer(session.capacity).data,
            }
        )


class BookingView(APIView):
    """Handler for POST /api/events/{event_id}/bookings"""

    def post(self, request: Request, event_id: str) -> Response:
        form = BookingRequestSerializer(data=request.data)
        if not form.is_valid():
            return Response(
                {"code": "VALIDATION_ERROR", "errors": form.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            confirmation = get_booking_service().book(event_id, form.validated_data)
        except DomainError as error:
            logger.info("Booking for %s rejected: %s", event_id, error)
            return error_response(error)

        return Response(
            BookingConfirmationSerializer(confirmation).data,
            status=status.HTTP_201_CREATED,
        )
