"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details

Each endpoint keeps its own error mapping.
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from hotels.domain.errors import ConflictError, DomainError, NotFoundError
from hotels.handlers.serializers import HotelSerializer, HotelWithRoomsSerializer
from hotels.services import HotelService
from hotels.stores import DjangoHotelStore
from tickets.stores import DjangoEnrollmentStore, DjangoTicketStore

logger = logging.getLogger("hotels.handlers")


def get_hotel_service() -> HotelService:
    return HotelService(
        hotel_store=DjangoHotelStore(),
        enrollment_store=DjangoEnrollmentStore(),
        ticket_store=DjangoTicketStore(),
    )


def _parse_hotel_id(value: str) -> int:
    # int() also accepts "1_0", " 1" and non-ASCII digits.
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"Invalid hotel id {value!r}")
    return int(value)


def _error_response(error: DomainError, status_code: int) -> Response:
    return Response({"code": error.code.value, "message": error.message}, status=status_code)


class HotelListView(APIView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        try:
            hotels = get_hotel_service().list_hotels(request.user.id)
        except ConflictError as error:
            return _error_response(error, status.HTTP_402_PAYMENT_REQUIRED)
        except NotFoundError as error:
            return _error_response(error, status.HTTP_404_NOT_FOUND)
        except Exception:
            logger.exception("Unexpected error listing hotels")
            return Response(status=status.HTTP_400_BAD_REQUEST)

        return Response(HotelSerializer(hotels, many=True).data)


class HotelDetailView(APIView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            hotel = get_hotel_service().get_hotel(_parse_hotel_id(hotel_id))
        except NotFoundError as error:
            return _error_response(error, status.HTTP_404_NOT_FOUND)
        except Exception:
            logger.warning("Hotel lookup failed for id %r", hotel_id, exc_info=True)
            return Response(status=status.HTTP_404_NOT_FOUND)

        return Response(HotelWithRoomsSerializer(hotel).data)
