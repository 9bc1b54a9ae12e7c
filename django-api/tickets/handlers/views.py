"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import TicketTypeRequest
from tickets.domain.errors import DomainError, InvalidPurchaseError
from tickets.handlers.serializers import PurchaseRequestSerializer, PurchaseResultSerializer
from tickets.services.factory import get_ticket_service

INVALID_REQUEST = "INVALID_REQUEST"
PURCHASE_FAILED = "PURCHASE_FAILED"


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {
                    "code": INVALID_REQUEST,
                    "message": "Invalid request body",
                    "errors": serializer.errors,
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        data = serializer.validated_data
        try:
            ticket_type_requests = [
                TicketTypeRequest(item["ticket_type"], item["quantity"]) for item in data["tickets"]
            ]
            result = get_ticket_service().purchase(data["account_id"], *ticket_type_requests)
        except DomainError as err:
            return _error_response(err)

        return Response(PurchaseResultSerializer(result).data, status=status.HTTP_201_CREATED)


def _error_response(err: DomainError) -> Response:
    if not isinstance(err, InvalidPurchaseError):
        body = {"code": err.code.value, "message": err.message}
    elif err.reason is None:
        body = {"code": PURCHASE_FAILED, "message": "Failed to purchase tickets"}
    else:
        body = {"code": err.reason.value, "message": err.message}
    return Response(body, status=status.HTTP_400_BAD_REQUEST)
