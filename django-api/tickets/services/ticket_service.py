"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (stores, gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from typing import Any

from tickets.domain import AccountId, OrderTotals, PurchaseRequest, PurchaseResult, TicketTypeRequest
from tickets.domain.errors import DomainError, InvalidPurchaseError, InvalidTicketRequestsError
from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService
from tickets.services.aggregator import calculate_totals
from tickets.services.validator import OrderValidator
from tickets.stores.interfaces import TicketCatalog

logger = logging.getLogger(__name__)


class TicketService:
    """Service for purchasing tickets."""

    def __init__(
        self,
        catalog: TicketCatalog,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
        validator: OrderValidator | None = None,
    ) -> None:
        self._catalog = catalog
        self._payment_service = payment_service
        self._reservation_service = reservation_service
        self._validator = validator or OrderValidator()

    def purchase(self, account_id: Any, *ticket_type_requests: Any) -> PurchaseResult:
        """Validate, price and pay for tickets, then reserve their seats.

        Payment is always taken before seats are reserved. Nothing is charged
        or reserved unless every validation step passes.

        Raises:
            InvalidPurchaseError: For any failure; the original error is
                chained as ``__cause__``.
        """
        try:
            request = self._build_request(account_id, ticket_type_requests)
            totals = calculate_totals(request.ticket_type_requests, self._catalog.get_tickets_data())
            self._validator.validate(totals)
            self._charge_and_reserve(request, totals)
        except DomainError as err:
            logger.warning("Purchase rejected for account %r: %s", account_id, err)
            raise InvalidPurchaseError(err.message) from err
        except Exception as err:
            logger.exception("Purchase failed for account %r", account_id)
            raise InvalidPurchaseError(str(err)) from err

        logger.info(
            "Purchased %s tickets (%s seats) for account %s, total %s",
            totals.total_quantity,
            totals.total_seats,
            request.account_id.value,
            totals.total_price,
        )
        return PurchaseResult(
            account_id=request.account_id,
            total_price=totals.total_price,
            total_seats=totals.total_seats,
            message=f"Purchased {totals.total_quantity} tickets for {totals.total_price}",
        )

    def _build_request(self, account_id: Any, ticket_type_requests: tuple[Any, ...]) -> PurchaseRequest:
        valid_account_id = AccountId.from_value(account_id)

        if not ticket_type_requests:
            raise InvalidTicketRequestsError("At least one ticket request is required")
        for request in ticket_type_requests:
            if not isinstance(request, TicketTypeRequest):
                raise InvalidTicketRequestsError(
                    "All ticket requests must be TicketTypeRequest instances"
                )

        return PurchaseRequest(account_id=valid_account_id, ticket_type_requests=ticket_type_requests)

    def _charge_and_reserve(self, request: PurchaseRequest, totals: OrderTotals) -> None:
        # A failed reservation does not refund the payment.
        account_id = request.account_id.value
        self._payment_service.make_payment(account_id, totals.total_price.amount)
        self._reservation_service.reserve_seat(account_id, totals.total_seats)
