"""Gateways that record requests in the log instead of calling a provider.

Used as the default wiring until real providers are configured through the
TICKET_PAYMENT_SERVICE and SEAT_RESERVATION_SERVICE settings.
"""

import logging
from decimal import Decimal

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class LoggingTicketPaymentService(TicketPaymentService):
    def make_payment(self, account_id: int, amount: Decimal) -> None:
        logger.info("Payment of %s requested for account %s", amount, account_id)


class LoggingSeatReservationService(SeatReservationService):
    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        logger.info("Reservation of %s seats requested for account %s", total_seats, account_id)
