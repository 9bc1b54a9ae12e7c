from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService
from tickets.gateways.logging_gateways import (
    LoggingSeatReservationService,
    LoggingTicketPaymentService,
)

__all__ = [
    "TicketPaymentService",
    "SeatReservationService",
    "LoggingTicketPaymentService",
    "LoggingSeatReservationService",
]
