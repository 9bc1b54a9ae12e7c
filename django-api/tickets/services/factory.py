"""Builds a TicketService from Django settings."""

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.services.ticket_service import TicketService
from tickets.services.validator import DEFAULT_MAX_TICKETS, OrderValidator
from tickets.stores import StaticTicketCatalog

DEFAULT_PAYMENT_SERVICE = "tickets.gateways.LoggingTicketPaymentService"
DEFAULT_RESERVATION_SERVICE = "tickets.gateways.LoggingSeatReservationService"


def get_ticket_service() -> TicketService:
    payment_cls = import_string(getattr(settings, "TICKET_PAYMENT_SERVICE", DEFAULT_PAYMENT_SERVICE))
    reservation_cls = import_string(
        getattr(settings, "SEAT_RESERVATION_SERVICE", DEFAULT_RESERVATION_SERVICE)
    )
    return TicketService(
        catalog=StaticTicketCatalog.from_settings(),
        payment_service=payment_cls(),
        reservation_service=reservation_cls(),
        validator=OrderValidator(
            max_tickets=getattr(settings, "MAX_TICKETS_PER_PURCHASE", DEFAULT_MAX_TICKETS)
        ),
    )
