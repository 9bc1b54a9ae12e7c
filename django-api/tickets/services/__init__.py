from tickets.services.aggregator import calculate_totals
from tickets.services.ticket_service import TicketService
from tickets.services.validator import OrderValidator

__all__ = ["calculate_totals", "OrderValidator", "TicketService"]
