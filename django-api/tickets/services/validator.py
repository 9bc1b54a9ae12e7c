"""Business rules a purchase must satisfy once its totals are known."""

from tickets.domain import OrderTotals, TicketType
from tickets.domain.errors import (
    InfantRatioExceededError,
    NoAdultTicketError,
    OrderSizeExceededError,
)

DEFAULT_MAX_TICKETS = 25


class OrderValidator:
    """Checks aggregated order totals against the purchase rules.

    Rules run in a fixed order and the first violation is raised:
    at least one adult, no more infants than adults (one infant per adult
    lap), and at most ``max_tickets`` tickets in total, infants included.
    """

    def __init__(self, max_tickets: int = DEFAULT_MAX_TICKETS) -> None:
        self._max_tickets = max_tickets

    @property
    def max_tickets(self) -> int:
        return self._max_tickets

    def validate(self, totals: OrderTotals) -> None:
        """Raise a domain error for the first rule the order breaks.

        Raises:
            NoAdultTicketError: If the order has no adult ticket.
            InfantRatioExceededError: If infants outnumber adults.
            OrderSizeExceededError: If the order exceeds max_tickets.
        """
        adults = totals.quantity_of(TicketType.ADULT)
        if adults < 1:
            raise NoAdultTicketError()

        if totals.quantity_of(TicketType.INFANT) > adults:
            raise InfantRatioExceededError()

        if totals.total_quantity > self._max_tickets:
            raise OrderSizeExceededError(self._max_tickets)
