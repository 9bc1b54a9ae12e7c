"""Domain models for a single ticket purchase.

These are pure domain objects; nothing here is persisted.
"""

from dataclasses import dataclass, field
from typing import Any, Self

from tickets.domain.errors import (
    InvalidQuantityError,
    InvalidTicketTypeError,
    NegativeQuantityError,
)
from tickets.domain.value_objects import AccountId, Money, TicketType


@dataclass(frozen=True)
class TicketTypeRequest:
    """A requested number of tickets of one type.

    ``ticket_type`` may be given as a TicketType member or its name
    (``"ADULT"``); it is stored as the member.
    """

    ticket_type: TicketType
    quantity: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "ticket_type", _parse_ticket_type(self.ticket_type))
        if type(self.quantity) is not int:
            raise InvalidQuantityError()
        if self.quantity < 0:
            raise NegativeQuantityError()

    def get_ticket_type(self) -> TicketType:
        return self.ticket_type

    def get_no_of_tickets(self) -> int:
        return self.quantity


def _parse_ticket_type(value: Any) -> TicketType:
    if isinstance(value, TicketType):
        return value
    if isinstance(value, str) and value in TicketType.__members__:
        return TicketType[value]
    raise InvalidTicketTypeError()


@dataclass(frozen=True)
class CatalogEntry:
    """Unit price and seats consumed by one ticket of a type."""

    unit_price: Money
    seats_per_ticket: int

    def __post_init__(self) -> None:
        if self.seats_per_ticket < 0:
            raise ValueError("Seats per ticket cannot be negative")


@dataclass(frozen=True)
class TypeTotals:
    """Accumulated totals for one ticket type."""

    quantity: int = 0
    total_price: Money = field(default_factory=Money.zero)
    total_seats: int = 0

    def add(self, quantity: int, entry: CatalogEntry) -> Self:
        return type(self)(
            quantity=self.quantity + quantity,
            total_price=self.total_price + entry.unit_price.times(quantity),
            total_seats=self.total_seats + entry.seats_per_ticket * quantity,
        )


@dataclass(frozen=True)
class OrderTotals:
    """Per-type and order-wide totals of a purchase."""

    by_type: dict[TicketType, TypeTotals]
    total_quantity: int
    total_price: Money
    total_seats: int

    def quantity_of(self, ticket_type: TicketType) -> int:
        totals = self.by_type.get(ticket_type)
        return totals.quantity if totals else 0


@dataclass(frozen=True)
class PurchaseRequest:
    """Validated input of one purchase call."""

    account_id: AccountId
    ticket_type_requests: tuple[TicketTypeRequest, ...]


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of a successful purchase."""

    account_id: AccountId
    total_price: Money
    total_seats: int
    message: str
    success: bool = True
