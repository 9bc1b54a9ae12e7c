from tickets.domain.models import (
    CatalogEntry,
    OrderTotals,
    PurchaseRequest,
    PurchaseResult,
    TicketTypeRequest,
    TypeTotals,
)
from tickets.domain.value_objects import AccountId, Money, TicketType

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "CatalogEntry",
    "TypeTotals",
    "OrderTotals",
    "PurchaseRequest",
    "PurchaseResult",
    "AccountId",
    "Money",
]
