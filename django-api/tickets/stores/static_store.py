"""In-memory ticket catalog backed by a fixed price list."""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Self

from django.conf import settings

from tickets.domain import CatalogEntry, Money, TicketType
from tickets.stores.interfaces import TicketCatalog

DEFAULT_TICKET_CATALOG = {
    "INFANT": {"price": "0", "seats": 0},
    "CHILD": {"price": "15", "seats": 1},
    "ADULT": {"price": "25", "seats": 1},
}


class StaticTicketCatalog(TicketCatalog):
    """Catalog returning the same snapshot on every read."""

    def __init__(self, entries: Mapping[TicketType, CatalogEntry]) -> None:
        missing = [t.value for t in TicketType if t not in entries]
        if missing:
            raise ValueError(f"Ticket catalog is missing entries for: {', '.join(missing)}")
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_config(cls, config: Mapping[str, Mapping[str, Any]]) -> Self:
        """Build a catalog from ``{"ADULT": {"price": "25", "seats": 1}, ...}``."""
        entries = {
            TicketType[name]: CatalogEntry(
                unit_price=Money(amount=Decimal(str(item["price"]))),
                seats_per_ticket=int(item["seats"]),
            )
            for name, item in config.items()
        }
        return cls(entries)

    @classmethod
    def from_settings(cls) -> Self:
        return cls.from_config(getattr(settings, "TICKET_CATALOG", DEFAULT_TICKET_CATALOG))

    def get_tickets_data(self) -> Mapping[TicketType, CatalogEntry]:
        return self._entries
