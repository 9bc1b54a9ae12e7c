"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from tickets.domain import CatalogEntry, TicketType


class TicketCatalog(ABC):
    """Interface for reading ticket prices and seat allocation."""

    @abstractmethod
    def get_tickets_data(self) -> Mapping[TicketType, CatalogEntry]:
        """Return the catalog entry of every ticket type."""
        ...
