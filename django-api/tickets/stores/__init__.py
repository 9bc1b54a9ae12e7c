from tickets.stores.interfaces import TicketCatalog
from tickets.stores.static_store import StaticTicketCatalog

__all__ = ["TicketCatalog", "StaticTicketCatalog"]
