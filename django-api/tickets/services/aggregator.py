"""Price and seat totals of a purchase, computed from catalog data."""

from collections.abc import Iterable, Mapping

from tickets.domain import CatalogEntry, OrderTotals, TicketType, TicketTypeRequest, TypeTotals


def calculate_totals(
    ticket_type_requests: Iterable[TicketTypeRequest],
    catalog: Mapping[TicketType, CatalogEntry],
) -> OrderTotals:
    """Fold ticket requests into per-type and order-wide totals.

    Requests repeating a ticket type accumulate into the same bucket. The
    requests are assumed valid; a ticket type missing from the catalog raises
    LookupError.
    """
    by_type: dict[TicketType, TypeTotals] = {}
    total = TypeTotals()

    for request in ticket_type_requests:
        ticket_type = request.get_ticket_type()
        quantity = request.get_no_of_tickets()
        entry = catalog.get(ticket_type)
        if entry is None:
            raise LookupError(f"No catalog entry for ticket type {ticket_type.value}")

        by_type[ticket_type] = by_type.get(ticket_type, TypeTotals()).add(quantity, entry)
        total = total.add(quantity, entry)

    return OrderTotals(
        by_type=by_type,
        total_quantity=total.quantity,
        total_price=total.total_price,
        total_seats=total.total_seats,
    )
