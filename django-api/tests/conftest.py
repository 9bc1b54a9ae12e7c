"""Pytest configuration and shared fixtures."""

from decimal import Decimal
from unittest.mock import Mock, create_autospec

import pytest
from rest_framework.test import APIClient

from tickets.domain import CatalogEntry, Money, TicketType
from tickets.gateways import SeatReservationService, TicketPaymentService
from tickets.services import TicketService
from tickets.stores import StaticTicketCatalog, TicketCatalog


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def catalog_entries() -> dict[TicketType, CatalogEntry]:
    return {
        TicketType.INFANT: CatalogEntry(unit_price=Money(Decimal("0")), seats_per_ticket=0),
        TicketType.CHILD: CatalogEntry(unit_price=Money(Decimal("15")), seats_per_ticket=1),
        TicketType.ADULT: CatalogEntry(unit_price=Money(Decimal("25")), seats_per_ticket=1),
    }


@pytest.fixture
def catalog(catalog_entries) -> Mock:
    """Catalog spy returning the standard prices."""
    spy = create_autospec(TicketCatalog, instance=True)
    spy.get_tickets_data.side_effect = StaticTicketCatalog(catalog_entries).get_tickets_data
    return spy


@pytest.fixture
def gateways() -> Mock:
    """Parent mock recording payment and reservation calls in order."""
    parent = Mock()
    parent.attach_mock(create_autospec(TicketPaymentService, instance=True), "payment")
    parent.attach_mock(create_autospec(SeatReservationService, instance=True), "reservation")
    return parent


@pytest.fixture
def payment_service(gateways) -> Mock:
    return gateways.payment


@pytest.fixture
def reservation_service(gateways) -> Mock:
    return gateways.reservation


@pytest.fixture
def ticket_service(catalog, payment_service, reservation_service) -> TicketService:
    return TicketService(
        catalog=catalog,
        payment_service=payment_service,
        reservation_service=reservation_service,
    )
