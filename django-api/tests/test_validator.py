"""Unit tests for purchase business rules.

Run with: pytest tests/test_validator.py -v
"""

import pytest

from tickets.domain import TicketType, TicketTypeRequest
from tickets.domain.errors import (
    InfantRatioExceededError,
    NoAdultTicketError,
    OrderSizeExceededError,
)
from tickets.services import OrderValidator, calculate_totals


@pytest.fixture
def totals_for(catalog_entries):
    def build(**quantities):
        requests = [TicketTypeRequest(name, quantity) for name, quantity in quantities.items()]
        return calculate_totals(requests, catalog_entries)

    return build


class TestOrderValidator:
    """Tests for OrderValidator."""

    def test_valid_order_passes(self, totals_for):
        """An order following every rule passes."""
        OrderValidator().validate(totals_for(ADULT=2, CHILD=1, INFANT=1))

    def test_no_adult_raises(self, totals_for):
        """Orders without adults raise NoAdultTicketError."""
        with pytest.raises(NoAdultTicketError):
            OrderValidator().validate(totals_for(CHILD=1, INFANT=1))

    def test_zero_adults_raises(self, totals_for):
        """Zero adult tickets raise NoAdultTicketError."""
        with pytest.raises(NoAdultTicketError):
            OrderValidator().validate(totals_for(ADULT=0, CHILD=1))

    def test_more_infants_than_adults_raises(self, totals_for):
        """More infants than adults raise InfantRatioExceededError."""
        with pytest.raises(InfantRatioExceededError):
            OrderValidator().validate(totals_for(ADULT=1, INFANT=2))

    def test_one_infant_per_adult_passes(self, totals_for):
        """Equal infants and adults pass."""
        OrderValidator().validate(totals_for(ADULT=3, INFANT=3))

    def test_exactly_max_tickets_passes(self, totals_for):
        """Exactly 25 tickets pass."""
        OrderValidator().validate(totals_for(ADULT=25))

    def test_over_max_tickets_raises(self, totals_for):
        """More than 25 tickets raise OrderSizeExceededError."""
        with pytest.raises(OrderSizeExceededError, match="25"):
            OrderValidator().validate(totals_for(ADULT=25, CHILD=1))

    def test_infants_count_towards_max_tickets(self, totals_for):
        """Infants count towards the ticket limit."""
        with pytest.raises(OrderSizeExceededError):
            OrderValidator().validate(totals_for(ADULT=13, INFANT=13))

    def test_custom_max_tickets(self, totals_for):
        """max_tickets overrides the default limit."""
        validator = OrderValidator(max_tickets=3)
        assert validator.max_tickets == 3
        with pytest.raises(OrderSizeExceededError):
            validator.validate(totals_for(ADULT=2, CHILD=2))

    def test_no_adult_checked_before_order_size(self, totals_for):
        """The adult rule is checked before the order size."""
        with pytest.raises(NoAdultTicketError):
            OrderValidator().validate(totals_for(CHILD=30))

    def test_infant_ratio_checked_before_order_size(self, totals_for):
        """The infant rule is checked before the order size."""
        with pytest.raises(InfantRatioExceededError):
            OrderValidator().validate(totals_for(ADULT=20, INFANT=21))
