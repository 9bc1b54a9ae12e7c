"""Gateway interfaces for the third-party services a purchase calls out to.

Implementations perform the real-world side effect and raise on failure.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class TicketPaymentService(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: Decimal) -> None:
        """Charge ``amount`` to the account."""
        ...


class SeatReservationService(ABC):
    """Interface for reserving seats for an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        """Reserve ``total_seats`` seats for the account."""
        ...
