"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Self

from tickets.domain.errors import InvalidAccountIdError


class TicketType(Enum):
    """The closed set of ticket types that can be purchased."""

    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"


@dataclass(frozen=True)
class AccountId:
    """Identifier of the account paying for a purchase."""

    value: int

    @classmethod
    def from_value(cls, value: Any) -> Self:
        # bool is an int subclass; floats are rejected even when integral.
        if type(value) is not int or value <= 0:
            raise InvalidAccountIdError()
        return cls(value=value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    def times(self, quantity: int) -> "Money":
        return Money(amount=self.amount * quantity)

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
