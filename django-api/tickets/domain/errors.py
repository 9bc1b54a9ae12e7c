"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    NEGATIVE_QUANTITY = "NEGATIVE_QUANTITY"
    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    INVALID_TICKET_REQUESTS = "INVALID_TICKET_REQUESTS"
    NO_ADULT_TICKET = "NO_ADULT_TICKET"
    INFANT_RATIO_EXCEEDED = "INFANT_RATIO_EXCEEDED"
    ORDER_SIZE_EXCEEDED = "ORDER_SIZE_EXCEEDED"
    INVALID_PURCHASE = "INVALID_PURCHASE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidTicketTypeError(DomainError):
    """Raised when a ticket type is not INFANT, CHILD or ADULT."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TYPE,
            message="Ticket type must be one of INFANT, CHILD, ADULT",
        )


class InvalidQuantityError(DomainError):
    """Raised when a ticket quantity is not an integer."""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.INVALID_QUANTITY,
        message: str = "Number of tickets must be an integer",
    ) -> None:
        super().__init__(code=code, message=message)


class NegativeQuantityError(InvalidQuantityError):
    """Raised when a ticket quantity is a negative integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NEGATIVE_QUANTITY,
            message="Number of tickets cannot be negative",
        )


class InvalidAccountIdError(DomainError):
    """Raised when an account ID is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Invalid account id",
        )


class InvalidTicketRequestsError(DomainError):
    """Raised when ticket requests are missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TICKET_REQUESTS, message=message)


class NoAdultTicketError(DomainError):
    """Raised when an order contains no adult ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_ADULT_TICKET,
            message="At least 1 adult ticket is required",
        )


class InfantRatioExceededError(DomainError):
    """Raised when there are more infants than adults to hold them."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INFANT_RATIO_EXCEEDED,
            message="Each infant must be accompanied by an adult",
        )


class OrderSizeExceededError(DomainError):
    """Raised when an order has more tickets than allowed per purchase."""

    def __init__(self, max_tickets: int) -> None:
        super().__init__(
            code=ErrorCode.ORDER_SIZE_EXCEEDED,
            message=f"Maximum of {max_tickets} tickets per purchase exceeded",
        )


class InvalidPurchaseError(DomainError):
    """The only error raised out of TicketService.purchase.

    The underlying failure is chained as ``__cause__``; ``reason`` exposes its
    error code when the cause was itself a domain error.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PURCHASE,
            message=f"Failed to purchase tickets: {detail}",
        )

    @property
    def reason(self) -> ErrorCode | None:
        cause = self.__cause__
        if isinstance(cause, DomainError):
            return cause.code
        return None
