"""Domain error codes for the marketplace workflows."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VENDOR_NOT_FOUND = "VENDOR_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    PAYMENT_NOT_FOUND = "PAYMENT_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INTEGRITY_VIOLATION = "INTEGRITY_VIOLATION"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class VendorNotFoundError(DomainError):
    """Raised when a vendor is not found."""

    def __init__(self, vendor_id: str) -> None:
        super().__init__(code=ErrorCode.VENDOR_NOT_FOUND, message="Vendor not found")
        self.vendor_id = vendor_id


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")
        self.event_id = event_id


class PaymentNotFoundError(DomainError):
    """Raised when a payment is not found."""

    def __init__(self, payment_id: str) -> None:
        super().__init__(code=ErrorCode.PAYMENT_NOT_FOUND, message="Payment not found")
        self.payment_id = payment_id


class InvalidIdError(DomainError):
    """Raised when an identifier is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_ID, message="Invalid ID format")


class InvalidTransitionError(DomainError):
    """Raised when a payment cannot move from its current phase to the target."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TRANSITION,
            message=f"Cannot move payment from {current} to {target}",
        )
        self.current = current
        self.target = target


class InvalidAmountError(DomainError):
    """Raised when a payment amount is not strictly positive."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_AMOUNT,
            message="Payment amount must be greater than zero",
        )


class IntegrityViolationError(DomainError):
    """Raised when a persisted record breaks a domain invariant.

    The detail is for logs only; callers get a generic message.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INTEGRITY_VIOLATION,
            message="Stored record is inconsistent",
        )
        self.detail = detail
