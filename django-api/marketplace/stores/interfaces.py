"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from marketplace.domain import Event, EventId, Payment, PaymentId, PaymentPhase, Vendor, VendorId, VendorStatus


class VendorStore(ABC):
    """Interface for vendor persistence operations."""

    @abstractmethod
    def list_vendors(self) -> list[Vendor]:
        """Return all vendors ordered by created_at descending."""
        ...

    @abstractmethod
    def get_vendor(self, vendor_id: VendorId) -> Vendor | None:
        """Return a vendor by ID, or None if not found."""
        ...

    @abstractmethod
    def vendor_exists(self, vendor_id: VendorId) -> bool:
        ...

    @abstractmethod
    def save_vendor_status(self, vendor_id: VendorId, status: VendorStatus) -> Vendor | None:
        """Overwrite the vendor's status and return the stored vendor.

        Last write wins. Returns None if the vendor no longer exists.
        """
        ...


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...


class PaymentStore(ABC):
    """Interface for payment persistence operations."""

    @abstractmethod
    def add_payment(self, payment: Payment) -> None:
        """Persist a new payment."""
        ...

    @abstractmethod
    def get_payment(self, payment_id: PaymentId) -> Payment | None:
        """Return a payment by ID, or None if not found."""
        ...

    @abstractmethod
    def list_payments(self, phase: PaymentPhase) -> list[Payment]:
        """Return payments in ``phase`` ordered by initiated_at ascending, then id."""
        ...

    @abstractmethod
    def compare_and_set(self, payment: Payment, expected: PaymentPhase) -> bool:
        """Write ``payment``'s phase and settled_at if the stored phase is ``expected``.

        Must be atomic per record. Returns False, writing nothing, when the
        stored phase differs or the payment is gone.
        """
        ...

    @abstractmethod
    def lock_payment(self, payment_id: PaymentId) -> AbstractContextManager[Payment | None]:
        """Hold an exclusive lock on one payment for the duration of a ``with`` block.

        Yields the payment as stored once the lock is held, or None if it does
        not exist. Other lock_payment callers for the same id wait until the
        block exits; compare_and_set may be called inside the block.
        """
        ...
