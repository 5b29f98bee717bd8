"""Lifecycle phases and the pure functions that derive them.

Nothing here touches storage or the clock; callers pass ``now`` in.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from marketplace.domain.errors import IntegrityViolationError

if TYPE_CHECKING:
    from marketplace.domain.models import Payment


class EventPhase(Enum):
    UPCOMING = "Upcoming"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"


class VendorStatus(Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class PaymentPhase(Enum):
    INITIATED = "Initiated"
    PENDING = "Pending"
    SETTLED = "Settled"
    FAILED = "Failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PaymentPhase.SETTLED, PaymentPhase.FAILED)


def event_phase(now: datetime, start: datetime, end: datetime) -> EventPhase:
    """Return the phase of an event at ``now``.

    Both bounds belong to the ongoing phase.
    """
    if now < start:
        return EventPhase.UPCOMING
    if now > end:
        return EventPhase.COMPLETED
    return EventPhase.ONGOING


def vendor_phase(approved: bool, rejected: bool) -> VendorStatus:
    """Map the stored approval flags onto a VendorStatus.

    Raises:
        IntegrityViolationError: If both flags are set.
    """
    if approved and rejected:
        raise IntegrityViolationError("vendor is flagged both approved and rejected")
    if approved:
        return VendorStatus.APPROVED
    if rejected:
        return VendorStatus.REJECTED
    return VendorStatus.PENDING


def vendor_flags(status: VendorStatus) -> tuple[bool, bool]:
    """Return the ``(approved, rejected)`` pair for a status."""
    return status is VendorStatus.APPROVED, status is VendorStatus.REJECTED


def payment_phase(payment: "Payment") -> PaymentPhase:
    return payment.phase


def check_settlement_integrity(phase: PaymentPhase, settled_at: datetime | None) -> None:
    """Raise IntegrityViolationError unless settled_at is set exactly when settled."""
    if (phase is PaymentPhase.SETTLED) != (settled_at is not None):
        raise IntegrityViolationError(
            f"payment in phase {phase.value} has settled_at={settled_at!r}"
        )
