"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in marketplace/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from marketplace.domain.status import (
    EventPhase,
    PaymentPhase,
    VendorStatus,
    check_settlement_integrity,
    vendor_flags,
)
from marketplace.domain.value_objects import EventId, Money, PaymentId, VendorId


@dataclass(frozen=True)
class Vendor:
    """Domain representation of a Vendor."""

    id: VendorId
    name: str
    email: str
    phone: str
    status: VendorStatus
    created_at: datetime

    @property
    def approved(self) -> bool:
        return vendor_flags(self.status)[0]

    @property
    def rejected(self) -> bool:
        return vendor_flags(self.status)[1]


@dataclass(frozen=True)
class BookingRequest:
    """A vendor service requested for an event."""

    vendor_id: VendorId
    service_name: str
    vendor_name: str


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    location: str
    start_date: datetime
    end_date: datetime
    estimated_cost: Money
    created_by: str
    created_at: datetime
    booking_requests: tuple[BookingRequest, ...] = ()


@dataclass(frozen=True)
class EventListing:
    """An event together with its phase at read time."""

    event: Event
    phase: EventPhase


@dataclass(frozen=True)
class Payment:
    """Domain representation of a Payment to a vendor for an event booking."""

    id: PaymentId
    event_id: EventId
    vendor_id: VendorId
    amount: Money
    phase: PaymentPhase
    initiated_at: datetime
    settled_at: datetime | None = None

    def __post_init__(self) -> None:
        check_settlement_integrity(self.phase, self.settled_at)
