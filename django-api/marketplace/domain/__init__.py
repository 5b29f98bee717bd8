from marketplace.domain.models import BookingRequest, Event, EventListing, Payment, Vendor
from marketplace.domain.status import EventPhase, PaymentPhase, VendorStatus
from marketplace.domain.value_objects import EventId, Money, PaymentId, VendorId

__all__ = [
    "Vendor",
    "Event",
    "EventListing",
    "BookingRequest",
    "Payment",
    "VendorId",
    "EventId",
    "PaymentId",
    "Money",
    "VendorStatus",
    "EventPhase",
    "PaymentPhase",
]
