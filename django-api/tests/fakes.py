"""In-memory stores and clocks for service tests."""

import threading
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from marketplace.domain import (
    Event,
    EventId,
    Money,
    Payment,
    PaymentId,
    PaymentPhase,
    Vendor,
    VendorId,
    VendorStatus,
)
from marketplace.domain.settlement import SettlementOutcome
from marketplace.services.capture import PaymentCapture
from marketplace.stores.interfaces import EventStore, PaymentStore, VendorStore

NOW = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Returns ``start``, then ``start + step``, and so on."""

    def __init__(self, start: datetime = NOW, step: timedelta = timedelta(seconds=1)) -> None:
        self._next = start
        self._step = step
        self._lock = threading.Lock()

    def __call__(self) -> datetime:
        with self._lock:
            current = self._next
            self._next += self._step
            return current


def make_vendor(status: VendorStatus = VendorStatus.PENDING, **overrides) -> Vendor:
    fields = {
        "id": VendorId(uuid.uuid4()),
        "name": "Bloom Florists",
        "email": "hello@bloom.example",
        "phone": "+91 98765 43210",
        "status": status,
        "created_at": NOW,
    }
    fields.update(overrides)
    return Vendor(**fields)


def make_event(start: datetime = NOW, end: datetime = NOW + timedelta(days=1), **overrides) -> Event:
    fields = {
        "id": EventId(uuid.uuid4()),
        "name": "Asha & Rohan Wedding",
        "location": "Jaipur",
        "start_date": start,
        "end_date": end,
        "estimated_cost": Money(Decimal("250000"), "INR"),
        "created_by": "Asha",
        "created_at": NOW,
    }
    fields.update(overrides)
    return Event(**fields)


def make_payment(phase: PaymentPhase = PaymentPhase.INITIATED, **overrides) -> Payment:
    fields = {
        "id": PaymentId(uuid.uuid4()),
        "event_id": EventId(uuid.uuid4()),
        "vendor_id": VendorId(uuid.uuid4()),
        "amount": Money(Decimal("1000"), "INR"),
        "phase": phase,
        "initiated_at": NOW,
        "settled_at": NOW if phase is PaymentPhase.SETTLED else None,
    }
    fields.update(overrides)
    return Payment(**fields)


class InMemoryVendorStore(VendorStore):
    def __init__(self, *vendors: Vendor) -> None:
        self._vendors = {vendor.id: vendor for vendor in vendors}
        self.writes = 0

    def list_vendors(self) -> list[Vendor]:
        return sorted(self._vendors.values(), key=lambda v: v.created_at, reverse=True)

    def get_vendor(self, vendor_id: VendorId) -> Vendor | None:
        return self._vendors.get(vendor_id)

    def vendor_exists(self, vendor_id: VendorId) -> bool:
        return vendor_id in self._vendors

    def save_vendor_status(self, vendor_id: VendorId, status: VendorStatus) -> Vendor | None:
        vendor = self._vendors.get(vendor_id)
        if vendor is None:
            return None
        self.writes += 1
        self._vendors[vendor_id] = replace(vendor, status=status)
        return self._vendors[vendor_id]


class InMemoryEventStore(EventStore):
    def __init__(self, *events: Event) -> None:
        self._events = {event.id: event for event in events}

    def list_events(self) -> list[Event]:
        return sorted(self._events.values(), key=lambda e: e.created_at, reverse=True)

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self._events


class InMemoryPaymentStore(PaymentStore):
    """Payment store whose compare_and_set is atomic under a lock."""

    def __init__(self, *payments: Payment) -> None:
        self._payments = {payment.id: payment for payment in payments}
        self._lock = threading.Lock()
        self._record_locks: dict[PaymentId, threading.Lock] = {}

    def add_payment(self, payment: Payment) -> None:
        with self._lock:
            self._payments[payment.id] = payment

    def get_payment(self, payment_id: PaymentId) -> Payment | None:
        with self._lock:
            return self._payments.get(payment_id)

    def list_payments(self, phase: PaymentPhase) -> list[Payment]:
        with self._lock:
            matching = [p for p in self._payments.values() if p.phase is phase]
        return sorted(matching, key=lambda p: (p.initiated_at, p.id.value))

    def compare_and_set(self, payment: Payment, expected: PaymentPhase) -> bool:
        with self._lock:
            current = self._payments.get(payment.id)
            if current is None or current.phase is not expected:
                return False
            self._payments[payment.id] = payment
            return True

    @contextmanager
    def lock_payment(self, payment_id: PaymentId) -> Iterator[Payment | None]:
        with self._lock:
            record_lock = self._record_locks.setdefault(payment_id, threading.Lock())
        with record_lock:
            with self._lock:
                current = self._payments.get(payment_id)
            yield current


class RacingPaymentStore(InMemoryPaymentStore):
    """Holds each thread after its first read until all racers have read.

    Every racer therefore sees the same pre-transition phase and the
    outcome is decided by lock_payment and compare_and_set.
    """

    def __init__(self, racers: int, *payments: Payment) -> None:
        super().__init__(*payments)
        self._barrier = threading.Barrier(racers, timeout=5)
        self._local = threading.local()
        self._gate = threading.Lock()
        self._arrivals = 0

    def get_payment(self, payment_id: PaymentId) -> Payment | None:
        payment = super().get_payment(payment_id)
        with self._gate:
            hold = self._arrivals < self._barrier.parties and not getattr(self._local, "synced", False)
            if hold:
                self._arrivals += 1
                self._local.synced = True
        if hold:
            self._barrier.wait()
        return payment


class CountingCapture(PaymentCapture):
    """Records every capture call and returns a fixed outcome."""

    def __init__(self, outcome: SettlementOutcome = SettlementOutcome.SUCCESS) -> None:
        self._outcome = outcome
        self._lock = threading.Lock()
        self.captured: list[PaymentId] = []

    def capture(self, payment: Payment) -> SettlementOutcome:
        with self._lock:
            self.captured.append(payment.id)
        return self._outcome
