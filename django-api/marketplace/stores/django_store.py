"""Django ORM implementations of the marketplace stores."""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal

from django.db import transaction

from marketplace import models as orm
from marketplace.domain import (
    BookingRequest,
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
from marketplace.domain.errors import IntegrityViolationError
from marketplace.domain.status import vendor_flags, vendor_phase
from marketplace.stores.interfaces import EventStore, PaymentStore, VendorStore


def _to_vendor(record: orm.Vendor) -> Vendor:
    return Vendor(
        id=VendorId(record.id),
        name=record.name,
        email=record.email,
        phone=record.phone,
        status=vendor_phase(record.approved, record.rejected),
        created_at=record.created_at,
    )


def _money(amount: Decimal, currency: str, label: str) -> Money:
    try:
        return Money(amount, currency)
    except ValueError as exc:
        raise IntegrityViolationError(f"{label} has negative amount {amount}") from exc


def _payment_phase(record: orm.Payment) -> PaymentPhase:
    try:
        return PaymentPhase(record.phase)
    except ValueError as exc:
        raise IntegrityViolationError(
            f"payment {record.id} has unknown phase {record.phase!r}"
        ) from exc


def _to_event(record: orm.Event, currency: str) -> Event:
    return Event(
        id=EventId(record.id),
        name=record.name,
        location=record.location,
        start_date=record.start_date,
        end_date=record.end_date,
        estimated_cost=_money(record.estimated_cost, currency, f"event {record.id}"),
        created_by=record.created_by,
        created_at=record.created_at,
        booking_requests=tuple(
            BookingRequest(
                vendor_id=VendorId(request.vendor_id),
                service_name=request.service_name,
                vendor_name=request.vendor_name,
            )
            for request in record.booking_requests.all()
        ),
    )


def _to_payment(record: orm.Payment) -> Payment:
    return Payment(
        id=PaymentId(record.id),
        event_id=EventId(record.event_id),
        vendor_id=VendorId(record.vendor_id),
        amount=_money(record.amount, record.currency, f"payment {record.id}"),
        phase=_payment_phase(record),
        initiated_at=record.initiated_at,
        settled_at=record.settled_at,
    )


class DjangoVendorStore(VendorStore):
    """Vendor store backed by the Django ORM."""

    def list_vendors(self) -> list[Vendor]:
        return [_to_vendor(record) for record in orm.Vendor.objects.order_by("-created_at")]

    def get_vendor(self, vendor_id: VendorId) -> Vendor | None:
        record = orm.Vendor.objects.filter(pk=vendor_id.value).first()
        return _to_vendor(record) if record else None

    def vendor_exists(self, vendor_id: VendorId) -> bool:
        return orm.Vendor.objects.filter(pk=vendor_id.value).exists()

    def save_vendor_status(self, vendor_id: VendorId, status: VendorStatus) -> Vendor | None:
        record = orm.Vendor.objects.filter(pk=vendor_id.value).first()
        if record is None:
            return None
        record.approved, record.rejected = vendor_flags(status)
        # save() rather than update() so post_save drops the cached list
        record.save(update_fields=["approved", "rejected"])
        return _to_vendor(record)


class DjangoEventStore(EventStore):
    """Event store backed by the Django ORM."""

    def __init__(self, currency: str) -> None:
        self._currency = currency

    def list_events(self) -> list[Event]:
        records = orm.Event.objects.order_by("-created_at").prefetch_related("booking_requests")
        return [_to_event(record, self._currency) for record in records]

    def get_event(self, event_id: EventId) -> Event | None:
        record = (
            orm.Event.objects.filter(pk=event_id.value)
            .prefetch_related("booking_requests")
            .first()
        )
        return _to_event(record, self._currency) if record else None

    def event_exists(self, event_id: EventId) -> bool:
        return orm.Event.objects.filter(pk=event_id.value).exists()


class DjangoPaymentStore(PaymentStore):
    """Payment store backed by the Django ORM.

    Phase changes are a single conditional UPDATE, so the database row is
    the point of serialisation between concurrent requests. lock_payment
    takes a row lock with SELECT ... FOR UPDATE inside a transaction.
    """

    def add_payment(self, payment: Payment) -> None:
        orm.Payment.objects.create(
            id=payment.id.value,
            event_id=payment.event_id.value,
            vendor_id=payment.vendor_id.value,
            amount=payment.amount.amount,
            currency=payment.amount.currency,
            phase=payment.phase.value,
            initiated_at=payment.initiated_at,
            settled_at=payment.settled_at,
        )

    def get_payment(self, payment_id: PaymentId) -> Payment | None:
        record = orm.Payment.objects.filter(pk=payment_id.value).first()
        return _to_payment(record) if record else None

    def list_payments(self, phase: PaymentPhase) -> list[Payment]:
        records = orm.Payment.objects.filter(phase=phase.value).order_by("initiated_at", "id")
        return [_to_payment(record) for record in records]

    def compare_and_set(self, payment: Payment, expected: PaymentPhase) -> bool:
        updated = orm.Payment.objects.filter(
            pk=payment.id.value, phase=expected.value
        ).update(phase=payment.phase.value, settled_at=payment.settled_at)
        return updated == 1

    @contextmanager
    def lock_payment(self, payment_id: PaymentId) -> Iterator[Payment | None]:
        with transaction.atomic():
            record = orm.Payment.objects.select_for_update().filter(pk=payment_id.value).first()
            yield _to_payment(record) if record else None
