"""Payment settlement service.

Services:
- Depend only on interfaces (stores, capture)
- Validate transitions against the settlement state machine
- Persist every transition as a compare-and-set on the stored phase
- Return domain models or raise domain errors

A request that loses a race for the same edge sees the stored phase has
moved on and gets InvalidTransitionError, so each edge fires at most once.
"""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TypeVar

from django.utils import timezone

from marketplace.domain import EventId, Money, Payment, PaymentId, PaymentPhase, VendorId
from marketplace.domain.errors import (
    EventNotFoundError,
    InvalidAmountError,
    InvalidIdError,
    InvalidTransitionError,
    PaymentNotFoundError,
    VendorNotFoundError,
)
from marketplace.domain.settlement import SettlementOutcome, advance
from marketplace.services.capture import PaymentCapture, SimulatedCapture
from marketplace.stores.interfaces import EventStore, PaymentStore, VendorStore

logger = logging.getLogger(__name__)

IdT = TypeVar("IdT", EventId, VendorId, PaymentId)

# Matches Payment.amount in marketplace/models.py.
AMOUNT_MAX_DIGITS = 12
CENT = Decimal("0.01")


class PaymentService:
    """Service for the vendor payment lifecycle."""

    def __init__(
        self,
        payments: PaymentStore,
        events: EventStore,
        vendors: VendorStore,
        currency: str,
        capture: PaymentCapture | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._payments = payments
        self._events = events
        self._vendors = vendors
        self._currency = currency
        self._capture = capture or SimulatedCapture()
        self._clock = clock

    def get_payment(self, payment_id: str) -> Payment:
        """Return a payment by ID.

        Raises:
            InvalidIdError: If payment_id is not a valid UUID.
            PaymentNotFoundError: If the payment does not exist.
        """
        return self._load(payment_id)

    def list_pending(self) -> list[Payment]:
        """Return payouts awaiting settlement, oldest first."""
        return self._payments.list_payments(PaymentPhase.PENDING)

    def initiate_payment(
        self, event_id: str, vendor_id: str, amount: Decimal | int | str
    ) -> Payment:
        """Create a payment for a booking in the Initiated phase.

        Raises:
            InvalidAmountError: If amount is not greater than zero, has more than
                two decimal places or does not fit the stored column.
            InvalidIdError: If either ID is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            VendorNotFoundError: If the vendor does not exist.
        """
        value = _parse_amount(amount)
        parsed_event_id = _parse_id(EventId, event_id)
        parsed_vendor_id = _parse_id(VendorId, vendor_id)
        if not self._events.event_exists(parsed_event_id):
            raise EventNotFoundError(event_id)
        if not self._vendors.vendor_exists(parsed_vendor_id):
            raise VendorNotFoundError(vendor_id)

        payment = Payment(
            id=PaymentId(uuid.uuid4()),
            event_id=parsed_event_id,
            vendor_id=parsed_vendor_id,
            amount=Money(value, self._currency),
            phase=PaymentPhase.INITIATED,
            initiated_at=self._clock(),
        )
        self._payments.add_payment(payment)
        logger.info(
            "Payment %s initiated for event %s, vendor %s: %s",
            payment.id,
            payment.event_id,
            payment.vendor_id,
            payment.amount,
        )
        return payment

    def request_payout(self, payment_id: str) -> Payment:
        """Move a payment from Initiated to Pending.

        Raises:
            InvalidIdError: If payment_id is not a valid UUID.
            PaymentNotFoundError: If the payment does not exist.
            InvalidTransitionError: If the payment is not Initiated.
        """
        payment = self._load(payment_id)
        return self._transition(payment, PaymentPhase.PENDING)

    def process_settlement(
        self, payment_id: str, outcome: SettlementOutcome | None = None
    ) -> Payment:
        """Settle or fail a pending payout.

        When no outcome is given, the capture collaborator supplies one. It is
        called at most once per payment.

        Raises:
            InvalidIdError: If payment_id is not a valid UUID.
            PaymentNotFoundError: If the payment does not exist.
            InvalidTransitionError: If the payment is not Pending.
        """
        payment = self._load(payment_id)
        # Capture runs under the record lock so a duplicate request cannot
        # reach it once the first one has moved the payment on.
        with self._payments.lock_payment(payment.id) as current:
            if current is None:
                raise PaymentNotFoundError(payment_id)
            if current.phase is not PaymentPhase.PENDING:
                target = outcome.target if outcome else PaymentPhase.SETTLED
                raise self._rejected(current, target)
            if outcome is None:
                outcome = self._capture.capture(current)
            return self._transition(current, outcome.target)

    def _transition(self, payment: Payment, target: PaymentPhase) -> Payment:
        try:
            updated = advance(payment, target, at=self._clock())
        except InvalidTransitionError:
            raise self._rejected(payment, target) from None

        if not self._payments.compare_and_set(updated, expected=payment.phase):
            current = self._payments.get_payment(payment.id)
            if current is None:
                raise PaymentNotFoundError(str(payment.id))
            raise self._rejected(current, target)

        logger.info(
            "Payment %s moved from %s to %s", payment.id, payment.phase.value, target.value
        )
        return updated

    def _rejected(self, payment: Payment, target: PaymentPhase) -> InvalidTransitionError:
        logger.warning(
            "Rejected transition for payment %s: %s -> %s",
            payment.id,
            payment.phase.value,
            target.value,
        )
        return InvalidTransitionError(payment.phase.value, target.value)

    def _load(self, raw_id: str) -> Payment:
        payment = self._payments.get_payment(_parse_id(PaymentId, raw_id))
        if payment is None:
            raise PaymentNotFoundError(raw_id)
        return payment


def _parse_id(id_type: type[IdT], raw_id: str) -> IdT:
    try:
        return id_type.from_string(str(raw_id))
    except ValueError as exc:
        raise InvalidIdError() from exc


def _parse_amount(amount: Decimal | int | str) -> Decimal:
    """Return amount quantized to cents, rejecting anything the column would round or overflow."""
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation as exc:
        raise InvalidAmountError() from exc
    if not value.is_finite() or value <= 0:
        raise InvalidAmountError()
    try:
        stored = value.quantize(CENT)
    except InvalidOperation as exc:
        raise InvalidAmountError() from exc
    if stored != value or len(stored.as_tuple().digits) > AMOUNT_MAX_DIGITS:
        raise InvalidAmountError()
    return stored
