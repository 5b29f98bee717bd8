"""Payment settlement state machine.

    Initiated --request_payout--> Pending --settle--> Settled | Failed

Settled and Failed are terminal.
"""

from dataclasses import replace
from datetime import datetime
from enum import Enum

from marketplace.domain.errors import InvalidTransitionError
from marketplace.domain.models import Payment
from marketplace.domain.status import PaymentPhase

TRANSITIONS: dict[PaymentPhase, frozenset[PaymentPhase]] = {
    PaymentPhase.INITIATED: frozenset({PaymentPhase.PENDING}),
    PaymentPhase.PENDING: frozenset({PaymentPhase.SETTLED, PaymentPhase.FAILED}),
    PaymentPhase.SETTLED: frozenset(),
    PaymentPhase.FAILED: frozenset(),
}


class SettlementOutcome(Enum):
    """Result of a capture attempt."""

    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def target(self) -> PaymentPhase:
        if self is SettlementOutcome.SUCCESS:
            return PaymentPhase.SETTLED
        return PaymentPhase.FAILED


def can_transition(current: PaymentPhase, target: PaymentPhase) -> bool:
    return target in TRANSITIONS[current]


def advance(payment: Payment, target: PaymentPhase, at: datetime) -> Payment:
    """Return ``payment`` moved to ``target``.

    ``at`` becomes the settlement timestamp when the target is Settled.

    Raises:
        InvalidTransitionError: If the edge is not in TRANSITIONS.
    """
    if not can_transition(payment.phase, target):
        raise InvalidTransitionError(payment.phase.value, target.value)
    settled_at = at if target is PaymentPhase.SETTLED else None
    return replace(payment, phase=target, settled_at=settled_at)
