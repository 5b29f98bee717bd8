"""Capture collaborators that decide whether a pending payout goes through.

No payment processor is wired in; SimulatedCapture stands in for one.
"""

from abc import ABC, abstractmethod

from marketplace.domain import Payment
from marketplace.domain.settlement import SettlementOutcome


class PaymentCapture(ABC):
    """Interface for capturing funds for a pending payment."""

    @abstractmethod
    def capture(self, payment: Payment) -> SettlementOutcome:
        """Attempt to capture ``payment`` and report the outcome.

        Implementations should key any external call on the payment id.
        """
        ...


class SimulatedCapture(PaymentCapture):
    """Returns a fixed outcome without moving any money."""

    def __init__(self, outcome: SettlementOutcome = SettlementOutcome.SUCCESS) -> None:
        self._outcome = outcome

    def capture(self, payment: Payment) -> SettlementOutcome:
        return self._outcome
