"""Vendor approval state machine.

A vendor starts Pending and an administrator moves it to Approved or
Rejected. Either decision overrides the other, and repeating a decision
leaves the vendor unchanged. There is no way back to Pending.
"""

from dataclasses import replace
from enum import Enum

from marketplace.domain.models import Vendor
from marketplace.domain.status import VendorStatus


class VendorDecision(Enum):
    APPROVE = "approve"
    REJECT = "reject"

    @property
    def target(self) -> VendorStatus:
        if self is VendorDecision.APPROVE:
            return VendorStatus.APPROVED
        return VendorStatus.REJECTED


def decide(vendor: Vendor, decision: VendorDecision) -> Vendor:
    """Return the vendor as it stands after ``decision``.

    The same instance is returned when the decision is already in effect.
    """
    if vendor.status is decision.target:
        return vendor
    return replace(vendor, status=decision.target)
