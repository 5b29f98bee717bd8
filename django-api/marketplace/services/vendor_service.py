"""Vendor approval service.

Concurrent opposite decisions on one vendor are resolved last-write-wins
on the stored record. Approvals are rare and made by a person, so the
store takes no lock for them.
"""

import logging

from marketplace.domain import Vendor, VendorId
from marketplace.domain.approval import VendorDecision, decide
from marketplace.domain.errors import InvalidIdError, VendorNotFoundError
from marketplace.stores.interfaces import VendorStore

logger = logging.getLogger(__name__)


class VendorService:
    """Service for listing vendors and recording approval decisions."""

    def __init__(self, store: VendorStore) -> None:
        self._store = store

    def list_vendors(self) -> list[Vendor]:
        return self._store.list_vendors()

    def approve(self, vendor_id: str) -> Vendor:
        """Approve a vendor, overriding any earlier rejection.

        Raises:
            InvalidIdError: If vendor_id is not a valid UUID.
            VendorNotFoundError: If the vendor does not exist.
            IntegrityViolationError: If the stored flags are inconsistent.
        """
        return self._apply(vendor_id, VendorDecision.APPROVE)

    def reject(self, vendor_id: str) -> Vendor:
        """Reject a vendor, overriding any earlier approval.

        Raises the same errors as approve().
        """
        return self._apply(vendor_id, VendorDecision.REJECT)

    def _apply(self, raw_id: str, decision: VendorDecision) -> Vendor:
        vendor_id = _parse_vendor_id(raw_id)
        vendor = self._store.get_vendor(vendor_id)
        if vendor is None:
            raise VendorNotFoundError(raw_id)

        decided = decide(vendor, decision)
        if decided is vendor:
            logger.debug("Vendor %s already %s", vendor_id, vendor.status.value)
            return vendor

        saved = self._store.save_vendor_status(vendor_id, decided.status)
        if saved is None:
            raise VendorNotFoundError(raw_id)
        logger.info(
            "Vendor %s moved from %s to %s", vendor_id, vendor.status.value, saved.status.value
        )
        return saved


def _parse_vendor_id(raw_id: str) -> VendorId:
    try:
        return VendorId.from_string(raw_id)
    except ValueError as exc:
        raise InvalidIdError() from exc
