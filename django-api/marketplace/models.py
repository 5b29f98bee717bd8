"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
Vendor status is stored as the approved/rejected flag pair the frontend
already reads; stores translate it to VendorStatus.
"""

import uuid

from django.db import models
from django.utils import timezone

from marketplace.domain.status import PaymentPhase


class Vendor(models.Model):
    """Persistence model for vendors."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=32, blank=True)
    approved = models.BooleanField(default=False)
    rejected = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for customer events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    estimated_cost = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    created_by = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="mkt_event_created_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class BookingRequest(models.Model):
    """Persistence model for a vendor service booked on an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="booking_requests"
    )
    vendor = models.ForeignKey(
        Vendor, on_delete=models.PROTECT, related_name="booking_requests"
    )
    service_name = models.CharField(max_length=255)
    vendor_name = models.CharField(max_length=255)

    def __str__(self) -> str:
        return f"{self.service_name} by {self.vendor_name}"


class Payment(models.Model):
    """Persistence model for vendor payments."""

    PHASE_CHOICES = [(phase.value, phase.value) for phase in PaymentPhase]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="payments")
    vendor = models.ForeignKey(Vendor, on_delete=models.PROTECT, related_name="payments")
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    currency = models.CharField(max_length=3)
    phase = models.CharField(
        max_length=16, choices=PHASE_CHOICES, default=PaymentPhase.INITIATED.value
    )
    initiated_at = models.DateTimeField(default=timezone.now)
    settled_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["initiated_at", "id"]
        indexes = [
            models.Index(fields=["phase", "initiated_at"], name="mkt_payment_phase_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.phase}"
