"""Serializers for transforming domain models to API responses and parsing
request bodies.

Vendor status leaves the API as the approved/rejected flag pair.
"""

from rest_framework import serializers

from marketplace.domain.settlement import SettlementOutcome


class VendorDataSerializer(serializers.Serializer):
    """Serializer for the fields of a Vendor domain model."""

    name = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField()
    approved = serializers.BooleanField()
    rejected = serializers.BooleanField()


class VendorSerializer(serializers.Serializer):
    """Serializer for Vendor in the ``{id, data}`` envelope."""

    id = serializers.CharField(source="id.value")
    data = VendorDataSerializer(source="*")


class BookingRequestSerializer(serializers.Serializer):
    vendor_id = serializers.CharField(source="vendor_id.value")
    service_name = serializers.CharField()
    vendor_name = serializers.CharField()


class EventListingSerializer(serializers.Serializer):
    """Serializer for an Event with its derived phase."""

    id = serializers.CharField(source="event.id.value")
    name = serializers.CharField(source="event.name")
    location = serializers.CharField(source="event.location")
    start_date = serializers.DateTimeField(source="event.start_date")
    end_date = serializers.DateTimeField(source="event.end_date")
    estimated_cost = serializers.DecimalField(
        max_digits=12, decimal_places=2, source="event.estimated_cost.amount"
    )
    created_by = serializers.CharField(source="event.created_by")
    created_at = serializers.DateTimeField(source="event.created_at")
    booking_requests = BookingRequestSerializer(source="event.booking_requests", many=True)
    phase = serializers.CharField(source="phase.value")


class PaymentSerializer(serializers.Serializer):
    """Serializer for Payment domain model."""

    id = serializers.CharField(source="id.value")
    event_id = serializers.CharField(source="event_id.value")
    vendor_id = serializers.CharField(source="vendor_id.value")
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, source="amount.amount")
    currency = serializers.CharField(source="amount.currency")
    phase = serializers.CharField(source="phase.value")
    initiated_at = serializers.DateTimeField()
    settled_at = serializers.DateTimeField(allow_null=True)


class InitiatePaymentSerializer(serializers.Serializer):
    """Request body for POST /payments/initiate.

    amount is taken as text; the service parses it and answers INVALID_AMOUNT.
    """

    event_id = serializers.CharField()
    vendor_id = serializers.CharField()
    amount = serializers.CharField()


class PaymentActionSerializer(serializers.Serializer):
    """Request body for POST /payments/pay."""

    payment_id = serializers.CharField()


class ProcessSettlementSerializer(PaymentActionSerializer):
    """Request body for POST /payments/process."""

    outcome = serializers.ChoiceField(
        choices=[outcome.value for outcome in SettlementOutcome], required=False
    )
