"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to handlers.errors
- Never contain business logic
- Return only state the store has confirmed
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from marketplace.domain import EventPhase
from marketplace.domain.settlement import SettlementOutcome
from marketplace.handlers.cache import VENDOR_LIST_KEY, vendor_list_timeout
from marketplace.handlers.serializers import (
    EventListingSerializer,
    InitiatePaymentSerializer,
    PaymentActionSerializer,
    PaymentSerializer,
    ProcessSettlementSerializer,
    VendorSerializer,
)
from marketplace.services.capture import SimulatedCapture
from marketplace.services.event_service import EventService
from marketplace.services.payment_service import PaymentService
from marketplace.services.vendor_service import VendorService
from marketplace.stores.django_store import DjangoEventStore, DjangoPaymentStore, DjangoVendorStore


def vendor_service() -> VendorService:
    return VendorService(DjangoVendorStore())


def event_service() -> EventService:
    return EventService(DjangoEventStore(currency=settings.PLANNOVA["CURRENCY"]))


def payment_service() -> PaymentService:
    config = settings.PLANNOVA
    return PaymentService(
        payments=DjangoPaymentStore(),
        events=DjangoEventStore(currency=config["CURRENCY"]),
        vendors=DjangoVendorStore(),
        currency=config["CURRENCY"],
        capture=SimulatedCapture(SettlementOutcome(config["SIMULATED_CAPTURE_OUTCOME"])),
    )


class VendorListView(APIView):
    """Handler for GET /vendor/getAllVendor"""

    def get(self, request: Request) -> Response:
        data = cache.get(VENDOR_LIST_KEY)
        if data is None:
            data = VendorSerializer(vendor_service().list_vendors(), many=True).data
            cache.set(VENDOR_LIST_KEY, data, vendor_list_timeout())
        return Response(data)


class VendorApproveView(APIView):
    """Handler for PUT /vendor/approve/{vendor_id}"""

    def put(self, request: Request, vendor_id: str) -> Response:
        vendor = vendor_service().approve(vendor_id)
        return Response(VendorSerializer(vendor).data)


class VendorRejectView(APIView):
    """Handler for PUT /vendor/reject/{vendor_id}"""

    def put(self, request: Request, vendor_id: str) -> Response:
        vendor = vendor_service().reject(vendor_id)
        return Response(VendorSerializer(vendor).data)


class EventListView(APIView):
    """Handler for GET /event/getAllEvents"""

    def get(self, request: Request) -> Response:
        listings = event_service().list_events()
        return Response({"events": EventListingSerializer(listings, many=True).data})


class EventSummaryView(APIView):
    """Handler for GET /event/summary"""

    def get(self, request: Request) -> Response:
        counts = event_service().summarize()
        return Response({phase.value.lower(): counts[phase] for phase in EventPhase})


class EventDetailView(APIView):
    """Handler for GET /event/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        listing = event_service().get_event(event_id)
        return Response(EventListingSerializer(listing).data)


class PendingPaymentListView(APIView):
    """Handler for GET /payments/pending"""

    def get(self, request: Request) -> Response:
        payments = payment_service().list_pending()
        return Response(PaymentSerializer(payments, many=True).data)


class PaymentInitiateView(APIView):
    """Handler for POST /payments/initiate"""

    def post(self, request: Request) -> Response:
        body = InitiatePaymentSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        payment = payment_service().initiate_payment(**body.validated_data)
        return Response(PaymentSerializer(payment).data, status=status.HTTP_201_CREATED)


class PaymentPayView(APIView):
    """Handler for POST /payments/pay"""

    def post(self, request: Request) -> Response:
        body = PaymentActionSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        payment = payment_service().request_payout(body.validated_data["payment_id"])
        return Response(PaymentSerializer(payment).data)


class PaymentProcessView(APIView):
    """Handler for POST /payments/process"""

    def post(self, request: Request) -> Response:
        body = ProcessSettlementSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        outcome = body.validated_data.get("outcome")
        payment = payment_service().process_settlement(
            body.validated_data["payment_id"],
            SettlementOutcome(outcome) if outcome else None,
        )
        return Response(PaymentSerializer(payment).data)


class PaymentDetailView(APIView):
    """Handler for GET /payments/{payment_id}"""

    def get(self, request: Request, payment_id: str) -> Response:
        payment = payment_service().get_payment(payment_id)
        return Response(PaymentSerializer(payment).data)
