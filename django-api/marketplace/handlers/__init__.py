from marketplace.handlers.views import (
    EventDetailView,
    EventListView,
    EventSummaryView,
    PaymentDetailView,
    PaymentInitiateView,
    PaymentPayView,
    PaymentProcessView,
    PendingPaymentListView,
    VendorApproveView,
    VendorListView,
    VendorRejectView,
)

__all__ = [
    "VendorListView",
    "VendorApproveView",
    "VendorRejectView",
    "EventListView",
    "EventSummaryView",
    "EventDetailView",
    "PendingPaymentListView",
    "PaymentInitiateView",
    "PaymentPayView",
    "PaymentProcessView",
    "PaymentDetailView",
]
