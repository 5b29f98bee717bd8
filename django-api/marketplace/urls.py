from django.urls import path

from marketplace.handlers import (
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

urlpatterns = [
    path("vendor/getAllVendor", VendorListView.as_view(), name="vendor-list"),
    path("vendor/approve/<str:vendor_id>", VendorApproveView.as_view(), name="vendor-approve"),
    path("vendor/reject/<str:vendor_id>", VendorRejectView.as_view(), name="vendor-reject"),
    path("event/getAllEvents", EventListView.as_view(), name="event-list"),
    path("event/summary", EventSummaryView.as_view(), name="event-summary"),
    path("event/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("payments/pending", PendingPaymentListView.as_view(), name="payment-pending"),
    path("payments/initiate", PaymentInitiateView.as_view(), name="payment-initiate"),
    path("payments/pay", PaymentPayView.as_view(), name="payment-pay"),
    path("payments/process", PaymentProcessView.as_view(), name="payment-process"),
    path("payments/<str:payment_id>", PaymentDetailView.as_view(), name="payment-detail"),
]
