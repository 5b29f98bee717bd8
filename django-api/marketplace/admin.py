from django.contrib import admin

from marketplace.models import BookingRequest, Event, Payment, Vendor


class BookingRequestInline(admin.TabularInline):
    model = BookingRequest
    extra = 1


@admin.register(Vendor)
class VendorAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "phone", "approved", "rejected", "created_at"]
    list_filter = ["approved", "rejected"]
    search_fields = ["name", "email"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "location", "start_date", "end_date", "created_at"]
    search_fields = ["name", "location"]
    inlines = [BookingRequestInline]


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ["id", "event", "vendor", "amount", "currency", "phase", "initiated_at"]
    list_filter = ["phase"]
    # Phase changes go through the settlement workflow only.
    readonly_fields = ["phase", "initiated_at", "settled_at"]
