"""Django signals for cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from marketplace.handlers.cache import invalidate_vendor_list
from marketplace.models import Vendor


@receiver([post_save, post_delete], sender=Vendor)
def invalidate_vendor_cache(sender, instance, **kwargs):
    """Invalidate the vendor list when a vendor is saved or deleted."""
    invalidate_vendor_list()
