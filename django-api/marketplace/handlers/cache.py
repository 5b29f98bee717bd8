"""Cache keys shared by views and signal handlers."""

from django.conf import settings
from django.core.cache import cache

VENDOR_LIST_KEY = "vendors:list"


def vendor_list_timeout() -> int:
    return settings.PLANNOVA["VENDOR_LIST_CACHE_TIMEOUT"]


def invalidate_vendor_list() -> None:
    cache.delete(VENDOR_LIST_KEY)
