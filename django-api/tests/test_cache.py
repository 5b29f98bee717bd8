"""Tests for vendor list caching.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from marketplace.handlers.cache import VENDOR_LIST_KEY


@pytest.mark.django_db
class TestVendorListCache:
    def test_list_is_cached(self, api_client: APIClient, create_vendor):
        create_vendor()

        api_client.get("/vendor/getAllVendor")

        assert len(cache.get(VENDOR_LIST_KEY)) == 1

    def test_vendor_save_invalidates_list_cache(self, api_client: APIClient, create_vendor):
        api_client.get("/vendor/getAllVendor")
        assert cache.get(VENDOR_LIST_KEY) == []

        create_vendor()

        assert cache.get(VENDOR_LIST_KEY) is None

    def test_vendor_delete_invalidates_list_cache(self, api_client: APIClient, create_vendor):
        vendor = create_vendor()
        api_client.get("/vendor/getAllVendor")

        vendor.delete()

        assert cache.get(VENDOR_LIST_KEY) is None

    def test_approval_is_visible_in_cached_list(self, api_client: APIClient, create_vendor):
        vendor = create_vendor()
        api_client.get("/vendor/getAllVendor")

        api_client.put(f"/vendor/approve/{vendor.id}")

        (listed,) = api_client.get("/vendor/getAllVendor").json()
        assert listed["data"]["approved"] is True
