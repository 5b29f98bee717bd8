"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from marketplace import models as orm


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def create_vendor():
    def _create(**fields) -> orm.Vendor:
        defaults = {"name": "Bloom Florists", "email": "hello@bloom.example", "phone": "98765"}
        defaults.update(fields)
        return orm.Vendor.objects.create(**defaults)

    return _create


@pytest.fixture
def create_event():
    def _create(**fields) -> orm.Event:
        now = timezone.now()
        defaults = {
            "name": "Asha & Rohan Wedding",
            "location": "Jaipur",
            "start_date": now + timedelta(days=7),
            "end_date": now + timedelta(days=8),
            "estimated_cost": "250000.00",
            "created_by": "Asha",
        }
        defaults.update(fields)
        return orm.Event.objects.create(**defaults)

    return _create
