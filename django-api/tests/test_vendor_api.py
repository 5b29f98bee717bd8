"""Integration tests for the vendor approval endpoints.

Run with: pytest tests/test_vendor_api.py -v
"""

import uuid

import pytest
from rest_framework.test import APIClient


@pytest.mark.django_db
class TestVendorList:
    """Tests for GET /vendor/getAllVendor"""

    def test_lists_vendors_with_flag_pair(self, api_client: APIClient, create_vendor):
        vendor = create_vendor(name="Bloom Florists", approved=True)

        response = api_client.get("/vendor/getAllVendor")

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": str(vendor.id),
                "data": {
                    "name": "Bloom Florists",
                    "email": "hello@bloom.example",
                    "phone": "98765",
                    "approved": True,
                    "rejected": False,
                },
            }
        ]

    def test_empty_list(self, api_client: APIClient):
        response = api_client.get("/vendor/getAllVendor")

        assert response.status_code == 200
        assert response.json() == []

    def test_inconsistent_record_fails_the_read(self, api_client: APIClient, create_vendor):
        create_vendor(approved=True, rejected=True)

        response = api_client.get("/vendor/getAllVendor")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INTEGRITY_VIOLATION"


@pytest.mark.django_db
class TestVendorDecisions:
    """Tests for PUT /vendor/approve/{id} and PUT /vendor/reject/{id}"""

    def test_approve_pending_vendor(self, api_client: APIClient, create_vendor):
        vendor = create_vendor()

        response = api_client.put(f"/vendor/approve/{vendor.id}")

        assert response.status_code == 200
        assert response.json()["data"]["approved"] is True
        assert response.json()["data"]["rejected"] is False
        vendor.refresh_from_db()
        assert (vendor.approved, vendor.rejected) == (True, False)

    def test_approve_is_idempotent(self, api_client: APIClient, create_vendor):
        vendor = create_vendor()

        first = api_client.put(f"/vendor/approve/{vendor.id}")
        second = api_client.put(f"/vendor/approve/{vendor.id}")

        assert second.status_code == 200
        assert first.json() == second.json()

    def test_reject_overrides_approval(self, api_client: APIClient, create_vendor):
        vendor = create_vendor(approved=True)

        response = api_client.put(f"/vendor/reject/{vendor.id}")

        assert response.status_code == 200
        vendor.refresh_from_db()
        assert (vendor.approved, vendor.rejected) == (False, True)

    def test_approve_overrides_rejection(self, api_client: APIClient, create_vendor):
        vendor = create_vendor(rejected=True)

        api_client.put(f"/vendor/approve/{vendor.id}")

        vendor.refresh_from_db()
        assert (vendor.approved, vendor.rejected) == (True, False)

    def test_unknown_vendor_returns_404(self, api_client: APIClient):
        response = api_client.put(f"/vendor/approve/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {
            "error": {"code": "VENDOR_NOT_FOUND", "message": "Vendor not found"}
        }

    def test_malformed_id_returns_400(self, api_client: APIClient):
        response = api_client.put("/vendor/reject/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ID"

    def test_inconsistent_record_is_not_overwritten(self, api_client: APIClient, create_vendor):
        vendor = create_vendor(approved=True, rejected=True)

        response = api_client.put(f"/vendor/reject/{vendor.id}")

        assert response.status_code == 500
        vendor.refresh_from_db()
        assert (vendor.approved, vendor.rejected) == (True, True)
