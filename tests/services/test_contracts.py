"""Tests for CLI payload contracts."""

import pytest
from pydantic import ValidationError

from tenantctl.domain.models import Organization
from tenantctl.services.contracts import (
    MappingListData,
    OrganizationItem,
    OrganizationListData,
    dump_validated,
)


class TestDumpValidated:
    def test_organization_item(self) -> None:
        org = Organization(id="0a1b2c3d4e5f6a7b", name="acme")
        payload = dump_validated(OrganizationItem, org.model_dump(mode="json"))
        assert payload["id"] == "0a1b2c3d4e5f6a7b"
        assert payload["created_at"] is None

    def test_list_requires_count(self) -> None:
        with pytest.raises(ValidationError):
            dump_validated(OrganizationListData, {"items": []})

    def test_mapping_list(self) -> None:
        payload = dump_validated(
            MappingListData,
            {
                "count": 1,
                "items": [
                    {
                        "user_id": "00000000000000aa",
                        "user_type": "owner",
                        "resource_type": "orgs",
                        "resource_id": "0a1b2c3d4e5f6a7b",
                    }
                ],
            },
        )
        assert payload["items"][0]["user_type"] == "owner"
