"""Pydantic models for organizations, user resource mappings, and query parameters.

All models are frozen. Services return new instances rather than mutating
the ones they were handed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from tenantctl.domain.types import ResourceType, UserType


class Organization(BaseModel):
    """An organization (tenant).

    ``id`` is empty until the organization has been stored.
    """

    model_config = {"frozen": True}

    id: str = ""
    name: str
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrganizationFilter(BaseModel):
    """Lookup criteria for organizations. Unset fields match anything."""

    model_config = {"frozen": True}

    id: str | None = None
    name: str | None = None

    def is_empty(self) -> bool:
        return self.id is None and self.name is None

    def matches(self, org: Organization) -> bool:
        if self.id is not None and org.id != self.id:
            return False
        if self.name is not None and org.name != self.name:
            return False
        return True


class OrganizationUpdate(BaseModel):
    """Patch applied to an organization. ``None`` fields are left untouched."""

    model_config = {"frozen": True}

    name: str | None = None
    description: str | None = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class FindOptions(BaseModel):
    """Pagination and ordering for list operations.

    Attributes:
        limit: Maximum number of items returned; 0 means no limit.
        offset: Number of matching items skipped.
        sort_by: Field name to order by (service default when empty).
        descending: Reverse the ordering.
    """

    model_config = {"frozen": True}

    limit: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)
    sort_by: str = ""
    descending: bool = False


class UserResourceMapping(BaseModel):
    """Grants a user a role over a resource.

    Unique per ``(user_id, resource_id, resource_type)``.
    """

    model_config = {"frozen": True}

    user_id: str
    user_type: UserType = UserType.MEMBER
    resource_type: ResourceType
    resource_id: str


class UserResourceMappingFilter(BaseModel):
    """Lookup criteria for mappings. Unset fields match anything."""

    model_config = {"frozen": True}

    user_id: str | None = None
    user_type: UserType | None = None
    resource_type: ResourceType | None = None
    resource_id: str | None = None

    def matches(self, mapping: UserResourceMapping) -> bool:
        for name, wanted in self.model_dump(exclude_none=True).items():
            if getattr(mapping, name) != wanted:
                return False
        return True
