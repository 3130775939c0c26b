"""Service contracts decorated by the logging middleware.

Implementations raise exceptions (normally
:class:`~tenantctl.domain.errors.ClassifiedError`) to signal failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tenantctl.domain.models import (
        FindOptions,
        Organization,
        OrganizationFilter,
        OrganizationUpdate,
        UserResourceMapping,
        UserResourceMappingFilter,
    )


@runtime_checkable
class OrganizationService(Protocol):
    """CRUD operations over organizations."""

    def create_organization(self, org: Organization) -> Organization:
        """Store a new organization and return it with its ID assigned."""
        ...

    def find_organization_by_id(self, org_id: str) -> Organization: ...

    def find_organization(self, filter: OrganizationFilter) -> Organization:
        """Return the single organization matching *filter*."""
        ...

    def find_organizations(
        self, filter: OrganizationFilter, *opts: FindOptions
    ) -> tuple[list[Organization], int]:
        """Return matching organizations and how many were returned."""
        ...

    def update_organization(self, org_id: str, update: OrganizationUpdate) -> Organization: ...

    def delete_organization(self, org_id: str) -> None: ...


@runtime_checkable
class UserResourceMappingService(Protocol):
    """Operations over user to resource mappings."""

    def create_user_resource_mapping(self, mapping: UserResourceMapping) -> UserResourceMapping: ...

    def find_user_resource_mappings(
        self, filter: UserResourceMappingFilter, *opts: FindOptions
    ) -> tuple[list[UserResourceMapping], int]: ...

    def delete_user_resource_mapping(self, resource_id: str, user_id: str) -> None: ...
