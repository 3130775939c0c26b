"""Logging middleware for the organization service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tenantctl.services.telemetry import timed_operation

if TYPE_CHECKING:
    from tenantctl.domain.models import (
        FindOptions,
        Organization,
        OrganizationFilter,
        OrganizationUpdate,
    )
    from tenantctl.services.protocols import OrganizationService


class OrgLogger:
    """Wraps an :class:`OrganizationService`, logging every call.

    Each call is forwarded with its original arguments. Results are returned
    and exceptions re-raised exactly as the wrapped service produced them;
    the only side effect is one log entry per call.

    Usage::

        svc = OrgLogger(structlog.get_logger("tenantctl.services"), store_svc)
        org = svc.create_organization(Organization(name="acme"))
    """

    def __init__(self, logger: Any, org_service: OrganizationService) -> None:
        self._logger = logger
        self._org_service = org_service

    def create_organization(self, org: Organization) -> Organization:
        with timed_operation(
            self._logger,
            "create_organization",
            success="org create",
            failure="failed to create org",
        ):
            return self._org_service.create_organization(org)

    def find_organization_by_id(self, org_id: str) -> Organization:
        with timed_operation(
            self._logger,
            "find_organization_by_id",
            success="org find by ID",
            failure="failed to find org with ID",
            org_id=org_id,
        ):
            return self._org_service.find_organization_by_id(org_id)

    def find_organization(self, filter: OrganizationFilter) -> Organization:
        with timed_operation(
            self._logger,
            "find_organization",
            success="org find",
            failure="failed to find org matching the given filter",
            filter=filter,
        ):
            return self._org_service.find_organization(filter)

    def find_organizations(
        self, filter: OrganizationFilter, *opts: FindOptions
    ) -> tuple[list[Organization], int]:
        with timed_operation(
            self._logger,
            "find_organizations",
            success="orgs find",
            failure="failed to find org matching the given filter",
            filter=filter,
        ):
            return self._org_service.find_organizations(filter, *opts)

    def update_organization(self, org_id: str, update: OrganizationUpdate) -> Organization:
        with timed_operation(
            self._logger,
            "update_organization",
            success="org update",
            failure="failed to update org",
            org_id=org_id,
        ):
            return self._org_service.update_organization(org_id, update)

    def delete_organization(self, org_id: str) -> None:
        with timed_operation(
            self._logger,
            "delete_organization",
            success="org delete",
            failure="failed to delete org with ID",
            org_id=org_id,
        ):
            return self._org_service.delete_organization(org_id)
