"""Logging middleware for the user resource mapping service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tenantctl.services.telemetry import timed_operation

if TYPE_CHECKING:
    from tenantctl.domain.models import (
        FindOptions,
        UserResourceMapping,
        UserResourceMappingFilter,
    )
    from tenantctl.services.protocols import UserResourceMappingService


class UrmLogger:
    """Wraps a :class:`UserResourceMappingService`, logging every call."""

    def __init__(self, logger: Any, urm_service: UserResourceMappingService) -> None:
        self._logger = logger
        self._urm_service = urm_service

    def create_user_resource_mapping(self, mapping: UserResourceMapping) -> UserResourceMapping:
        with timed_operation(
            self._logger,
            "create_user_resource_mapping",
            success="urm create",
            failure="failed to create urm",
        ):
            return self._urm_service.create_user_resource_mapping(mapping)

    def find_user_resource_mappings(
        self, filter: UserResourceMappingFilter, *opts: FindOptions
    ) -> tuple[list[UserResourceMapping], int]:
        with timed_operation(
            self._logger,
            "find_user_resource_mappings",
            success="urm find",
            failure="failed to find urms matching the given filter",
            filter=filter,
        ):
            return self._urm_service.find_user_resource_mappings(filter, *opts)

    def delete_user_resource_mapping(self, resource_id: str, user_id: str) -> None:
        with timed_operation(
            self._logger,
            "delete_user_resource_mapping",
            success="urm delete",
            failure="failed to delete urm",
            resource_id=resource_id,
            user_id=user_id,
        ):
            return self._urm_service.delete_user_resource_mapping(resource_id, user_id)
