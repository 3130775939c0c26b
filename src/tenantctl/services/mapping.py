"""MappingStoreService: user resource mappings in the key/value store.

Records live in the ``userresourcemappings`` bucket keyed by
``{resource_type}/{resource_id}/{user_id}``.

INVARIANT: At most one mapping per (user, resource, resource type).
"""

from __future__ import annotations

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from tenantctl.domain.errors import (
    corrupt_urm_error,
    invalid_urm_id_error,
    non_unique_mapping_error,
    unavailable_urm_service_error,
    unprocessable_mapping_error,
    urm_not_found_error,
)
from tenantctl.domain.ids import validate_id
from tenantctl.domain.models import (
    FindOptions,
    UserResourceMapping,
    UserResourceMappingFilter,
)
from tenantctl.services._helpers import paginate
from tenantctl.services.base import BaseService

BUCKET = "userresourcemappings"


def mapping_key(mapping: UserResourceMapping) -> str:
    return f"{mapping.resource_type.value}/{mapping.resource_id}/{mapping.user_id}"


class MappingStoreService(BaseService):
    """Store-backed implementation of the user resource mapping service."""

    def create_user_resource_mapping(self, mapping: UserResourceMapping) -> UserResourceMapping:
        if not (validate_id(mapping.user_id) and validate_id(mapping.resource_id)):
            raise invalid_urm_id_error()
        key = mapping_key(mapping)
        try:
            encoded = mapping.model_dump_json()
        except PydanticSerializationError as exc:
            raise unprocessable_mapping_error(exc) from exc
        with self._store_errors(unavailable_urm_service_error), self._store.transaction():
            if self._store.get(BUCKET, key) is not None:
                raise non_unique_mapping_error(mapping.user_id)
            self._store.put(BUCKET, key, encoded)
        return mapping

    def find_user_resource_mappings(
        self, filter: UserResourceMappingFilter, *opts: FindOptions
    ) -> tuple[list[UserResourceMapping], int]:
        with self._store_errors(unavailable_urm_service_error):
            records = self._store.items(BUCKET)
        matches = [m for _key, m in self._decode_all(records) if filter.matches(m)]
        mappings = paginate(matches, opts)
        return mappings, len(mappings)

    def delete_user_resource_mapping(self, resource_id: str, user_id: str) -> None:
        """Remove every mapping of *user_id* on *resource_id*."""
        if not (validate_id(resource_id) and validate_id(user_id)):
            raise invalid_urm_id_error()
        with self._store_errors(unavailable_urm_service_error), self._store.transaction():
            keys = [
                key
                for key, m in self._decode_all(self._store.items(BUCKET))
                if m.resource_id == resource_id and m.user_id == user_id
            ]
            if not keys:
                raise urm_not_found_error()
            for key in keys:
                self._store.delete(BUCKET, key)

    @staticmethod
    def _decode_all(records: list[tuple[str, str]]) -> list[tuple[str, UserResourceMapping]]:
        decoded: list[tuple[str, UserResourceMapping]] = []
        for key, raw in records:
            try:
                decoded.append((key, UserResourceMapping.model_validate_json(raw)))
            except ValidationError as exc:
                raise corrupt_urm_error(exc) from exc
        return decoded
