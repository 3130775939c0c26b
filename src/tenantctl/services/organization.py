"""OrganizationStoreService: organizations persisted in the key/value store.

Records live in the ``organizations`` bucket keyed by ID, encoded as JSON.

INVARIANT: Organization names are unique.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from tenantctl.domain.errors import (
    corrupt_org_error,
    invalid_org_id_error,
    missing_org_filter_error,
    org_name_required_error,
    org_name_taken_error,
    org_not_found_error,
    unavailable_org_service_error,
    unprocessable_org_error,
)
from tenantctl.domain.ids import generate_id, validate_id
from tenantctl.domain.models import (
    FindOptions,
    Organization,
    OrganizationFilter,
    OrganizationUpdate,
)
from tenantctl.services._helpers import now_utc, paginate
from tenantctl.services.base import BaseService

BUCKET = "organizations"


def _sort_key(org: Organization, field: str) -> str:
    value: Any = getattr(org, field, "")
    if value is None:
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


class OrganizationStoreService(BaseService):
    """Store-backed implementation of the organization service."""

    def create_organization(self, org: Organization) -> Organization:
        name = org.name.strip()
        if not name:
            raise org_name_required_error()
        with self._store_errors(unavailable_org_service_error), self._store.transaction():
            if self._find_by_name(name) is not None:
                raise org_name_taken_error(name)
            now = now_utc()
            created = org.model_copy(
                update={"id": self._next_id(), "name": name, "created_at": now, "updated_at": now}
            )
            self._put(created)
        return created

    def find_organization_by_id(self, org_id: str) -> Organization:
        if not validate_id(org_id):
            raise invalid_org_id_error()
        with self._store_errors(unavailable_org_service_error):
            return self._get(org_id)

    def find_organization(self, filter: OrganizationFilter) -> Organization:
        if filter.is_empty():
            raise missing_org_filter_error()
        if filter.id is not None:
            org = self.find_organization_by_id(filter.id)
            if not filter.matches(org):
                raise org_not_found_error()
            return org
        with self._store_errors(unavailable_org_service_error):
            org = self._find_by_name(filter.name or "")
        if org is None:
            raise org_not_found_error()
        return org

    def find_organizations(
        self, filter: OrganizationFilter, *opts: FindOptions
    ) -> tuple[list[Organization], int]:
        with self._store_errors(unavailable_org_service_error):
            matches = [org for org in self._all() if filter.matches(org)]
        orgs = paginate(matches, opts, sort_key=_sort_key, default_sort="name")
        return orgs, len(orgs)

    def update_organization(self, org_id: str, update: OrganizationUpdate) -> Organization:
        existing = self.find_organization_by_id(org_id)
        changes = update.changes()
        if "name" in changes:
            name = changes["name"].strip()
            if not name:
                raise org_name_required_error()
            changes["name"] = name
        with self._store_errors(unavailable_org_service_error), self._store.transaction():
            if "name" in changes and changes["name"] != existing.name:
                if self._find_by_name(changes["name"]) is not None:
                    raise org_name_taken_error(changes["name"])
            updated = existing.model_copy(update={**changes, "updated_at": now_utc()})
            self._put(updated)
        return updated

    def delete_organization(self, org_id: str) -> None:
        if not validate_id(org_id):
            raise invalid_org_id_error()
        with self._store_errors(unavailable_org_service_error):
            if not self._store.delete(BUCKET, org_id):
                raise org_not_found_error()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _next_id(self) -> str:
        org_id = generate_id()
        while self._store.get(BUCKET, org_id) is not None:
            org_id = generate_id()
        return org_id

    def _get(self, org_id: str) -> Organization:
        raw = self._store.get(BUCKET, org_id)
        if raw is None:
            raise org_not_found_error()
        return self._decode(raw)

    def _put(self, org: Organization) -> None:
        try:
            encoded = org.model_dump_json()
        except PydanticSerializationError as exc:
            raise unprocessable_org_error(exc) from exc
        self._store.put(BUCKET, org.id, encoded)

    def _all(self) -> list[Organization]:
        return [self._decode(raw) for _key, raw in self._store.items(BUCKET)]

    def _find_by_name(self, name: str) -> Organization | None:
        for org in self._all():
            if org.name == name:
                return org
        return None

    @staticmethod
    def _decode(raw: str) -> Organization:
        try:
            return Organization.model_validate_json(raw)
        except ValidationError as exc:
            raise corrupt_org_error(exc) from exc
