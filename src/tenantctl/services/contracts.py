"""Typed payload contracts for the CLI boundary.

These models validate ServiceResult.data shapes before they leave the
command layer so key regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a JSON-ready payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class OrganizationItem(BaseModel):
    """One organization row."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: str
    created_at: str | None = None
    updated_at: str | None = None


class OrganizationListData(BaseModel):
    """Payload contract for ``org list``."""

    count: int
    items: list[OrganizationItem]


class MappingItem(BaseModel):
    """One user resource mapping row."""

    user_id: str
    user_type: str
    resource_type: str
    resource_id: str


class MappingListData(BaseModel):
    """Payload contract for ``urm list``."""

    count: int
    items: list[MappingItem]
