"""Classification enums shared across the tenant domain."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Categorical error classification callers branch on."""

    INVALID = "invalid"
    NOT_FOUND = "not found"
    INTERNAL = "internal error"
    UNPROCESSABLE_ENTITY = "unprocessable entity"


class UserType(StrEnum):
    """Role a user holds over a mapped resource."""

    OWNER = "owner"
    MEMBER = "member"


class ResourceType(StrEnum):
    """Resources a user can be mapped to."""

    ORGS = "orgs"
    BUCKETS = "buckets"
    DASHBOARDS = "dashboards"
    TASKS = "tasks"
    TELEGRAFS = "telegrafs"
    VARIABLES = "variables"
