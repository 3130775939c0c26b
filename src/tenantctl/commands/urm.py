"""Command group: user resource mappings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from tenantctl.commands._base import ExampleGroup
from tenantctl.domain.models import (
    FindOptions,
    UserResourceMapping,
    UserResourceMappingFilter,
)
from tenantctl.domain.types import ResourceType, UserType
from tenantctl.services.contracts import MappingItem, MappingListData, dump_validated

if TYPE_CHECKING:
    from tenantctl.commands._context import AppContext

_RESOURCE_TYPES = click.Choice([t.value for t in ResourceType])


@click.group(
    cls=ExampleGroup,
    examples="""\
  tenantctl urm add 00000000000000aa orgs 0a1b2c3d4e5f6a7b --owner
  tenantctl urm list --resource-id 0a1b2c3d4e5f6a7b
  tenantctl urm remove 0a1b2c3d4e5f6a7b 00000000000000aa""",
)
def urm() -> None:
    """Map users to resources."""


@urm.command(examples="  tenantctl urm add 00000000000000aa buckets 0a1b2c3d4e5f6a7b")
@click.argument("user_id")
@click.argument("resource_type", type=_RESOURCE_TYPES)
@click.argument("resource_id")
@click.option("--owner", is_flag=True, help="Map as owner instead of member.")
@click.pass_obj
def add(app: AppContext, user_id: str, resource_type: str, resource_id: str, owner: bool) -> None:
    """Grant USER_ID access to RESOURCE_ID."""
    mapping = UserResourceMapping(
        user_id=user_id,
        user_type=UserType.OWNER if owner else UserType.MEMBER,
        resource_type=ResourceType(resource_type),
        resource_id=resource_id,
    )
    app.run(
        "create_user_resource_mapping",
        lambda: dump_validated(
            MappingItem,
            app.urm_service.create_user_resource_mapping(mapping).model_dump(mode="json"),
        ),
    )


@urm.command(name="list", examples="  tenantctl urm list --user-id 00000000000000aa")
@click.option("--user-id", default=None, help="Only mappings of this user.")
@click.option("--resource-id", default=None, help="Only mappings on this resource.")
@click.option("--resource-type", type=_RESOURCE_TYPES, default=None, help="Only this resource type.")
@click.option("--limit", type=click.IntRange(min=0), default=0, help="Maximum results (0 = all).")
@click.option("--offset", type=click.IntRange(min=0), default=0, help="Skip this many results.")
@click.pass_obj
def list_cmd(
    app: AppContext,
    user_id: str | None,
    resource_id: str | None,
    resource_type: str | None,
    limit: int,
    offset: int,
) -> None:
    """List user resource mappings."""
    flt = UserResourceMappingFilter(
        user_id=user_id,
        resource_id=resource_id,
        resource_type=ResourceType(resource_type) if resource_type else None,
    )
    opts = FindOptions(limit=limit, offset=offset)

    def action() -> dict[str, Any]:
        mappings, count = app.urm_service.find_user_resource_mappings(flt, opts)
        return dump_validated(
            MappingListData,
            {"count": count, "items": [m.model_dump(mode="json") for m in mappings]},
        )

    app.run("find_user_resource_mappings", action)


@urm.command(examples="  tenantctl urm remove 0a1b2c3d4e5f6a7b 00000000000000aa")
@click.argument("resource_id")
@click.argument("user_id")
@click.pass_obj
def remove(app: AppContext, resource_id: str, user_id: str) -> None:
    """Remove USER_ID's mappings on RESOURCE_ID."""

    def action() -> dict[str, Any]:
        app.urm_service.delete_user_resource_mapping(resource_id, user_id)
        return {"resource_id": resource_id, "user_id": user_id}

    app.run("delete_user_resource_mapping", action)
