"""Command group: organization CRUD."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from tenantctl.commands._base import ExampleGroup
from tenantctl.domain.models import (
    FindOptions,
    Organization,
    OrganizationFilter,
    OrganizationUpdate,
)
from tenantctl.services.contracts import (
    OrganizationItem,
    OrganizationListData,
    dump_validated,
)

if TYPE_CHECKING:
    from tenantctl.commands._context import AppContext


def _org_payload(org: Organization) -> dict[str, Any]:
    return dump_validated(OrganizationItem, org.model_dump(mode="json"))


@click.group(
    cls=ExampleGroup,
    examples="""\
  tenantctl org create acme --description "ACME Corp"
  tenantctl org get 0a1b2c3d4e5f6a7b
  tenantctl org list --limit 10
  tenantctl --json org delete 0a1b2c3d4e5f6a7b""",
)
def org() -> None:
    """Create, find, update, and delete organizations."""


@org.command(examples="  tenantctl org create acme\n  tenantctl org create acme -d 'ACME Corp'")
@click.argument("name")
@click.option("-d", "--description", default="", help="Free-form description.")
@click.pass_obj
def create(app: AppContext, name: str, description: str) -> None:
    """Create an organization named NAME."""
    app.run(
        "create_organization",
        lambda: _org_payload(
            app.org_service.create_organization(Organization(name=name, description=description))
        ),
    )


@org.command(examples="  tenantctl org get 0a1b2c3d4e5f6a7b")
@click.argument("org_id")
@click.pass_obj
def get(app: AppContext, org_id: str) -> None:
    """Show the organization with ID ORG_ID."""
    app.run(
        "find_organization_by_id",
        lambda: _org_payload(app.org_service.find_organization_by_id(org_id)),
    )


@org.command(examples="  tenantctl org find --name acme")
@click.option("--id", "org_id", default=None, help="Match this ID.")
@click.option("--name", default=None, help="Match this name.")
@click.pass_obj
def find(app: AppContext, org_id: str | None, name: str | None) -> None:
    """Show the single organization matching the given filter."""
    flt = OrganizationFilter(id=org_id, name=name)
    app.run("find_organization", lambda: _org_payload(app.org_service.find_organization(flt)))


@org.command(name="list", examples="  tenantctl org list --sort-by created_at --desc --limit 5")
@click.option("--name", default=None, help="Only organizations with this name.")
@click.option("--limit", type=click.IntRange(min=0), default=0, help="Maximum results (0 = all).")
@click.option("--offset", type=click.IntRange(min=0), default=0, help="Skip this many results.")
@click.option("--sort-by", default="name", help="Field to order by.")
@click.option("--desc", "descending", is_flag=True, help="Reverse the ordering.")
@click.pass_obj
def list_cmd(
    app: AppContext,
    name: str | None,
    limit: int,
    offset: int,
    sort_by: str,
    descending: bool,
) -> None:
    """List organizations."""
    flt = OrganizationFilter(name=name)
    opts = FindOptions(limit=limit, offset=offset, sort_by=sort_by, descending=descending)

    def action() -> dict[str, Any]:
        orgs, count = app.org_service.find_organizations(flt, opts)
        return dump_validated(
            OrganizationListData,
            {"count": count, "items": [o.model_dump(mode="json") for o in orgs]},
        )

    app.run("find_organizations", action)


@org.command(examples="  tenantctl org update 0a1b2c3d4e5f6a7b --name acme-inc")
@click.argument("org_id")
@click.option("--name", default=None, help="New name.")
@click.option("-d", "--description", default=None, help="New description.")
@click.pass_obj
def update(app: AppContext, org_id: str, name: str | None, description: str | None) -> None:
    """Update fields of organization ORG_ID."""
    patch = OrganizationUpdate(name=name, description=description)
    app.run(
        "update_organization",
        lambda: _org_payload(app.org_service.update_organization(org_id, patch)),
    )


@org.command(examples="  tenantctl org delete 0a1b2c3d4e5f6a7b")
@click.argument("org_id")
@click.pass_obj
def delete(app: AppContext, org_id: str) -> None:
    """Delete organization ORG_ID."""

    def action() -> dict[str, Any]:
        app.org_service.delete_organization(org_id)
        return {"id": org_id}

    app.run("delete_organization", action)
