"""Root CLI group for tenantctl with global flags and command registration."""

from __future__ import annotations

import click

from tenantctl import __version__
from tenantctl.commands import register_commands
from tenantctl.commands._context import AppContext
from tenantctl.config.settings import TenantSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tenantctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Log every service call.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--store", "store_path", default=None, help="Store file (':memory:' for none).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    store_path: str | None,
) -> None:
    """tenantctl: organizations and user resource mappings."""
    ctx.ensure_object(dict)
    settings = TenantSettings.from_cli(
        config_path=config_path,
        store_path=store_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
