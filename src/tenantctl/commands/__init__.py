"""Subcommand modules for tenantctl.

Provides register_commands() which uses deferred imports to keep
``tenantctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from tenantctl.commands.org import org
    from tenantctl.commands.urm import urm

    cli.add_command(org)
    cli.add_command(urm)
