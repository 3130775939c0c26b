"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazily built, logged services and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click
import structlog

from tenantctl.domain.errors import ClassifiedError
from tenantctl.output.formatters import format_result
from tenantctl.services.result import ServiceResult

if TYPE_CHECKING:
    from tenantctl.config.settings import TenantSettings
    from tenantctl.infrastructure.kv import KVStore
    from tenantctl.services.org_logging import OrgLogger
    from tenantctl.services.urm_logging import UrmLogger

SERVICE_LOGGER = "tenantctl.services"


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store and services are created on first use so ``--help`` and
    ``--version`` never touch the store file.
    """

    def __init__(self, settings: TenantSettings) -> None:
        self.settings = settings
        self._store: KVStore | None = None
        self._org_service: OrgLogger | None = None
        self._urm_service: UrmLogger | None = None

        from tenantctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.json_logs)

    @property
    def store(self) -> KVStore:
        if self._store is None:
            from tenantctl.infrastructure.kv import KVStore

            self._store = KVStore(self.settings.store_path)
        return self._store

    @property
    def org_service(self) -> OrgLogger:
        """Organization service wrapped in the logging middleware."""
        if self._org_service is None:
            from tenantctl.services.org_logging import OrgLogger
            from tenantctl.services.organization import OrganizationStoreService

            self._org_service = OrgLogger(
                structlog.get_logger(SERVICE_LOGGER), OrganizationStoreService(self.store)
            )
        return self._org_service

    @property
    def urm_service(self) -> UrmLogger:
        """User resource mapping service wrapped in the logging middleware."""
        if self._urm_service is None:
            from tenantctl.services.mapping import MappingStoreService
            from tenantctl.services.urm_logging import UrmLogger

            self._urm_service = UrmLogger(
                structlog.get_logger(SERVICE_LOGGER), MappingStoreService(self.store)
            )
        return self._urm_service

    def run(self, op: str, action: Callable[[], dict[str, Any]]) -> None:
        """Call *action* and emit its payload, or its classified error."""
        try:
            data = action()
        except ClassifiedError as exc:
            result = ServiceResult.failure(op, exc)
        else:
            result = ServiceResult(ok=True, op=op, data=data)
        self.emit(result)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result, json_output=self.settings.json_output, verbose=self.settings.verbose
        )
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
