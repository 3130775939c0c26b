"""Shared pytest fixtures and test helpers for tenantctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner
from structlog.testing import CapturingLogger

from tenantctl.infrastructure.kv import KVStore
from tenantctl.services.mapping import MappingStoreService
from tenantctl.services.organization import OrganizationStoreService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store() -> KVStore:
    """In-memory key/value store."""
    return KVStore()


@pytest.fixture
def file_store(tmp_path: Path) -> KVStore:
    """Key/value store persisted under a temp directory."""
    return KVStore(tmp_path / "store.json")


@pytest.fixture
def org_service(store: KVStore) -> OrganizationStoreService:
    return OrganizationStoreService(store)


@pytest.fixture
def mapping_service(store: KVStore) -> MappingStoreService:
    return MappingStoreService(store)


@pytest.fixture
def sink() -> CapturingLogger:
    """Log sink recording every call as ``Call(method_name, args, kwargs)``."""
    return CapturingLogger()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated store.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TENANTCTL_CONFIG", raising=False)
    monkeypatch.delenv("TENANTCTL_STORE__PATH", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo logging configuration done by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tenant = logging.getLogger("tenantctl")
    tenant_level = tenant.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tenant.setLevel(tenant_level)
    structlog.reset_defaults()
