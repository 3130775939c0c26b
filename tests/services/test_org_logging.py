"""Tests for the organization logging middleware."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest
import structlog
from structlog.testing import CapturingLogger, capture_logs

from tenantctl.domain.errors import ClassifiedError, org_not_found_error
from tenantctl.domain.models import (
    FindOptions,
    Organization,
    OrganizationFilter,
    OrganizationUpdate,
)
from tenantctl.domain.types import ErrorKind
from tenantctl.services.org_logging import OrgLogger
from tenantctl.services.organization import OrganizationStoreService
from tenantctl.services.protocols import OrganizationService

ORG = Organization(id="0a1b2c3d4e5f6a7b", name="acme")


class StubOrgService:
    """Returns canned values, or raises ``error`` when set. Records calls."""

    def __init__(self, error: BaseException | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._lock = threading.Lock()

    def _record(self, name: str, *args: Any) -> None:
        with self._lock:
            self.calls.append((name, args))
        if self.error is not None:
            raise self.error

    def create_organization(self, org: Organization) -> Organization:
        self._record("create_organization", org)
        return ORG

    def find_organization_by_id(self, org_id: str) -> Organization:
        self._record("find_organization_by_id", org_id)
        return ORG

    def find_organization(self, filter: OrganizationFilter) -> Organization:
        self._record("find_organization", filter)
        return ORG

    def find_organizations(
        self, filter: OrganizationFilter, *opts: FindOptions
    ) -> tuple[list[Organization], int]:
        self._record("find_organizations", filter, *opts)
        return [ORG], 1

    def update_organization(self, org_id: str, update: OrganizationUpdate) -> Organization:
        self._record("update_organization", org_id, update)
        return ORG

    def delete_organization(self, org_id: str) -> None:
        self._record("delete_organization", org_id)


FLT = OrganizationFilter(name="acme")
OPTS = FindOptions(limit=5, offset=1)
UPD = OrganizationUpdate(description="new")

# (method, args, success event, failure event, failure context)
OPERATIONS: list[tuple[str, tuple[Any, ...], str, str, dict[str, Any]]] = [
    ("create_organization", (ORG,), "org create", "failed to create org", {}),
    (
        "find_organization_by_id",
        (ORG.id,),
        "org find by ID",
        "failed to find org with ID",
        {"org_id": ORG.id},
    ),
    (
        "find_organization",
        (FLT,),
        "org find",
        "failed to find org matching the given filter",
        {"filter": FLT},
    ),
    (
        "find_organizations",
        (FLT, OPTS),
        "orgs find",
        "failed to find org matching the given filter",
        {"filter": FLT},
    ),
    ("update_organization", (ORG.id, UPD), "org update", "failed to update org", {"org_id": ORG.id}),
    (
        "delete_organization",
        (ORG.id,),
        "org delete",
        "failed to delete org with ID",
        {"org_id": ORG.id},
    ),
]

_IDS = [op[0] for op in OPERATIONS]


class TestOrgLoggerContract:
    def test_satisfies_protocol(self, sink: CapturingLogger) -> None:
        assert isinstance(OrgLogger(sink, StubOrgService()), OrganizationService)

    def test_holds_references(self, sink: CapturingLogger) -> None:
        inner = StubOrgService()
        svc = OrgLogger(sink, inner)
        assert svc._org_service is inner
        assert svc._logger is sink


class TestOrgLoggerSuccess:
    @pytest.mark.parametrize(("method", "args", "success", "failure", "context"), OPERATIONS, ids=_IDS)
    def test_returns_result_and_logs_info(
        self,
        sink: CapturingLogger,
        method: str,
        args: tuple[Any, ...],
        success: str,
        failure: str,
        context: dict[str, Any],
    ) -> None:
        inner = StubOrgService()
        expected = getattr(inner, method)(*args)
        inner.calls.clear()

        result = getattr(OrgLogger(sink, inner), method)(*args)

        assert result == expected
        assert inner.calls == [(method, args)]
        assert len(sink.calls) == 1
        call = sink.calls[0]
        assert call.method_name == "info"
        assert call.args == (success,)
        assert call.kwargs["op"] == method
        assert call.kwargs["took_ms"] >= 0
        assert "error" not in call.kwargs

    def test_result_identity_preserved(self, sink: CapturingLogger) -> None:
        assert OrgLogger(sink, StubOrgService()).find_organization_by_id(ORG.id) is ORG

    def test_find_organizations_forwards_every_option(self, sink: CapturingLogger) -> None:
        inner = StubOrgService()
        second = FindOptions(limit=1)
        OrgLogger(sink, inner).find_organizations(FLT, OPTS, second)
        assert inner.calls == [("find_organizations", (FLT, OPTS, second))]

    def test_find_organizations_without_options(self, sink: CapturingLogger) -> None:
        inner = StubOrgService()
        OrgLogger(sink, inner).find_organizations(FLT)
        assert inner.calls == [("find_organizations", (FLT,))]


class TestOrgLoggerFailure:
    @pytest.mark.parametrize(("method", "args", "success", "failure", "context"), OPERATIONS, ids=_IDS)
    def test_reraises_same_error_and_logs_once(
        self,
        sink: CapturingLogger,
        method: str,
        args: tuple[Any, ...],
        success: str,
        failure: str,
        context: dict[str, Any],
    ) -> None:
        err = org_not_found_error()
        svc = OrgLogger(sink, StubOrgService(error=err))

        with pytest.raises(ClassifiedError) as info:
            getattr(svc, method)(*args)

        assert info.value is err
        assert info.value.__cause__ is None
        assert len(sink.calls) == 1
        call = sink.calls[0]
        assert call.method_name == "error"
        assert call.args == (failure,)
        assert call.kwargs["error"] is err
        assert call.kwargs["op"] == method
        assert call.kwargs["took_ms"] >= 0
        for key, value in context.items():
            assert call.kwargs[key] == value

    def test_unclassified_error_passes_through(self, sink: CapturingLogger) -> None:
        err = RuntimeError("driver exploded")
        svc = OrgLogger(sink, StubOrgService(error=err))
        with pytest.raises(RuntimeError) as info:
            svc.delete_organization(ORG.id)
        assert info.value is err
        assert sink.calls[0].kwargs["error"] is err


class TestOrgLoggerConcurrency:
    def test_one_entry_per_call(self, sink: CapturingLogger) -> None:
        ok = OrgLogger(sink, StubOrgService())
        failing = OrgLogger(sink, StubOrgService(error=org_not_found_error()))

        def call(n: int) -> bool:
            svc = failing if n % 3 == 0 else ok
            try:
                svc.find_organization_by_id(ORG.id)
            except ClassifiedError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=16) as pool:
            outcomes = list(pool.map(call, range(100)))

        assert len(sink.calls) == 100
        methods = [c.method_name for c in sink.calls]
        assert methods.count("error") == outcomes.count(False) == 34
        assert methods.count("info") == outcomes.count(True) == 66
        for c in sink.calls:
            if c.method_name == "error":
                assert c.args == ("failed to find org with ID",)
                assert "error" in c.kwargs
            else:
                assert c.args == ("org find by ID",)


class TestOrgLoggerWithStoreService:
    def test_end_to_end_with_structlog(self, org_service: OrganizationStoreService) -> None:
        with capture_logs() as logs:
            svc = OrgLogger(structlog.get_logger("tenantctl.services"), org_service)
            created = svc.create_organization(Organization(name="acme"))
            with pytest.raises(ClassifiedError) as info:
                svc.find_organization_by_id("not-an-id")

        assert info.value.kind is ErrorKind.INVALID
        assert [e["log_level"] for e in logs] == ["info", "error"]
        assert logs[0]["event"] == "org create"
        assert logs[1]["event"] == "failed to find org with ID"
        assert logs[1]["org_id"] == "not-an-id"
        assert logs[1]["error"] is info.value
        assert created.id
