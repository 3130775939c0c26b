"""Tests for the ``urm`` command group."""

from __future__ import annotations

import json
from typing import Any

import pytest
from click.testing import CliRunner

from tenantctl.cli import cli

USER = "00000000000000aa"
ORG = "0a1b2c3d4e5f6a7b"


def _invoke_json(runner: CliRunner, *args: str) -> tuple[int, dict[str, Any]]:
    result = runner.invoke(cli, ["--json", *args])
    output = result.stdout if result.exit_code == 0 else result.stderr
    return result.exit_code, json.loads(output[output.index("{\n") :])


@pytest.mark.usefixtures("_isolated_root")
class TestUrmCommands:
    def test_add_and_list(self, cli_runner: CliRunner) -> None:
        code, added = _invoke_json(cli_runner, "urm", "add", USER, "orgs", ORG, "--owner")
        assert code == 0
        assert added["data"] == {
            "user_id": USER,
            "user_type": "owner",
            "resource_type": "orgs",
            "resource_id": ORG,
        }
        code, listed = _invoke_json(cli_runner, "urm", "list", "--resource-id", ORG)
        assert code == 0
        assert listed["data"]["count"] == 1

    def test_add_duplicate(self, cli_runner: CliRunner) -> None:
        _invoke_json(cli_runner, "urm", "add", USER, "orgs", ORG)
        code, payload = _invoke_json(cli_runner, "urm", "add", USER, "orgs", ORG)
        assert code == 1
        assert payload["error"]["code"] == "internal error"
        assert f"mapping for user {USER} already exists" in payload["error"]["message"]
        assert payload["error"]["detail"] == {"op": "kv/userResourceMapping"}

    def test_add_invalid_id(self, cli_runner: CliRunner) -> None:
        code, payload = _invoke_json(cli_runner, "urm", "add", "bad", "orgs", ORG)
        assert code == 1
        assert payload["error"]["message"] == "provided user resource mapping ID has invalid format"

    def test_add_unknown_resource_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["urm", "add", USER, "planets", ORG])
        assert result.exit_code == 2

    def test_list_filters_by_type(self, cli_runner: CliRunner) -> None:
        _invoke_json(cli_runner, "urm", "add", USER, "orgs", ORG)
        _invoke_json(cli_runner, "urm", "add", USER, "buckets", ORG)
        _, payload = _invoke_json(cli_runner, "urm", "list", "--resource-type", "buckets")
        assert payload["data"]["count"] == 1
        assert payload["data"]["items"][0]["resource_type"] == "buckets"

    def test_remove(self, cli_runner: CliRunner) -> None:
        _invoke_json(cli_runner, "urm", "add", USER, "orgs", ORG)
        code, payload = _invoke_json(cli_runner, "urm", "remove", ORG, USER)
        assert code == 0
        assert payload["data"] == {"resource_id": ORG, "user_id": USER}

    def test_remove_missing(self, cli_runner: CliRunner) -> None:
        code, payload = _invoke_json(cli_runner, "urm", "remove", ORG, USER)
        assert code == 1
        assert payload["error"]["code"] == "not found"
        assert payload["error"]["message"] == "user to resource mapping not found"
