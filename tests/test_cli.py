"""Tests for the root CLI group."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tenantctl import __version__
from tenantctl.cli import cli


class TestRootGroup:
    def test_help_without_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "org" in result.output
        assert "urm" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    @pytest.mark.usefixtures("_isolated_root")
    def test_help_does_not_create_store(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["org", "--help"])
        assert result.exit_code == 0
        assert not (tmp_path / ".tenantctl").exists()

    @pytest.mark.usefixtures("_isolated_root")
    def test_config_store_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "tenantctl.toml").write_text('[store]\npath = "orgs.json"\n')
        result = cli_runner.invoke(cli, ["org", "create", "acme"])
        assert result.exit_code == 0
        assert (tmp_path / "orgs.json").is_file()

    @pytest.mark.usefixtures("_isolated_root")
    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["urm", "--examples"])
        assert result.exit_code == 0
        assert "tenantctl urm add" in result.output
