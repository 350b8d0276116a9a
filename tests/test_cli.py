"""Tests for the clustercfg command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from clustercfg import __version__
from clustercfg.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "cluster config" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


class TestClusterCommand:
    def test_valid_config(
        self, cli_runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        path = write_config('{"name":"west","group":42}')
        result = cli_runner.invoke(cli, [str(path)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "OK: cluster_info",
            "ClusterMap(name='west', group=42)",
            f"  path: {path}",
        ]

    def test_missing_file_exit_code(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        missing = tmp_path / "missing.json"
        result = cli_runner.invoke(cli, [str(missing)])
        assert result.exit_code == 3
        assert "IO_FAILURE" in result.output
        assert "failed to read config file" in result.output

    def test_malformed_config_exit_code(
        self, cli_runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        result = cli_runner.invoke(cli, [str(write_config('{"name":"east"}'))])
        assert result.exit_code == 4
        assert "PARSE_FAILURE" in result.output

    def test_invalid_group_exit_code(
        self, cli_runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        result = cli_runner.invoke(cli, [str(write_config('{"name":"east","group":150}'))])
        assert result.exit_code == 5
        assert "INVALID_GROUP" in result.output
        assert "150" in result.output

    def test_json_output(
        self, cli_runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        path = write_config('{"name":"west","group":42}')
        result = cli_runner.invoke(cli, ["--json", str(path)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"] == {"path": str(path), "name": "west", "group": 42}

    def test_json_error_output(
        self, cli_runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        path = write_config('{"name":"east","group":-1}')
        result = cli_runner.invoke(cli, ["--json", str(path)])
        assert result.exit_code == 5
        data = json.loads(result.output)
        assert data["error"]["code"] == "INVALID_GROUP"
        assert data["error"]["detail"]["value"] == -1

    def test_default_path_is_cluster_json(
        self,
        cli_runner: CliRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("CLUSTERCFG_CONFIG_PATH", raising=False)
        (tmp_path / "cluster.json").write_text('{"name":"home","group":100}')
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "ClusterMap(name='home', group=100)" in result.output

    def test_path_from_env(
        self,
        cli_runner: CliRunner,
        write_config: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        path = write_config('{"name":"env","group":7}', name="other.json")
        monkeypatch.setenv("CLUSTERCFG_CONFIG_PATH", str(path))
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "ClusterMap(name='env', group=7)" in result.output

    def test_verbose_flag_accepted(
        self, cli_runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        path = write_config('{"name":"west","group":42}')
        result = cli_runner.invoke(cli, ["-v", "--log-json", str(path)])
        assert result.exit_code == 0
