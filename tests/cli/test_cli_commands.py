# topmark:header:start
#
#   project      : TomLayer
#   file         : test_cli_commands.py
#   file_relpath : tests/cli/test_cli_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `tomlayer dump`, `merge`, `init` and `version`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import run_cli
from tests.helpers import write_toml
from tomlayer.cli.exit_codes import ExitCode
from tomlayer.constants import TOMLAYER_VERSION
from tomlayer.io.loaders import load_toml_text
from tomlayer.schema.validation import validate_tree

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_dump_toml_includes_defaults_and_overrides(valid_config_file: Path) -> None:
    result = run_cli(
        ["dump", str(valid_config_file), "--set", "server.port=9000"],
        env={"TOMLAYER_DATABASE__POOL_SIZE": "20"},
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    tree = load_toml_text(result.output)
    assert tree["title"] == "Example"
    assert tree["server"]["port"] == 9000
    assert tree["database"]["pool_size"] == 20
    assert tree["database"]["timeout"] == 30
    assert tree["logging"] == {"level": "INFO"}


def test_set_on_string_key_matches_environment_override(valid_config_file: Path) -> None:
    via_set = run_cli(
        ["dump", "--format", "json", "--no-env", str(valid_config_file)]
        + ["--set", "server.host=8080"]
    )
    via_env = run_cli(
        ["dump", "--format", "json", str(valid_config_file)],
        env={"TOMLAYER_SERVER__HOST": "8080"},
    )

    assert via_set.exit_code == ExitCode.SUCCESS, via_set.output
    assert via_env.exit_code == ExitCode.SUCCESS, via_env.output
    assert json.loads(via_set.output)["server"]["host"] == "8080"
    assert json.loads(via_env.output)["server"]["host"] == "8080"
    assert "warning" not in via_set.output.lower()


def test_set_through_scalar_is_a_usage_error(valid_config_file: Path) -> None:
    result = run_cli(["dump", "--no-env", str(valid_config_file), "--set", "server.port.x=1"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "Invalid --set value" in result.output


def test_dump_json(valid_config_file: Path) -> None:
    result = run_cli(["dump", "--format", "json", "--no-env", str(valid_config_file)])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    data = json.loads(result.output)
    assert data["server"]["port"] == 8080
    assert data["owner"]["dob"].startswith("1979-05-27")


def test_dump_missing_file(tmp_path: Path) -> None:
    result = run_cli(["dump", str(tmp_path / "nope.toml")])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND


def test_merge_files_without_defaults(tmp_path: Path) -> None:
    base = write_toml(
        tmp_path / "base.toml",
        """
        [server]
        host = "localhost"
        port = 8080
        """,
    )
    override = write_toml(
        tmp_path / "override.toml",
        """
        [server]
        port = 9000
        """,
    )

    result = run_cli(["merge", str(base), str(override)], env={"DATABASE_URL": "ignored"})

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert load_toml_text(result.output) == {"server": {"host": "localhost", "port": 9000}}


def test_merge_requires_an_override(tmp_path: Path) -> None:
    base = write_toml(tmp_path / "base.toml", "a = 1\n")

    result = run_cli(["merge", str(base)])

    assert result.exit_code != ExitCode.SUCCESS


def test_merge_verbose_reports_conflicts(tmp_path: Path) -> None:
    base = write_toml(tmp_path / "base.toml", "[opts]\nx = 1\n")
    override = write_toml(tmp_path / "override.toml", 'opts = "none"\n')

    result = run_cli(["-v", "merge", str(base), str(override)])

    assert result.exit_code == ExitCode.SUCCESS
    assert "Replacing table at opts with string" in result.output


def test_init_prints_valid_template() -> None:
    result = run_cli(["init"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "topmark:header" not in result.output
    assert validate_tree(load_toml_text(result.output)).ok


def test_version() -> None:
    result = run_cli(["version"])

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.strip() == TOMLAYER_VERSION


def test_no_command_prints_help() -> None:
    result = run_cli([])

    assert result.exit_code == ExitCode.SUCCESS
    assert "Usage:" in result.output
    assert "check" in result.output
