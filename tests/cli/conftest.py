# topmark:header:start
#
#   project      : TomLayer
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running TomLayer through Click's test runner."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from tomlayer.cli.main import cli
from tomlayer.core.logging import ChalkFormatter

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the CLI's `setup_logging` so later tests keep the suite's logging setup."""
    root: logging.Logger = logging.getLogger()
    saved: list[logging.Handler] = [
        h for h in root.handlers if isinstance(h.formatter, ChalkFormatter)
    ]
    level: int = root.level
    yield
    for h in root.handlers[:]:
        if isinstance(h.formatter, ChalkFormatter):
            root.removeHandler(h)
    for h in saved:
        root.addHandler(h)
    root.setLevel(level)


def run_cli(
    argv: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["check", "app.toml"]``.
        env (Mapping[str, str] | None): Extra environment variables for the run.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), env=dict(env) if env else None)


def run_cli_in(
    tmp_path: Path,
    argv: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Use this when the test passes relative file names.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, env=env)
    finally:
        os.chdir(cwd)
