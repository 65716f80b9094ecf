# topmark:header:start
#
#   project      : TomLayer
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TomLayer test suite.

Sets up TRACE logging for test runs and keeps the developer's shell environment
(``TOMLAYER_LOG_LEVEL``, ``DATABASE_URL``, ``TOMLAYER_*``) from leaking into tests.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from tests.helpers import VALID_CONFIG, write_toml
from tomlayer.constants import DEFAULT_ENV_BINDINGS, ENV_PREFIX
from tomlayer.core import logging

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that TomLayer reads.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to delete the variables for one test.
    """
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX) or name in DEFAULT_ENV_BINDINGS:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def valid_config_file(tmp_path: Path) -> Path:
    """Return a path to a complete, valid configuration file."""
    return write_toml(tmp_path / "config.toml", VALID_CONFIG)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)
