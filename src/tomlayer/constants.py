# topmark:header:start
#
#   project      : TomLayer
#   file         : constants.py
#   file_relpath : src/tomlayer/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomLayer Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    TOMLAYER_VERSION: str = get_version("tomlayer")
except PackageNotFoundError:  # running from a source checkout
    TOMLAYER_VERSION = "0.0.0+unknown"

# Name of the bundled annotated default config inside the package `tomlayer`:
DEFAULT_TOML_CONFIG_PACKAGE: Final[str] = "tomlayer"
DEFAULT_TOML_CONFIG_NAME: Final[str] = "tomlayer-default.toml"

HEADER_END_MARKER: Final[str] = "topmark:header:end"

# Section holding TomLayer settings inside `pyproject.toml`
PYPROJECT_SECTION: Final[str] = "tool.tomlayer"

# Internal logging level override
LOG_LEVEL_ENV_VAR: Final[str] = "TOMLAYER_LOG_LEVEL"

# Environment overrides: `TOMLAYER_SERVER__PORT=9000` -> server.port = 9000
ENV_PREFIX: Final[str] = "TOMLAYER_"
ENV_PATH_SEPARATOR: Final[str] = "__"

# Explicit environment bindings (variable name -> dotted config path)
DEFAULT_ENV_BINDINGS: Final[dict[str, str]] = {
    "DATABASE_URL": "database.url",
}

# Accepted (unprivileged) port range for [server].port, inclusive
PORT_MIN: Final[int] = 1024
PORT_MAX: Final[int] = 65535
