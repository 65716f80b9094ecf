# topmark:header:start
#
#   project      : TomLayer
#   file         : __init__.py
#   file_relpath : src/tomlayer/schema/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Application configuration schema: key names, typed records and validation."""

from __future__ import annotations

from .keys import Toml
from .model import (
    AppConfig,
    DatabaseConfig,
    LoggingConfig,
    LogLevel,
    OwnerConfig,
    ServerConfig,
)
from .validation import ValidationReport, is_valid, validate_tree

__all__: list[str] = [
    "AppConfig",
    "DatabaseConfig",
    "LogLevel",
    "LoggingConfig",
    "OwnerConfig",
    "ServerConfig",
    "Toml",
    "ValidationReport",
    "is_valid",
    "validate_tree",
]
