# topmark:header:start
#
#   project      : TomLayer
#   file         : __init__.py
#   file_relpath : src/tomlayer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomLayer package.

TomLayer loads layered TOML configuration: built-in defaults, config files,
explicit overrides and environment variables are deep-merged, validated, and
mapped onto immutable typed records. It exposes both a CLI and a small typed API.
"""

from __future__ import annotations

from tomlayer.loader import LoadedConfig, apply_assignments, load_config, parse_assignment
from tomlayer.schema.model import AppConfig
from tomlayer.schema.validation import ValidationReport, is_valid, validate_tree
from tomlayer.tree.env import apply_env_overrides
from tomlayer.tree.merge import deep_merge, merge_layers

__all__: list[str] = [
    "AppConfig",
    "LoadedConfig",
    "ValidationReport",
    "apply_assignments",
    "apply_env_overrides",
    "deep_merge",
    "is_valid",
    "load_config",
    "merge_layers",
    "parse_assignment",
    "validate_tree",
]
