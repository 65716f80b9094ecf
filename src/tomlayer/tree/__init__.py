# topmark:header:start
#
#   project      : TomLayer
#   file         : __init__.py
#   file_relpath : src/tomlayer/tree/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Operations on configuration trees: deep merge, dotted paths and environment overrides."""

from __future__ import annotations

from .env import apply_env_overrides, coerce_env_value, env_overrides
from .merge import deep_merge, merge_layers
from .paths import get_path, nest, set_path, split_path

__all__: list[str] = [
    "apply_env_overrides",
    "coerce_env_value",
    "deep_merge",
    "env_overrides",
    "get_path",
    "merge_layers",
    "nest",
    "set_path",
    "split_path",
]
