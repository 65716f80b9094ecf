# topmark:header:start
#
#   project      : TomLayer
#   file         : types.py
#   file_relpath : src/tomlayer/io/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared type aliases for TOML configuration trees."""

from __future__ import annotations

from typing import Any

# A parsed TOML table: string keys mapped to scalars, arrays or nested tables.
TomlTable = dict[str, Any]
