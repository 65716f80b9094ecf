# topmark:header:start
#
#   project      : TomLayer
#   file         : __init__.py
#   file_relpath : src/tomlayer/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O for TomLayer.

Typical flow:
    1. Load runtime defaults (``load_defaults_dict``).
    2. Parse TOML from a file, a binary stream or a string (``load_toml_file``,
       ``load_toml_stream``, ``load_toml_text``).
    3. Read values with checked getters (diagnostics) or strict getters (raising).
    4. Serialize back to TOML when needed (``to_toml``).

Notes:
    - `tomlkit` is used for parsing and rendering. It round-trips comments when
      needed and keeps TOML date-time literals as native `datetime` values.
    - Internal modules import from the submodules directly; this package only
      re-exports the public surface.
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_list_value_checked,
    get_string_value_or_none_checked,
    get_value_checked,
    optional_value,
    require_value,
)
from .guards import (
    is_any_list,
    is_homogeneous_list,
    is_int,
    is_toml_table,
    toml_type_name,
)
from .loaders import (
    load_default_template_text,
    load_defaults_dict,
    load_toml_file,
    load_toml_section,
    load_toml_stream,
    load_toml_text,
)
from .render import clean_toml, to_toml
from .types import TomlTable

__all__: list[str] = [
    "TomlTable",
    "clean_toml",
    "get_bool_value_or_none_checked",
    "get_enum_value_checked",
    "get_int_value_or_none_checked",
    "get_string_list_value_checked",
    "get_string_value_or_none_checked",
    "get_value_checked",
    "is_any_list",
    "is_homogeneous_list",
    "is_int",
    "is_toml_table",
    "load_default_template_text",
    "load_defaults_dict",
    "load_toml_file",
    "load_toml_section",
    "load_toml_stream",
    "load_toml_text",
    "optional_value",
    "require_value",
    "to_toml",
    "toml_type_name",
]
