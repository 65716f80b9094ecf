# topmark:header:start
#
#   project      : TomLayer
#   file         : env.py
#   file_relpath : src/tomlayer/tree/env.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Environment-variable overrides for configuration trees.

Two kinds of variables are honored, applied in this order (later wins):

1. **Bindings**: explicit ``NAME -> dotted.path`` pairs. The default binding is
   ``DATABASE_URL -> database.url``.
2. **Prefixed variables**: ``TOMLAYER_SERVER__PORT=9000`` sets ``server.port``.
   After stripping the prefix, ``__`` separates path segments and segments are
   lowercased. ``TOMLAYER_LOG_LEVEL`` is reserved for internal logging and is
   never treated as an override.

Values arrive as strings and are coerced by `coerce_env_value`: when the value
being replaced is a string the raw text is kept, otherwise the text is read as a
TOML literal (``9000`` -> int, ``true`` -> bool, ``["a", "b"]`` -> list) and
falls back to the raw string when it is not one.
"""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from tomlayer.constants import (
    DEFAULT_ENV_BINDINGS,
    ENV_PATH_SEPARATOR,
    ENV_PREFIX,
    LOG_LEVEL_ENV_VAR,
)
from tomlayer.core.errors import ConfigTypeError
from tomlayer.core.logging import get_logger
from tomlayer.tree.paths import get_path, set_path, split_path

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tomlayer.core.diagnostics import DiagnosticLog
    from tomlayer.core.logging import TomlayerLogger
    from tomlayer.io.types import TomlTable

logger: TomlayerLogger = get_logger(__name__)

RESERVED_ENV_VARS: frozenset[str] = frozenset({LOG_LEVEL_ENV_VAR})


def coerce_env_value(raw: str, current: Any = None) -> Any:
    """Convert an environment string into a config value.

    Args:
        raw (str): The variable's value.
        current (Any): The value currently stored at the target path, if any.

    Returns:
        Any: ``raw`` when ``current`` is a string (or ``raw`` is not a TOML
        literal), otherwise the parsed TOML value.
    """
    if isinstance(current, str) or not raw.strip():
        return raw
    try:
        return tomlkit.value(raw).unwrap()
    except (TOMLKitError, ValueError):
        logger.trace("Not a TOML literal, keeping string")
        return raw


def env_path_for(name: str, prefix: str = ENV_PREFIX) -> str | None:
    """Return the dotted config path for a prefixed variable name.

    Returns:
        str | None: ``"server.port"`` for ``"TOMLAYER_SERVER__PORT"``; None when
        ``name`` does not carry the prefix or is reserved.
    """
    if not prefix or not name.startswith(prefix) or name in RESERVED_ENV_VARS:
        return None
    segments: list[str] = name[len(prefix) :].lower().split(ENV_PATH_SEPARATOR)
    return ".".join(segments)


def iter_env_assignments(
    environ: Mapping[str, str],
    *,
    bindings: Mapping[str, str] = DEFAULT_ENV_BINDINGS,
    prefix: str = ENV_PREFIX,
) -> Iterator[tuple[str, str, str]]:
    """Yield ``(variable, dotted_path, raw_value)`` for each applicable variable.

    Bindings come first (in binding order), then prefixed variables sorted by name.
    """
    for name, path in bindings.items():
        if name in environ:
            yield name, path, environ[name]

    for name in sorted(environ):
        path: str | None = env_path_for(name, prefix)
        if path is not None:
            yield name, path, environ[name]


def apply_env_overrides(
    tree: Mapping[str, Any],
    environ: Mapping[str, str] | None = None,
    *,
    bindings: Mapping[str, str] = DEFAULT_ENV_BINDINGS,
    prefix: str = ENV_PREFIX,
    diagnostics: DiagnosticLog | None = None,
) -> TomlTable:
    """Return a copy of ``tree`` patched from environment variables.

    Args:
        tree (Mapping[str, Any]): The configuration tree; not modified.
        environ (Mapping[str, str] | None): Variables to read; defaults to ``os.environ``.
        bindings (Mapping[str, str]): Explicit variable-name to dotted-path bindings.
        prefix (str): Prefix of generic override variables; empty disables them.
        diagnostics (DiagnosticLog | None): Receives a warning for each skipped variable.

    Returns:
        TomlTable: The patched tree.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    result: TomlTable = copy.deepcopy(dict(tree))

    for name, path, raw in iter_env_assignments(env, bindings=bindings, prefix=prefix):
        try:
            split_path(path)
            value: Any = coerce_env_value(raw, get_path(result, path))
            set_path(result, path, value)
        except (ValueError, ConfigTypeError) as exc:
            msg: str = f"Ignoring environment variable {name}: {exc}"
            logger.warning(msg)
            if diagnostics is not None:
                diagnostics.add_warning(msg)
            continue
        # Values may be secrets (DATABASE_URL); log the mapping only.
        logger.debug("Applied environment override %s -> %s", name, path)
        if diagnostics is not None:
            diagnostics.add_info(f"{path} overridden by environment variable {name}")

    return result


def env_overrides(
    environ: Mapping[str, str] | None = None,
    *,
    bindings: Mapping[str, str] = DEFAULT_ENV_BINDINGS,
    prefix: str = ENV_PREFIX,
) -> TomlTable:
    """Return only the override layer built from the environment.

    The layer can be merged by the caller with `tomlayer.tree.merge.deep_merge`.
    Since there is no existing value to compare with, every value is read as a
    TOML literal where possible.
    """
    return apply_env_overrides({}, environ, bindings=bindings, prefix=prefix)
