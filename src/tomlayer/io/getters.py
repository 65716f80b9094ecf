# topmark:header:start
#
#   project      : TomLayer
#   file         : getters.py
#   file_relpath : src/tomlayer/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value getters for TOML config tables.

Two families of getters exist:
- *Checked* getters: validate the expected shape and record **errors** in a
  `DiagnosticLog` (and also log a warning), returning None on mismatch. They are
  used by `tomlayer.schema.validation` so that every mistake in a tree is reported
  in one pass.
- *Required/optional* getters: raise `ConfigKeyError` / `ConfigTypeError`. They
  are used when building typed records, where a mismatch is a programming error
  (the tree should have been validated first).

Locations are rendered as ``[section].key`` (or ``key`` at the root).
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar

from tomlayer.core.errors import ConfigKeyError, ConfigTypeError
from tomlayer.core.logging import get_logger

from .guards import is_any_list, is_int, is_toml_table, toml_type_name

if TYPE_CHECKING:
    from tomlayer.core.diagnostics import DiagnosticLog
    from tomlayer.core.logging import TomlayerLogger

    from .types import TomlTable

logger: TomlayerLogger = get_logger(__name__)

E = TypeVar("E", bound=Enum)

# TOML type name -> predicate accepting a parsed value of that type.
TYPE_CHECKS: Final[dict[str, Callable[[object], bool]]] = {
    "string": lambda v: isinstance(v, str),
    "integer": is_int,
    "float": lambda v: isinstance(v, float) or is_int(v),
    "boolean": lambda v: isinstance(v, bool),
    # A TOML local date is accepted where a date-time is expected.
    "datetime": lambda v: isinstance(v, date),
    "array": is_any_list,
    "table": is_toml_table,
}


def location(where: str, key: str) -> str:
    """Return the display location of ``key`` inside the table ``where``."""
    return f"{where}.{key}" if where else key


# --- Schema/shape validation helpers (checked) ---


def get_value_checked(
    table: TomlTable,
    key: str,
    kind: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: TomlayerLogger,
    required: bool = False,
) -> Any | None:
    """Return ``table[key]`` if it has TOML type ``kind``, recording an error otherwise.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        kind (str): Expected TOML type name (a key of `TYPE_CHECKS`).
        where (str): TOML location prefix (e.g. ``"[server]"``).
        diagnostics (DiagnosticLog): Log receiving the error diagnostics.
        logger (TomlayerLogger): Logger for emitting warnings.
        required (bool): Whether a missing key is an error.

    Returns:
        Any | None: The value, or None when missing or of the wrong type.
    """
    loc: Final[str] = location(where, key)
    value: Any | None = table.get(key)
    if value is None:
        if required:
            logger.warning("Missing required key %s", loc)
            diagnostics.add_error(f"Missing required key {loc}")
        return None

    if TYPE_CHECKS[kind](value):
        return value

    got: str = toml_type_name(value)
    logger.warning("Expected %s in %s, got %s: %r", kind, loc, got, value)
    diagnostics.add_error(f"Expected {kind} in {loc}, got {got}: {value!r}")
    return None


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: TomlayerLogger,
    required: bool = False,
) -> str | None:
    """Return an optional string value, recording an error when present but not `str`."""
    return get_value_checked(
        table,
        key,
        "string",
        where=where,
        diagnostics=diagnostics,
        logger=logger,
        required=required,
    )


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: TomlayerLogger,
    required: bool = False,
) -> int | None:
    """Return an optional int value, recording an error when present but not `int`.

    Notes:
        `bool` is rejected (since `bool` is a subclass of `int`).
    """
    return get_value_checked(
        table,
        key,
        "integer",
        where=where,
        diagnostics=diagnostics,
        logger=logger,
        required=required,
    )


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: TomlayerLogger,
) -> bool | None:
    """Return an optional boolean value; integers are **not** coerced."""
    return get_value_checked(
        table,
        key,
        "boolean",
        where=where,
        diagnostics=diagnostics,
        logger=logger,
    )


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: TomlayerLogger,
) -> list[str]:
    """Extract a list of strings, recording an error for each non-string entry.

    Behavior:
        - If the key is missing, returns [].
        - If the value is not a list, records an error and returns [].
        - Non-string items are dropped; each one records an error.

    Returns:
        list[str]: Filtered list containing only string entries.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []

    loc: Final[str] = location(where, key)

    if not is_any_list(value):
        got: str = toml_type_name(value)
        logger.warning("Expected array in %s, got %s: %r", loc, got, value)
        diagnostics.add_error(f"Expected array in {loc}, got {got}: {value!r}")
        return []

    out: list[str] = []
    for v in value:
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_error(f"Ignoring non-string entry in {loc}: {v!r}")
    return out


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: TomlayerLogger,
) -> E | None:
    """Parse an enum value from TOML.

    Expected input is a `str` matching one of the Enum values (case-insensitive).

    - Missing key -> None
    - Wrong type -> error + None
    - Unknown enum value -> error + None
    """
    raw: str | None = get_string_value_or_none_checked(
        table, key, where=where, diagnostics=diagnostics, logger=logger
    )
    if raw is None:
        return None

    try:
        return enum_cls(raw.upper())
    except ValueError:
        loc: str = location(where, key)
        allowed: str = ", ".join(str(e.value) for e in enum_cls)
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        diagnostics.add_error(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
        return None


# --- Strict getters (raising) ---


def require_value(table: TomlTable, key: str, kind: str, *, where: str) -> Any:
    """Return ``table[key]``, raising when it is missing or of the wrong TOML type.

    Raises:
        ConfigKeyError: If ``key`` is missing.
        ConfigTypeError: If the value does not have TOML type ``kind``.
    """
    loc: str = location(where, key)
    if key not in table or table[key] is None:
        raise ConfigKeyError(f"Missing required key {loc}", where=loc)
    return optional_value(table, key, kind, where=where)


def optional_value(
    table: TomlTable,
    key: str,
    kind: str,
    *,
    where: str,
    default: Any = None,
) -> Any:
    """Return ``table[key]`` or ``default``, raising when present with the wrong type.

    Raises:
        ConfigTypeError: If the value does not have TOML type ``kind``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    if not TYPE_CHECKS[kind](value):
        loc: str = location(where, key)
        raise ConfigTypeError(
            f"Expected {kind} in {loc}, got {toml_type_name(value)}: {value!r}",
            where=loc,
        )
    return value
