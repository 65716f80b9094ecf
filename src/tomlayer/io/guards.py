# topmark:header:start
#
#   project      : TomLayer
#   file         : guards.py
#   file_relpath : src/tomlayer/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards and normalization helpers for parsed TOML values.

This module provides `TypeGuard`-based predicates that help Pyright narrow runtime
values coming from TOML parsing, plus `toml_type_name` which names a value's TOML
type for diagnostics ("integer", "table", ...).
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import TYPE_CHECKING, Any, TypeGuard

if TYPE_CHECKING:
    from .types import TomlTable


# --- Type guards / narrowers ---


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value.

    Checks only that the value is a ``list``; does not validate item types.
    """
    return isinstance(obj, list)


def is_int(obj: object) -> TypeGuard[int]:
    """Type guard for a TOML integer.

    ``bool`` is rejected since it is a subclass of ``int`` in Python.
    """
    return isinstance(obj, int) and not isinstance(obj, bool)


def toml_type_name(obj: object) -> str:
    """Return the TOML type name of a parsed value.

    Args:
        obj (object): A value obtained from a parsed TOML document.

    Returns:
        str: One of ``"boolean"``, ``"integer"``, ``"float"``, ``"string"``,
        ``"datetime"``, ``"date"``, ``"time"``, ``"array"``, ``"table"``, or the
        Python type name for values TOML cannot represent.
    """
    # Order matters: bool is an int, datetime is a date.
    if isinstance(obj, bool):
        return "boolean"
    if isinstance(obj, int):
        return "integer"
    if isinstance(obj, float):
        return "float"
    if isinstance(obj, str):
        return "string"
    if isinstance(obj, datetime):
        return "datetime"
    if isinstance(obj, date):
        return "date"
    if isinstance(obj, time):
        return "time"
    if isinstance(obj, list):
        return "array"
    if isinstance(obj, Mapping):
        return "table"
    return type(obj).__name__


def is_homogeneous_list(obj: object) -> bool:
    """Return True if ``obj`` is a list whose elements all share one TOML type.

    Empty lists are homogeneous. Nested arrays count as type ``"array"``
    regardless of their own contents.
    """
    if not is_any_list(obj):
        return False
    kinds: set[str] = {toml_type_name(v) for v in obj}
    return len(kinds) <= 1

