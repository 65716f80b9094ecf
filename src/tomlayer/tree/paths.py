# topmark:header:start
#
#   project      : TomLayer
#   file         : paths.py
#   file_relpath : src/tomlayer/tree/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dotted-path access into configuration trees (``"server.port"``)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tomlayer.core.errors import ConfigTypeError
from tomlayer.io.guards import is_toml_table, toml_type_name

if TYPE_CHECKING:
    from tomlayer.io.types import TomlTable


def split_path(path: str) -> tuple[str, ...]:
    """Split a dotted path into its segments.

    Raises:
        ValueError: If the path is empty or contains an empty segment (``"a..b"``).
    """
    parts: tuple[str, ...] = tuple(p.strip() for p in path.split("."))
    if not path or any(not p for p in parts):
        raise ValueError(f"Invalid config path: {path!r}")
    return parts


def get_path(tree: TomlTable, path: str, default: Any = None) -> Any:
    """Return the value at ``path`` in ``tree``, or ``default`` when absent."""
    node: Any = tree
    for part in split_path(path):
        if not is_toml_table(node) or part not in node:
            return default
        node = node[part]
    return node


def set_path(tree: TomlTable, path: str, value: Any) -> None:
    """Set ``value`` at ``path`` in ``tree``, creating intermediate tables.

    ``tree`` is modified in place.

    Raises:
        ConfigTypeError: If an intermediate key holds a non-table value.
    """
    parts: tuple[str, ...] = split_path(path)
    node: TomlTable = tree
    for i, part in enumerate(parts[:-1]):
        child: Any = node.setdefault(part, {})
        if not is_toml_table(child):
            where: str = ".".join(parts[: i + 1])
            raise ConfigTypeError(
                f"Cannot set {path}: {where} is a {toml_type_name(child)}, not a table",
                where=where,
            )
        node = child
    node[parts[-1]] = value


def nest(path: str, value: Any) -> TomlTable:
    """Return a new tree holding only ``value`` at ``path``.

    Example:
        ``nest("server.port", 9000) == {"server": {"port": 9000}}``
    """
    tree: TomlTable = {}
    set_path(tree, path, value)
    return tree
