# topmark:header:start
#
#   project      : TomLayer
#   file         : render.py
#   file_relpath : src/tomlayer/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render and normalize TOML for config dumps.

This module contains helpers for serializing a `TomlTable` to a TOML string,
and for round-tripping TOML for normalization.

TOML has no `null` value, so `None` entries are stripped during rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from tomlayer.core.errors import ConfigParseError
from tomlayer.core.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from tomlayer.core.logging import TomlayerLogger

    from .types import TomlTable

logger: TomlayerLogger = get_logger(__name__)


def _tomlkit_dumps(data: TomlTable) -> str:
    """Typed wrapper around tomlkit.dumps() for strict type checking."""
    cleaned: Any = _strip_none_for_toml(data)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def _renders_as_header(value: object) -> bool:
    """Return True for values rendered as a ``[table]`` or ``[[array-of-tables]]`` section."""
    if isinstance(value, Mapping):
        return True
    if isinstance(value, (list, tuple)):
        seq: list[object] = list(cast("list[object]", value))
        return bool(seq) and all(isinstance(v, Mapping) for v in seq)
    return False


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists.

    TOML has no `null`. For config dumps we omit keys with None values and drop
    None items from lists. Mapping keys are normalized to strings.
    """
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        # Plain values must precede [table] and [[array]] headers in the output.
        items: list[tuple[object, object]] = sorted(
            m.items(), key=lambda kv: _renders_as_header(kv[1])
        )
        for k_any, v_any in items:
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            k: str = k_any if isinstance(k_any, str) else str(k_any)
            out[k] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, (list, tuple)):
        out_list: list[object] = []
        seq: list[object] = list(cast("list[object]", value))
        for v_any in seq:
            if v_any is None:
                logger.debug("Ignoring `None` entry in list")
                continue
            out_list.append(_strip_none_for_toml(v_any))
        return out_list

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a configuration tree to a TOML document string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    return _tomlkit_dumps(toml_dict)


def clean_toml(text: str, *, source: Path | str = "<string>") -> str:
    """Normalize a TOML document, removing comments and formatting noise.

    Args:
        text (str): Raw TOML content.
        source (Path | str): Name of the source, used in error messages.

    Returns:
        str: A normalized TOML string produced by round-tripping.

    Raises:
        ConfigParseError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TOMLKitError as exc:
        logger.error("Error decoding TOML from %s: %s", source, exc)
        raise ConfigParseError(str(exc), source=source) from exc

    data_any: Any = doc.unwrap()
    data: TomlTable = cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    return _tomlkit_dumps(data)
