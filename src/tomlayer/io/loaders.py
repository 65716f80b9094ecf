# topmark:header:start
#
#   project      : TomLayer
#   file         : loaders.py
#   file_relpath : src/tomlayer/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading configuration trees from:
- a binary stream (`load_toml_stream`),
- a string (`load_toml_text`),
- an on-disk TOML file, optionally restricted to a dotted section such as
  ``[tool.tomlayer]`` in ``pyproject.toml`` (`load_toml_file`, `load_toml_section`),
- the packaged annotated template and the runtime defaults.

Parsing is done with `tomlkit` and returned as plain `dict` structures (native
`datetime`/`date`/`time` values for TOML date-time literals). Unlike the lenient
getters, loaders raise: an unreadable or malformed source is a `ConfigFileError`
/ `ConfigParseError`, never an empty table.
"""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from tomlayer.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    HEADER_END_MARKER,
)
from tomlayer.core.errors import ConfigFileError, ConfigParseError
from tomlayer.core.logging import get_logger
from tomlayer.io.guards import is_toml_table
from tomlayer.io.render import to_toml
from tomlayer.schema.keys import Toml

if TYPE_CHECKING:
    import sys

    if sys.version_info < (3, 14):
        from importlib.abc import Traversable
    else:
        from importlib.resources.abc import Traversable

    from tomlayer.core.logging import TomlayerLogger

    from .types import TomlTable

logger: TomlayerLogger = get_logger(__name__)

STRING_SOURCE: str = "<string>"
STREAM_SOURCE: str = "<stream>"


# --- Parsing ---


def load_toml_text(text: str, *, source: Path | str = STRING_SOURCE) -> TomlTable:
    """Parse a TOML document from a string.

    Args:
        text (str): TOML document text.
        source (Path | str): Name of the source, used in error messages.

    Returns:
        TomlTable: The parsed document as a plain dict.

    Raises:
        ConfigParseError: If the text is not valid TOML (including duplicate keys
            or duplicate table headers).
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TOMLKitError as exc:
        logger.error("Error decoding TOML from %s: %s", source, exc)
        raise ConfigParseError(str(exc), source=source) from exc

    data_any: Any = doc.unwrap()
    # The document root is always a table.
    data: TomlTable = cast("TomlTable", data_any) if is_toml_table(data_any) else {}
    logger.trace("Parsed TOML from %s: %d top-level key(s)", source, len(data))
    return data


def load_toml_stream(fp: IO[bytes], *, source: Path | str = STREAM_SOURCE) -> TomlTable:
    """Parse a TOML document from a binary stream.

    The stream is read to the end but not closed; the caller owns it.

    Args:
        fp (IO[bytes]): A stream opened in binary mode.
        source (Path | str): Name of the source, used in error messages.

    Returns:
        TomlTable: The parsed document as a plain dict.

    Raises:
        TypeError: If the stream yields text instead of bytes.
        ConfigParseError: If the content is not UTF-8 or not valid TOML.
    """
    raw: bytes | str = fp.read()
    if isinstance(raw, str):
        raise TypeError("TOML streams must be opened in binary mode, e.g. open(path, 'rb')")
    try:
        text: str = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.error("Cannot decode %s as UTF-8: %s", source, exc)
        raise ConfigParseError(f"not valid UTF-8: {exc}", source=source) from exc
    return load_toml_text(text, source=source)


def load_toml_file(path: Path | str) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path | str): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigFileError: If the file cannot be opened or read.
        ConfigParseError: If the file is not valid UTF-8 TOML.
    """
    p = Path(path)
    logger.debug("Loading TOML file: %s", p)
    try:
        with p.open("rb") as fh:
            return load_toml_stream(fh, source=p)
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", p, exc)
        raise ConfigFileError(exc.strerror or str(exc), source=p) from exc


def load_toml_section(path: Path | str, section: str) -> TomlTable | None:
    """Load a TOML file and return one (possibly dotted) table from it.

    Typical use is reading ``[tool.tomlayer]`` from ``pyproject.toml``.

    Args:
        path (Path | str): Path to a TOML document.
        section (str): Dotted table path, e.g. ``"tool.tomlayer"``.

    Returns:
        TomlTable | None: The table, or None if it is missing or not a table.

    Raises:
        ConfigFileError: If the file cannot be opened or read.
        ConfigParseError: If the file is not valid UTF-8 TOML.
    """
    data: TomlTable = load_toml_file(path)
    node: Any = data
    for part in section.split("."):
        if not is_toml_table(node) or part not in node:
            logger.warning("[%s] section missing in %s", section, path)
            return None
        node = node[part]
    if not is_toml_table(node):
        logger.warning("[%s] in %s is not a table: %r", section, path, node)
        return None
    return node


# --- Defaults ---


def load_defaults_dict() -> TomlTable:
    """Return TomLayer's **runtime defaults** as a Python dict.

    This function performs **no I/O**. The bundled ``tomlayer-default.toml`` is
    an *annotated* template for human-facing output (``tomlayer init``); runtime
    defaults are defined in code so loading works even if the template is
    missing.

    Required keys (``server.port``, ``database.url``) have no default on purpose:
    they must come from a config file, an override or the environment.

    Returns:
        TomlTable: A new dict; callers may mutate it safely.
    """
    return {
        Toml.SECTION_SERVER: {
            Toml.KEY_HOST: "127.0.0.1",
            Toml.KEY_DEBUG: False,
            Toml.KEY_ALLOWED_HOSTS: [],
        },
        Toml.SECTION_DATABASE: {
            Toml.KEY_POOL_SIZE: 5,
            Toml.KEY_TIMEOUT: 30,
            Toml.KEY_ENABLED: True,
        },
        Toml.SECTION_LOGGING: {
            Toml.KEY_LEVEL: "INFO",
        },
    }


def load_default_template_text() -> tuple[str, Exception | None]:
    """Load the bundled default TOML config *template* as text.

    Unlike `load_defaults_dict`, this preserves the template's comments and
    formatting. If the packaged template cannot be read, falls back to a document
    rendered from the runtime defaults.

    Returns:
        tuple[str, Exception | None]: ``(toml_text, error)`` where ``error`` is the
        exception raised while reading the bundled template, if any.
    """
    resource: Traversable = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    err: Exception | None = None

    try:
        toml_text: str = resource.read_text(encoding="utf8")
        # Drop the file header block so the output starts at the template content.
        lines: list[str] = toml_text.splitlines(keepends=True)
        for i, line in enumerate(lines):
            if line.strip() == f"# {HEADER_END_MARKER}":
                toml_text = "".join(lines[i + 1 :]).lstrip("\n")
                break
    except OSError as exc:
        err = exc
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        notice: str = (
            f"# NOTE: The packaged template '{DEFAULT_TOML_CONFIG_NAME}' could not be read.\n"
            f"# Reason: {exc}\n"
            "# The content below was generated from runtime defaults.\n\n"
        )
        toml_text = f"{notice}{to_toml(load_defaults_dict())}"

    return toml_text, err
