# topmark:header:start
#
#   project      : TomLayer
#   file         : model.py
#   file_relpath : src/tomlayer/schema/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed configuration records.

This module maps a configuration tree (``dict[str, Any]``) onto immutable
dataclasses:

    AppConfig
    ├── title      (str | None)
    ├── owner      (OwnerConfig | None)   [owner]
    ├── server     (ServerConfig)         [server]
    ├── database   (DatabaseConfig)       [database]
    └── logging    (LoggingConfig)        [logging]

Scope:
    - *In scope*: data shapes, field-level defaults, strict construction from a
      tree (`AppConfig.from_toml_table`) and export back to a tree
      (`AppConfig.to_toml_dict`).
    - *Out of scope*: range checks and unknown-key reporting. Those belong in
      `tomlayer.schema.validation`, which reports *all* problems as diagnostics;
      construction here stops at the first problem and raises.

Immutability:
    Records are ``frozen=True`` and store tuples instead of lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from tomlayer.core.errors import ConfigKeyError, ConfigTypeError, ConfigValidationError
from tomlayer.core.logging import get_logger
from tomlayer.io.getters import location, optional_value, require_value
from tomlayer.io.guards import is_toml_table, toml_type_name
from tomlayer.schema.keys import Toml

if TYPE_CHECKING:
    from datetime import date

    from tomlayer.core.logging import TomlayerLogger
    from tomlayer.io.types import TomlTable

logger: TomlayerLogger = get_logger(__name__)


class LogLevel(str, Enum):
    """Accepted values for ``[logging].level``."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def parse(cls, value: str, *, where: str) -> LogLevel:
        """Return the level named ``value`` (case-insensitive).

        Raises:
            ConfigValidationError: If ``value`` is not a known level name.
        """
        try:
            return cls(value.upper())
        except ValueError as exc:
            allowed: str = ", ".join(e.value for e in cls)
            raise ConfigValidationError(
                f"Invalid value for {where}: {value!r} (allowed: {allowed})",
                where=where,
            ) from exc


def _optional_section(tree: TomlTable, name: str) -> TomlTable | None:
    """Return the sub-table ``name`` of ``tree``, or None when absent.

    Raises:
        ConfigTypeError: If the key exists but is not a table.
    """
    value: Any | None = tree.get(name)
    if value is None:
        return None
    if not is_toml_table(value):
        raise ConfigTypeError(
            f"Expected table in [{name}], got {toml_type_name(value)}: {value!r}",
            where=name,
        )
    return value


def _required_section(tree: TomlTable, name: str) -> TomlTable:
    """Return the sub-table ``name`` of ``tree``.

    Raises:
        ConfigKeyError: If the section is missing.
        ConfigTypeError: If the key exists but is not a table.
    """
    value: TomlTable | None = _optional_section(tree, name)
    if value is None:
        raise ConfigKeyError(f"Missing required section [{name}]", where=name)
    return value


def _string_tuple(table: TomlTable, key: str, *, where: str) -> tuple[str, ...]:
    values: list[Any] = optional_value(table, key, "array", where=where, default=[])
    for v in values:
        if not isinstance(v, str):
            loc: str = location(where, key)
            raise ConfigTypeError(
                f"Expected array of strings in {loc}, got element {toml_type_name(v)}: {v!r}",
                where=loc,
            )
    return tuple(values)


@dataclass(frozen=True, slots=True)
class OwnerConfig:
    """The ``[owner]`` table: who is responsible for this deployment."""

    name: str
    dob: date | None = None

    @classmethod
    def from_toml_table(cls, table: TomlTable, *, where: str = "[owner]") -> OwnerConfig:
        """Build an `OwnerConfig` from the ``[owner]`` table."""
        return cls(
            name=require_value(table, Toml.KEY_NAME, "string", where=where),
            dob=optional_value(table, Toml.KEY_DOB, "datetime", where=where),
        )

    def to_toml_dict(self) -> TomlTable:
        """Export to a TOML-serializable table (``None`` fields are dropped on render)."""
        return {Toml.KEY_NAME: self.name, Toml.KEY_DOB: self.dob}


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """The ``[server]`` table."""

    port: int
    host: str = "127.0.0.1"
    debug: bool = False
    allowed_hosts: tuple[str, ...] = ()

    @property
    def address(self) -> str:
        """Return ``host:port``."""
        return f"{self.host}:{self.port}"

    @classmethod
    def from_toml_table(cls, table: TomlTable, *, where: str = "[server]") -> ServerConfig:
        """Build a `ServerConfig` from the ``[server]`` table."""
        return cls(
            port=require_value(table, Toml.KEY_PORT, "integer", where=where),
            host=optional_value(table, Toml.KEY_HOST, "string", where=where, default="127.0.0.1"),
            debug=optional_value(table, Toml.KEY_DEBUG, "boolean", where=where, default=False),
            allowed_hosts=_string_tuple(table, Toml.KEY_ALLOWED_HOSTS, where=where),
        )

    def to_toml_dict(self) -> TomlTable:
        """Export to a TOML-serializable table."""
        return {
            Toml.KEY_HOST: self.host,
            Toml.KEY_PORT: self.port,
            Toml.KEY_DEBUG: self.debug,
            Toml.KEY_ALLOWED_HOSTS: list(self.allowed_hosts),
        }


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    """The ``[database]`` table.

    Attributes:
        url (str): Connection URL; overridable via the ``DATABASE_URL`` environment variable.
        pool_size (int): Maximum number of pooled connections.
        timeout (int): Connect timeout in seconds.
        enabled (bool): Whether the application should connect at all.
        replicas (tuple[str, ...]): Read-replica host names.
    """

    url: str
    pool_size: int = 5
    timeout: int = 30
    enabled: bool = True
    replicas: tuple[str, ...] = ()

    @classmethod
    def from_toml_table(cls, table: TomlTable, *, where: str = "[database]") -> DatabaseConfig:
        """Build a `DatabaseConfig` from the ``[database]`` table."""
        return cls(
            url=require_value(table, Toml.KEY_URL, "string", where=where),
            pool_size=optional_value(table, Toml.KEY_POOL_SIZE, "integer", where=where, default=5),
            timeout=optional_value(table, Toml.KEY_TIMEOUT, "integer", where=where, default=30),
            enabled=optional_value(table, Toml.KEY_ENABLED, "boolean", where=where, default=True),
            replicas=_string_tuple(table, Toml.KEY_REPLICAS, where=where),
        )

    def to_toml_dict(self) -> TomlTable:
        """Export to a TOML-serializable table."""
        return {
            Toml.KEY_URL: self.url,
            Toml.KEY_POOL_SIZE: self.pool_size,
            Toml.KEY_TIMEOUT: self.timeout,
            Toml.KEY_ENABLED: self.enabled,
            Toml.KEY_REPLICAS: list(self.replicas),
        }


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """The ``[logging]`` table."""

    level: LogLevel = LogLevel.INFO

    @classmethod
    def from_toml_table(cls, table: TomlTable, *, where: str = "[logging]") -> LoggingConfig:
        """Build a `LoggingConfig` from the ``[logging]`` table."""
        raw: str | None = optional_value(table, Toml.KEY_LEVEL, "string", where=where)
        if raw is None:
            return cls()
        return cls(level=LogLevel.parse(raw, where=location(where, Toml.KEY_LEVEL)))

    def to_toml_dict(self) -> TomlTable:
        """Export to a TOML-serializable table."""
        return {Toml.KEY_LEVEL: self.level.value}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Immutable, typed application configuration.

    Produced by `AppConfig.from_toml_table` (usually via `tomlayer.loader.load_config`,
    which validates the tree first).
    """

    server: ServerConfig
    database: DatabaseConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    owner: OwnerConfig | None = None
    title: str | None = None

    @classmethod
    def from_toml_table(cls, tree: TomlTable) -> AppConfig:
        """Map a configuration tree onto an `AppConfig`.

        Args:
            tree (TomlTable): A (merged) configuration tree.

        Returns:
            AppConfig: The typed configuration.

        Raises:
            ConfigKeyError: If a required section or key is missing.
            ConfigTypeError: If a value has the wrong TOML type.
            ConfigValidationError: If ``[logging].level`` is not a known level.
        """
        server_tbl: TomlTable = _required_section(tree, Toml.SECTION_SERVER)
        database_tbl: TomlTable = _required_section(tree, Toml.SECTION_DATABASE)
        logging_tbl: TomlTable | None = _optional_section(tree, Toml.SECTION_LOGGING)
        owner_tbl: TomlTable | None = _optional_section(tree, Toml.SECTION_OWNER)

        config = cls(
            server=ServerConfig.from_toml_table(server_tbl),
            database=DatabaseConfig.from_toml_table(database_tbl),
            logging=LoggingConfig.from_toml_table(logging_tbl or {}),
            owner=OwnerConfig.from_toml_table(owner_tbl) if owner_tbl is not None else None,
            title=optional_value(tree, Toml.KEY_TITLE, "string", where=""),
        )
        logger.debug("Built AppConfig: %s", config)
        return config

    def to_toml_dict(self) -> TomlTable:
        """Convert this config into a TOML-serializable dict.

        Note:
            ``None`` values (unset title, missing owner, unset dob) are kept in the
            dict and dropped by `tomlayer.io.render.to_toml`.
        """
        return {
            Toml.KEY_TITLE: self.title,
            Toml.SECTION_OWNER: self.owner.to_toml_dict() if self.owner else None,
            Toml.SECTION_SERVER: self.server.to_toml_dict(),
            Toml.SECTION_DATABASE: self.database.to_toml_dict(),
            Toml.SECTION_LOGGING: self.logging.to_toml_dict(),
        }
