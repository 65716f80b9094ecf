# topmark:header:start
#
#   project      : TomLayer
#   file         : validation.py
#   file_relpath : src/tomlayer/schema/validation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validate configuration trees against the application schema.

`validate_tree` walks a (merged) tree and records every problem as a diagnostic
instead of stopping at the first one:

- **errors**: missing required sections/keys, wrong value types, ``server.port``
  outside ``[PORT_MIN, PORT_MAX]``, non-positive ``database.pool_size``, unknown
  ``logging.level``;
- **warnings**: unknown keys, arrays mixing element types.

A tree is valid when it produced no errors. `is_valid` is the boolean shortcut
that logs each error and returns the validity flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tomlayer.constants import PORT_MAX, PORT_MIN
from tomlayer.core.diagnostics import (
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
)
from tomlayer.core.logging import get_logger
from tomlayer.io.getters import (
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_list_value_checked,
    get_string_value_or_none_checked,
    get_value_checked,
    location,
)
from tomlayer.io.guards import is_any_list, is_homogeneous_list, is_toml_table, toml_type_name
from tomlayer.schema.keys import Toml
from tomlayer.schema.model import LogLevel

if TYPE_CHECKING:
    from tomlayer.core.logging import TomlayerLogger
    from tomlayer.io.types import TomlTable

logger: TomlayerLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of `validate_tree`.

    Attributes:
        diagnostics (FrozenDiagnosticLog): Everything found, in discovery order.
    """

    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @property
    def ok(self) -> bool:
        """Return True when no error diagnostics were recorded."""
        return not self.diagnostics.has_error()

    def stats(self) -> DiagnosticStats:
        """Return per-level diagnostic counts."""
        return self.diagnostics.stats()

    def errors(self) -> list[str]:
        """Return error messages."""
        return [d.message for d in self.diagnostics if d.level == DiagnosticLevel.ERROR]

    def warnings(self) -> list[str]:
        """Return warning messages."""
        return [d.message for d in self.diagnostics if d.level == DiagnosticLevel.WARNING]


def check_port(value: int, *, where: str, diagnostics: DiagnosticLog) -> bool:
    """Check that a port number lies in ``[PORT_MIN, PORT_MAX]``.

    Returns:
        bool: True if the port is in range; otherwise an error is recorded.
    """
    if PORT_MIN <= value <= PORT_MAX:
        return True
    msg: str = f"Port out of range in {where}: {value} (expected {PORT_MIN}..{PORT_MAX})"
    logger.warning(msg)
    diagnostics.add_error(msg)
    return False


def check_unknown_keys(
    table: TomlTable,
    allowed: frozenset[str],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> None:
    """Record a warning for every key of ``table`` not in ``allowed``."""
    for key in table:
        if key not in allowed:
            loc: str = location(where, key)
            logger.warning("Unknown key %s", loc)
            diagnostics.add_warning(f"Unknown key {loc}")


def check_homogeneous_arrays(value: Any, *, where: str, diagnostics: DiagnosticLog) -> None:
    """Recursively record a warning for each array mixing element types.

    TOML 1.0 permits mixed arrays, so this is a warning rather than an error.
    """
    if is_toml_table(value):
        for k, v in value.items():
            check_homogeneous_arrays(v, where=location(where, k), diagnostics=diagnostics)
    elif is_any_list(value):
        if not is_homogeneous_list(value):
            kinds: str = ", ".join(sorted({toml_type_name(v) for v in value}))
            logger.warning("Mixed element types in array %s: %s", where, kinds)
            diagnostics.add_warning(f"Mixed element types in array {where}: {kinds}")
        for i, v in enumerate(value):
            check_homogeneous_arrays(v, where=f"{where}[{i}]", diagnostics=diagnostics)


def _section_table(
    tree: TomlTable,
    name: str,
    *,
    required: bool,
    diagnostics: DiagnosticLog,
) -> TomlTable | None:
    value: Any | None = get_value_checked(
        tree,
        name,
        "table",
        where="",
        diagnostics=diagnostics,
        logger=logger,
    )
    if value is None and required and name not in tree:
        logger.warning("Missing required section [%s]", name)
        diagnostics.add_error(f"Missing required section [{name}]")
    return value


def _validate_owner(table: TomlTable, diagnostics: DiagnosticLog) -> None:
    where = f"[{Toml.SECTION_OWNER}]"
    get_string_value_or_none_checked(
        table, Toml.KEY_NAME, where=where, diagnostics=diagnostics, logger=logger, required=True
    )
    get_value_checked(
        table, Toml.KEY_DOB, "datetime", where=where, diagnostics=diagnostics, logger=logger
    )


def _validate_server(table: TomlTable, diagnostics: DiagnosticLog) -> None:
    where = f"[{Toml.SECTION_SERVER}]"
    port: int | None = get_int_value_or_none_checked(
        table, Toml.KEY_PORT, where=where, diagnostics=diagnostics, logger=logger, required=True
    )
    if port is not None:
        check_port(port, where=location(where, Toml.KEY_PORT), diagnostics=diagnostics)
    get_string_value_or_none_checked(
        table, Toml.KEY_HOST, where=where, diagnostics=diagnostics, logger=logger
    )
    get_bool_value_or_none_checked(
        table, Toml.KEY_DEBUG, where=where, diagnostics=diagnostics, logger=logger
    )
    get_string_list_value_checked(
        table, Toml.KEY_ALLOWED_HOSTS, where=where, diagnostics=diagnostics, logger=logger
    )


def _validate_database(table: TomlTable, diagnostics: DiagnosticLog) -> None:
    where = f"[{Toml.SECTION_DATABASE}]"
    url: str | None = get_string_value_or_none_checked(
        table, Toml.KEY_URL, where=where, diagnostics=diagnostics, logger=logger, required=True
    )
    if url is not None and not url.strip():
        diagnostics.add_error(f"Empty value in {location(where, Toml.KEY_URL)}")

    pool_size: int | None = get_int_value_or_none_checked(
        table, Toml.KEY_POOL_SIZE, where=where, diagnostics=diagnostics, logger=logger
    )
    if pool_size is not None and pool_size < 1:
        diagnostics.add_error(
            f"Expected positive integer in {location(where, Toml.KEY_POOL_SIZE)}, got {pool_size}"
        )

    timeout: int | None = get_int_value_or_none_checked(
        table, Toml.KEY_TIMEOUT, where=where, diagnostics=diagnostics, logger=logger
    )
    if timeout is not None and timeout < 0:
        diagnostics.add_error(
            f"Expected non-negative integer in {location(where, Toml.KEY_TIMEOUT)}, got {timeout}"
        )

    get_bool_value_or_none_checked(
        table, Toml.KEY_ENABLED, where=where, diagnostics=diagnostics, logger=logger
    )
    get_string_list_value_checked(
        table, Toml.KEY_REPLICAS, where=where, diagnostics=diagnostics, logger=logger
    )


def _validate_logging(table: TomlTable, diagnostics: DiagnosticLog) -> None:
    get_enum_value_checked(
        table,
        Toml.KEY_LEVEL,
        LogLevel,
        where=f"[{Toml.SECTION_LOGGING}]",
        diagnostics=diagnostics,
        logger=logger,
    )


_SECTION_VALIDATORS = {
    Toml.SECTION_OWNER: _validate_owner,
    Toml.SECTION_SERVER: _validate_server,
    Toml.SECTION_DATABASE: _validate_database,
    Toml.SECTION_LOGGING: _validate_logging,
}


def validate_tree(tree: object, *, diagnostics: DiagnosticLog | None = None) -> ValidationReport:
    """Validate a configuration tree against the application schema.

    Args:
        tree (object): The configuration tree (normally a merged ``TomlTable``).
        diagnostics (DiagnosticLog | None): Log to append to. A fresh log is used when
            omitted. Diagnostics already in the log are carried into the report.

    Returns:
        ValidationReport: All diagnostics, with ``ok`` reflecting the absence of errors.
    """
    log: DiagnosticLog = diagnostics if diagnostics is not None else DiagnosticLog()

    if not is_toml_table(tree):
        log.add_error(f"Configuration root must be a table, got {toml_type_name(tree)}")
        return ValidationReport(diagnostics=log.freeze())

    check_unknown_keys(tree, Toml.ALLOWED_TOP_LEVEL_KEYS, where="", diagnostics=log)
    get_string_value_or_none_checked(
        tree, Toml.KEY_TITLE, where="", diagnostics=log, logger=logger
    )

    for name, validator in _SECTION_VALIDATORS.items():
        table: TomlTable | None = _section_table(
            tree,
            name,
            required=name in Toml.REQUIRED_SECTIONS,
            diagnostics=log,
        )
        if table is None:
            continue
        check_unknown_keys(
            table, Toml.ALLOWED_SECTION_KEYS[name], where=f"[{name}]", diagnostics=log
        )
        validator(table, log)

    check_homogeneous_arrays(tree, where="", diagnostics=log)

    report = ValidationReport(diagnostics=log.freeze())
    logger.debug("Validation finished: %s", report.stats())
    return report


def is_valid(tree: object) -> bool:
    """Return whether ``tree`` is a valid configuration, logging each error.

    This is the single recovery path for the common checks (missing key, type
    mismatch, port range): problems are logged and folded into a boolean.
    """
    report: ValidationReport = validate_tree(tree)
    for d in report.diagnostics:
        if d.level == DiagnosticLevel.ERROR:
            logger.error("Invalid configuration: %s", d.message)
    return report.ok

