# topmark:header:start
#
#   project      : TomLayer
#   file         : errors.py
#   file_relpath : src/tomlayer/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TomLayer library.

Hierarchy:
    TomlayerError
    ├── ConfigFileError            (cannot read a config source)
    │   └── ConfigParseError       (invalid TOML / encoding; also a ValueError)
    └── ConfigValidationError      (tree does not satisfy the schema)
        ├── ConfigKeyError         (required key missing; also a KeyError)
        └── ConfigTypeError        (value has the wrong type; also a TypeError)

Validation itself reports problems as diagnostics (see
`tomlayer.schema.validation`); these exceptions are raised when a caller asks
for a strict load or builds a typed record from an unvalidated tree.

The CLI translates them into `click.ClickException` subclasses carrying
sysexits exit codes (see `tomlayer.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from tomlayer.schema.validation import ValidationReport


class TomlayerError(Exception):
    """Base class for all TomLayer errors."""


class ConfigFileError(TomlayerError):
    """A configuration source could not be read.

    Attributes:
        source: Path or symbolic name (e.g. ``"<string>"``) of the source.
    """

    def __init__(self, message: str, *, source: Path | str | None = None) -> None:
        super().__init__(message)
        self.source: Path | str | None = source

    def __str__(self) -> str:
        msg: str = super().__str__()
        if self.source is None:
            return msg
        return f"{self.source}: {msg}"


class ConfigParseError(ConfigFileError, ValueError):
    """A configuration source is not valid UTF-8 TOML.

    Duplicate keys and duplicate table headers are reported through this
    exception as well.
    """


class ConfigValidationError(TomlayerError):
    """A configuration tree does not satisfy the schema.

    Attributes:
        report: The validation report, when the error stems from `validate_tree`.
        where: Dotted location of the offending value, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        report: ValidationReport | None = None,
        where: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.report: ValidationReport | None = report
        self.where: str | None = where

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr() the message
        return self.message


class ConfigKeyError(ConfigValidationError, KeyError):
    """A required key or section is missing."""


class ConfigTypeError(ConfigValidationError, TypeError):
    """A value has an unexpected type (e.g. a table where a scalar was expected)."""
