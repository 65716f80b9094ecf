# topmark:header:start
#
#   project      : TomLayer
#   file         : errors.py
#   file_relpath : src/tomlayer/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TomLayer CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. `cli_error_from` translates library exceptions
    (`tomlayer.core.errors`) into the matching CLI error.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tomlayer.cli.exit_codes import ExitCode
from tomlayer.core.errors import (
    ConfigFileError,
    ConfigParseError,
    ConfigValidationError,
    TomlayerError,
)


class TomlayerCliError(click.ClickException):
    """Base class for all TomLayer CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class TomlayerUsageError(TomlayerCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TomlayerConfigError(TomlayerCliError):
    """Error for configuration errors (invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class TomlayerFileNotFoundError(TomlayerCliError):
    """Error when a configuration file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TomlayerEncodingError(TomlayerCliError):
    """Error for text decoding errors (configuration file is not UTF-8)."""

    exit_code = ExitCode.ENCODING_ERROR


def cli_error_from(exc: TomlayerError) -> TomlayerCliError:
    """Return the CLI error matching a library exception.

    Mapping:
        - missing file -> `TomlayerFileNotFoundError`
        - non-UTF-8 content -> `TomlayerEncodingError`
        - invalid TOML or schema violation -> `TomlayerConfigError`
        - any other read error -> `TomlayerCliError`
    """
    cause: BaseException | None = exc.__cause__
    if isinstance(exc, ConfigParseError):
        if isinstance(cause, UnicodeDecodeError):
            return TomlayerEncodingError(str(exc))
        return TomlayerConfigError(str(exc))
    if isinstance(exc, ConfigFileError):
        if isinstance(cause, FileNotFoundError):
            return TomlayerFileNotFoundError(str(exc))
        return TomlayerCliError(str(exc))
    if isinstance(exc, ConfigValidationError):
        return TomlayerConfigError(str(exc))
    return TomlayerCliError(str(exc))
