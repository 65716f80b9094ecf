# topmark:header:start
#
#   project      : TomLayer
#   file         : cmd_common.py
#   file_relpath : src/tomlayer/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by TomLayer CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tomlayer.cli.errors import TomlayerUsageError, cli_error_from
from tomlayer.core.diagnostics import DiagnosticLevel
from tomlayer.core.errors import TomlayerError
from tomlayer.core.logging import get_logger
from tomlayer.loader import load_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    import click

    from tomlayer.cli.console import ClickConsole
    from tomlayer.core.diagnostics import Diagnostic
    from tomlayer.core.logging import TomlayerLogger
    from tomlayer.loader import LoadedConfig

logger: TomlayerLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 when unset)."""
    obj = ctx.obj or {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console created by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def load_for_cli(
    files: Sequence[Path],
    *,
    assignments: Sequence[str],
    no_env: bool,
    section: str | None,
) -> LoadedConfig:
    """Run `load_config` with CLI options, translating library errors into CLI errors.

    Raises:
        TomlayerUsageError: If a ``--set`` assignment is malformed or conflicts with the tree.
    """
    try:
        return load_config(
            files,
            assignments=assignments,
            use_env=not no_env,
            section=section,
        )
    except TomlayerError as exc:
        raise cli_error_from(exc) from exc
    except ValueError as exc:
        raise TomlayerUsageError(f"Invalid --set value: {exc}") from exc


def format_diagnostic(console: ClickConsole, diagnostic: Diagnostic) -> str:
    """Render one diagnostic as ``level: message``, colored by level on a terminal."""
    text: str = f"{diagnostic.level.value}: {diagnostic.message}"
    return diagnostic.level.color(text) if console.enable_color else text


def print_diagnostics(
    console: ClickConsole,
    loaded: LoadedConfig,
    *,
    verbosity: int,
) -> None:
    """Print the diagnostics of a load; INFO entries only when verbose."""
    for d in loaded.diagnostics:
        if d.level == DiagnosticLevel.INFO and verbosity <= 0:
            continue
        console.print(format_diagnostic(console, d))
