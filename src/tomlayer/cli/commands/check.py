# topmark:header:start
#
#   project      : TomLayer
#   file         : check.py
#   file_relpath : src/tomlayer/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomLayer `check` command.

Loads the given files on top of the built-in defaults, applies ``--set``
overrides and environment variables, validates the result and prints every
diagnostic. Exits with `ExitCode.CONFIG_ERROR` when the configuration is
invalid (or, with ``--strict``, when there is any warning).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tomlayer.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_for_cli,
    print_diagnostics,
)
from tomlayer.cli.errors import TomlayerConfigError
from tomlayer.cli.options import common_load_options

if TYPE_CHECKING:
    from tomlayer.core.diagnostics import DiagnosticStats
    from tomlayer.loader import LoadedConfig


@click.command(
    name="check",
    help="Validate the merged configuration from FILES, overrides and the environment.",
)
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(dir_okay=False, path_type=Path),
)
@common_load_options
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail on warnings as well as errors.",
)
def check_command(
    *,
    files: tuple[Path, ...],
    assignments: tuple[str, ...],
    no_env: bool,
    section: str | None,
    strict: bool,
) -> None:
    """Validate the merged configuration.

    Args:
        files (tuple[Path, ...]): Config files, lowest precedence first.
        assignments (tuple[str, ...]): ``--set`` overrides.
        no_env (bool): Ignore environment variables.
        section (str | None): Dotted table to read from each file.
        strict (bool): Treat warnings as failures.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    loaded: LoadedConfig = load_for_cli(
        files,
        assignments=assignments,
        no_env=no_env,
        section=section,
    )

    if vlevel >= 0:
        print_diagnostics(console, loaded, verbosity=vlevel)

    stats: DiagnosticStats = loaded.diagnostics.stats()
    summary: str = f"{stats.n_error} error(s), {stats.n_warning} warning(s)"

    if not loaded.ok or (strict and stats.n_warning > 0):
        raise TomlayerConfigError(f"Configuration is invalid: {summary}")

    if vlevel > 0:
        console.print(f"Sources: {', '.join(loaded.sources)}")
    if vlevel >= 0:
        console.print(console.styled(f"Configuration is valid ({summary})", fg="green"))
