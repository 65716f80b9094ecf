# topmark:header:start
#
#   project      : TomLayer
#   file         : merge.py
#   file_relpath : src/tomlayer/cli/commands/merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomLayer `merge` command.

Deep-merges TOML files exactly as written: no built-in defaults, no environment
and no validation. Useful to preview what a layered deployment file resolves to.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tomlayer.cli.cmd_common import get_console, get_effective_verbosity
from tomlayer.cli.errors import cli_error_from
from tomlayer.core.diagnostics import DiagnosticLevel, DiagnosticLog
from tomlayer.core.errors import TomlayerError
from tomlayer.io.loaders import load_toml_file
from tomlayer.io.render import to_toml
from tomlayer.tree.merge import merge_layers

if TYPE_CHECKING:
    from tomlayer.io.types import TomlTable


@click.command(
    name="merge",
    help="Deep-merge OVERRIDES over BASE (later files win) and print the result as TOML.",
)
@click.argument("base", type=click.Path(dir_okay=False, path_type=Path))
@click.argument(
    "overrides",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
def merge_command(*, base: Path, overrides: tuple[Path, ...]) -> None:
    """Deep-merge TOML files and print the result.

    Args:
        base (Path): Lowest-precedence file.
        overrides (tuple[Path, ...]): Files merged over ``base``, in order.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    try:
        layers: list[TomlTable] = [load_toml_file(p) for p in (base, *overrides)]
    except TomlayerError as exc:
        raise cli_error_from(exc) from exc

    log = DiagnosticLog()
    merged: TomlTable = merge_layers(*layers, diagnostics=log)

    if vlevel > 0:
        for d in log:
            if d.level == DiagnosticLevel.WARNING:
                console.warn(f"warning: {d.message}")

    console.print(to_toml(merged), nl=False)
