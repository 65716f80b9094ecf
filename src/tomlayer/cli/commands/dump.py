# topmark:header:start
#
#   project      : TomLayer
#   file         : dump.py
#   file_relpath : src/tomlayer/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomLayer `dump` command.

Prints the fully merged configuration tree (defaults, files, ``--set`` overrides
and environment) as TOML or JSON. The tree is printed even when it does not
validate; a warning is written to stderr in that case.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from tomlayer.cli.cmd_common import get_console, get_effective_verbosity, load_for_cli
from tomlayer.cli.options import common_load_options
from tomlayer.io.render import to_toml

if TYPE_CHECKING:
    from tomlayer.loader import LoadedConfig


@click.command(
    name="dump",
    help="Print the merged configuration from FILES, overrides and the environment.",
)
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(dir_okay=False, path_type=Path),
)
@common_load_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["toml", "json"], case_sensitive=False),
    default="toml",
    show_default=True,
    help="Output format.",
)
def dump_command(
    *,
    files: tuple[Path, ...],
    assignments: tuple[str, ...],
    no_env: bool,
    section: str | None,
    output_format: str,
) -> None:
    """Print the merged configuration tree."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    loaded: LoadedConfig = load_for_cli(
        files,
        assignments=assignments,
        no_env=no_env,
        section=section,
    )

    if output_format.lower() == "json":
        # TOML date-times have no JSON equivalent; emit them as ISO strings.
        console.print(json.dumps(loaded.tree, indent=2, default=str))
    else:
        console.print(to_toml(loaded.tree), nl=False)

    if not loaded.ok and vlevel >= 0:
        n_error: int = loaded.diagnostics.stats().n_error
        console.warn(
            f"warning: the merged configuration is invalid ({n_error} error(s)); "
            "run 'tomlayer check' for details"
        )
