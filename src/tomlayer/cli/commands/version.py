# topmark:header:start
#
#   project      : TomLayer
#   file         : version.py
#   file_relpath : src/tomlayer/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomLayer `version` command.

Prints the current TomLayer version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from tomlayer.cli.cmd_common import get_console, get_effective_verbosity
from tomlayer.constants import TOMLAYER_VERSION


@click.command(
    name="version",
    help="Show the current version of TomLayer.",
)
def version_command() -> None:
    """Show the current version of TomLayer."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("TomLayer version:", bold=True, underline=True))
        console.print(f"    {console.styled(TOMLAYER_VERSION, bold=True)}")
    else:
        console.print(console.styled(TOMLAYER_VERSION, bold=True))
