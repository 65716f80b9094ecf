# topmark:header:start
#
#   project      : TomLayer
#   file         : init.py
#   file_relpath : src/tomlayer/cli/commands/init.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomLayer `init` command.

Prints the annotated configuration template to stdout as a starting point for
a project's own configuration file.
"""

from __future__ import annotations

import click

from tomlayer.cli.cmd_common import get_console, get_effective_verbosity
from tomlayer.io.loaders import load_default_template_text


@click.command(
    name="init",
    help="Print an annotated starter configuration file.",
)
def init_command() -> None:
    """Print the annotated configuration template."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    text, err = load_default_template_text()
    if err is not None and vlevel >= 0:
        console.warn(f"warning: packaged template unavailable, rendering defaults ({err})")

    console.print(text, nl=not text.endswith("\n"))
