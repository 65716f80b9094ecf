# topmark:header:start
#
#   project      : TomLayer
#   file         : main.py
#   file_relpath : src/tomlayer/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomLayer CLI entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj``; subcommands read them back through `tomlayer.cli.cmd_common`.
Internal logging is configured from ``TOMLAYER_LOG_LEVEL`` and is independent
from program-output verbosity.
"""

from __future__ import annotations

import sys

import click

from tomlayer.cli.commands.check import check_command
from tomlayer.cli.commands.dump import dump_command
from tomlayer.cli.commands.init import init_command
from tomlayer.cli.commands.merge import merge_command
from tomlayer.cli.commands.version import version_command
from tomlayer.cli.console import ClickConsole
from tomlayer.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from tomlayer.core.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool = not no_color and sys.stdout.isatty()
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: %s", ctx.obj)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TomLayer: layered TOML configuration loader.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the TomLayer CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'tomlayer check [FILES...]' to validate a configuration.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)

cli.add_command(dump_command)

cli.add_command(merge_command)

cli.add_command(init_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
