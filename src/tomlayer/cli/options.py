# topmark:header:start
#
#   project      : TomLayer
#   file         : options.py
#   file_relpath : src/tomlayer/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options for TomLayer commands.

Option groups are applied as decorators so that commands stay consistent:

- `common_verbose_options`: ``-v/--verbose`` and ``-q/--quiet`` (group level).
- `common_load_options`: ``--set``, ``--no-env`` and ``--section`` for commands
  that run the full loading pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import click

from tomlayer.cli.errors import TomlayerUsageError
from tomlayer.constants import PYPROJECT_SECTION

if TYPE_CHECKING:
    from collections.abc import Callable

F = TypeVar("F", bound="Callable[..., object]")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Returns:
        int: ``verbose_count`` when positive, ``-quiet_count`` otherwise (0 is the default).

    Raises:
        TomlayerUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TomlayerUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count if verbose_count > 0 else -quiet_count


def common_verbose_options(f: F) -> F:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: F) -> F:
    """Add the ``--no-color`` flag to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors (colors are only used on a terminal).",
    )(f)


def common_load_options(f: F) -> F:
    """Add the options controlling the layered loading pipeline."""
    f = click.option(
        "--set",
        "assignments",
        multiple=True,
        metavar="KEY=VALUE",
        help="Override a value, e.g. --set server.port=9000 (repeatable; later wins).",
    )(f)
    f = click.option(
        "--no-env",
        "no_env",
        is_flag=True,
        default=False,
        help="Ignore environment variable overrides.",
    )(f)
    f = click.option(
        "--section",
        "section",
        default=None,
        metavar="TABLE",
        help=f"Read this dotted table from each file (e.g. {PYPROJECT_SECTION}).",
    )(f)
    return f
