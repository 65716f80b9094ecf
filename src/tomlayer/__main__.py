# topmark:header:start
#
#   project      : TomLayer
#   file         : __main__.py
#   file_relpath : src/tomlayer/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TomLayer via ``python -m tomlayer``.

Equivalent to running the ``tomlayer`` console script.
"""

from __future__ import annotations

from tomlayer.cli.main import cli

if __name__ == "__main__":
    cli()
