# topmark:header:start
#
#   project      : TomLayer
#   file         : __init__.py
#   file_relpath : src/tomlayer/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomLayer CLI subcommands, one module per command."""
