# topmark:header:start
#
#   project      : TomLayer
#   file         : __init__.py
#   file_relpath : src/tomlayer/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for TomLayer (``tomlayer``)."""
