# topmark:header:start
#
#   project      : TomLayer
#   file         : __init__.py
#   file_relpath : src/tomlayer/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by all TomLayer layers (logging, diagnostics, errors)."""
