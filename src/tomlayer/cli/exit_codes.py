# topmark:header:start
#
#   project      : TomLayer
#   file         : exit_codes.py
#   file_relpath : src/tomlayer/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the TomLayer CLI.

TomLayer aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TomLayer CLI.

    Attributes:
        SUCCESS: Successful execution; for ``check``, the configuration is valid.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args, malformed
            ``--set``). Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: A configuration file is not valid UTF-8. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: A configuration file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Invalid or malformed configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
