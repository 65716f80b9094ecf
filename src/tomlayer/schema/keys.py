# topmark:header:start
#
#   project      : TomLayer
#   file         : keys.py
#   file_relpath : src/tomlayer/schema/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for the application configuration.

This module defines the authoritative string constants used when reading,
writing, and validating configuration trees. Keys defined here are the external
configuration API: renaming or removing one is a breaking change.

The ordering of constants mirrors ``tomlayer-default.toml``.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys of the application configuration schema.

    Notes:
        - Values must match user-facing TOML keys exactly.
        - ``server.port`` and ``database.url`` are required; every other key is
          optional and falls back to the runtime defaults.
    """

    # Root
    KEY_TITLE: Final[str] = "title"

    # [owner]
    SECTION_OWNER: Final[str] = "owner"

    KEY_NAME: Final[str] = "name"
    KEY_DOB: Final[str] = "dob"

    # [server]
    SECTION_SERVER: Final[str] = "server"

    KEY_HOST: Final[str] = "host"
    KEY_PORT: Final[str] = "port"
    KEY_DEBUG: Final[str] = "debug"
    KEY_ALLOWED_HOSTS: Final[str] = "allowed_hosts"

    # [database]
    SECTION_DATABASE: Final[str] = "database"

    KEY_URL: Final[str] = "url"
    KEY_POOL_SIZE: Final[str] = "pool_size"
    KEY_TIMEOUT: Final[str] = "timeout"
    KEY_ENABLED: Final[str] = "enabled"
    KEY_REPLICAS: Final[str] = "replicas"

    # [logging]
    SECTION_LOGGING: Final[str] = "logging"

    KEY_LEVEL: Final[str] = "level"

    # ---------------------------- Schema helpers ----------------------------

    REQUIRED_SECTIONS: Final[tuple[str, ...]] = (SECTION_SERVER, SECTION_DATABASE)

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_TITLE,
            SECTION_OWNER,
            SECTION_SERVER,
            SECTION_DATABASE,
            SECTION_LOGGING,
        }
    )

    # Allowed keys per section. Only includes sections that are TOML tables.
    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_OWNER: frozenset(
            {
                KEY_NAME,
                KEY_DOB,
            }
        ),
        SECTION_SERVER: frozenset(
            {
                KEY_HOST,
                KEY_PORT,
                KEY_DEBUG,
                KEY_ALLOWED_HOSTS,
            }
        ),
        SECTION_DATABASE: frozenset(
            {
                KEY_URL,
                KEY_POOL_SIZE,
                KEY_TIMEOUT,
                KEY_ENABLED,
                KEY_REPLICAS,
            }
        ),
        SECTION_LOGGING: frozenset(
            {
                KEY_LEVEL,
            }
        ),
    }
