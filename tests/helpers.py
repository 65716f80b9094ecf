# topmark:header:start
#
#   project      : TomLayer
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared test helpers: sample documents and a file writer."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

VALID_CONFIG: str = """
title = "Example"

[owner]
name = "Tom Preston-Werner"
dob = 1979-05-27T07:32:00-08:00

[server]
host = "0.0.0.0"
port = 8080
allowed_hosts = ["example.com", "www.example.com"]

[database]
url = "postgresql://db.example.com:5432/app"
pool_size = 10
"""


def write_toml(path: Path, content: str) -> Path:
    """Write dedented TOML content to ``path``, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path
