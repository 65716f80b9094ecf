# topmark:header:start
#
#   project      : TomLayer
#   file         : test_loaders.py
#   file_relpath : tests/io/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loaders: text, streams, files, sections and packaged defaults."""

from __future__ import annotations

import io
import textwrap
from datetime import date, datetime, timedelta, timezone
from typing import TYPE_CHECKING

import pytest

from tests.helpers import VALID_CONFIG, write_toml
from tomlayer.core.errors import ConfigFileError, ConfigParseError
from tomlayer.io.loaders import (
    load_default_template_text,
    load_defaults_dict,
    load_toml_file,
    load_toml_section,
    load_toml_stream,
    load_toml_text,
)
from tomlayer.schema.validation import validate_tree

if TYPE_CHECKING:
    from pathlib import Path


def test_load_text_parses_supported_surface() -> None:
    data = load_toml_text(
        textwrap.dedent(
            """
            title = "TOML Example"
            ports = [8000, 8001]
            point = { x = 1, y = 2 }

            [owner]
            dob = 1979-05-27T07:32:00-08:00

            [servers.alpha]
            ip = "10.0.0.1"

            [servers.beta]
            ip = "10.0.0.2"
            """
        )
    )

    assert data["title"] == "TOML Example"
    assert data["ports"] == [8000, 8001]
    assert data["point"] == {"x": 1, "y": 2}
    assert data["servers"] == {"alpha": {"ip": "10.0.0.1"}, "beta": {"ip": "10.0.0.2"}}
    assert data["owner"]["dob"] == datetime(
        1979, 5, 27, 7, 32, tzinfo=timezone(timedelta(hours=-8))
    )
    assert type(data) is dict
    assert type(data["point"]) is dict


def test_load_text_local_date() -> None:
    assert load_toml_text("d = 2024-01-31") == {"d": date(2024, 1, 31)}


def test_load_empty_text() -> None:
    assert load_toml_text("") == {}


@pytest.mark.parametrize(
    "text",
    [
        "port = ",
        "[server\nport = 1",
        "a = 1\na = 2",
    ],
    ids=["missing-value", "unclosed-header", "duplicate-key"],
)
def test_load_text_invalid(text: str) -> None:
    with pytest.raises(ConfigParseError) as excinfo:
        load_toml_text(text, source="inline.toml")

    assert excinfo.value.source == "inline.toml"
    assert str(excinfo.value).startswith("inline.toml: ")


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        load_toml_text("= 1")


def test_load_stream() -> None:
    fp = io.BytesIO(b'[server]\nport = 8080\n')
    assert load_toml_stream(fp) == {"server": {"port": 8080}}
    assert not fp.closed


def test_load_stream_rejects_text_mode() -> None:
    with pytest.raises(TypeError, match="binary mode"):
        load_toml_stream(io.StringIO("a = 1"))  # type: ignore[arg-type]


def test_load_stream_rejects_invalid_utf8() -> None:
    with pytest.raises(ConfigParseError, match="not valid UTF-8") as excinfo:
        load_toml_stream(io.BytesIO(b'title = "\xff"'), source="bad.toml")

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_load_file(tmp_path: Path) -> None:
    path = write_toml(tmp_path / "config.toml", VALID_CONFIG)

    data = load_toml_file(path)

    assert data["server"]["port"] == 8080
    assert data["database"]["url"] == "postgresql://db.example.com:5432/app"


def test_load_file_accepts_str_path(tmp_path: Path) -> None:
    path = write_toml(tmp_path / "c.toml", "a = 1")
    assert load_toml_file(str(path)) == {"a": 1}


def test_load_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.toml"

    with pytest.raises(ConfigFileError) as excinfo:
        load_toml_file(missing)

    assert not isinstance(excinfo.value, ConfigParseError)
    assert excinfo.value.source == missing
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_load_invalid_file_reports_path(tmp_path: Path) -> None:
    path = write_toml(tmp_path / "broken.toml", "[server\n")

    with pytest.raises(ConfigParseError) as excinfo:
        load_toml_file(path)

    assert excinfo.value.source == path


def test_load_section_from_pyproject(tmp_path: Path) -> None:
    path = write_toml(
        tmp_path / "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.tomlayer.server]
        port = 9000
        """,
    )

    assert load_toml_section(path, "tool.tomlayer") == {"server": {"port": 9000}}


@pytest.mark.parametrize("section", ["tool.other", "project.name", "nope"])
def test_load_section_missing_or_not_a_table(tmp_path: Path, section: str) -> None:
    path = write_toml(
        tmp_path / "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.tomlayer]
        title = "x"
        """,
    )

    assert load_toml_section(path, section) is None


def test_defaults_have_no_required_keys() -> None:
    defaults = load_defaults_dict()

    assert "port" not in defaults["server"]
    assert "url" not in defaults["database"]
    assert defaults["logging"]["level"] == "INFO"


def test_defaults_are_a_fresh_copy() -> None:
    first = load_defaults_dict()
    first["server"]["host"] = "mutated"
    assert load_defaults_dict()["server"]["host"] == "127.0.0.1"


def test_default_template_is_valid_config() -> None:
    text, err = load_default_template_text()

    assert err is None
    assert "topmark:header" not in text
    assert text.startswith("# TomLayer configuration template.")
    report = validate_tree(load_toml_text(text))
    assert report.ok, report.errors()
    assert report.warnings() == []
