# topmark:header:start
#
#   project      : TomLayer
#   file         : test_getters.py
#   file_relpath : tests/io/test_getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for type guards, checked getters (diagnostics) and strict getters (raising)."""

from __future__ import annotations

from datetime import date, datetime, time
from enum import Enum
from typing import Any

import pytest

from tomlayer.core.diagnostics import DiagnosticLevel, DiagnosticLog
from tomlayer.core.errors import ConfigKeyError, ConfigTypeError
from tomlayer.core.logging import get_logger
from tomlayer.io.getters import (
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_list_value_checked,
    get_string_value_or_none_checked,
    location,
    optional_value,
    require_value,
)
from tomlayer.io.guards import (
    is_homogeneous_list,
    is_int,
    toml_type_name,
)

logger = get_logger(__name__)


class Color(Enum):
    RED = "RED"
    BLUE = "BLUE"


def _messages(log: DiagnosticLog) -> list[str]:
    return [d.message for d in log]


@pytest.mark.parametrize(
    ("value", "name"),
    [
        (True, "boolean"),
        (1, "integer"),
        (1.5, "float"),
        ("s", "string"),
        (datetime(2024, 1, 1, 12, 0), "datetime"),
        (date(2024, 1, 1), "date"),
        (time(12, 0), "time"),
        ([1], "array"),
        ({"a": 1}, "table"),
        (None, "NoneType"),
    ],
)
def test_toml_type_name(value: object, name: str) -> None:
    assert toml_type_name(value) == name


def test_is_int_rejects_bool() -> None:
    assert is_int(3)
    assert not is_int(True)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ([], True),
        ([1, 2, 3], True),
        (["a", "b"], True),
        ([[1], ["a"]], True),
        ([1, "a"], False),
        ([1, 1.5], False),
        ([True, 1], False),
        ("not a list", False),
    ],
)
def test_is_homogeneous_list(value: object, expected: bool) -> None:
    assert is_homogeneous_list(value) is expected


def test_location() -> None:
    assert location("[server]", "port") == "[server].port"
    assert location("", "title") == "title"


def test_checked_int_accepts_int() -> None:
    log = DiagnosticLog()
    value = get_int_value_or_none_checked(
        {"port": 8080}, "port", where="[server]", diagnostics=log, logger=logger
    )
    assert value == 8080
    assert len(log) == 0


def test_checked_int_rejects_string_and_bool() -> None:
    log = DiagnosticLog()
    table: dict[str, Any] = {"port": "8080", "other": True}

    assert (
        get_int_value_or_none_checked(
            table, "port", where="[server]", diagnostics=log, logger=logger
        )
        is None
    )
    assert (
        get_int_value_or_none_checked(
            table, "other", where="[server]", diagnostics=log, logger=logger
        )
        is None
    )
    assert _messages(log) == [
        "Expected integer in [server].port, got string: '8080'",
        "Expected integer in [server].other, got boolean: True",
    ]
    assert all(d.level == DiagnosticLevel.ERROR for d in log)


def test_checked_missing_optional_and_required() -> None:
    log = DiagnosticLog()

    assert (
        get_string_value_or_none_checked(
            {}, "host", where="[server]", diagnostics=log, logger=logger
        )
        is None
    )
    assert len(log) == 0

    assert (
        get_string_value_or_none_checked(
            {}, "url", where="[database]", diagnostics=log, logger=logger, required=True
        )
        is None
    )
    assert _messages(log) == ["Missing required key [database].url"]


def test_checked_bool_does_not_coerce_integers() -> None:
    log = DiagnosticLog()
    assert (
        get_bool_value_or_none_checked(
            {"debug": 1}, "debug", where="", diagnostics=log, logger=logger
        )
        is None
    )
    assert log.has_error()


def test_checked_string_list_filters_entries() -> None:
    log = DiagnosticLog()

    hosts = get_string_list_value_checked(
        {"hosts": ["a", 1, "b"]}, "hosts", where="[server]", diagnostics=log, logger=logger
    )
    assert hosts == ["a", "b"]
    assert _messages(log) == ["Ignoring non-string entry in [server].hosts: 1"]


def test_checked_string_list_wrong_type() -> None:
    log = DiagnosticLog()
    assert (
        get_string_list_value_checked(
            {"hosts": "a"}, "hosts", where="", diagnostics=log, logger=logger
        )
        == []
    )
    assert _messages(log) == ["Expected array in hosts, got string: 'a'"]


def test_checked_enum() -> None:
    log = DiagnosticLog()

    assert (
        get_enum_value_checked({"c": "red"}, "c", Color, where="", diagnostics=log, logger=logger)

        is Color.RED
    )
    assert (
        get_enum_value_checked({"c": "green"}, "c", Color, where="", diagnostics=log, logger=logger)

        is None
    )
    assert _messages(log) == ["Invalid value for c: 'green' (allowed: RED, BLUE)"]


def test_require_value() -> None:
    assert require_value({"port": 1}, "port", "integer", where="[server]") == 1

    with pytest.raises(ConfigKeyError, match=r"Missing required key \[server\]\.port"):
        require_value({}, "port", "integer", where="[server]")

    with pytest.raises(ConfigTypeError, match="Expected integer in"):
        require_value({"port": "1"}, "port", "integer", where="[server]")


def test_config_key_error_is_a_key_error() -> None:
    with pytest.raises(KeyError):
        require_value({}, "port", "integer", where="")


def test_optional_value() -> None:
    assert optional_value({}, "debug", "boolean", where="", default=False) is False
    assert optional_value({"debug": True}, "debug", "boolean", where="") is True
    assert optional_value({"dob": date(2000, 1, 1)}, "dob", "datetime", where="") == date(
        2000, 1, 1
    )

    with pytest.raises(TypeError):
        optional_value({"debug": "yes"}, "debug", "boolean", where="")
