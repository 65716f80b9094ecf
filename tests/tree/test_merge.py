# topmark:header:start
#
#   project      : TomLayer
#   file         : test_merge.py
#   file_relpath : tests/tree/test_merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `tomlayer.tree.merge`."""

from __future__ import annotations

import copy
from typing import Any

from hypothesis import given

from tests.strategies_tomlayer import s_table_only_tree, s_tree
from tomlayer.core.diagnostics import DiagnosticLevel, DiagnosticLog
from tomlayer.tree.merge import deep_merge, merge_layers


def test_scalar_conflict_is_right_biased() -> None:
    assert deep_merge({"a": 1}, {"a": 2}) == {"a": 2}


def test_nested_tables_are_merged_recursively() -> None:
    base: dict[str, Any] = {"server": {"host": "localhost", "port": 8080}}
    override: dict[str, Any] = {"server": {"port": 9000}, "debug": True}

    assert deep_merge(base, override) == {
        "server": {"host": "localhost", "port": 9000},
        "debug": True,
    }


def test_arrays_are_replaced_not_concatenated() -> None:
    assert deep_merge({"hosts": ["a", "b"]}, {"hosts": ["c"]}) == {"hosts": ["c"]}


def test_inputs_are_not_mutated() -> None:
    base: dict[str, Any] = {"a": {"x": 1}, "keep": [1, 2]}
    override: dict[str, Any] = {"a": {"y": 2}, "new": {"z": 3}}
    base_before: dict[str, Any] = copy.deepcopy(base)
    override_before: dict[str, Any] = copy.deepcopy(override)

    merged = deep_merge(base, override)
    merged["a"]["x"] = 100

    assert base == base_before
    assert override == override_before


def test_table_replaced_by_scalar_is_silent_without_diagnostics() -> None:
    assert deep_merge({"a": {"x": 1}}, {"a": 1}) == {"a": 1}
    assert deep_merge({"a": 1}, {"a": {"x": 1}}) == {"a": {"x": 1}}


def test_table_scalar_conflict_recorded_as_warning() -> None:
    log = DiagnosticLog()

    merged = deep_merge({"db": {"opts": {"x": 1}}}, {"db": {"opts": "none"}}, diagnostics=log)

    assert merged == {"db": {"opts": "none"}}
    items = list(log)
    assert len(items) == 1
    assert items[0].level == DiagnosticLevel.WARNING
    assert items[0].message == "Replacing table at db.opts with string"


def test_scalar_conflicts_are_not_reported() -> None:
    log = DiagnosticLog()
    deep_merge({"a": 1, "b": [1]}, {"a": "x", "b": [2]}, diagnostics=log)
    assert len(log) == 0


def test_merge_layers_applies_left_to_right() -> None:
    merged = merge_layers(
        {"server": {"port": 1, "host": "a"}},
        {"server": {"port": 2}},
        {"server": {"port": 3}, "title": "t"},
    )
    assert merged == {"server": {"port": 3, "host": "a"}, "title": "t"}


def test_merge_layers_without_layers_is_empty() -> None:
    assert merge_layers() == {}


def test_non_associative_when_table_meets_scalar() -> None:
    a: dict[str, Any] = {"k": {"x": 1}}
    b: dict[str, Any] = {"k": 0}
    c: dict[str, Any] = {"k": {"y": 2}}

    left = deep_merge(deep_merge(a, b), c)
    right = deep_merge(a, deep_merge(b, c))

    assert left == {"k": {"y": 2}}
    assert right == {"k": {"x": 1, "y": 2}}


# --- Properties ---


@given(tree=s_tree())
def test_empty_override_is_identity(tree: dict[str, Any]) -> None:
    assert deep_merge(tree, {}) == tree


@given(tree=s_tree())
def test_empty_base_is_identity(tree: dict[str, Any]) -> None:
    assert deep_merge({}, tree) == tree


@given(tree=s_tree())
def test_merge_is_idempotent(tree: dict[str, Any]) -> None:
    assert deep_merge(tree, tree) == tree


@given(base=s_tree(), override=s_tree())
def test_override_wins_for_non_table_values(
    base: dict[str, Any],
    override: dict[str, Any],
) -> None:
    merged = deep_merge(base, override)
    for key, value in override.items():
        if not isinstance(value, dict) or not isinstance(base.get(key), dict):
            assert merged[key] == value


@given(base=s_tree(), override=s_tree())
def test_all_keys_are_kept(base: dict[str, Any], override: dict[str, Any]) -> None:
    assert set(deep_merge(base, override)) == set(base) | set(override)


@given(a=s_table_only_tree(), b=s_table_only_tree(), c=s_table_only_tree())
def test_associative_without_table_scalar_conflicts(
    a: dict[str, Any],
    b: dict[str, Any],
    c: dict[str, Any],
) -> None:
    assert deep_merge(deep_merge(a, b), c) == deep_merge(a, deep_merge(b, c))
