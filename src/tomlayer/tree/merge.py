# topmark:header:start
#
#   project      : TomLayer
#   file         : merge.py
#   file_relpath : src/tomlayer/tree/merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deep merge of configuration trees.

Rule (right-biased):
    Start from a shallow copy of ``base``. For every key in ``override``: if the
    key exists in the result and both values are mappings, the result holds the
    recursive merge of the two; otherwise the value from ``override`` is set.

Properties:
    - identity: ``deep_merge(t, {}) == t == deep_merge({}, t)``
    - right bias on scalar conflicts: ``deep_merge({"a": 1}, {"a": 2}) == {"a": 2}``
    - recursion on tables: ``deep_merge({"a": {"x": 1}}, {"a": {"y": 2}})
      == {"a": {"x": 1, "y": 2}}``
    - *not* associative once a table meets a non-table at the same key.

A table replaced by a scalar (or the reverse) is overwritten silently. Pass a
`DiagnosticLog` to have such replacements recorded as warnings; the merge result
is the same either way. Arrays are replaced, never concatenated. Inputs are never
mutated, but subtrees present in only one input are shared with the result.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from tomlayer.core.logging import get_logger
from tomlayer.io.getters import location
from tomlayer.io.guards import toml_type_name

if TYPE_CHECKING:
    from tomlayer.core.diagnostics import DiagnosticLog
    from tomlayer.core.logging import TomlayerLogger
    from tomlayer.io.types import TomlTable

logger: TomlayerLogger = get_logger(__name__)


def deep_merge(
    base: Mapping[str, Any],
    override: Mapping[str, Any],
    *,
    diagnostics: DiagnosticLog | None = None,
    where: str = "",
) -> TomlTable:
    """Return a new tree where ``override`` is recursively merged over ``base``.

    Args:
        base (Mapping[str, Any]): Lower-precedence tree.
        override (Mapping[str, Any]): Higher-precedence tree.
        diagnostics (DiagnosticLog | None): When given, table/non-table replacements
            are recorded as warnings.
        where (str): Dotted location of ``base`` within the root tree (used in messages).

    Returns:
        TomlTable: The merged tree.
    """
    result: TomlTable = dict(base)
    for key, incoming in override.items():
        loc: str = location(where, key)
        if key in result:
            existing: Any = result[key]
            if isinstance(existing, Mapping) and isinstance(incoming, Mapping):
                result[key] = deep_merge(
                    existing,
                    incoming,
                    diagnostics=diagnostics,
                    where=loc,
                )
                continue
            if isinstance(existing, Mapping) != isinstance(incoming, Mapping):
                msg: str = (
                    f"Replacing {toml_type_name(existing)} at {loc} "
                    f"with {toml_type_name(incoming)}"
                )
                logger.debug(msg)
                if diagnostics is not None:
                    diagnostics.add_warning(msg)
        result[key] = incoming
    return result


def merge_layers(
    *layers: Mapping[str, Any],
    diagnostics: DiagnosticLog | None = None,
) -> TomlTable:
    """Merge any number of trees left to right (the last layer wins).

    Args:
        *layers (Mapping[str, Any]): Trees in increasing order of precedence.
        diagnostics (DiagnosticLog | None): Forwarded to `deep_merge`.

    Returns:
        TomlTable: The merged tree; ``{}`` when no layers are given.
    """
    merged: TomlTable = {}
    for i, layer in enumerate(layers):
        logger.trace("Merging layer %d: %s", i, layer)
        merged = deep_merge(merged, layer, diagnostics=diagnostics)
    return merged
