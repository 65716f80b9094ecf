# topmark:header:start
#
#   project      : TomLayer
#   file         : strategies_tomlayer.py
#   file_relpath : tests/strategies_tomlayer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating configuration trees.

Trees are bounded in depth and width so that merge properties can be explored
quickly. Keys come from a small alphabet so that independently drawn trees
actually collide.
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

KEYS: st.SearchStrategy[str] = st.sampled_from(["a", "b", "c", "server", "port", "url"])

SCALARS: st.SearchStrategy[Any] = st.one_of(
    st.booleans(),
    st.integers(min_value=-(2**31), max_value=2**31),
    st.text(max_size=8),
    st.lists(st.integers(min_value=0, max_value=9), max_size=3),
)


def s_tree(max_leaves: int = 12) -> st.SearchStrategy[dict[str, Any]]:
    """Return a strategy for nested tables with scalar or array leaves."""
    return st.recursive(
        st.dictionaries(KEYS, SCALARS, max_size=3),
        lambda children: st.dictionaries(KEYS, st.one_of(SCALARS, children), max_size=3),
        max_leaves=max_leaves,
    )


def s_table_only_tree(max_leaves: int = 12) -> st.SearchStrategy[dict[str, Any]]:
    """Return a strategy for trees whose keys are either always tables or always scalars.

    Keys starting with a section name hold tables and all other keys hold
    scalars, so a table never meets a non-table at the same key when two such
    trees are merged.
    """
    scalar_keys: st.SearchStrategy[str] = st.sampled_from(["a", "b", "c"])
    table_keys: st.SearchStrategy[str] = st.sampled_from(["server", "database"])
    return st.recursive(
        st.dictionaries(scalar_keys, SCALARS, max_size=3),
        lambda children: st.builds(
            lambda scalars, tables: {**scalars, **tables},
            st.dictionaries(scalar_keys, SCALARS, max_size=3),
            st.dictionaries(table_keys, children, max_size=2),
        ),
        max_leaves=max_leaves,
    )
