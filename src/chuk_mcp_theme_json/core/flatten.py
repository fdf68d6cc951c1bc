"""
Token flattening - nested token trees to single-level maps.

    {"colors": {"blue": {"light": "#aaf"}}}  ->  {"colors-blue-light": "#aaf"}

Mappings are descended into; lists and tuples are leaves even when they
contain mappings (font stacks, shadow lists).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

from chuk_mcp_theme_json.constants import FLATTEN_SEPARATOR

TokenScalar: TypeAlias = str | int | float | bool | None
TokenLeaf: TypeAlias = TokenScalar | Sequence[Any]
TokenValue: TypeAlias = "TokenLeaf | TokenTree"
TokenTree: TypeAlias = Mapping[Any, TokenValue]
FlatTokenMap: TypeAlias = dict[str, TokenLeaf]


def flatten_tokens(tree: TokenTree, parent: str | None = None) -> FlatTokenMap:
    """
    Collapse a token tree into a flat map keyed by dash-joined paths.

    Keys are not escaped, so "blue-light" at the top level and
    {"blue": {"light": ...}} produce the same flat key. The later value
    wins and the key keeps its first position.

    Args:
        tree: Nested token mapping
        parent: Path prefix for the keys of this level

    Returns:
        Flat map in source insertion order
    """
    result: FlatTokenMap = {}
    _flatten_into(tree, parent, result)
    return result


def _flatten_into(tree: Any, parent: str | None, result: FlatTokenMap) -> None:
    if not isinstance(tree, Mapping):
        return

    for key, value in tree.items():
        path = f"{parent}{FLATTEN_SEPARATOR}{key}" if parent else str(key)
        if isinstance(value, Mapping):
            _flatten_into(value, path, result)
        else:
            result[path] = value


def count_leaves(tree: TokenTree) -> int:
    """Count the leaf values in a token tree (0 for non-mapping input)."""
    if not isinstance(tree, Mapping):
        return 0
    return sum(
        count_leaves(value) if isinstance(value, Mapping) else 1 for value in tree.values()
    )
