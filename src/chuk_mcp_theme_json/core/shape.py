"""
Shaping - flat token maps to theme.json fragments.

Two shapes are produced:
- Value maps ({"16": "16"}) for settings that take raw values
- Option lists ([{"name": ..., "slug": ..., "color": ...}]) for the
  editor's palette, font size and spacing size pickers
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Literal

from chuk_mcp_theme_json.constants import OutputKind, ValueField
from chuk_mcp_theme_json.core.labels import title_case
from chuk_mcp_theme_json.models.theme import OptionRecord


def stringify(value: Any) -> str:
    """
    Render a token value as theme.json text.

    Integral numbers drop the trailing ".0", booleans are lower-case and
    sequences are comma-joined (["Inter", "sans-serif"] -> "Inter,sans-serif").
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    return str(value)


def _allowed(allow_list: Iterable[Any] | None) -> frozenset[str]:
    return frozenset(str(slug) for slug in allow_list or ())


def format_values(
    flat: Mapping[str, Any],
    allow_list: Sequence[Any] | None = None,
) -> dict[str, str]:
    """
    Build a value map from a flat token map.

    Args:
        flat: Flat token map
        allow_list: Optional slugs to keep (empty keeps everything)

    Returns:
        Stringified values in flattening order
    """
    allowed = _allowed(allow_list)
    return {
        key: stringify(value) for key, value in flat.items() if not allowed or key in allowed
    }


def build_options(
    flat: Mapping[str, Any],
    field: ValueField,
    allow_list: Sequence[Any] | None = None,
) -> list[OptionRecord]:
    """
    Build option records from a flat token map.

    Records are produced in flattening order and then filtered, so the
    allow-list never reorders the output.
    """
    records = [
        OptionRecord(name=title_case(key), slug=key, field=field, value=stringify(value))
        for key, value in flat.items()
    ]

    allowed = _allowed(allow_list)
    if not allowed:
        return records

    return [record for record in records if record.slug in allowed]


def format_options(
    flat: Mapping[str, Any],
    kind: OutputKind = OutputKind.PALETTE,
    allow_list: Sequence[Any] | None = None,
) -> list[dict[str, str]]:
    """Build theme.json option records for a palette or size kind."""
    field = kind.value_field or ValueField.COLOR
    return [record.to_theme_dict() for record in build_options(flat, field, allow_list)]


def shape(
    kind: OutputKind,
    flat: Mapping[str, Any] | None,
    allow_list: Sequence[Any] | None = None,
) -> dict[str, str] | list[dict[str, str]] | Literal[False]:
    """
    Shape a flat token map for the requested output kind.

    Returns False when no token data was supplied at all. An empty map
    is still a successful (empty) result.
    """
    if flat is None:
        return False

    if kind.is_option_list:
        return format_options(flat, kind, allow_list)

    return format_values(flat, allow_list)
