"""
Transform entry point - token tree in, theme.json fragment out.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal

from chuk_mcp_theme_json.constants import ErrorMessages, OutputKind
from chuk_mcp_theme_json.core.flatten import TokenTree, flatten_tokens
from chuk_mcp_theme_json.core.shape import shape


def parse_kind(kind: OutputKind | str) -> OutputKind:
    """
    Resolve an output kind from an enum member or its string value.

    Raises:
        ValueError: If the string is not a known kind
    """
    if isinstance(kind, OutputKind):
        return kind
    try:
        return OutputKind(kind)
    except ValueError:
        choices = ", ".join(k.value for k in OutputKind)
        raise ValueError(ErrorMessages.UNKNOWN_KIND.format(kind=kind, choices=choices)) from None


def transform(
    kind: OutputKind | str,
    data: TokenTree | None,
    allow_list: Sequence[Any] | None = None,
) -> dict[str, str] | list[dict[str, str]] | Literal[False]:
    """
    Transform design-token data into a theme.json fragment.

    Args:
        kind: "plain", "palette", "fontSizes" or "spacingSizes"
        data: Nested token data, or None when the source has none
        allow_list: Optional slugs to keep

    Returns:
        A value map for "plain", a list of option records for the other
        kinds, or False when data is None

    Example:
        transform("palette", {"red": "#ff0000", "blue": "#0000ff"}, ["blue"])
        # [{"name": "Blue", "slug": "blue", "color": "#0000ff"}]
    """
    output_kind = parse_kind(kind)
    if data is None:
        return False

    return shape(output_kind, flatten_tokens(data), allow_list)
