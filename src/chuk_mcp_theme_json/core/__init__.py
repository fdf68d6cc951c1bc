"""
Core token transform engine.

Pure functions, composed in sequence:
- flatten_tokens: Nested token tree -> flat dash-keyed map
- shape: Flat map -> value map or option records
- title_case: Slug -> display label for option records
- transform: The whole pipeline behind one call
"""

from chuk_mcp_theme_json.core.flatten import (
    FlatTokenMap,
    TokenTree,
    count_leaves,
    flatten_tokens,
)
from chuk_mcp_theme_json.core.labels import title_case
from chuk_mcp_theme_json.core.shape import (
    build_options,
    format_options,
    format_values,
    shape,
    stringify,
)
from chuk_mcp_theme_json.core.transform import parse_kind, transform

__all__ = [
    # Flatten
    "FlatTokenMap",
    "TokenTree",
    "count_leaves",
    "flatten_tokens",
    # Labels
    "title_case",
    # Shape
    "build_options",
    "format_options",
    "format_values",
    "shape",
    "stringify",
    # Transform
    "parse_kind",
    "transform",
]
