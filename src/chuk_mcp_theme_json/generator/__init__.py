"""
Theme.json generation - loading configs and writing documents.

The transform engine produces fragments; this layer loads the theme
config that uses them, wraps it in the $schema / version metadata and
writes theme.json.
"""

from chuk_mcp_theme_json.generator.loader import ThemeConfigLoader, lookup, resolve_directives
from chuk_mcp_theme_json.generator.paths import generate_paths, validate_paths
from chuk_mcp_theme_json.generator.writer import (
    ThemeJsonGenerator,
    build_document,
    generate_theme_json,
    write_document,
)

__all__ = [
    "ThemeConfigLoader",
    "ThemeJsonGenerator",
    "build_document",
    "generate_paths",
    "generate_theme_json",
    "lookup",
    "resolve_directives",
    "validate_paths",
    "write_document",
]
