"""
MCP tool implementations.

- theme - Token transforms and theme.json generation
"""

from chuk_mcp_theme_json.tools.theme import register_theme_tools

__all__ = [
    "register_theme_tools",
]
