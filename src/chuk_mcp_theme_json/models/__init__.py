"""
Pydantic models for the theme.json system.

This module provides:
- OptionRecord: A palette color / font size / spacing size entry
- GeneratorOptions: Where the theme config lives and where output goes
- GeneratedPaths: Resolved file locations for a generation run
"""

from chuk_mcp_theme_json.models.theme import GeneratedPaths, GeneratorOptions, OptionRecord

__all__ = [
    "GeneratedPaths",
    "GeneratorOptions",
    "OptionRecord",
]
