"""
CHUK theme.json - design tokens to block-editor theme.json.

Theme configs call transform() to turn utility-CSS design tokens into
palette, font size and spacing size options:

    from chuk_mcp_theme_json import transform

    THEME = {
        "settings": {
            "color": {"palette": transform("palette", TOKENS["colors"])},
        },
    }
"""

from chuk_mcp_theme_json.constants import OutputKind, ValueField
from chuk_mcp_theme_json.core import flatten_tokens, title_case, transform
from chuk_mcp_theme_json.generator import ThemeJsonGenerator, generate_theme_json
from chuk_mcp_theme_json.models import GeneratorOptions, OptionRecord

__all__ = [
    "GeneratorOptions",
    "OptionRecord",
    "OutputKind",
    "ThemeJsonGenerator",
    "ValueField",
    "flatten_tokens",
    "generate_theme_json",
    "title_case",
    "transform",
]
