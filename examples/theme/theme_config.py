"""
Theme config as a Python module.

The generator executes this file fresh on every run and reads THEME.
"""

from pathlib import Path

import yaml

from chuk_mcp_theme_json import transform

tokens = yaml.safe_load((Path(__file__).parent / "tokens.yaml").read_text())
theme = tokens["theme"]

THEME = {
    "settings": {
        "layout": {"contentSize": theme["extend"]["screens"].get("desktop", "")},
        "color": {
            "palette": transform("palette", theme["extend"]["colors"]),
        },
        "typography": {
            "fontSizes": transform("fontSizes", theme["extend"]["fontSize"]),
        },
    },
    "styles": {
        "typography": {
            "fontFamily": ",".join(theme["extend"]["fontFamily"]["sans"]),
            "fontSize": theme["extend"]["fontSize"]["base"],
        },
    },
}
