#!/usr/bin/env python3
"""
Example: Generating theme.json from design tokens.

This demonstrates the transform engine on its own and the full
generator with a YAML theme config.

Usage:
    python examples/generate_theme_json.py
"""

import json
import shutil
import tempfile
from pathlib import Path

from chuk_mcp_theme_json import GeneratorOptions, ThemeJsonGenerator, flatten_tokens, transform


def main() -> None:
    """Demonstrate token transforms and theme.json generation."""
    print("CHUK theme.json Demo")
    print("=" * 40)
    print()

    colors = {
        "black": "#000000",
        "blue": {"light": "#93c5fd", "dark": "#1e3a8a"},
        "state-of-the-art": "#7c3aed",
    }

    print("Flattened tokens:")
    for key, value in flatten_tokens(colors).items():
        print(f"  {key}: {value}")
    print()

    print("Palette:")
    for record in transform("palette", colors):
        print(f"  {record['name']:<20} {record['slug']:<20} {record['color']}")
    print()

    print("Palette limited to blue-dark and black:")
    print(json.dumps(transform("palette", colors, ["blue-dark", "black"]), indent=2))
    print()

    print("Plain values:")
    print(json.dumps(transform("plain", {"16": 16, "24": 24}), indent=2))
    print()

    source = Path(__file__).parent / "theme"
    with tempfile.TemporaryDirectory() as tmp:
        for name in ("theme.config.yaml", "tokens.yaml"):
            shutil.copy(source / name, Path(tmp) / name)

        options = GeneratorOptions(path=tmp, tokens="tokens.yaml")
        output = ThemeJsonGenerator(options).generate()
        if output is None:
            print("Failed to generate theme.json")
            return

        document = json.loads(output.read_text())
        print(f"Generated {output.name}:")
        print(f"  $schema: {document['$schema']}")
        print(f"  version: {document['version']}")
        print(f"  palette entries: {len(document['settings']['color']['palette'])}")
        heading = document["settings"]["blocks"]["core/heading"]["color"]["palette"]
        print(f"  heading palette: {[entry['slug'] for entry in heading]}")


if __name__ == "__main__":
    main()
