"""
Theme models - option records and generator configuration.

Option records are the entries the block editor shows in its color and
size pickers. Generator options describe where the theme config lives
and where the theme.json document is written.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_theme_json.constants import (
    DEFAULT_INDENT,
    DEFAULT_SCHEMA_URL,
    DEFAULT_SOURCE_FILE,
    DEFAULT_TARGET_FILE,
    DEFAULT_VERSION,
    ValueField,
)


class OptionRecord(BaseModel):
    """
    A named, selectable option (palette color, font size, spacing size).

    Renders as {"name": ..., "slug": ..., "<field>": ...} where field is
    "color" or "size".
    """

    name: str = Field(..., description="Human-readable label")
    slug: str = Field(..., description="Flattened token key")
    field: ValueField = Field(..., description="Value key for this record")
    value: str = Field(..., description="Stringified token value")

    model_config = {"frozen": True}

    def to_theme_dict(self) -> dict[str, str]:
        """Convert to the theme.json record layout."""
        return {
            "name": self.name,
            "slug": self.slug,
            self.field.value: self.value,
        }


class GeneratorOptions(BaseModel):
    """
    Options for generating a theme.json document.

    `file` and `target` are relative to `path`. `tokens` optionally points
    at a design-token document that YAML configs reference with the
    !token and !transform tags.
    """

    path: str = Field(
        default_factory=lambda: str(Path.cwd()),
        description="Base directory for file, target and tokens",
    )
    file: str = Field(DEFAULT_SOURCE_FILE, description="Theme config source file")
    target: str = Field(DEFAULT_TARGET_FILE, description="Output theme.json file")
    tokens: str | None = Field(None, description="Optional design-token document")
    schema_url: str = Field(DEFAULT_SCHEMA_URL, alias="schema", description="$schema value")
    version: int = Field(DEFAULT_VERSION, description="theme.json format version")
    indent: int = Field(DEFAULT_INDENT, ge=0, description="JSON indentation")

    model_config = {"frozen": True, "populate_by_name": True}

    def merged(self, **overrides: Any) -> GeneratorOptions:
        """Return a copy with non-None overrides applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return self.model_copy(update=updates)


class GeneratedPaths(BaseModel):
    """Resolved source and output locations."""

    file: Path
    target: Path
    tokens: Path | None = None

    model_config = {"frozen": True}
