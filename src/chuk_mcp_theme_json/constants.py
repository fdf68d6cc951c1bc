"""
Constants and enums for the theme.json system.

No magic strings - use enums and Literal types for constrained values.
"""

from __future__ import annotations

from enum import Enum


class ValueField(str, Enum):
    """Name of the value key carried by an option record."""

    COLOR = "color"
    SIZE = "size"


class OutputKind(str, Enum):
    """
    Shape requested from the transform engine.

    PLAIN produces a slug -> value map, the others produce a list of
    option records for the editor's pickers.
    """

    PLAIN = "plain"
    PALETTE = "palette"
    FONT_SIZES = "fontSizes"
    SPACING_SIZES = "spacingSizes"

    @property
    def value_field(self) -> ValueField | None:
        """Value key used by records of this kind (None for PLAIN)."""
        return VALUE_FIELD_MAP.get(self)

    @property
    def is_option_list(self) -> bool:
        return self is not OutputKind.PLAIN


VALUE_FIELD_MAP: dict[OutputKind, ValueField] = {
    OutputKind.PALETTE: ValueField.COLOR,
    OutputKind.FONT_SIZES: ValueField.SIZE,
    OutputKind.SPACING_SIZES: ValueField.SIZE,
}

# Joins nested token keys, e.g. colors.blue.light -> "colors-blue-light"
FLATTEN_SEPARATOR = "-"

# Words kept lower-case by title_case unless they lead the label
TITLE_CASE_EXCEPTIONS: frozenset[str] = frozenset({"of", "the", "and"})

# Generator defaults
DEFAULT_SCHEMA_URL = "https://schemas.wp.org/trunk/theme.json"
DEFAULT_VERSION = 2
DEFAULT_SOURCE_FILE = "theme.config.yaml"
DEFAULT_TARGET_FILE = "theme.json"
DEFAULT_INDENT = 3

# Module-level names read from Python config / token files
THEME_ATTRIBUTE = "THEME"
TOKENS_ATTRIBUTE = "TOKENS"

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)
PYTHON_SUFFIXES = (".py",)


class ErrorMessages:
    """Standardized error messages."""

    MISSING_PARAMETERS = "Missing parameters required to generate theme.json file."
    OUTSIDE_DIRECTORY = (
        "The path, file and target options cannot reference a directory "
        "outside of the current working directory."
    )
    SOURCE_NOT_FOUND = (
        "Unable to locate source file. Use the `file` option to specify the "
        "path to the source file."
    )
    UNSUPPORTED_FORMAT = "Unsupported config format: '{suffix}'. Use .yaml, .yml, .json or .py."
    MISSING_ATTRIBUTE = "Config module '{path}' does not define a '{attribute}' mapping."
    NOT_A_MAPPING = "Config '{path}' must contain a mapping at the top level."
    CONFIG_FAILED = "Config module '{path}' failed to run: {error!r}"
    NO_TOKENS_DOCUMENT = (
        "Config '{path}' uses !token / !transform but no tokens document is configured. "
        "Every reference resolves to null / false. Set the `tokens` option."
    )
    SERIALIZE_FAILED = "Unable to serialize theme.json: {error}"
    INVALID_DIRECTIVE = "Invalid !transform directive: {detail}"
    UNKNOWN_KIND = "Unknown output kind: '{kind}'. Expected one of: {choices}."
    WRITE_FAILED = "Unable to write {target}: {error}"


class SuccessMessages:
    """Standardized success messages."""

    CREATED = "{target} created successfully!"
