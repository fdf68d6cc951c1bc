"""
Tests for theme models and constants.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_theme_json.constants import (
    DEFAULT_SCHEMA_URL,
    VALUE_FIELD_MAP,
    OutputKind,
    ValueField,
)
from chuk_mcp_theme_json.models import GeneratorOptions, OptionRecord


class TestOutputKind:
    """Tests for OutputKind."""

    def test_values(self) -> None:
        """Kinds use the theme.json names."""
        assert OutputKind.PLAIN.value == "plain"
        assert OutputKind.PALETTE.value == "palette"
        assert OutputKind.FONT_SIZES.value == "fontSizes"
        assert OutputKind.SPACING_SIZES.value == "spacingSizes"

    def test_value_field(self) -> None:
        """Each record kind maps to its value field."""
        assert OutputKind.PALETTE.value_field is ValueField.COLOR
        assert OutputKind.FONT_SIZES.value_field is ValueField.SIZE
        assert OutputKind.SPACING_SIZES.value_field is ValueField.SIZE
        assert OutputKind.PLAIN.value_field is None

    def test_option_list_kinds(self) -> None:
        """Only PLAIN produces a value map."""
        assert not OutputKind.PLAIN.is_option_list
        assert all(kind.is_option_list for kind in VALUE_FIELD_MAP)


class TestOptionRecord:
    """Tests for OptionRecord."""

    def test_frozen(self) -> None:
        """Records are immutable."""
        record = OptionRecord(name="Red", slug="red", field=ValueField.COLOR, value="#f00")
        with pytest.raises(ValidationError):
            record.slug = "blue"

    def test_field_from_string(self) -> None:
        """The value field accepts its string value."""
        record = OptionRecord(name="Base", slug="base", field="size", value="1rem")
        assert record.field is ValueField.SIZE
        assert record.to_theme_dict() == {"name": "Base", "slug": "base", "size": "1rem"}


class TestGeneratorOptions:
    """Tests for GeneratorOptions."""

    def test_defaults(self) -> None:
        """Defaults match the theme.json conventions."""
        options = GeneratorOptions()
        assert options.file == "theme.config.yaml"
        assert options.target == "theme.json"
        assert options.tokens is None
        assert options.schema_url == DEFAULT_SCHEMA_URL
        assert options.version == 2
        assert options.indent == 3
        assert options.path

    def test_schema_alias(self) -> None:
        """schema_url can be set by its alias."""
        options = GeneratorOptions.model_validate({"schema": "https://example.com/s.json"})
        assert options.schema_url == "https://example.com/s.json"

    def test_merged_ignores_none(self) -> None:
        """merged() only applies values that are set."""
        options = GeneratorOptions(path="/srv/theme").merged(
            file="theme.config.py", target=None, version=3
        )
        assert options.path == "/srv/theme"
        assert options.file == "theme.config.py"
        assert options.target == "theme.json"
        assert options.version == 3

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeneratorOptions(indent=-1)
