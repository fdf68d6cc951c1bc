"""
Tests for the core token transform engine.

Tests cover:
- flatten_tokens and count_leaves (flatten.py)
- title_case (labels.py)
- stringify, format_values, build_options, shape (shape.py)
- parse_kind and transform (transform.py)
"""

import pytest

from chuk_mcp_theme_json.constants import OutputKind, ValueField
from chuk_mcp_theme_json.core import (
    build_options,
    count_leaves,
    flatten_tokens,
    format_options,
    format_values,
    parse_kind,
    shape,
    stringify,
    title_case,
    transform,
)
from chuk_mcp_theme_json.models import OptionRecord

ALL_KINDS = list(OutputKind)


class TestFlattenTokens:
    """Tests for flatten_tokens."""

    def test_empty(self) -> None:
        """Empty tree flattens to empty map."""
        assert flatten_tokens({}) == {}

    def test_nested_paths(self) -> None:
        """Nested keys are joined with dashes."""
        tree = {"colors": {"red": "#ff0000", "blue": {"light": "#aaf"}}}
        assert flatten_tokens(tree) == {
            "colors-red": "#ff0000",
            "colors-blue-light": "#aaf",
        }

    def test_insertion_order(self) -> None:
        """Flat keys follow source insertion order."""
        tree = {"z": "1", "a": {"y": "2", "b": "3"}, "m": "4"}
        assert list(flatten_tokens(tree)) == ["z", "a-y", "a-b", "m"]

    def test_leaf_count_matches(self, color_tokens: dict) -> None:
        """Every leaf appears exactly once."""
        flat = flatten_tokens(color_tokens)
        assert len(flat) == count_leaves(color_tokens) == 5
        assert flat["blue-DEFAULT"] == "#3b82f6"

    def test_arrays_are_leaves(self) -> None:
        """Lists are never descended into, even with mappings inside."""
        stack = ["Inter", "sans-serif"]
        shadows = [{"x": 0, "y": 1}]
        flat = flatten_tokens({"fontFamily": {"sans": stack}, "shadow": shadows})
        assert flat == {"fontFamily-sans": stack, "shadow": shadows}

    def test_tuples_are_leaves(self) -> None:
        """Tuples behave like lists."""
        assert flatten_tokens({"pair": ("a", "b")}) == {"pair": ("a", "b")}

    def test_numeric_keys(self) -> None:
        """Integer keys (from YAML) are rendered as text."""
        assert flatten_tokens({"spacing": {5: "1.25rem", 10: "2.5rem"}}) == {
            "spacing-5": "1.25rem",
            "spacing-10": "2.5rem",
        }

    def test_none_is_leaf(self) -> None:
        """None values are kept as leaves."""
        assert flatten_tokens({"unset": None}) == {"unset": None}

    def test_non_mapping_input(self) -> None:
        """Non-mapping input flattens to an empty map."""
        assert flatten_tokens("not-a-tree") == {}  # type: ignore[arg-type]

    def test_count_leaves_non_mapping(self) -> None:
        """count_leaves agrees with flatten_tokens on non-mapping input."""
        for value in ("x", None, ["a", "b"], 5):
            assert count_leaves(value) == len(flatten_tokens(value)) == 0  # type: ignore[arg-type]

    def test_delimiter_collision(self) -> None:
        """Colliding paths keep the first position and the last value."""
        tree = {"blue-light": "#111", "red": "#f00", "blue": {"light": "#222"}}
        flat = flatten_tokens(tree)
        assert flat == {"blue-light": "#222", "red": "#f00"}
        assert list(flat) == ["blue-light", "red"]
        assert count_leaves(tree) == 3

    def test_parent_prefix(self) -> None:
        """An explicit parent prefixes every key."""
        assert flatten_tokens({"red": "#f00"}, parent="colors") == {"colors-red": "#f00"}

    def test_does_not_mutate_input(self, color_tokens: dict) -> None:
        """Flattening leaves the source untouched."""
        before = repr(color_tokens)
        flatten_tokens(color_tokens)
        assert repr(color_tokens) == before


class TestTitleCase:
    """Tests for title_case."""

    def test_empty(self) -> None:
        """Empty and None give an empty label."""
        assert title_case("") == ""
        assert title_case(None) == ""

    def test_single_word(self) -> None:
        """Single words are capitalized."""
        assert title_case("red") == "Red"

    def test_separators(self) -> None:
        """Dashes and underscores become spaces."""
        assert title_case("blue-grey_dark") == "Blue Grey Dark"

    def test_stop_words(self) -> None:
        """Stop-words stay lower-case after the first word."""
        assert title_case("sea-of-blue") == "Sea of Blue"
        assert title_case("state-of-the-art") == "State of the Art"
        assert title_case("black-and-white") == "Black and White"

    def test_leading_stop_word(self) -> None:
        """A stop-word leading the label is capitalized."""
        assert title_case("the-end") == "The End"
        assert title_case("of-mice-and-men") == "Of Mice and Men"

    def test_lowercases_rest(self) -> None:
        """The rest of each word is lower-cased."""
        assert title_case("DEEP-BLUE") == "Deep Blue"
        assert title_case("blue-DEFAULT") == "Blue Default"
        assert title_case("Sea-OF-Blue") == "Sea of Blue"

    def test_digits(self) -> None:
        """Numeric slugs pass through."""
        assert title_case("2xl") == "2xl"
        assert title_case("gray-500") == "Gray 500"

    def test_repeated_separators(self) -> None:
        """Each separator becomes one space."""
        assert title_case("blue--light") == "Blue  Light"


class TestStringify:
    """Tests for stringify."""

    def test_strings_unchanged(self) -> None:
        assert stringify("#ff0000") == "#ff0000"

    def test_numbers(self) -> None:
        """Numbers render as decimal text."""
        assert stringify(16) == "16"
        assert stringify(16.0) == "16"
        assert stringify(1.5) == "1.5"
        assert stringify(-2) == "-2"

    def test_booleans(self) -> None:
        assert stringify(True) == "true"
        assert stringify(False) == "false"

    def test_sequences(self) -> None:
        """Sequences are comma-joined."""
        assert stringify(["Inter", "sans-serif"]) == "Inter,sans-serif"
        assert stringify((1, 2.0)) == "1,2"

    def test_none(self) -> None:
        assert stringify(None) == ""


class TestFormatValues:
    """Tests for the plain value map."""

    def test_stringifies(self) -> None:
        """Values are stringified under their keys."""
        assert format_values({"16": 16, "24": 24}) == {"16": "16", "24": "24"}

    def test_allow_list_filters(self) -> None:
        """Keys missing from the allow-list are dropped."""
        flat = {"sm": "0.5rem", "md": "1rem", "lg": "2rem"}
        assert format_values(flat, ["lg", "sm"]) == {"sm": "0.5rem", "lg": "2rem"}

    def test_order_follows_source(self) -> None:
        """Output order follows the flat map, not the allow-list."""
        flat = {"sm": "0.5rem", "md": "1rem", "lg": "2rem"}
        assert list(format_values(flat, ["lg", "sm"])) == ["sm", "lg"]

    def test_empty_allow_list_keeps_all(self) -> None:
        flat = {"sm": "0.5rem", "md": "1rem"}
        assert format_values(flat, []) == format_values(flat)


class TestBuildOptions:
    """Tests for option records."""

    def test_records(self) -> None:
        """Records carry name, slug and value."""
        records = build_options({"blue-grey": "#607d8b"}, ValueField.COLOR)
        assert records == [
            OptionRecord(name="Blue Grey", slug="blue-grey", field=ValueField.COLOR, value="#607d8b")
        ]

    def test_to_theme_dict(self) -> None:
        """Records render with the value field as key."""
        record = OptionRecord(name="Base", slug="base", field=ValueField.SIZE, value="1rem")
        assert record.to_theme_dict() == {"name": "Base", "slug": "base", "size": "1rem"}

    def test_allow_list_keeps_production_order(self) -> None:
        """Filtering never reorders records."""
        flat = {"red": "#f00", "green": "#0f0", "blue": "#00f"}
        records = build_options(flat, ValueField.COLOR, ["blue", "red"])
        assert [r.slug for r in records] == ["red", "blue"]

    def test_allow_list_unknown_slug(self) -> None:
        """Unknown slugs in the allow-list are ignored."""
        records = build_options({"red": "#f00"}, ValueField.COLOR, ["purple"])
        assert records == []

    def test_allow_list_numeric_entries(self) -> None:
        """Allow-list entries are compared as text."""
        records = build_options({"14": "0.875rem", "20": "1.25rem"}, ValueField.SIZE, [20])
        assert [r.slug for r in records] == ["20"]

    def test_format_options_size_field(self) -> None:
        """Size kinds use the size field."""
        result = format_options({"base": "1rem"}, OutputKind.FONT_SIZES)
        assert result == [{"name": "Base", "slug": "base", "size": "1rem"}]


class TestShape:
    """Tests for shape."""

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_none_is_false(self, kind: OutputKind) -> None:
        """Missing data returns the False sentinel."""
        assert shape(kind, None) is False

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_empty_map_is_not_false(self, kind: OutputKind) -> None:
        """An empty map is a successful empty result."""
        result = shape(kind, {})
        assert result is not False
        assert len(result) == 0

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_no_allow_list_keeps_everything(self, kind: OutputKind) -> None:
        flat = {"a": "1", "b": "2", "c": "3"}
        assert len(shape(kind, flat, [])) == len(flat)

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_allow_list_is_subset(self, kind: OutputKind) -> None:
        """Filtered output is a subset of the unfiltered output."""
        flat = {"a": "1", "b": "2", "c": "3"}
        allow = ["c", "a"]
        filtered = shape(kind, flat, allow)
        full = shape(kind, flat, [])
        if kind is OutputKind.PLAIN:
            assert set(filtered) <= set(allow)
            assert filtered.items() <= full.items()
        else:
            assert all(record["slug"] in allow for record in filtered)
            assert all(record in full for record in filtered)

    def test_palette_scenario(self) -> None:
        result = shape(OutputKind.PALETTE, {"red": "#ff0000", "blue": "#0000ff"}, ["blue"])
        assert result == [{"name": "Blue", "slug": "blue", "color": "#0000ff"}]

    def test_plain_scenario(self) -> None:
        assert shape(OutputKind.PLAIN, {"16": 16, "24": 24}) == {"16": "16", "24": "24"}

    @pytest.mark.parametrize(
        "kind,field",
        [
            (OutputKind.PALETTE, "color"),
            (OutputKind.FONT_SIZES, "size"),
            (OutputKind.SPACING_SIZES, "size"),
        ],
    )
    def test_value_field(self, kind: OutputKind, field: str) -> None:
        """Each record kind uses its value field."""
        (record,) = shape(kind, {"x": "1"})
        assert set(record) == {"name", "slug", field}


class TestTransform:
    """Tests for the transform entry point."""

    def test_parse_kind(self) -> None:
        """Kinds parse from their string values."""
        assert parse_kind("palette") is OutputKind.PALETTE
        assert parse_kind("fontSizes") is OutputKind.FONT_SIZES
        assert parse_kind(OutputKind.PLAIN) is OutputKind.PLAIN

    def test_unknown_kind(self) -> None:
        """Unknown kinds are rejected."""
        with pytest.raises(ValueError, match="Unknown output kind"):
            transform("gradients", {"a": "b"})

    @pytest.mark.parametrize("kind", [k.value for k in OutputKind])
    def test_none_data(self, kind: str) -> None:
        assert transform(kind, None) is False

    def test_nested_palette(self, color_tokens: dict) -> None:
        """Nested tokens become labeled palette entries."""
        result = transform("palette", color_tokens)
        assert result[0] == {"name": "Black", "slug": "black", "color": "#000000"}
        assert result[1] == {"name": "Blue Light", "slug": "blue-light", "color": "#93c5fd"}
        assert result[-1]["name"] == "State of the Art"

    def test_nested_allow_list(self, color_tokens: dict) -> None:
        result = transform("palette", color_tokens, ["blue-dark", "black"])
        assert [r["slug"] for r in result] == ["black", "blue-dark"]

    def test_font_sizes(self) -> None:
        result = transform("fontSizes", {"sm": "0.875rem", "base": "1rem"})
        assert result == [
            {"name": "Sm", "slug": "sm", "size": "0.875rem"},
            {"name": "Base", "slug": "base", "size": "1rem"},
        ]

    def test_spacing_sizes_numeric(self) -> None:
        """Numeric spacing keys and values are stringified."""
        result = transform("spacingSizes", {1: 4, 2: 8})
        assert result == [
            {"name": "1", "slug": "1", "size": "4"},
            {"name": "2", "slug": "2", "size": "8"},
        ]

    def test_plain_nested(self) -> None:
        result = transform("plain", {"screens": {"sm": "640px", "lg": "1024px"}})
        assert result == {"screens-sm": "640px", "screens-lg": "1024px"}

    def test_idempotent(self, color_tokens: dict) -> None:
        """Repeated calls give identical output."""
        first = transform("palette", color_tokens, ["blue-light", "black"])
        second = transform("palette", color_tokens, ["blue-light", "black"])
        assert first == second
        assert repr(first) == repr(second)
