"""
Property resolver tests

Tests shorthand expansion, logical-to-physical mapping and the
pass-through fallback for unknown properties.
"""

import pytest

from atomcss.config import AppSettings
from atomcss.lib.errors import UnknownPropertyError
from atomcss.lib.properties import PropertyResolver
from atomcss.models.properties import LOGICAL_PROPERTIES, SHORTHANDS
from atomcss.models.rules import Direction


@pytest.fixture
def logical():
    return PropertyResolver(AppSettings(style_resolution="logical"))


@pytest.fixture
def physical():
    return PropertyResolver(AppSettings(style_resolution="physical"))


class TestTables:
    """Test the static tables themselves"""

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            LOGICAL_PROPERTIES["start"] = None  # type: ignore[index]
        with pytest.raises(TypeError):
            SHORTHANDS["margin"] = None  # type: ignore[index]

    def test_inline_properties_mirror(self):
        assert LOGICAL_PROPERTIES["start"].mirrored_is()
        assert LOGICAL_PROPERTIES["margin-inline-end"].mirrored_is()

    def test_block_properties_do_not_mirror(self):
        assert not LOGICAL_PROPERTIES["margin-block-start"].mirrored_is()


class TestShorthandExpansion:
    """Test shorthand to longhand expansion"""

    def test_single_number_expands_to_four_sides(self, logical):
        declarations = logical.resolve("margin", 10)
        assert declarations.items() == [
            ("margin-top", "10px"),
            ("margin-right", "10px"),
            ("margin-bottom", "10px"),
            ("margin-left", "10px"),
        ]

    def test_zero_expands_with_units(self, logical):
        declarations = logical.resolve("padding", 0)
        assert [value for _, value in declarations.items()] == ["0px"] * 4

    def test_two_components(self, logical):
        declarations = logical.resolve("margin", "1px 2px")
        assert declarations.items() == [
            ("margin-top", "1px"),
            ("margin-right", "2px"),
            ("margin-bottom", "1px"),
            ("margin-left", "2px"),
        ]

    def test_three_components(self, logical):
        declarations = logical.resolve("padding", "1px 2px 3px")
        assert declarations.items() == [
            ("padding-top", "1px"),
            ("padding-right", "2px"),
            ("padding-bottom", "3px"),
            ("padding-left", "2px"),
        ]

    def test_four_components_with_function(self, logical):
        declarations = logical.resolve("margin", "1px calc(2px + 1em) 3px 4px")
        assert dict(declarations.items())["margin-right"] == "calc(2px + 1em)"
        assert dict(declarations.items())["margin-left"] == "4px"

    def test_important_applies_to_every_longhand(self, logical):
        declarations = logical.resolve("margin", "0 !important")
        assert all(value == "0 !important" for _, value in declarations.items())

    def test_border_radius_corners(self, logical):
        declarations = logical.resolve("borderRadius", "4px 8px")
        assert declarations.items() == [
            ("border-top-left-radius", "4px"),
            ("border-top-right-radius", "8px"),
            ("border-bottom-right-radius", "4px"),
            ("border-bottom-left-radius", "8px"),
        ]

    def test_slash_syntax_kept_unexpanded(self, logical):
        declarations = logical.resolve("borderRadius", "10px / 20px")
        assert declarations.items() == [("border-radius", "10px / 20px")]

    def test_too_many_components_kept_unexpanded(self, logical):
        declarations = logical.resolve("gap", "1px 2px 3px")
        assert declarations.items() == [("gap", "1px 2px 3px")]

    def test_pair_shorthand(self, logical):
        declarations = logical.resolve("gap", "8px 16px")
        assert declarations.items() == [("row-gap", "8px"), ("column-gap", "16px")]

    def test_overflow_keyword(self, logical):
        declarations = logical.resolve("overflow", "hidden")
        assert declarations.items() == [("overflow-x", "hidden"), ("overflow-y", "hidden")]


class TestLogicalResolution:
    """Test logical to physical mapping"""

    def test_start_is_agnostic_in_logical_mode(self, logical):
        declarations = logical.resolve("start", 0)
        assert declarations.items() == [("inset-inline-start", "0px")]

    def test_start_same_in_both_directions_in_logical_mode(self, logical):
        assert logical.physical_name("start", Direction.LTR) == "inset-inline-start"
        assert logical.physical_name("start", Direction.RTL) == "inset-inline-start"

    def test_start_is_left_in_physical_ltr(self, physical):
        declarations = physical.resolve("start", 10)
        assert declarations.items() == [("left", "10px")]

    def test_start_is_right_in_physical_rtl(self, physical):
        declarations = physical.resolve("start", 10, Direction.RTL)
        assert declarations.items() == [("right", "10px")]

    def test_margin_inline_expands_then_maps(self, physical):
        """Shorthand expansion runs before logical mapping"""
        declarations = physical.resolve("marginInline", "1px 2px")
        assert declarations.items() == [("margin-left", "1px"), ("margin-right", "2px")]

    def test_margin_inline_in_logical_mode(self, logical):
        declarations = logical.resolve("marginHorizontal", 4)
        assert declarations.items() == [
            ("margin-inline-start", "4px"),
            ("margin-inline-end", "4px"),
        ]

    def test_block_axis_in_physical_mode(self, physical):
        declarations = physical.resolve("paddingBlock", "1px 2px")
        assert declarations.items() == [("padding-top", "1px"), ("padding-bottom", "2px")]

    def test_origin_recorded(self, physical):
        declaration = list(physical.resolve("marginStart", 3))[0]
        assert declaration.property == "margin-left"
        assert declaration.origin == "margin-start"

    def test_float_start_logical(self, logical):
        assert logical.resolve("float", "start").items() == [("float", "inline-start")]

    def test_float_start_physical(self, physical):
        assert physical.resolve("float", "start").items() == [("float", "left")]
        assert physical.resolve("float", "end", Direction.RTL).items() == [("float", "left")]


class TestPassThrough:
    """Test the fallback for properties the tables do not cover"""

    def test_unknown_property_passes_through(self, logical):
        declarations = logical.resolve("fooBar", "baz")
        assert declarations.items() == [("foo-bar", "baz")]

    def test_plain_property(self, logical):
        assert logical.resolve("backgroundColor", "red").items() == [("background-color", "red")]

    def test_strict_rejects_unknown(self):
        resolver = PropertyResolver(AppSettings(strict_properties=True))
        with pytest.raises(UnknownPropertyError) as info:
            resolver.resolve("fooBar", "baz")
        assert info.value.property == "fooBar"

    def test_strict_accepts_known(self):
        resolver = PropertyResolver(AppSettings(strict_properties=True))
        assert resolver.resolve("color", "red").items() == [("color", "red")]
        assert resolver.resolve("--brand", "red").items() == [("--brand", "red")]


class TestStyleResolution:
    """Test resolving whole style objects"""

    def test_order_preserved(self, logical):
        declarations = logical.style_resolve({"color": "red", "opacity": 0.5, "width": 10})
        assert declarations.properties() == ["color", "opacity", "width"]

    def test_later_value_wins_in_first_position(self, logical):
        declarations = logical.style_resolve({"margin": 0, "color": "red", "marginTop": 4})
        assert len(declarations) == 5
        assert declarations.properties()[0] == "margin-top"
        assert dict(declarations.items())["margin-top"] == "4px"
