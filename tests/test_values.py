"""
Value normalizer tests

Tests unit injection, number formatting, string canonicalization and
value validation.
"""

import math

import pytest

from atomcss.lib.errors import UnsupportedValueError
from atomcss.lib.values import (
    components_split,
    dashify,
    number_format,
    terminator_find,
    time_format,
    value_normalize,
)


class TestDashify:
    """Test key to property-name conversion"""

    def test_camel_case(self):
        assert dashify("backgroundColor") == "background-color"

    def test_already_dashed(self):
        assert dashify("background-color") == "background-color"

    def test_single_word(self):
        assert dashify("start") == "start"

    def test_custom_property_untouched(self):
        assert dashify("--brandColor") == "--brandColor"

    def test_vendor_prefixes(self):
        assert dashify("WebkitAppearance") == "-webkit-appearance"
        assert dashify("msTransform") == "-ms-transform"


class TestNumberFormat:
    """Test numeric rendering"""

    def test_integer(self):
        assert number_format(500) == "500"

    def test_integral_float(self):
        """1.0 and 1 render identically"""
        assert number_format(1.0) == "1"

    def test_fraction(self):
        assert number_format(0.5) == "0.5"

    def test_rounding_to_four_places(self):
        assert number_format(1 / 3) == "0.3333"

    def test_negative(self):
        assert number_format(-12) == "-12"

    def test_negative_zero(self):
        assert number_format(-0.0) == "0"


class TestUnitInjection:
    """Test numeric values per property family"""

    def test_length_gets_px(self):
        assert value_normalize("width", 100) == "100px"

    def test_zero_length_keeps_unit(self):
        """Zero is not special-cased"""
        assert value_normalize("margin-top", 0) == "0px"

    def test_logical_length_gets_px(self):
        assert value_normalize("inset-inline-start", 500) == "500px"

    def test_unitless_stays_bare(self):
        assert value_normalize("opacity", 0.5) == "0.5"
        assert value_normalize("z-index", 10) == "10"
        assert value_normalize("line-height", 1.5) == "1.5"

    def test_time_in_seconds(self):
        """Bare numbers are milliseconds, written in seconds from 10ms up"""
        assert value_normalize("transition-duration", 300) == "0.3s"

    def test_short_time_stays_ms(self):
        assert value_normalize("animation-delay", 5) == "5ms"

    def test_unknown_property_bare_number(self):
        """Numbers on unfamiliar properties pass through"""
        assert value_normalize("some-new-property", 3) == "3"

    def test_custom_property_bare_number(self):
        assert value_normalize("--gutter", 8) == "8"


class TestTimeValues:
    """Test canonical durations"""

    def test_format(self):
        assert time_format(500) == "0.5s"
        assert time_format(10) == "0.01s"
        assert time_format(9.5) == "9.5ms"
        assert time_format(0) == "0s"

    def test_spellings_of_one_duration_agree(self):
        """500, 500ms and .5s normalize to the same text"""
        expected = value_normalize("transition-duration", 500)
        assert value_normalize("transition-duration", "500ms") == expected
        assert value_normalize("transition-duration", ".5s") == expected
        assert value_normalize("transition-duration", "0.5s") == expected

    def test_zero_and_negative(self):
        assert value_normalize("animation-delay", "0ms") == "0s"
        assert value_normalize("animation-delay", "-250ms") == "-0.25s"

    def test_list(self):
        assert value_normalize("transition-duration", "150ms, 2s") == "0.15s, 2s"

    def test_other_properties_untouched(self):
        assert value_normalize("transition", "opacity 500ms ease") == "opacity 500ms ease"


class TestStringValues:
    """Test string canonicalization"""

    def test_passthrough(self):
        assert value_normalize("color", "red") == "red"

    def test_trim_and_collapse(self):
        assert value_normalize("margin", "  1px    2px ") == "1px 2px"

    def test_important_preserved(self):
        assert value_normalize("color", "red   !important") == "red !important"

    def test_property_lists_dashified(self):
        assert value_normalize("transition-property", "opacity, marginTop") == "opacity,margin-top"
        assert value_normalize("will-change", "transform") == "transform"

    def test_content_quoted(self):
        assert value_normalize("content", "hello") == '"hello"'

    def test_content_with_apostrophe_quoted(self):
        assert value_normalize("content", "it's") == '"it\'s"'

    def test_content_already_quoted(self):
        assert value_normalize("content", "'hi'") == "'hi'"

    def test_content_keyword_and_function(self):
        assert value_normalize("content", "none") == "none"
        assert value_normalize("content", "attr(title)") == "attr(title)"

    def test_semicolon_inside_function_allowed(self):
        value = "url(data:image/png;base64,AAAA)"
        assert value_normalize("background-image", value) == value


class TestRejectedValues:
    """Test values rejected regardless of strict mode"""

    def test_empty_string(self):
        with pytest.raises(UnsupportedValueError, match="Empty string"):
            value_normalize("color", "   ")

    def test_declaration_terminator(self):
        with pytest.raises(UnsupportedValueError, match="terminate"):
            value_normalize("color", "red;} body{color:blue")

    def test_unclosed_parenthesis(self):
        """An unclosed function would swallow the rules that follow"""
        with pytest.raises(UnsupportedValueError, match="terminate"):
            value_normalize("background-image", "url(a}")

    def test_unclosed_quote(self):
        with pytest.raises(UnsupportedValueError, match="terminate"):
            value_normalize("content", "'a;b")

    def test_non_finite_number(self):
        with pytest.raises(UnsupportedValueError, match="finite"):
            value_normalize("width", math.inf)
        with pytest.raises(UnsupportedValueError):
            value_normalize("width", math.nan)

    def test_boolean(self):
        with pytest.raises(UnsupportedValueError):
            value_normalize("opacity", True)

    def test_list(self):
        with pytest.raises(UnsupportedValueError, match="list"):
            value_normalize("color", ["red", "blue"])

    def test_error_identifies_property(self):
        """Error carries the offending property and fragment"""
        with pytest.raises(UnsupportedValueError) as info:
            value_normalize("color", "")
        assert info.value.property == "color"
        assert info.value.fragment == ""


class TestStrictValues:
    """Test domain validation under strict mode"""

    def test_number_on_non_numeric_property(self):
        with pytest.raises(UnsupportedValueError):
            value_normalize("color", 5, strict=True)

    def test_word_on_length_property(self):
        with pytest.raises(UnsupportedValueError, match="wide"):
            value_normalize("width", "wide", strict=True)

    def test_valid_lengths_accepted(self):
        assert value_normalize("width", "calc(100% - 10px)", strict=True) == "calc(100% - 10px)"
        assert value_normalize("margin", "0 auto", strict=True) == "0 auto"
        assert value_normalize("width", "50%", strict=True) == "50%"
        assert value_normalize("width", "inherit", strict=True) == "inherit"

    def test_word_on_unitless_property(self):
        with pytest.raises(UnsupportedValueError, match="banana"):
            value_normalize("opacity", "banana", strict=True)

    def test_valid_unitless_values(self):
        assert value_normalize("opacity", "0.5", strict=True) == "0.5"
        assert value_normalize("font-weight", "bold", strict=True) == "bold"
        assert value_normalize("line-height", "1.5em", strict=True) == "1.5em"
        assert value_normalize("flex", "1 1 auto", strict=True) == "1 1 auto"
        assert value_normalize("z-index", "var(--layer)", strict=True) == "var(--layer)"

    def test_grid_lines_accept_names(self):
        assert value_normalize("grid-area", "main", strict=True) == "main"

    def test_invalid_time(self):
        with pytest.raises(UnsupportedValueError):
            value_normalize("transition-duration", "fast", strict=True)

    def test_valid_time(self):
        assert value_normalize("transition-duration", "0.3s", strict=True) == "0.3s"

    def test_non_strict_passes_through(self):
        """Without strict mode the raw text is kept"""
        assert value_normalize("width", "wide") == "wide"
        assert value_normalize("opacity", "banana") == "banana"


class TestHelpers:
    """Test splitting helpers"""

    def test_split_respects_parentheses(self):
        assert components_split("1px calc(2px + 3px)") == ["1px", "calc(2px + 3px)"]

    def test_split_on_commas(self):
        assert components_split("a, rgb(1, 2, 3), b", ",") == ["a", "rgb(1, 2, 3)", "b"]

    def test_terminator_in_quotes_ignored(self):
        assert terminator_find('"a;b"') == -1

    def test_terminator_found(self):
        assert terminator_find("red;") == 3

    def test_unclosed_openings_located(self):
        assert terminator_find("url(a") == 3
        assert terminator_find("a 'b") == 2
        assert terminator_find("calc(1px + (2px)") == 4
