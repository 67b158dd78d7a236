"""
Value normalizer

Converts raw style values (numbers and strings) into canonical CSS value
text for a given physical property:

- bare numbers on length properties get `px` (zero included: `0px`)
- bare numbers on time properties are milliseconds; durations of 10ms and
  up render in seconds (`500` and `"500ms"` both become `0.5s`)
- bare numbers on unitless properties (opacity, z-index, ...) stay bare
- strings are trimmed and whitespace-collapsed, otherwise passed through

Example:
    >>> value_normalize("margin-top", 0)
    '0px'
    >>> value_normalize("opacity", 0.5)
    '0.5'
"""

import math
import re
from typing import Any, List

from ..models.properties import (
    GLOBAL_KEYWORDS,
    GRID_LINE_PROPERTIES,
    LENGTH_KEYWORDS,
    LENGTH_PROPERTIES,
    PROPERTY_LIST_PROPERTIES,
    TIME_PROPERTIES,
    UNITLESS_PROPERTIES,
    UNITLESS_KEYWORDS,
)
from .errors import UnsupportedValueError
from .log import LOG


DIMENSION_PATTERN = re.compile(
    r"^[+-]?(\d+\.?\d*|\.\d+)(e[+-]?\d+)?"
    r"(px|em|rem|%|vh|vw|vmin|vmax|svh|lvh|dvh|svw|lvw|dvw|ch|ex|cap|ic|lh|rlh"
    r"|cm|mm|q|in|pt|pc|fr|cqw|cqh|cqi|cqb|cqmin|cqmax)$",
    re.IGNORECASE,
)
TIME_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)(ms|s)$", re.IGNORECASE)
TIME_TOKEN_PATTERN = re.compile(r"(?<![\w.-])([+-]?(?:\d+\.?\d*|\.\d+))(ms|s)\b", re.IGNORECASE)
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)(e[+-]?\d+)?$", re.IGNORECASE)
ZERO_PATTERN = re.compile(r"^[+-]?0*\.?0+$")
FUNCTION_PATTERN = re.compile(r"^-?[a-zA-Z-]+\(.*\)$", re.DOTALL)
CAMEL_PATTERN = re.compile(r"(^|[a-z])([A-Z])")
WHITESPACE_PATTERN = re.compile(r"\s+")

CONTENT_KEYWORDS = frozenset({
    "normal", "none", "open-quote", "close-quote", "no-open-quote", "no-close-quote",
}) | GLOBAL_KEYWORDS


def dashify(name: str) -> str:
    """
    Convert a camelCase style key to its dashed CSS property name.

    Custom properties and already-dashed names pass through unchanged.
    Vendor prefixes gain their leading dash (`msTransition` ->
    `-ms-transition`, `WebkitAppearance` -> `-webkit-appearance`).

    Args:
        name: Input property key

    Returns:
        Dashed property name
    """
    if name.startswith("--"):
        return name
    dashed = CAMEL_PATTERN.sub(r"\1-\2", name).lower()
    if dashed.startswith("ms-"):
        dashed = "-" + dashed
    return dashed


def number_format(value: float) -> str:
    """
    Render a finite number as canonical CSS number text.

    Values are rounded to four decimal places; integral values drop the
    fractional part so `1.0` and `1` render identically.
    """
    rounded = round(value, 4)
    if float(rounded).is_integer():
        return str(int(rounded))
    return repr(float(rounded))


def components_split(value: str, separators: str = " ") -> List[str]:
    """
    Split a value on separators that are outside parentheses and quotes.

    Args:
        value: CSS value text
        separators: Characters to split on

    Returns:
        Non-empty components in order

    Example:
        >>> components_split("1px calc(2px + 3px)")
        ['1px', 'calc(2px + 3px)']
    """
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    quote = ""
    for char in value:
        if quote:
            current.append(char)
            if char == quote:
                quote = ""
            continue
        if char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif depth == 0 and char in separators:
            if current:
                parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    if current and "".join(current).strip():
        parts.append("".join(current).strip())
    return [part for part in parts if part]


def terminator_find(value: str) -> int:
    """
    Locate a character that would end the declaration early.

    An unclosed quote or parenthesis would carry the rest of the
    stylesheet into the value, so it counts as a terminator too.

    Returns:
        Index of the first `;`, `{` or `}` outside quotes and parentheses,
        the index of the unclosed quote or outermost unclosed parenthesis,
        or -1 if the value is safe to emit
    """
    openings: List[int] = []
    quote = ""
    quote_index = -1
    escaped = False
    for index, char in enumerate(value):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif quote:
            if char == quote:
                quote = ""
        elif char in "\"'":
            quote = char
            quote_index = index
        elif char == "(":
            openings.append(index)
        elif char == ")":
            if openings:
                openings.pop()
        elif not openings and char in ";{}":
            return index
    if quote:
        return quote_index
    if openings:
        return openings[0]
    return -1


def lengthComponent_valid(component: str) -> bool:
    lowered = component.lower()
    return bool(
        DIMENSION_PATTERN.match(component)
        or ZERO_PATTERN.match(component)
        or FUNCTION_PATTERN.match(component)
        or lowered in LENGTH_KEYWORDS
        or lowered in GLOBAL_KEYWORDS
    )


def timeComponent_valid(component: str) -> bool:
    return bool(
        TIME_PATTERN.match(component)
        or FUNCTION_PATTERN.match(component)
        or component.lower() in GLOBAL_KEYWORDS
    )



def numberComponent_valid(component: str) -> bool:
    lowered = component.lower()
    return bool(
        NUMBER_PATTERN.match(component)
        or DIMENSION_PATTERN.match(component)
        or FUNCTION_PATTERN.match(component)
        or lowered in UNITLESS_KEYWORDS
        or lowered in LENGTH_KEYWORDS
        or lowered in GLOBAL_KEYWORDS
    )


def time_format(milliseconds: float) -> str:
    """
    Render a duration in its canonical unit.

    Durations of 10ms and up are written in seconds, shorter ones in
    milliseconds, and zero as `0s`, so every spelling of one duration
    hashes the same.

    Example:
        >>> time_format(500)
        '0.5s'
        >>> time_format(5)
        '5ms'
    """
    if milliseconds == 0:
        return "0s"
    if abs(milliseconds) >= 10:
        return f"{number_format(milliseconds / 1000)}s"
    return f"{number_format(milliseconds)}ms"


def times_canonicalize(text: str) -> str:
    """Rewrite every `<number>ms` / `<number>s` token with time_format"""
    def token_convert(match: re.Match) -> str:
        milliseconds = float(match.group(1))
        if match.group(2).lower() == "s":
            milliseconds *= 1000
        return time_format(milliseconds)

    return TIME_TOKEN_PATTERN.sub(token_convert, text)


def important_strip(value: str) -> tuple[str, str]:
    """Separate a trailing `!important` from the value body"""
    match = re.search(r"\s*!\s*important$", value, re.IGNORECASE)
    if match is None:
        return value, ""
    return value[: match.start()], "!important"


def number_normalize(property: str, value: Any, strict: bool = False) -> str:
    """Render a numeric value, injecting the property's default unit"""
    if isinstance(value, bool):
        raise UnsupportedValueError("Boolean is not a CSS value", property=property, fragment=value)
    if not math.isfinite(value):
        raise UnsupportedValueError("Numeric value must be finite", property=property, fragment=value)

    text = number_format(value)
    if property in UNITLESS_PROPERTIES:
        return text
    if property in TIME_PROPERTIES:
        return time_format(value)
    if property in LENGTH_PROPERTIES:
        return f"{text}px"

    if strict and not property.startswith("--"):
        raise UnsupportedValueError(
            "Number given for a property that takes no numeric value",
            property=property,
            fragment=value,
        )
    LOG(f"No unit rule for '{property}', emitting bare number {text}", level=3)
    return text


def string_normalize(property: str, value: str, strict: bool = False) -> str:
    """Canonicalize a string value for emission"""
    text = WHITESPACE_PATTERN.sub(" ", value.strip())
    if not text:
        raise UnsupportedValueError("Empty string value", property=property, fragment=value)
    body, important = important_strip(text)

    if property in PROPERTY_LIST_PROPERTIES:
        body = ",".join(dashify(item) for item in components_split(body, ","))
    elif property == "content":
        if (
            body.lower() not in CONTENT_KEYWORDS
            and body[0] not in "\"'"
            and not FUNCTION_PATTERN.match(body)
        ):
            body = '"' + body.replace('"', '\\"') + '"'
    elif property in TIME_PROPERTIES:
        body = times_canonicalize(body)

    if terminator_find(body) >= 0:
        raise UnsupportedValueError(
            "Value would terminate the declaration", property=property, fragment=value
        )

    if strict and not property.startswith("--"):
        if property in LENGTH_PROPERTIES:
            checker = lengthComponent_valid
        elif property in TIME_PROPERTIES:
            checker = timeComponent_valid
        elif property in UNITLESS_PROPERTIES and property not in GRID_LINE_PROPERTIES:
            checker = numberComponent_valid
        else:
            checker = None
        if checker is not None:
            bad = [c for c in components_split(body, " /,") if not checker(c)]
            if bad:
                raise UnsupportedValueError(
                    f"'{bad[0]}' is not a valid value here", property=property, fragment=value
                )

    return f"{body} {important}" if important else body


def value_normalize(property: str, value: Any, strict: bool = False) -> str:
    """
    Convert a raw style value into canonical CSS value text.

    Args:
        property: Physical CSS property name the value is assigned to
        value: Raw scalar (int, float or str)
        strict: Validate the value against the property's domain

    Returns:
        Canonical value text, e.g. "500px", "0.5", "red"

    Raises:
        UnsupportedValueError: Non-scalar, boolean, non-finite, empty or
            declaration-terminating values; domain mismatches in strict mode
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return number_normalize(property, value, strict)
    if isinstance(value, str):
        return string_normalize(property, value, strict)
    raise UnsupportedValueError(
        f"Unsupported value type {type(value).__name__}", property=property, fragment=value
    )
