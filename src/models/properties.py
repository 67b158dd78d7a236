"""
Property lookup tables

Static, immutable lookup tables driving property resolution and value
normalization. New properties are supported by adding rows here; the
resolver never branches on property names.

All keys are dashed CSS names (camelCase input keys are dashified first).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from .rules import Direction


@dataclass(frozen=True)
class LogicalProperty:
    """
    Direction-relative property and its renderings

    Attributes:
        agnostic: CSS logical property name, valid in both directions
        ltr: Physical name for left-to-right documents
        rtl: Physical name for right-to-left documents

    Example:
        LogicalProperty("inset-inline-start", "left", "right")
    """
    agnostic: str
    ltr: str
    rtl: str

    def physical_get(self, direction: Direction) -> str:
        return self.ltr if direction is Direction.LTR else self.rtl

    def mirrored_is(self) -> bool:
        """True when the two physical renderings differ"""
        return self.ltr != self.rtl


@dataclass(frozen=True)
class Shorthand:
    """
    Shorthand property and the longhands it expands into

    Attributes:
        longhands: Longhand names in CSS component order
                   (top, right, bottom, left for box shorthands;
                   start, end for pair shorthands)
        kind: "box" (1-4 components) or "pair" (1-2 components)
    """
    longhands: Tuple[str, ...]
    kind: str = "box"


def _logical(agnostic: str, ltr: str, rtl: str) -> LogicalProperty:
    return LogicalProperty(agnostic, ltr, rtl)


def _sides(prefix: str, suffix: str = "") -> Tuple[str, ...]:
    return tuple(f"{prefix}{side}{suffix}" for side in ("top", "right", "bottom", "left"))


LOGICAL_PROPERTIES: Mapping[str, LogicalProperty] = MappingProxyType({
    # Inline axis - mirrored between directions
    "start": _logical("inset-inline-start", "left", "right"),
    "end": _logical("inset-inline-end", "right", "left"),
    "inset-inline-start": _logical("inset-inline-start", "left", "right"),
    "inset-inline-end": _logical("inset-inline-end", "right", "left"),
    "margin-start": _logical("margin-inline-start", "margin-left", "margin-right"),
    "margin-end": _logical("margin-inline-end", "margin-right", "margin-left"),
    "margin-inline-start": _logical("margin-inline-start", "margin-left", "margin-right"),
    "margin-inline-end": _logical("margin-inline-end", "margin-right", "margin-left"),
    "padding-start": _logical("padding-inline-start", "padding-left", "padding-right"),
    "padding-end": _logical("padding-inline-end", "padding-right", "padding-left"),
    "padding-inline-start": _logical("padding-inline-start", "padding-left", "padding-right"),
    "padding-inline-end": _logical("padding-inline-end", "padding-right", "padding-left"),
    "border-start-width": _logical("border-inline-start-width", "border-left-width", "border-right-width"),
    "border-end-width": _logical("border-inline-end-width", "border-right-width", "border-left-width"),
    "border-start-style": _logical("border-inline-start-style", "border-left-style", "border-right-style"),
    "border-end-style": _logical("border-inline-end-style", "border-right-style", "border-left-style"),
    "border-start-color": _logical("border-inline-start-color", "border-left-color", "border-right-color"),
    "border-end-color": _logical("border-inline-end-color", "border-right-color", "border-left-color"),
    "border-inline-start-width": _logical("border-inline-start-width", "border-left-width", "border-right-width"),
    "border-inline-end-width": _logical("border-inline-end-width", "border-right-width", "border-left-width"),
    "border-inline-start-style": _logical("border-inline-start-style", "border-left-style", "border-right-style"),
    "border-inline-end-style": _logical("border-inline-end-style", "border-right-style", "border-left-style"),
    "border-inline-start-color": _logical("border-inline-start-color", "border-left-color", "border-right-color"),
    "border-inline-end-color": _logical("border-inline-end-color", "border-right-color", "border-left-color"),
    "border-start-start-radius": _logical(
        "border-start-start-radius", "border-top-left-radius", "border-top-right-radius"),
    "border-start-end-radius": _logical(
        "border-start-end-radius", "border-top-right-radius", "border-top-left-radius"),
    "border-end-start-radius": _logical(
        "border-end-start-radius", "border-bottom-left-radius", "border-bottom-right-radius"),
    "border-end-end-radius": _logical(
        "border-end-end-radius", "border-bottom-right-radius", "border-bottom-left-radius"),
    # Block axis - same physical side in both directions
    "inset-block-start": _logical("inset-block-start", "top", "top"),
    "inset-block-end": _logical("inset-block-end", "bottom", "bottom"),
    "margin-block-start": _logical("margin-block-start", "margin-top", "margin-top"),
    "margin-block-end": _logical("margin-block-end", "margin-bottom", "margin-bottom"),
    "padding-block-start": _logical("padding-block-start", "padding-top", "padding-top"),
    "padding-block-end": _logical("padding-block-end", "padding-bottom", "padding-bottom"),
})


SHORTHANDS: Mapping[str, Shorthand] = MappingProxyType({
    "margin": Shorthand(_sides("margin-")),
    "padding": Shorthand(_sides("padding-")),
    "inset": Shorthand(_sides("")),
    "border-width": Shorthand(_sides("border-", "-width")),
    "border-style": Shorthand(_sides("border-", "-style")),
    "border-color": Shorthand(_sides("border-", "-color")),
    "border-radius": Shorthand((
        "border-top-left-radius",
        "border-top-right-radius",
        "border-bottom-right-radius",
        "border-bottom-left-radius",
    )),
    "margin-inline": Shorthand(("margin-inline-start", "margin-inline-end"), "pair"),
    "margin-block": Shorthand(("margin-block-start", "margin-block-end"), "pair"),
    "margin-horizontal": Shorthand(("margin-inline-start", "margin-inline-end"), "pair"),
    "margin-vertical": Shorthand(("margin-block-start", "margin-block-end"), "pair"),
    "padding-inline": Shorthand(("padding-inline-start", "padding-inline-end"), "pair"),
    "padding-block": Shorthand(("padding-block-start", "padding-block-end"), "pair"),
    "padding-horizontal": Shorthand(("padding-inline-start", "padding-inline-end"), "pair"),
    "padding-vertical": Shorthand(("padding-block-start", "padding-block-end"), "pair"),
    "inset-inline": Shorthand(("inset-inline-start", "inset-inline-end"), "pair"),
    "inset-block": Shorthand(("inset-block-start", "inset-block-end"), "pair"),
    "gap": Shorthand(("row-gap", "column-gap"), "pair"),
    "overflow": Shorthand(("overflow-x", "overflow-y"), "pair"),
})


# Component index used for each longhand, keyed by number of components given
BOX_COMPONENTS: Mapping[int, Tuple[int, ...]] = MappingProxyType({
    1: (0, 0, 0, 0),
    2: (0, 1, 0, 1),
    3: (0, 1, 2, 1),
    4: (0, 1, 2, 3),
})

PAIR_COMPONENTS: Mapping[int, Tuple[int, ...]] = MappingProxyType({
    1: (0, 0),
    2: (0, 1),
})


def _with_logical(*names: str) -> FrozenSet[str]:
    """Expand side/axis wildcards into full property names"""
    expanded = set()
    for name in names:
        if "{side}" in name:
            for side in ("top", "right", "bottom", "left", "inline-start", "inline-end",
                         "block-start", "block-end", "inline", "block", "start", "end"):
                expanded.add(name.replace("{side}", side))
        else:
            expanded.add(name)
    return frozenset(expanded)


LENGTH_PROPERTIES: FrozenSet[str] = _with_logical(
    "width", "height", "min-width", "min-height", "max-width", "max-height",
    "inline-size", "block-size", "min-inline-size", "min-block-size",
    "max-inline-size", "max-block-size",
    "margin", "margin-{side}", "padding", "padding-{side}",
    "top", "right", "bottom", "left", "inset", "inset-{side}",
    "border-width", "border-{side}-width", "border-radius",
    "border-top-left-radius", "border-top-right-radius",
    "border-bottom-left-radius", "border-bottom-right-radius",
    "border-start-start-radius", "border-start-end-radius",
    "border-end-start-radius", "border-end-end-radius",
    "border-spacing", "outline-width", "outline-offset",
    "font-size", "letter-spacing", "word-spacing", "text-indent",
    "gap", "row-gap", "column-gap", "column-width", "column-rule-width",
    "flex-basis", "perspective", "translate",
    "scroll-margin", "scroll-margin-{side}", "scroll-padding", "scroll-padding-{side}",
    "text-underline-offset", "text-decoration-thickness",
)

UNITLESS_PROPERTIES: FrozenSet[str] = frozenset({
    "animation-iteration-count", "aspect-ratio", "border-image-outset",
    "border-image-slice", "border-image-width", "column-count", "columns",
    "fill-opacity", "flex", "flex-grow", "flex-shrink", "flood-opacity",
    "font-size-adjust", "font-weight", "grid-area", "grid-column",
    "grid-column-end", "grid-column-start", "grid-row", "grid-row-end",
    "grid-row-start", "initial-letter", "line-clamp", "line-height",
    "math-depth", "opacity", "order", "orphans", "scale", "stop-opacity",
    "stroke-dasharray", "stroke-dashoffset", "stroke-miterlimit",
    "stroke-opacity", "stroke-width", "tab-size", "widows", "z-index", "zoom",
})

TIME_PROPERTIES: FrozenSet[str] = frozenset({
    "animation-delay", "animation-duration", "transition-delay", "transition-duration",
})

# Properties whose values list other property names
PROPERTY_LIST_PROPERTIES: FrozenSet[str] = frozenset({"transition-property", "will-change"})

# Properties that reference a compiled keyframes identifier
ANIMATION_NAME_PROPERTIES: FrozenSet[str] = frozenset({"animation", "animation-name"})

# Recognised plain properties with no special resolution or unit handling
PLAIN_PROPERTIES: FrozenSet[str] = frozenset({
    "align-content", "align-items", "align-self", "animation",
    "animation-direction", "animation-fill-mode", "animation-name",
    "animation-play-state", "animation-timing-function", "appearance",
    "backdrop-filter", "backface-visibility", "background", "background-attachment",
    "background-blend-mode", "background-clip", "background-color", "background-image",
    "background-origin", "background-position", "background-repeat", "background-size",
    "border", "border-bottom", "border-bottom-color", "border-bottom-style",
    "border-collapse", "border-left", "border-left-color", "border-left-style",
    "border-right", "border-right-color", "border-right-style", "border-top",
    "border-top-color", "border-top-style", "box-shadow", "box-sizing",
    "caret-color", "clear", "clip-path", "color", "color-scheme", "contain",
    "container", "container-name", "container-type", "content", "cursor",
    "direction", "display", "fill", "filter", "flex-direction", "flex-flow",
    "flex-wrap", "float", "font", "font-family", "font-feature-settings",
    "font-style", "font-variant", "font-variant-numeric", "grid",
    "grid-auto-columns", "grid-auto-flow", "grid-auto-rows", "grid-template",
    "grid-template-areas", "grid-template-columns", "grid-template-rows",
    "hyphens", "isolation", "justify-content", "justify-items", "justify-self",
    "list-style", "list-style-position", "list-style-type", "mask", "mask-image",
    "mix-blend-mode", "object-fit", "object-position", "outline", "outline-color",
    "outline-style", "overflow-wrap", "overflow-x", "overflow-y",
    "overscroll-behavior", "place-content", "place-items", "place-self",
    "pointer-events", "position", "resize", "rotate", "scroll-behavior",
    "scroll-snap-align", "scroll-snap-type", "stroke", "table-layout",
    "text-align", "text-decoration", "text-decoration-color",
    "text-decoration-line", "text-decoration-style", "text-overflow",
    "text-shadow", "text-transform", "touch-action", "transform",
    "transform-origin", "transform-style", "transition",
    "transition-property", "transition-timing-function", "user-select",
    "vertical-align", "visibility", "white-space", "will-change", "word-break",
})

# Values accepted by strict validation for any property
GLOBAL_KEYWORDS: FrozenSet[str] = frozenset({
    "inherit", "initial", "unset", "revert", "revert-layer",
})

LENGTH_KEYWORDS: FrozenSet[str] = frozenset({
    "auto", "none", "normal", "min-content", "max-content", "fit-content",
    "thin", "medium", "thick",
})

# Keywords accepted by strict validation on unitless properties
UNITLESS_KEYWORDS: FrozenSet[str] = frozenset({
    "bold", "bolder", "lighter", "infinite", "span",
})

# Unitless properties whose values may also name grid lines and areas
GRID_LINE_PROPERTIES: FrozenSet[str] = frozenset({
    "grid-area", "grid-column", "grid-column-end", "grid-column-start",
    "grid-row", "grid-row-end", "grid-row-start",
})

# Keyword values that are themselves direction-relative (float, clear)
LOGICAL_VALUE_PROPERTIES: FrozenSet[str] = frozenset({"float", "clear"})

LOGICAL_VALUES: Mapping[str, LogicalProperty] = MappingProxyType({
    "start": _logical("inline-start", "left", "right"),
    "end": _logical("inline-end", "right", "left"),
    "inline-start": _logical("inline-start", "left", "right"),
    "inline-end": _logical("inline-end", "right", "left"),
})


def known_is(property: str) -> bool:
    """Check if a dashed property name appears in any resolver table"""
    return (
        property.startswith("--")
        or property in LOGICAL_PROPERTIES
        or property in SHORTHANDS
        or property in LENGTH_PROPERTIES
        or property in UNITLESS_PROPERTIES
        or property in TIME_PROPERTIES
        or property in PLAIN_PROPERTIES
    )
