"""
RTL variant generator

Derives the right-to-left rendering of a resolved declaration set. A set
needs an RTL variant only when at least one declaration renders
differently in RTL: a logical property resolved to mirrored physical
names, a direction-relative keyword (`float: start`), or a value that is
itself directional (`linear-gradient(to right, ...)`, shadow offsets,
`e-resize` cursors, left/right background positions).
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..models.rules import Declaration, DeclarationSet, Direction
from .log import LOG
from .properties import PropertyResolver
from .values import DIMENSION_PATTERN, ZERO_PATTERN, components_split, important_strip


CURSOR_FLIPS: Mapping[str, str] = MappingProxyType({
    "e-resize": "w-resize",
    "w-resize": "e-resize",
    "ne-resize": "nw-resize",
    "nw-resize": "ne-resize",
    "se-resize": "sw-resize",
    "sw-resize": "se-resize",
    "nesw-resize": "nwse-resize",
    "nwse-resize": "nesw-resize",
})

SIDE_FLIPS: Mapping[str, str] = MappingProxyType({"left": "right", "right": "left"})

SHADOW_PROPERTIES = frozenset({"box-shadow", "text-shadow"})
POSITION_PROPERTIES = frozenset({"background-position", "background-position-x", "object-position"})

GRADIENT_PATTERN = re.compile(r"((?:repeating-)?linear-gradient\(\s*to\s+)([a-z\s]+?)(\s*,)", re.IGNORECASE)
WORD_PATTERN = re.compile(r"\b(left|right)\b", re.IGNORECASE)


def words_flip(text: str) -> str:
    """Swap every standalone `left`/`right` word"""
    return WORD_PATTERN.sub(lambda m: SIDE_FLIPS[m.group(1).lower()], text)


def offset_negate(component: str) -> str:
    if ZERO_PATTERN.match(component):
        return component
    if component.startswith("-"):
        return component[1:]
    return "-" + component.lstrip("+")


def shadow_flip(value: str) -> str:
    """Negate the horizontal offset of each comma-separated shadow"""
    shadows = []
    for shadow in components_split(value, ","):
        parts = components_split(shadow)
        lengths = [i for i, p in enumerate(parts) if DIMENSION_PATTERN.match(p) or ZERO_PATTERN.match(p)]
        if len(lengths) >= 2:
            parts[lengths[0]] = offset_negate(parts[lengths[0]])
        shadows.append(" ".join(parts))
    return ",".join(shadows)


def value_flip(property: str, value: str) -> str:
    """
    Mirror a directional value for right-to-left documents.

    Args:
        property: Physical property the value belongs to
        value: Canonical LTR value text

    Returns:
        RTL value text; identical to `value` when it is not directional
    """
    body, important = important_strip(value)
    if property in SHADOW_PROPERTIES:
        flipped = shadow_flip(body)
    elif property == "cursor":
        flipped = CURSOR_FLIPS.get(body.lower(), body)
    elif property in POSITION_PROPERTIES:
        flipped = words_flip(body)
    else:
        flipped = GRADIENT_PATTERN.sub(
            lambda m: m.group(1) + words_flip(m.group(2)) + m.group(3), body
        )
    if flipped == body:
        return value
    return f"{flipped} {important}" if important else flipped


def declaration_mirror(declaration: Declaration, resolver: PropertyResolver) -> Declaration:
    """Re-resolve one declaration with the RTL physical mapping"""
    property = resolver.physical_name(declaration.origin, Direction.RTL)
    value = resolver.logicalValue_resolve(property, declaration.originValue_get(), Direction.RTL)
    if resolver.settings.value_flipping:
        value = value_flip(property, value)
    return Declaration(
        property=property,
        value=value,
        origin=declaration.origin,
        origin_value=declaration.origin_value,
    )


def rtl_needs(declarations: DeclarationSet, resolver: Optional[PropertyResolver] = None) -> bool:
    """
    Check whether a resolved LTR set renders differently in RTL.

    Args:
        declarations: Resolved LTR declaration set
        resolver: Resolver whose settings produced the set

    Returns:
        True if any declaration's property or value changes when mirrored
    """
    resolver = resolver or PropertyResolver()
    for declaration in declarations:
        mirrored = declaration_mirror(declaration, resolver)
        if (mirrored.property, mirrored.value) != (declaration.property, declaration.value):
            LOG(f"Direction-sensitive: {declaration.property}:{declaration.value}", level=3)
            return True
    return False


def rtl_mirror(declarations: DeclarationSet, resolver: Optional[PropertyResolver] = None) -> DeclarationSet:
    """
    Build the RTL declaration set.

    The result has the same declaration count and order as the LTR set;
    only direction-sensitive entries differ.
    """
    resolver = resolver or PropertyResolver()
    mirrored = DeclarationSet(merge=False)
    for declaration in declarations:
        mirrored.add(declaration_mirror(declaration, resolver))
    return mirrored


def rtl_pair(
    declarations: DeclarationSet, resolver: Optional[PropertyResolver] = None
) -> Tuple[DeclarationSet, Optional[DeclarationSet]]:
    """Return the LTR set with its RTL mirror, or None when not needed"""
    resolver = resolver or PropertyResolver()
    if not rtl_needs(declarations, resolver):
        return declarations, None
    return declarations, rtl_mirror(declarations, resolver)
