"""
Property resolver

Maps each input property key to one or more physical CSS declarations:

1. dashify the key (`backgroundColor` -> `background-color`)
2. expand shorthands into longhands (`margin` -> four sides)
3. map logical longhands to physical names for the requested direction
4. normalize each value against its final physical property

Keys found in no table pass through unchanged, so unfamiliar properties
still compile.
"""

from typing import Any, List, Optional, Tuple

from ..config import AppSettings, appsettings
from ..models.properties import (
    BOX_COMPONENTS,
    LOGICAL_PROPERTIES,
    LOGICAL_VALUE_PROPERTIES,
    LOGICAL_VALUES,
    PAIR_COMPONENTS,
    SHORTHANDS,
    known_is,
)
from ..models.rules import Declaration, DeclarationSet, Direction
from .errors import UnknownPropertyError
from .log import LOG
from .values import components_split, dashify, important_strip, value_normalize


class PropertyResolver:
    """
    Resolves style keys into physical declarations

    A resolver is configured once from settings and holds no per-call state,
    so one instance can serve any number of compilations.
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        """
        Initialize resolver

        Args:
            settings: Compiler settings; defaults to the global appsettings
        """
        self.settings = settings or appsettings
        self.physical = self.settings.physical_is()

    def shorthand_expand(self, property: str, value: Any) -> List[Tuple[str, Any]]:
        """
        Expand a dashed shorthand into `(longhand, value)` pairs.

        Numbers are copied to every longhand. Strings are split on top-level
        whitespace and distributed in CSS component order. Values that cannot
        be distributed (slash syntax, too many components) keep the shorthand.

        Example:
            >>> PropertyResolver().shorthand_expand("margin", "1px 2px")
            [('margin-top', '1px'), ('margin-right', '2px'),
             ('margin-bottom', '1px'), ('margin-left', '2px')]
        """
        shorthand = SHORTHANDS.get(property)
        if shorthand is None:
            return [(property, value)]

        if not isinstance(value, str):
            return [(longhand, value) for longhand in shorthand.longhands]

        body, important = important_strip(value.strip())
        components = components_split(body)
        layout = (BOX_COMPONENTS if shorthand.kind == "box" else PAIR_COMPONENTS).get(len(components))
        if layout is None or "/" in body:
            LOG(f"Keeping '{property}: {value}' unexpanded", level=3)
            return [(property, value)]

        suffix = f" {important}" if important else ""
        return [
            (longhand, components[index] + suffix)
            for longhand, index in zip(shorthand.longhands, layout)
        ]

    def physical_name(self, longhand: str, direction: Direction = Direction.LTR) -> str:
        """
        Map a longhand to the property name emitted for a direction.

        In logical resolution the CSS logical name is returned for both
        directions; in physical resolution the left/right name is returned.
        """
        logical = LOGICAL_PROPERTIES.get(longhand)
        if logical is None:
            return longhand
        if not self.physical:
            return logical.agnostic
        return logical.physical_get(direction)

    def logicalValue_resolve(
        self, property: str, value: str, direction: Direction = Direction.LTR
    ) -> str:
        """Map direction-relative keywords (`float: start`) for a direction"""
        if property not in LOGICAL_VALUE_PROPERTIES:
            return value
        body, important = important_strip(value)
        logical = LOGICAL_VALUES.get(body.lower())
        if logical is None:
            return value
        mapped = logical.physical_get(direction) if self.physical else logical.agnostic
        return f"{mapped} {important}" if important else mapped

    def resolve(
        self, property: str, value: Any, direction: Direction = Direction.LTR
    ) -> DeclarationSet:
        """
        Resolve one input property into a declaration set fragment.

        Args:
            property: Input key, camelCase or dashed
            value: Raw style value
            direction: Direction whose physical names are used

        Returns:
            DeclarationSet with one declaration per resulting physical property

        Raises:
            UnknownPropertyError: Property is in no table and strict
                properties are enabled
            UnsupportedValueError: Value rejected by normalization
        """
        dashed = dashify(property)
        if self.settings.strict_properties and not known_is(dashed):
            raise UnknownPropertyError("Unknown property", property=property, fragment=value)

        fragment = DeclarationSet()
        for longhand, longhand_value in self.shorthand_expand(dashed, value):
            physical = self.physical_name(longhand, direction)
            normalized = value_normalize(physical, longhand_value, self.settings.strict_values)
            mapped = self.logicalValue_resolve(physical, normalized, direction)
            fragment.add(Declaration(
                property=physical,
                value=mapped,
                origin=longhand,
                origin_value=normalized if mapped != normalized else None,
            ))
            LOG(f"{property} -> {physical}:{mapped}", level=3)
        return fragment

    def style_resolve(
        self, style: Any, direction: Direction = Direction.LTR
    ) -> DeclarationSet:
        """
        Resolve a flat style mapping into one declaration set.

        Later inputs resolving to an already-present physical property
        override its value in place.
        """
        declarations = DeclarationSet()
        for property, value in style.items():
            declarations.extend(self.resolve(property, value, direction))
        return declarations
