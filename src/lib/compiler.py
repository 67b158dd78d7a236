"""
Compiler for style definitions to atomic CSS

Transforms a style object or a keyframes definition into a content-addressed
identifier plus the CSS text realizing it.

Pipeline per call:
    resolve properties -> normalize values -> hash canonical text ->
    emit LTR text -> emit RTL text if direction-sensitive -> assign priority

Every call is a pure function of its input and the compiler settings.
"""

import re
from typing import Any, List, Mapping, Optional, Tuple

from ..config import AppSettings, appsettings
from ..models.rules import CompiledRule, DeclarationSet, NestingContext, RuleCategory
from .emitter import declarations_emit, frames_emit, keyframes_emit, rule_emit
from .errors import MalformedKeyframesError, StyleCompileError, UnsupportedValueError
from .hasher import identifier_hash
from .log import LOG
from .priority import priority_assign
from .properties import PropertyResolver
from .rtl import rtl_mirror, rtl_needs


RESERVED_FRAME_SELECTORS = frozenset({"from", "to"})
PERCENTAGE_PATTERN = re.compile(r"^(\d+(\.\d+)?|\.\d+)%$")


def scalar_check(property: str, value: Any) -> None:
    """Reject values that are not plain style scalars"""
    if isinstance(value, Mapping):
        raise UnsupportedValueError(
            "Conditional value not allowed here", property=property, fragment=value
        )
    if value is None:
        raise UnsupportedValueError("Missing value", property=property, fragment=value)


class Compiler:
    """
    Compiles style definitions to CompiledRule records

    Responsibilities:
    - Resolve and normalize declarations
    - Hash canonical text into identifiers
    - Emit LTR and, when needed, RTL CSS
    - Assign cascade priorities

    The compiler holds only its settings and resolver, so one instance
    can be shared across threads.
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        """
        Initialize compiler

        Args:
            settings: Compiler settings; defaults to the global appsettings
        """
        self.settings = settings or appsettings
        self.resolver = PropertyResolver(self.settings)

    def frameSelector_validate(self, selector: Any, frame: Any) -> str:
        """
        Validate and canonicalize a keyframes selector.

        Accepts `from`, `to`, percentages between 0% and 100%, and
        comma-separated lists of those.

        Raises:
            MalformedKeyframesError: Any other selector
        """
        if not isinstance(selector, str):
            raise MalformedKeyframesError("Frame selector must be a string", selector=str(selector), fragment=frame)

        parts = [part.strip() for part in selector.split(",")]
        for part in parts:
            if part in RESERVED_FRAME_SELECTORS:
                continue
            if PERCENTAGE_PATTERN.match(part) and float(part[:-1]) <= 100:
                continue
            raise MalformedKeyframesError(
                "Frame selector must be 'from', 'to' or a percentage",
                selector=selector,
                fragment=frame,
            )
        return ",".join(parts)

    def frame_resolve(self, selector: str, frame: Any) -> DeclarationSet:
        """Resolve one keyframe's style object"""
        if not isinstance(frame, Mapping):
            raise MalformedKeyframesError("Frame must be a style object", selector=selector, fragment=frame)
        try:
            for property, value in frame.items():
                scalar_check(property, value)
            return self.resolver.style_resolve(frame)
        except StyleCompileError as error:
            raise error.selector_attach(selector) from error

    def keyframes_compile(self, definition: Mapping[str, Any]) -> Tuple[str, CompiledRule]:
        """
        Compile a keyframes definition.

        Args:
            definition: Ordered mapping of frame selector to style object

        Returns:
            (identifier, CompiledRule) with priority 1; `rtl` is None when no
            frame holds a direction-sensitive declaration

        Raises:
            MalformedKeyframesError: No frames, an invalid selector, or two
                selectors equal after canonicalization
            UnsupportedValueError / UnknownPropertyError: From resolution

        Example:
            >>> identifier, rule = Compiler().keyframes_compile(
            ...     {'from': {'backgroundColor': 'red'}, 'to': {'backgroundColor': 'blue'}})
            >>> identifier
            'xbopttm-B'
            >>> rule.ltr
            '@keyframes xbopttm-B{from{background-color:red;}to{background-color:blue;}}'
        """
        if not isinstance(definition, Mapping) or not definition:
            raise MalformedKeyframesError("Keyframes need at least one frame", fragment=definition)

        ltr_frames: List[Tuple[str, DeclarationSet]] = []
        rtl_frames: List[Tuple[str, DeclarationSet]] = []
        direction_sensitive = False
        seen = set()

        for raw_selector, frame in definition.items():
            selector = self.frameSelector_validate(raw_selector, frame)
            if selector in seen:
                raise MalformedKeyframesError("Duplicate frame selector", selector=selector, fragment=frame)
            seen.add(selector)
            declarations = self.frame_resolve(selector, frame)
            ltr_frames.append((selector, declarations))
            if rtl_needs(declarations, self.resolver):
                direction_sensitive = True
                rtl_frames.append((selector, rtl_mirror(declarations, self.resolver)))
            else:
                rtl_frames.append((selector, declarations))

        identifier = identifier_hash(
            RuleCategory.KEYFRAMES, frames_emit(ltr_frames), self.settings.class_name_prefix
        )
        rule = CompiledRule(
            identifier=identifier,
            ltr=keyframes_emit(identifier, ltr_frames),
            rtl=keyframes_emit(identifier, rtl_frames) if direction_sensitive else None,
            priority=priority_assign(RuleCategory.KEYFRAMES),
        )
        LOG(f"Compiled keyframes {identifier} ({len(ltr_frames)} frames)", level=2)
        return identifier, rule

    def context_canonicalize(self, context: Optional[NestingContext]) -> NestingContext:
        """Trim and whitespace-collapse pseudo selectors and at-rules"""
        if context is None:
            return NestingContext()
        pseudos = tuple(re.sub(r"\s+", " ", p.strip()) for p in context.pseudos)
        at_rules = tuple(re.sub(r"\s+", " ", a.strip()) for a in context.at_rules)
        for pseudo in pseudos:
            if not pseudo.startswith(":"):
                raise UnsupportedValueError("Pseudo selector must start with ':'", fragment=pseudo)
        for at_rule in at_rules:
            if not at_rule.startswith("@"):
                raise UnsupportedValueError("At-rule must start with '@'", fragment=at_rule)
        return NestingContext(pseudos, at_rules)

    def declarationBlock_compile(
        self,
        style: Mapping[str, Any],
        context: Optional[NestingContext] = None,
    ) -> Tuple[str, CompiledRule]:
        """
        Compile a flat style object into one class rule.

        Args:
            style: Ordered mapping of property to scalar value
            context: Pseudo selectors and at-rules the rule is nested under

        Returns:
            (identifier, CompiledRule); `rtl` is None when no declaration is
            direction-sensitive

        Raises:
            UnsupportedValueError: Empty style, non-scalar or invalid values
            UnknownPropertyError: Unknown property in strict mode
        """
        if not isinstance(style, Mapping) or not style:
            raise UnsupportedValueError("Style object must have at least one property", fragment=style)
        for property, value in style.items():
            scalar_check(property, value)

        context = self.context_canonicalize(context)
        declarations = self.resolver.style_resolve(style)

        canonical = declarations_emit(declarations) + "".join(context.pseudos) + "".join(context.at_rules)
        identifier = identifier_hash(RuleCategory.DECLARATION, canonical, self.settings.class_name_prefix)

        rtl = None
        if rtl_needs(declarations, self.resolver):
            rtl = rule_emit(identifier, rtl_mirror(declarations, self.resolver), context)

        rule = CompiledRule(
            identifier=identifier,
            ltr=rule_emit(identifier, declarations, context),
            rtl=rtl,
            priority=priority_assign(RuleCategory.DECLARATION, context, declarations),
        )
        LOG(f"Compiled rule {identifier}: {rule.ltr}", level=2)
        return identifier, rule


def keyframes_compile(
    definition: Mapping[str, Any], settings: Optional[AppSettings] = None
) -> Tuple[str, CompiledRule]:
    """Compile a keyframes definition with the given (or global) settings"""
    return Compiler(settings).keyframes_compile(definition)


def declarationBlock_compile(
    style: Mapping[str, Any],
    context: Optional[NestingContext] = None,
    settings: Optional[AppSettings] = None,
) -> Tuple[str, CompiledRule]:
    """Compile a flat style object with the given (or global) settings"""
    return Compiler(settings).declarationBlock_compile(style, context)
