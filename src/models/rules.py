"""
Compiled-rule data models

Type-safe structures passed between the resolver, hasher, emitter and
priority stages of the compiler. Everything here is created per compilation
call and never shared between calls.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union


StyleValue = Union[int, float, str]


class Direction(Enum):
    """Writing direction used when resolving logical properties"""
    LTR = "ltr"
    RTL = "rtl"


class RuleCategory(Enum):
    """
    Kinds of compiled rules

    The value is the one-character suffix appended to every identifier of
    that category, so identifiers of different categories never collide.
    """
    DECLARATION = "A"   # .x1abc-A{color:red;}
    KEYFRAMES = "B"     # @keyframes x1abc-B{from{...}to{...}}

    @property
    def suffix(self) -> str:
        return self.value


@dataclass(frozen=True)
class Declaration:
    """
    One resolved `property:value` pair

    Attributes:
        property: Physical CSS property name (e.g., "margin-top")
        value: Canonical value text (e.g., "4px")
        origin: Longhand input key the property was resolved from, before
                logical-to-physical mapping (e.g., "margin-inline-start").
                The RTL mirror re-resolves from this key.
        origin_value: Normalized value before direction-relative keywords
                      were mapped (e.g., "start" for `float: start`);
                      None when identical to `value`

    Example:
        {start: 10} in physical mode resolves to
        Declaration(property="left", value="10px", origin="start")
    """
    property: str
    value: str
    origin: str
    origin_value: Optional[str] = None

    def originValue_get(self) -> str:
        return self.value if self.origin_value is None else self.origin_value


class DeclarationSet:
    """
    Ordered collection of declarations keyed by physical property

    Insertion order is significant: it fixes both the emitted CSS order and
    the hash input. Adding a declaration for a property already present
    replaces it but keeps its original position. Sets built with
    `merge=False` (RTL mirrors) keep every entry, so they always match the
    size and order of the set they mirror.
    """

    def __init__(self, declarations: Optional[List[Declaration]] = None, merge: bool = True) -> None:
        self.merge = merge
        self._declarations: List[Declaration] = []
        for declaration in declarations or []:
            self.add(declaration)

    def add(self, declaration: Declaration) -> None:
        if self.merge:
            for index, existing in enumerate(self._declarations):
                if existing.property == declaration.property:
                    self._declarations[index] = declaration
                    return
        self._declarations.append(declaration)

    def extend(self, other: "DeclarationSet") -> None:
        for declaration in other:
            self.add(declaration)

    def properties(self) -> List[str]:
        return [d.property for d in self._declarations]

    def items(self) -> List[Tuple[str, str]]:
        """Return `(property, value)` pairs in declaration order"""
        return [(d.property, d.value) for d in self._declarations]

    def __iter__(self) -> Iterator[Declaration]:
        return iter(list(self._declarations))

    def __len__(self) -> int:
        return len(self._declarations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeclarationSet):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        body = "; ".join(f"{p}: {v}" for p, v in self.items())
        return f"DeclarationSet({body})"


@dataclass(frozen=True)
class NestingContext:
    """
    Structural conditions a declaration rule is nested under

    Attributes:
        pseudos: Pseudo-class / pseudo-element selectors appended to the
                 class selector, in order (e.g., (":hover", "::after"))
        at_rules: Wrapping at-rules, outermost first
                  (e.g., ("@media (min-width: 800px)",))
    """
    pseudos: Tuple[str, ...] = ()
    at_rules: Tuple[str, ...] = ()

    def pseudo_push(self, pseudo: str) -> "NestingContext":
        return NestingContext(self.pseudos + (pseudo,), self.at_rules)

    def atRule_push(self, at_rule: str) -> "NestingContext":
        return NestingContext(self.pseudos, self.at_rules + (at_rule,))


@dataclass(frozen=True)
class CompiledRule:
    """
    Output record of one compilation call

    Attributes:
        identifier: Class or animation name (hash token + category suffix)
        ltr: CSS text for left-to-right documents, never None
        rtl: CSS text for right-to-left documents, or None when the rule
             has no direction-sensitive declaration
        priority: Relative ordering hint; rules are emitted in ascending
                  priority so later ones win the cascade
    """
    identifier: str
    ltr: str
    rtl: Optional[str]
    priority: int
