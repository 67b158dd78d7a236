"""
Priority assigner

Maps a rule's category and structure to a small integer. A merge step
sorts rules by ascending priority, so more specific rules are emitted
later and win the cascade. Only the relative order is meaningful.
"""

from enum import IntEnum
from typing import Optional

from ..models.properties import ANIMATION_NAME_PROPERTIES
from ..models.rules import DeclarationSet, NestingContext, RuleCategory
from .values import important_strip


class RulePriority(IntEnum):
    """Ranking of rule kinds, lowest to highest"""
    PLAIN = 0
    KEYFRAMES = 1
    PSEUDO_CLASS = 2
    PSEUDO_ELEMENT = 3
    AT_RULE = 4
    ANIMATION_REFERENCE = 5
    IMPORTANT = 6


# Pseudo-elements that may still be written with a single colon
LEGACY_PSEUDO_ELEMENTS = frozenset({":before", ":after", ":first-line", ":first-letter"})


def pseudoElement_is(pseudo: str) -> bool:
    return pseudo.startswith("::") or pseudo.lower() in LEGACY_PSEUDO_ELEMENTS


def priority_assign(
    category: RuleCategory,
    context: Optional[NestingContext] = None,
    declarations: Optional[DeclarationSet] = None,
) -> int:
    """
    Compute a rule's priority.

    A declaration rule takes the highest rank among the features it has:
    pseudo selectors, wrapping at-rules, a reference to keyframes
    (`animation-name`) or an `!important` value.

    Args:
        category: Rule category
        context: Pseudo selectors and at-rules the rule is nested under
        declarations: The rule's resolved declarations

    Returns:
        Priority as a plain int

    Example:
        >>> priority_assign(RuleCategory.KEYFRAMES)
        1
    """
    if category is RuleCategory.KEYFRAMES:
        return int(RulePriority.KEYFRAMES)

    rank = RulePriority.PLAIN
    context = context or NestingContext()
    if context.pseudos:
        if any(pseudoElement_is(p) for p in context.pseudos):
            rank = max(rank, RulePriority.PSEUDO_ELEMENT)
        else:
            rank = max(rank, RulePriority.PSEUDO_CLASS)
    if context.at_rules:
        rank = max(rank, RulePriority.AT_RULE)

    for declaration in declarations or []:
        if declaration.origin in ANIMATION_NAME_PROPERTIES or declaration.property in ANIMATION_NAME_PROPERTIES:
            rank = max(rank, RulePriority.ANIMATION_REFERENCE)
        if important_strip(declaration.value)[1]:
            rank = max(rank, RulePriority.IMPORTANT)

    return int(rank)
