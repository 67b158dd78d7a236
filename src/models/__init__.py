"""
Models package for atomcss

Contains data structures and static property tables for the compiler.
"""

from .state import ProgramState, pipeline
from .rules import (
    CompiledRule,
    Declaration,
    DeclarationSet,
    Direction,
    NestingContext,
    RuleCategory,
    StyleValue,
)
from .properties import LogicalProperty, Shorthand, LOGICAL_PROPERTIES, SHORTHANDS

__all__ = [
    "ProgramState",
    "pipeline",
    "CompiledRule",
    "Declaration",
    "DeclarationSet",
    "Direction",
    "NestingContext",
    "RuleCategory",
    "StyleValue",
    "LogicalProperty",
    "Shorthand",
    "LOGICAL_PROPERTIES",
    "SHORTHANDS",
]
