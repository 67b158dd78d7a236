"""
CSS emitter

Serializes already-resolved declarations into compact CSS text. No
whitespace is emitted beyond what the input values contain, and
declarations appear in declaration-set order.

Forms:
    declarations:  color:red;margin-top:0px;
    class rule:    .x1abc-A:hover{color:red;}
    wrapped rule:  @media (min-width: 800px){.x1abc-A{color:red;}}
    keyframes:     @keyframes x1abc-B{from{color:red;}to{color:blue;}}
"""

from typing import Iterable, Optional, Tuple

from ..models.rules import DeclarationSet, NestingContext


def declarations_emit(declarations: DeclarationSet) -> str:
    """Render `prop:value;` pairs in order"""
    return "".join(f"{property}:{value};" for property, value in declarations.items())


def frames_emit(frames: Iterable[Tuple[str, DeclarationSet]]) -> str:
    """Render keyframe selector blocks, e.g. `from{...}to{...}`"""
    return "".join(f"{selector}{{{declarations_emit(declarations)}}}" for selector, declarations in frames)


def keyframes_emit(identifier: str, frames: Iterable[Tuple[str, DeclarationSet]]) -> str:
    """
    Render a complete `@keyframes` fragment.

    Args:
        identifier: Animation name
        frames: `(selector, declarations)` pairs in definition order

    Returns:
        "@keyframes <identifier>{<selector>{<declarations>}...}"
    """
    return f"@keyframes {identifier}{{{frames_emit(frames)}}}"


def selector_build(identifier: str, context: Optional[NestingContext] = None) -> str:
    pseudos = context.pseudos if context else ()
    return "." + identifier + "".join(pseudos)


def rule_emit(
    identifier: str,
    declarations: DeclarationSet,
    context: Optional[NestingContext] = None,
) -> str:
    """
    Render a class rule, wrapped in its at-rules (outermost first).

    Args:
        identifier: Class name
        declarations: Resolved declarations
        context: Pseudo selectors and at-rules

    Returns:
        CSS text for one rule
    """
    text = f"{selector_build(identifier, context)}{{{declarations_emit(declarations)}}}"
    for at_rule in reversed(context.at_rules if context else ()):
        text = f"{at_rule}{{{text}}}"
    return text
