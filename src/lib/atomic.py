"""
Atomic style namespaces

Splits named style objects into one compiled rule per property and
condition, and merges the resulting class maps with later-wins semantics.

Example:
    >>> classes, rules = styles_compile({
    ...     "button": {"color": {"default": "red", ":hover": "blue"}},
    ... })
    >>> len(classes["button"]["color"].split())
    2
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from ..models.rules import CompiledRule, NestingContext
from .compiler import Compiler
from .errors import UnsupportedValueError
from .log import LOG


ClassMap = Dict[str, Optional[str]]


def conditions_flatten(
    property: str, value: Any, context: NestingContext
) -> Iterator[Tuple[NestingContext, Any]]:
    """
    Walk a conditional value into `(context, leaf value)` pairs.

    Condition keys are `default`, pseudo selectors (`:hover`, `::before`)
    and at-rules (`@media ...`), nestable in any combination.
    """
    if not isinstance(value, Mapping):
        yield context, value
        return

    for condition, inner in value.items():
        if condition == "default":
            yield from conditions_flatten(property, inner, context)
        elif condition.startswith(":"):
            yield from conditions_flatten(property, inner, context.pseudo_push(condition))
        elif condition.startswith("@"):
            yield from conditions_flatten(property, inner, context.atRule_push(condition))
        else:
            raise UnsupportedValueError(
                f"Unknown condition '{condition}'", property=property, fragment=value
            )


def styles_compile(
    namespaces: Mapping[str, Mapping[str, Any]],
    compiler: Optional[Compiler] = None,
) -> Tuple[Dict[str, ClassMap], List[Tuple[str, CompiledRule]]]:
    """
    Compile named style objects into atomic rules.

    Args:
        namespaces: Namespace name -> style object. Values are scalars,
                    None (the property maps to no class, reverting any
                    earlier style for it on merge) or condition mappings.
        compiler: Compiler to use; a default one is created otherwise

    Returns:
        (class map, rules): `{namespace: {property: "cls1 cls2" | None}}`
        and the `(identifier, CompiledRule)` pairs in compilation order
    """
    compiler = compiler or Compiler()
    classes: Dict[str, ClassMap] = {}
    rules: List[Tuple[str, CompiledRule]] = []

    for namespace, style in namespaces.items():
        if not isinstance(style, Mapping):
            raise UnsupportedValueError("Namespace must be a style object", property=namespace, fragment=style)
        namespace_classes: ClassMap = {}
        for property, value in style.items():
            identifiers = []
            for context, leaf in conditions_flatten(property, value, NestingContext()):
                if leaf is None:
                    continue
                identifier, rule = compiler.declarationBlock_compile({property: leaf}, context)
                identifiers.append(identifier)
                rules.append((identifier, rule))
            namespace_classes[property] = " ".join(identifiers) or None
        classes[namespace] = namespace_classes
        LOG(f"Namespace '{namespace}': {len(namespace_classes)} properties", level=2)

    return classes, rules


def styles_merge(*class_maps: Optional[ClassMap]) -> str:
    """
    Merge compiled class maps into one class string.

    Later maps win per property; a property mapped to None removes the
    earlier classes for it. Falsy arguments are skipped so conditional
    styles can be passed inline.

    Example:
        >>> styles_merge({"color": "xred-A"}, {"color": "xblue-A"})
        'xblue-A'
    """
    merged: Dict[str, Optional[str]] = {}
    for class_map in class_maps:
        if not class_map:
            continue
        for property, class_names in class_map.items():
            merged[property] = class_names
    return " ".join(names for names in merged.values() if names)
