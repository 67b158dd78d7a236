"""
Stylesheet aggregation

Folds compiled rules into two final stylesheets, one per writing
direction: rules are deduplicated by identifier and emitted in ascending
priority, keeping first-seen order among equal priorities.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..models.rules import CompiledRule
from .atomic import styles_compile
from .compiler import Compiler
from .errors import UnsupportedValueError
from .log import LOG


DOCUMENT_SECTIONS = frozenset({"keyframes", "styles"})


class Stylesheet:
    """
    Ordered, deduplicated collection of compiled rules

    Example:
        sheet = Stylesheet()
        sheet.rules_add(rules)          # [(identifier, CompiledRule), ...]
        ltr_css = sheet.ltr_render()
        rtl_css = sheet.rtl_render()
    """

    def __init__(self) -> None:
        self.rules: Dict[str, CompiledRule] = {}

    def rule_add(self, identifier: str, rule: CompiledRule) -> bool:
        """
        Add a rule unless its identifier is already present.

        Returns:
            True if the rule was added
        """
        if identifier in self.rules:
            LOG(f"Skipping duplicate rule {identifier}", level=3)
            return False
        self.rules[identifier] = rule
        return True

    def rules_add(self, rules: Iterable[Tuple[str, CompiledRule]]) -> int:
        """Add several rules; returns how many were new"""
        return sum(self.rule_add(identifier, rule) for identifier, rule in rules)

    def rules_sorted(self) -> List[CompiledRule]:
        # sorted() is stable, so insertion order breaks priority ties
        return sorted(self.rules.values(), key=lambda rule: rule.priority)

    def ltr_render(self) -> str:
        """Stylesheet text for left-to-right documents"""
        return "\n".join(rule.ltr for rule in self.rules_sorted())

    def rtl_render(self) -> str:
        """Stylesheet text for right-to-left documents"""
        return "\n".join(rule.rtl if rule.rtl is not None else rule.ltr for rule in self.rules_sorted())

    def __len__(self) -> int:
        return len(self.rules)


def document_compile(
    document: Mapping[str, Any], compiler: Optional[Compiler] = None
) -> Dict[str, Any]:
    """
    Compile a style document into stylesheets and an identifier manifest.

    Args:
        document: Mapping with optional `keyframes` (name -> definition)
                  and `styles` (namespace -> style object) sections
        compiler: Compiler to use; a default one is created otherwise

    Returns:
        dict with `ltr` and `rtl` stylesheet text, `manifest`
        ({"keyframes": {name: id}, "styles": {namespace: {prop: classes}}})
        and `rule_count`

    Raises:
        StyleCompileError: Any rule fails to compile
        UnsupportedValueError: Unknown top-level section
    """
    compiler = compiler or Compiler()
    unknown = set(document) - DOCUMENT_SECTIONS
    if unknown:
        raise UnsupportedValueError(f"Unknown document section '{sorted(unknown)[0]}'", fragment=sorted(unknown))

    sheet = Stylesheet()
    keyframe_names: Dict[str, str] = {}
    for name, definition in (document.get("keyframes") or {}).items():
        identifier, rule = compiler.keyframes_compile(definition)
        keyframe_names[name] = identifier
        sheet.rule_add(identifier, rule)

    classes, rules = styles_compile(document.get("styles") or {}, compiler)
    sheet.rules_add(rules)
    LOG(f"Stylesheet holds {len(sheet)} unique rules", level=1)

    return {
        "ltr": sheet.ltr_render(),
        "rtl": sheet.rtl_render(),
        "manifest": {"keyframes": keyframe_names, "styles": classes},
        "rule_count": len(sheet),
    }
