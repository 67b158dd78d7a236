"""
Compilation errors

Every error is local to a single compilation call and identifies the
offending property or keyframes selector together with the input fragment
that triggered it.
"""

from typing import Any, Optional


class StyleCompileError(Exception):
    """
    Base class for errors raised while compiling a style definition

    Attributes:
        property: Input property key involved, if any
        selector: Keyframes selector involved, if any
        fragment: The offending input value or sub-definition
    """

    def __init__(
        self,
        message: str,
        property: Optional[str] = None,
        selector: Optional[str] = None,
        fragment: Any = None,
    ) -> None:
        self.reason = message
        self.property = property
        self.selector = selector
        self.fragment = fragment
        super().__init__(self.message_build(message))

    def selector_attach(self, selector: str) -> "StyleCompileError":
        """Copy of this error located inside a keyframes selector"""
        return type(self)(self.reason, property=self.property, selector=selector, fragment=self.fragment)

    def message_build(self, message: str) -> str:
        location = []
        if self.selector is not None:
            location.append(f"selector '{self.selector}'")
        if self.property is not None:
            location.append(f"property '{self.property}'")
        if not location:
            return message
        return f"{message} ({', '.join(location)}: {self.fragment!r})"


class UnsupportedValueError(StyleCompileError):
    """Raised when a value's shape does not fit its property's domain"""
    pass


class UnknownPropertyError(StyleCompileError):
    """Raised in strict mode for properties absent from the resolver tables"""
    pass


class MalformedKeyframesError(StyleCompileError):
    """Raised for keyframes with no frames or an invalid frame selector"""
    pass
