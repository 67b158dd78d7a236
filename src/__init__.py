"""
atomcss - Atomic CSS compiler

Compiles declarative style definitions and keyframes into deterministic,
content-addressed CSS rules.
"""

__version__ = "1.0.0"

from .lib import (
    Compiler,
    keyframes_compile,
    declarationBlock_compile,
    styles_compile,
    styles_merge,
    Stylesheet,
    document_compile,
    StyleCompileError,
    UnsupportedValueError,
    UnknownPropertyError,
    MalformedKeyframesError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "Compiler",
    "keyframes_compile",
    "declarationBlock_compile",
    "styles_compile",
    "styles_merge",
    "Stylesheet",
    "document_compile",
    "StyleCompileError",
    "UnsupportedValueError",
    "UnknownPropertyError",
    "MalformedKeyframesError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
