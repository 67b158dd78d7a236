"""
atomcss - Atomic CSS compiler for declarative style definitions
"""

from .compiler import Compiler, keyframes_compile, declarationBlock_compile
from .atomic import styles_compile, styles_merge
from .stylesheet import Stylesheet, document_compile
from .errors import (
    StyleCompileError,
    UnsupportedValueError,
    UnknownPropertyError,
    MalformedKeyframesError,
)
from .log import LOG, state_connectToLogger

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
]
