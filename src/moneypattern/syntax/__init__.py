"""Pattern syntax: compiler and scanning cursor.

Python 3.13+. Zero external dependencies.
"""

from .cursor import ScanCursor
from .pattern import (
    CompiledPattern,
    PatternToken,
    TokenKind,
    compile_pattern,
    contains_code,
    count_code_markers,
    strip_whitespace,
)

__all__ = [
    "CompiledPattern",
    "PatternToken",
    "ScanCursor",
    "TokenKind",
    "compile_pattern",
    "contains_code",
    "count_code_markers",
    "strip_whitespace",
]
