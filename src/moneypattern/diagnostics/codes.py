"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
moneypattern exception.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (malformed or ambiguous patterns)
        2000-2999: Decode errors (input does not match the pattern)
        3000-3999: Dispatch errors (currency resolution through the registry)
        4000-4999: Locale errors (CLDR-backed descriptor construction)
    """

    # Pattern errors (1000-1999)
    PATTERN_NO_DIGITS = 1001
    PATTERN_MULTIPLE_DIGIT_RUNS = 1002
    PATTERN_INVALID_CHARACTER = 1003
    PATTERN_TOO_MANY_CODE_MARKERS = 1004
    PATTERN_CODE_TOO_SHORT = 1005
    PATTERN_MULTIPLE_DECIMALS = 1006

    # Decode errors (2000-2999)
    PATTERN_MISMATCH = 2001
    DIGIT_EXPECTED = 2002
    OUT_OF_INPUT = 2003

    # Dispatch errors (3000-3999)
    CURRENCY_UNKNOWN = 3001
    CODE_NOT_FOUND = 3002
    CODE_AMBIGUOUS = 3003

    # Locale errors (4000-4999)
    LOCALE_UNKNOWN = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides enough context to produce an actionable message: the offending
    positions in both the pattern and the input, and the literal values
    involved.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        pattern: Pattern being decoded against (None if not applicable)
        pattern_index: Position of the failing instruction in the pattern
        value: Input being decoded (None if not applicable)
        input_index: Position in the normalized input where decoding failed
        expected: Literal the pattern required at that position
        found: Literal actually present in the input
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    pattern: str | None = None
    pattern_index: int | None = None
    value: str | None = None
    input_index: int | None = None
    expected: str | None = None
    found: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[PATTERN_MISMATCH]: The input '€10.00' does not match the pattern ...
              --> pattern 'S0.00' index 0, input '€10.00' index 0
              = expected: '$'
              = found: '€'
              = help: Check the symbol, currency code and decimal separator in the input

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
