"""Diagnostic system for moneypattern errors.

Provides structured error diagnostics with codes, positions, literals and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DigitExpectedError,
    InvalidPatternError,
    MoneyError,
    MoneyParseError,
    OutOfInputError,
    PatternMismatchError,
    UnknownCurrencyError,
    UnknownLocaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DigitExpectedError",
    "ErrorTemplate",
    "InvalidPatternError",
    "MoneyError",
    "MoneyParseError",
    "OutOfInputError",
    "OutputFormat",
    "PatternMismatchError",
    "UnknownCurrencyError",
    "UnknownLocaleError",
]
