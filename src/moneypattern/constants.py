"""Shared constants for moneypattern.

Centralized configuration constants used across the syntax, parsing and
runtime packages. Placing constants here avoids circular imports and provides
a single source of truth.

Constants are grouped by domain:
- Pattern markers: Characters with special meaning in a monetary pattern
- Descriptor defaults: Values used when a descriptor field is omitted
- Dispatch limits: Rules applied when resolving a currency from raw input

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern markers
    "SYMBOL_MARKER",
    "CODE_MARKER",
    "DIGIT_MARKERS",
    "DECIMAL_MARKER",
    "MINUS_SIGN",
    # Descriptor defaults
    "DEFAULT_PATTERN",
    "DEFAULT_SYMBOL",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_THOUSANDS_SEPARATOR",
    # Dispatch limits
    "MIN_CODE_MARKERS",
]

# ============================================================================
# PATTERN MARKERS
# ============================================================================

# Matches the currency symbol (e.g. "$", "€", "kr") as a whole.
SYMBOL_MARKER: str = "S"

# Matches ONE character of the currency code. "CCC" matches a 3-letter code.
CODE_MARKER: str = "C"

# Digit placeholders. Both collapse identically into a digit-run instruction.
DIGIT_MARKERS: str = "0#"

# Literal decimal marker outside the digit run. The configured decimal
# separator of the currency is accepted as well.
DECIMAL_MARKER: str = "."

# Only recognized immediately before the major-unit digit run.
MINUS_SIGN: str = "-"

# ============================================================================
# DESCRIPTOR DEFAULTS
# ============================================================================

DEFAULT_PATTERN: str = "S0.00"
DEFAULT_SYMBOL: str = "$"
DEFAULT_DECIMAL_SEPARATOR: str = "."
DEFAULT_THOUSANDS_SEPARATOR: str = ","

# ============================================================================
# DISPATCH LIMITS
# ============================================================================

# Minimum number of "C" markers in a caller-supplied pattern.
# A single letter cannot be told apart from other letters in the input.
MIN_CODE_MARKERS: int = 2
