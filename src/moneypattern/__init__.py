"""moneypattern - pattern-driven parsing of monetary strings.

Converts human-readable monetary strings such as ``"$USD1,234.56"`` into exact
integer amounts in minor units, driven by a declarative pattern (``"S0.00"``,
``"CCC #,##0.00"``) and a currency descriptor.

Public API:
    CurrencyDescriptor - Immutable currency attributes (code, symbol, separators, precision)
    DecodedAmount - Exact minor-unit amount tagged with its currency
    CurrencyRegistry - Code -> descriptor directory with currency discovery
    PatternDecoder - Decode strings for one currency and pattern
    compile_pattern - Compile a pattern into decoder instructions
    decode - Decode a string against a compiled pattern
    descriptor_from_locale - Build a descriptor from CLDR data (Babel)
    register, register_all, find, find_by_code, parse, registered, clear - Default
        registry functions

Exceptions:
    MoneyError - Base exception class
    InvalidPatternError - Malformed or ambiguous pattern
    PatternMismatchError - Input does not match a pattern literal
    DigitExpectedError - Digit field without digits
    OutOfInputError - Input ended before the pattern
    UnknownCurrencyError - No registered currency matches
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import CurrencyDescriptor, DecodedAmount
from .core.cldr import descriptor_from_locale
from .diagnostics import (
    DigitExpectedError,
    InvalidPatternError,
    MoneyError,
    MoneyParseError,
    OutOfInputError,
    PatternMismatchError,
    UnknownCurrencyError,
    UnknownLocaleError,
)
from .parsing import PatternDecoder, decode
from .runtime import CurrencyRegistry
from .runtime.registry import (
    clear,
    find,
    find_by_code,
    parse,
    register,
    register_all,
    registered,
)
from .syntax import compile_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("moneypattern")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyDescriptor",
    "CurrencyRegistry",
    "DecodedAmount",
    "DigitExpectedError",
    "InvalidPatternError",
    "MoneyError",
    "MoneyParseError",
    "OutOfInputError",
    "PatternDecoder",
    "PatternMismatchError",
    "UnknownCurrencyError",
    "UnknownLocaleError",
    "__version__",
    "clear",
    "compile_pattern",
    "decode",
    "descriptor_from_locale",
    "find",
    "find_by_code",
    "parse",
    "register",
    "register_all",
    "registered",
]
