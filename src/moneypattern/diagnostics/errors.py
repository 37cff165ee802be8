"""moneypattern exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DigitExpectedError",
    "InvalidPatternError",
    "MoneyError",
    "MoneyParseError",
    "OutOfInputError",
    "PatternMismatchError",
    "UnknownCurrencyError",
    "UnknownLocaleError",
]


class MoneyError(Exception):
    """Base exception for all moneypattern errors.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize MoneyError.

        Args:
            diagnostic: Diagnostic describing the failure
        """
        self.diagnostic = diagnostic
        super().__init__(diagnostic.format_error())


class InvalidPatternError(MoneyError):
    """Malformed or ambiguous pattern.

    Raised for zero or several digit-placeholder runs, unknown pattern
    characters, more "C" markers than the code has characters, too few
    "C" markers for dispatch, or when the code cannot be located in the
    raw value.
    """

    @property
    def pattern(self) -> str | None:
        """The offending pattern, if known."""
        return self.diagnostic.pattern


class MoneyParseError(MoneyError):
    """Input-side decode failure.

    Attributes:
        value: The normalized input that failed to decode
        input_index: Position in the input where decoding stopped
    """

    @property
    def value(self) -> str | None:
        """The normalized input."""
        return self.diagnostic.value

    @property
    def input_index(self) -> int | None:
        """Position in the normalized input where decoding stopped."""
        return self.diagnostic.input_index


class PatternMismatchError(MoneyParseError):
    """Input does not match a symbol, code or decimal-separator literal.

    Decoding "€10.00" against "S0.00" for a "$" currency raises this with
    pattern_index 0, input_index 0, expected "$" and found "€".
    """

    @property
    def pattern(self) -> str | None:
        return self.diagnostic.pattern

    @property
    def pattern_index(self) -> int | None:
        return self.diagnostic.pattern_index

    @property
    def expected(self) -> str | None:
        return self.diagnostic.expected

    @property
    def found(self) -> str | None:
        return self.diagnostic.found


class DigitExpectedError(MoneyParseError):
    """A digit-run field found no digits at the current input position."""


class OutOfInputError(MoneyParseError):
    """The pattern required more input than was supplied."""


class UnknownCurrencyError(MoneyError):
    """No registered descriptor matches the extracted or searched code."""

    @property
    def code(self) -> str | None:
        """The code (or raw value) that could not be resolved."""
        return self.diagnostic.value


class UnknownLocaleError(MoneyError):
    """Babel could not resolve the locale used to build a descriptor."""
