"""Pattern-driven decoder: monetary string -> exact minor-unit amount.

Walks a CompiledPattern against a ScanCursor over the whitespace-stripped
input and produces a DecodedAmount. Either the whole pattern matches and an
amount is returned, or an exception is raised; there are no partial results.

State machine (driven by instruction order):

    BEFORE_MAJOR --digits--> AFTER_MAJOR --decimal--> AFTER_DECIMAL --digits--> DONE

A digit instruction reads the major field unless the decimal literal has
already been consumed, in which case it reads the minor field. An optional
leading "-" is only recognized right before the major field; a sign in front
of the minor field is not part of the grammar, so negative amounts below one
major unit must be written as "-0.50", not "0.-50".

Thread-safe. Each decode call owns its own cursor and state.

Python 3.13+.
"""

import logging
from enum import Enum, auto
from typing import NoReturn

from moneypattern.constants import MINUS_SIGN
from moneypattern.core import CurrencyDescriptor, DecodedAmount
from moneypattern.diagnostics import (
    ErrorTemplate,
    InvalidPatternError,
    PatternMismatchError,
)
from moneypattern.syntax import (
    CompiledPattern,
    PatternToken,
    ScanCursor,
    TokenKind,
    compile_pattern,
    strip_whitespace,
)

__all__ = ["DecoderState", "DigitField", "PatternDecoder", "decode"]

logger = logging.getLogger(__name__)

# Digits per int() call. Below 640, the smallest integer string conversion
# limit sys.set_int_max_str_digits() accepts.
_DIGIT_CHUNK = 600


class DecoderState(Enum):
    """Position of the decoder relative to the decimal separator."""

    BEFORE_MAJOR = auto()
    AFTER_MAJOR = auto()
    AFTER_DECIMAL = auto()
    DONE = auto()


class DigitField(Enum):
    """Which amount field a digit instruction fills."""

    MAJOR = auto()
    MINOR = auto()


def _digits_to_int(digits: str) -> int:
    """Exact value of an ASCII digit string of any length.

    Long runs are converted chunk by chunk, since int() refuses strings
    beyond the interpreter's conversion limit (4300 digits by default).
    """
    if len(digits) <= _DIGIT_CHUNK:
        return int(digits)
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start : start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


class _DecodeRun:
    """Mutable state of a single decode call."""

    __slots__ = (
        "code_index",
        "compiled",
        "currency",
        "cursor",
        "is_negative",
        "major_units",
        "minor_units",
        "state",
        "value",
    )

    def __init__(self, compiled: CompiledPattern, currency: CurrencyDescriptor, value: str) -> None:
        self.compiled = compiled
        self.currency = currency
        self.value = value
        self.cursor = ScanCursor(value, currency.thousands_separator)
        self.state = DecoderState.BEFORE_MAJOR
        self.is_negative = False
        self.code_index = 0
        self.major_units = 0
        self.minor_units = 0

    def run(self) -> DecodedAmount:
        for token in self.compiled.tokens:
            match token.kind:
                case TokenKind.SYMBOL:
                    self._match_symbol(token)
                case TokenKind.CODE:
                    self._match_code_char(token)
                case TokenKind.DECIMAL:
                    self._match_decimal(token)
                case TokenKind.MAJOR_DIGITS | TokenKind.MINOR_DIGITS:
                    self._read_digits()
                case TokenKind.WHITESPACE:
                    pass

        major, minor = self.major_units, self.minor_units
        if self.is_negative:
            major, minor = -major, -minor

        return DecodedAmount(self.currency.to_minor_units(major, minor), self.currency)

    def _mismatch(
        self, token: PatternToken, input_index: int, expected: str, found: str
    ) -> NoReturn:
        diagnostic = ErrorTemplate.pattern_mismatch(
            self.compiled.source, token.position, self.value, input_index, expected, found
        )
        raise PatternMismatchError(diagnostic)

    def _match_symbol(self, token: PatternToken) -> None:
        start = self.cursor.pos
        symbol = self.currency.symbol
        taken = self.cursor.take_n(len(symbol))
        if taken != symbol:
            self._mismatch(token, start, symbol, taken)

    def _match_code_char(self, token: PatternToken) -> None:
        code = self.currency.code
        if self.code_index >= len(code):
            raise InvalidPatternError(
                ErrorTemplate.pattern_too_many_code_markers(
                    self.compiled.source, token.position, code
                )
            )
        start = self.cursor.pos
        expected = code[self.code_index]
        char = self.cursor.take_one()
        if char != expected:
            self._mismatch(token, start, expected, char)
        self.code_index += 1

    def _match_decimal(self, token: PatternToken) -> None:
        start = self.cursor.pos
        separator = self.currency.decimal_separator
        char = self.cursor.take_one()
        if char != separator:
            self._mismatch(token, start, separator, char)
        self.state = DecoderState.AFTER_DECIMAL

    def _current_field(self) -> DigitField:
        if self.state in (DecoderState.AFTER_DECIMAL, DecoderState.DONE):
            return DigitField.MINOR
        return DigitField.MAJOR

    def _read_digits(self) -> None:
        if self._current_field() is DigitField.MINOR:
            self.minor_units = self._normalize_minor(self.cursor.take_digit_run())
            self.state = DecoderState.DONE
            return

        if not self.is_negative and self.cursor.peek() == MINUS_SIGN:
            self.cursor.take_one()
            self.is_negative = True
        self.major_units = _digits_to_int(self.cursor.take_digit_run())
        self.state = DecoderState.AFTER_MAJOR

    def _normalize_minor(self, digits: str) -> int:
        """Pad or truncate a minor-digit run to the currency precision.

        No rounding: ``"219"`` at precision 2 becomes 21.
        """
        precision = self.currency.precision
        if precision == 0:
            return 0
        return _digits_to_int(digits.ljust(precision, "0")[:precision])


def decode(compiled: CompiledPattern, currency: CurrencyDescriptor, raw_value: str) -> DecodedAmount:
    """Decode a monetary string against a compiled pattern.

    Args:
        compiled: Pattern compiled with the currency's separators
        currency: Descriptor supplying symbol, code, separators and precision
        raw_value: Monetary string; whitespace anywhere is ignored

    Returns:
        The exact amount in minor units

    Raises:
        PatternMismatchError: If a symbol, code or decimal literal does not match
        DigitExpectedError: If a digit field holds no digits
        OutOfInputError: If the input ends before the pattern does
        InvalidPatternError: If the pattern has more "C" markers than the code

    Example:
        >>> usd = CurrencyDescriptor("USD", 2)
        >>> decode(compile_pattern("S0.00", ".", ","), usd, "$1,234.56").minor_units
        123456
    """
    value = strip_whitespace(raw_value)
    result = _DecodeRun(compiled, currency, value).run()
    logger.debug(
        "Decoded %r with pattern %r as %s", raw_value, compiled.source, currency.code
    )
    return result


class PatternDecoder:
    """Decodes monetary strings for one currency and pattern.

    The pattern is compiled once at construction and reused for every
    decode() call.

    Attributes:
        currency: Descriptor the amounts are decoded against
        pattern: Pattern as supplied by the caller

    Example:
        >>> decoder = PatternDecoder(CurrencyDescriptor("USD", 2), "CCC0.00")
        >>> decoder.decode("USD-1234.56").minor_units
        -123456
    """

    __slots__ = ("_compiled", "currency", "pattern")

    def __init__(self, currency: CurrencyDescriptor, pattern: str) -> None:
        """Compile the pattern with the currency's separators.

        Raises:
            InvalidPatternError: If the pattern is malformed
        """
        self.currency = currency
        self.pattern = pattern
        self._compiled = compile_pattern(
            pattern, currency.decimal_separator, currency.thousands_separator
        )

    @property
    def compiled(self) -> CompiledPattern:
        return self._compiled

    def decode(self, monetary_value: str) -> DecodedAmount:
        """Decode one monetary string. See :func:`decode`."""
        return decode(self._compiled, self.currency, monetary_value)
