"""Monetary pattern compiler.

Reduces a human-authored pattern such as ``"S#,##0.00"`` into a flat
instruction sequence for the decoder:

    S        -> SYMBOL          (whole currency symbol)
    C        -> CODE            (one character of the currency code)
    #,##0    -> MAJOR_DIGITS    (thousands separators collapse into the run)
    .        -> DECIMAL         (literal decimal separator)
    00       -> MINOR_DIGITS
    <space>  -> WHITESPACE      (no-op, input whitespace is stripped too)

Exactly one digit-placeholder run is allowed. A second run, typically caused
by a space inside the numeric part, is an error.

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass
from enum import StrEnum

from moneypattern.constants import (
    CODE_MARKER,
    DECIMAL_MARKER,
    DIGIT_MARKERS,
    SYMBOL_MARKER,
)
from moneypattern.diagnostics import ErrorTemplate, InvalidPatternError

__all__ = [
    "CompiledPattern",
    "PatternToken",
    "TokenKind",
    "compile_pattern",
    "contains_code",
    "count_code_markers",
    "strip_whitespace",
]

_WHITESPACE_RE = re.compile(r"\s+")


class TokenKind(StrEnum):
    """Instruction kinds produced by the compiler.

    The string values form the canonical compiled notation, e.g. ``S#.#``.
    """

    SYMBOL = "S"
    CODE = "C"
    DECIMAL = "."
    MAJOR_DIGITS = "#"
    MINOR_DIGITS = "%"
    WHITESPACE = " "


@dataclass(frozen=True, slots=True)
class PatternToken:
    """One decoder instruction.

    Attributes:
        kind: Instruction kind
        position: Index of the instruction's first character in the source pattern
    """

    kind: TokenKind
    position: int


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Immutable instruction sequence for one pattern.

    Invariant: exactly one MAJOR_DIGITS token, and at most one MINOR_DIGITS
    token which directly follows the DECIMAL token of the digit run. A
    pattern with minor digits holds no other DECIMAL token.

    Attributes:
        source: The pattern as written by the caller
        tokens: Instructions in pattern order
    """

    source: str
    tokens: tuple[PatternToken, ...]

    @property
    def canonical(self) -> str:
        """Whitespace-free compiled notation, e.g. ``"SCCC#.%"``."""
        return "".join(
            token.kind.value for token in self.tokens if token.kind is not TokenKind.WHITESPACE
        )


def strip_whitespace(value: str) -> str:
    """Remove all whitespace; decoding is whitespace-insensitive."""
    return _WHITESPACE_RE.sub("", value)


def count_code_markers(pattern: str) -> int:
    """Count the "C" markers in a raw pattern."""
    return pattern.count(CODE_MARKER)


def contains_code(pattern: str) -> bool:
    """True if the pattern matches the currency code explicitly."""
    return CODE_MARKER in pattern


def _digit_run_regex(decimal_separator: str, thousands_separator: str) -> re.Pattern[str]:
    digits = re.escape(DIGIT_MARKERS)
    major = f"[{digits}{re.escape(thousands_separator)}]+"
    minor = f"(?:({re.escape(decimal_separator)})[{digits}]+)?"
    return re.compile(major + minor)


def compile_pattern(
    pattern: str, decimal_separator: str, thousands_separator: str
) -> CompiledPattern:
    """Compile a pattern for the given separators.

    Args:
        pattern: Pattern such as ``"S0.00"`` or ``"CCC #,##0.00"``
        decimal_separator: Currency decimal separator
        thousands_separator: Currency thousands separator

    Returns:
        The compiled instruction sequence

    Raises:
        InvalidPatternError: If the pattern has zero or several digit runs,
            contains a character with no meaning, or has a decimal literal
            besides the one in front of its minor digits

    Example:
        >>> compile_pattern("S #,##0.00", ".", ",").canonical
        'S#.%'
        >>> compile_pattern("CCC0,00", ",", ".").canonical
        'CCC#.%'
    """
    runs = list(_digit_run_regex(decimal_separator, thousands_separator).finditer(pattern))

    if not runs:
        raise InvalidPatternError(ErrorTemplate.pattern_no_digits(pattern))

    if len(runs) > 1:
        raise InvalidPatternError(ErrorTemplate.pattern_multiple_digit_runs(pattern, len(runs)))

    run = runs[0]
    tokens: list[PatternToken] = []

    index = 0
    while index < len(pattern):
        if index == run.start():
            tokens.append(PatternToken(TokenKind.MAJOR_DIGITS, index))
            if run.group(1) is not None:
                separator_index = run.start(1)
                tokens.append(PatternToken(TokenKind.DECIMAL, separator_index))
                tokens.append(PatternToken(TokenKind.MINOR_DIGITS, separator_index + 1))
            index = run.end()
            continue

        char = pattern[index]
        if char == SYMBOL_MARKER:
            kind = TokenKind.SYMBOL
        elif char == CODE_MARKER:
            kind = TokenKind.CODE
        elif char in (DECIMAL_MARKER, decimal_separator):
            kind = TokenKind.DECIMAL
        elif char.isspace():
            kind = TokenKind.WHITESPACE
        else:
            raise InvalidPatternError(ErrorTemplate.pattern_invalid_character(pattern, index))

        tokens.append(PatternToken(kind, index))
        index += 1

    if run.group(1) is not None:
        # The run's own separator is the only decimal literal allowed.
        for token in tokens:
            if token.kind is TokenKind.DECIMAL and token.position != run.start(1):
                raise InvalidPatternError(
                    ErrorTemplate.pattern_multiple_decimals(pattern, token.position)
                )

    return CompiledPattern(source=pattern, tokens=tuple(tokens))
