"""Forward-only scanning cursor over a normalized monetary string.

The decoder reasons purely in terms of "take a literal" and "take digits";
all bounds checks live here.

Design:
    - One cursor per decode call, never shared
    - Position only ever increases and is clamped to the input length
    - Reading past the end raises OutOfInputError instead of returning None
    - Thousands separators are consumed inside digit runs and discarded

Python 3.13+. Zero external dependencies.
"""

from moneypattern.diagnostics import (
    DigitExpectedError,
    ErrorTemplate,
    OutOfInputError,
)

__all__ = ["ScanCursor"]

_ASCII_DIGITS = frozenset("0123456789")


class ScanCursor:
    """Mutable cursor over a whitespace-stripped input string.

    Example:
        >>> cursor = ScanCursor("$1,234.56", ",")
        >>> cursor.take_n(1)
        '$'
        >>> cursor.take_digit_run()
        '1234'
        >>> cursor.peek()
        '.'
        >>> cursor.pos
        6
    """

    __slots__ = ("_pos", "_source", "_thousands_separator")

    def __init__(self, source: str, thousands_separator: str) -> None:
        """Create a cursor at position 0.

        Args:
            source: Normalized input (whitespace already removed)
            thousands_separator: Grouping character skipped inside digit runs
        """
        self._source = source
        self._pos = 0
        self._thousands_separator = thousands_separator

    @property
    def source(self) -> str:
        return self._source

    @property
    def pos(self) -> int:
        """Current index into the source."""
        return self._pos

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
        return self._pos >= len(self._source)

    def peek(self) -> str:
        """Return the current character without advancing.

        Raises:
            OutOfInputError: If the cursor is at or past the end
        """
        if self.is_eof:
            raise OutOfInputError(ErrorTemplate.out_of_input(self._source, self._pos))
        return self._source[self._pos]

    def take_one(self) -> str:
        """Return the current character and advance by one.

        Raises:
            OutOfInputError: If the cursor is at or past the end
        """
        char = self.peek()
        self._pos += 1
        return char

    def take_n(self, n: int) -> str:
        """Return up to n characters and advance past them.

        The result is clipped to the remaining input, so a short result
        signals the caller that the literal cannot match.
        """
        end = min(self._pos + n, len(self._source))
        taken = self._source[self._pos : end]
        self._pos = end
        return taken

    def take_digit_run(self) -> str:
        """Consume a run of ASCII digits and thousands separators.

        Separators are consumed but left out of the result. The run stops
        at the first other character or at the end of input.

        Returns:
            The digits of the run, at least one

        Raises:
            DigitExpectedError: If the run holds no digit (separators alone
                do not count)
        """
        start = self._pos
        source = self._source
        separator = self._thousands_separator
        digits: list[str] = []

        pos = start
        while pos < len(source):
            char = source[pos]
            if char in _ASCII_DIGITS:
                digits.append(char)
            elif char != separator:
                break
            pos += 1

        if not digits:
            raise DigitExpectedError(ErrorTemplate.digit_expected(source, start))

        self._pos = pos
        return "".join(digits)
