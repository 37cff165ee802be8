"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # =========================================================================
    # PATTERN ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def pattern_no_digits(pattern: str) -> Diagnostic:
        """Pattern has no digit-placeholder run.

        Args:
            pattern: The offending pattern

        Returns:
            Diagnostic for PATTERN_NO_DIGITS
        """
        msg = f"The pattern {pattern!r} does not contain a digit pattern such as '0.00'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NO_DIGITS,
            message=msg,
            hint="Add a run of '0' or '#' placeholders, e.g. 'S0.00'",
            pattern=pattern,
        )

    @staticmethod
    def pattern_multiple_digit_runs(pattern: str, count: int) -> Diagnostic:
        """Pattern has more than one digit-placeholder run.

        Args:
            pattern: The offending pattern
            count: Number of runs found

        Returns:
            Diagnostic for PATTERN_MULTIPLE_DIGIT_RUNS
        """
        msg = f"The pattern {pattern!r} contains {count} numeric patterns; exactly one is allowed"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_MULTIPLE_DIGIT_RUNS,
            message=msg,
            hint="Check that there are no spaces inside the numeric part of the pattern",
            pattern=pattern,
        )

    @staticmethod
    def pattern_invalid_character(pattern: str, index: int) -> Diagnostic:
        """Pattern contains a character with no meaning.

        Args:
            pattern: The offending pattern
            index: Position of the character

        Returns:
            Diagnostic for PATTERN_INVALID_CHARACTER
        """
        char = pattern[index]
        msg = f"Invalid character {char!r} found in pattern at index {index}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_INVALID_CHARACTER,
            message=msg,
            hint="Patterns may only contain 'S', 'C', '0', '#', separators and spaces",
            pattern=pattern,
            pattern_index=index,
            found=char,
        )

    @staticmethod
    def pattern_too_many_code_markers(
        pattern: str, index: int, code: str
    ) -> Diagnostic:
        """Pattern has more "C" markers than the currency code has characters.

        Args:
            pattern: The offending pattern
            index: Position of the surplus marker
            code: The currency code being matched

        Returns:
            Diagnostic for PATTERN_TOO_MANY_CODE_MARKERS
        """
        msg = (
            f"The pattern has more currency code 'C' characters than the "
            f"length of the currency code {code!r} ({len(code)})"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_MANY_CODE_MARKERS,
            message=msg,
            hint=f"Use exactly {len(code)} 'C' markers for this currency",
            pattern=pattern,
            pattern_index=index,
        )

    @staticmethod
    def pattern_code_too_short(pattern: str, count: int, minimum: int) -> Diagnostic:
        """Caller-supplied pattern has too few "C" markers to locate a code.

        Args:
            pattern: The offending pattern
            count: Number of "C" markers found
            minimum: Required minimum

        Returns:
            Diagnostic for PATTERN_CODE_TOO_SHORT
        """
        msg = (
            f"The currency code length in pattern {pattern!r} is {count}; "
            f"it must be at least {minimum} characters long (e.g. 'CC')"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_CODE_TOO_SHORT,
            message=msg,
            hint="Include one 'C' per character of the currency code, e.g. 'CCC0.00'",
            pattern=pattern,
        )

    @staticmethod
    def pattern_multiple_decimals(pattern: str, index: int) -> Diagnostic:
        """Pattern has a decimal literal besides the one in its digit run.

        Args:
            pattern: The offending pattern
            index: Position of the surplus decimal literal

        Returns:
            Diagnostic for PATTERN_MULTIPLE_DECIMALS
        """
        msg = (
            f"The pattern {pattern!r} has a second decimal separator at index {index}; "
            "its minor digits must follow exactly one"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_MULTIPLE_DECIMALS,
            message=msg,
            hint="Remove the extra decimal separator, e.g. 'S0.00'",
            pattern=pattern,
            pattern_index=index,
        )

    # =========================================================================
    # DECODE ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def pattern_mismatch(  # noqa: PLR0913 - every field is reported
        pattern: str,
        pattern_index: int,
        value: str,
        input_index: int,
        expected: str,
        found: str,
    ) -> Diagnostic:
        """Input does not match a literal required by the pattern.

        Args:
            pattern: The pattern being decoded against
            pattern_index: Position of the failing instruction in the pattern
            value: The normalized input
            input_index: Position in the input where the literal was expected
            expected: Literal the pattern requires
            found: Literal actually read from the input

        Returns:
            Diagnostic for PATTERN_MISMATCH
        """
        msg = (
            f"The input {value!r} does not match the pattern {pattern!r}: "
            f"expected {expected!r} at input index {input_index} "
            f"(pattern index {pattern_index}), found {found!r}"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_MISMATCH,
            message=msg,
            hint="Check the symbol, currency code and decimal separator in the input",
            pattern=pattern,
            pattern_index=pattern_index,
            value=value,
            input_index=input_index,
            expected=expected,
            found=found,
        )

    @staticmethod
    def digit_expected(value: str, input_index: int) -> Diagnostic:
        """A digit run was required but no digit was present.

        Args:
            value: The normalized input
            input_index: Position where the digit was expected

        Returns:
            Diagnostic for DIGIT_EXPECTED
        """
        found = value[input_index] if input_index < len(value) else None
        if found is None:
            msg = f"Reached the end of {value!r} at index {input_index} when a digit was expected"
        else:
            msg = (
                f"Character {found!r} at index {input_index} of {value!r} "
                f"is not a digit when a digit was expected"
            )
        return Diagnostic(
            code=DiagnosticCode.DIGIT_EXPECTED,
            message=msg,
            hint="Check that the amount appears where the pattern places its digits",
            value=value,
            input_index=input_index,
            expected="digit",
            found=found,
        )

    @staticmethod
    def out_of_input(value: str, input_index: int) -> Diagnostic:
        """The cursor was read past the end of the input.

        Args:
            value: The normalized input
            input_index: Position that was read

        Returns:
            Diagnostic for OUT_OF_INPUT
        """
        msg = f"Unexpected end of input {value!r} at index {input_index}"
        return Diagnostic(
            code=DiagnosticCode.OUT_OF_INPUT,
            message=msg,
            hint="The input is shorter than the pattern requires",
            value=value,
            input_index=input_index,
        )

    # =========================================================================
    # DISPATCH ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def currency_unknown(code: str) -> Diagnostic:
        """No registered currency matches.

        Args:
            code: The currency code, or the raw value that was searched

        Returns:
            Diagnostic for CURRENCY_UNKNOWN
        """
        msg = f"Unknown currency {code!r}"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Register the currency via CurrencyRegistry.register() and try again",
            value=code,
        )

    @staticmethod
    def code_not_found(value: str, length: int) -> Diagnostic:
        """No alphabetic run of the required length exists in the input.

        Args:
            value: The raw input
            length: Required currency code length

        Returns:
            Diagnostic for CODE_NOT_FOUND
        """
        msg = f"No {length}-letter currency code found in {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CODE_NOT_FOUND,
            message=msg,
            hint="Include the currency code in the input, e.g. 'USD10.00'",
            value=value,
        )

    @staticmethod
    def code_ambiguous(value: str, length: int, count: int) -> Diagnostic:
        """Several alphabetic runs of the required length exist in the input.

        Args:
            value: The raw input
            length: Required currency code length
            count: Number of candidate codes found

        Returns:
            Diagnostic for CODE_AMBIGUOUS
        """
        msg = f"More than one {length}-letter currency code ({count}) found in {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CODE_AMBIGUOUS,
            message=msg,
            hint="The input must contain exactly one currency code",
            value=value,
        )

    # =========================================================================
    # LOCALE ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Unknown locale for descriptor construction.

        Args:
            locale_code: The unknown locale code
            reason: Why Babel rejected it

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale {locale_code!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en_US', 'de_DE', 'lv_LV')",
        )
