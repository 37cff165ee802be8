"""Property-based tests for the pattern decoder.

Babel's CLDR number formatter is used as an independent producer of
grouped, locale-specific digit strings:
- Round trip: Babel-formatted amounts decode to the original minor units
- Whitespace insensitivity: inserting spaces never changes the result
- Minor normalization: extra fraction digits are truncated, never rounded
- Robustness (fuzz): arbitrary input never raises anything but MoneyError
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from babel.numbers import format_decimal
from hypothesis import event, given, settings
from hypothesis import strategies as st

from moneypattern import CurrencyDescriptor, DecodedAmount, MoneyError, PatternDecoder
from moneypattern.core.cldr import default_pattern

_LOCALE_SEPARATORS = {
    "en_US": (".", ","),
    "de_DE": (",", "."),
}

minor_amounts = st.integers(min_value=-(10**15), max_value=10**15)
precisions = st.integers(min_value=0, max_value=6)
locales = st.sampled_from(sorted(_LOCALE_SEPARATORS))


def _currency(precision: int, locale: str) -> CurrencyDescriptor:
    decimal_separator, thousands_separator = _LOCALE_SEPARATORS[locale]
    return CurrencyDescriptor(
        "XTS",
        precision,
        pattern=default_pattern(precision, decimal_separator),
        decimal_separator=decimal_separator,
        thousands_separator=thousands_separator,
    )


def _babel_format(value: Decimal, precision: int, locale: str) -> str:
    number_format = "#,##0" + ("." + "0" * precision if precision else "")
    return format_decimal(value, format=number_format, locale=locale)


class TestBabelRoundTrip:
    """Property: decode("$" + babel_format(x)) == x."""

    @given(minor=minor_amounts, precision=precisions, locale=locales)
    @settings(deadline=None)
    def test_grouped_amount_round_trips(self, minor: int, precision: int, locale: str) -> None:
        """Property: CLDR-grouped amounts decode to their exact minor units."""
        currency = _currency(precision, locale)
        value = DecodedAmount(minor, currency).amount

        text = "$" + _babel_format(value, precision, locale)
        event(f"locale={locale}")

        result = PatternDecoder(currency, currency.pattern).decode(text)

        assert result.minor_units == minor, f"{text!r} decoded as {result.minor_units}"

    @given(minor=minor_amounts, precision=precisions)
    @settings(deadline=None)
    def test_grouping_pattern_equals_plain_pattern(self, minor: int, precision: int) -> None:
        """Property: '#,##0.00' and '0.00' decode identically."""
        currency = _currency(precision, "en_US")
        text = "$" + _babel_format(DecodedAmount(minor, currency).amount, precision, "en_US")
        grouped = "S#,##0" + ("." + "0" * precision if precision else "")

        plain_result = PatternDecoder(currency, currency.pattern).decode(text)
        grouped_result = PatternDecoder(currency, grouped).decode(text)

        assert plain_result == grouped_result


class TestWhitespaceInsensitivity:
    """Property: whitespace in the input is irrelevant."""

    @given(
        minor=minor_amounts,
        spaces=st.lists(st.sampled_from([" ", "\t", "\u00a0", "\n"]), min_size=1, max_size=5),
        data=st.data(),
    )
    def test_inserted_whitespace_is_ignored(
        self, minor: int, spaces: list[str], data: st.DataObject
    ) -> None:
        """Property: inserting whitespace anywhere yields the same amount."""
        currency = _currency(2, "en_US")
        text = "$" + _babel_format(DecodedAmount(minor, currency).amount, 2, "en_US")

        padded = text
        for space in spaces:
            index = data.draw(st.integers(min_value=0, max_value=len(padded)))
            padded = padded[:index] + space + padded[index:]

        decoder = PatternDecoder(currency, currency.pattern)

        assert decoder.decode(padded) == decoder.decode(text)


class TestMinorNormalization:
    """Property: the minor field is cut or padded to the precision."""

    @given(
        major=st.integers(min_value=0, max_value=10**12),
        fraction=st.text(alphabet="0123456789", min_size=1, max_size=10),
        precision=precisions,
    )
    def test_fraction_is_truncated_or_padded(
        self, major: int, fraction: str, precision: int
    ) -> None:
        """Property: minor == int(fraction[:p].ljust(p, '0')), no rounding."""
        currency = CurrencyDescriptor("XTS", precision)
        result = PatternDecoder(currency, "S0.00").decode(f"${major}.{fraction}")

        expected_minor = int(fraction[:precision].ljust(precision, "0")) if precision else 0
        assert result.minor_units == major * 10**precision + expected_minor

    @given(major=st.integers(min_value=0, max_value=10**12), precision=precisions)
    def test_sign_negates_total(self, major: int, precision: int) -> None:
        """Property: '$-X.YY' == -('$X.YY')."""
        currency = CurrencyDescriptor("XTS", precision)
        decoder = PatternDecoder(currency, "S0.00")

        positive = decoder.decode(f"${major}.50")
        negative = decoder.decode(f"$-{major}.50")

        assert negative.minor_units == -positive.minor_units


@pytest.mark.fuzz
class TestArbitraryInput:
    """Property: arbitrary text either decodes or raises a MoneyError."""

    @given(value=st.text(max_size=40))
    @settings(max_examples=5000)
    def test_no_unexpected_exceptions(self, value: str) -> None:
        decoder = PatternDecoder(CurrencyDescriptor("USD", 2), "SCCC #,##0.00")

        try:
            result = decoder.decode(value)
        except MoneyError:
            return

        assert isinstance(result.minor_units, int)
