"""CLDR-backed currency descriptor construction.

Builds CurrencyDescriptor instances from Unicode CLDR data via Babel, so a
caller can describe "EUR as written in de_DE" without hand-typing separators.
The locale is always explicit; nothing here guesses a locale from input.

Thread-safe. Parsed Babel locales are cached per locale code.

Python 3.13+.
"""

import functools

from babel import Locale
from babel import UnknownLocaleError as BabelUnknownLocaleError
from babel.numbers import (
    get_currency_precision,
    get_currency_symbol,
    get_decimal_symbol,
    get_group_symbol,
)

from moneypattern.constants import CODE_MARKER, SYMBOL_MARKER
from moneypattern.diagnostics import ErrorTemplate, UnknownLocaleError

from .descriptor import CurrencyDescriptor

__all__ = ["default_pattern", "descriptor_from_locale", "resolve_locale"]


@functools.lru_cache(maxsize=128)
def resolve_locale(locale_code: str) -> Locale:
    """Parse a BCP 47 ("de-DE") or POSIX ("de_DE") locale code.

    Raises:
        UnknownLocaleError: If Babel has no CLDR data for the locale
    """
    try:
        return Locale.parse(locale_code.replace("-", "_"))
    except (BabelUnknownLocaleError, ValueError) as e:
        diagnostic = ErrorTemplate.locale_unknown(locale_code, str(e))
        raise UnknownLocaleError(diagnostic) from e


def default_pattern(
    precision: int, decimal_separator: str, *, with_code: bool = False
) -> str:
    """Build the canonical pattern for a precision and decimal separator.

    Example:
        >>> default_pattern(2, ",")
        'S0,00'
        >>> default_pattern(0, ".", with_code=True)
        'SCCC0'
    """
    prefix = SYMBOL_MARKER + (CODE_MARKER * 3 if with_code else "")
    if precision == 0:
        return f"{prefix}0"
    return f"{prefix}0{decimal_separator}{'0' * precision}"


def descriptor_from_locale(
    code: str,
    locale_code: str,
    *,
    symbol: str | None = None,
    pattern: str | None = None,
) -> CurrencyDescriptor:
    """Create a descriptor for a currency as written in a locale.

    Args:
        code: ISO 4217 currency code (e.g. "EUR")
        locale_code: BCP 47 locale identifier (e.g. "de-DE" or "de_DE")
        symbol: Override for the CLDR currency symbol
        pattern: Override for the generated default pattern

    Returns:
        Descriptor whose symbol, separators and precision come from CLDR

    Raises:
        UnknownLocaleError: If Babel does not know the locale
        ValueError: If the locale's decimal and group symbols coincide

    Example:
        >>> eur = descriptor_from_locale("EUR", "de_DE")
        >>> eur.symbol, eur.decimal_separator, eur.thousands_separator
        ('€', ',', '.')
        >>> eur.pattern
        'S0,00'
    """
    locale = resolve_locale(locale_code)

    precision = get_currency_precision(code)
    decimal_separator = get_decimal_symbol(locale)

    return CurrencyDescriptor(
        code=code,
        precision=precision,
        symbol=symbol if symbol is not None else get_currency_symbol(code, locale=locale),
        pattern=pattern if pattern is not None else default_pattern(precision, decimal_separator),
        decimal_separator=decimal_separator,
        thousands_separator=get_group_symbol(locale),
    )
