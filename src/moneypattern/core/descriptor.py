"""Currency descriptor value object.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from moneypattern.constants import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_PATTERN,
    DEFAULT_SYMBOL,
    DEFAULT_THOUSANDS_SEPARATOR,
)

__all__ = ["CurrencyDescriptor"]


@dataclass(frozen=True, slots=True)
class CurrencyDescriptor:
    """Immutable set of currency attributes consumed by the decoder.

    Descriptors are constructed by the caller (or by
    :func:`moneypattern.core.cldr.descriptor_from_locale`); the registry only
    holds references to them.

    Attributes:
        code: Currency code, uppercase by convention (e.g. "USD")
        precision: Number of minor-unit digits (2 for cents)
        symbol: Currency symbol matched by the "S" pattern marker
        pattern: Default pattern used when none is supplied to parse()
        decimal_separator: Single character separating major and minor units
        thousands_separator: Single grouping character, ignored on input

    Example:
        >>> usd = CurrencyDescriptor("USD", 2)
        >>> usd.symbol, usd.pattern
        ('$', 'S0.00')
        >>> usd.to_minor_units(12, 34)
        1234
    """

    code: str
    precision: int
    symbol: str = DEFAULT_SYMBOL
    pattern: str = DEFAULT_PATTERN
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR

    def __post_init__(self) -> None:
        """Validate descriptor invariants.

        Raises:
            ValueError: If the code is empty, precision is negative, either
                separator is not a single character, or both separators are
                the same character.
        """
        if not self.code:
            msg = "CurrencyDescriptor.code must be a non-empty string"
            raise ValueError(msg)
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            msg = f"CurrencyDescriptor.precision must be an int, got {type(self.precision).__name__}"
            raise TypeError(msg)
        if self.precision < 0:
            msg = f"CurrencyDescriptor.precision must be >= 0, got {self.precision}"
            raise ValueError(msg)
        if len(self.decimal_separator) != 1:
            msg = (
                "CurrencyDescriptor.decimal_separator must be a single character, "
                f"got {self.decimal_separator!r}"
            )
            raise ValueError(msg)
        if len(self.thousands_separator) != 1:
            msg = (
                "CurrencyDescriptor.thousands_separator must be a single character, "
                f"got {self.thousands_separator!r}"
            )
            raise ValueError(msg)
        if self.decimal_separator == self.thousands_separator:
            msg = (
                "CurrencyDescriptor separators must differ, both are "
                f"{self.decimal_separator!r}"
            )
            raise ValueError(msg)

    @property
    def precision_factor(self) -> int:
        """Number of minor units in one major unit (10 ** precision)."""
        return 10**self.precision

    def to_minor_units(self, major_units: int, minor_units: int) -> int:
        """Combine major and minor magnitudes into a minor-unit amount.

        Both arguments must already carry the same sign.
        """
        return major_units * self.precision_factor + minor_units
