"""Decoded monetary amount.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from decimal import Decimal

from .descriptor import CurrencyDescriptor

__all__ = ["DecodedAmount"]


@dataclass(frozen=True, slots=True)
class DecodedAmount:
    """Exact amount in minor units tagged with its currency.

    Python ints are arbitrary precision, so no amount overflows.

    Attributes:
        minor_units: Signed amount in the currency's smallest denomination
        currency: Descriptor the amount was decoded against

    Example:
        >>> amount = DecodedAmount(123456, CurrencyDescriptor("USD", 2))
        >>> amount.amount
        Decimal('1234.56')
    """

    minor_units: int
    currency: CurrencyDescriptor

    @property
    def major_units(self) -> int:
        """Whole major units, truncated toward zero."""
        major, _ = divmod(abs(self.minor_units), self.currency.precision_factor)
        return -major if self.minor_units < 0 else major

    @property
    def amount(self) -> Decimal:
        """Exact decimal value in major units."""
        sign, digits, _ = Decimal(self.minor_units).as_tuple()
        return Decimal((sign, digits, -self.currency.precision))

    @property
    def is_negative(self) -> bool:
        return self.minor_units < 0
