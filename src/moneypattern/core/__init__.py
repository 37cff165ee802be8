"""Core value types shared across the syntax, parsing and runtime layers.

Python 3.13+.
"""

from .amount import DecodedAmount
from .descriptor import CurrencyDescriptor

__all__ = ["CurrencyDescriptor", "DecodedAmount"]
