"""Currency registry and dispatch.

Maps currency codes to descriptors and resolves which currency a raw
monetary string is written in before handing it to the pattern decoder.

Nothing is registered by default: every descriptor is registered explicitly.
Re-registering a code replaces the previous descriptor (last write wins).

Architecture:
    CurrencyRegistry is an explicit context object so that tests and
    independent subsystems can hold isolated registries. A module-level
    default instance backs the process-wide convenience functions
    (register, find, parse, ...).

Thread Safety:
    Lookups share a read lock; registration takes the write lock. No
    operation spans more than one lock acquisition.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from moneypattern.constants import MIN_CODE_MARKERS
from moneypattern.diagnostics import (
    ErrorTemplate,
    InvalidPatternError,
    UnknownCurrencyError,
)
from moneypattern.parsing import PatternDecoder
from moneypattern.syntax import contains_code, count_code_markers

from .rwlock import RWLock

if TYPE_CHECKING:
    from collections.abc import Iterable

    from moneypattern.core import CurrencyDescriptor, DecodedAmount

__all__ = [
    "CurrencyRegistry",
    "clear",
    "default_registry",
    "extract_code",
    "find",
    "find_by_code",
    "parse",
    "register",
    "register_all",
    "registered",
]

logger = logging.getLogger(__name__)


def extract_code(monetary_value: str, code_length: int) -> str:
    """Extract the single run of ``code_length`` letters from a value.

    Args:
        monetary_value: Raw monetary string, e.g. ``"$USD1500.00"``
        code_length: Number of letters in the code

    Returns:
        The letters found, e.g. ``"USD"``

    Raises:
        InvalidPatternError: If no such run, or more than one, is present

    Example:
        >>> extract_code("$USD1500.00", 3)
        'USD'
    """
    matches = list(re.finditer(f"[A-Za-z]{{{code_length}}}", monetary_value))
    if not matches:
        raise InvalidPatternError(ErrorTemplate.code_not_found(monetary_value, code_length))
    if len(matches) > 1:
        raise InvalidPatternError(
            ErrorTemplate.code_ambiguous(monetary_value, code_length, len(matches))
        )
    return matches[0].group()


class CurrencyRegistry:
    """Code -> descriptor directory with currency discovery and parsing.

    Example:
        >>> from moneypattern import CurrencyDescriptor
        >>> registry = CurrencyRegistry()
        >>> registry.register(CurrencyDescriptor("USD", 2))
        >>> registry.parse("$USD1,500.00").minor_units
        150000
    """

    __slots__ = ("_directory", "_lock")

    def __init__(self, currencies: Iterable[CurrencyDescriptor] = ()) -> None:
        """Create a registry, optionally pre-populated.

        Args:
            currencies: Descriptors to register immediately
        """
        self._directory: dict[str, CurrencyDescriptor] = {}
        self._lock = RWLock()
        self.register_all(currencies)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._directory)

    def __contains__(self, code: object) -> bool:
        with self._lock.read():
            return code in self._directory

    # Registration ----------------------------------------------------------

    def register(self, currency: CurrencyDescriptor) -> None:
        """Register a descriptor under its code, replacing any previous one."""
        with self._lock.write():
            self._store(currency)

    def register_all(self, currencies: Iterable[CurrencyDescriptor]) -> None:
        """Register several descriptors under a single write lock."""
        batch = list(currencies)
        if not batch:
            return
        with self._lock.write():
            for currency in batch:
                self._store(currency)

    def _store(self, currency: CurrencyDescriptor) -> None:
        # Caller holds the write lock.
        previous = self._directory.get(currency.code)
        if previous is not None and previous != currency:
            logger.info("Replacing registered currency: %s", currency.code)
        self._directory[currency.code] = currency
        logger.debug("Registered currency: %s", currency.code)

    def clear(self) -> None:
        """Remove every registered descriptor."""
        with self._lock.write():
            self._directory.clear()

    # Lookup ----------------------------------------------------------------

    def find(self, code: str) -> CurrencyDescriptor | None:
        """Return the descriptor registered under ``code``, or None."""
        with self._lock.read():
            return self._directory.get(code)

    def registered(self) -> tuple[CurrencyDescriptor, ...]:
        """All registered descriptors in registration order."""
        with self._lock.read():
            return tuple(self._directory.values())

    def find_by_code(self, monetary_value: str) -> CurrencyDescriptor | None:
        """Find the currency whose code occurs in a raw value.

        When several registered codes occur, the longest wins ("USDX" beats
        "USD"). Among codes of equal length the one registered last wins.

        Returns:
            The matching descriptor, or None if no registered code occurs
        """
        by_length = sorted(self.registered(), key=lambda c: len(c.code))

        match: CurrencyDescriptor | None = None
        for currency in by_length:
            if currency.code in monetary_value:
                match = currency
        return match

    # Dispatch --------------------------------------------------------------

    def parse(self, monetary_value: str, pattern: str | None = None) -> DecodedAmount:
        """Parse a monetary string containing a currency code.

        Without a pattern, the currency is discovered by searching the value
        for a registered code and its default pattern is used. With a
        pattern, its "C" markers say how long the code is; that many
        consecutive letters are cut from the value and looked up.

        Patterns without a "C" marker do not match the code, so the code is
        stripped out of the value before decoding: ``"$USD10.00"`` is decoded
        as ``"$10.00"``.

        Args:
            monetary_value: Raw string, e.g. ``"$USD1,500.00"``
            pattern: Optional pattern overriding the currency default

        Returns:
            The decoded amount, tagged with the resolved currency

        Raises:
            InvalidPatternError: If the pattern is malformed, has fewer than
                two "C" markers, or the code cannot be located in the value
            UnknownCurrencyError: If no registered currency matches
            MoneyParseError: If the value does not match the pattern
        """
        if pattern is None:
            currency = self.find_by_code(monetary_value)
            if currency is None:
                raise UnknownCurrencyError(ErrorTemplate.currency_unknown(monetary_value))
        else:
            code_length = count_code_markers(pattern)
            if code_length < MIN_CODE_MARKERS:
                raise InvalidPatternError(
                    ErrorTemplate.pattern_code_too_short(pattern, code_length, MIN_CODE_MARKERS)
                )
            code = extract_code(monetary_value, code_length)
            currency = self.find(code)
            if currency is None:
                raise UnknownCurrencyError(ErrorTemplate.currency_unknown(code))

        effective_pattern = pattern if pattern is not None else currency.pattern

        value = monetary_value
        if not contains_code(effective_pattern):
            value = _strip_code(currency, monetary_value)

        logger.debug(
            "Parsing %r as %s with pattern %r", monetary_value, currency.code, effective_pattern
        )
        return PatternDecoder(currency, effective_pattern).decode(value)


def _strip_code(currency: CurrencyDescriptor, monetary_value: str) -> str:
    """Remove the currency code from a value, e.g. ``$USD10.00`` -> ``$10.00``."""
    if contains_code(currency.pattern):
        return monetary_value
    code = extract_code(monetary_value, len(currency.code))
    return monetary_value.replace(code, "", 1)


# Process-wide default registry ---------------------------------------------

_default_registry = CurrencyRegistry()


def default_registry() -> CurrencyRegistry:
    """The registry used by the module-level convenience functions."""
    return _default_registry


def register(currency: CurrencyDescriptor) -> None:
    """Register a descriptor in the default registry."""
    _default_registry.register(currency)


def register_all(currencies: Iterable[CurrencyDescriptor]) -> None:
    """Register several descriptors in the default registry."""
    _default_registry.register_all(currencies)


def find(code: str) -> CurrencyDescriptor | None:
    """Look up a code in the default registry."""
    return _default_registry.find(code)


def find_by_code(monetary_value: str) -> CurrencyDescriptor | None:
    """Discover the currency of a raw value using the default registry."""
    return _default_registry.find_by_code(monetary_value)


def registered() -> tuple[CurrencyDescriptor, ...]:
    """All descriptors in the default registry."""
    return _default_registry.registered()


def clear() -> None:
    """Empty the default registry."""
    _default_registry.clear()


def parse(monetary_value: str, pattern: str | None = None) -> DecodedAmount:
    """Parse a monetary string using the default registry."""
    return _default_registry.parse(monetary_value, pattern)
