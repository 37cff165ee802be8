"""Registry runtime: thread-safe currency directory and dispatch.

Python 3.13+.
"""

from .registry import CurrencyRegistry, default_registry, extract_code
from .rwlock import RWLock

__all__ = ["CurrencyRegistry", "RWLock", "default_registry", "extract_code"]
