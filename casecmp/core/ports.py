"""Port interfaces for the casecmp comparer.

These abstract base classes define the boundaries between core
comparison logic and external globalization libraries. Implementations
live in the adapters/ package (collation) and core/ambient.py (the
ambient locale slot).

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - CollationPort: Locale lookup and case-insensitive string ordering
   - LocaleProviderPort: Read the ambient "current" locale
"""

from abc import ABC, abstractmethod

from .models import Locale


class CollationPort(ABC):
    """Port for culture-aware string comparison.

    Adapters implementing this port wrap an external globalization
    library (CLDR data, ICU, etc.) and expose it through two calls.

    Implementations must handle:
    - Invariant names ("" and "invariant") resolving to INVARIANT_LOCALE
    - Thread-safe comparison (comparers are shared across threads)
    - Locale-specific casing rules (e.g. the Turkish dotted/dotless i)
    """

    @abstractmethod
    def resolve(self, name: str) -> Locale:
        """Look up a locale by identifier.

        Args:
            name: Locale identifier such as "tr-TR" or "en_US".
                Empty string or "invariant" selects invariant rules.

        Returns:
            The resolved Locale.

        Raises:
            LocaleNotFoundError: If the identifier is not recognised.
        """

    @abstractmethod
    def compare(self, a: str, b: str, locale: Locale) -> int:
        """Order two strings case-insensitively under a locale.

        Args:
            a: Left operand.
            b: Right operand.
            locale: Locale previously returned by resolve().

        Returns:
            -1, 0 or 1.
        """


class LocaleProviderPort(ABC):
    """Port for reading the ambient locale.

    The comparer only ever reads this value; whoever owns the provider
    is responsible for changing it.
    """

    @abstractmethod
    def current_locale(self) -> str:
        """Return the identifier of the currently active locale.

        Returns:
            Locale identifier, or "" for invariant.
        """
