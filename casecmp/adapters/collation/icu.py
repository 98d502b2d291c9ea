"""ICU collation adapter.

Uses PyICU's Collator at secondary strength, which distinguishes base
letters and accents but ignores case. Install with the `icu` extra.
"""

import logging
import threading

import icu

from casecmp.core.errors import LocaleNotFoundError
from casecmp.core.models import INVARIANT_LOCALE, Locale, is_invariant_name
from casecmp.core.ports import CollationPort

logger = logging.getLogger(__name__)


class ICUCollation(CollationPort):
    """Culture-aware collation through the ICU library.

    Resolved locales and collators are created lazily, one per name,
    and shared. ICU
    collators are not documented as safe for concurrent use from
    Python, so every comparison runs under the adapter's lock.
    """

    def __init__(self, strength: int = icu.Collator.SECONDARY):
        self.strength = strength
        self._collators: dict[str, icu.Collator] = {}
        self._resolved: dict[str, Locale] = {}
        self._lock = threading.Lock()
        self._available = frozenset(icu.Locale.getAvailableLocales())

    def resolve(self, name: str) -> Locale:
        if name is None:
            raise LocaleNotFoundError("None")
        if is_invariant_name(name):
            return INVARIANT_LOCALE

        key = name.strip()
        with self._lock:
            cached = self._resolved.get(key)
        if cached is not None:
            return cached

        icu_locale = icu.Locale(key.replace("-", "_"))
        language = icu_locale.getLanguage()
        if not language or (
            icu_locale.getName() not in self._available
            and language not in self._available
        ):
            raise LocaleNotFoundError(name)

        territory = icu_locale.getCountry() or None
        canonical = icu_locale.getName().replace("_", "-")
        locale = Locale(name=canonical, language=language, territory=territory)
        with self._lock:
            return self._resolved.setdefault(key, locale)

    def compare(self, a: str, b: str, locale: Locale) -> int:
        with self._lock:
            collator = self._collator(locale)
            result = collator.compare(a, b)
        return (result > 0) - (result < 0)

    def _collator(self, locale: Locale) -> "icu.Collator":
        """Return the cached collator for a locale. Caller holds the lock."""
        collator = self._collators.get(locale.name)
        if collator is None:
            if locale.is_invariant:
                icu_locale = icu.Locale.getRoot()
            else:
                icu_locale = icu.Locale(locale.name.replace("-", "_"))
            collator = icu.Collator.createInstance(icu_locale)
            collator.setStrength(self.strength)
            self._collators[locale.name] = collator
            logger.debug(f"Created ICU collator for {locale}")
        return collator
