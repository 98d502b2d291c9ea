"""Case-mapping collation backed by Babel's CLDR locale data.

Locale identifiers are validated against the CLDR data shipped with
Babel. Strings are compared by their locale-tailored upper-case form,
which is enough for case-insensitive equality and a stable code-point
ordering without a full collation engine.
"""

import functools
import logging
import unicodedata

from babel import Locale as BabelLocale
from babel import UnknownLocaleError

from casecmp.core.errors import LocaleNotFoundError
from casecmp.core.models import INVARIANT_LOCALE, Locale, is_invariant_name
from casecmp.core.ports import CollationPort

logger = logging.getLogger(__name__)

# Turkic languages pair dotted i with İ and dotless ı with I.
_TURKIC_UPPER = str.maketrans({"i": "İ", "ı": "I"})

_UPPER_TAILORINGS: dict[str, dict[int, str]] = {
    "tr": _TURKIC_UPPER,
    "az": _TURKIC_UPPER,
}


@functools.lru_cache(maxsize=256)
def _parse_locale(name: str) -> Locale:
    try:
        parsed = BabelLocale.parse(name.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise LocaleNotFoundError(name) from exc
    canonical = str(parsed).replace("_", "-")
    logger.debug(f"Resolved locale {name!r} as {canonical!r}")
    return Locale(name=canonical, language=parsed.language, territory=parsed.territory)


class CaseMappingCollation(CollationPort):
    """Default collation backend.

    Invariant comparisons use Python's Unicode case mapping; named
    locales add their language's casing tailoring on top. Stateless
    apart from the shared resolution cache, so one instance can serve
    every thread.
    """

    def resolve(self, name: str) -> Locale:
        if name is None:
            raise LocaleNotFoundError("None")
        if is_invariant_name(name):
            return INVARIANT_LOCALE
        return _parse_locale(name)

    def compare(self, a: str, b: str, locale: Locale) -> int:
        key_a = self.upper_key(a, locale)
        key_b = self.upper_key(b, locale)
        return (key_a > key_b) - (key_a < key_b)

    @staticmethod
    def upper_key(value: str, locale: Locale) -> str:
        """Locale-tailored upper-case form used for ordering.

        Examples:
        'file' under invariant → 'FILE'
        'file' under tr-TR → 'FİLE'
        """
        value = unicodedata.normalize("NFC", value)
        tailoring = _UPPER_TAILORINGS.get(locale.language)
        if tailoring is not None:
            value = value.translate(tailoring)
        return value.upper()
