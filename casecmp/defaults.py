"""Process-wide comparers and their wiring.

Code that passes a LocaleProviderPort and CollationPort explicitly does
not need this module. It exists for callers that want the familiar
shared instances:

- default_comparer(): follows AMBIENT on every comparison
- default_invariant_comparer(): always uses invariant rules
- new_comparer(): captures AMBIENT once, at construction
- comparer_for(locale): bound to an explicit locale

The slot is initialised by configure(), or on first use from Settings.
"""

import logging
import threading

from casecmp.adapters.collation.builtin import CaseMappingCollation
from casecmp.config import Settings, load_settings
from casecmp.core.ambient import LocaleContext
from casecmp.core.comparer import CaseInsensitiveComparer, CurrentLocaleComparer
from casecmp.core.errors import InvalidArgumentError
from casecmp.core.models import INVARIANT_LOCALE, Locale
from casecmp.core.ports import CollationPort

logger = logging.getLogger(__name__)

AMBIENT = LocaleContext()

_lock = threading.RLock()
_collation: CollationPort | None = None
_default: CurrentLocaleComparer | None = None
_default_invariant: CaseInsensitiveComparer | None = None


def build_collation(settings: Settings) -> CollationPort:
    """Instantiate the collation backend selected by settings."""
    if settings.collation_backend == "builtin":
        return CaseMappingCollation()
    if settings.collation_backend == "icu":
        # Lazy import for optional PyICU dependency
        from casecmp.adapters.collation.icu import ICUCollation

        return ICUCollation()
    raise ValueError(f"Unknown collation backend: {settings.collation_backend}")


def configure(settings: Settings | None = None) -> CollationPort:
    """Initialise the ambient locale and collation backend.

    Replaces any previously configured backend and drops the cached
    shared comparers so they are rebuilt against the new one.

    Returns:
        The collation backend now in use.
    """
    if settings is None:
        settings = load_settings()
    collation = build_collation(settings)

    global _collation, _default, _default_invariant
    with _lock:
        _collation = collation
        _default = None
        _default_invariant = None
        AMBIENT.set_default(settings.default_locale)
    logger.info(
        f"Configured {settings.collation_backend} collation, "
        f"ambient locale {settings.default_locale or 'invariant'!r}"
    )
    return collation


def reset() -> None:
    """Forget all configuration; the next use re-reads Settings."""
    global _collation, _default, _default_invariant
    with _lock:
        _collation = None
        _default = None
        _default_invariant = None
        AMBIENT.set_default("")


def get_collation() -> CollationPort:
    with _lock:
        if _collation is None:
            return configure()
        return _collation


def default_comparer() -> CurrentLocaleComparer:
    """Shared comparer that re-reads the ambient locale on every call."""
    global _default
    with _lock:
        if _default is None:
            _default = CurrentLocaleComparer(AMBIENT, get_collation())
            logger.debug("Created default comparer")
        return _default


def default_invariant_comparer() -> CaseInsensitiveComparer:
    """Shared comparer bound to invariant rules."""
    global _default_invariant
    with _lock:
        if _default_invariant is None:
            _default_invariant = CaseInsensitiveComparer(
                INVARIANT_LOCALE, get_collation()
            )
            logger.debug("Created default invariant comparer")
        return _default_invariant


def new_comparer() -> CaseInsensitiveComparer:
    """Comparer bound to the ambient locale as it is right now.

    Raises:
        LocaleNotFoundError: If the ambient locale is not recognised.
    """
    return CaseInsensitiveComparer.for_current(AMBIENT, get_collation())


def comparer_for(locale: Locale | str) -> CaseInsensitiveComparer:
    """Comparer bound to an explicit locale.

    Args:
        locale: A resolved Locale, or an identifier to resolve.

    Raises:
        InvalidArgumentError: If locale is None.
        LocaleNotFoundError: If an identifier is not recognised.
    """
    if locale is None:
        raise InvalidArgumentError("locale")
    collation = get_collation()
    if isinstance(locale, str):
        locale = collation.resolve(locale)
    return CaseInsensitiveComparer(locale, collation)


__all__ = [
    "AMBIENT",
    "build_collation",
    "comparer_for",
    "configure",
    "default_comparer",
    "default_invariant_comparer",
    "get_collation",
    "new_comparer",
    "reset",
]
