"""casecmp: culture-aware, case-insensitive comparison.

Quick start:

    from casecmp import comparer_for, default_invariant_comparer

    comparer_for("tr-TR").compare("file", "FILE")        # 1
    default_invariant_comparer().compare("file", "FILE")  # 0
"""

from .core import (
    INVARIANT_LOCALE,
    CaseCompareError,
    CaseInsensitiveComparer,
    CurrentLocaleComparer,
    InvalidArgumentError,
    Locale,
    LocaleContext,
    LocaleNotFoundError,
    TypeMismatchError,
)
from .defaults import (
    AMBIENT,
    comparer_for,
    configure,
    default_comparer,
    default_invariant_comparer,
    new_comparer,
)

__all__ = [
    "AMBIENT",
    "CaseCompareError",
    "CaseInsensitiveComparer",
    "CurrentLocaleComparer",
    "INVARIANT_LOCALE",
    "InvalidArgumentError",
    "Locale",
    "LocaleContext",
    "LocaleNotFoundError",
    "TypeMismatchError",
    "comparer_for",
    "configure",
    "default_comparer",
    "default_invariant_comparer",
    "new_comparer",
]
