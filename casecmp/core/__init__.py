"""Core comparison logic for casecmp.

This package contains zero external dependencies and represents the
pure comparison rules. Locale data and collation come from the adapters
package through the ports defined in ports.py.
"""

from .ambient import LocaleContext
from .comparer import CaseInsensitiveComparer, CurrentLocaleComparer
from .errors import (
    CaseCompareError,
    InvalidArgumentError,
    LocaleNotFoundError,
    TypeMismatchError,
)
from .models import INVARIANT_LOCALE, Locale, is_invariant_name

__all__ = [
    "CaseCompareError",
    "CaseInsensitiveComparer",
    "CurrentLocaleComparer",
    "INVARIANT_LOCALE",
    "InvalidArgumentError",
    "Locale",
    "LocaleContext",
    "LocaleNotFoundError",
    "TypeMismatchError",
    "is_invariant_name",
]
