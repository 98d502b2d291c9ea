"""Culture-aware, case-insensitive comparison of arbitrary values.

Strings are ordered by a locale's case-insensitive collation, None sorts
before everything else, and any other pair of values falls back to their
natural ordering.
"""

import functools
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any

from .errors import InvalidArgumentError, TypeMismatchError
from .models import Locale
from .ordering import NATURAL_ORDERING, StringOrdering
from .ports import CollationPort, LocaleProviderPort

logger = logging.getLogger(__name__)


class _NullsFirstComparer(ABC):
    """Shared comparison contract; subclasses supply the string ordering."""

    __slots__ = ()

    @abstractmethod
    def _string_ordering(self) -> StringOrdering:
        """Ordering used when both operands are strings."""

    def compare(self, a: Any, b: Any) -> int:
        """Compare two values.

        Returns:
            -1 if a sorts before b, 0 if they are equal, 1 otherwise.

        Raises:
            TypeMismatchError: If exactly one operand is a string, or the
                two non-string operands have no ordering.
        """
        if a is None:
            return 0 if b is None else -1
        if b is None:
            return 1

        a_is_str = isinstance(a, str)
        b_is_str = isinstance(b, str)
        if a_is_str and b_is_str:
            return self._string_ordering().compare(a, b)
        if a_is_str or b_is_str:
            raise TypeMismatchError(a, b)
        return NATURAL_ORDERING.compare(a, b)

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    def equals(self, a: Any, b: Any) -> bool:
        return self.compare(a, b) == 0

    def sort_key(self) -> Callable[[Any], Any]:
        """Key function for sorted()/list.sort() built on compare()."""
        return functools.cmp_to_key(self.compare)

    def sorted(self, values: Iterable[Any], reverse: bool = False) -> list[Any]:
        """Return a new list of values in this comparer's order.

        The sort is stable, so values that compare equal keep their
        original relative order.
        """
        return sorted(values, key=self.sort_key(), reverse=reverse)


class CaseInsensitiveComparer(_NullsFirstComparer):
    """Comparer permanently bound to one locale.

    Its ordering never changes after construction, whatever happens to
    the ambient locale later.
    """

    __slots__ = ("_collation", "_locale", "_ordering")

    def __init__(self, locale: Locale, collation: CollationPort):
        if locale is None:
            raise InvalidArgumentError("locale")
        if collation is None:
            raise InvalidArgumentError("collation")
        if not isinstance(locale, Locale):
            raise TypeError(
                f"locale must be a resolved Locale, got {type(locale).__name__}"
            )
        self._collation = collation
        self._locale = locale
        self._ordering = StringOrdering(collation, locale)

    @classmethod
    def for_current(
        cls, provider: LocaleProviderPort, collation: CollationPort
    ) -> "CaseInsensitiveComparer":
        """Bind to whatever the ambient locale is right now.

        The locale is captured once; later ambient changes are ignored.

        Raises:
            LocaleNotFoundError: If the ambient locale cannot be resolved.
        """
        locale = collation.resolve(provider.current_locale())
        logger.debug(f"Captured ambient locale {locale}")
        return cls(locale, collation)

    @property
    def locale(self) -> Locale:
        return self._locale

    def _string_ordering(self) -> StringOrdering:
        return self._ordering

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={str(self._locale)!r})"


class CurrentLocaleComparer(_NullsFirstComparer):
    """Comparer that follows the ambient locale.

    The provider is consulted on every string comparison, so switching
    the ambient locale immediately changes how strings are ordered. The
    ordering for the last locale name seen is kept and reused until the
    name changes.
    """

    __slots__ = ("_cached", "_collation", "_provider")

    def __init__(self, provider: LocaleProviderPort, collation: CollationPort):
        if provider is None:
            raise InvalidArgumentError("provider")
        if collation is None:
            raise InvalidArgumentError("collation")
        self._provider = provider
        self._collation = collation
        self._cached: tuple[str, StringOrdering] | None = None

    @property
    def locale(self) -> Locale:
        """The locale the next comparison would use."""
        return self._string_ordering().locale

    def _string_ordering(self) -> StringOrdering:
        name = self._provider.current_locale()
        cached = self._cached
        if cached is not None and cached[0] == name:
            return cached[1]
        ordering = StringOrdering(self._collation, self._collation.resolve(name))
        # Name and ordering are replaced together.
        self._cached = (name, ordering)
        return ordering

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self._provider!r})"
