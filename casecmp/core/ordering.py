"""Three-way ordering strategies used by the comparer.

A comparer picks one of two orderings for each pair of operands:
StringOrdering when both are strings, NaturalOrdering otherwise.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from .errors import TypeMismatchError
from .models import Locale
from .ports import CollationPort


def sign(value: int) -> int:
    """Collapse any integer to -1, 0 or 1."""
    return (value > 0) - (value < 0)


@runtime_checkable
class SupportsCompareTo(Protocol):
    """Values that carry their own three-way ordering."""

    def compare_to(self, other: Any) -> int:
        ...


class ThreeWayOrdering(ABC):
    """Capability contract: order two values as -1, 0 or 1."""

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        """Return -1, 0 or 1 for a < b, a == b, a > b."""


class StringOrdering(ThreeWayOrdering):
    """Case-insensitive culture-aware ordering bound to one locale."""

    def __init__(self, collation: CollationPort, locale: Locale):
        self.collation = collation
        self.locale = locale

    def compare(self, a: str, b: str) -> int:
        return sign(self.collation.compare(a, b, self.locale))


class NaturalOrdering(ThreeWayOrdering):
    """Ordering for non-string values.

    Prefers a value's own compare_to() when it has one, otherwise falls
    back to the rich comparison operators. Partially ordered values
    (NaN, disjoint sets) that are neither less, greater nor equal are
    rejected rather than treated as equal. No locale is involved.
    """

    def compare(self, a: Any, b: Any) -> int:
        if isinstance(a, SupportsCompareTo):
            return sign(a.compare_to(b))
        try:
            if a < b:
                return -1
            if a > b:
                return 1
            if a == b:
                return 0
        except TypeError as exc:
            raise TypeMismatchError(a, b) from exc
        raise TypeMismatchError(a, b)


NATURAL_ORDERING = NaturalOrdering()
