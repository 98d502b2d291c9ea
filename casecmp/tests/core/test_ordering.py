"""Unit tests for the three-way ordering strategies."""

import pytest

from casecmp.core.errors import TypeMismatchError
from casecmp.core.models import INVARIANT_LOCALE
from casecmp.core.ordering import (
    NaturalOrdering,
    StringOrdering,
    SupportsCompareTo,
    ThreeWayOrdering,
    sign,
)
from casecmp.tests.fakes import FakeCollationPort


class Version:
    """Value type exposing its own three-way ordering."""

    def __init__(self, major: int, minor: int) -> None:
        self.major = major
        self.minor = minor
        self.compare_to_calls = 0

    def compare_to(self, other: "Version") -> int:
        self.compare_to_calls += 1
        return (self.major - other.major) * 100 + (self.minor - other.minor)


@pytest.mark.parametrize(
    "value, expected",
    [(-1000, -1), (-1, -1), (0, 0), (1, 1), (99, 1)],
)
def test_sign(value: int, expected: int) -> None:
    assert sign(value) == expected


class TestNaturalOrdering:
    """Ordering of non-string values."""

    def test_rich_comparison(self) -> None:
        ordering = NaturalOrdering()
        assert ordering.compare(1, 2) == -1
        assert ordering.compare(2, 1) == 1
        assert ordering.compare(3, 3) == 0

    def test_prefers_compare_to(self) -> None:
        ordering = NaturalOrdering()
        newer = Version(2, 1)
        older = Version(1, 9)

        assert ordering.compare(newer, older) == 1
        assert ordering.compare(older, newer) == -1
        assert ordering.compare(newer, Version(2, 1)) == 0
        assert newer.compare_to_calls == 2

    def test_compare_to_protocol_detection(self) -> None:
        assert isinstance(Version(1, 0), SupportsCompareTo)
        assert not isinstance(5, SupportsCompareTo)

    def test_unorderable_raises_type_mismatch(self) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            NaturalOrdering().compare(object(), object())
        assert exc_info.value.left_type is object
        assert isinstance(exc_info.value.__cause__, TypeError)

    @pytest.mark.parametrize(
        "a, b",
        [
            (float("nan"), 1.0),
            (1.0, float("nan")),
            (float("nan"), float("nan")),
            ({1}, {2}),
            (frozenset({"a"}), frozenset({"b"})),
        ],
    )
    def test_partially_ordered_values_raise(self, a, b) -> None:
        with pytest.raises(TypeMismatchError):
            NaturalOrdering().compare(a, b)

    def test_subsets_still_order(self) -> None:
        ordering = NaturalOrdering()
        assert ordering.compare({1}, {1, 2}) == -1
        assert ordering.compare({1, 2}, {1, 2}) == 0

    def test_is_a_three_way_ordering(self) -> None:
        assert isinstance(NaturalOrdering(), ThreeWayOrdering)


class TestStringOrdering:
    """Ordering of strings through a collation port."""

    def test_delegates_with_bound_locale(self) -> None:
        collation = FakeCollationPort()
        ordering = StringOrdering(collation, INVARIANT_LOCALE)

        assert ordering.compare("Hello", "hello") == 0
        assert collation.compare_calls == [("Hello", "hello", INVARIANT_LOCALE)]

    def test_normalises_collation_result(self) -> None:
        collation = FakeCollationPort()
        collation.forced_result = -12
        assert StringOrdering(collation, INVARIANT_LOCALE).compare("a", "b") == -1

    def test_is_a_three_way_ordering(self) -> None:
        ordering = StringOrdering(FakeCollationPort(), INVARIANT_LOCALE)
        assert isinstance(ordering, ThreeWayOrdering)
