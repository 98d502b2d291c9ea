"""Unit tests for core models and errors."""

import pytest

from casecmp.core.errors import (
    CaseCompareError,
    InvalidArgumentError,
    LocaleNotFoundError,
    TypeMismatchError,
)
from casecmp.core.models import INVARIANT_LOCALE, Locale, is_invariant_name


class TestLocale:
    def test_invariant_locale(self) -> None:
        assert INVARIANT_LOCALE.is_invariant
        assert str(INVARIANT_LOCALE) == "invariant"

    def test_named_locale(self) -> None:
        locale = Locale(name="tr-TR", language="tr", territory="TR")
        assert not locale.is_invariant
        assert str(locale) == "tr-TR"

    def test_frozen(self) -> None:
        locale = Locale(name="en-US", language="en", territory="US")
        with pytest.raises(AttributeError):
            locale.name = "tr-TR"  # type: ignore[misc]

    def test_name_without_language_rejected(self) -> None:
        with pytest.raises(ValueError):
            Locale(name="en-US", language="")

    def test_language_without_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            Locale(name="", language="en")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("", True),
        ("invariant", True),
        ("Invariant", True),
        ("  ", True),
        ("en-US", False),
        ("inv", False),
    ],
)
def test_is_invariant_name(name: str, expected: bool) -> None:
    assert is_invariant_name(name) is expected


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(InvalidArgumentError, CaseCompareError)
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(TypeMismatchError, TypeError)
        assert issubclass(LocaleNotFoundError, LookupError)

    def test_invalid_argument_message(self) -> None:
        error = InvalidArgumentError("locale")
        assert error.param_name == "locale"
        assert "locale" in str(error)

    def test_type_mismatch_message(self) -> None:
        error = TypeMismatchError("a", 1)
        assert error.left_type is str
        assert error.right_type is int
        assert str(error) == "cannot compare str with int"

    def test_locale_not_found_name(self) -> None:
        error = LocaleNotFoundError("xx-YY")
        assert error.name == "xx-YY"
        assert "xx-YY" in str(error)
