"""Exceptions raised by the casecmp core and its adapters.

Each error also derives from the closest built-in exception so callers
that only know about ValueError/TypeError/LookupError keep working.
"""


class CaseCompareError(Exception):
    """Base class for all casecmp errors."""


class InvalidArgumentError(CaseCompareError, ValueError):
    """A required argument was missing or None."""

    def __init__(self, param_name: str, message: str | None = None):
        self.param_name = param_name
        super().__init__(message or f"{param_name} must not be None")


class TypeMismatchError(CaseCompareError, TypeError):
    """The two operands cannot be ordered against each other."""

    def __init__(self, left: object, right: object):
        self.left_type = type(left)
        self.right_type = type(right)
        super().__init__(
            f"cannot compare {self.left_type.__name__} "
            f"with {self.right_type.__name__}"
        )


class LocaleNotFoundError(CaseCompareError, LookupError):
    """A collation backend does not recognise a locale identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown locale: {name!r}")
