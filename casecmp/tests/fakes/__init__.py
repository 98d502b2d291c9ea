"""Fake implementations of core ports for testing.

These in-memory implementations allow core logic to be tested
without external dependencies:

- FakeCollationPort: Casefold ordering over a fixed set of locales
- FakeLocaleProvider: Settable ambient locale with call counting
"""

from .collation import FakeCollationPort
from .locale_provider import FakeLocaleProvider

__all__ = [
    "FakeCollationPort",
    "FakeLocaleProvider",
]
