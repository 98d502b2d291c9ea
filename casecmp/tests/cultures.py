"""Locale names exercised by the culture-iterating tests.

"xx-YY" is deliberately unknown: tests resolve every name and skip the
ones the backend does not recognise.
"""

from collections.abc import Iterator

from casecmp.core.errors import LocaleNotFoundError
from casecmp.core.models import Locale
from casecmp.core.ports import CollationPort

TEST_CULTURE_NAMES = (
    "",
    "en-US",
    "en-GB",
    "de-DE",
    "fr-FR",
    "sv-SE",
    "ja-JP",
    "ko-KR",
    "zh-CN",
    "tr-TR",
    "xx-YY",
)


def known_locales(collation: CollationPort) -> Iterator[Locale]:
    """Yield each test culture the backend can resolve."""
    for name in TEST_CULTURE_NAMES:
        try:
            yield collation.resolve(name)
        except LocaleNotFoundError:
            continue
