"""Domain models for the casecmp comparer.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass

INVARIANT_NAMES = frozenset({"", "invariant"})


@dataclass(frozen=True)
class Locale:
    """A resolved locale handle.

    Produced by a CollationPort adapter; the core never parses locale
    identifiers itself. The invariant locale has an empty name and
    language.
    """

    name: str  # canonical hyphenated form, e.g. "tr-TR"
    language: str
    territory: str | None = None

    def __post_init__(self) -> None:
        """Validate locale invariants on creation."""
        if not self.name and self.language:
            raise ValueError("a named language requires a non-empty locale name")
        if self.name and not self.language:
            raise ValueError(f"locale {self.name!r} has no language")

    @property
    def is_invariant(self) -> bool:
        """True for the locale-independent rule set."""
        return not self.name

    def __str__(self) -> str:
        return self.name or "invariant"


INVARIANT_LOCALE = Locale(name="", language="")


def is_invariant_name(name: str) -> bool:
    """Is this identifier one of the accepted spellings of invariant?"""
    return name.strip().lower() in INVARIANT_NAMES
