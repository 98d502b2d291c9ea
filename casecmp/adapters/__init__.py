"""External adapters for casecmp.

This package contains all external dependencies (Babel, ICU) and
provides implementations of the core port interfaces.

Adapter Organization:

- collation/: Locale lookup and case-insensitive string ordering
"""
