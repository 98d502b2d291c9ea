"""Collation adapters.

- builtin: Babel locale data plus locale-tailored case mapping (default)
- icu: PyICU collators (optional `icu` extra, imported lazily)
"""
