"""Test suite for casecmp.

Organized into three categories:

1. core/: Unit tests for core comparison logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Integration tests for collation adapters
   - Run against real Babel / ICU locale data
   - ICU tests are skipped when PyICU is not installed

3. fakes/: Port implementations for testing
   - In-memory implementations of CollationPort and LocaleProviderPort
   - Used by core unit tests
"""
