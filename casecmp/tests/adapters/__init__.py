"""Integration tests for collation adapters.

These tests run against real locale data.
"""
