"""
Test suite for bigint-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
