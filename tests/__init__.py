"""
Test suite for xfun-types

Contains:
- tests/unit/          : Unit tests for individual modules
"""
