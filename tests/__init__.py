"""
Test suite for mnum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
