"""
Test suite for BigBinary

Contains:
- tests/unit/          : Unit tests for individual modules
"""
