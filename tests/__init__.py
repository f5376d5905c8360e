"""
Test suite for seqmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
