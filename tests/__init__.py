"""
Test suite for the linear-algebra kernel

Contains:
- tests/unit/          : Unit tests for individual modules
"""
