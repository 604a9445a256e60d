"""
Test suite for dft-complex

Contains:
- tests/unit/          : Unit tests for individual modules
"""
