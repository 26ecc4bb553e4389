"""
Test suite for seximal

Contains:
- tests/unit/          : Unit tests for codec, conversion matrix, safeguards and numeral types
"""
