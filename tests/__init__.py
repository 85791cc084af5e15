"""
Test suite for keypad-calc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
