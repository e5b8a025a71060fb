"""
Test suite for the mail sorting ledger

Contains:
- tests/unit/          : Unit tests for individual modules
"""
