"""
Test suite for the multisig wallet

Contains:
- tests/unit/          : Unit tests for individual components and scenarios
"""
