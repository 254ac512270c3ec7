"""
Test suite for interval-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
