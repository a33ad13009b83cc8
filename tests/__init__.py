"""
Test suite for plane2d

Contains:
- tests/unit/          : Unit tests for individual modules
"""
