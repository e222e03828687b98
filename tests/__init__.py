"""
Test suite for stronk

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
