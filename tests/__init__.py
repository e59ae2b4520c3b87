"""
Test suite for the day-of-week calendar engine

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
