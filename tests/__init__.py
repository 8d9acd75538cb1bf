"""
Test suite for MathOps

Contains:
- tests/unit/          : Unit tests for individual modules
"""
