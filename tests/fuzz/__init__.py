"""Intensive property tests for cldrfacts.

This package contains:
- test_plural_rules_property: Parser robustness and a differential check
  of every Babel language's plural rules against Babel's own evaluator

Run with: pytest -m fuzz

Python 3.13+.
"""
