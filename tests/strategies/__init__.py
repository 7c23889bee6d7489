"""Hypothesis strategies for cldrfacts property-based testing.

Strategies are organized by domain:

- locales: Region ids, languages, locale identifiers (well-formed and not)
- plural: Plural operand values and rule condition sources
- temporal: Back-to-back time-bounded records and instants

Usage:
    from tests.strategies import locale_identifiers, plural_values
    from tests.strategies.temporal import contiguous_periods

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - locale_identifiers, malformed_identifiers
    - plural_values, decimal_values, relation_sources
    - contiguous_periods, instants
"""

from .locales import (
    alpha2_region_ids,
    languages,
    locale_identifiers,
    malformed_identifiers,
    region_ids,
    specific_locale_identifiers,
)
from .plural import (
    BABEL_PLURAL_LANGUAGES,
    condition_sources,
    decimal_values,
    plural_integers,
    plural_values,
    relation_sources,
)
from .temporal import contiguous_periods, instants, reasonable_dates

__all__ = [
    "BABEL_PLURAL_LANGUAGES",
    "alpha2_region_ids",
    "condition_sources",
    "contiguous_periods",
    "decimal_values",
    "instants",
    "languages",
    "locale_identifiers",
    "malformed_identifiers",
    "plural_integers",
    "plural_values",
    "reasonable_dates",
    "region_ids",
    "relation_sources",
    "specific_locale_identifiers",
]
