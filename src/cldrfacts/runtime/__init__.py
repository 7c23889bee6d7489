"""Resolution engine: fallback, temporal selection, plural and day periods.

Public API:
    LocaleFacts - Typed accessors over a Dataset
    resolve_region_fact - Region, then "001"
    resolve_locale_fact - Language, then root
    resolve_temporal_fact - Record valid at an instant
    resolve_plural_category - Cardinal/ordinal category of a number
    get_default_dataset - Lazily loaded process-wide dataset
"""

from .day_periods import resolve_day_period, seconds_past_midnight, select_day_period
from .default import (
    configure_default_dataset,
    get_default_dataset,
    is_default_dataset_loaded,
    reset_default_dataset,
)
from .facts import LocaleFacts
from .fallback import ResolveResult, resolve_locale_fact, resolve_region_fact
from .plural import resolve_plural_category, resolve_plural_rules
from .temporal import (
    is_valid_at,
    resolve_all_temporal_facts,
    resolve_temporal_fact,
    select_all_temporal,
    select_temporal,
)

__all__ = [
    "LocaleFacts",
    "ResolveResult",
    "configure_default_dataset",
    "get_default_dataset",
    "is_default_dataset_loaded",
    "is_valid_at",
    "reset_default_dataset",
    "resolve_all_temporal_facts",
    "resolve_day_period",
    "resolve_locale_fact",
    "resolve_plural_category",
    "resolve_plural_rules",
    "resolve_region_fact",
    "resolve_temporal_fact",
    "seconds_past_midnight",
    "select_all_temporal",
    "select_day_period",
    "select_temporal",
]
