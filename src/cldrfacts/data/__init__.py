"""Dataset model, indexes and loaders.

Public API:
    Dataset - Immutable, pre-indexed collection of facts
    RegionRecord, LocaleRecord, TemporalRecord - Collection elements
    load_dataset - Load a Dataset from JSON or a mapping
    build_babel_dataset - Build a Dataset from Babel's CLDR data
"""

from .babel_source import build_babel_dataset
from .index import LocaleRuleIndex, RegionFactIndex, TemporalIndex, normalize_key
from .loading import (
    DatasetLoader,
    dataset_from_mapping,
    load_dataset,
    parse_instant,
    parse_time_of_day,
    parse_weekday,
)
from .model import (
    CharacterSet,
    CurrencyNameSet,
    CurrencyPeriod,
    Dataset,
    DayPeriodRule,
    DayPeriodRuleSet,
    ExemplarCharacters,
    Instant,
    LocaleId,
    LocaleRecord,
    PluralRuleSet,
    RegionCode,
    RegionId,
    RegionRecord,
    TemporalRecord,
    comparable_instants,
)

__all__ = [
    "CharacterSet",
    "CurrencyNameSet",
    "CurrencyPeriod",
    "Dataset",
    "DatasetLoader",
    "DayPeriodRule",
    "DayPeriodRuleSet",
    "ExemplarCharacters",
    "Instant",
    "LocaleId",
    "LocaleRecord",
    "LocaleRuleIndex",
    "PluralRuleSet",
    "RegionCode",
    "RegionFactIndex",
    "RegionId",
    "RegionRecord",
    "TemporalIndex",
    "TemporalRecord",
    "build_babel_dataset",
    "comparable_instants",
    "dataset_from_mapping",
    "load_dataset",
    "normalize_key",
    "parse_instant",
    "parse_time_of_day",
    "parse_weekday",
]
