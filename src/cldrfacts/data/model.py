"""Immutable dataset model.

A Dataset holds independent collections of CLDR supplemental facts:

    Region-keyed (RegionRecord):   telephone codes, postcode regexes, region
                                   codes, first day of week, paper size,
                                   measurement system
    Locale-keyed (LocaleRecord):   cardinal/ordinal plural rules, day-period
                                   rules, currency display names, exemplar
                                   characters
    Time-bounded (TemporalRecord): currency periods, keyed by locale id

The Dataset builds its lookup indexes once, in __post_init__, and is never
mutated afterwards. It can be shared between threads without locking.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time
from types import MappingProxyType
from typing import Any

from cldrfacts.enums import (
    LocaleCollection,
    MeasurementSystem,
    PaperSize,
    RegionCollection,
    TemporalCollection,
    Weekday,
)
from cldrfacts.plural.rules import PluralRule

from .index import LocaleRuleIndex, RegionFactIndex, TemporalIndex

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "RegionId",
    "LocaleId",
    "Instant",
    "comparable_instants",
    # Record types
    "RegionRecord",
    "LocaleRecord",
    "TemporalRecord",
    "RegionCode",
    "DayPeriodRule",
    "ExemplarCharacters",
    # Collection element aliases
    "CurrencyPeriod",
    "PluralRuleSet",
    "DayPeriodRuleSet",
    "CurrencyNameSet",
    "CharacterSet",
    # Dataset
    "Dataset",
]

logger = logging.getLogger(__name__)

type RegionId = str
"""ISO 3166-1 alpha-2 or UN M.49 code (e.g. 'US', '419', '001')."""

type LocaleId = str
"""Locale identifier (e.g. 'en', 'en-US', 'root')."""

type Instant = date | datetime
"""Point in time used for temporal selection."""


def _naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def comparable_instants(bound: Instant, instant: Instant) -> tuple[Any, Any]:
    """Bring two instants to the same type so they can be ordered.

    A date against a datetime compares on dates when the date is the bound,
    and on midnight of the date when the datetime is the bound. Aware
    datetimes are converted to UTC and made naive.

    Example:
        >>> comparable_instants(date(2014, 1, 1), datetime(2013, 12, 31, 23, 0))
        (datetime.date(2014, 1, 1), datetime.date(2013, 12, 31))
    """
    bound_is_datetime = isinstance(bound, datetime)
    instant_is_datetime = isinstance(instant, datetime)
    if bound_is_datetime and instant_is_datetime:
        return _naive(bound), _naive(instant)
    if bound_is_datetime:
        return _naive(bound), datetime.combine(instant, time.min)
    if instant_is_datetime:
        return bound, _naive(instant).date()
    return bound, instant


# ============================================================================
# RECORDS
# ============================================================================


@dataclass(frozen=True, slots=True)
class RegionRecord[T]:
    """A fact shared by one or more regions.

    Attributes:
        region_ids: Regions this fact applies to (may include "001")
        value: The fact
    """

    region_ids: tuple[RegionId, ...]
    value: T


@dataclass(frozen=True, slots=True)
class LocaleRecord[T]:
    """A fact shared by one or more languages.

    Attributes:
        locale_ids: Languages this fact applies to; exactly ("root",) marks
            the language-neutral default
        value: The fact
    """

    locale_ids: tuple[LocaleId, ...]
    value: T


@dataclass(frozen=True, slots=True)
class TemporalRecord[T]:
    """A fact valid for a period of time.

    The window is [valid_from, valid_to): lower bound inclusive, upper bound
    exclusive. A missing bound is unbounded in that direction.

    Attributes:
        value: The fact (e.g. an ISO 4217 currency code)
        valid_from: First instant the fact applies, or None
        valid_to: First instant the fact no longer applies, or None
        tender: Whether the currency is legal tender (currency periods only)
    """

    value: T
    valid_from: Instant | None = None
    valid_to: Instant | None = None
    tender: bool = True


@dataclass(frozen=True, slots=True)
class RegionCode:
    """Alternative codes for a region.

    Attributes:
        region_id: ISO 3166-1 alpha-2 code
        alpha3: ISO 3166-1 alpha-3 code
        numeric: ISO 3166-1 numeric code (zero-padded string)
        fips10: FIPS 10-4 code
        internet: Top-level domains (without dots)
    """

    region_id: RegionId
    alpha3: str | None = None
    numeric: str | None = None
    fips10: str | None = None
    internet: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DayPeriodRule:
    """Boundary rule for one day period, in seconds past midnight.

    Either ``at`` is set (an instant such as "midnight" or "noon"), or
    ``start``/``before`` delimit a window [start, before). A window whose
    start is not less than its end wraps past midnight.

    Attributes:
        period: Day period id (e.g. "morning1", "night1", "noon")
        at: Exact second past midnight, or None
        start: Window start (inclusive), or None
        before: Window end (exclusive), or None
    """

    period: str
    at: int | None = None
    start: int | None = None
    before: int | None = None

    def __post_init__(self) -> None:
        """Validate that the rule is either a point or a window."""
        if self.at is None and (self.start is None or self.before is None):
            msg = f"DayPeriodRule '{self.period}' needs 'at' or both 'start' and 'before'"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ExemplarCharacters:
    """Characters a language is written with.

    Sets are kept as CLDR UnicodeSet text (e.g. "[a-z]"); None means the
    dataset has no such set for the language.

    Attributes:
        main: Characters required to write the language
        auxiliary: Characters seen in loanwords and foreign names
        index: Index labels, in collation order
        punctuation: Punctuation used with the language
        numbers: Digits and number symbols
        character_order: "left-to-right" or "right-to-left"
    """

    main: str | None = None
    auxiliary: str | None = None
    index: str | None = None
    punctuation: str | None = None
    numbers: str | None = None
    character_order: str | None = None


# ============================================================================
# COLLECTION ELEMENT ALIASES
# ============================================================================

type CurrencyPeriod = TemporalRecord[str]
"""ISO 4217 code in use during a period."""

type PluralRuleSet = LocaleRecord[tuple[PluralRule, ...]]
"""Ordered cardinal or ordinal rules for a group of languages."""

type DayPeriodRuleSet = LocaleRecord[tuple[DayPeriodRule, ...]]
"""Day-period boundaries for a group of languages."""

type CurrencyNameSet = LocaleRecord[Mapping[str, str]]
"""Currency code -> display name for a group of languages."""

type CharacterSet = LocaleRecord[ExemplarCharacters]
"""Exemplar characters for a group of languages."""


# ============================================================================
# DATASET
# ============================================================================


def _as_tuple(records: Sequence[Any]) -> tuple[Any, ...]:
    return records if isinstance(records, tuple) else tuple(records)


@dataclass(frozen=True, slots=True, eq=False)
class Dataset:
    """Immutable, pre-indexed collection of locale and region facts.

    Construct once (normally through a loader) and share freely. Lists are
    accepted for every collection and stored as tuples.

    Example:
        >>> dataset = Dataset(
        ...     first_days_of_week=(
        ...         RegionRecord(("US",), Weekday.SUNDAY),
        ...         RegionRecord(("001",), Weekday.MONDAY),
        ...     ),
        ... )
        >>> dataset.region_index(RegionCollection.FIRST_DAYS_OF_WEEK).get("us").value
        <Weekday.SUNDAY: 6>
    """

    telephone_codes: tuple[RegionRecord[tuple[str, ...]], ...] = ()
    postcode_regexes: tuple[RegionRecord[str], ...] = ()
    region_codes: tuple[RegionRecord[RegionCode], ...] = ()
    first_days_of_week: tuple[RegionRecord[Weekday], ...] = ()
    paper_sizes: tuple[RegionRecord[PaperSize], ...] = ()
    measurement_systems: tuple[RegionRecord[MeasurementSystem], ...] = ()
    currency_periods: Mapping[LocaleId, tuple[CurrencyPeriod, ...]] = field(
        default_factory=dict
    )
    plural_rule_sets: tuple[PluralRuleSet, ...] = ()
    ordinal_rule_sets: tuple[PluralRuleSet, ...] = ()
    day_period_rule_sets: tuple[DayPeriodRuleSet, ...] = ()
    currency_display_names: tuple[CurrencyNameSet, ...] = ()
    characters: tuple[CharacterSet, ...] = ()

    _region_indexes: Mapping[RegionCollection, RegionFactIndex[Any]] = field(
        init=False, repr=False
    )
    _locale_indexes: Mapping[LocaleCollection, LocaleRuleIndex[Any]] = field(
        init=False, repr=False
    )
    _temporal_indexes: Mapping[TemporalCollection, TemporalIndex[Any]] = field(
        init=False, repr=False
    )

    def __post_init__(self) -> None:
        """Freeze collections and build one index per collection."""
        for collection in (*RegionCollection, *LocaleCollection):
            object.__setattr__(self, collection.value, _as_tuple(getattr(self, collection.value)))
        object.__setattr__(
            self,
            "currency_periods",
            MappingProxyType(
                {key: _as_tuple(periods) for key, periods in self.currency_periods.items()}
            ),
        )

        region_indexes = {
            collection: RegionFactIndex(getattr(self, collection.value), collection=collection)
            for collection in RegionCollection
        }
        locale_indexes = {
            collection: LocaleRuleIndex(getattr(self, collection.value), collection=collection)
            for collection in LocaleCollection
        }
        temporal_indexes = {
            collection: TemporalIndex(getattr(self, collection.value), collection=collection)
            for collection in TemporalCollection
        }
        object.__setattr__(self, "_region_indexes", MappingProxyType(region_indexes))
        object.__setattr__(self, "_locale_indexes", MappingProxyType(locale_indexes))
        object.__setattr__(self, "_temporal_indexes", MappingProxyType(temporal_indexes))
        logger.debug(
            "Dataset indexed: %d region, %d locale, %d temporal collections",
            len(region_indexes),
            len(locale_indexes),
            len(temporal_indexes),
        )

    def region_index(self, collection: RegionCollection) -> RegionFactIndex[Any]:
        """Prebuilt index for a region-keyed collection."""
        return self._region_indexes[RegionCollection(collection)]

    def locale_index(self, collection: LocaleCollection) -> LocaleRuleIndex[Any]:
        """Prebuilt index for a locale-keyed collection."""
        return self._locale_indexes[LocaleCollection(collection)]

    def temporal_index(self, collection: TemporalCollection) -> TemporalIndex[Any]:
        """Prebuilt index for a time-bounded collection."""
        return self._temporal_indexes[TemporalCollection(collection)]
