"""Typed accessors for locale and region facts.

LocaleFacts wraps a Dataset and exposes one method per fact. Every method
returns ``(value, errors)``, like the resolve_* functions it delegates to:

    value   The fact, or None when the dataset has no entry at any
            fallback level
    errors  FrozenLocaleError values for malformed identifiers; empty on
            success and on a plain miss

Region-scoped facts are looked up by region id. The ``*_for_locale``
variants take a specific locale ("en-US") and raise InvalidArgumentError
for a neutral one ("en"), because a language alone names no region.

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import datetime, time
from typing import Any

from cldrfacts.constants import DEFAULT_FIRST_DAY_OF_WEEK
from cldrfacts.core.locale_key import LocaleKey
from cldrfacts.data.model import (
    Dataset,
    DayPeriodRule,
    ExemplarCharacters,
    Instant,
    RegionCode,
    TemporalRecord,
)
from cldrfacts.diagnostics import (
    ErrorTemplate,
    FrozenLocaleError,
    InvalidArgumentError,
    InvalidIdentifierError,
)
from cldrfacts.enums import (
    LocaleCollection,
    MeasurementSystem,
    PaperSize,
    PluralRuleKind,
    RegionCollection,
    TemporalCollection,
    Weekday,
)
from cldrfacts.plural.operands import PluralOperands, PluralValue
from cldrfacts.plural.rules import PluralRule

from .day_periods import resolve_day_period
from .default import get_default_dataset
from .fallback import (
    ResolveResult,
    coerce_collection,
    identifier_error,
    resolve_locale_fact,
    resolve_region_fact,
)
from .plural import resolve_plural_category, resolve_plural_rules
from .temporal import resolve_all_temporal_facts, resolve_temporal_fact

__all__ = ["LocaleFacts"]

logger = logging.getLogger(__name__)


class LocaleFacts:
    """Locale and region facts drawn from one Dataset.

    Without an explicit dataset the process-wide default dataset is used
    (see cldrfacts.runtime.default); it is loaded on the first lookup, not
    at construction.

    Thread Safety:
        LocaleFacts holds no mutable state. Instances can be shared between
        threads freely.

    Examples:
        >>> from cldrfacts.data import load_dataset
        >>> facts = LocaleFacts(load_dataset({
        ...     "first_days_of_week": [
        ...         {"regions": ["US"], "value": "sun"},
        ...         {"regions": ["001"], "value": "mon"},
        ...     ],
        ...     "currency_periods": {"en-US": [{"value": "USD"}]},
        ... }))
        >>> facts.first_day_of_week("US")
        (<Weekday.SUNDAY: 6>, ())
        >>> facts.first_day_of_week("FR")
        (<Weekday.MONDAY: 0>, ())
        >>> facts.currency("en-US")
        ('USD', ())
    """

    __slots__ = ("_dataset",)

    def __init__(self, dataset: Dataset | None = None) -> None:
        """Initialize LocaleFacts.

        Args:
            dataset: Dataset to read; None uses the default dataset
        """
        self._dataset = dataset

    @property
    def dataset(self) -> Dataset:
        """The Dataset this instance reads (loads the default on first use).

        Raises:
            DatasetLoadError: If the default dataset cannot be loaded
        """
        if self._dataset is not None:
            return self._dataset
        return get_default_dataset()

    def __repr__(self) -> str:
        source = "default" if self._dataset is None else f"0x{id(self._dataset):x}"
        return f"LocaleFacts(dataset={source})"

    # ------------------------------------------------------------------
    # Generic lookups
    # ------------------------------------------------------------------

    def region_fact(self, region_id: str, /, collection: RegionCollection) -> ResolveResult[Any]:
        """Any region-keyed fact: exact region, then "001"."""
        return resolve_region_fact(self.dataset, region_id, collection)

    def locale_fact(self, locale_id: str, /, collection: LocaleCollection) -> ResolveResult[Any]:
        """Any language-keyed fact: language, then root."""
        return resolve_locale_fact(self.dataset, locale_id, collection)

    def region_fact_for_locale(
        self, locale_id: str, /, collection: RegionCollection
    ) -> ResolveResult[Any]:
        """Region-keyed fact for the region of a specific locale.

        Args:
            locale_id: Specific locale such as "en-US" or "pt_BR"
            collection: Region-keyed collection

        Returns:
            ``(value, errors)`` as for region_fact()

        Raises:
            InvalidArgumentError: If locale_id names no region ("en")
        """
        collection = coerce_collection(RegionCollection, collection)
        try:
            key = LocaleKey.parse(locale_id)
        except InvalidIdentifierError as e:
            return None, identifier_error(e, locale_id, collection)
        if key.region is None:
            raise InvalidArgumentError(ErrorTemplate.region_required(locale_id, collection))
        return resolve_region_fact(self.dataset, key.region, collection)

    # ------------------------------------------------------------------
    # Region facts
    # ------------------------------------------------------------------

    def telephone_codes(self, region_id: str, /) -> ResolveResult[tuple[str, ...]]:
        """International dialing codes of a region (e.g. ("1",) for "US")."""
        return self.region_fact(region_id, RegionCollection.TELEPHONE_CODES)

    def telephone_code(self, region_id: str, /) -> ResolveResult[str]:
        """First dialing code of a region."""
        codes, errors = self.telephone_codes(region_id)
        return (codes[0] if codes else None), errors

    def postcode_regex(self, region_id: str, /) -> ResolveResult[str]:
        """Postal-code regular expression of a region."""
        return self.region_fact(region_id, RegionCollection.POSTCODE_REGEXES)

    def postcode_regex_for_locale(self, locale_id: str, /) -> ResolveResult[str]:
        """Postal-code regular expression for a specific locale's region.

        Raises:
            InvalidArgumentError: If locale_id is neutral ("en")
        """
        return self.region_fact_for_locale(locale_id, RegionCollection.POSTCODE_REGEXES)

    def region_code(self, region_id: str, /) -> ResolveResult[RegionCode]:
        """Alpha-3, numeric, FIPS and internet codes of a region."""
        return self.region_fact(region_id, RegionCollection.REGION_CODES)

    def measurement_system(self, region_id: str, /) -> ResolveResult[MeasurementSystem]:
        """Measurement system of a region."""
        return self.region_fact(region_id, RegionCollection.MEASUREMENT_SYSTEMS)

    def paper_size(self, region_id: str, /) -> ResolveResult[PaperSize]:
        """Default paper size of a region."""
        return self.region_fact(region_id, RegionCollection.PAPER_SIZES)

    def first_day_of_week(self, region_id: str, /) -> ResolveResult[Weekday]:
        """First day of the week in a region.

        Falls back to "001", then to Monday when the dataset has neither.
        None is returned only together with an identifier error.
        """
        day, errors = self.region_fact(region_id, RegionCollection.FIRST_DAYS_OF_WEEK)
        if day is None and not errors:
            logger.debug("No first day of week for '%s'; using default", region_id)
            return DEFAULT_FIRST_DAY_OF_WEEK, ()
        return day, errors

    # ------------------------------------------------------------------
    # Currency
    # ------------------------------------------------------------------

    def currency(self, locale_id: str, /, at: Instant | None = None) -> ResolveResult[str]:
        """ISO 4217 code in use for a locale at an instant (default: today)."""
        return resolve_temporal_fact(
            self.dataset, locale_id, TemporalCollection.CURRENCY_PERIODS, at
        )

    def currency_periods(
        self, locale_id: str, /, at: Instant | None = None
    ) -> tuple[tuple[TemporalRecord[str], ...], tuple[FrozenLocaleError, ...]]:
        """Every currency period of a locale that covers an instant."""
        return resolve_all_temporal_facts(
            self.dataset, locale_id, TemporalCollection.CURRENCY_PERIODS, at
        )

    def currency_display_name(self, currency_code: str, /, language: str) -> ResolveResult[str]:
        """Localized name of a currency (language, then root names)."""
        names, errors = self.locale_fact(language, LocaleCollection.CURRENCY_DISPLAY_NAMES)
        if names is None:
            return None, errors
        return names.get(currency_code.strip().upper()), ()

    # ------------------------------------------------------------------
    # Plural rules
    # ------------------------------------------------------------------

    def plural_rules(self, locale_id: str, /) -> ResolveResult[tuple[PluralRule, ...]]:
        """Cardinal plural rules of a locale's language (or root)."""
        return resolve_plural_rules(self.dataset, locale_id, PluralRuleKind.CARDINAL)

    def ordinal_rules(self, locale_id: str, /) -> ResolveResult[tuple[PluralRule, ...]]:
        """Ordinal plural rules of a locale's language (or root)."""
        return resolve_plural_rules(self.dataset, locale_id, PluralRuleKind.ORDINAL)

    def plural_category(
        self, locale_id: str, /, value: PluralValue | PluralOperands
    ) -> ResolveResult[str]:
        """Cardinal category of a number ("one", "few", ..., "other")."""
        return resolve_plural_category(self.dataset, locale_id, PluralRuleKind.CARDINAL, value)

    def ordinal_category(
        self, locale_id: str, /, value: PluralValue | PluralOperands
    ) -> ResolveResult[str]:
        """Ordinal category of a number ("one" for 1st, "two" for 2nd, ...)."""
        return resolve_plural_category(self.dataset, locale_id, PluralRuleKind.ORDINAL, value)

    # ------------------------------------------------------------------
    # Day periods
    # ------------------------------------------------------------------

    def day_period_rules(self, locale_id: str, /) -> ResolveResult[tuple[DayPeriodRule, ...]]:
        """Day-period rules of a locale's language (or root)."""
        return self.locale_fact(locale_id, LocaleCollection.DAY_PERIOD_RULES)

    def day_period(self, locale_id: str, /, moment: time | datetime | int) -> ResolveResult[str]:
        """Day period id for a time of day ("morning1", "noon", ...)."""
        return resolve_day_period(self.dataset, locale_id, moment)

    # ------------------------------------------------------------------
    # Characters
    # ------------------------------------------------------------------

    def characters(self, locale_id: str, /) -> ResolveResult[ExemplarCharacters]:
        """Exemplar characters of a locale's language (or root)."""
        return self.locale_fact(locale_id, LocaleCollection.CHARACTERS)
