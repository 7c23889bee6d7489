"""Dataset built from the CLDR data bundled with Babel.

Babel ships a subset of CLDR supplemental data. This module extracts the
parts the resolvers use:

    first_days_of_week      Locale.first_week_day, per locale territory,
                            plus "001" from the root locale
    currency_periods        get_global("territory_currencies"), per locale
    plural_rule_sets        Locale.plural_form.rules, per language
    ordinal_rule_sets       Locale.ordinal_form.rules, per language
    day_period_rule_sets    Locale.day_period_rules, per language
    currency_display_names  Locale.currencies, per language
    characters              Locale.character_order, per language

Babel carries no telephone codes, postcode patterns, alternative region
codes, paper sizes, measurement systems or exemplar character sets; those
collections (and the exemplar fields of characters) stay empty and need a
JSON dataset (see cldrfacts.data.loading).

Plural rules are taken from Babel as CLDR rule text and compiled by
cldrfacts' own parser, so the Babel dataset and a JSON dataset go through
the same engine.

Babel is imported lazily so that importing cldrfacts stays cheap.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import TYPE_CHECKING, Any

from cldrfacts.diagnostics import DatasetLoadError, ErrorTemplate, PluralRuleSyntaxError
from cldrfacts.enums import Weekday
from cldrfacts.plural.rules import PluralRule, compile_rules

from .model import (
    Dataset,
    DayPeriodRule,
    ExemplarCharacters,
    LocaleRecord,
    RegionRecord,
    TemporalRecord,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["build_babel_dataset"]

logger = logging.getLogger(__name__)

# Key of the format (non-selection) rule set in Locale.day_period_rules;
# babel.dates.get_period_id() uses the same default.
_DAY_PERIOD_RULE_TYPE: str | None = None


def _babel_locale(identifier: str) -> Locale:
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    source = f"babel:{identifier}"
    try:
        return Locale.parse(identifier.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise DatasetLoadError(
            ErrorTemplate.load_source_unreadable(source, str(e)), source=source
        ) from e


def _as_date(value: Any) -> date | None:
    # territory_currencies stores (year, month, day) tuples
    if value is None or isinstance(value, date):
        return value
    return date(*value)


def _currency_periods(territory: str) -> tuple[TemporalRecord[str], ...]:
    from babel.core import get_global  # noqa: PLC0415

    entries = get_global("territory_currencies").get(territory.upper(), ())
    return tuple(
        TemporalRecord(
            value=code,
            valid_from=_as_date(start),
            valid_to=_as_date(end),
            tender=bool(tender),
        )
        for code, start, end, tender in entries
    )


def _compiled_rules(rules: Mapping[str, str], identifier: str) -> tuple[PluralRule, ...]:
    try:
        return compile_rules(rules)
    except PluralRuleSyntaxError as e:
        source = f"babel:{identifier}"
        raise DatasetLoadError(
            ErrorTemplate.load_invalid_entry("plural rules", 0, str(e)), source=source
        ) from e


def _day_period_rules(locale: Locale) -> tuple[DayPeriodRule, ...]:
    rulesets = locale.day_period_rules.get(_DAY_PERIOD_RULE_TYPE, {})
    rules: list[DayPeriodRule] = []
    for period, windows in rulesets.items():
        for window in windows:
            if "at" in window:
                rules.append(DayPeriodRule(period=period, at=window["at"]))
            elif "from" in window and "before" in window:
                rules.append(
                    DayPeriodRule(period=period, start=window["from"], before=window["before"])
                )
            else:
                logger.warning(
                    "Skipping day period '%s' for %s: unsupported bounds %s",
                    period,
                    locale,
                    sorted(window),
                )
    return tuple(rules)


def build_babel_dataset(locales: Iterable[str]) -> Dataset:
    """Compile a Dataset for the given locales from Babel's CLDR data.

    Locale-keyed collections are keyed by language; the first locale of a
    language supplies its rules. Currency periods are keyed by the locale
    identifier exactly as given. Locales without a territory contribute no
    region or temporal facts.

    Args:
        locales: Locale identifiers such as "en-US", "lv_LV", "ja"

    Returns:
        Indexed Dataset

    Raises:
        DatasetLoadError: If Babel does not know a locale

    Example:
        >>> dataset = build_babel_dataset(["en-US", "lv-LV"])
        >>> [record.value for record in dataset.currency_periods["en-US"]][:1]
        ['USD']
    """
    first_days: list[RegionRecord[Weekday]] = []
    currency_periods: dict[str, tuple[TemporalRecord[str], ...]] = {}
    plural_sets: list[LocaleRecord[Any]] = []
    ordinal_sets: list[LocaleRecord[Any]] = []
    day_period_sets: list[LocaleRecord[Any]] = []
    currency_names: list[LocaleRecord[Any]] = []
    characters: list[LocaleRecord[Any]] = []

    seen_languages: set[str] = set()
    seen_territories: set[str] = set()

    for identifier in locales:
        locale = _babel_locale(identifier)
        territory = locale.territory

        if territory and territory not in seen_territories:
            seen_territories.add(territory)
            first_days.append(
                RegionRecord(region_ids=(territory,), value=Weekday(locale.first_week_day))
            )
        if territory:
            currency_periods[identifier] = _currency_periods(territory)

        language = locale.language
        if language in seen_languages:
            continue
        seen_languages.add(language)
        keys = (language,)
        plural_sets.append(
            LocaleRecord(keys, _compiled_rules(locale.plural_form.rules, identifier))
        )
        ordinal_sets.append(
            LocaleRecord(keys, _compiled_rules(locale.ordinal_form.rules, identifier))
        )
        day_period_sets.append(LocaleRecord(keys, _day_period_rules(locale)))
        currency_names.append(LocaleRecord(keys, dict(locale.currencies)))
        characters.append(
            LocaleRecord(keys, ExemplarCharacters(character_order=locale.character_order))
        )

    # World default, used for territories the locales above do not name
    first_days.append(
        RegionRecord(region_ids=("001",), value=Weekday(_babel_locale("root").first_week_day))
    )

    dataset = Dataset(
        first_days_of_week=first_days,
        currency_periods=currency_periods,
        plural_rule_sets=plural_sets,
        ordinal_rule_sets=ordinal_sets,
        day_period_rule_sets=day_period_sets,
        currency_display_names=currency_names,
        characters=characters,
    )
    logger.info(
        "Built dataset from Babel for %d languages and %d territories",
        len(seen_languages),
        len(seen_territories),
    )
    return dataset
