"""Dataset loading from JSON documents and plain mappings.

Document layout (every collection optional):

    {
      "telephone_codes":     [{"regions": ["US", "CA"], "value": ["1"]}],
      "postcode_regexes":    [{"regions": ["US"], "value": "[0-9]{5}(-[0-9]{4})?"}],
      "region_codes":        [{"regions": ["US"], "value": {"alpha3": "USA",
                                "numeric": "840", "fips10": "US", "internet": ["us"]}}],
      "first_days_of_week":  [{"regions": ["US"], "value": "sun"}],
      "paper_sizes":         [{"regions": ["US"], "value": "US-Letter"}],
      "measurement_systems": [{"regions": ["US"], "value": "US"}],
      "currency_periods":    {"en-US": [{"value": "USD", "from": "1792-01-01",
                                "to": null, "tender": true}]},
      "plural_rules":        [{"locales": ["en"], "rules": {"one": "i = 1 and v = 0"}}],
      "ordinal_rules":       [{"locales": ["en"], "rules": {"one": "n % 10 = 1 ..."}}],
      "day_period_rules":    [{"locales": ["en"], "rules": {"noon": {"at": "12:00"},
                                "morning1": {"from": "06:00", "before": "12:00"}}}],
      "currency_display_names": [{"locales": ["en"], "names": {"USD": "US Dollar"}}],
      "characters":          [{"locales": ["en"], "characters": {"main": "[a-z]",
                                "index": "[A-Z]", "character_order": "left-to-right"}}]
    }

Record order is preserved: it decides first-occurrence-wins indexing and
first-match temporal selection.

Strict loading (the default) raises DatasetLoadError on the first malformed
record. Non-strict loading logs the record at WARNING and skips it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import Any, Protocol

from cldrfacts.diagnostics import (
    DatasetLoadError,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    PluralRuleSyntaxError,
)
from cldrfacts.enums import MeasurementSystem, PaperSize, Weekday
from cldrfacts.plural.rules import compile_rules

from .model import (
    Dataset,
    DayPeriodRule,
    ExemplarCharacters,
    Instant,
    LocaleRecord,
    RegionCode,
    RegionRecord,
    TemporalRecord,
    comparable_instants,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "DatasetLoader",
    # Loading
    "load_dataset",
    "dataset_from_mapping",
    # Value decoders
    "parse_instant",
    "parse_time_of_day",
    "parse_weekday",
]

logger = logging.getLogger(__name__)

# Skipped records are logged on one line; quoted values are cut short
_LOG_FORMATTER = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, max_content_length=200)

type DatasetSource = str | os.PathLike[str] | Mapping[str, Any]


class DatasetLoader(Protocol):
    """Anything that produces a Dataset when called.

    ``functools.partial(load_dataset, "facts.json")`` and
    ``functools.partial(build_babel_dataset, ["en-US"])`` both qualify.
    """

    def __call__(self) -> Dataset: ...


class _InvalidEntry(ValueError):
    """Internal: a single record failed to decode."""


# ============================================================================
# VALUE DECODERS
# ============================================================================

_WEEKDAY_NAMES: dict[str, Weekday] = {
    day.name.lower()[:3]: day for day in Weekday
} | {day.name.lower(): day for day in Weekday}


def parse_weekday(value: object) -> Weekday:
    """Decode a weekday from CLDR ("sun"), full name ("Sunday") or 0-6.

    Examples:
        >>> parse_weekday("sun")
        <Weekday.SUNDAY: 6>
        >>> parse_weekday(0)
        <Weekday.MONDAY: 0>
    """
    if isinstance(value, Weekday):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Weekday(value)
        except ValueError:
            msg = f"weekday number {value} is outside 0..6"
            raise _InvalidEntry(msg) from None
    if isinstance(value, str) and value.strip().lower() in _WEEKDAY_NAMES:
        return _WEEKDAY_NAMES[value.strip().lower()]
    msg = f"unrecognized weekday {value!r}"
    raise _InvalidEntry(msg)


def parse_instant(value: object) -> Instant | None:
    """Decode an ISO 8601 date or datetime; None stays None (unbounded).

    Examples:
        >>> parse_instant("1999-01-01")
        datetime.date(1999, 1, 1)
        >>> parse_instant(None) is None
        True
    """
    if value is None or isinstance(value, (date, datetime)):
        return value
    if not isinstance(value, str):
        msg = f"expected ISO 8601 string or null, got {type(value).__name__}"
        raise _InvalidEntry(msg)
    try:
        if "T" in value or " " in value.strip():
            return datetime.fromisoformat(value)
        return date.fromisoformat(value)
    except ValueError as e:
        msg = f"invalid ISO 8601 instant {value!r}: {e}"
        raise _InvalidEntry(msg) from e


def parse_time_of_day(value: object) -> int:
    """Decode "HH:MM" (or "HH:MM:SS", or seconds) into seconds past midnight.

    "24:00" is accepted as the end of the day.

    Examples:
        >>> parse_time_of_day("06:30")
        23400
        >>> parse_time_of_day("24:00")
        86400
    """
    if isinstance(value, int) and not isinstance(value, bool):
        seconds = value
    elif isinstance(value, str):
        parts = value.strip().split(":")
        if not 2 <= len(parts) <= 3 or not all(part.isdigit() for part in parts):
            msg = f"invalid time of day {value!r}, expected HH:MM"
            raise _InvalidEntry(msg)
        hours, minutes, *rest = (int(part) for part in parts)
        if minutes >= 60 or (rest and rest[0] >= 60):
            msg = f"invalid time of day {value!r}"
            raise _InvalidEntry(msg)
        seconds = hours * 3600 + minutes * 60 + (rest[0] if rest else 0)
    else:
        msg = f"expected HH:MM string, got {type(value).__name__}"
        raise _InvalidEntry(msg)
    if not 0 <= seconds <= 86400:
        msg = f"time of day {value!r} is outside 00:00..24:00"
        raise _InvalidEntry(msg)
    return seconds


def _string_tuple(value: object, what: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return tuple(value)
    msg = f"'{what}' must be a string or a list of strings"
    raise _InvalidEntry(msg)


def _keys(entry: object, field_name: str) -> tuple[str, ...]:
    if not isinstance(entry, Mapping):
        msg = f"expected an object, got {type(entry).__name__}"
        raise _InvalidEntry(msg)
    if field_name not in entry:
        msg = f"missing '{field_name}'"
        raise _InvalidEntry(msg)
    keys = _string_tuple(entry[field_name], field_name)
    if not keys or any(not key.strip() for key in keys):
        msg = f"'{field_name}' must list at least one non-empty id"
        raise _InvalidEntry(msg)
    return keys


def _field(entry: Mapping[str, Any], name: str) -> Any:
    if name not in entry:
        msg = f"missing '{name}'"
        raise _InvalidEntry(msg)
    return entry[name]


def _enum_value[E](enum_type: Callable[[Any], E], value: object) -> E:
    try:
        return enum_type(value)
    except ValueError:
        msg = f"unrecognized value {value!r}"
        raise _InvalidEntry(msg) from None


# ============================================================================
# RECORD DECODERS
# ============================================================================


def _string(value: object) -> str:
    if not isinstance(value, str) or not value:
        msg = "'value' must be a non-empty string"
        raise _InvalidEntry(msg)
    return value


def _region_code(value: object, region_ids: tuple[str, ...]) -> RegionCode:
    if not isinstance(value, Mapping):
        msg = "region code value must be an object"
        raise _InvalidEntry(msg)
    return RegionCode(
        region_id=region_ids[0].upper(),
        alpha3=value.get("alpha3"),
        numeric=value.get("numeric"),
        fips10=value.get("fips10"),
        internet=_string_tuple(value.get("internet", ()), "internet"),
    )


def _region_record(
    decode: Callable[[Any, tuple[str, ...]], Any],
) -> Callable[[Any], RegionRecord[Any]]:
    def build(entry: Any) -> RegionRecord[Any]:
        region_ids = _keys(entry, "regions")
        return RegionRecord(region_ids=region_ids, value=decode(_field(entry, "value"), region_ids))

    return build


def _rules(entry: Mapping[str, Any]) -> Mapping[str, Any]:
    rules = _field(entry, "rules")
    if not isinstance(rules, Mapping):
        msg = "'rules' must be an object mapping category to rule text"
        raise _InvalidEntry(msg)
    return rules


def _plural_rule_set(entry: Any) -> LocaleRecord[Any]:
    locale_ids = _keys(entry, "locales")
    rules = _rules(entry)
    if not all(isinstance(source, str) for source in rules.values()):
        msg = "plural rule text must be a string"
        raise _InvalidEntry(msg)
    try:
        compiled = compile_rules(rules)
    except PluralRuleSyntaxError as e:
        msg = f"plural rule does not parse: {e}"
        raise _InvalidEntry(msg) from e
    return LocaleRecord(locale_ids=locale_ids, value=compiled)


def _day_period_rule_set(entry: Any) -> LocaleRecord[Any]:
    locale_ids = _keys(entry, "locales")
    periods: list[DayPeriodRule] = []
    for period, bounds in _rules(entry).items():
        if not isinstance(bounds, Mapping):
            msg = f"day period '{period}' must be an object"
            raise _InvalidEntry(msg)
        if "at" in bounds:
            periods.append(DayPeriodRule(period=period, at=parse_time_of_day(bounds["at"])))
        else:
            periods.append(
                DayPeriodRule(
                    period=period,
                    start=parse_time_of_day(_field(bounds, "from")),
                    before=parse_time_of_day(_field(bounds, "before")),
                )
            )
    return LocaleRecord(locale_ids=locale_ids, value=tuple(periods))


def _currency_name_set(entry: Any) -> LocaleRecord[Any]:
    locale_ids = _keys(entry, "locales")
    names = _field(entry, "names")
    if not isinstance(names, Mapping) or not all(
        isinstance(code, str) and isinstance(name, str) for code, name in names.items()
    ):
        msg = "'names' must map currency codes to strings"
        raise _InvalidEntry(msg)
    return LocaleRecord(
        locale_ids=locale_ids,
        value={code.upper(): name for code, name in names.items()},
    )


_CHARACTER_FIELDS = frozenset(
    {"main", "auxiliary", "index", "punctuation", "numbers", "character_order"}
)


def _character_set(entry: Any) -> LocaleRecord[Any]:
    locale_ids = _keys(entry, "locales")
    characters = _field(entry, "characters")
    if not isinstance(characters, Mapping):
        msg = "'characters' must be an object"
        raise _InvalidEntry(msg)
    unknown = sorted(set(characters) - _CHARACTER_FIELDS)
    if unknown:
        msg = f"unknown character sets {unknown}"
        raise _InvalidEntry(msg)
    if not all(isinstance(value, str) for value in characters.values()):
        msg = "character sets must be strings"
        raise _InvalidEntry(msg)
    return LocaleRecord(locale_ids=locale_ids, value=ExemplarCharacters(**characters))


def _currency_period(entry: Any) -> TemporalRecord[str]:
    if not isinstance(entry, Mapping):
        msg = f"expected an object, got {type(entry).__name__}"
        raise _InvalidEntry(msg)
    code = _field(entry, "value")
    if not isinstance(code, str) or not code.strip():
        msg = "'value' must be a currency code"
        raise _InvalidEntry(msg)
    valid_from = parse_instant(entry.get("from"))
    valid_to = parse_instant(entry.get("to"))
    if valid_from is not None and valid_to is not None:
        end, start = comparable_instants(valid_to, valid_from)
        if end < start:
            msg = f"period for {code} ends before it starts"
            raise _InvalidEntry(msg)
    return TemporalRecord(
        value=code.upper(),
        valid_from=valid_from,
        valid_to=valid_to,
        tender=bool(entry.get("tender", True)),
    )


# Document key -> (Dataset field, record decoder)
_LIST_COLLECTIONS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "telephone_codes": (
        "telephone_codes",
        _region_record(lambda value, _: _string_tuple(value, "value")),
    ),
    "postcode_regexes": (
        "postcode_regexes",
        _region_record(lambda value, _: _string(value)),
    ),
    "region_codes": ("region_codes", _region_record(_region_code)),
    "first_days_of_week": (
        "first_days_of_week",
        _region_record(lambda value, _: parse_weekday(value)),
    ),
    "paper_sizes": (
        "paper_sizes",
        _region_record(lambda value, _: _enum_value(PaperSize, value)),
    ),
    "measurement_systems": (
        "measurement_systems",
        _region_record(lambda value, _: _enum_value(MeasurementSystem, value)),
    ),
    "plural_rules": ("plural_rule_sets", _plural_rule_set),
    "ordinal_rules": ("ordinal_rule_sets", _plural_rule_set),
    "day_period_rules": ("day_period_rule_sets", _day_period_rule_set),
    "currency_display_names": ("currency_display_names", _currency_name_set),
    "characters": ("characters", _character_set),
}

_TEMPORAL_COLLECTIONS: frozenset[str] = frozenset({"currency_periods"})


# ============================================================================
# LOADING
# ============================================================================


def _reject(collection: str, index: int, reason: str, *, strict: bool, source: str) -> None:
    diagnostic = ErrorTemplate.load_invalid_entry(collection, index, reason)
    if strict:
        raise DatasetLoadError(diagnostic, source=source)
    logger.warning("Skipping malformed record in %s: %s", source, _LOG_FORMATTER.format(diagnostic))


def _decode_list(
    name: str,
    entries: object,
    decode: Callable[[Any], Any],
    *,
    strict: bool,
    source: str,
) -> list[Any]:
    if not isinstance(entries, list):
        _reject(name, 0, "collection must be a list", strict=strict, source=source)
        return []
    records: list[Any] = []
    for index, entry in enumerate(entries):
        try:
            records.append(decode(entry))
        except ValueError as e:
            _reject(name, index, str(e), strict=strict, source=source)
    return records


def _decode_temporal(
    name: str, entries: object, *, strict: bool, source: str
) -> dict[str, tuple[TemporalRecord[str], ...]]:
    if not isinstance(entries, Mapping):
        _reject(name, 0, "collection must map locale ids to lists", strict=strict, source=source)
        return {}
    decoded: dict[str, tuple[TemporalRecord[str], ...]] = {}
    for locale_id, periods in entries.items():
        decoded[locale_id] = tuple(
            _decode_list(
                f"{name}[{locale_id}]", periods, _currency_period, strict=strict, source=source
            )
        )
    return decoded


def dataset_from_mapping(
    document: Mapping[str, Any], *, strict: bool = True, source: str = "<mapping>"
) -> Dataset:
    """Build a Dataset from an already-decoded document.

    Args:
        document: Mapping in the layout described in this module's docstring
        strict: Raise on malformed records instead of skipping them
        source: Name used in diagnostics and log records

    Returns:
        Indexed Dataset

    Raises:
        DatasetLoadError: If document is not a mapping, or (strict) any
            record is malformed
    """
    if not isinstance(document, Mapping):
        raise DatasetLoadError(
            ErrorTemplate.load_invalid_entry("<document>", 0, "top level must be an object"),
            source=source,
        )

    fields: dict[str, Any] = {}
    for key, entries in document.items():
        if key in _LIST_COLLECTIONS:
            field_name, decode = _LIST_COLLECTIONS[key]
            fields[field_name] = _decode_list(key, entries, decode, strict=strict, source=source)
        elif key in _TEMPORAL_COLLECTIONS:
            fields[key] = _decode_temporal(key, entries, strict=strict, source=source)
        else:
            logger.warning("Ignoring unknown collection '%s' in %s", key, source)

    dataset = Dataset(**fields)
    logger.info(
        "Loaded dataset from %s: %s",
        source,
        ", ".join(f"{name}={len(value)}" for name, value in sorted(fields.items())) or "empty",
    )
    return dataset


def load_dataset(source: DatasetSource, *, strict: bool = True) -> Dataset:
    """Load a Dataset from a JSON file or an in-memory mapping.

    Args:
        source: Path to a UTF-8 JSON document, or a decoded mapping
        strict: Raise on malformed records instead of skipping them

    Returns:
        Indexed Dataset

    Raises:
        DatasetLoadError: If the file cannot be read or decoded, or
            (strict) any record is malformed

    Example:
        >>> dataset = load_dataset({"paper_sizes": [{"regions": ["001"], "value": "A4"}]})
        >>> len(dataset.paper_sizes)
        1
    """
    if isinstance(source, Mapping):
        return dataset_from_mapping(source, strict=strict)

    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetLoadError(
            ErrorTemplate.load_source_unreadable(str(path), str(e)), source=str(path)
        ) from e
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(
            ErrorTemplate.load_invalid_json(str(path), str(e)), source=str(path)
        ) from e
    return dataset_from_mapping(document, strict=strict, source=str(path))
