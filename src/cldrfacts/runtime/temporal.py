"""Selection among time-bounded records.

A record is valid at an instant when

    (valid_from is None or valid_from <= instant) and
    (valid_to is None or instant < valid_to)

Lower bound inclusive, upper bound exclusive, so back-to-back periods that
share a boundary date never both match. When several records are valid the
first one in dataset order wins.

Instants may be dates or datetimes:
    - A date bound compared with a datetime instant uses the instant's date.
    - A datetime bound compared with a date instant uses midnight of that date.
    - Aware datetimes are converted to UTC and compared naive.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime
from typing import Any

from cldrfacts.core.locale_key import LocaleKey
from cldrfacts.data.model import Dataset, Instant, TemporalRecord, comparable_instants
from cldrfacts.diagnostics import FrozenLocaleError, InvalidIdentifierError
from cldrfacts.enums import TemporalCollection

from .fallback import ResolveResult, coerce_collection, identifier_error

__all__ = [
    "is_valid_at",
    "resolve_all_temporal_facts",
    "resolve_temporal_fact",
    "select_all_temporal",
    "select_temporal",
]

logger = logging.getLogger(__name__)


def is_valid_at(record: TemporalRecord[Any], instant: Instant) -> bool:
    """True if instant lies in [valid_from, valid_to).

    Examples:
        >>> record = TemporalRecord("EUR", valid_from=date(1999, 1, 1))
        >>> is_valid_at(record, date(1999, 1, 1))
        True
        >>> is_valid_at(TemporalRecord("DEM", valid_to=date(2002, 2, 28)), date(2002, 2, 28))
        False
    """
    if record.valid_from is not None:
        bound, point = comparable_instants(record.valid_from, instant)
        if point < bound:
            return False
    if record.valid_to is not None:
        bound, point = comparable_instants(record.valid_to, instant)
        if not point < bound:
            return False
    return True


def select_temporal[T](
    records: Sequence[TemporalRecord[T]], instant: Instant
) -> TemporalRecord[T] | None:
    """First record valid at instant, or None.

    Args:
        records: Records in dataset order
        instant: Point in time to test

    Returns:
        The first valid record, or None if no record covers instant
    """
    for record in records:
        if is_valid_at(record, instant):
            return record
    return None


def select_all_temporal[T](
    records: Sequence[TemporalRecord[T]], instant: Instant
) -> tuple[TemporalRecord[T], ...]:
    """Every record valid at instant, in dataset order."""
    return tuple(record for record in records if is_valid_at(record, instant))


def _today() -> date:
    return datetime.now(UTC).date()


def _records_for(
    dataset: Dataset, locale_id: str, collection: TemporalCollection
) -> tuple[TemporalRecord[Any], ...]:
    records = dataset.temporal_index(collection).get(locale_id)
    if not records:
        logger.debug("%s: no records for '%s'", collection, locale_id)
    return records


def resolve_temporal_fact(
    dataset: Dataset,
    locale_id: str,
    collection: TemporalCollection,
    instant: Instant | None = None,
) -> ResolveResult[Any]:
    """Resolve the value valid at instant for a locale.

    The locale is looked up exactly (case- and separator-insensitive);
    there is no language or root fallback for time-bounded facts.

    Args:
        dataset: Dataset to search
        locale_id: Locale identifier (e.g. "en-US")
        collection: Time-bounded collection to search
        instant: Point in time (default: today, UTC)

    Returns:
        ``(value, errors)``; value is None when the locale has no records
        or none covers instant

    Raises:
        InvalidArgumentError: If collection is not a TemporalCollection
    """
    collection = coerce_collection(TemporalCollection, collection)
    try:
        LocaleKey.parse(locale_id)
    except InvalidIdentifierError as e:
        return None, identifier_error(e, locale_id, collection)

    at = instant if instant is not None else _today()
    record = select_temporal(_records_for(dataset, locale_id, collection), at)
    if record is None:
        return None, ()
    logger.debug("%s: '%s' at %s -> %s", collection, locale_id, at, record.value)
    return record.value, ()


def resolve_all_temporal_facts(
    dataset: Dataset,
    locale_id: str,
    collection: TemporalCollection,
    instant: Instant | None = None,
) -> tuple[tuple[TemporalRecord[Any], ...], tuple[FrozenLocaleError, ...]]:
    """Every record valid at instant for a locale, with any identifier errors.

    Raises:
        InvalidArgumentError: If collection is not a TemporalCollection
    """
    collection = coerce_collection(TemporalCollection, collection)
    try:
        LocaleKey.parse(locale_id)
    except InvalidIdentifierError as e:
        return (), identifier_error(e, locale_id, collection)

    at = instant if instant is not None else _today()
    return select_all_temporal(_records_for(dataset, locale_id, collection), at), ()
