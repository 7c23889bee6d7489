"""Fallback resolution of locale- and region-keyed facts.

Two chains, each at most two steps:

    Locale facts:  language  ->  "root" set  ->  None
    Region facts:  region    ->  "001"       ->  None

Both operate on the indexes a Dataset builds at construction, so each step
is a single dictionary lookup. Neither chain walks script or variant
subtags: "zh-Hant-TW" resolves through "zh".

Results come back as ``(value, errors)``. A malformed identifier is a data
condition and is returned in ``errors``; an absent fact is ``(None, ())``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any

from cldrfacts.constants import WORLD_REGION_ID
from cldrfacts.core.locale_key import language_of
from cldrfacts.data.model import Dataset
from cldrfacts.diagnostics import (
    ErrorCategory,
    ErrorTemplate,
    FrozenErrorContext,
    FrozenLocaleError,
    InvalidArgumentError,
    InvalidIdentifierError,
)
from cldrfacts.enums import LocaleCollection, RegionCollection

__all__ = [
    "ResolveResult",
    "coerce_collection",
    "identifier_error",
    "resolve_locale_fact",
    "resolve_region_fact",
]

logger = logging.getLogger(__name__)

type ResolveResult[T] = tuple[T | None, tuple[FrozenLocaleError, ...]]
"""Resolved value (None when absent) and any identifier errors."""


def identifier_error(
    error: InvalidIdentifierError, identifier: str, collection: str
) -> tuple[FrozenLocaleError, ...]:
    """Freeze an identifier error into a one-element errors tuple."""
    context = FrozenErrorContext(identifier=str(identifier), collection=str(collection))
    return (FrozenLocaleError.from_exception(error, ErrorCategory.IDENTIFIER, context),)


def coerce_collection[C: StrEnum](enum_type: type[C], collection: object) -> C:
    """Convert a collection name to its enum member.

    Raises:
        InvalidArgumentError: If collection is not a member of enum_type
    """
    try:
        return enum_type(collection)
    except ValueError:
        kind = enum_type.__name__.removesuffix("Collection").lower()
        raise InvalidArgumentError(
            ErrorTemplate.unsupported_collection(collection, kind)
        ) from None


def _region_token(region_id: str) -> str:
    token = region_id.strip() if isinstance(region_id, str) else ""
    if not token:
        raise InvalidIdentifierError(ErrorTemplate.identifier_empty())
    if not token.isascii() or not token.isalnum():
        raise InvalidIdentifierError(
            ErrorTemplate.identifier_malformed(token, "region id must be letters or digits")
        )
    return token


def resolve_region_fact(
    dataset: Dataset, region_id: str, collection: RegionCollection
) -> ResolveResult[Any]:
    """Resolve a region-scoped fact: exact region, then world ("001").

    Matching is case-insensitive. There is no intermediate step: a region
    never falls back to its containing macro-region.

    Args:
        dataset: Dataset to search
        region_id: ISO 3166-1 alpha-2 or UN M.49 code (e.g. "US", "419")
        collection: Region-keyed collection to search

    Returns:
        ``(value, errors)``; value is None when neither the region nor
        "001" has an entry

    Raises:
        InvalidArgumentError: If collection is not a RegionCollection

    Example:
        >>> from cldrfacts.data import load_dataset
        >>> dataset = load_dataset({"first_days_of_week": [
        ...     {"regions": ["US"], "value": "sun"},
        ...     {"regions": ["001"], "value": "mon"},
        ... ]})
        >>> resolve_region_fact(dataset, "FR", RegionCollection.FIRST_DAYS_OF_WEEK)
        (<Weekday.MONDAY: 0>, ())
    """
    collection = coerce_collection(RegionCollection, collection)
    try:
        token = _region_token(region_id)
    except InvalidIdentifierError as e:
        return None, identifier_error(e, region_id, collection)

    index = dataset.region_index(collection)
    record = index.get(token)
    if record is not None:
        logger.debug("%s: region '%s' resolved directly", collection, token)
        return record.value, ()

    record = index.get(WORLD_REGION_ID)
    if record is not None:
        logger.debug("%s: region '%s' fell back to '%s'", collection, token, WORLD_REGION_ID)
        return record.value, ()

    logger.debug("%s: no entry for region '%s' or '%s'", collection, token, WORLD_REGION_ID)
    return None, ()


def resolve_locale_fact(
    dataset: Dataset, locale_id: str, collection: LocaleCollection
) -> ResolveResult[Any]:
    """Resolve a language-scoped fact: language, then the "root" set.

    The language is the first subtag of locale_id. The root set is the one
    whose key list is exactly ("root",).

    Args:
        dataset: Dataset to search
        locale_id: Locale identifier (e.g. "lv", "en-US", "pt_BR")
        collection: Locale-keyed collection to search

    Returns:
        ``(value, errors)``; value is None when neither the language nor
        root has an entry

    Raises:
        InvalidArgumentError: If collection is not a LocaleCollection
    """
    collection = coerce_collection(LocaleCollection, collection)
    try:
        language = language_of(locale_id)
    except InvalidIdentifierError as e:
        return None, identifier_error(e, locale_id, collection)

    index = dataset.locale_index(collection)
    record = index.get(language)
    if record is not None:
        logger.debug("%s: '%s' resolved by language '%s'", collection, locale_id, language)
        return record.value, ()

    if index.root is not None:
        logger.debug("%s: '%s' fell back to root", collection, locale_id)
        return index.root.value, ()

    logger.debug("%s: no entry for '%s' and no root set", collection, locale_id)
    return None, ()
