"""Prebuilt lookup indexes over dataset collections.

Each index is built once, when its Dataset is constructed, and is read-only
afterwards. Lookups are O(1) dictionary hits on casefolded keys.

First occurrence wins: when two records claim the same key, the earlier
record keeps it and the later claim is logged at WARNING and ignored.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, KeysView, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

from cldrfacts.constants import CANONICAL_SEPARATOR, ROOT_LOCALE_ID
from cldrfacts.core.locale_key import split_subtags

if TYPE_CHECKING:
    from .model import LocaleRecord, RegionRecord, TemporalRecord

__all__ = ["LocaleRuleIndex", "RegionFactIndex", "TemporalIndex", "normalize_key"]

logger = logging.getLogger(__name__)


def normalize_key(identifier: str) -> str:
    """Casefold an identifier and unify its separators.

    Example:
        >>> normalize_key(" en_US ")
        'en-us'
    """
    return CANONICAL_SEPARATOR.join(split_subtags(identifier.strip().casefold()))


def _first_wins[R](
    entries: Iterable[tuple[str, R]], collection: str
) -> dict[str, R]:
    index: dict[str, R] = {}
    for key, record in entries:
        if key in index:
            logger.warning(
                "Duplicate key '%s' in %s ignored (first occurrence wins)", key, collection
            )
            continue
        index[key] = record
    return index


class RegionFactIndex[T]:
    """Region id -> record that owns it.

    Example:
        >>> from cldrfacts.data.model import RegionRecord
        >>> index = RegionFactIndex([RegionRecord(("US", "CA"), "letter")])
        >>> index.get("ca").value
        'letter'
    """

    __slots__ = ("_collection", "_index", "_records")

    def __init__(self, records: Sequence[RegionRecord[T]], *, collection: str = "") -> None:
        self._records = tuple(records)
        self._collection = str(collection)
        self._index: Mapping[str, RegionRecord[T]] = MappingProxyType(
            _first_wins(
                (
                    (normalize_key(region_id), record)
                    for record in self._records
                    for region_id in record.region_ids
                ),
                self._collection,
            )
        )
        logger.debug(
            "Indexed %d region keys from %d records for %s",
            len(self._index),
            len(self._records),
            self._collection or "<unnamed>",
        )

    def get(self, region_id: str) -> RegionRecord[T] | None:
        """Record whose key list contains region_id, or None."""
        return self._index.get(normalize_key(region_id))

    def __contains__(self, region_id: object) -> bool:
        return isinstance(region_id, str) and normalize_key(region_id) in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    @property
    def records(self) -> tuple[RegionRecord[T], ...]:
        """Records in dataset order."""
        return self._records


class LocaleRuleIndex[T]:
    """Language -> rule set that lists it, plus the root set.

    The root set is the record whose key list is exactly ("root",). A record
    listing "root" alongside other languages is indexed under each of them
    but is not the root set.
    """

    __slots__ = ("_collection", "_index", "_records", "_root")

    def __init__(self, records: Sequence[LocaleRecord[T]], *, collection: str = "") -> None:
        self._records = tuple(records)
        self._collection = str(collection)
        self._index: Mapping[str, LocaleRecord[T]] = MappingProxyType(
            _first_wins(
                (
                    (normalize_key(locale_id), record)
                    for record in self._records
                    for locale_id in record.locale_ids
                ),
                self._collection,
            )
        )
        self._root: LocaleRecord[T] | None = next(
            (
                record
                for record in self._records
                if tuple(normalize_key(key) for key in record.locale_ids) == (ROOT_LOCALE_ID,)
            ),
            None,
        )
        logger.debug(
            "Indexed %d language keys from %d records for %s (root set: %s)",
            len(self._index),
            len(self._records),
            self._collection or "<unnamed>",
            "yes" if self._root is not None else "no",
        )

    def get(self, language: str) -> LocaleRecord[T] | None:
        """Rule set whose key list contains language, or None."""
        return self._index.get(normalize_key(language))

    @property
    def root(self) -> LocaleRecord[T] | None:
        """The ("root",) rule set, or None."""
        return self._root

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and normalize_key(language) in self._index

    def __len__(self) -> int:
        return len(self._index)

    @property
    def records(self) -> tuple[LocaleRecord[T], ...]:
        """Records in dataset order."""
        return self._records


class TemporalIndex[T]:
    """Exact locale id -> ordered time-bounded records.

    Keys match case-insensitively with "-" and "_" treated alike, so
    "en_US", "en-US" and "EN-us" find the same records. There is no
    language fallback: "en" does not find "en-US".
    """

    __slots__ = ("_collection", "_index")

    def __init__(
        self,
        records: Mapping[str, Sequence[TemporalRecord[T]]],
        *,
        collection: str = "",
    ) -> None:
        self._collection = str(collection)
        self._index: Mapping[str, tuple[TemporalRecord[T], ...]] = MappingProxyType(
            _first_wins(
                ((normalize_key(key), tuple(periods)) for key, periods in records.items()),
                self._collection,
            )
        )
        logger.debug(
            "Indexed %d locale keys for %s", len(self._index), self._collection or "<unnamed>"
        )

    def get(self, locale_id: str) -> tuple[TemporalRecord[T], ...]:
        """Records for locale_id in dataset order (empty if none)."""
        return self._index.get(normalize_key(locale_id), ())

    def __contains__(self, locale_id: object) -> bool:
        return isinstance(locale_id, str) and normalize_key(locale_id) in self._index

    def __len__(self) -> int:
        return len(self._index)

    def keys(self) -> KeysView[str]:
        """Normalized locale keys."""
        return self._index.keys()
