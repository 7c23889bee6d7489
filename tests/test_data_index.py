"""Tests for the Dataset model and its prebuilt indexes."""

from __future__ import annotations

import logging
from datetime import date

import pytest

from cldrfacts.data import (
    Dataset,
    DayPeriodRule,
    LocaleRecord,
    LocaleRuleIndex,
    RegionFactIndex,
    RegionRecord,
    TemporalIndex,
    TemporalRecord,
    normalize_key,
)
from cldrfacts.enums import LocaleCollection, RegionCollection, TemporalCollection, Weekday

# ============================================================================
# KEY NORMALIZATION
# ============================================================================


class TestNormalizeKey:
    """normalize_key() casefolds and unifies separators."""

    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [("en_US", "en-us"), (" EN-us ", "en-us"), ("zh_Hans_CN", "zh-hans-cn"), ("419", "419")],
    )
    def test_normalize(self, identifier: str, expected: str) -> None:
        """Case and separator differences disappear."""
        assert normalize_key(identifier) == expected


# ============================================================================
# REGION INDEX
# ============================================================================


class TestRegionFactIndex:
    """Region id -> owning record."""

    def test_every_listed_region_is_indexed(self) -> None:
        """A record is reachable through each of its region ids."""
        record = RegionRecord(("US", "CA", "PR"), ("1",))
        index = RegionFactIndex([record])
        assert all(index.get(region) is record for region in ("us", "CA", "pr"))
        assert len(index) == 3
        assert "ca" in index
        assert "MX" not in index
        assert 1 not in index  # type: ignore[operator]

    def test_first_occurrence_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        """A later record claiming a taken region is ignored with a warning."""
        first = RegionRecord(("US",), "first")
        second = RegionRecord(("us", "CA"), "second")
        with caplog.at_level(logging.WARNING, logger="cldrfacts.data.index"):
            index = RegionFactIndex([first, second], collection="paper_sizes")
        assert index.get("US") is first
        assert index.get("CA") is second
        assert "Duplicate key 'us' in paper_sizes" in caplog.text

    def test_records_keep_dataset_order(self) -> None:
        """records exposes the input order."""
        records = [RegionRecord(("B",), 2), RegionRecord(("A",), 1)]
        assert RegionFactIndex(records).records == tuple(records)
        assert list(RegionFactIndex(records)) == ["b", "a"]


# ============================================================================
# LOCALE INDEX
# ============================================================================


class TestLocaleRuleIndex:
    """Language -> rule set, plus the root set."""

    def test_root_set_is_exactly_root(self) -> None:
        """Only a record keyed by ("root",) alone is the root set."""
        shared = LocaleRecord(("ja", "root"), "shared")
        root = LocaleRecord(("ROOT",), "root")
        index = LocaleRuleIndex([shared, root])
        assert index.root is root
        assert index.get("ja") is shared
        # "root" as a key is claimed by the first record
        assert index.get("root") is shared

    def test_no_root(self) -> None:
        """Without a ("root",) record the root set is None."""
        assert LocaleRuleIndex([LocaleRecord(("en",), 1)]).root is None

    def test_duplicate_language_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        """Duplicate languages follow first-occurrence-wins."""
        first = LocaleRecord(("en", "de"), 1)
        with caplog.at_level(logging.WARNING, logger="cldrfacts.data.index"):
            index = LocaleRuleIndex([first, LocaleRecord(("de",), 2)])
        assert index.get("de") is first
        assert "Duplicate key 'de'" in caplog.text


# ============================================================================
# TEMPORAL INDEX
# ============================================================================


class TestTemporalIndex:
    """Exact locale id -> ordered records."""

    def test_exact_lookup_ignores_case_and_separator(self) -> None:
        """en_US, en-US and EN-us find the same records."""
        periods = (TemporalRecord("USD", valid_from=date(1792, 1, 1)),)
        index = TemporalIndex({"en-US": periods})
        assert index.get("en_US") == periods
        assert index.get("EN-us") == periods
        assert "en_us" in index
        assert list(index.keys()) == ["en-us"]

    def test_no_language_fallback(self) -> None:
        """A language alone does not find its specific locales."""
        index = TemporalIndex({"en-US": (TemporalRecord("USD"),)})
        assert index.get("en") == ()
        assert len(index) == 1


# ============================================================================
# DATASET
# ============================================================================


class TestDataset:
    """Dataset construction freezes collections and builds indexes."""

    def test_lists_become_tuples(self) -> None:
        """Collections passed as lists are stored as tuples."""
        dataset = Dataset(first_days_of_week=[RegionRecord(("US",), Weekday.SUNDAY)])  # type: ignore[arg-type]
        assert isinstance(dataset.first_days_of_week, tuple)

    def test_currency_periods_are_read_only(self) -> None:
        """The currency period mapping cannot be mutated after construction."""
        dataset = Dataset(currency_periods={"en-US": [TemporalRecord("USD")]})  # type: ignore[dict-item]
        assert dataset.currency_periods["en-US"] == (TemporalRecord("USD"),)
        with pytest.raises(TypeError):
            dataset.currency_periods["fr-FR"] = ()  # type: ignore[index]

    def test_dataset_is_frozen(self) -> None:
        """Fields cannot be reassigned."""
        dataset = Dataset()
        with pytest.raises(AttributeError):
            dataset.paper_sizes = ()  # type: ignore[misc]

    def test_one_index_per_collection(self) -> None:
        """Every collection enum member has an index, even when empty."""
        dataset = Dataset()
        for region_collection in RegionCollection:
            assert len(dataset.region_index(region_collection)) == 0
        for locale_collection in LocaleCollection:
            assert dataset.locale_index(locale_collection).root is None
        for temporal_collection in TemporalCollection:
            assert len(dataset.temporal_index(temporal_collection)) == 0

    def test_index_accessors_accept_strings(self) -> None:
        """Collection names can be passed as plain strings."""
        dataset = Dataset(paper_sizes=(RegionRecord(("001",), "A4"),))  # type: ignore[arg-type]
        assert dataset.region_index("paper_sizes").get("001") is not None  # type: ignore[arg-type]

    def test_day_period_rule_needs_bounds(self) -> None:
        """A DayPeriodRule is a point or a full window."""
        assert DayPeriodRule("noon", at=43200).at == 43200
        with pytest.raises(ValueError, match="needs 'at'"):
            DayPeriodRule("morning1", start=21600)
