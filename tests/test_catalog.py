"""Tests for the catalog store and its filter predicate."""
import pytest

from orbitwatch.catalog import (
    CatalogEvent,
    CatalogStore,
    filter_records,
    matches_search,
)
from orbitwatch.models import RISK_FILTER_ALL, DebrisRecord, RiskTier
from orbitwatch.sample_data import sample_records


def _record(name, catalog_id, tier=RiskTier.LOW, altitude=1500.0):
    return DebrisRecord(
        name=name,
        catalog_id=catalog_id,
        altitude_km=altitude,
        inclination="51.60",
        risk_tier=tier,
        latitude=0.0,
        longitude=0.0,
    )


@pytest.fixture
def store():
    s = CatalogStore()
    s.load(sample_records())
    return s


class TestMatchesSearch:

    def test_case_insensitive_name(self):
        assert matches_search(_record("COSMOS 2251 DEB", 1), "cosmos")

    def test_catalog_id_substring(self):
        assert matches_search(_record("X", 33788), "337")

    def test_empty_text_matches(self):
        assert matches_search(_record("X", 1), "")

    def test_no_match(self):
        assert not matches_search(_record("DELTA 1 DEB", 12326), "iridium")


class TestLoad:

    def test_round_trip_preserves_count_and_order(self, store):
        sample = sample_records()
        assert store.filtered == sample
        assert store.records == sample

    def test_resets_filters(self, store):
        store.set_search_text("sl-")
        store.set_risk_filter("medium")
        store.load(sample_records())
        assert store.search_text == ""
        assert store.risk_filter == RISK_FILTER_ALL
        assert len(store.filtered) == 20

    def test_replaces_wholesale(self, store):
        store.load([_record("ONLY", 1)])
        assert [r.name for r in store.records] == ["ONLY"]

    def test_emits_ready(self):
        s = CatalogStore()
        seen = []
        s.subscribe(lambda event, records: seen.append((event, len(records))))
        s.load(sample_records())
        assert seen == [(CatalogEvent.READY, 20)]


class TestFiltering:

    def test_cosmos_high(self, store):
        store.set_search_text("cosmos")
        store.set_risk_filter("high")
        names = [r.name for r in store.filtered]
        assert names == ["COSMOS 1408 DEB", "COSMOS 954 DEB"]
        assert "COSMOS 2251 DEB" not in names

    def test_search_by_catalog_id(self, store):
        store.set_search_text("337")
        assert [r.catalog_id for r in store.filtered] == [33788, 33766]

    def test_accepts_enum_selector(self, store):
        store.set_risk_filter(RiskTier.LOW)
        assert {r.risk_tier for r in store.filtered} == {RiskTier.LOW}
        assert store.risk_filter == "low"

    def test_unknown_selector_rejected(self, store):
        with pytest.raises(ValueError):
            store.set_risk_filter("critical")

    def test_idempotent(self, store):
        store.set_search_text("deb")
        store.set_risk_filter("medium")
        once = store.filtered
        store.set_search_text("deb")
        store.set_risk_filter("medium")
        assert store.filtered == once

    def test_subset_and_predicates_hold(self, store):
        store.set_search_text("r/b")
        store.set_risk_filter("medium")
        full = set(store.records)
        for r in store.filtered:
            assert r in full
            assert "r/b" in r.name.lower() or "r/b" in str(r.catalog_id)
            assert r.risk_tier is RiskTier.MEDIUM

    def test_preserves_catalog_order(self, store):
        store.set_risk_filter("high")
        order = [store.records.index(r) for r in store.filtered]
        assert order == sorted(order)

    def test_no_match_is_empty(self, store):
        store.set_search_text("no such object")
        assert store.filtered == ()

    def test_emits_filtered_synchronously(self, store):
        seen = []
        store.subscribe(lambda event, records: seen.append((event, records)))
        store.set_search_text("fengyun")
        assert len(seen) == 1
        event, records = seen[0]
        assert event is CatalogEvent.FILTERED
        assert [r.name for r in records] == ["FENGYUN 1C DEB"]

    def test_unsubscribe(self, store):
        seen = []

        def listener(event, records):
            seen.append(event)

        store.subscribe(listener)
        store.unsubscribe(listener)
        store.set_search_text("x")
        assert seen == []

    def test_filter_records_function(self):
        records = [_record("A DEB", 1, RiskTier.HIGH), _record("B DEB", 2)]
        assert filter_records(records, "deb", "high") == (records[0],)


class TestStatistics:

    def test_sample_counts(self, store):
        stats = store.statistics()
        assert stats.total == 20
        assert stats.high_risk == 10
        assert stats.low_earth_orbit == 20

    def test_ignores_filter(self, store):
        store.set_risk_filter("low")
        assert store.statistics().total == 20

    def test_leo_ceiling_exclusive(self):
        s = CatalogStore()
        s.load([_record("A", 1, altitude=1999.0), _record("B", 2, altitude=2000.0)])
        assert s.statistics().low_earth_orbit == 1

    def test_empty(self):
        stats = CatalogStore().statistics()
        assert (stats.total, stats.high_risk, stats.low_earth_orbit) == (0, 0, 0)
