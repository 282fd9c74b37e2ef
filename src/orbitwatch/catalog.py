"""Catalog store — the single owner of the record set and the live filter inputs."""

import logging
from collections.abc import Callable, Iterable
from enum import Enum

from orbitwatch.models import (
    RISK_FILTER_ALL,
    CatalogStatistics,
    DebrisRecord,
    RiskTier,
)

logger = logging.getLogger(__name__)

LEO_CEILING_KM = 2000


class CatalogEvent(str, Enum):
    READY = "catalog-ready"
    FILTERED = "filtered-changed"


CatalogListener = Callable[[CatalogEvent, tuple[DebrisRecord, ...]], None]


def matches_search(record: DebrisRecord, search_text: str) -> bool:
    """Case-insensitive substring match on name, or substring match on the catalog id."""
    term = search_text.lower()
    return term in record.name.lower() or term in str(record.catalog_id)


def matches_risk(record: DebrisRecord, risk_filter: str) -> bool:
    return risk_filter == RISK_FILTER_ALL or record.risk_tier.value == risk_filter


def filter_records(
    records: Iterable[DebrisRecord], search_text: str, risk_filter: str
) -> tuple[DebrisRecord, ...]:
    """Conjunctive search + risk filter. Preserves input order."""
    return tuple(
        r
        for r in records
        if matches_search(r, search_text) and matches_risk(r, risk_filter)
    )


class CatalogStore:
    """Full record set, filter inputs, and the derived filtered subset.

    Every write recomputes the subset over the full set and notifies
    listeners before returning, so a filter change is fully applied before
    the next input is accepted. There is no incremental diffing; each change
    is O(n) in the catalog size.
    """

    def __init__(self) -> None:
        self._records: tuple[DebrisRecord, ...] = ()
        self._search_text = ""
        self._risk_filter = RISK_FILTER_ALL
        self._filtered: tuple[DebrisRecord, ...] = ()
        self._listeners: list[CatalogListener] = []

    @property
    def records(self) -> tuple[DebrisRecord, ...]:
        return self._records

    @property
    def filtered(self) -> tuple[DebrisRecord, ...]:
        return self._filtered

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def risk_filter(self) -> str:
        return self._risk_filter

    def subscribe(self, listener: CatalogListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: CatalogListener) -> None:
        self._listeners.remove(listener)

    def load(self, records: Iterable[DebrisRecord]) -> None:
        """Replace the whole catalog and reset the filters to their defaults."""
        self._records = tuple(records)
        self._search_text = ""
        self._risk_filter = RISK_FILTER_ALL
        self._filtered = self._records
        logger.info("Catalog loaded: %d objects", len(self._records))
        self._emit(CatalogEvent.READY)

    def set_search_text(self, text: str) -> None:
        self._search_text = text
        self._refilter()

    def set_risk_filter(self, risk_filter: str | RiskTier) -> None:
        """Set the tier selector.

        Raises:
            ValueError: If the selector is neither "all" nor a RiskTier value.
        """
        value = risk_filter.value if isinstance(risk_filter, RiskTier) else risk_filter
        if value != RISK_FILTER_ALL and value not in {t.value for t in RiskTier}:
            raise ValueError(f"Unknown risk filter: {risk_filter!r}")
        self._risk_filter = value
        self._refilter()

    def statistics(self) -> CatalogStatistics:
        """Counts over the full catalog, independent of the current filter."""
        return CatalogStatistics(
            total=len(self._records),
            high_risk=sum(1 for r in self._records if r.risk_tier is RiskTier.HIGH),
            low_earth_orbit=sum(
                1 for r in self._records if r.altitude_km < LEO_CEILING_KM
            ),
        )

    def _refilter(self) -> None:
        self._filtered = filter_records(
            self._records, self._search_text, self._risk_filter
        )
        logger.debug("Filtered to %d objects", len(self._filtered))
        self._emit(CatalogEvent.FILTERED)

    def _emit(self, event: CatalogEvent) -> None:
        for listener in list(self._listeners):
            listener(event, self._filtered)
