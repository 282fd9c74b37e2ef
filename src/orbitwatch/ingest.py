"""Ingestion adapter — one-shot live feed load with an embedded fallback catalog."""

from __future__ import annotations

import logging
import random
from typing import Any

import httpx

from orbitwatch.catalog import CatalogStore
from orbitwatch.compute import derive_record
from orbitwatch.config import DEFAULT_SOURCE_URL
from orbitwatch.i18n import t
from orbitwatch.models import DebrisRecord, IngestionResult, RawElementSet
from orbitwatch.sample_data import sample_records

logger = logging.getLogger(__name__)

SOURCE_LIVE = "live"
SOURCE_SAMPLE = "sample"


class IngestionError(Exception):
    """Live feed could not be fetched or parsed."""


async def fetch_raw(client: httpx.AsyncClient, source_url: str) -> list[Any]:
    """Single GET against the feed. Returns the decoded JSON array.

    Raises:
        IngestionError: On transport failure, non-2xx status, invalid JSON,
            or a payload that is not a JSON array.
    """
    try:
        resp = await client.get(source_url)
        resp.raise_for_status()
        payload = resp.json()
    except httpx.HTTPError as e:
        raise IngestionError(f"feed request failed: {e}") from e
    except ValueError as e:
        raise IngestionError(f"feed returned invalid JSON: {e}") from e
    if not isinstance(payload, list):
        raise IngestionError(
            f"feed returned {type(payload).__name__}, expected a JSON array"
        )
    return payload


def derive_batch(raw_items: list[Any], rng: random.Random) -> tuple[DebrisRecord, ...]:
    """Derive every element. Non-object items are treated as empty objects."""
    records: list[DebrisRecord] = []
    for i, item in enumerate(raw_items):
        if not isinstance(item, dict):
            logger.warning("Feed item %d is %s, using defaults", i, type(item).__name__)
            item = {}
        records.append(derive_record(RawElementSet.from_json(item), rng))
    return tuple(records)


async def load(
    source_url: str = DEFAULT_SOURCE_URL,
    client: httpx.AsyncClient | None = None,
    rng: random.Random | None = None,
    timeout: float = 10.0,
    lang: str = "en",
) -> IngestionResult:
    """Load the catalog once: live feed first, embedded sample set on any failure.

    No retry is attempted.

    Args:
        source_url: Feed URL returning a JSON array of element sets.
        client: Optional client to use; one is created and closed otherwise.
        rng: Source for placeholder coordinates.
        timeout: Request timeout in seconds when creating a client.
        lang: Language code for the fallback notice.

    Returns:
        IngestionResult; `notice` is set only for the sample fallback.
    """
    rng = rng or random.Random()
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                raw_items = await fetch_raw(own_client, source_url)
        else:
            raw_items = await fetch_raw(client, source_url)
    except IngestionError as e:
        logger.warning("Live data unavailable, using sample data: %s", e)
        return IngestionResult(
            records=sample_records(),
            source=SOURCE_SAMPLE,
            notice=t("notice_sample", lang),
        )

    records = derive_batch(raw_items, rng)
    logger.info("Live data loaded: %d objects", len(records))
    return IngestionResult(records=records, source=SOURCE_LIVE)


async def load_into(store: CatalogStore, **kwargs: Any) -> IngestionResult:
    """Run load() and publish the records into the store."""
    result = await load(**kwargs)
    store.load(result.records)
    return result
