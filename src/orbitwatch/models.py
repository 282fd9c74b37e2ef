"""Data model definitions — explicit boundaries between ingest, catalog, and view layers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

UNKNOWN_NAME = "Unknown"
RISK_FILTER_ALL = "all"


class RiskTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def _to_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _to_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


@dataclass(frozen=True)
class RawElementSet:
    """One orbital element set as delivered by the feed. Not yet validated."""

    object_name: str | None  # "COSMOS 2251 DEB"; None when missing
    catalog_id: int  # NORAD catalog number; 0 when missing
    mean_motion: float  # Revolutions per day; NaN when missing
    inclination: float | None  # Degrees; None when missing
    eccentricity: float  # Unitless; 0.0 when missing

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> RawElementSet:
        """Build from a feed object, substituting defaults for bad fields.

        A single malformed record must never abort a batch, so nothing here
        raises for missing or unparseable values.
        """
        name = obj.get("OBJECT_NAME")
        inclination = _to_float(obj.get("INCLINATION"), math.nan)
        return cls(
            object_name=str(name) if name else None,
            catalog_id=_to_int(obj.get("NORAD_CAT_ID"), 0),
            mean_motion=_to_float(obj.get("MEAN_MOTION"), math.nan),
            inclination=None if math.isnan(inclination) else inclination,
            eccentricity=_to_float(obj.get("ECCENTRICITY"), 0.0),
        )


@dataclass(frozen=True)
class DebrisRecord:
    """A tracked object with derived altitude and risk tier."""

    name: str
    catalog_id: int
    altitude_km: float  # Rounded for live data; may be non-finite for degenerate input
    inclination: str | None  # Display text ("98.60"); None when the feed omitted it
    risk_tier: RiskTier
    latitude: float  # Degrees
    longitude: float  # Degrees
    # Live feed coordinates are random placeholders, not a ground-track position
    position_is_placeholder: bool = False


@dataclass(frozen=True)
class GeoPosition:
    latitude: float  # Degrees
    longitude: float  # Degrees
    altitude_m: float  # Metres above the mean Earth radius


@dataclass(frozen=True)
class ScreenPoint:
    x: float  # Pixels from the left edge of the surface
    y: float  # Pixels from the top edge of the surface


@dataclass(frozen=True)
class Marker:
    """A positioned, coloured point handed to the rendering surface.

    Carries an opaque id only; the record lives in the synchronizer's side table.
    """

    marker_id: int
    position: GeoPosition
    color: str  # CSS rgba() string
    outline_color: str  # CSS rgba() string
    size: float  # Surface-native point size before distance scaling


@dataclass(frozen=True)
class CatalogStatistics:
    total: int
    high_risk: int
    low_earth_orbit: int  # altitude < 2000 km


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of the one-shot load. The only input to the catalog store."""

    records: tuple[DebrisRecord, ...]
    source: str  # "live" or "sample"
    notice: str | None = None  # Non-blocking advisory shown when sample data is in use
