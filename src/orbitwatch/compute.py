"""Orbital derivation layer — mean motion to altitude, and altitude/eccentricity to risk tier."""

import math
import random

import numpy as np

from orbitwatch.models import UNKNOWN_NAME, DebrisRecord, RawElementSet, RiskTier

MU_EARTH = 398600.4418  # km^3/s^2
EARTH_RADIUS_KM = 6371.0
SECONDS_PER_DAY = 86400.0

HIGH_RISK_ALTITUDE_KM = 500.0
MEDIUM_RISK_ALTITUDE_KM = 2000.0
HIGH_RISK_ECCENTRICITY = 0.01


def derive_altitude(mean_motion: float) -> float:
    """Convert mean motion to altitude above the mean Earth radius.

    Applies Kepler's third law: a = (mu / n^2)^(1/3), with n in rad/s.

    Input is not validated. Zero mean motion yields +inf and NaN yields NaN;
    callers that care must check upstream.

    Args:
        mean_motion: Revolutions per day.

    Returns:
        Altitude in km.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        n = np.float64(mean_motion) * 2 * np.pi / SECONDS_PER_DAY
        semi_major_axis = np.cbrt(MU_EARTH / (n * n))
    return float(semi_major_axis - EARTH_RADIUS_KM)


def classify_risk(altitude_km: float, eccentricity: float) -> RiskTier:
    """Coarse risk tier. Check order is significant.

    Eccentricity is OR'd into the first check, so an elongated orbit is
    high risk at any altitude.
    """
    if altitude_km < HIGH_RISK_ALTITUDE_KM or eccentricity > HIGH_RISK_ECCENTRICITY:
        return RiskTier.HIGH
    if altitude_km < MEDIUM_RISK_ALTITUDE_KM:
        return RiskTier.MEDIUM
    return RiskTier.LOW


def placeholder_position(rng: random.Random) -> tuple[float, float]:
    """Uniform random (lat, lon) in degrees.

    Stands in for a ground-track position, which would need orbit propagation.
    """
    return rng.random() * 180 - 90, rng.random() * 360 - 180


def derive_record(raw: RawElementSet, rng: random.Random) -> DebrisRecord:
    """Derive a DebrisRecord from a raw element set.

    Args:
        raw: Parsed feed element set.
        rng: Source for the placeholder coordinates.

    Returns:
        DebrisRecord flagged with position_is_placeholder=True.
    """
    altitude = derive_altitude(raw.mean_motion)
    lat, lng = placeholder_position(rng)
    return DebrisRecord(
        name=raw.object_name or UNKNOWN_NAME,
        catalog_id=raw.catalog_id,
        # Half-up rounding, not round()'s half-to-even
        altitude_km=float(math.floor(altitude + 0.5))
        if math.isfinite(altitude)
        else altitude,
        inclination=None if raw.inclination is None else f"{raw.inclination:.2f}",
        # Classified on the unrounded altitude
        risk_tier=classify_risk(altitude, raw.eccentricity),
        latitude=lat,
        longitude=lng,
        position_is_placeholder=True,
    )
