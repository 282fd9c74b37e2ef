"""Embedded fallback catalog used when the live feed cannot be loaded.

Values are pre-computed and illustrative; they are not re-derived and not
re-classified on load.
"""

from orbitwatch.models import DebrisRecord, RiskTier

_H, _M, _L = RiskTier.HIGH, RiskTier.MEDIUM, RiskTier.LOW

# (name, catalog id, altitude km, inclination, tier, lat, lon)
_SAMPLE_ROWS: tuple[tuple[str, int, float, str, RiskTier, float, float], ...] = (
    ("COSMOS 2251 DEB", 33788, 780, "74.0", _M, 45.2, -120.5),
    ("FENGYUN 1C DEB", 29228, 430, "98.6", _H, -62.1, 80.3),
    ("IRIDIUM 33 DEB", 33766, 510, "86.4", _H, 70.5, 155.2),
    ("SL-8 R/B", 10966, 960, "65.8", _M, 30.1, -45.7),
    ("COSMOS 1408 DEB", 49271, 470, "82.9", _H, -55.3, 200.1),
    ("SL-16 R/B", 22285, 850, "71.0", _M, 55.0, -90.0),
    ("ARIANE DEB", 20596, 1400, "7.0", _L, 5.0, 30.0),
    ("DELTA 1 DEB", 12326, 550, "89.9", _H, -80.0, 60.0),
    ("SL-3 R/B", 2802, 300, "65.4", _H, 40.0, -10.0),
    ("COSMOS 3M DEB", 26900, 1100, "83.0", _M, -70.0, 100.0),
    ("BREEZE-M DEB", 37749, 620, "49.5", _H, 22.4, 75.3),
    ("CZ-4C DEB", 40906, 490, "97.4", _H, -33.6, 142.8),
    ("TITAN 3C TRANSTAGE", 3432, 1380, "32.5", _L, 18.9, -66.1),
    ("PEGASUS DEB", 22671, 740, "94.1", _M, 60.2, 33.7),
    ("RESURS-1 DEB", 20536, 350, "82.3", _H, -44.5, -170.2),
    ("ZENIT-2 DEB", 27006, 890, "71.0", _M, 51.8, 88.4),
    ("METEOR 2-5 DEB", 11593, 1200, "81.2", _M, -29.3, -55.6),
    ("THOR AGENA DEB", 1148, 280, "99.0", _H, 77.1, 12.3),
    ("SL-14 DEB", 14258, 1600, "62.8", _L, 38.5, -97.4),
    ("COSMOS 954 DEB", 10693, 410, "65.5", _H, -15.7, 44.9),
)


def sample_records() -> tuple[DebrisRecord, ...]:
    """Return the 20-object fallback catalog in its fixed order."""
    return tuple(
        DebrisRecord(
            name=name,
            catalog_id=catalog_id,
            altitude_km=float(altitude),
            inclination=inclination,
            risk_tier=tier,
            latitude=lat,
            longitude=lng,
        )
        for name, catalog_id, altitude, inclination, tier, lat, lng in _SAMPLE_ROWS
    )
