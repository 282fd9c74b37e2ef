"""View synchronizer — keeps the globe, table, tooltip and detail panel in step with the catalog.

Triggered by catalog store notifications and by pointer reports from the
rendering surface. All handlers run to completion synchronously.

Markers carry an opaque integer id. The id → record mapping lives in a side
table owned here, so domain records never hold rendering-surface objects.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from orbitwatch.catalog import CatalogEvent, CatalogStore
from orbitwatch.models import DebrisRecord, GeoPosition, Marker, RiskTier, ScreenPoint

logger = logging.getLogger(__name__)

# Camera focus: fly to this far above the object, then resume idle spin later
FOCUS_ALTITUDE_OFFSET_M = 2_000_000.0
FOCUS_DURATION_S = 2.0
IDLE_RESUME_DELAY_S = 3.0

HOVER_SCALE = 2.0

# Distance scale-down: full size at or below NEAR, half size at or beyond FAR
SCALE_NEAR_M = 1_000_000.0
SCALE_FAR_M = 50_000_000.0
SCALE_NEAR_VALUE = 1.0
SCALE_FAR_VALUE = 0.5

_POINT_SIZES: dict[RiskTier, float] = {
    RiskTier.HIGH: 6.0,
    RiskTier.MEDIUM: 4.0,
    RiskTier.LOW: 3.0,
}

# tier: (rgb, alpha)
_POINT_COLORS: dict[RiskTier, tuple[tuple[int, int, int], float]] = {
    RiskTier.HIGH: ((255, 0, 0), 0.9),
    RiskTier.MEDIUM: ((255, 255, 0), 0.8),
    RiskTier.LOW: ((0, 255, 136), 0.7),
}
_OUTLINE_ALPHA = 0.3


def point_size(tier: RiskTier) -> float:
    return _POINT_SIZES[tier]


def risk_color(tier: RiskTier, alpha: float | None = None) -> str:
    (r, g, b), default_alpha = _POINT_COLORS[tier]
    a = default_alpha if alpha is None else alpha
    return f"rgba({r},{g},{b},{a})"


def scale_by_distance(distance_m: float) -> float:
    """Size multiplier for a camera at distance_m. Linear between the two thresholds."""
    if distance_m <= SCALE_NEAR_M:
        return SCALE_NEAR_VALUE
    if distance_m >= SCALE_FAR_M:
        return SCALE_FAR_VALUE
    frac = (distance_m - SCALE_NEAR_M) / (SCALE_FAR_M - SCALE_NEAR_M)
    return SCALE_NEAR_VALUE + frac * (SCALE_FAR_VALUE - SCALE_NEAR_VALUE)


def marker_for(marker_id: int, record: DebrisRecord) -> Marker:
    return Marker(
        marker_id=marker_id,
        position=GeoPosition(
            latitude=record.latitude,
            longitude=record.longitude,
            altitude_m=record.altitude_km * 1000,
        ),
        color=risk_color(record.risk_tier),
        outline_color=risk_color(record.risk_tier, _OUTLINE_ALPHA),
        size=point_size(record.risk_tier),
    )


def focus_target(record: DebrisRecord) -> GeoPosition:
    """Camera target above a record. A non-finite altitude contributes nothing."""
    altitude_m = record.altitude_km * 1000 if math.isfinite(record.altitude_km) else 0.0
    return GeoPosition(
        latitude=record.latitude,
        longitude=record.longitude,
        altitude_m=altitude_m + FOCUS_ALTITUDE_OFFSET_M,
    )


class RenderingSurface(Protocol):
    def clear_markers(self) -> None: ...

    def add_marker(self, marker: Marker) -> None: ...

    def set_marker_size(self, marker_id: int, size: float) -> None: ...

    def pick_at(self, point: ScreenPoint) -> int | None: ...

    def fly_to(self, position: GeoPosition, duration_s: float) -> None: ...

    def set_idle_motion(self, enabled: bool) -> None: ...


class TablePresenter(Protocol):
    def show(self, records: tuple[DebrisRecord, ...]) -> None: ...


class TooltipPresenter(Protocol):
    def show(self, record: DebrisRecord, at: ScreenPoint) -> None: ...

    def hide(self) -> None: ...


class DetailPresenter(Protocol):
    def open(self, record: DebrisRecord) -> None: ...

    def close(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> None: ...


class DeadlineScheduler:
    """Fixed-delay timers for a single-threaded host.

    Callbacks are never run from call_later; the host calls run_due()
    whenever it gets control (e.g. once per Streamlit rerun).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._seq = itertools.count()
        self._pending: list[tuple[float, int, Callable[[], None]]] = []

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> None:
        heapq.heappush(
            self._pending, (self._clock() + delay_s, next(self._seq), callback)
        )

    def pending(self) -> int:
        return len(self._pending)

    def run_due(self, now: float | None = None) -> int:
        """Run every callback whose deadline has passed, in deadline order.

        Returns:
            Number of callbacks run.
        """
        now = self._clock() if now is None else now
        ran = 0
        while self._pending and self._pending[0][0] <= now:
            _, _, callback = heapq.heappop(self._pending)
            callback()
            ran += 1
        return ran


@dataclass
class InteractionState:
    hovered: DebrisRecord | None = None
    selected: DebrisRecord | None = None

    def clear(self) -> None:
        self.hovered = None
        self.selected = None


class ViewSynchronizer:
    """Pushes the filtered subset to every view and handles pointer reports.

    Args:
        surface: Rendering surface, or None when it failed to initialise. In
            that case plot updates are logged no-ops and the rest keeps working.
        table: Receives the filtered subset in catalog order.
        tooltip: Hover tooltip.
        detail: Single-instance detail panel.
        scheduler: Runs the delayed idle-motion resume after a focus.
    """

    def __init__(
        self,
        surface: RenderingSurface | None,
        table: TablePresenter,
        tooltip: TooltipPresenter,
        detail: DetailPresenter,
        scheduler: Scheduler,
    ) -> None:
        self._surface = surface
        self._table = table
        self._tooltip = tooltip
        self._detail = detail
        self._scheduler = scheduler
        self.state = InteractionState()
        self._records_by_marker: dict[int, DebrisRecord] = {}
        self._subset: tuple[DebrisRecord, ...] = ()

        if surface is None:
            logger.warning("Rendering surface unavailable; globe updates disabled")
            self._plot: Callable[[tuple[DebrisRecord, ...]], None] = self._skip_plot
        else:
            self._plot = self._plot_markers

    @property
    def surface_available(self) -> bool:
        return self._surface is not None

    @property
    def subset(self) -> tuple[DebrisRecord, ...]:
        return self._subset

    def attach(self, store: CatalogStore) -> None:
        store.subscribe(self.on_catalog_event)

    def record_for_marker(self, marker_id: int) -> DebrisRecord | None:
        return self._records_by_marker.get(marker_id)

    def on_catalog_event(
        self, event: CatalogEvent, records: tuple[DebrisRecord, ...]
    ) -> None:
        """Replace every view's contents with the new subset."""
        logger.debug("%s: %d records", event.value, len(records))
        self._subset = records
        self.state.clear()
        self._tooltip.hide()
        self._records_by_marker = dict(enumerate(records))
        self._plot(records)
        self._table.show(records)

    def on_pointer_move(self, point: ScreenPoint) -> None:
        record, marker_id = self._pick(point)
        if record is not None and marker_id is not None and self._surface is not None:
            self.state.hovered = record
            self._surface.set_marker_size(
                marker_id, point_size(record.risk_tier) * HOVER_SCALE
            )
            self._tooltip.show(record, point)
            return

        self.state.hovered = None
        self._tooltip.hide()
        self._reset_marker_sizes()

    def on_pointer_click(self, point: ScreenPoint) -> None:
        record, _ = self._pick(point)
        if record is None:
            return
        self.state.selected = record
        self._detail.open(record)
        self.focus_record(record)

    def focus_record(self, record: DebrisRecord) -> None:
        """Fly the camera to a record and pause idle motion for a fixed delay.

        The resume is not tied to the animation finishing.
        """
        if self._surface is None:
            logger.info("Focus on %s skipped: no rendering surface", record.name)
            return
        surface = self._surface
        surface.set_idle_motion(False)
        surface.fly_to(focus_target(record), FOCUS_DURATION_S)
        self._scheduler.call_later(
            IDLE_RESUME_DELAY_S, lambda: surface.set_idle_motion(True)
        )

    def close_detail(self) -> None:
        self.state.selected = None
        self._detail.close()

    def _pick(self, point: ScreenPoint) -> tuple[DebrisRecord | None, int | None]:
        if self._surface is None:
            return None, None
        marker_id = self._surface.pick_at(point)
        if marker_id is None:
            return None, None
        return self._records_by_marker.get(marker_id), marker_id

    def _reset_marker_sizes(self) -> None:
        # Every marker, not just the last hovered one: hover exits are not
        # guaranteed to be reported for each marker that was entered.
        if self._surface is None:
            return
        for marker_id, record in self._records_by_marker.items():
            self._surface.set_marker_size(marker_id, point_size(record.risk_tier))

    def _plot_markers(self, records: tuple[DebrisRecord, ...]) -> None:
        assert self._surface is not None
        self._surface.clear_markers()
        for marker_id, record in enumerate(records):
            self._surface.add_marker(marker_for(marker_id, record))
        logger.info("Plotted %d objects on globe", len(records))

    def _skip_plot(self, records: tuple[DebrisRecord, ...]) -> None:
        logger.warning(
            "Rendering surface not initialised; skipped plotting %d objects",
            len(records),
        )
