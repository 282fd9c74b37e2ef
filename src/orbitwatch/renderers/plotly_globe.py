"""Plotly orthographic globe renderer.

Implements the rendering-surface side of the synchronizer: holds the marker
set, answers screen-space picks, and animates its viewpoint.

Screen coordinate system (matches the Plotly geo subplot at projection
scale 1 with zero margins):
  x ∈ [0, width]   left → right
  y ∈ [0, height]  top → bottom
  globe centre at (width / 2, height / 2)
"""

from __future__ import annotations

import math

import numpy as np
import plotly.graph_objects as go

from orbitwatch.models import GeoPosition, Marker, ScreenPoint
from orbitwatch.sync import scale_by_distance

_BG = "#000000"
_LAND_COLOR = "#0a1628"
_OCEAN_COLOR = "#050a1a"
_COAST_COLOR = "#1a3a5c"

DEFAULT_CAMERA_ALTITUDE_M = 25_000_000.0
DEFAULT_CENTER = (20.0, 0.0)  # (lat, lon)
MAX_ZOOM = 8.0
IDLE_DEG_PER_S = 1.0
PICK_TOLERANCE_PX = 3.0


class PlotlyGlobe:
    """Marker set + view state for a Plotly Scattergeo globe.

    Args:
        width: Viewport width in pixels.
        height: Viewport height in pixels.
    """

    def __init__(self, width: int = 800, height: int = 800) -> None:
        self.width = width
        self.height = height
        self._markers: dict[int, Marker] = {}
        self.center_lat, self.center_lon = DEFAULT_CENTER
        self.camera_altitude_m = DEFAULT_CAMERA_ALTITUDE_M
        self.idle_motion = True
        self._transition_s = 0.0

    # --- marker set ---

    def clear_markers(self) -> None:
        self._markers.clear()

    def add_marker(self, marker: Marker) -> None:
        self._markers[marker.marker_id] = marker

    def set_marker_size(self, marker_id: int, size: float) -> None:
        marker = self._markers.get(marker_id)
        if marker is None:
            return
        self._markers[marker_id] = Marker(
            marker_id=marker.marker_id,
            position=marker.position,
            color=marker.color,
            outline_color=marker.outline_color,
            size=size,
        )

    def marker(self, marker_id: int) -> Marker | None:
        return self._markers.get(marker_id)

    def marker_ids(self) -> list[int]:
        return list(self._markers)

    # --- view ---

    @property
    def zoom(self) -> float:
        """Projection scale derived from camera altitude. 1 = whole globe in view."""
        ratio = DEFAULT_CAMERA_ALTITUDE_M / max(self.camera_altitude_m, 1.0)
        return float(np.clip(ratio, 1.0, MAX_ZOOM))

    @property
    def globe_radius_px(self) -> float:
        return min(self.width, self.height) / 2 * self.zoom

    def fly_to(self, position: GeoPosition, duration_s: float) -> None:
        self.center_lat = position.latitude
        self.center_lon = _wrap_lon(position.longitude)
        if math.isfinite(position.altitude_m):
            self.camera_altitude_m = position.altitude_m
        self._transition_s = duration_s

    def set_idle_motion(self, enabled: bool) -> None:
        self.idle_motion = enabled

    def advance(self, elapsed_s: float) -> None:
        """Apply idle rotation for elapsed_s seconds, if enabled."""
        if self.idle_motion and elapsed_s > 0:
            self.center_lon = _wrap_lon(self.center_lon + IDLE_DEG_PER_S * elapsed_s)

    # --- projection / picking ---

    def project(self, position: GeoPosition) -> ScreenPoint | None:
        """Orthographic projection onto the viewport. None on the far hemisphere."""
        phi = math.radians(position.latitude)
        phi0 = math.radians(self.center_lat)
        dlam = math.radians(position.longitude - self.center_lon)

        cos_c = math.sin(phi0) * math.sin(phi) + math.cos(phi0) * math.cos(
            phi
        ) * math.cos(dlam)
        if cos_c < 0:
            return None

        r = self.globe_radius_px
        x = r * math.cos(phi) * math.sin(dlam)
        y = r * (
            math.cos(phi0) * math.sin(phi)
            - math.sin(phi0) * math.cos(phi) * math.cos(dlam)
        )
        return ScreenPoint(self.width / 2 + x, self.height / 2 - y)

    def locate(self, marker_id: int) -> ScreenPoint | None:
        marker = self._markers.get(marker_id)
        return None if marker is None else self.project(marker.position)

    def pick_at(self, point: ScreenPoint) -> int | None:
        """Nearest visible marker whose drawn disc covers point, else None."""
        scale = scale_by_distance(self.camera_altitude_m)
        best: tuple[float, int] | None = None
        for marker_id, marker in self._markers.items():
            screen = self.project(marker.position)
            if screen is None:
                continue
            d = math.hypot(screen.x - point.x, screen.y - point.y)
            if d > marker.size * scale / 2 + PICK_TOLERANCE_PX:
                continue
            if best is None or d < best[0]:
                best = (d, marker_id)
        return None if best is None else best[1]

    # --- drawing ---

    def figure(self, hover_text: dict[int, str] | None = None) -> go.Figure:
        """Render the current marker set and view as a Plotly Figure.

        Args:
            hover_text: Optional marker id → HTML hover label.

        Returns:
            Plotly Figure; each point's customdata is its marker id.
        """
        markers = list(self._markers.values())
        scale = scale_by_distance(self.camera_altitude_m)
        hover_text = hover_text or {}

        trace = go.Scattergeo(
            lat=[m.position.latitude for m in markers],
            lon=[m.position.longitude for m in markers],
            mode="markers",
            marker=dict(
                size=[m.size * scale for m in markers],
                color=[m.color for m in markers],
                line=dict(color=[m.outline_color for m in markers], width=2),
            ),
            customdata=[m.marker_id for m in markers],
            text=[hover_text.get(m.marker_id, "") for m in markers],
            hovertemplate="%{text}<extra></extra>",
            name="debris",
        )

        fig = go.Figure(data=[trace])
        fig.update_layout(
            paper_bgcolor=_BG,
            plot_bgcolor=_BG,
            showlegend=False,
            margin=dict(l=0, r=0, t=0, b=0),
            width=self.width,
            height=self.height,
            clickmode="event+select",
            geo=dict(
                projection=dict(
                    type="orthographic",
                    rotation=dict(lat=self.center_lat, lon=self.center_lon),
                    scale=self.zoom,
                ),
                bgcolor=_BG,
                showland=True,
                landcolor=_LAND_COLOR,
                showocean=True,
                oceancolor=_OCEAN_COLOR,
                showcoastlines=True,
                coastlinecolor=_COAST_COLOR,
                showframe=False,
            ),
        )
        if self._transition_s > 0:
            # One-shot: only the render right after a fly_to animates
            fig.update_layout(
                transition=dict(duration=int(self._transition_s * 1000)),
            )
            self._transition_s = 0.0
        fig._config = {"scrollZoom": True, "displayModeBar": False}  # type: ignore[attr-defined]
        return fig


def _wrap_lon(lon: float) -> float:
    return (lon + 180.0) % 360.0 - 180.0
