"""Tests for the Plotly globe rendering surface."""
import math

import plotly.graph_objects as go
import pytest

from orbitwatch.models import GeoPosition, Marker, ScreenPoint
from orbitwatch.renderers.plotly_globe import (
    DEFAULT_CAMERA_ALTITUDE_M,
    IDLE_DEG_PER_S,
    MAX_ZOOM,
    PlotlyGlobe,
)


def _marker(marker_id, lat, lon, size=6.0):
    return Marker(
        marker_id=marker_id,
        position=GeoPosition(lat, lon, 500_000),
        color="rgba(255,0,0,0.9)",
        outline_color="rgba(255,0,0,0.3)",
        size=size,
    )


@pytest.fixture
def globe():
    g = PlotlyGlobe(width=800, height=800)
    g.fly_to(GeoPosition(0.0, 0.0, DEFAULT_CAMERA_ALTITUDE_M), 0.0)
    return g


class TestProjection:

    def test_center_projects_to_viewport_center(self, globe):
        assert globe.project(GeoPosition(0, 0, 0)) == ScreenPoint(400, 400)

    def test_east_limb(self, globe):
        p = globe.project(GeoPosition(0, 90, 0))
        assert p.x == pytest.approx(800)
        assert p.y == pytest.approx(400)

    def test_north_is_up(self, globe):
        p = globe.project(GeoPosition(45, 0, 0))
        assert p.y < 400

    def test_far_side_hidden(self, globe):
        assert globe.project(GeoPosition(0, 180, 0)) is None


class TestPick:

    def test_pick_marker_under_cursor(self, globe):
        globe.add_marker(_marker(3, 0, 0))
        assert globe.pick_at(ScreenPoint(401, 400)) == 3

    def test_pick_miss(self, globe):
        globe.add_marker(_marker(3, 0, 0))
        assert globe.pick_at(ScreenPoint(100, 100)) is None

    def test_nearest_wins(self, globe):
        globe.add_marker(_marker(1, 0, 0))
        globe.add_marker(_marker(2, 0, 0.5))
        assert globe.pick_at(ScreenPoint(401, 400)) == 1

    def test_far_hemisphere_not_pickable(self, globe):
        globe.add_marker(_marker(1, 0, 180))
        assert all(
            globe.pick_at(ScreenPoint(x, 400)) is None for x in range(0, 801, 50)
        )

    def test_locate_round_trips_through_pick(self, globe):
        globe.add_marker(_marker(5, 30, -20))
        assert globe.pick_at(globe.locate(5)) == 5

    def test_clear_markers(self, globe):
        globe.add_marker(_marker(1, 0, 0))
        globe.clear_markers()
        assert globe.marker_ids() == []
        assert globe.pick_at(ScreenPoint(400, 400)) is None


class TestMarkerSize:

    def test_set_size(self, globe):
        globe.add_marker(_marker(1, 0, 0, size=6))
        globe.set_marker_size(1, 12)
        assert globe.marker(1).size == 12

    def test_unknown_marker_ignored(self, globe):
        globe.set_marker_size(42, 12)
        assert globe.marker(42) is None


class TestView:

    def test_default_zoom_shows_whole_globe(self):
        assert PlotlyGlobe().zoom == 1.0

    def test_fly_to_recenters_and_zooms(self, globe):
        globe.fly_to(GeoPosition(-62.1, 80.3, 2_430_000), 2.0)
        assert globe.center_lat == -62.1
        assert globe.center_lon == pytest.approx(80.3)
        assert globe.zoom == MAX_ZOOM

    def test_fly_to_wraps_longitude(self, globe):
        globe.fly_to(GeoPosition(-55.3, 200.1, 2_470_000), 2.0)
        assert globe.center_lon == pytest.approx(-159.9)

    def test_fly_to_non_finite_altitude_keeps_camera_distance(self, globe):
        globe.fly_to(GeoPosition(10.0, 20.0, math.nan), 2.0)
        assert globe.center_lat == 10.0
        assert globe.camera_altitude_m == DEFAULT_CAMERA_ALTITUDE_M
        assert math.isfinite(globe.zoom)

    def test_idle_motion_rotates(self, globe):
        globe.advance(10)
        assert globe.center_lon == pytest.approx(10 * IDLE_DEG_PER_S)

    def test_idle_motion_paused(self, globe):
        globe.set_idle_motion(False)
        globe.advance(10)
        assert globe.center_lon == 0.0


class TestFigure:

    def test_markers_drawn_with_ids(self, globe):
        globe.add_marker(_marker(4, 10, 20))
        globe.add_marker(_marker(9, -10, -20))
        fig = globe.figure({4: "<b>A</b>"})
        assert isinstance(fig, go.Figure)
        trace = fig.data[0]
        assert list(trace.customdata) == [4, 9]
        assert list(trace.text) == ["<b>A</b>", ""]
        assert fig.layout.geo.projection.type == "orthographic"

    def test_sizes_scaled_by_distance(self, globe):
        globe.add_marker(_marker(1, 0, 0, size=6))
        size = globe.figure().data[0].marker.size[0]
        assert size < 6

    def test_transition_only_after_fly_to(self, globe):
        globe.fly_to(GeoPosition(0, 0, DEFAULT_CAMERA_ALTITUDE_M), 2.0)
        assert globe.figure().layout.transition.duration == 2000
        assert globe.figure().layout.transition.duration is None
