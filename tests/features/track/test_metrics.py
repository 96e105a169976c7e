"""
Tests for track metrics.

Distance, elevation gain and duration over raw GPS samples.
"""

from datetime import datetime, timedelta, timezone

import pytest

from trackpath.features.track import GeoPoint, Track, compute_metrics, compute_duration_millis


# =============================================================================
# Test Data
# =============================================================================

T0 = datetime(2024, 6, 1, 8, 0, 0, tzinfo=timezone.utc)


def _at(seconds: float) -> datetime:
    return T0 + timedelta(seconds=seconds)


# =============================================================================
# Distance
# =============================================================================

class TestDistance:
    """Tests for total distance."""

    def test_empty_track(self):
        metrics = compute_metrics([])
        assert metrics.distance_meters == 0

    def test_single_point(self):
        metrics = compute_metrics([GeoPoint(43.0, 76.0)])
        assert metrics.distance_meters == 0

    def test_one_degree_at_equator(self):
        metrics = compute_metrics([GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0)])
        assert metrics.distance_meters == pytest.approx(111_195, rel=0.01)

    def test_elevation_ignored(self):
        """Elevation must not affect horizontal distance."""
        flat = compute_metrics([GeoPoint(43.0, 76.0, 1000), GeoPoint(43.01, 76.0, 1000)])
        climb = compute_metrics([GeoPoint(43.0, 76.0, 1000), GeoPoint(43.01, 76.0, 2000)])
        assert flat.distance_meters == pytest.approx(climb.distance_meters)


# =============================================================================
# Elevation Gain
# =============================================================================

class TestElevationGain:
    """Tests for elevation gain."""

    def test_absent_without_elevation(self):
        metrics = compute_metrics([GeoPoint(0, 0), GeoPoint(0, 1)])
        assert metrics.elevation_gain_meters is None

    def test_zero_gain_is_not_absent(self):
        metrics = compute_metrics([GeoPoint(0, 0, 500.0), GeoPoint(0, 1, 400.0)])
        assert metrics.elevation_gain_meters == 0.0

    def test_sums_positive_deltas(self):
        points = [
            GeoPoint(0, 0.000, 100.0),
            GeoPoint(0, 0.001, 130.0),
            GeoPoint(0, 0.002, 110.0),
            GeoPoint(0, 0.003, 160.0),
        ]
        assert compute_metrics(points).elevation_gain_meters == pytest.approx(80.0)

    def test_gap_not_bridged(self):
        points = [
            GeoPoint(0, 0.000, 100.0),
            GeoPoint(0, 0.001, None),
            GeoPoint(0, 0.002, 300.0),
            GeoPoint(0, 0.003, 310.0),
        ]
        assert compute_metrics(points).elevation_gain_meters == pytest.approx(10.0)


# =============================================================================
# Duration
# =============================================================================

class TestDuration:
    """Tests for duration."""

    def test_absent_without_timestamps(self):
        assert compute_metrics([GeoPoint(0, 0), GeoPoint(0, 1)]).duration_millis is None

    def test_absent_with_single_timestamp(self):
        points = [GeoPoint(0, 0, timestamp=_at(0)), GeoPoint(0, 1)]
        assert compute_duration_millis(points) is None

    def test_first_to_last_timestamped(self):
        """Untimed samples at the edges are skipped."""
        points = [
            GeoPoint(0, 0.0),
            GeoPoint(0, 0.1, timestamp=_at(10)),
            GeoPoint(0, 0.2, timestamp=_at(40)),
            GeoPoint(0, 0.3, timestamp=_at(70)),
            GeoPoint(0, 0.4),
        ]
        assert compute_metrics(points).duration_millis == pytest.approx(60_000)

    def test_out_of_order_clock_not_corrected(self):
        """last_found - first_found, even when negative."""
        points = [
            GeoPoint(0, 0.0, timestamp=_at(100)),
            GeoPoint(0, 0.1, timestamp=_at(300)),
            GeoPoint(0, 0.2, timestamp=_at(50)),
        ]
        assert compute_duration_millis(points) == pytest.approx(-50_000)

    def test_equal_timestamps_give_zero(self):
        points = [GeoPoint(0, 0, timestamp=_at(5)), GeoPoint(0, 1, timestamp=_at(5))]
        assert compute_duration_millis(points) == 0.0

    def test_naive_and_aware_timestamps_mix(self):
        """A zone-less timestamp is read as UTC."""
        points = [
            GeoPoint(0, 0, timestamp=datetime(2024, 6, 1, 8, 0, 0, tzinfo=timezone.utc)),
            GeoPoint(0, 1, timestamp=datetime(2024, 6, 1, 9, 0, 0)),
        ]
        assert compute_duration_millis(points) == pytest.approx(3_600_000)


# =============================================================================
# Track.from_points
# =============================================================================

class TestTrackFromPoints:
    """Tests for Track.from_points factory."""

    def test_computes_bounds_and_metrics(self):
        track = Track.from_points("loop", [GeoPoint(1, 2), GeoPoint(3, 4)])
        assert track.bounds.north == 3
        assert track.bounds.west == 2
        assert track.metrics.distance_meters > 0

    def test_empty_track_has_no_bounds(self):
        track = Track.from_points("empty", [])
        assert track.is_empty
        assert track.bounds is None
        assert track.metrics.distance_meters == 0

    def test_points_order_preserved(self):
        points = [GeoPoint(3, 0), GeoPoint(1, 0), GeoPoint(2, 0)]
        track = Track.from_points("zigzag", points)
        assert list(track.points) == points
