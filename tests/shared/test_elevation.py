"""
Tests for shared elevation functions.
"""

import pytest

from trackpath.shared.elevation import calculate_elevation_gain


class TestCalculateElevationGain:
    """Tests for calculate_elevation_gain function."""

    def test_empty(self):
        """No samples means no elevation data at all."""
        assert calculate_elevation_gain([]) is None

    def test_all_missing(self):
        assert calculate_elevation_gain([None, None, None]) is None

    def test_single_sample_is_zero_not_none(self):
        """One elevation is data; the gain is zero, not absent."""
        assert calculate_elevation_gain([1000.0]) == 0.0

    def test_only_positive_deltas_count(self):
        gain = calculate_elevation_gain([100.0, 150.0, 120.0, 200.0])
        assert gain == pytest.approx(50.0 + 80.0)

    def test_descent_only(self):
        assert calculate_elevation_gain([300.0, 200.0, 100.0]) == 0.0

    def test_missing_sample_is_not_bridged(self):
        """100 -> None -> 200: the +100 across the gap is not counted."""
        assert calculate_elevation_gain([100.0, None, 200.0]) == 0.0

    def test_pairs_around_gap_still_count(self):
        gain = calculate_elevation_gain([100.0, 110.0, None, 200.0, 230.0])
        assert gain == pytest.approx(10.0 + 30.0)
