"""
Tests for display formatters.
"""

from trackpath.shared.formatters import (
    MISSING,
    format_distance,
    format_duration,
    format_elevation,
)


class TestFormatDistance:

    def test_meters(self):
        assert format_distance(850.4) == "850 m"

    def test_meters_rounded_not_truncated(self):
        assert format_distance(849.6) == "850 m"

    def test_rounding_up_to_a_kilometer(self):
        """999.7 m rounds to 1000 m, which is shown in km."""
        assert format_distance(999.7) == "1.0 km"

    def test_kilometers(self):
        assert format_distance(12_345) == "12.3 km"

    def test_zero(self):
        assert format_distance(0) == "0 m"


class TestFormatDuration:

    def test_missing(self):
        assert format_duration(None) == MISSING

    def test_negative_is_missing(self):
        """Out-of-order clocks give a negative duration; nothing to show."""
        assert format_duration(-1000) == MISSING

    def test_minutes_only(self):
        assert format_duration(42 * 60_000) == "42m"

    def test_hours_and_minutes(self):
        assert format_duration((2 * 60 + 5) * 60_000) == "2h 05m"


class TestFormatElevation:

    def test_missing(self):
        assert format_elevation(None) == MISSING

    def test_positive(self):
        assert format_elevation(849.6) == "+850 m"

    def test_zero(self):
        assert format_elevation(0.0) == "+0 m"
