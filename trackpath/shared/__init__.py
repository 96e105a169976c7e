"""
Shared utilities (NOT business logic).

Usage:
    from trackpath.shared import haversine, calculate_elevation_gain
    from trackpath.shared.formatters import format_distance
"""
from .geo import (
    haversine,
    calculate_total_distance,
    longitude_scale,
    EARTH_RADIUS_M,
)
from .elevation import calculate_elevation_gain
from .time_utils import ensure_utc
from .formatters import (
    format_distance,
    format_duration,
    format_elevation,
)
from .errors import (
    TrackPathError,
    EmptyTrackError,
    InvalidOptionError,
    TrackParseError,
    DegenerateBoundsWarning,
)

__all__ = [
    # geo
    "haversine",
    "calculate_total_distance",
    "longitude_scale",
    "EARTH_RADIUS_M",
    # elevation
    "calculate_elevation_gain",
    # time
    "ensure_utc",
    # formatters
    "format_distance",
    "format_duration",
    "format_elevation",
    # errors
    "TrackPathError",
    "EmptyTrackError",
    "InvalidOptionError",
    "TrackParseError",
    "DegenerateBoundsWarning",
]
