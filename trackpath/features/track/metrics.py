"""
Track Metrics

Scalar summary of a raw point sequence: distance, elevation gain, duration.
"""

import logging
from typing import Optional, Sequence

from trackpath.shared.geo import calculate_total_distance
from trackpath.shared.elevation import calculate_elevation_gain
from trackpath.shared.time_utils import ensure_utc
from .schemas import GeoPoint, TrackMetrics

logger = logging.getLogger(__name__)


def compute_metrics(points: Sequence[GeoPoint]) -> TrackMetrics:
    """
    Compute summary statistics for a track.

    Never raises: missing elevations or timestamps simply leave the
    corresponding metric as None.

    Args:
        points: Ordered GPS samples (may be empty)

    Returns:
        TrackMetrics with distance in meters, optional gain and duration
    """
    distance = calculate_total_distance(
        (p.latitude, p.longitude) for p in points
    )
    gain = calculate_elevation_gain([p.elevation for p in points])
    duration = compute_duration_millis(points)

    logger.debug(
        f"Metrics for {len(points)} points: distance={distance:.1f}m, "
        f"gain={gain}, duration={duration}"
    )

    return TrackMetrics(
        distance_meters=distance,
        duration_millis=duration,
        elevation_gain_meters=gain,
    )


def compute_duration_millis(points: Sequence[GeoPoint]) -> Optional[float]:
    """
    Time between the first and the last timestamped sample.

    Timestamps are not assumed to be increasing; the result is simply
    last_found - first_found.

    Returns:
        Duration in milliseconds, or None with fewer than two timestamped samples
    """
    first_idx = next(
        (i for i, p in enumerate(points) if p.timestamp is not None), None
    )
    if first_idx is None:
        return None

    last_idx = next(
        i for i in range(len(points) - 1, -1, -1)
        if points[i].timestamp is not None
    )
    if last_idx == first_idx:
        return None

    # Zone-less timestamps count as UTC so mixed inputs still subtract
    delta = ensure_utc(points[last_idx].timestamp) - ensure_utc(points[first_idx].timestamp)
    return delta.total_seconds() * 1000
