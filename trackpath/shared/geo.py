"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for great-circle calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from typing import Iterable, Tuple

# Mean Earth radius in meters
EARTH_RADIUS_M = 6_371_000.0


def _hav(theta: float) -> float:
    """Haversine of an angle in radians."""
    return math.sin(theta / 2) ** 2


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Great-circle distance in meters between two (lat, lon) points in degrees.

    Uses the mean Earth radius; accurate to well under 1% for track-scale
    segments.
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    h = _hav(phi2 - phi1) + math.cos(phi1) * math.cos(phi2) * _hav(math.radians(lon2 - lon1))
    # Rounding can push h a hair past 1 for antipodal points
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(min(1.0, h)))


def calculate_total_distance(coordinates: Iterable[Tuple[float, float]]) -> float:
    """
    Calculate total distance along an ordered sequence of coordinates.

    Args:
        coordinates: Ordered (lat, lon) pairs

    Returns:
        Total distance in meters (0 for fewer than two coordinates)
    """
    total = 0.0
    previous = None

    for lat, lon in coordinates:
        if previous is not None:
            total += haversine(previous[0], previous[1], lat, lon)
        previous = (lat, lon)

    return total


def longitude_scale(latitude: float) -> float:
    """Ground length of one degree of longitude relative to one degree of latitude."""
    return math.cos(math.radians(latitude))
