"""
Bounds Calculator

Axis-aligned geographic bounding box of a point sequence.
"""

from typing import Sequence

from trackpath.shared.errors import EmptyTrackError
from .schemas import GeoBounds, GeoPoint


def compute_bounds(points: Sequence[GeoPoint]) -> GeoBounds:
    """
    Compute min/max latitude and longitude in a single pass.

    Args:
        points: GPS samples

    Returns:
        GeoBounds enclosing every point

    Raises:
        EmptyTrackError: If points is empty
    """
    if not points:
        raise EmptyTrackError("Cannot compute bounds of an empty track")

    first = points[0]
    north = south = first.latitude
    east = west = first.longitude

    for p in points[1:]:
        if p.latitude > north:
            north = p.latitude
        elif p.latitude < south:
            south = p.latitude
        if p.longitude > east:
            east = p.longitude
        elif p.longitude < west:
            west = p.longitude

    return GeoBounds(north=north, south=south, east=east, west=west)
