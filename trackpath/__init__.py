"""
trackpath

Converts GPS tracks into compact planar paths for rendering.
"""

from trackpath.features.track import GeoPoint, Track, GPXTrackParser
from trackpath.features.path import ConversionOptions, TrackPathService

__version__ = "0.1.0"

__all__ = [
    "GeoPoint",
    "Track",
    "GPXTrackParser",
    "ConversionOptions",
    "TrackPathService",
]
