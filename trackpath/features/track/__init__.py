"""
Track module.

Usage:
    from trackpath.features.track import Track, GeoPoint, compute_metrics
    from trackpath.features.track import GPXTrackParser

Components:
- GeoPoint, Track: frozen dataclasses for raw samples and tracks
- GeoBounds, TrackMetrics: Pydantic schemas for bounds and summary stats
- compute_metrics: distance / elevation gain / duration
- compute_bounds: bounding box (raises EmptyTrackError for no points)
- GPXTrackParser: GPX document -> Track
"""

from .schemas import GeoPoint, GeoBounds, TrackMetrics, Track
from .metrics import compute_metrics, compute_duration_millis
from .bounds import compute_bounds
from .parser import GPXTrackParser

__all__ = [
    # Schemas
    "GeoPoint",
    "GeoBounds",
    "TrackMetrics",
    "Track",
    # Calculators
    "compute_metrics",
    "compute_duration_millis",
    "compute_bounds",
    # Parser
    "GPXTrackParser",
]
