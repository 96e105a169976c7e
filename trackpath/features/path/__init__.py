"""
Planar path module.

Usage:
    from trackpath.features.path import TrackPathService, ConversionOptions

Components:
- compute_canvas / project: GPS -> canvas projection
- simplify: Douglas-Peucker simplification
- emit: move/line command serialization
- TrackPathService: end-to-end conversion
"""

from .schemas import (
    PlanarPoint,
    Canvas,
    CommandKind,
    PathCommand,
    EmittedPath,
    ConversionOptions,
    EmittedPathResult,
)
from .projection import compute_aspect_ratio, compute_canvas, project, project_points
from .simplifier import simplify, point_to_segment_distance
from .emitter import emit
from .service import TrackPathService

__all__ = [
    # Schemas
    "PlanarPoint",
    "Canvas",
    "CommandKind",
    "PathCommand",
    "EmittedPath",
    "ConversionOptions",
    "EmittedPathResult",
    # Projection
    "compute_aspect_ratio",
    "compute_canvas",
    "project",
    "project_points",
    # Simplification
    "simplify",
    "point_to_segment_distance",
    # Emission
    "emit",
    # Service
    "TrackPathService",
]
