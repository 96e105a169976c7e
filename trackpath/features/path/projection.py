"""
Projector

Maps geographic coordinates into a fixed-size planar canvas using a
small-region equirectangular approximation:

- longitude span is shrunk by cos(center latitude) when sizing the canvas,
  so a track keeps its ground proportions away from the equator;
- bounds are inflated by padding_fraction * span on every side, so the
  drawn track never touches the canvas edge;
- y is flipped, since screen y grows downward while latitude grows north.
"""

import logging
import math
import warnings
from typing import Iterable, List, Tuple

from trackpath.shared.errors import DegenerateBoundsWarning, InvalidOptionError
from trackpath.shared.geo import longitude_scale
from trackpath.features.track.schemas import GeoBounds, GeoPoint
from .schemas import Canvas, PlanarPoint

logger = logging.getLogger(__name__)

# Aspect ratio used when the bounds have no latitude extent
DEFAULT_ASPECT_RATIO = 1.0

# Extent (degrees) substituted for a zero span; centers the axis
FALLBACK_SPAN_DEGREES = 0.001


def _round_px(value: float) -> int:
    """Round half up to a whole pixel, never below 1."""
    return max(1, int(math.floor(value + 0.5)))


def compute_aspect_ratio(bounds: GeoBounds) -> float:
    """
    Width / height of the bounds in ground-distance terms.

    Returns DEFAULT_ASPECT_RATIO when the latitude span is zero.
    """
    if bounds.lat_span == 0:
        return DEFAULT_ASPECT_RATIO
    adjusted_lng_span = bounds.lng_span * longitude_scale(bounds.center_latitude)
    return adjusted_lng_span / bounds.lat_span


def compute_canvas(
    bounds: GeoBounds,
    max_width: int,
    max_height: int,
    padding_fraction: float = 0.1
) -> Canvas:
    """
    Largest canvas within (max_width, max_height) matching the bounds' aspect ratio.

    Args:
        bounds: Track bounds
        max_width: Width budget in pixels
        max_height: Height budget in pixels
        padding_fraction: Stored on the canvas and applied by project()

    Returns:
        Canvas with integer width/height >= 1

    Raises:
        InvalidOptionError: If a budget is not positive or padding is outside [0, 1)
    """
    if max_width <= 0 or max_height <= 0:
        raise InvalidOptionError(
            f"Canvas budget must be positive, got {max_width}x{max_height}"
        )
    if not 0 <= padding_fraction < 1:
        raise InvalidOptionError(
            f"padding_fraction must be in [0, 1), got {padding_fraction}"
        )

    if bounds.lat_span == 0 or bounds.lng_span == 0:
        logger.warning(
            f"Degenerate bounds (lat span {bounds.lat_span}, "
            f"lng span {bounds.lng_span}), using fallback extent"
        )
        warnings.warn(
            f"Degenerate bounds: {bounds.model_dump()}",
            DegenerateBoundsWarning,
            stacklevel=2,
        )

    aspect_ratio = compute_aspect_ratio(bounds)

    width = float(max_width)
    # A north-south line has no width at all; pin its height instead
    height = width / aspect_ratio if aspect_ratio > 0 else math.inf

    if height > max_height:
        height = float(max_height)
        width = height * aspect_ratio

    canvas = Canvas(
        width=_round_px(width),
        height=_round_px(height),
        padding_fraction=padding_fraction,
    )
    logger.debug(f"Canvas {canvas.width}x{canvas.height} (aspect {aspect_ratio:.4f})")
    return canvas


def _padded_axis(low: float, span: float, padding_fraction: float) -> Tuple[float, float]:
    """Return (padded_low, padded_span) for one axis."""
    if span == 0:
        return low - FALLBACK_SPAN_DEGREES / 2, FALLBACK_SPAN_DEGREES
    pad = span * padding_fraction
    return low - pad, span + 2 * pad


def project(canvas: Canvas, bounds: GeoBounds, point: GeoPoint) -> PlanarPoint:
    """
    Project a GPS point into canvas coordinates.

    Args:
        canvas: Target canvas (carries the padding fraction)
        bounds: Unpadded track bounds
        point: Point to project

    Returns:
        PlanarPoint with a back-reference to point
    """
    south, lat_range = _padded_axis(bounds.south, bounds.lat_span, canvas.padding_fraction)
    west, lng_range = _padded_axis(bounds.west, bounds.lng_span, canvas.padding_fraction)

    normalized_x = (point.longitude - west) / lng_range
    normalized_y = (point.latitude - south) / lat_range

    return PlanarPoint(
        x=normalized_x * canvas.width,
        y=(1 - normalized_y) * canvas.height,
        source=point,
    )


def project_points(
    canvas: Canvas,
    bounds: GeoBounds,
    points: Iterable[GeoPoint]
) -> List[PlanarPoint]:
    """Project a point sequence, preserving order."""
    return [project(canvas, bounds, p) for p in points]
