"""
Track Path Service

Main orchestrator of the GPS -> planar path conversion.

Pipeline:
    track points -> {metrics, bounds} -> projected points
                 -> simplified points (optional) -> emitted path
"""

import logging
from typing import Optional

from trackpath.shared.errors import EmptyTrackError
from trackpath.features.track.schemas import Track
from trackpath.features.track.bounds import compute_bounds
from trackpath.features.track.metrics import compute_metrics
from .schemas import ConversionOptions, EmittedPathResult
from .projection import compute_canvas, project_points
from .simplifier import simplify
from .emitter import emit

logger = logging.getLogger(__name__)


class TrackPathService:
    """
    Converts tracks into renderable planar paths.

    Stateless: every call builds fresh values, so one service can be
    shared across threads.
    """

    @staticmethod
    def convert(
        track: Track,
        options: Optional[ConversionOptions] = None
    ) -> EmittedPathResult:
        """
        Convert a track into a path description.

        Args:
            track: Track to convert; precomputed bounds/metrics are reused
            options: Conversion options (defaults from settings)

        Returns:
            EmittedPathResult with path, canvas, original bounds and metrics

        Raises:
            InvalidOptionError: If options are out of range
            EmptyTrackError: If the track has no points
        """
        options = options or ConversionOptions()
        options.check()

        if track.is_empty:
            raise EmptyTrackError(f"Track '{track.name}' has no points")

        bounds = track.bounds or compute_bounds(track.points)
        metrics = track.metrics or compute_metrics(track.points)

        canvas = compute_canvas(
            bounds,
            options.max_width,
            options.max_height,
            options.padding_fraction,
        )

        planar = project_points(canvas, bounds, track.points)

        if options.simplify and len(planar) > options.simplify_threshold:
            simplified = simplify(planar, options.simplify_tolerance)
            logger.debug(
                f"Simplified '{track.name}': {len(planar)} -> {len(simplified)} points "
                f"(tolerance {options.simplify_tolerance})"
            )
            planar = simplified

        path = emit(planar, canvas)

        logger.info(
            f"Converted '{track.name}': {len(track.points)} points -> "
            f"{len(path.commands)} commands on {canvas.width}x{canvas.height}"
        )

        return EmittedPathResult(
            name=track.name,
            path=path,
            canvas=canvas,
            original_bounds=bounds,
            metrics=metrics,
        )
