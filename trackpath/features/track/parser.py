"""
GPX Parser

Turns a GPX document into a Track. Thin adapter over gpxpy: all the
numeric work happens in metrics/bounds.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import gpxpy
import gpxpy.gpx

from trackpath.shared.errors import TrackParseError
from trackpath.shared.time_utils import ensure_utc
from .schemas import GeoPoint, Track

logger = logging.getLogger(__name__)

DEFAULT_TRACK_NAME = "Untitled track"


class GPXTrackParser:
    """Parser for GPX files."""

    @classmethod
    def parse(
        cls,
        content: Union[bytes, str],
        filename: Optional[str] = None
    ) -> Track:
        """
        Parse GPX content into a Track with bounds and metrics.

        Args:
            content: GPX document as bytes or text
            filename: Original file name, used as a fallback track name

        Returns:
            Track with at least one point

        Raises:
            TrackParseError: If the document is invalid or has no points
        """
        try:
            text = content.decode('utf-8') if isinstance(content, bytes) else content
            gpx = gpxpy.parse(text)
        except (UnicodeDecodeError, gpxpy.gpx.GPXException) as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise TrackParseError(f"Invalid GPX file: {e}") from e

        points = cls.extract_points(gpx)
        if not points:
            raise TrackParseError("GPX file contains no track or route points")

        name = cls._track_name(gpx, filename)
        logger.info(f"Parsed GPX '{name}': {len(points)} points")

        return Track.from_points(name, points)

    @classmethod
    def parse_file(cls, path: Union[str, Path]) -> Track:
        """Read and parse a GPX file from disk."""
        path = Path(path)
        return cls.parse(path.read_bytes(), filename=path.name)

    @staticmethod
    def extract_points(gpx: gpxpy.gpx.GPX) -> List[GeoPoint]:
        """
        Collect points from all track segments.

        Route points are used only when the document has no track points.
        Elevation and time stay None when the GPX omits them; zone-less
        times are taken as UTC.
        """
        points: List[GeoPoint] = []

        for track in gpx.tracks:
            for segment in track.segments:
                for point in segment.points:
                    points.append(GeoPoint(
                        latitude=point.latitude,
                        longitude=point.longitude,
                        elevation=point.elevation,
                        timestamp=ensure_utc(point.time),
                    ))

        if not points:
            for route in gpx.routes:
                for point in route.points:
                    points.append(GeoPoint(
                        latitude=point.latitude,
                        longitude=point.longitude,
                        elevation=point.elevation,
                        timestamp=ensure_utc(point.time),
                    ))

        return points

    @staticmethod
    def _track_name(gpx: gpxpy.gpx.GPX, filename: Optional[str]) -> str:
        """Track name, then document name, then file name without extension."""
        for track in gpx.tracks:
            if track.name:
                return track.name
        if gpx.name:
            return gpx.name
        if filename:
            return Path(filename).stem
        return DEFAULT_TRACK_NAME
