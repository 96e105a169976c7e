"""
Track-related schemas.

GeoPoint and Track are plain frozen dataclasses (they are created per
sample and must stay cheap). Bounds and metrics are Pydantic models so
they serialize straight into conversion results.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


@dataclass(frozen=True)
class GeoPoint:
    """Single GPS sample."""
    latitude: float
    longitude: float
    elevation: Optional[float] = None
    timestamp: Optional[datetime] = None


class GeoBounds(BaseModel):
    """Axis-aligned lat/lng rectangle containing every point of a track."""

    model_config = ConfigDict(frozen=True)

    north: float
    south: float
    east: float
    west: float

    @model_validator(mode="after")
    def check_order(self) -> "GeoBounds":
        if self.north < self.south:
            raise ValueError(f"north ({self.north}) is below south ({self.south})")
        if self.east < self.west:
            raise ValueError(f"east ({self.east}) is west of west ({self.west})")
        return self

    @property
    def lat_span(self) -> float:
        return self.north - self.south

    @property
    def lng_span(self) -> float:
        return self.east - self.west

    @property
    def center_latitude(self) -> float:
        return (self.north + self.south) / 2

    def contains(self, point: GeoPoint) -> bool:
        """True if the point lies inside or on the edge of the bounds."""
        return (
            self.south <= point.latitude <= self.north
            and self.west <= point.longitude <= self.east
        )


class TrackMetrics(BaseModel):
    """Summary statistics of a track."""

    model_config = ConfigDict(frozen=True)

    distance_meters: float = Field(ge=0)
    # Raw last-minus-first difference; negative when the clock ran backwards
    duration_millis: Optional[float] = None
    elevation_gain_meters: Optional[float] = Field(default=None, ge=0)


@dataclass(frozen=True)
class Track:
    """
    Ordered GPS track.

    bounds is None exactly when the track has no points.
    """
    name: str
    points: Tuple[GeoPoint, ...] = field(default_factory=tuple)
    bounds: Optional[GeoBounds] = None
    metrics: Optional[TrackMetrics] = None

    @classmethod
    def from_points(cls, name: str, points: Sequence[GeoPoint]) -> "Track":
        """Build a track and compute its bounds and metrics."""
        # Local imports: the calculators depend on this module
        from .bounds import compute_bounds
        from .metrics import compute_metrics

        points = tuple(points)
        return cls(
            name=name,
            points=points,
            bounds=compute_bounds(points) if points else None,
            metrics=compute_metrics(points),
        )

    @property
    def is_empty(self) -> bool:
        return not self.points
