"""
Path-related schemas.

Planar points are frozen dataclasses (one per projected sample); the
canvas, emitted path and conversion result are Pydantic models so the
whole result can be dumped to JSON.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from trackpath.config import settings
from trackpath.shared.errors import InvalidOptionError
from trackpath.features.track.schemas import GeoBounds, GeoPoint, TrackMetrics

# Decimal places of emitted coordinates
COORDINATE_PRECISION = 2


@dataclass(frozen=True)
class PlanarPoint:
    """
    Point in canvas space.

    source points back at the GPS sample it was projected from. It is
    for diagnostics only and does not take part in equality.
    """
    x: float
    y: float
    source: Optional[GeoPoint] = field(default=None, compare=False, repr=False)


class Canvas(BaseModel):
    """Output coordinate frame."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=1)
    height: int = Field(ge=1)
    padding_fraction: float = Field(default=0.0, ge=0, lt=1)

    @property
    def view_box(self) -> str:
        """SVG viewBox equivalent."""
        return f"0 0 {self.width} {self.height}"


class CommandKind(str, Enum):
    """Path command type."""
    MOVE_TO = "M"
    LINE_TO = "L"


class PathCommand(BaseModel):
    """Single move/line command."""

    model_config = ConfigDict(frozen=True)

    kind: CommandKind
    x: float
    y: float

    def to_string(self) -> str:
        return (
            f"{self.kind.value} "
            f"{self.x:.{COORDINATE_PRECISION}f} {self.y:.{COORDINATE_PRECISION}f}"
        )


class EmittedPath(BaseModel):
    """Ordered command sequence plus the canvas it lives in."""

    model_config = ConfigDict(frozen=True)

    commands: Tuple[PathCommand, ...] = ()
    canvas: Canvas

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def to_path_string(self) -> str:
        """Canonical 'M x y L x y ...' serialization."""
        return " ".join(command.to_string() for command in self.commands)


class ConversionOptions(BaseModel):
    """
    Options for TrackPathService.convert.

    Defaults come from the global settings (TRACKPATH_* env vars).
    """

    max_width: int = Field(default_factory=lambda: settings.max_width)
    max_height: int = Field(default_factory=lambda: settings.max_height)
    padding_fraction: float = Field(default_factory=lambda: settings.padding_fraction)
    simplify: bool = Field(default_factory=lambda: settings.simplify)
    simplify_tolerance: float = Field(default_factory=lambda: settings.simplify_tolerance)
    simplify_threshold: int = Field(default_factory=lambda: settings.simplify_threshold)

    def check(self) -> None:
        """
        Validate option ranges.

        Raises:
            InvalidOptionError: On the first out-of-range option
        """
        if self.max_width <= 0:
            raise InvalidOptionError(f"max_width must be positive, got {self.max_width}")
        if self.max_height <= 0:
            raise InvalidOptionError(f"max_height must be positive, got {self.max_height}")
        if not 0 <= self.padding_fraction < 1:
            raise InvalidOptionError(
                f"padding_fraction must be in [0, 1), got {self.padding_fraction}"
            )
        if self.simplify_tolerance < 0:
            raise InvalidOptionError(
                f"simplify_tolerance must be >= 0, got {self.simplify_tolerance}"
            )
        if self.simplify_threshold < 0:
            raise InvalidOptionError(
                f"simplify_threshold must be >= 0, got {self.simplify_threshold}"
            )


class EmittedPathResult(BaseModel):
    """Result of converting one track."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: EmittedPath
    canvas: Canvas
    original_bounds: GeoBounds
    metrics: Optional[TrackMetrics] = None

    @property
    def view_box(self) -> str:
        return self.canvas.view_box

    @property
    def svg_path(self) -> str:
        return self.path.to_path_string()
