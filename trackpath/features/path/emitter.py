"""
Path Emitter

Serializes planar points into move/line commands.
"""

from typing import Sequence

from .schemas import (
    COORDINATE_PRECISION,
    Canvas,
    CommandKind,
    EmittedPath,
    PathCommand,
    PlanarPoint,
)


def emit(points: Sequence[PlanarPoint], canvas: Canvas) -> EmittedPath:
    """
    Build a straight-segment path: MoveTo for the first point, LineTo for the rest.

    Coordinates are rounded to COORDINATE_PRECISION decimals. An empty
    point sequence gives an empty command sequence.
    """
    commands = tuple(
        PathCommand(
            kind=CommandKind.MOVE_TO if i == 0 else CommandKind.LINE_TO,
            x=round(p.x, COORDINATE_PRECISION),
            y=round(p.y, COORDINATE_PRECISION),
        )
        for i, p in enumerate(points)
    )
    return EmittedPath(commands=commands, canvas=canvas)
