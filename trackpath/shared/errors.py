"""
Error taxonomy for track conversion.

All errors derive from TrackPathError. The concrete errors also subclass
ValueError so callers that only know about bad input can catch them.
"""


class TrackPathError(Exception):
    """Base track conversion error."""
    pass


class EmptyTrackError(TrackPathError, ValueError):
    """Track has no points; bounds and projection are undefined."""
    pass


class InvalidOptionError(TrackPathError, ValueError):
    """Conversion option outside its allowed range."""
    pass


class TrackParseError(TrackPathError, ValueError):
    """GPX document could not be turned into a track."""
    pass


class DegenerateBoundsWarning(UserWarning):
    """Bounds have zero latitude or longitude span; a fallback is used."""
    pass
