"""
Formatting utilities for display.

Used by the CLI summary output.
"""
import math
from typing import Optional

MISSING = "—"


def format_distance(meters: float) -> str:
    """
    Format distance.

    Args:
        meters: Distance in meters

    Returns:
        Formatted string (e.g., '12.5 km' or '850 m')
    """
    rounded = int(math.floor(meters + 0.5))
    if rounded < 1000:
        return f"{rounded} m"
    return f"{meters / 1000:.1f} km"


def format_duration(millis: Optional[float]) -> str:
    """
    Format duration as 'Xh YYm'.

    Args:
        millis: Duration in milliseconds

    Returns:
        Formatted string (e.g., '2h 05m' or '42m')
    """
    if millis is None or millis < 0:
        return MISSING

    total_minutes = int(millis // 60_000)
    h = total_minutes // 60
    m = total_minutes % 60

    if h == 0:
        return f"{m}m"
    return f"{h}h {m:02d}m"


def format_elevation(meters: Optional[float]) -> str:
    """
    Format elevation gain with sign.

    Args:
        meters: Elevation in meters

    Returns:
        Formatted string (e.g., '+850 m')
    """
    if meters is None:
        return MISSING
    if meters >= 0:
        return f"+{int(round(meters))} m"
    return f"{int(round(meters))} m"
