"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from typing import Optional, Sequence


def calculate_elevation_gain(
    elevations: Sequence[Optional[float]]
) -> Optional[float]:
    """
    Calculate total elevation gain over consecutive samples.

    Only pairs of neighbouring samples that both carry an elevation
    contribute. A missing elevation breaks the chain: the samples on
    either side of it are never compared with each other.

    Args:
        elevations: Elevation per sample in meters, None where absent

    Returns:
        Gain in meters, or None if no sample has an elevation
    """
    if all(ele is None for ele in elevations):
        return None

    gain = 0.0
    for i in range(1, len(elevations)):
        prev_ele = elevations[i - 1]
        curr_ele = elevations[i]
        if prev_ele is None or curr_ele is None:
            continue
        diff = curr_ele - prev_ele
        if diff > 0:
            gain += diff

    return gain
