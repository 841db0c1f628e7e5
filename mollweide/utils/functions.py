"""Module for miscellaneous multi-use numeric functions"""

__all__ = ['adjust_lon']

import math

from mollweide._const import PI, TWO_PI


def adjust_lon(angle: float) -> float:
    """
    Normalizes a longitude to the range [-pi, pi] by removing whole revolutions.

    Args:
        angle:
            The longitude, in radians

    Returns:
        (float) the equivalent longitude within [-pi, pi]. Values already in range and
        non-finite values are returned unchanged.
    """
    if not math.isfinite(angle) or abs(angle) <= PI:
        return angle

    # Crosses the antimeridian; remainder is exact, so the result is within [-pi, pi]
    return math.remainder(angle, TWO_PI)
