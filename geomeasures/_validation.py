"""
Internal module validating the inputs shared by every geodesy operation
"""

__all__ = ['validate_points']

from typing import Optional

from geomeasures.coordinates import GeographicPoint
from geomeasures.results import FailureReason
from geomeasures.utils.functions import is_finite_number


def validate_points(*points: GeographicPoint) -> Optional[FailureReason]:
    """
    Checks that every point is usable, in order: all values numeric, then every
    latitude in range, then every longitude in range.

    Args:
        *points:
            One or more GeographicPoints

    Returns:
        The FailureReason for the first violated check, or None if the points are valid
    """
    if not all(
        is_finite_number(point.latitude) and is_finite_number(point.longitude)
        for point in points
    ):
        return FailureReason.NON_NUMERIC_INPUT

    if not all(-90 <= point.latitude <= 90 for point in points):
        return FailureReason.INVALID_LATITUDE

    if not all(-180 <= point.longitude <= 180 for point in points):
        return FailureReason.INVALID_LONGITUDE

    return None
