"""
Great-circle (orthodromic) distance on a sphere
"""

__all__ = ['great_circle_distance']

import math
from typing import Union

from geomeasures._const import WGS84_A
from geomeasures._validation import validate_points
from geomeasures.coordinates import GeographicPoint
from geomeasures.results import Failure


def great_circle_distance(
    point1: GeographicPoint,
    point2: GeographicPoint,
    radius: float = WGS84_A,
) -> Union[float, Failure]:
    """
    Calculate the great-circle distance between two points on a sphere.

    Uses the spherical special case of Vincenty's formula, which stays well-conditioned
    for both very small and nearly antipodal separations.

    Args:
        point1:
            A point

        point2:
            A second point

        radius: (Default WGS84 equatorial radius)
            The radius of the sphere, in meters

    Returns:
        The distance in meters, or a Failure if either point is invalid
    """
    if not 0 < radius < math.inf:
        raise ValueError(f'Sphere radius must be positive and finite, got {radius}')

    reason = validate_points(point1, point2)
    if reason is not None:
        return Failure(reason)

    phi1, lon1 = point1.to_radians()
    phi2, lon2 = point2.to_radians()
    d_lambda = lon2 - lon1

    # Central angle between the two points
    sigma = math.atan2(
        math.sqrt(
            (math.cos(phi2) * math.sin(d_lambda)) ** 2 +
            (math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(d_lambda)) ** 2
        ),
        math.sin(phi1) * math.sin(phi2) + math.cos(phi1) * math.cos(phi2) * math.cos(d_lambda)
    )

    return radius * sigma
