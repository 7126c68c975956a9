"""
Vincenty's inverse solution of the geodesic problem on an ellipsoid.

Given two points (φ1, L1) and (φ2, L2), finds the ellipsoidal distance s and the
azimuths α1, α2 by iterating on λ, the longitude difference on the auxiliary sphere.
See T. Vincenty, "Direct and Inverse Solutions of Geodesics on the Ellipsoid with
Application of Nested Equations", Survey Review XXIII (1975).
"""

__all__ = ['solve_inverse']

import math

from geomeasures._validation import validate_points
from geomeasures.coordinates import GeographicPoint
from geomeasures.ellipsoid import DEFAULT_SOLVER_CONFIG, Ellipsoid, SolverConfig, WGS84
from geomeasures.results import (
    Failure, FailureReason, GeodesicResult, GeodesicSolution, IdenticalPoints
)
from geomeasures.utils.functions import normalize_radians
from geomeasures.utils.logging import LOGGER


def solve_inverse(
    point1: GeographicPoint,
    point2: GeographicPoint,
    ellipsoid: Ellipsoid = WGS84,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
) -> GeodesicResult:
    """
    Calculate the distance and azimuths between two points using Vincenty's inverse
    formula.

    Nearly antipodal points may fail to converge within the iteration limit (e.g.
    (0°, 0°) and (0.5°, 179.7°) on WGS84); this is reported as a Failure rather than
    raised. Loosening the tolerance or raising the iteration limit helps for pairs
    that converge slowly.

    Args:
        point1:
            The starting point

        point2:
            The finishing point

        ellipsoid: (Default WGS84)
            The reference ellipsoid

        config: (Default 100 iterations, 1e-12 tolerance)
            The iteration settings

    Returns:
        GeodesicSolution on convergence, IdenticalPoints if both points coincide, or
        Failure describing invalid input or non-convergence
    """
    reason = validate_points(point1, point2)
    if reason is not None:
        return Failure(reason)

    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.f

    lat1, lon1 = point1.to_radians()
    lat2, lon2 = point2.to_radians()

    # Reduced latitudes on the auxiliary sphere
    U1 = math.atan((1 - f) * math.tan(lat1))
    U2 = math.atan((1 - f) * math.tan(lat2))
    L = lon2 - lon1
    Lambda = L

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    for _ in range(config.iteration_limit):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return IdenticalPoints()

        # eq. 15
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda

        # eq. 16
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            # Geodesic runs along the equator
            cos2SigmaM = 0.

        # eq. 10
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))

        Lambda_prev = Lambda

        # eq. 11
        Lambda = L + (1 - C) * f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) <= config.tolerance:
            break
    else:
        LOGGER.debug(
            'Vincenty inverse did not converge within %d iterations for %r -> %r',
            config.iteration_limit, point1, point2
        )
        return Failure(FailureReason.DID_NOT_CONVERGE)

    # eq. 3
    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))

    # eq. 4
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))

    # eq. 6
    deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
    )
    )

    # eq. 19
    s = b * A * (sigma - deltaSigma)

    sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

    # eq. 20
    alpha1 = math.atan2(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda)

    # eq. 21 gives the azimuth of travel at point 2; turn it around to point back at point 1
    alpha2 = math.atan2(cosU1 * sinLambda, -sinU1 * cosU2 + cosU1 * sinU2 * cosLambda)

    return GeodesicSolution(
        s,
        normalize_radians(alpha1),
        normalize_radians(alpha2 + math.pi),
    )
