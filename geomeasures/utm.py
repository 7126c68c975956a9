"""
Conversion of latitude/longitude pairs to Universal Transverse Mercator coordinates.

Uses the truncated transverse Mercator series, accurate to around a millimeter within
3,000 km of the central meridian. See J. P. Snyder, "Map Projections: A Working
Manual", USGS Professional Paper 1395 (1987), pp. 60-64.
"""

__all__ = ['UTMCoordinate', 'to_utm']

import math
from typing import Tuple, Union

from geomeasures._const import (
    UTM_FALSE_EASTING, UTM_FALSE_NORTHING_SOUTH, UTM_SCALE_FACTOR,
    UTM_ZONE_COUNT, UTM_ZONE_WIDTH
)
from geomeasures._validation import validate_points
from geomeasures.coordinates import GeographicPoint
from geomeasures.ellipsoid import Ellipsoid, WGS84
from geomeasures.results import Failure
from geomeasures.utils.logging import warn_once


class UTMCoordinate:
    """A UTM easting/northing pair (meters) within a numbered zone and hemisphere"""

    __slots__ = ('easting', 'northing', 'zone', 'hemisphere')

    def __init__(self, easting: float, northing: float, zone: int, hemisphere: str):
        if hemisphere not in ('N', 'S'):
            raise ValueError(f"Hemisphere must be 'N' or 'S', got {hemisphere!r}")

        if not 1 <= zone <= UTM_ZONE_COUNT:
            raise ValueError(f'UTM zone must be between 1 and {UTM_ZONE_COUNT}, got {zone}')

        object.__setattr__(self, 'easting', easting)
        object.__setattr__(self, 'northing', northing)
        object.__setattr__(self, 'zone', zone)
        object.__setattr__(self, 'hemisphere', hemisphere)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, UTMCoordinate):
            return False

        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return f'<UTMCoordinate({self.zone}{self.hemisphere} {self.easting} {self.northing})>'

    def to_tuple(self) -> Tuple[float, float, int, str]:
        """Returns (easting, northing, zone, hemisphere)"""
        return self.easting, self.northing, self.zone, self.hemisphere


def _zone_number(longitude: float) -> int:
    """The 6-degree zone containing a longitude, with 180° folded into zone 60"""
    zone = 1 + math.floor((longitude + 180) / UTM_ZONE_WIDTH)
    return min(zone, UTM_ZONE_COUNT)


def _meridian_arc(phi: float, ellipsoid: Ellipsoid) -> float:
    """Distance along the meridian from the equator to latitude phi (radians), in meters"""
    e2 = ellipsoid.eccentricity_squared
    e4 = e2 * e2
    e6 = e4 * e2
    return ellipsoid.a * (
        (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * phi
        - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * math.sin(2 * phi)
        + (15 * e4 / 256 + 45 * e6 / 1024) * math.sin(4 * phi)
        - (35 * e6 / 3072) * math.sin(6 * phi)
    )


def to_utm(
    point: GeographicPoint,
    ellipsoid: Ellipsoid = WGS84,
) -> Union[UTMCoordinate, Failure]:
    """
    Project a point into its UTM zone.

    Zones are the plain 6-degree bands; the Norway and Svalbard exceptions are not
    applied.

    Args:
        point:
            The point to convert

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        UTMCoordinate, or a Failure if the point is invalid
    """
    reason = validate_points(point)
    if reason is not None:
        return Failure(reason)

    if not -80 <= point.latitude <= 84:
        warn_once(
            'Latitudes beyond 84N or 80S lie outside the UTM grid; projected values '
            'will be distorted. (this warning will not repeat)'
        )

    zone = _zone_number(point.longitude)
    central_meridian = UTM_ZONE_WIDTH * zone - 183

    phi = math.radians(point.latitude)
    e2 = ellipsoid.eccentricity_squared
    ep2 = ellipsoid.second_eccentricity_squared

    N = ellipsoid.a / math.sqrt(1 - e2 * math.sin(phi) ** 2)
    T = math.tan(phi) ** 2
    C = ep2 * math.cos(phi) ** 2
    A = math.radians(point.longitude - central_meridian) * math.cos(phi)
    M = _meridian_arc(phi, ellipsoid)

    easting = UTM_SCALE_FACTOR * N * A * (
        1 + A ** 2 * (
            (1 - T + C) / 6 +
            A ** 2 * (5 - 18 * T + T ** 2 + 72 * C - 58 * ep2) / 120
        )
    ) + UTM_FALSE_EASTING

    northing = UTM_SCALE_FACTOR * (
        M + N * math.tan(phi) * A ** 2 * (
            1 / 2 +
            A ** 2 * (
                (5 - T + 9 * C + 4 * C ** 2) / 24 +
                A ** 2 * (61 - 58 * T + T ** 2 + 600 * C - 330 * ep2) / 720
            )
        )
    )

    hemisphere = 'S' if point.latitude < 0 else 'N'
    if hemisphere == 'S':
        northing += UTM_FALSE_NORTHING_SOUTH

    return UTMCoordinate(easting, northing, zone, hemisphere)
