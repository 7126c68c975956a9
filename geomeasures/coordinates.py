"""
Representation of a specific point on earth
"""

__all__ = ['GeographicPoint']

import math
from typing import Tuple, Union


def _to_float(value) -> float:
    # Booleans, unparseable values and ints beyond float range all surface as
    # NON_NUMERIC_INPUT failures downstream
    if isinstance(value, bool):
        return math.nan

    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return math.nan


class GeographicPoint:
    """
    A latitude/longitude pair in decimal degrees.

    Unlike most coordinate types, a GeographicPoint does not wrap or clamp its
    values: an out-of-range latitude is kept as-is so that the operations consuming
    the point can report it as a failure.
    """

    __slots__ = ('_latitude', '_longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        object.__setattr__(self, '_latitude', _to_float(latitude))
        object.__setattr__(self, '_longitude', _to_float(longitude))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeographicPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeographicPoint({self.latitude}, {self.longitude})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def to_float(self) -> Tuple[float, float]:
        """Returns the point as a (latitude, longitude) tuple"""
        return self.latitude, self.longitude

    def to_radians(self) -> Tuple[float, float]:
        """Returns the point as a (latitude, longitude) tuple, in radians"""
        return math.radians(self.latitude), math.radians(self.longitude)
