"""
Outcomes returned by the geodesy operations.

Every operation returns a value rather than raising on bad input: a successful
solve, the IdenticalPoints sentinel (zero distance, undefined azimuths), or a
Failure naming what went wrong.
"""

__all__ = [
    'Failure', 'FailureReason', 'GeodesicResult', 'GeodesicSolution', 'IdenticalPoints'
]

from enum import Enum
import math
from typing import Optional


class FailureReason(Enum):
    """Why an operation could not produce a value"""
    NON_NUMERIC_INPUT = 'Input values must be numeric'
    INVALID_LATITUDE = 'Latitude must be between -90, 90'
    INVALID_LONGITUDE = 'Longitude must be between -180, 180'
    DID_NOT_CONVERGE = 'Equation did not converge'


class GeodesicResult:
    """Base class for the outcome of a Vincenty inverse solve"""

    is_success: bool = False

    @property
    def distance(self) -> Optional[float]:
        return None

    @property
    def azimuth_forward(self) -> Optional[float]:
        return None

    @property
    def azimuth_reverse(self) -> Optional[float]:
        return None


class GeodesicSolution(GeodesicResult):
    """
    A converged solution to the inverse problem.

    Args:
        distance:
            The ellipsoidal distance, in meters

        azimuth_forward:
            The azimuth at the first point towards the second, in radians clockwise
            from true north, within [0, 2π)

        azimuth_reverse:
            The azimuth at the second point back towards the first, in radians
            clockwise from true north, within [0, 2π)
    """

    is_success = True

    def __init__(self, distance: float, azimuth_forward: float, azimuth_reverse: float):
        self._distance = distance
        self._azimuth_forward = azimuth_forward
        self._azimuth_reverse = azimuth_reverse

    def __eq__(self, other):
        if not isinstance(other, GeodesicSolution):
            return False

        return (
            self.distance == other.distance and
            self.azimuth_forward == other.azimuth_forward and
            self.azimuth_reverse == other.azimuth_reverse
        )

    def __hash__(self):
        return hash((self.distance, self.azimuth_forward, self.azimuth_reverse))

    def __repr__(self):
        return (
            f'<GeodesicSolution({self.distance} m, '
            f'{self.azimuth_forward_degrees}°, {self.azimuth_reverse_degrees}°)>'
        )

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def azimuth_forward(self) -> float:
        return self._azimuth_forward

    @property
    def azimuth_reverse(self) -> float:
        return self._azimuth_reverse

    @property
    def azimuth_forward_degrees(self) -> float:
        """The forward azimuth, in degrees within [0, 360)"""
        return math.degrees(self._azimuth_forward)

    @property
    def azimuth_reverse_degrees(self) -> float:
        """The reverse azimuth, in degrees within [0, 360)"""
        return math.degrees(self._azimuth_reverse)


class IdenticalPoints(GeodesicResult):
    """
    Both points coincide on the auxiliary sphere. The distance is exactly zero and
    neither azimuth is defined. This is not an error.
    """

    def __eq__(self, other):
        return isinstance(other, IdenticalPoints)

    def __hash__(self):
        return hash(IdenticalPoints)

    def __repr__(self):
        return '<IdenticalPoints>'

    @property
    def distance(self) -> float:
        return 0.0


class Failure(GeodesicResult):
    """An operation that could not produce a value, and why"""

    def __init__(self, reason: FailureReason):
        self.reason = reason

    def __eq__(self, other):
        if not isinstance(other, Failure):
            return False

        return self.reason == other.reason

    def __hash__(self):
        return hash((Failure, self.reason))

    def __repr__(self):
        return f'<Failure({self.reason.name})>'

    @property
    def message(self) -> str:
        return self.reason.value
