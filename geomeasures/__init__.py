from geomeasures._version import __version__  # noqa: F401
from geomeasures.utils.logging import LOGGER
from geomeasures.coordinates import GeographicPoint
from geomeasures.ellipsoid import DEFAULT_SOLVER_CONFIG, Ellipsoid, SolverConfig, WGS84
from geomeasures.results import (
    Failure, FailureReason, GeodesicResult, GeodesicSolution, IdenticalPoints
)
from geomeasures.vincenty import solve_inverse
from geomeasures.distance import great_circle_distance
from geomeasures.utm import UTMCoordinate, to_utm
from geomeasures.jenks import JenksClassifier, jenks_breaks


__all__ = [
    'DEFAULT_SOLVER_CONFIG',
    'Ellipsoid',
    'Failure',
    'FailureReason',
    'GeodesicResult',
    'GeodesicSolution',
    'GeographicPoint',
    'IdenticalPoints',
    'JenksClassifier',
    'LOGGER',
    'SolverConfig',
    'UTMCoordinate',
    'WGS84',
    'great_circle_distance',
    'jenks_breaks',
    'solve_inverse',
    'to_utm',
]
