"""Reference ellipsoids and Vincenty solver settings"""

__all__ = ['DEFAULT_SOLVER_CONFIG', 'Ellipsoid', 'SolverConfig', 'WGS84']

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt

from geomeasures._const import (
    DEFAULT_ITERATION_LIMIT, DEFAULT_TOLERANCE, WGS84_A, WGS84_F
)


class Ellipsoid(BaseModel):
    """
    An oblate ellipsoid of revolution, described by its semi-major axis and
    flattening. A flattening of zero describes a sphere.

    Instances are frozen; pass a different Ellipsoid to solve against a datum other
    than WGS84.
    """

    model_config = ConfigDict(frozen=True)

    a: PositiveFloat
    """Semi-major axis (equatorial radius), in meters."""

    f: float = Field(ge=0., lt=1.)
    """Flattening, (a - b) / a."""

    @classmethod
    def sphere(cls, radius: float) -> 'Ellipsoid':
        """Creates a zero-flattening Ellipsoid with the given radius (meters)"""
        return cls(a=radius, f=0.)

    @property
    def b(self) -> float:
        """Semi-minor axis (polar radius), in meters"""
        return (1 - self.f) * self.a

    @property
    def eccentricity_squared(self) -> float:
        """First eccentricity squared, 1 - (b/a)^2"""
        return self.f * (2 - self.f)

    @property
    def second_eccentricity_squared(self) -> float:
        """Second eccentricity squared, e^2 / (1 - e^2)"""
        e_sq = self.eccentricity_squared
        return e_sq / (1 - e_sq)


class SolverConfig(BaseModel):
    """Iteration settings for the Vincenty inverse solver"""

    model_config = ConfigDict(frozen=True)

    iteration_limit: PositiveInt = DEFAULT_ITERATION_LIMIT
    """Maximum number of lambda updates before giving up."""

    tolerance: PositiveFloat = DEFAULT_TOLERANCE
    """Change in lambda (radians) below which the iteration is considered converged."""


WGS84 = Ellipsoid(a=WGS84_A, f=WGS84_F)

DEFAULT_SOLVER_CONFIG = SolverConfig()
