import pytest
from pytest import approx

from geomeasures import DEFAULT_SOLVER_CONFIG, Ellipsoid, SolverConfig, WGS84


def test_wgs84():
    assert WGS84.a == 6378137.0
    assert WGS84.f == 1 / 298.257223563
    assert WGS84.b == approx(6356752.314245, abs=1e-6)
    assert WGS84.eccentricity_squared == approx(0.00669437999014, abs=1e-14)
    assert WGS84.second_eccentricity_squared == approx(0.00673949674228, abs=1e-14)


def test_ellipsoid_sphere():
    sphere = Ellipsoid.sphere(6_371_000.)
    assert sphere.a == sphere.b == 6_371_000.
    assert sphere.eccentricity_squared == 0.


def test_ellipsoid_validation():
    with pytest.raises(ValueError):
        Ellipsoid(a=-1., f=0.)

    with pytest.raises(ValueError):
        Ellipsoid(a=1., f=1.)

    with pytest.raises(ValueError):
        Ellipsoid(a=1., f=-0.1)


def test_ellipsoid_frozen():
    with pytest.raises(ValueError):
        WGS84.a = 1.


def test_solver_config():
    assert DEFAULT_SOLVER_CONFIG.iteration_limit == 100
    assert DEFAULT_SOLVER_CONFIG.tolerance == 1e-12
    assert SolverConfig(tolerance=1e-9).iteration_limit == 100

    with pytest.raises(ValueError):
        SolverConfig(iteration_limit=0)

    with pytest.raises(ValueError):
        SolverConfig(tolerance=0.)

    with pytest.raises(ValueError):
        DEFAULT_SOLVER_CONFIG.tolerance = 1.
