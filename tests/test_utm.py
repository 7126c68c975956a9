import pytest
from pytest import approx
import utm

from geomeasures import Ellipsoid, Failure, FailureReason, GeographicPoint
from geomeasures.utm import UTMCoordinate, to_utm


def test_to_utm_origin():
    actual = to_utm(GeographicPoint(0., 0.))
    assert actual.zone == 31
    assert actual.hemisphere == 'N'
    assert actual.easting == approx(166_021.443, abs=1e-3)
    assert actual.northing == 0.


@pytest.mark.parametrize('lat, lon', [
    (-33.8688, 151.2093),
    (40.7128, -74.0060),
    (-22.9068, -43.1729),
    (35.6762, 139.6503),
    (-0.5, 10.5),
])
def test_to_utm_against_utm_package(lat, lon):
    easting, northing, zone, _ = utm.from_latlon(lat, lon)
    actual = to_utm(GeographicPoint(lat, lon))

    assert actual.zone == zone
    assert actual.hemisphere == ('S' if lat < 0 else 'N')
    assert actual.easting == approx(easting, abs=1e-3)
    assert actual.northing == approx(northing, abs=1e-3)


def test_to_utm_southern_offset():
    actual = to_utm(GeographicPoint(-0.5, 3.))
    assert actual.hemisphere == 'S'
    assert 9_900_000 < actual.northing < 10_000_000


@pytest.mark.parametrize('lon, zone', [
    (-180., 1),
    (-177., 1),
    (-174., 2),
    (0., 31),
    (179.9, 60),
    (180., 60),
])
def test_to_utm_zone(lon, zone):
    assert to_utm(GeographicPoint(10., lon)).zone == zone


@pytest.mark.parametrize('point, reason', [
    (GeographicPoint(-91, 0), FailureReason.INVALID_LATITUDE),
    (GeographicPoint(0, 181), FailureReason.INVALID_LONGITUDE),
    (GeographicPoint(float('nan'), 0), FailureReason.NON_NUMERIC_INPUT),
])
def test_to_utm_invalid_input(point, reason):
    assert to_utm(point) == Failure(reason)


def test_to_utm_polar_warning(caplog):
    to_utm(GeographicPoint(85., 0.))
    assert 'outside the UTM grid' in caplog.text


def test_to_utm_other_ellipsoid():
    # Further from the axis on a larger ellipsoid
    clarke = Ellipsoid(a=6_378_206.4, f=1 / 294.9786982)
    p = GeographicPoint(10., 0.)
    assert to_utm(p, clarke).easting < to_utm(p).easting


def test_utm_coordinate():
    c = UTMCoordinate(500_000., 0., 31, 'N')
    assert c.to_tuple() == (500_000., 0., 31, 'N')
    assert c == UTMCoordinate(500_000., 0., 31, 'N')
    assert c != UTMCoordinate(500_000., 0., 31, 'S')
    assert repr(c) == '<UTMCoordinate(31N 500000.0 0.0)>'

    with pytest.raises(AttributeError):
        c.zone = 32

    with pytest.raises(ValueError):
        UTMCoordinate(0., 0., 61, 'N')

    with pytest.raises(ValueError):
        UTMCoordinate(0., 0., 1, 'E')
