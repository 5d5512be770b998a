
import pytest

from geosvg import GeoPoint, MalformedInputError


def test_geopoint_init():
    p = GeoPoint(1., 2.)
    assert p.latitude == 1.
    assert p.longitude == 2.

    # GPX attributes arrive as text
    p = GeoPoint('51.5', '-0.12')
    assert p.latitude == 51.5
    assert p.longitude == -0.12

    p = GeoPoint(1, 2)
    assert isinstance(p.latitude, float)


def test_geopoint_malformed():
    with pytest.raises(MalformedInputError):
        GeoPoint(float('nan'), 0.)

    with pytest.raises(MalformedInputError):
        GeoPoint(0., float('inf'))

    with pytest.raises(MalformedInputError):
        GeoPoint('Infinity', 0.)

    with pytest.raises(MalformedInputError):
        GeoPoint('north', 0.)

    with pytest.raises(MalformedInputError):
        GeoPoint(None, 0.)

    # Still a ValueError for generic callers
    with pytest.raises(ValueError):
        GeoPoint('nan', 0.)


def test_geopoint_immutable():
    p = GeoPoint(1., 2.)
    with pytest.raises(AttributeError):
        p.latitude = 5.

    with pytest.raises(AttributeError):
        p.foo = 5.


def test_geopoint_eq():
    assert GeoPoint(0., 0.) == GeoPoint(0., 0.)
    assert GeoPoint(0., 0.) == GeoPoint('0', '0')
    assert GeoPoint(0., 0.) != GeoPoint(1., 0.)
    assert GeoPoint(0., 0.) != (0., 0.)


def test_geopoint_hash():
    points = [
        GeoPoint(0., 0.),
        GeoPoint(0., 0.),
        GeoPoint(1., 1.)
    ]
    assert len(set(points)) == 2
    assert GeoPoint(1., 1.) in set(points)


def test_geopoint_repr():
    assert repr(GeoPoint(1., 2.)) == '<GeoPoint(1.0, 2.0)>'


def test_geopoint_from_pair():
    assert GeoPoint.from_pair((1., 2.)) == GeoPoint(1., 2.)
    assert GeoPoint.from_pair(['1', '2']) == GeoPoint(1., 2.)

    p = GeoPoint(3., 4.)
    assert GeoPoint.from_pair(p) is p

    with pytest.raises(MalformedInputError):
        GeoPoint.from_pair((1., 2., 3.))

    with pytest.raises(MalformedInputError):
        GeoPoint.from_pair(1.)

    with pytest.raises(MalformedInputError):
        GeoPoint.from_pair('12')


def test_geopoint_from_mapping():
    assert GeoPoint.from_pair({'latitude': 1., 'longitude': '2'}) == GeoPoint(1., 2.)

    with pytest.raises(MalformedInputError):
        GeoPoint.from_pair({'lat': 1., 'lon': 2.})

    with pytest.raises(MalformedInputError):
        GeoPoint.from_pair({'latitude': float('nan'), 'longitude': 2.})


def test_geopoint_to_float():
    assert GeoPoint(1., 2.).to_float() == (1., 2.)
    assert GeoPoint(1., 2.).to_float(reverse=True) == (2., 1.)
