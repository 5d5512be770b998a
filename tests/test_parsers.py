
import gpxpy
import pytest

from geosvg import GeoPoint, MalformedInputError
from geosvg.parsers import *

GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">
  <wpt lat="10.0" lon="10.0"><name>Ignored</name></wpt>
  <trk>
    <trkseg>
      <trkpt lat="46.5" lon="6.6"/>
      <trkpt lat="46.51" lon="6.61"/>
    </trkseg>
    <trkseg>
      <trkpt lat="46.52" lon="6.62"/>
    </trkseg>
  </trk>
  <trk>
    <trkseg>
      <trkpt lat="-33.9" lon="18.4"/>
    </trkseg>
  </trk>
</gpx>
"""


def test_parse_gpx():
    assert parse_gpx(GPX) == [
        GeoPoint(46.5, 6.6),
        GeoPoint(46.51, 6.61),
        GeoPoint(46.52, 6.62),
        GeoPoint(-33.9, 18.4),
    ]


def test_parse_gpx_no_tracks():
    gpx = '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1"></gpx>'
    assert parse_gpx(gpx) == []


def test_parse_gpx_malformed():
    with pytest.raises(gpxpy.gpx.GPXException):
        parse_gpx('this is not a gpx document')


def test_parse_gpx_non_finite():
    template = """<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">
  <trk><trkseg>
    <trkpt lat="46.5" lon="6.6"/>
    <trkpt lat="{lat}" lon="{lon}"/>
  </trkseg></trk>
</gpx>"""

    with pytest.raises(MalformedInputError):
        parse_gpx(template.format(lat='NaN', lon='6.61'))

    with pytest.raises(MalformedInputError):
        parse_gpx(template.format(lat='46.51', lon='Infinity'))
