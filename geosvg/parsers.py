"""Module for parsing external track formats into GeoPoints"""

__all__ = ['parse_gpx']

from typing import IO, List, Union

from geosvg.coordinates import GeoPoint
from geosvg.utils.logging import LOGGER


def parse_gpx(gpx: Union[str, IO]) -> List[GeoPoint]:
    """
    Extracts the track points of a GPX document, in document order. Points
    of every track and every track segment are concatenated; routes and
    waypoints are ignored.

    Errors raised by gpxpy for malformed documents propagate unchanged.

    Args:
        gpx:
            A GPX document, as a string or a file-like object

    Returns:
        List[GeoPoint]
    """
    import gpxpy

    parsed = gpxpy.parse(gpx)
    points = [
        GeoPoint(point.latitude, point.longitude)
        for track in parsed.tracks
        for segment in track.segments
        for point in segment.points
    ]
    LOGGER.debug('Parsed %d track points from GPX', len(points))
    return points
