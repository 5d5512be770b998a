""" Geodesic calculations for GeoPoints """

__all__ = [
    'bounding_box', 'distance', 'haversine_distance_meters', 'perpendicular_distance'
]

import math
from typing import Sequence

import numpy as np

from geosvg._const import EARTH_RADIUS
from geosvg.coordinates import GeoPoint
from geosvg.exceptions import InsufficientInputError
from geosvg.structures import BoundingBox
from geosvg.utils.functions import round_to_accuracy


def haversine_distance_meters(point1: GeoPoint, point2: GeoPoint) -> float:
    """
    Calculate the great-circle distance in meters between two points, using
    the Haversine formula on a spherical earth.

    Args:
        point1:
            A GeoPoint

        point2:
            A second GeoPoint

    Returns:
        (float) the distance in meters
    """
    lon1, lat1 = math.radians(point1.longitude), math.radians(point1.latitude)
    lon2, lat2 = math.radians(point2.longitude), math.radians(point2.latitude)

    d_lat, d_long = lat2 - lat1, lon2 - lon1
    var1 = (math.sin(d_lat / 2) ** 2) + math.cos(lat1) * math.cos(lat2) * (
        math.sin(d_long / 2) ** 2
    )
    return EARTH_RADIUS * 2 * math.atan2(math.sqrt(var1), math.sqrt(1 - var1))


def distance(point1: GeoPoint, point2: GeoPoint, accuracy: float) -> float:
    """
    Great-circle distance in meters, rounded to the nearest multiple of
    accuracy.

    Args:
        point1:
            A GeoPoint

        point2:
            A second GeoPoint

        accuracy:
            The rounding step, in meters. Zero disables rounding.

    Returns:
        (float) the distance in meters
    """
    return round_to_accuracy(haversine_distance_meters(point1, point2), accuracy)


def _clamped_acos(value: float) -> float:
    return math.acos(max(-1., min(1., value)))


def perpendicular_distance(
    point: GeoPoint,
    line_start: GeoPoint,
    line_end: GeoPoint,
    accuracy: float
) -> float:
    """
    The distance in meters from a point to the great-circle segment between
    line_start and line_end.

    Solves the triangle formed by the three pairwise distances. If the point
    falls beyond either end of the segment, the distance to that end is
    returned; otherwise the length of the perpendicular dropped onto the
    segment.

    Args:
        point:
            The GeoPoint being measured

        line_start:
            The origin of the segment

        line_end:
            The far end of the segment

        accuracy:
            The rounding step applied to each pairwise distance

    Returns:
        (float) a non-negative distance in meters
    """
    d1 = distance(line_start, point, accuracy)
    d2 = distance(point, line_end, accuracy)
    d3 = distance(line_start, line_end, accuracy)

    if d1 == 0 or d2 == 0:
        # Point sits on a segment vertex
        return 0.

    if d3 == 0:
        return d1

    alpha = _clamped_acos((d1 ** 2 + d3 ** 2 - d2 ** 2) / (2 * d1 * d3))
    beta = _clamped_acos((d2 ** 2 + d3 ** 2 - d1 ** 2) / (2 * d2 * d3))

    if alpha > math.pi / 2:
        return d1

    if beta > math.pi / 2:
        return d2

    return math.sin(alpha) * d1


def bounding_box(points: Sequence[GeoPoint]) -> BoundingBox:
    """
    The smallest latitude/longitude aligned rectangle containing all points.

    Args:
        points:
            A sequence of at least one GeoPoint

    Returns:
        BoundingBox
    """
    if not points:
        raise InsufficientInputError('Cannot compute the bounds of zero points.')

    arr = np.array([x.to_float() for x in points])
    max_lat, max_lng = arr.max(axis=0)
    min_lat, min_lng = arr.min(axis=0)
    return BoundingBox(
        max_lat=float(max_lat),
        min_lat=float(min_lat),
        max_lng=float(max_lng),
        min_lng=float(min_lng),
    )
