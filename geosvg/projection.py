"""
Projects GeoPoints onto a plane anchored at the northwest corner of their
bounding box.

The plane is spanned by two great-circle segments, the northern edge of the
box (x-axis) and its western edge (y-axis). A point's x coordinate is its
distance from the y-axis and its y coordinate its distance from the x-axis,
which puts y growing southward as on a screen.

The two axes are treated as orthogonal Euclidean axes. This holds for tracks
of a few hundred kilometers; larger extents are distorted and a warning is
logged once.
"""

__all__ = ['project', 'scaled_dimensions']

from typing import Optional, Sequence, Tuple

import numpy as np

from geosvg._const import LARGE_EXTENT_METERS
from geosvg.calc import bounding_box, distance, perpendicular_distance
from geosvg.coordinates import GeoPoint
from geosvg.exceptions import DegenerateExtentError, InsufficientInputError
from geosvg.structures import PlanePoint, Projection
from geosvg.utils.logging import LOGGER, warn_once


def scaled_dimensions(
    absolute_width: float,
    absolute_height: float,
    scale: Optional[float] = None
) -> Tuple[float, float]:
    """
    Fits the absolute dimensions to scale, preserving the aspect ratio. The
    longer dimension becomes scale and the shorter one follows proportionally.

    Args:
        absolute_width:
            The width in meters

        absolute_height:
            The height in meters

        scale: (Optional)
            The target size of the longer dimension. Defaults to the longer
            absolute dimension, i.e. no rescaling.

    Returns:
        (width, height)
    """
    if absolute_width <= 0 or absolute_height <= 0:
        raise DegenerateExtentError(
            f'Cannot scale a zero extent ({absolute_width} x {absolute_height} meters).'
        )

    if scale is None:
        return absolute_width, absolute_height

    if absolute_width >= absolute_height:
        return scale, absolute_height * scale / absolute_width

    return absolute_width * scale / absolute_height, scale


def project(
    points: Sequence[GeoPoint],
    accuracy: float,
    scale: Optional[float] = None
) -> Projection:
    """
    Projects each GeoPoint onto the plane spanned by the northern and western
    edges of the points' bounding box, optionally rescaling the result so
    that its longer dimension equals scale.

    Args:
        points:
            An ordered sequence of at least two GeoPoints

        accuracy:
            The rounding step applied to each distance, in meters

        scale: (Optional)
            The target size of the longer dimension

    Returns:
        Projection
    """
    if len(points) < 2:
        raise InsufficientInputError(
            f'At least two points are required to project a track, received {len(points)}.'
        )

    bounds = bounding_box(points)
    if bounds.is_degenerate:
        raise DegenerateExtentError(
            'Points must span a non-zero latitude and longitude range; '
            f'received bounds {bounds}.'
        )

    x_axis, y_axis = bounds.x_axis, bounds.y_axis
    absolute_width = distance(*x_axis, accuracy)
    absolute_height = distance(*y_axis, accuracy)
    if absolute_width == 0 or absolute_height == 0:
        # Extent smaller than the accuracy step
        raise DegenerateExtentError(
            f'Points span {absolute_width} x {absolute_height} meters at accuracy {accuracy}.'
        )

    if max(absolute_width, absolute_height) > LARGE_EXTENT_METERS:
        warn_once(
            'Track extent exceeds %d km; the planar projection will be distorted. '
            '(this warning will not repeat)' % (LARGE_EXTENT_METERS / 1000)
        )

    LOGGER.debug(
        'Projecting %d points onto a %s x %s meter plane',
        len(points), absolute_width, absolute_height
    )
    plane = np.array([
        (
            perpendicular_distance(point, *y_axis, accuracy),
            perpendicular_distance(point, *x_axis, accuracy),
        )
        for point in points
    ])

    width, height = scaled_dimensions(absolute_width, absolute_height, scale)
    if scale is not None:
        plane = plane * (width / absolute_width)

    return Projection(
        points=[PlanePoint(float(x), float(y)) for x, y in plane],
        width=width,
        height=height,
    )
