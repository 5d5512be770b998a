"""
Builds SVG path geometry through an ordered sequence of plane points, either
as a polyline or as a smooth curve.

The smooth curve is a cubic Bezier approximation of a Catmull-Rom spline: at
each point the tangent follows the chord between its two neighbours, and the
control points sit a fraction (smoothing) of that chord away from the point.
"""

__all__ = ['bezier', 'control_point', 'line', 'synthesize']

import math
from typing import Optional, Sequence, Tuple

from geosvg._const import DEFAULT_SMOOTHING
from geosvg.structures import PlanePoint
from geosvg.utils.functions import format_number


def _pair(point: PlanePoint) -> str:
    return f'{format_number(point.x)},{format_number(point.y)}'


def line(point_a: PlanePoint, point_b: PlanePoint) -> Tuple[float, float]:
    """
    The length and angle (radians) of the vector from point_a to point_b.

    Returns:
        (length, angle)
    """
    length_x = point_b.x - point_a.x
    length_y = point_b.y - point_a.y
    return math.hypot(length_x, length_y), math.atan2(length_y, length_x)


def control_point(
    current: PlanePoint,
    previous: Optional[PlanePoint],
    next_point: Optional[PlanePoint],
    smoothing: float = DEFAULT_SMOOTHING,
    reverse: bool = False,
) -> PlanePoint:
    """
    Computes a Bezier control point for current, offset along the tangent
    given by the chord from previous to next_point.

    Args:
        current:
            The point the control point belongs to

        previous:
            The preceding point, or None at the start of a path

        next_point:
            The following point, or None at the end of a path

        smoothing:
            The fraction of the chord length used as the offset

        reverse:
            If True, the control point is placed behind current (used for
            the control point ending a segment)

    Returns:
        PlanePoint
    """
    length, angle = line(
        current if previous is None else previous,
        current if next_point is None else next_point,
    )
    if reverse:
        angle += math.pi

    length *= smoothing
    return PlanePoint(
        current.x + math.cos(angle) * length,
        current.y + math.sin(angle) * length,
    )


def bezier(
    points: Sequence[PlanePoint],
    index: int,
    smoothing: float = DEFAULT_SMOOTHING
) -> str:
    """
    The cubic curve command ending at points[index].

    Args:
        points:
            The full sequence of plane points

        index:
            The index of the point the curve ends at; must be at least 1

        smoothing:
            The fraction of each chord used to offset the control points

    Returns:
        str, e.g. 'C 1,2 3,4 5,6'
    """
    def get(i: int) -> Optional[PlanePoint]:
        return points[i] if 0 <= i < len(points) else None

    start = control_point(points[index - 1], get(index - 2), points[index], smoothing)
    end = control_point(points[index], points[index - 1], get(index + 1), smoothing, reverse=True)
    return f'C {_pair(start)} {_pair(end)} {_pair(points[index])}'


def synthesize(
    points: Sequence[PlanePoint],
    smooth: bool = True,
    smoothing: float = DEFAULT_SMOOTHING
) -> str:
    """
    Builds the path geometry (the 'd' attribute of an SVG path) through the
    points, in order.

    Args:
        points:
            The plane points, in path order

        smooth:
            If True, draws a curve; otherwise straight lines

        smoothing:
            The curve tension, as a fraction of each neighbour chord

    Returns:
        str, empty if no points are given
    """
    if not points:
        return ''

    commands = [f'M {_pair(points[0])}']
    for index in range(1, len(points)):
        if smooth:
            commands.append(bezier(points, index, smoothing))
        else:
            commands.append(f'L {_pair(points[index])}')

    return ' '.join(commands)
