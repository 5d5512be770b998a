"""
Derived geometric structures used by the projection pipeline
"""

__all__ = ['Axis', 'BoundingBox', 'PlanePoint', 'Projection', 'TrackPath']

from typing import List, NamedTuple, Tuple

from geosvg.coordinates import GeoPoint

# A reference great-circle segment, origin first
Axis = Tuple[GeoPoint, GeoPoint]


class PlanePoint(NamedTuple):
    """A point in the output plane; x grows east and y grows south"""
    x: float
    y: float


class BoundingBox(NamedTuple):
    """
    The smallest latitude/longitude aligned rectangle that contains a set of
    GeoPoints.
    """
    max_lat: float
    min_lat: float
    max_lng: float
    min_lng: float

    @property
    def northwest(self) -> GeoPoint:
        return GeoPoint(self.max_lat, self.min_lng)

    @property
    def northeast(self) -> GeoPoint:
        return GeoPoint(self.max_lat, self.max_lng)

    @property
    def southeast(self) -> GeoPoint:
        return GeoPoint(self.min_lat, self.max_lng)

    @property
    def southwest(self) -> GeoPoint:
        return GeoPoint(self.min_lat, self.min_lng)

    @property
    def is_degenerate(self) -> bool:
        """True if the box has no extent in either direction"""
        return self.max_lat == self.min_lat or self.max_lng == self.min_lng

    def corners(self) -> Tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint]:
        """The four corners, clockwise from the northwest"""
        return self.northwest, self.northeast, self.southeast, self.southwest

    @property
    def x_axis(self) -> Axis:
        """The northern edge, running west to east"""
        return self.northwest, self.northeast

    @property
    def y_axis(self) -> Axis:
        """The western edge, running north to south"""
        return self.northwest, self.southwest


class Projection(NamedTuple):
    """Plane points along with the dimensions of the plane they occupy"""
    points: List[PlanePoint]
    width: float
    height: float


class TrackPath(NamedTuple):
    """An SVG path-geometry string along with the dimensions it occupies"""
    path: str
    width: float
    height: float
