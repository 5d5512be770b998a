"""
The GeoTrack value type and the public pipeline entrypoints:

    GeoPoints -> bounding box -> axes -> plane points -> (scale) -> path -> SVG
"""

__all__ = [
    'GeoTrack', 'document_from_coordinates', 'path_from_coordinates',
    'project_coordinates',
]

from typing import IO, Iterable, List, Mapping, Optional, Sequence, Union

from pydantic import validate_call

from geosvg.calc import bounding_box
from geosvg.coordinates import GeoPoint
from geosvg.options import PathOptions, SvgOptions
from geosvg.parsers import parse_gpx
from geosvg.path import synthesize
from geosvg.projection import project
from geosvg.structures import BoundingBox, Projection, TrackPath
from geosvg.svg import render_svg
from geosvg.utils.logging import LOGGER

PointLike = Union[
    GeoPoint,
    Sequence[Union[float, int, str]],
    Mapping[str, Union[float, int, str]],
]


class GeoTrack:

    """
    An ordered sequence of GeoPoints, e.g. a recorded GPS track.

    The track only holds its points; every conversion is computed fresh from
    the points and the options passed in.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, points: List[GeoPoint]):
        self.points = tuple(points)

    def __eq__(self, other):
        if not isinstance(other, GeoTrack):
            return False

        return self.points == other.points

    def __hash__(self):
        return hash(self.points)

    def __iter__(self):
        return iter(self.points)

    def __len__(self):
        return len(self.points)

    def __repr__(self):
        if not self.points:
            return '<Empty GeoTrack>'

        return f'<GeoTrack with {len(self.points)} points>'

    @property
    def bounding_box(self) -> BoundingBox:
        """The latitude/longitude bounds of the track"""
        return bounding_box(self.points)

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[PointLike]) -> 'GeoTrack':
        """
        Creates a GeoTrack from (latitude, longitude) pairs and/or GeoPoints.

        Args:
            coordinates:
                An iterable of GeoPoints, (latitude, longitude) pairs or
                mappings with latitude and longitude keys

        Returns:
            GeoTrack
        """
        return cls([GeoPoint.from_pair(x) for x in coordinates])

    @classmethod
    def from_gpx(cls, gpx: Union[str, IO], sample_every: int = 3) -> 'GeoTrack':
        """
        Creates a GeoTrack from the track points of a GPX document.

        GPS loggers record far more points than a drawing needs, so only every
        sample_every-th point (starting with the first) is kept.

        Args:
            gpx:
                A GPX document, as a string or file-like object

            sample_every: (int)
                (Default 3) Keep one point out of this many. 1 keeps them all.

        Returns:
            GeoTrack
        """
        if sample_every < 1:
            raise ValueError(f'sample_every must be a positive integer, not {sample_every}')

        points = parse_gpx(gpx)
        LOGGER.debug('Keeping every %d of %d GPX track points', sample_every, len(points))
        return cls(points[::sample_every])

    def project(self, options: Optional[PathOptions] = None) -> Projection:
        """
        Projects the track onto a plane anchored at the northwest corner of
        its bounding box.

        Args:
            options: (Optional)
                Only accuracy and scale are used

        Returns:
            Projection
        """
        options = options or PathOptions()
        return project(self.points, options.accuracy, options.scale)

    def to_path(self, options: Optional[PathOptions] = None) -> TrackPath:
        """
        Converts the track into SVG path geometry.

        Args:
            options: (Optional)
                The projection and path options

        Returns:
            TrackPath
        """
        options = options or PathOptions()
        projection = self.project(options)
        return TrackPath(
            path=synthesize(projection.points, options.smooth, options.smoothing),
            width=projection.width,
            height=projection.height,
        )

    def to_svg(self, options: Optional[SvgOptions] = None) -> str:
        """
        Converts the track into a standalone SVG document.

        Args:
            options: (Optional)
                The projection, path and styling options

        Returns:
            str
        """
        options = options or SvgOptions()
        track_path = self.to_path(options)
        return render_svg(
            track_path.width,
            track_path.height,
            track_path.path,
            options.style,
        )


def project_coordinates(
    points: Iterable[PointLike],
    options: Optional[PathOptions] = None
) -> Projection:
    """
    Projects GeoPoints (or (latitude, longitude) pairs) onto the plane.

    Args:
        points:
            The points, in track order

        options: (Optional)
            Only accuracy and scale are used

    Returns:
        Projection
    """
    return GeoTrack.from_coordinates(points).project(options)


def path_from_coordinates(
    points: Iterable[PointLike],
    options: Optional[PathOptions] = None
) -> TrackPath:
    """
    Converts GeoPoints (or (latitude, longitude) pairs) into SVG path geometry.

    Args:
        points:
            The points, in track order

        options: (Optional)
            The projection and path options

    Returns:
        TrackPath
    """
    return GeoTrack.from_coordinates(points).to_path(options)


def document_from_coordinates(
    points: Iterable[PointLike],
    options: Optional[SvgOptions] = None
) -> str:
    """
    Converts GeoPoints (or (latitude, longitude) pairs) into an SVG document.

    Args:
        points:
            The points, in track order

        options: (Optional)
            The projection, path and styling options

    Returns:
        str
    """
    return GeoTrack.from_coordinates(points).to_svg(options)
