
import sys

from geosvg._version import __version__  # noqa: F401
from geosvg.utils.logging import LOGGER
from geosvg.coordinates import GeoPoint
from geosvg.exceptions import (
    DegenerateExtentError, GeoSvgError, InsufficientInputError, MalformedInputError
)
from geosvg.options import PathOptions, SvgOptions, SvgStyle
from geosvg.structures import BoundingBox, PlanePoint, Projection, TrackPath
from geosvg.track import (
    GeoTrack, document_from_coordinates, path_from_coordinates, project_coordinates
)
from geosvg.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'gpxpy': 'geosvg[gpx]',
    }
)
sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'BoundingBox',
    'DegenerateExtentError',
    'GeoPoint',
    'GeoSvgError',
    'GeoTrack',
    'InsufficientInputError',
    'MalformedInputError',
    'PathOptions',
    'PlanePoint',
    'Projection',
    'SvgOptions',
    'SvgStyle',
    'TrackPath',
    'document_from_coordinates',
    'path_from_coordinates',
    'project_coordinates',
    'LOGGER',
]
