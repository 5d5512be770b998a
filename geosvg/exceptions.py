"""
Typed failures raised by the geosvg pipeline.

All of them are ValueErrors, so callers that already guard against bad
arguments keep working.
"""

__all__ = [
    'DegenerateExtentError', 'GeoSvgError', 'InsufficientInputError',
    'MalformedInputError',
]


class GeoSvgError(ValueError):
    """Base class for all geosvg errors"""


class InsufficientInputError(GeoSvgError):
    """Too few points were supplied to establish the projection axes"""


class DegenerateExtentError(GeoSvgError):
    """The points span zero width or zero height, so no scale factor exists"""


class MalformedInputError(GeoSvgError):
    """A coordinate is not a finite number"""
