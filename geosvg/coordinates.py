"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

import math
from typing import Mapping, Sequence, Tuple, Union

from geosvg.exceptions import MalformedInputError


def _parse_degrees(value: Union[float, int, str], name: str) -> float:
    """Parses a base-10 degree value, rejecting anything that is not finite"""
    try:
        parsed = float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedInputError(f'{name} must be a number, not {value!r}') from exc

    if not math.isfinite(parsed):
        raise MalformedInputError(f'{name} must be a finite number, not {value!r}')

    return parsed


class GeoPoint:
    """
    Representation of a coordinate on the globe (i.e. a lat/lon pair), in
    decimal degrees.

    GeoPoints are immutable. Values are parsed as base-10 floats so that the
    textual attributes of a GPX document can be passed straight through.
    """

    __slots__ = ('_latitude', '_longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        object.__setattr__(self, '_latitude', _parse_degrees(latitude, 'latitude'))
        object.__setattr__(self, '_longitude', _parse_degrees(longitude, 'longitude'))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @classmethod
    def from_pair(
        cls,
        pair: Union[Sequence[Union[float, int, str]], Mapping[str, Union[float, int, str]]]
    ) -> 'GeoPoint':
        """
        Creates a GeoPoint from a (latitude, longitude) pair or a mapping
        with latitude and longitude keys.

        Args:
            pair:
                A two-item sequence of (latitude, longitude), or a mapping
                such as {'latitude': 1.0, 'longitude': 2.0}

        Returns:
            GeoPoint
        """
        if isinstance(pair, GeoPoint):
            return pair

        if isinstance(pair, Mapping):
            try:
                return cls(pair['latitude'], pair['longitude'])
            except KeyError as exc:
                raise MalformedInputError(
                    f'Expected latitude and longitude keys, received {pair!r}'
                ) from exc

        try:
            is_pair = not isinstance(pair, (str, bytes)) and len(pair) == 2
            if is_pair:
                latitude, longitude = pair[0], pair[1]
        except (TypeError, KeyError, IndexError):
            is_pair = False

        if not is_pair:
            raise MalformedInputError(f'Expected a (latitude, longitude) pair, received {pair!r}')

        return cls(latitude, longitude)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        out = (self.latitude, self.longitude)
        if reverse:
            return out[::-1]

        return out
