"""
Positions expressed in WGS84 and in the Swedish grids
"""

__all__ = ['GridPosition', 'RT90Position', 'SWEREF99Position', 'WGS84Format', 'WGS84Position']

from enum import Enum
import re
from typing import Optional, Tuple, Type, Union

from swegeodesy.exceptions import UnknownProjectionError
from swegeodesy.gausskruger import forward, inverse
from swegeodesy.projections import ProjectionLike, RT90Projection, SWEREF99Projection, is_projection
from swegeodesy.utils.functions import (
    decimal_to_dm, decimal_to_dms, dms_to_decimal, format_trimmed
)


class WGS84Format(Enum):
    """Textual notations for a WGS84 latitude or longitude"""
    DEGREES = 'degrees'
    DEGREES_MINUTES = 'degrees_minutes'
    DEGREES_MINUTES_SECONDS = 'degrees_minutes_seconds'


_NUM = r'\d+(?:\.\d+)?'
_DEG = r'[º°]'

_COMPONENT_PATTERNS = {
    WGS84Format.DEGREES: re.compile(
        rf'^(?P<hemi>[NSEW])?\s*(?P<deg>-?{_NUM})\s*{_DEG}?$'
    ),
    WGS84Format.DEGREES_MINUTES: re.compile(
        rf"^(?P<hemi>[NSEW])\s*(?P<deg>\d+)\s*{_DEG}\s*(?P<min>{_NUM})\s*'$"
    ),
    WGS84Format.DEGREES_MINUTES_SECONDS: re.compile(
        rf"^(?P<hemi>[NSEW])\s*(?P<deg>\d+)\s*{_DEG}\s*(?P<min>\d+)\s*'\s*(?P<sec>{_NUM})\s*\"$"
    ),
}

# A latitude component followed by a longitude component
_PAIR_PATTERN = re.compile(r'^\s*(?P<lat>[NS].*?)\s+(?P<lon>[EW].*?)\s*$')


def _parse_component(value: str, fmt: WGS84Format, hemispheres: Tuple[str, str]) -> float:
    """
    Parses a single latitude or longitude string.

    Args:
        value:
            The string, e.g. 'N 59º 58\\' 55.23"'

        fmt:
            The notation the string is written in

        hemispheres:
            The (positive, negative) hemisphere letters permitted, e.g. ('N', 'S')

    Returns:
        float, in decimal degrees
    """
    match = _COMPONENT_PATTERNS[fmt].match(value.strip())
    if not match:
        raise ValueError(f'Could not parse {value!r} as {fmt.value}')

    hemi = match.group('hemi')
    if hemi is not None and hemi not in hemispheres:
        raise ValueError(f'Unexpected hemisphere {hemi!r} in {value!r}; expected one of {hemispheres}')

    groups = match.groupdict()
    return dms_to_decimal(
        float(groups['deg']),
        float(groups.get('min') or 0.),
        float(groups.get('sec') or 0.),
        hemi or hemispheres[0],
    )


def _format_component(value: float, fmt: WGS84Format, hemispheres: Tuple[str, str]) -> str:
    hemi = hemispheres[0] if value >= 0 else hemispheres[1]

    if fmt is WGS84Format.DEGREES:
        return f'{hemi} {format_trimmed(abs(value), 10)}º'

    if fmt is WGS84Format.DEGREES_MINUTES:
        degrees, minutes = decimal_to_dm(value)
        return f"{hemi} {degrees}º {minutes:.4f}'"

    degrees, minutes, seconds = decimal_to_dms(value)
    return f"{hemi} {degrees}º {minutes}' {format_trimmed(seconds, 5)}\""


class WGS84Position:
    """A geodetic position (latitude, longitude) in decimal degrees on WGS84"""

    def __init__(self, latitude: Union[float, int, str], longitude: Union[float, int, str]):
        self._latitude = float(latitude)
        self._longitude = float(longitude)

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def __eq__(self, other):
        if not isinstance(other, WGS84Position):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<WGS84Position({self.latitude}, {self.longitude})>'

    def __str__(self):
        fmt = WGS84Format.DEGREES_MINUTES_SECONDS
        return f'{self.latitude_to_string(fmt)} {self.longitude_to_string(fmt)}'

    @classmethod
    def from_string(
        cls,
        value: str,
        fmt: WGS84Format = WGS84Format.DEGREES_MINUTES_SECONDS
    ) -> 'WGS84Position':
        """
        Creates a WGS84Position from a combined latitude/longitude string.

        Args:
            value:
                e.g. 'N 62º 10.560\\' E 015º 54.180\\'' (degrees minutes) or
                'N 62º 10\\' 33.60" E 015º 54\\' 10.80"' (degrees minutes seconds).
                In degrees notation the hemisphere letters may be omitted, e.g.
                '59.3489 18.0473'.

            fmt:
                The notation the string is written in

        Returns:
            WGS84Position
        """
        match = _PAIR_PATTERN.match(value)
        if match:
            lat_str, lon_str = match.group('lat'), match.group('lon')
        elif fmt is WGS84Format.DEGREES and len(value.split()) == 2:
            lat_str, lon_str = value.split()
        else:
            raise ValueError(f'Could not split {value!r} into latitude and longitude')

        return cls(
            _parse_component(lat_str, fmt, ('N', 'S')),
            _parse_component(lon_str, fmt, ('E', 'W')),
        )

    @classmethod
    def from_dms(
        cls,
        lat: Tuple[float, float, float, str],
        lon: Tuple[float, float, float, str]
    ) -> 'WGS84Position':
        """
        Creates a WGS84Position from a Degree Minutes Seconds (lat, lon) pair.

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees>, <minutes>, <seconds>, <quadrant> ('N'/'S') )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees>, <minutes>, <seconds>, <quadrant> ('E'/'W') )

        Returns:
            WGS84Position
        """
        return cls(dms_to_decimal(*lat), dms_to_decimal(*lon))

    def with_latitude_from_string(
        self,
        value: str,
        fmt: WGS84Format = WGS84Format.DEGREES_MINUTES_SECONDS
    ) -> 'WGS84Position':
        """Returns a copy of this position with the latitude parsed from a string"""
        return WGS84Position(_parse_component(value, fmt, ('N', 'S')), self.longitude)

    def with_longitude_from_string(
        self,
        value: str,
        fmt: WGS84Format = WGS84Format.DEGREES_MINUTES_SECONDS
    ) -> 'WGS84Position':
        """Returns a copy of this position with the longitude parsed from a string"""
        return WGS84Position(self.latitude, _parse_component(value, fmt, ('E', 'W')))

    def latitude_to_string(self, fmt: WGS84Format = WGS84Format.DEGREES_MINUTES_SECONDS) -> str:
        """Formats the latitude, e.g. 'N 59º 20\\' 56.09287"'"""
        return _format_component(self.latitude, fmt, ('N', 'S'))

    def longitude_to_string(self, fmt: WGS84Format = WGS84Format.DEGREES_MINUTES_SECONDS) -> str:
        """Formats the longitude, e.g. 'E 18º 2\\' 50.34806"'"""
        return _format_component(self.longitude, fmt, ('E', 'W'))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Converts the position to a pair of (degrees, minutes, seconds, hemisphere)
        tuples, latitude first

        Returns:
            converted value as ((d, m, s, 'N'/'S'), (d, m, s, 'E'/'W'))
        """
        return (
            (*decimal_to_dms(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*decimal_to_dms(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, float]:
        """Returns the position as a (latitude, longitude) tuple"""
        return self.latitude, self.longitude

    def to_rt90(
        self,
        projection: ProjectionLike = RT90Projection.RT90_2_5_GON_V,
        strict: bool = False,
    ) -> 'RT90Position':
        """Converts this position to an RT 90 grid position"""
        return RT90Position.from_wgs84(self, projection, strict=strict)

    def to_sweref99(
        self,
        projection: ProjectionLike = SWEREF99Projection.SWEREF_99_TM,
        strict: bool = False,
    ) -> 'SWEREF99Position':
        """Converts this position to a SWEREF 99 grid position"""
        return SWEREF99Position.from_wgs84(self, projection, strict=strict)


class GridPosition:
    """
    Base class for a (northing, easting) position in one of a family of grid
    projections. Subclasses declare which projection family they accept.
    """

    _PROJECTION_TYPE: Type[Enum]
    _DEFAULT_PROJECTION: Enum

    def __init__(
        self,
        northing: Union[float, int, str],
        easting: Union[float, int, str],
        projection: Optional[ProjectionLike] = None,
    ):
        self._northing = float(northing)
        self._easting = float(easting)
        self._projection = self._coerce_projection(projection)

    @classmethod
    def _coerce_projection(cls, projection: Optional[ProjectionLike]):
        if projection is None:
            return cls._DEFAULT_PROJECTION

        if not is_projection(projection):
            raise UnknownProjectionError(projection)

        try:
            return cls._PROJECTION_TYPE(projection)
        except ValueError as e:
            raise ValueError(
                f'{cls.__name__} does not accept projection {projection}'
            ) from e

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def projection(self):
        return self._projection

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False

        return (
            self.northing == other.northing and
            self.easting == other.easting and
            self.projection == other.projection
        )

    def __hash__(self):
        return hash((self.__class__.__name__, self.northing, self.easting, self.projection.value))

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.northing}, {self.easting}, {self.projection.value})>'

    def __str__(self):
        return f'N: {self.northing} E: {self.easting} Projection: {self.projection.value}'

    @classmethod
    def from_wgs84(
        cls,
        position: WGS84Position,
        projection: Optional[ProjectionLike] = None,
        strict: bool = False,
    ):
        """
        Creates a grid position by projecting a WGS84 position.

        Args:
            position:
                The WGS84Position to convert

            projection:
                The target projection; defaults to the family's default projection

            strict: (bool)
                (Default False) If True, raise DomainOutOfRangeError for positions
                outside the Swedish extent

        Returns:
            A position of this class
        """
        _projection = cls._coerce_projection(projection)
        northing, easting = forward(_projection, position.latitude, position.longitude, strict=strict)
        return cls(northing, easting, _projection)

    def to_float(self) -> Tuple[float, float]:
        """Returns the position as a (northing, easting) tuple"""
        return self.northing, self.easting

    def to_wgs84(self, strict: bool = False) -> WGS84Position:
        """Converts this position to WGS84"""
        latitude, longitude = inverse(self.projection, self.northing, self.easting, strict=strict)
        return WGS84Position(latitude, longitude)


class RT90Position(GridPosition):
    """A position in one of the RT 90 grids, rt90_2.5_gon_v unless stated otherwise"""
    _PROJECTION_TYPE = RT90Projection
    _DEFAULT_PROJECTION = RT90Projection.RT90_2_5_GON_V


class SWEREF99Position(GridPosition):
    """A position in SWEREF 99 TM or one of the local SWEREF 99 zones"""
    _PROJECTION_TYPE = SWEREF99Projection
    _DEFAULT_PROJECTION = SWEREF99Projection.SWEREF_99_TM
