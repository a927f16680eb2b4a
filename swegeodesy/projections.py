"""
Ellipsoids and the parameter table for the Swedish RT 90 and SWEREF 99 grids
"""

__all__ = [
    'BESSEL_1841', 'GRS80', 'PROJECTIONS',
    'BesselRT90Projection', 'Ellipsoid', 'ProjectionParameters',
    'RT90Projection', 'SWEREF99Projection',
    'is_projection', 'lookup',
]

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple, Optional, Union

from swegeodesy._const import BESSEL_A, BESSEL_F, GRS80_A, GRS80_F
from swegeodesy.exceptions import UnknownProjectionError


class Ellipsoid(NamedTuple):
    """A reference ellipsoid, defined by its semi-major axis and flattening"""
    name: str
    a: float
    f: float

    @property
    def e2(self) -> float:
        """Eccentricity squared"""
        return self.f * (2. - self.f)

    @property
    def n(self) -> float:
        """Third flattening"""
        return self.f / (2. - self.f)


BESSEL_1841 = Ellipsoid('Bessel 1841', BESSEL_A, BESSEL_F)
GRS80 = Ellipsoid('GRS 80', GRS80_A, GRS80_F)


class ProjectionParameters(NamedTuple):
    """
    The constants of one named Gauss-Krüger projection.

    Attributes:
        name:
            The projection identifier, e.g. 'rt90_2.5_gon_v'

        ellipsoid:
            The reference ellipsoid geodetic input is expressed on

        central_meridian:
            Longitude of the central meridian, in decimal degrees

        scale_factor:
            Scale along the central meridian

        false_northing:
            Offset added to projected northings, in meters

        false_easting:
            Offset added to projected eastings, in meters

        epsg:
            EPSG code of the grid, if one exists
    """
    name: str
    ellipsoid: Ellipsoid
    central_meridian: float
    scale_factor: float
    false_northing: float
    false_easting: float
    epsg: Optional[int] = None


class RT90Projection(str, Enum):
    """RT 90 grids, parameterized for WGS84 (GRS 80) geodetic input"""
    RT90_7_5_GON_V = 'rt90_7.5_gon_v'
    RT90_5_0_GON_V = 'rt90_5.0_gon_v'
    RT90_2_5_GON_V = 'rt90_2.5_gon_v'
    RT90_0_0_GON_V = 'rt90_0.0_gon_v'
    RT90_2_5_GON_O = 'rt90_2.5_gon_o'
    RT90_5_0_GON_O = 'rt90_5.0_gon_o'

    def __str__(self):
        return self.value


class BesselRT90Projection(str, Enum):
    """RT 90 grids on their native Bessel 1841 datum"""
    BESSEL_RT90_7_5_GON_V = 'bessel_rt90_7.5_gon_v'
    BESSEL_RT90_5_0_GON_V = 'bessel_rt90_5.0_gon_v'
    BESSEL_RT90_2_5_GON_V = 'bessel_rt90_2.5_gon_v'
    BESSEL_RT90_0_0_GON_V = 'bessel_rt90_0.0_gon_v'
    BESSEL_RT90_2_5_GON_O = 'bessel_rt90_2.5_gon_o'
    BESSEL_RT90_5_0_GON_O = 'bessel_rt90_5.0_gon_o'

    def __str__(self):
        return self.value


class SWEREF99Projection(str, Enum):
    """SWEREF 99 TM and the twelve local SWEREF 99 zones"""
    SWEREF_99_TM = 'sweref_99_tm'
    SWEREF_99_1200 = 'sweref_99_1200'
    SWEREF_99_1330 = 'sweref_99_1330'
    SWEREF_99_1500 = 'sweref_99_1500'
    SWEREF_99_1630 = 'sweref_99_1630'
    SWEREF_99_1800 = 'sweref_99_1800'
    SWEREF_99_1415 = 'sweref_99_1415'
    SWEREF_99_1545 = 'sweref_99_1545'
    SWEREF_99_1715 = 'sweref_99_1715'
    SWEREF_99_1845 = 'sweref_99_1845'
    SWEREF_99_2015 = 'sweref_99_2015'
    SWEREF_99_2145 = 'sweref_99_2145'
    SWEREF_99_2315 = 'sweref_99_2315'

    def __str__(self):
        return self.value


ProjectionLike = Union[str, RT90Projection, BesselRT90Projection, SWEREF99Projection]


def _rt90(projection, central_meridian, scale_factor, false_northing, false_easting, epsg):
    return ProjectionParameters(
        projection.value, GRS80, central_meridian, scale_factor,
        false_northing, false_easting, epsg
    )


def _bessel_rt90(projection, central_meridian, epsg):
    return ProjectionParameters(
        projection.value, BESSEL_1841, central_meridian, 1., 0., 1_500_000., epsg
    )


def _sweref99(projection, central_meridian, epsg):
    return ProjectionParameters(
        projection.value, GRS80, central_meridian, 1., 0., 150_000., epsg
    )


_PARAMETERS = (
    # RT 90 via GRS 80, with the datum shift folded into the projection constants
    _rt90(RT90Projection.RT90_7_5_GON_V, 11. + 18.375 / 60, 1.000006, -667.282, 1_500_025.141, 3019),
    _rt90(RT90Projection.RT90_5_0_GON_V, 13. + 33.376 / 60, 1.0000058, -667.130, 1_500_044.695, 3020),
    _rt90(
        RT90Projection.RT90_2_5_GON_V, 15. + 48. / 60 + 22.624306 / 3600, 1.00000561024,
        -667.711, 1_500_064.274, 3021
    ),
    _rt90(RT90Projection.RT90_0_0_GON_V, 18. + 3.378 / 60, 1.0000054, -668.844, 1_500_083.521, 3022),
    _rt90(RT90Projection.RT90_2_5_GON_O, 20. + 18.379 / 60, 1.0000052, -670.706, 1_500_102.765, 3023),
    _rt90(RT90Projection.RT90_5_0_GON_O, 22. + 33.380 / 60, 1.0000049, -672.557, 1_500_121.846, 3024),

    # RT 90 on Bessel 1841
    _bessel_rt90(BesselRT90Projection.BESSEL_RT90_7_5_GON_V, 11. + 18. / 60 + 29.8 / 3600, 3019),
    _bessel_rt90(BesselRT90Projection.BESSEL_RT90_5_0_GON_V, 13. + 33. / 60 + 29.8 / 3600, 3020),
    _bessel_rt90(BesselRT90Projection.BESSEL_RT90_2_5_GON_V, 15. + 48. / 60 + 29.8 / 3600, 3021),
    _bessel_rt90(BesselRT90Projection.BESSEL_RT90_0_0_GON_V, 18. + 3. / 60 + 29.8 / 3600, 3022),
    _bessel_rt90(BesselRT90Projection.BESSEL_RT90_2_5_GON_O, 20. + 18. / 60 + 29.8 / 3600, 3023),
    _bessel_rt90(BesselRT90Projection.BESSEL_RT90_5_0_GON_O, 22. + 33. / 60 + 29.8 / 3600, 3024),

    # SWEREF 99
    ProjectionParameters(SWEREF99Projection.SWEREF_99_TM.value, GRS80, 15., 0.9996, 0., 500_000., 3006),
    _sweref99(SWEREF99Projection.SWEREF_99_1200, 12., 3007),
    _sweref99(SWEREF99Projection.SWEREF_99_1330, 13.5, 3008),
    _sweref99(SWEREF99Projection.SWEREF_99_1500, 15., 3009),
    _sweref99(SWEREF99Projection.SWEREF_99_1630, 16.5, 3010),
    _sweref99(SWEREF99Projection.SWEREF_99_1800, 18., 3011),
    _sweref99(SWEREF99Projection.SWEREF_99_1415, 14.25, 3012),
    _sweref99(SWEREF99Projection.SWEREF_99_1545, 15.75, 3013),
    _sweref99(SWEREF99Projection.SWEREF_99_1715, 17.25, 3014),
    _sweref99(SWEREF99Projection.SWEREF_99_1845, 18.75, 3015),
    _sweref99(SWEREF99Projection.SWEREF_99_2015, 20.25, 3016),
    _sweref99(SWEREF99Projection.SWEREF_99_2145, 21.75, 3017),
    _sweref99(SWEREF99Projection.SWEREF_99_2315, 23.25, 3018),
)

PROJECTIONS: Mapping[str, ProjectionParameters] = MappingProxyType(
    {params.name: params for params in _PARAMETERS}
)


def _key(projection: ProjectionLike) -> Optional[str]:
    if isinstance(projection, Enum):
        return projection.value
    if isinstance(projection, str):
        return projection
    return None


def is_projection(projection: ProjectionLike) -> bool:
    """Whether a projection identifier (or enum member) is present in the table"""
    return _key(projection) in PROJECTIONS


def lookup(projection: ProjectionLike) -> ProjectionParameters:
    """
    Look up the parameters of a named projection.

    Args:
        projection:
            A RT90Projection, BesselRT90Projection or SWEREF99Projection member,
            or the identifier string itself (e.g. 'sweref_99_tm'). Strings must
            match exactly.

    Returns:
        ProjectionParameters

    Raises:
        UnknownProjectionError if the identifier is not in the table
    """
    key = _key(projection)
    if key not in PROJECTIONS:
        raise UnknownProjectionError(projection)

    return PROJECTIONS[key]  # type: ignore


def _check_table(table: Dict[str, ProjectionParameters]):
    for name, params in table.items():
        if not params.scale_factor > 0:
            raise ValueError(f'Projection {name} has a non-positive scale factor')
        if not -180 <= params.central_meridian <= 180:
            raise ValueError(f'Projection {name} has an invalid central meridian')


_check_table(dict(PROJECTIONS))
