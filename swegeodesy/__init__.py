from swegeodesy._version import __version__  # noqa: F401
from swegeodesy.utils.logging import LOGGER
from swegeodesy.exceptions import DomainOutOfRangeError, UnknownProjectionError
from swegeodesy.projections import (
    BESSEL_1841, GRS80, PROJECTIONS,
    BesselRT90Projection, Ellipsoid, ProjectionParameters, RT90Projection, SWEREF99Projection,
    lookup
)
from swegeodesy.gausskruger import forward, inverse
from swegeodesy.positions import RT90Position, SWEREF99Position, WGS84Format, WGS84Position


__all__ = [
    'BESSEL_1841',
    'BesselRT90Projection',
    'DomainOutOfRangeError',
    'Ellipsoid',
    'GRS80',
    'PROJECTIONS',
    'ProjectionParameters',
    'RT90Position',
    'RT90Projection',
    'SWEREF99Position',
    'SWEREF99Projection',
    'UnknownProjectionError',
    'WGS84Format',
    'WGS84Position',
    'LOGGER',
    'forward',
    'inverse',
    'lookup',
]
