"""
Gauss-Krüger (transverse Mercator) projection between geodetic coordinates and
the Swedish grids, using Krüger's series expanded to the fourth order in the
third flattening. Accurate to the millimeter within the Swedish extent.

All functions are pure: the projection is passed explicitly on every call.
Scalars in give floats out; array-likes in give numpy arrays out.
"""

__all__ = [
    'KrugerSeries',
    'ellipsoid_series', 'forward', 'geodetic_to_grid', 'grid_to_geodetic', 'inverse',
]

from functools import lru_cache
from typing import NamedTuple, Optional, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from swegeodesy._const import DEFAULT_GRID_PRECISION, SWEDISH_EXTENT
from swegeodesy.exceptions import DomainOutOfRangeError
from swegeodesy.projections import Ellipsoid, ProjectionLike, ProjectionParameters, lookup
from swegeodesy.utils.logging import warn_once

_FloatOrArray = Union[float, np.ndarray]


class KrugerSeries(NamedTuple):
    """Series coefficients which depend only on the ellipsoid"""
    # Rectifying radius
    a_roof: float

    # Geodetic -> conformal latitude
    a: float
    b: float
    c: float
    d: float

    # Conformal -> geodetic latitude
    a_star: float
    b_star: float
    c_star: float
    d_star: float

    # Forward (beta) and inverse (delta) Krüger coefficients
    beta: Tuple[float, float, float, float]
    delta: Tuple[float, float, float, float]


@lru_cache(maxsize=None)
def ellipsoid_series(ellipsoid: Ellipsoid) -> KrugerSeries:
    """
    Computes the series coefficients for an ellipsoid. Results are cached, so
    this is evaluated once per ellipsoid per process.
    """
    e2, n = ellipsoid.e2, ellipsoid.n

    return KrugerSeries(
        a_roof=ellipsoid.a / (1. + n) * (1. + n ** 2 / 4. + n ** 4 / 64.),
        a=e2,
        b=(5. * e2 ** 2 - e2 ** 3) / 6.,
        c=(104. * e2 ** 3 - 45. * e2 ** 4) / 120.,
        d=(1237. * e2 ** 4) / 1260.,
        a_star=e2 + e2 ** 2 + e2 ** 3 + e2 ** 4,
        b_star=-(7. * e2 ** 2 + 17. * e2 ** 3 + 30. * e2 ** 4) / 6.,
        c_star=(224. * e2 ** 3 + 889. * e2 ** 4) / 120.,
        d_star=-(4279. * e2 ** 4) / 1260.,
        beta=(
            n / 2. - 2. * n ** 2 / 3. + 5. * n ** 3 / 16. + 41. * n ** 4 / 180.,
            13. * n ** 2 / 48. - 3. * n ** 3 / 5. + 557. * n ** 4 / 1440.,
            61. * n ** 3 / 240. - 103. * n ** 4 / 140.,
            49561. * n ** 4 / 161280.,
        ),
        delta=(
            n / 2. - 2. * n ** 2 / 3. + 37. * n ** 3 / 96. - n ** 4 / 360.,
            n ** 2 / 48. + n ** 3 / 15. - 437. * n ** 4 / 1440.,
            17. * n ** 3 / 480. - 37. * n ** 4 / 840.,
            4397. * n ** 4 / 161280.,
        ),
    )


def _unwrap(value: np.ndarray) -> _FloatOrArray:
    """Returns python floats for zero-dimensional results"""
    if np.ndim(value) == 0:
        return float(value)
    return value


def geodetic_to_grid(
    params: ProjectionParameters,
    latitude: ArrayLike,
    longitude: ArrayLike,
    precision: Optional[int] = DEFAULT_GRID_PRECISION,
) -> Tuple[_FloatOrArray, _FloatOrArray]:
    """
    Projects geodetic coordinates onto a grid.

    Args:
        params:
            The projection to use

        latitude:
            Latitude(s) in decimal degrees, on the projection's ellipsoid

        longitude:
            Longitude(s) in decimal degrees, on the projection's ellipsoid

        precision: (Optional[int])
            (Default 3) Number of decimals to round the result to. Rounding is
            half-to-even. Pass None to skip rounding.

    Returns:
        Tuple of (northing, easting), in meters
    """
    series = ellipsoid_series(params.ellipsoid)

    phi = np.radians(np.asarray(latitude, dtype=np.float64))
    lam = np.radians(np.asarray(longitude, dtype=np.float64))
    lam_zero = np.radians(params.central_meridian)

    sin_phi = np.sin(phi)
    phi_star = phi - sin_phi * np.cos(phi) * (
        series.a +
        series.b * sin_phi ** 2 +
        series.c * sin_phi ** 4 +
        series.d * sin_phi ** 6
    )
    delta_lam = lam - lam_zero
    xi_prim = np.arctan(np.tan(phi_star) / np.cos(delta_lam))
    eta_prim = np.arctanh(np.cos(phi_star) * np.sin(delta_lam))

    xi_sum, eta_sum = xi_prim, eta_prim
    for j, beta in enumerate(series.beta, start=1):
        xi_sum = xi_sum + beta * np.sin(2. * j * xi_prim) * np.cosh(2. * j * eta_prim)
        eta_sum = eta_sum + beta * np.cos(2. * j * xi_prim) * np.sinh(2. * j * eta_prim)

    scale = params.scale_factor * series.a_roof
    northing = scale * xi_sum + params.false_northing
    easting = scale * eta_sum + params.false_easting

    if precision is not None:
        northing = np.round(northing, precision)
        easting = np.round(easting, precision)

    return _unwrap(northing), _unwrap(easting)


def grid_to_geodetic(
    params: ProjectionParameters,
    northing: ArrayLike,
    easting: ArrayLike,
) -> Tuple[_FloatOrArray, _FloatOrArray]:
    """
    Recovers geodetic coordinates from grid coordinates.

    Args:
        params:
            The projection the grid coordinates are expressed in

        northing:
            Northing(s) in meters

        easting:
            Easting(s) in meters

    Returns:
        Tuple of (latitude, longitude), in decimal degrees on the projection's
        ellipsoid
    """
    series = ellipsoid_series(params.ellipsoid)
    scale = params.scale_factor * series.a_roof

    xi = (np.asarray(northing, dtype=np.float64) - params.false_northing) / scale
    eta = (np.asarray(easting, dtype=np.float64) - params.false_easting) / scale

    xi_prim, eta_prim = xi, eta
    for j, delta in enumerate(series.delta, start=1):
        xi_prim = xi_prim - delta * np.sin(2. * j * xi) * np.cosh(2. * j * eta)
        eta_prim = eta_prim - delta * np.cos(2. * j * xi) * np.sinh(2. * j * eta)

    phi_star = np.arcsin(np.sin(xi_prim) / np.cosh(eta_prim))
    delta_lam = np.arctan(np.sinh(eta_prim) / np.cos(xi_prim))

    sin_phi_star = np.sin(phi_star)
    phi = phi_star + sin_phi_star * np.cos(phi_star) * (
        series.a_star +
        series.b_star * sin_phi_star ** 2 +
        series.c_star * sin_phi_star ** 4 +
        series.d_star * sin_phi_star ** 6
    )
    lam = np.radians(params.central_meridian) + delta_lam

    return _unwrap(np.degrees(phi)), _unwrap(np.degrees(lam))


def _check_domain(
    params: ProjectionParameters,
    latitude: ArrayLike,
    longitude: ArrayLike,
    strict: bool,
    subject: str = 'Geodetic input',
):
    """
    Warns (or raises, if strict) when coordinates fall outside the Swedish extent.
    `subject` names what was checked: the caller's input, or the coordinates
    recovered from a grid position.
    """
    lat = np.asarray(latitude, dtype=np.float64)
    lon = np.asarray(longitude, dtype=np.float64)

    if np.any(np.abs(lat) > 90) or np.any(np.abs(lon) > 180):
        msg = (
            f'{subject} outside [-90, 90] x [-180, 180] for {params.name}; '
            'results are meaningless.'
        )
    else:
        min_lat, max_lat, min_lon, max_lon = SWEDISH_EXTENT
        if np.all((min_lat <= lat) & (lat <= max_lat) & (min_lon <= lon) & (lon <= max_lon)):
            return

        msg = (
            f'{subject} outside the Swedish extent for {params.name}; '
            'accuracy is not guaranteed.'
        )

    if strict:
        raise DomainOutOfRangeError(msg)

    warn_once(f'{msg} (this warning will not repeat)')


def forward(
    projection: ProjectionLike,
    latitude: ArrayLike,
    longitude: ArrayLike,
    precision: Optional[int] = DEFAULT_GRID_PRECISION,
    strict: bool = False,
) -> Tuple[_FloatOrArray, _FloatOrArray]:
    """
    Converts geodetic coordinates to grid coordinates in a named projection.

    Args:
        projection:
            A projection enum member or identifier, e.g. 'rt90_2.5_gon_v'

        latitude:
            Latitude(s) in decimal degrees

        longitude:
            Longitude(s) in decimal degrees

        precision: (Optional[int])
            (Default 3) Decimals to round the grid coordinates to, or None

        strict: (bool)
            (Default False) If True, raise DomainOutOfRangeError for input
            outside the Swedish extent instead of logging a warning

    Returns:
        Tuple of (northing, easting), in meters
    """
    params = lookup(projection)
    _check_domain(params, latitude, longitude, strict)
    return geodetic_to_grid(params, latitude, longitude, precision)


def inverse(
    projection: ProjectionLike,
    northing: ArrayLike,
    easting: ArrayLike,
    strict: bool = False,
) -> Tuple[_FloatOrArray, _FloatOrArray]:
    """
    Converts grid coordinates in a named projection to geodetic coordinates.

    Args:
        projection:
            A projection enum member or identifier, e.g. 'sweref_99_tm'

        northing:
            Northing(s) in meters

        easting:
            Easting(s) in meters

        strict: (bool)
            (Default False) If True, raise DomainOutOfRangeError when the
            result falls outside the Swedish extent instead of logging a warning

    Returns:
        Tuple of (latitude, longitude), in decimal degrees
    """
    params = lookup(projection)
    latitude, longitude = grid_to_geodetic(params, northing, easting)
    _check_domain(params, latitude, longitude, strict, 'Recovered geodetic coordinates')
    return latitude, longitude
