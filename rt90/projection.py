# rt90/projection.py
"""
Gauss-Krüger (transverse mercator) projection between latitude/longitude and
grid coordinates, using the Krüger n-series expanded to the fourth order.

Grid coordinates follow the Swedish convention: x is the northing and y the
easting. All computations go through numpy ufuncs, so that singularities and
out-of-domain inputs produce NaN/Inf instead of raising.
"""

__all__ = [
    'geodetic_to_grid', 'grid_to_geodetic',
    'geodetic_to_grid_array', 'grid_to_geodetic_array',
]

from functools import lru_cache
from typing import Tuple

import numpy as np

from rt90._const import DISABLED_LATLON
from rt90.parameters import Ellipsoid, ProjectionParameters, RT90_25_GON_V
from rt90.points import GeodeticPoint, GridPoint
from rt90.utils.logging import warn_once


# -------------------------------------------------------------------------
# Series coefficients
# -------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _forward_coefficients(ellipsoid: Ellipsoid) -> Tuple[Tuple[float, ...], Tuple[float, ...]]:
    """Conformal latitude coefficients (A..D) and Krüger beta1..beta4"""
    e2, n = ellipsoid.e2, ellipsoid.n
    latitude = (
        e2,
        (5 * e2 ** 2 - e2 ** 3) / 6,
        (104 * e2 ** 3 - 45 * e2 ** 4) / 120,
        (1237 * e2 ** 4) / 1260,
    )
    beta = (
        n / 2 - 2 * n ** 2 / 3 + 5 * n ** 3 / 16 + 41 * n ** 4 / 180,
        13 * n ** 2 / 48 - 3 * n ** 3 / 5 + 557 * n ** 4 / 1440,
        61 * n ** 3 / 240 - 103 * n ** 4 / 140,
        49561 * n ** 4 / 161280,
    )
    return latitude, beta


@lru_cache(maxsize=None)
def _inverse_coefficients(ellipsoid: Ellipsoid) -> Tuple[Tuple[float, ...], Tuple[float, ...]]:
    """Geodetic latitude coefficients (A*..D*) and Krüger delta1..delta4"""
    e2, n = ellipsoid.e2, ellipsoid.n
    latitude = (
        e2 + e2 ** 2 + e2 ** 3 + e2 ** 4,
        -(7 * e2 ** 2 + 17 * e2 ** 3 + 30 * e2 ** 4) / 6,
        (224 * e2 ** 3 + 889 * e2 ** 4) / 120,
        -(4279 * e2 ** 4) / 1260,
    )
    delta = (
        n / 2 - 2 * n ** 2 / 3 + 37 * n ** 3 / 96 - n ** 4 / 360,
        n ** 2 / 48 + n ** 3 / 15 - 437 * n ** 4 / 1440,
        17 * n ** 3 / 480 - 37 * n ** 4 / 840,
        4397 * n ** 4 / 161280,
    )
    return latitude, delta


def _latitude_series(phi, coefficients):
    """sin(phi)cos(phi) * (A + B sin^2(phi) + C sin^4(phi) + D sin^6(phi))"""
    sin_phi = np.sin(phi)
    a, b, c, d = coefficients
    return sin_phi * np.cos(phi) * (
        a + b * sin_phi ** 2 + c * sin_phi ** 4 + d * sin_phi ** 6
    )


def _check_params(params: ProjectionParameters):
    if not isinstance(params, ProjectionParameters):
        raise TypeError(
            f"params must be ProjectionParameters, not {type(params).__name__}"
        )


# -------------------------------------------------------------------------
# Forward projection
# -------------------------------------------------------------------------

def _forward(lat, lon, params: ProjectionParameters):
    lat_coefs, beta = _forward_coefficients(params.ellipsoid)

    with np.errstate(all='ignore'):
        phi = np.radians(lat)
        phi_star = phi - _latitude_series(phi, lat_coefs)
        delta_lambda = np.radians(lon) - np.radians(params.central_meridian)

        xi_prim = np.arctan(np.tan(phi_star) / np.cos(delta_lambda))
        eta_prim = np.arctanh(np.cos(phi_star) * np.sin(delta_lambda))

        xi, eta = xi_prim, eta_prim
        for k, b in enumerate(beta, start=1):
            xi = xi + b * np.sin(2 * k * xi_prim) * np.cosh(2 * k * eta_prim)
            eta = eta + b * np.cos(2 * k * xi_prim) * np.sinh(2 * k * eta_prim)

        k0_a = params.scale * params.ellipsoid.a_roof
        return k0_a * xi + params.false_northing, k0_a * eta + params.false_easting


def geodetic_to_grid(
    lat: float,
    lon: float,
    params: ProjectionParameters = RT90_25_GON_V
) -> GridPoint:
    """
    Project a latitude/longitude pair onto the grid.

    Args:
        lat:
            Latitude, in decimal degrees
        lon:
            Longitude, in decimal degrees
        params:
            (Default RT90 2.5 gon V) The projection zone

    Returns:
        GridPoint(x, y), where x is the northing. Non-finite if the input
        falls on a singularity of the projection.
    """
    _check_params(params)
    if not GeodeticPoint(lat, lon).in_envelope():
        warn_once(
            'Projecting coordinates outside of the Swedish grid envelope; '
            'accuracy is not guaranteed. (this warning will not repeat)'
        )

    x, y = _forward(lat, lon, params)
    return GridPoint(float(x), float(y))


def geodetic_to_grid_array(
    lat,
    lon,
    params: ProjectionParameters = RT90_25_GON_V
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized geodetic_to_grid. Inputs are broadcast against each other.

    Returns:
        A pair of float arrays (x, y)
    """
    _check_params(params)
    return _forward(
        np.asarray(lat, dtype=float), np.asarray(lon, dtype=float), params
    )


# -------------------------------------------------------------------------
# Inverse projection
# -------------------------------------------------------------------------

def _inverse(x, y, params: ProjectionParameters):
    lat_coefs, delta = _inverse_coefficients(params.ellipsoid)
    k0_a = params.scale * params.ellipsoid.a_roof

    with np.errstate(all='ignore'):
        xi = (x - params.false_northing) / k0_a
        eta = (y - params.false_easting) / k0_a

        xi_prim, eta_prim = xi, eta
        for k, d in enumerate(delta, start=1):
            xi_prim = xi_prim - d * np.sin(2 * k * xi) * np.cosh(2 * k * eta)
            eta_prim = eta_prim - d * np.cos(2 * k * xi) * np.sinh(2 * k * eta)

        phi_star = np.arcsin(np.sin(xi_prim) / np.cosh(eta_prim))
        delta_lambda = np.arctan(np.sinh(eta_prim) / np.cos(xi_prim))

        lat = phi_star + _latitude_series(phi_star, lat_coefs)
        lon = np.radians(params.central_meridian) + delta_lambda
        return np.degrees(lat), np.degrees(lon)


def grid_to_geodetic(
    x: float,
    y: float,
    params: ProjectionParameters = RT90_25_GON_V
) -> GeodeticPoint:
    """
    Unproject a grid coordinate to latitude/longitude.

    Args:
        x:
            The northing, in meters
        y:
            The easting, in meters
        params:
            (Default RT90 2.5 gon V) The projection zone. If disabled, (0, 0)
            is returned regardless of input.

    Returns:
        GeodeticPoint(latitude, longitude), in decimal degrees
    """
    _check_params(params)
    if not params.enabled:
        warn_once(
            'Projection %s is disabled; returning (0, 0). (this warning will not repeat)',
            params.name
        )
        return GeodeticPoint(*DISABLED_LATLON)

    lat, lon = _inverse(x, y, params)
    return GeodeticPoint(float(lat), float(lon))


def grid_to_geodetic_array(
    x,
    y,
    params: ProjectionParameters = RT90_25_GON_V
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized grid_to_geodetic. Inputs are broadcast against each other.

    Returns:
        A pair of float arrays (latitude, longitude)
    """
    _check_params(params)
    x, y = np.asarray(x, dtype=float), np.asarray(y, dtype=float)
    if not params.enabled:
        shape = np.broadcast(x, y).shape
        return np.full(shape, DISABLED_LATLON[0]), np.full(shape, DISABLED_LATLON[1])

    return _inverse(x, y, params)
